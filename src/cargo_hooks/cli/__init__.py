"""Command-line entry points for cargo-hooks."""
