"""cargo-hooks: git pre-commit hook running cargo fmt --check and cargo clippy per crate."""

__version__ = "0.1.0"
