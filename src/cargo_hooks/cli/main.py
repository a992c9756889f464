"""Main CLI entry point for cargo-hooks."""

import logging
import sys

from cargo_hooks.cli import pre_commit_cmd
from cargo_hooks.cli.parse_common import pop_leading_switch


def _usage() -> None:
    print("Usage: cargo-hooks [-v] <command> [args...]", file=sys.stderr)
    print("Commands:", file=sys.stderr)
    print(
        "  pre-commit  - Run cargo fmt --check and cargo clippy for every Cargo.toml",
        file=sys.stderr,
    )
    print(
        "  install     - Install the pre-commit hook into the repository hooks dir",
        file=sys.stderr,
    )


def main() -> None:
    """Main CLI entry point."""
    verbose, argv = pop_leading_switch(sys.argv[1:], "-v", "--verbose")
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not argv:
        _usage()
        sys.exit(1)

    command = argv[0]
    if command == "pre-commit":
        pre_commit_cmd.run_pre_commit_argv(argv[1:])
    elif command == "install":
        pre_commit_cmd.run_install_argv(argv[1:])
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        _usage()
        sys.exit(1)


if __name__ == "__main__":
    main()
