"""CLI for the hook: cargo-hooks pre-commit | cargo-hooks install."""

from __future__ import annotations

import sys

from cargo_hooks.cli.parse_common import parse_flags, path_resolver, pop_switch
from cargo_hooks.config import load_hook_config
from cargo_hooks.git import RepositoryRootError, resolve_repo_root
from cargo_hooks.pre_commit import install_hook, run_cargo_checks


def _reject_unknown(rest: list[str], usage: str) -> None:
    if rest:
        print(f"Error: Unexpected arguments: {' '.join(rest)}", file=sys.stderr)
        print(usage, file=sys.stderr)
        sys.exit(1)


def run_pre_commit_argv(args: list[str]) -> None:
    """Dispatch cargo-hooks pre-commit [--project-root PATH] [--config PATH]."""
    parsed, rest = parse_flags(
        args,
        ("project_root", "--project-root", None, path_resolver),
        ("config", "--config", None, path_resolver),
    )
    _reject_unknown(rest, "Usage: cargo-hooks pre-commit [--project-root PATH] [--config PATH]")

    project_root = parsed["project_root"]
    if project_root is None:
        try:
            project_root = resolve_repo_root()
        except RepositoryRootError as e:
            print(f"❌ Not inside a git repository: {e}", file=sys.stderr)
            sys.exit(1)

    try:
        config = load_hook_config(project_root, parsed["config"])
    except (OSError, ValueError) as e:
        print(f"❌ Invalid hook config: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(run_cargo_checks(project_root=project_root, config=config))


def run_install_argv(args: list[str]) -> None:
    """Dispatch cargo-hooks install [--project-root PATH] [--force]."""
    parsed, rest = parse_flags(
        args,
        ("project_root", "--project-root", None, path_resolver),
    )
    force, rest = pop_switch(rest, "--force")
    _reject_unknown(rest, "Usage: cargo-hooks install [--project-root PATH] [--force]")
    sys.exit(install_hook(project_root=parsed["project_root"], force=force))
