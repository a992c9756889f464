"""Install the pre-commit shim into the repository's hooks directory."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from cargo_hooks.git import RepositoryRootError, resolve_hooks_dir

log = logging.getLogger(__name__)

HOOK_SHIM = """#!/usr/bin/env sh
# Installed by cargo-hooks: cargo fmt --check and cargo clippy for every crate.
exec cargo-hooks pre-commit "$@"
"""


def install_hook(project_root: Path | None = None, force: bool = False) -> int:
    """Write the shim to <hooks dir>/pre-commit (mode 0755). Returns 0/1.

    An existing hook is left alone unless force is set.
    """
    try:
        hooks_dir = resolve_hooks_dir(project_root)
    except RepositoryRootError as e:
        print(f"❌ Not inside a git repository: {e}", file=sys.stderr)
        return 1

    hooks_dir.mkdir(parents=True, exist_ok=True)
    hook = hooks_dir / "pre-commit"
    if hook.exists() and not force:
        print(f"❌ {hook} already exists (use --force to overwrite)", file=sys.stderr)
        return 1

    hook.write_text(HOOK_SHIM, encoding="utf-8")
    hook.chmod(0o755)
    log.debug("Wrote %s", hook)
    print(f"✅ Installed pre-commit hook: {hook}")
    return 0
