"""Git queries: repository top-level and hooks directory."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

log = logging.getLogger(__name__)


class RepositoryRootError(RuntimeError):
    """Raised when git cannot report the repository layout (e.g. not inside a repository)."""


def _rev_parse(args: list[str], cwd: Path | None) -> str:
    cmd = ["git", "rev-parse", *args]
    log.debug("Running %s in %s", " ".join(cmd), cwd or Path.cwd())
    try:
        r = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True)
    except OSError as e:
        msg = f"could not run git: {e}"
        raise RepositoryRootError(msg) from e
    out = r.stdout.strip()
    if r.returncode != 0 or not out:
        err = (r.stderr or "").strip() or f"git rev-parse {' '.join(args)} failed"
        raise RepositoryRootError(err)
    return out


def resolve_repo_root(cwd: Path | None = None) -> Path:
    """Absolute path of the repository's top-level working directory. Raises RepositoryRootError."""
    return Path(_rev_parse(["--show-toplevel"], cwd)).resolve()


def resolve_hooks_dir(cwd: Path | None = None) -> Path:
    """Absolute path of the directory git runs hooks from. Raises RepositoryRootError.

    Uses `git rev-parse --git-path hooks`, so linked worktrees resolve to the
    common git dir and core.hooksPath is honoured. A relative answer is
    relative to cwd.
    """
    hooks_dir = Path(_rev_parse(["--git-path", "hooks"], cwd))
    if not hooks_dir.is_absolute():
        hooks_dir = (cwd or Path.cwd()) / hooks_dir
    return hooks_dir.resolve()
