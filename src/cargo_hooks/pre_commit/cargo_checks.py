"""Run cargo fmt --check and cargo clippy for every Cargo.toml in the repository.

Stops at the first failing check. Each command runs with the manifest's
directory as cwd; the process working directory is never changed.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from cargo_hooks.config import default_hook_config
from cargo_hooks.git import RepositoryRootError, resolve_repo_root
from cargo_hooks.helpers import find_cargo_tomls

log = logging.getLogger(__name__)


def _run(
    cmd: Sequence[str],
    cwd: Path | None = None,
) -> subprocess.CompletedProcess[bytes]:
    # Output is inherited so the commit tool shows it to the user.
    return subprocess.run(list(cmd), cwd=cwd)


def _check(label: str, cmd: Sequence[str], crate_dir: Path, rel: Path) -> bool:
    log.debug("Running %s in %s", " ".join(cmd), crate_dir)
    try:
        r = _run(cmd, cwd=crate_dir)
    except OSError as e:
        print(f"❌ {label} could not run for {rel}: {e}", file=sys.stderr)
        return False
    if r.returncode != 0:
        print(
            f"❌ {label} failed for {rel} (exit {r.returncode}): {' '.join(cmd)}",
            file=sys.stderr,
        )
        return False
    return True


def run_cargo_checks(
    project_root: Path | None = None,
    config: dict[str, Any] | None = None,
) -> int:
    """Run the formatting check then the lint for each crate; 0 if all pass, 1 on first failure.

    project_root defaults to `git rev-parse --show-toplevel`; if that query
    fails nothing else runs. No manifests means nothing to check and returns 0.
    """
    if config is None:
        config = default_hook_config()
    if project_root is None:
        try:
            project_root = resolve_repo_root()
        except RepositoryRootError as e:
            print(f"❌ Not inside a git repository: {e}", file=sys.stderr)
            return 1

    manifests = find_cargo_tomls(project_root, exclude=config.get("exclude"))
    log.debug("Found %d Cargo.toml under %s", len(manifests), project_root)

    # TODO: restrict to crates with staged changes (git diff --cached --name-only)
    for manifest in manifests:
        crate_dir = manifest.parent
        rel = manifest.relative_to(project_root)
        if not _check("Formatting check", config["fmt_command"], crate_dir, rel):
            return 1
        if not _check("Lint", config["lint_command"], crate_dir, rel):
            return 1
    return 0
