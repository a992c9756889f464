"""Shared helpers for cargo_hooks (manifest discovery).

Used by pre_commit and cli.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

log = logging.getLogger(__name__)

MANIFEST_NAME = "Cargo.toml"


def find_cargo_tomls(
    root: Path,
    *,
    exclude: Iterable[str] | None = None,
) -> list[Path]:
    """All regular Cargo.toml files under root, skipping paths with a segment in exclude (default: none)."""
    excluded = set(exclude or ())
    out: list[Path] = []
    for p in root.rglob(MANIFEST_NAME):
        if not p.is_file():
            continue
        try:
            rel = p.relative_to(root)
        except ValueError:
            continue
        if any(part in excluded for part in rel.parts[:-1]):
            log.debug("Skipping excluded manifest %s", rel)
            continue
        out.append(p)
    return sorted(out)
