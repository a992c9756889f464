"""Pytest fixtures for cargo-hooks tests."""

from pathlib import Path

import pytest


def make_crate(root: Path, rel: str) -> Path:
    """Create root/rel/Cargo.toml and return the crate directory."""
    crate = root / rel if rel else root
    crate.mkdir(parents=True, exist_ok=True)
    (crate / "Cargo.toml").write_text(f'[package]\nname = "{crate.name}"\n')
    return crate


@pytest.fixture
def two_crate_repo(tmp_path: Path) -> tuple[Path, Path, Path]:
    """Repo with crates at a/ and b/. Returns (root, crate_a, crate_b)."""
    return tmp_path, make_crate(tmp_path, "a"), make_crate(tmp_path, "b")
