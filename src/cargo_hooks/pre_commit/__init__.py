"""Pre-commit helpers: cargo fmt/clippy checks and hook installation."""

from cargo_hooks.pre_commit.cargo_checks import run_cargo_checks
from cargo_hooks.pre_commit.install import install_hook

__all__ = ["install_hook", "run_cargo_checks"]
