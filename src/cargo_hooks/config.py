"""Hook config loading.

Optional YAML file (default: <project_root>/.cargo-hooks.yaml):
- fmt_command: formatting check, list or string (default: cargo fmt -- --check)
- lint_command: lint, list or string (default: cargo clippy)
- exclude: directory names whose Cargo.toml files are skipped (default: none)
"""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = ".cargo-hooks.yaml"

DEFAULT_FMT_COMMAND = ["cargo", "fmt", "--", "--check"]
DEFAULT_LINT_COMMAND = ["cargo", "clippy"]


def default_hook_config() -> dict[str, Any]:
    return {
        "fmt_command": list(DEFAULT_FMT_COMMAND),
        "lint_command": list(DEFAULT_LINT_COMMAND),
        "exclude": [],
    }


def _as_command(value: Any, key: str, path: Path) -> list[str]:
    if isinstance(value, str):
        cmd = shlex.split(value)
    elif isinstance(value, list) and all(isinstance(v, str) for v in value):
        cmd = list(value)
    else:
        msg = f"{key} must be a string or list of strings: {path}"
        raise ValueError(msg)
    if not cmd:
        msg = f"{key} must not be empty: {path}"
        raise ValueError(msg)
    return cmd


def load_hook_config(project_root: Path, config_path: Path | None = None) -> dict[str, Any]:
    """Load hook config, falling back to defaults when no file is present.

    An explicit config_path must exist. Raises ValueError if the file is not
    valid YAML, is not a mapping, or holds an invalid command/exclude value.
    """
    config = default_hook_config()
    if config_path is None:
        path = project_root / CONFIG_FILENAME
        if not path.is_file():
            return config
    else:
        path = config_path
        if not path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

    with path.open(encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            msg = f"Invalid YAML: {path}: {e}"
            raise ValueError(msg) from e
    if not isinstance(data, dict):
        msg = f"Config must be a mapping: {path}"
        raise ValueError(msg)

    for key in ("fmt_command", "lint_command"):
        if key in data:
            config[key] = _as_command(data[key], key, path)
    if "exclude" in data:
        exclude = data["exclude"] or []
        if not isinstance(exclude, list) or not all(isinstance(e, str) for e in exclude):
            msg = f"exclude must be a list of directory names: {path}"
            raise ValueError(msg)
        config["exclude"] = list(exclude)
    return config
