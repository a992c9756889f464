"""Shared CLI argument parsing for common flags (--project-root, --config, --force, -v)."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

# (key, flag, default, converter); converter None keeps the raw string.
FlagSpec = tuple[str, str, Any, Callable[[str], Any] | None]


def parse_flags(argv: list[str], *specs: FlagSpec) -> tuple[dict[str, Any], list[str]]:
    """Pull `--flag VALUE` pairs out of argv.

    E.g. parse_flags(["--config", "hooks.yml"], ("config", "--config", None, path_resolver))
    gives ({"config": Path(".../hooks.yml")}, []). A flag given as the last
    argument has no value and stays in the remaining argv.
    """
    by_flag = {flag: (key, converter) for key, flag, _default, converter in specs}
    values: dict[str, Any] = {
        key: default() if callable(default) else default for key, _flag, default, _conv in specs
    }

    rest: list[str] = []
    args = iter(argv)
    for arg in args:
        if arg not in by_flag:
            rest.append(arg)
            continue
        value = next(args, None)
        if value is None:
            rest.append(arg)
            break
        key, converter = by_flag[arg]
        values[key] = converter(value) if converter else value
    return values, rest


def pop_switch(argv: list[str], *names: str) -> tuple[bool, list[str]]:
    """Remove boolean switches (e.g. --force) from argv. Returns (present, remaining argv)."""
    rest = [a for a in argv if a not in names]
    return len(rest) != len(argv), rest


def pop_leading_switch(argv: list[str], *names: str) -> tuple[bool, list[str]]:
    """Strip switches (e.g. -v) that come before the command. Later occurrences are left alone."""
    i = 0
    while i < len(argv) and argv[i] in names:
        i += 1
    return i > 0, argv[i:]


def path_resolver(s: str) -> Path:
    """Resolve a path argument to absolute Path (e.g. --project-root, --config)."""
    return Path(s).resolve()
