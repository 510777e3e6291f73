"""Expansion of ``scan-files`` glob patterns into an ordered file list."""

from __future__ import annotations

import re
from pathlib import Path
from collections.abc import Iterable

from .result import ConfigError


EXCLUDES = {"node_modules", ".git", ".venv"}

_SEPARATORS = re.compile(r"[,\n]")


def split_patterns(value: str | Iterable[str]) -> list[str]:
    """Split a comma or newline separated pattern input into patterns."""
    if isinstance(value, str):
        value = _SEPARATORS.split(value)
    return [p.strip() for p in value if p and p.strip()]


def expand_patterns(root: Path, patterns: str | Iterable[str]) -> list[Path]:
    """Return files under root matching the patterns, excluding vendor dirs.

    Patterns are expanded in the order given; the matches of one pattern are
    sorted by path and a file matched by several patterns is listed once, at
    its first position. The result is therefore stable for a fixed tree.
    """
    root = root.resolve()
    found: list[Path] = []
    seen: set[Path] = set()

    def should_skip(p: Path) -> bool:
        parts = set(p.parts)
        return any(ex in parts for ex in EXCLUDES)

    for pattern in split_patterns(patterns):
        if Path(pattern).is_absolute():
            raise ConfigError(f"scan-files patterns must be relative to the root: {pattern}")
        for path in sorted(root.glob(pattern)):
            if not path.is_file():
                continue
            if should_skip(path.relative_to(root)):
                continue
            if path in seen:
                continue
            seen.add(path)
            found.append(path)

    return found
