"""Tests for scan-files pattern expansion."""

from __future__ import annotations

from pathlib import Path

import pytest

from conftest import write

from baseline_guard.discovery import expand_patterns, split_patterns
from baseline_guard.result import ConfigError


def test_split_patterns() -> None:
    assert split_patterns("**/*.css, src/**/*.js\n\nlib/*.mjs") == [
        "**/*.css",
        "src/**/*.js",
        "lib/*.mjs",
    ]
    assert split_patterns(["a.css", " ", "b.js"]) == ["a.css", "b.js"]


def test_expand_orders_by_pattern_then_path(tmp_path: Path) -> None:
    write(tmp_path, "b.css", "")
    write(tmp_path, "a.css", "")
    write(tmp_path, "src/app.js", "")
    write(tmp_path, "src/z.css", "")

    found = expand_patterns(tmp_path, "**/*.js,**/*.css")
    rel = [p.relative_to(tmp_path.resolve()).as_posix() for p in found]
    assert rel == ["src/app.js", "a.css", "b.css", "src/z.css"]


def test_expand_excludes_vendor_dirs_and_duplicates(tmp_path: Path) -> None:
    write(tmp_path, "a.css", "")
    write(tmp_path, "node_modules/pkg/x.css", "")
    write(tmp_path, ".git/y.css", "")
    (tmp_path / "dir.css").mkdir()

    found = expand_patterns(tmp_path, ["**/*.css", "a.css"])
    assert [p.name for p in found] == ["a.css"]


def test_absolute_patterns_are_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        expand_patterns(tmp_path, "/etc/*.css")
