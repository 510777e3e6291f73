"""Shared fixtures: a small web-features style snapshot and its store."""

from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest

from baseline_guard.store import FeatureStore

SNAPSHOT = {
    "grid": {
        "name": "Grid",
        "spec": "https://drafts.csswg.org/css-grid-1/",
        "status": {
            "baseline": "high",
            "baseline_low_date": "2020-01-15",
            "baseline_high_date": "2022-07-15",
        },
        "compat_features": [
            "css.properties.display.grid",
            "css.properties.grid-template-columns",
        ],
    },
    "gap": {
        "status": {
            "baseline": "high",
            "baseline_low_date": "≤2021-04-26",
            "baseline_high_date": "≤2023-10-26",
        },
        "compat_features": ["css.properties.gap"],
    },
    "has": {
        "status": {"baseline": "low", "baseline_low_date": "2023-12-19"},
        "compat_features": ["css.selectors.has"],
    },
    "container-queries": {
        "status": {"baseline": "low", "baseline_low_date": "2023-02-14"},
        "compat_features": ["css.at-rules.container", "css.properties.container-type"],
    },
    "oklab": {
        "status": {"baseline": "low", "baseline_low_date": "2023-05-09"},
        "compat_features": ["css.types.color.oklab", "css.types.color.oklch"],
    },
    "backdrop-filter": {
        "status": {"baseline": "low", "baseline_low_date": "2024-09-16"},
        "compat_features": ["css.properties.backdrop-filter"],
    },
    "anchor-positioning": {
        "status": {"baseline": False},
        "compat_features": ["css.properties.anchor-name"],
    },
    "structured-clone": {
        "status": {
            "baseline": "high",
            "baseline_low_date": "2022-03-14",
            "baseline_high_date": "2024-09-14",
        },
    },
    "array-group": {
        "status": {"baseline": "low", "baseline_low_date": "2024-03-05"},
    },
}


def make_snapshot() -> dict:
    return copy.deepcopy(SNAPSHOT)


@pytest.fixture
def snapshot() -> dict:
    return make_snapshot()


@pytest.fixture
def store(snapshot: dict) -> FeatureStore:
    return FeatureStore.load(snapshot)


@pytest.fixture
def features_file(tmp_path: Path, snapshot: dict) -> Path:
    path = tmp_path / "features.json"
    path.write_text(json.dumps({"features": snapshot}), encoding="utf-8")
    return path


def write(root: Path, relative: str, content: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
