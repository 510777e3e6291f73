"""Tests for settings loading."""

from __future__ import annotations

import pytest

from baseline_guard.config import (
    DEFAULT_SCAN_FILES,
    DEFAULT_WORKERS,
    Settings,
    load_settings,
    parse_bool,
)
from baseline_guard.result import ConfigError


def test_defaults_when_environment_is_empty() -> None:
    settings = load_settings({})
    assert settings == Settings()
    assert settings.target_baseline == "widely"
    assert settings.scan_files == DEFAULT_SCAN_FILES
    assert settings.fail_on_newly is False
    assert settings.max_workers == DEFAULT_WORKERS


def test_reads_action_inputs() -> None:
    settings = load_settings(
        {
            "INPUT_TARGET-BASELINE": " 2023 ",
            "INPUT_SCAN-FILES": "src/**/*.css",
            "INPUT_FAIL-ON-NEWLY": "true",
            "INPUT_REPORT-ARTIFACT-NAME": "baseline.md",
            "BASELINE_GUARD_FEATURES": "data.json",
            "BASELINE_GUARD_TOKENS": "tokens.yaml",
            "BASELINE_GUARD_WORKERS": "2",
        }
    )
    assert settings.target_baseline == "2023"
    assert settings.scan_files == "src/**/*.css"
    assert settings.fail_on_newly is True
    assert settings.report_artifact_name == "baseline.md"
    assert settings.feature_source == "data.json"
    assert settings.script_tokens == "tokens.yaml"
    assert settings.max_workers == 2


def test_reads_underscore_input_names() -> None:
    settings = load_settings({"INPUT_TARGET_BASELINE": "newly", "INPUT_FAIL_ON_NEWLY": "yes"})
    assert settings.target_baseline == "newly"
    assert settings.fail_on_newly is True


def test_target_is_not_validated_while_loading() -> None:
    assert load_settings({"INPUT_TARGET-BASELINE": "foo"}).target_baseline == "foo"


@pytest.mark.parametrize("value,expected", [("1", True), ("Y", True), ("false", False), ("", False)])
def test_parse_bool(value: str, expected: bool) -> None:
    assert parse_bool(value, "flag") is expected


def test_invalid_boolean_input() -> None:
    with pytest.raises(ConfigError, match="fail-on-newly"):
        load_settings({"INPUT_FAIL-ON-NEWLY": "sometimes"})


@pytest.mark.parametrize("value", ["0", "-1", "many"])
def test_invalid_worker_count(value: str) -> None:
    with pytest.raises(ConfigError):
        load_settings({"BASELINE_GUARD_WORKERS": value})


def test_with_overrides_ignores_none() -> None:
    settings = Settings().with_overrides(target_baseline="newly", scan_files=None)
    assert settings.target_baseline == "newly"
    assert settings.scan_files == DEFAULT_SCAN_FILES
