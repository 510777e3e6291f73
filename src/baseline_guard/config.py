"""Configuration loader for a baseline-guard run.

Inputs come from the GitHub Action environment (``INPUT_<NAME>``, with the
hyphenated input name upper-cased) or from ``BASELINE_GUARD_*`` variables when
run outside Actions. The target string itself is validated later, when the
run classifies features, so a bad target still fails before any file is read.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from collections.abc import Mapping

from .result import ConfigError

DEFAULT_TARGET = "widely"
DEFAULT_SCAN_FILES = "**/*.css,**/*.js"
DEFAULT_REPORT_NAME = "baseline-report.md"
DEFAULT_WORKERS = 4

FEATURES_ENV_VAR = "BASELINE_GUARD_FEATURES"
TOKENS_ENV_VAR = "BASELINE_GUARD_TOKENS"
WORKERS_ENV_VAR = "BASELINE_GUARD_WORKERS"

_TRUE_VALUES = {"1", "true", "yes", "y"}
_FALSE_VALUES = {"", "0", "false", "no", "n"}


@dataclass(slots=True, frozen=True)
class Settings:
    """Validated inputs of a single run."""

    target_baseline: str = DEFAULT_TARGET
    scan_files: str = DEFAULT_SCAN_FILES
    fail_on_newly: bool = False
    report_artifact_name: str = DEFAULT_REPORT_NAME
    feature_source: str | None = None
    script_tokens: str | None = None
    max_workers: int = DEFAULT_WORKERS

    def with_overrides(self, **changes: object) -> Settings:
        """Return a copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _action_input(environ: Mapping[str, str], name: str) -> str | None:
    """Return an Action input by its hyphenated name, or None when unset."""
    upper = name.upper()
    for key in (f"INPUT_{upper}", f"INPUT_{upper.replace('-', '_')}"):
        value = environ.get(key)
        if value is not None and value.strip():
            return value.strip()
    return None


def parse_bool(value: str | None, name: str) -> bool:
    """Parse an Action boolean input.

    Raises:
        ConfigError: If the value is not a recognised boolean.
    """
    text = (value or "").strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid '{name}' value '{value}' (must be true or false)")


def parse_workers(value: str | int | None) -> int:
    if value is None or value == "":
        return DEFAULT_WORKERS
    try:
        workers = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid worker count '{value}' (must be an integer)") from exc
    if workers < 1:
        raise ConfigError(f"Invalid worker count {workers} (must be at least 1)")
    return workers


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Load settings from the Action inputs and BASELINE_GUARD_* variables.

    Args:
        environ: Optional environment mapping; defaults to ``os.environ``.

    Returns:
        A Settings object with defaults applied for unset inputs.

    Raises:
        ConfigError: If a boolean input or the worker count is invalid.
    """
    environ = os.environ if environ is None else environ

    return Settings(
        target_baseline=_action_input(environ, "target-baseline") or DEFAULT_TARGET,
        scan_files=_action_input(environ, "scan-files") or DEFAULT_SCAN_FILES,
        fail_on_newly=parse_bool(_action_input(environ, "fail-on-newly"), "fail-on-newly"),
        report_artifact_name=(
            _action_input(environ, "report-artifact-name") or DEFAULT_REPORT_NAME
        ),
        feature_source=environ.get(FEATURES_ENV_VAR) or None,
        script_tokens=environ.get(TOKENS_ENV_VAR) or None,
        max_workers=parse_workers(environ.get(WORKERS_ENV_VAR)),
    )
