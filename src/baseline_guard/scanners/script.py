"""Heuristic usage detection for script sources.

This strategy does not parse JavaScript. It checks the raw text for literal
API tokens, so a token inside a comment or string is reported, and aliased
or renamed calls are missed. Matches carry no line or column.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from collections.abc import Mapping
from typing import Any

import yaml

from ..models import UsageCandidate
from ..result import ConfigError
from ..store import FeatureStore

logger = logging.getLogger(__name__)

DEFAULT_TOKENS_RESOURCE = "script_tokens.yaml"


def _coerce_token_table(data: Any, origin: str) -> dict[str, tuple[str, ...]]:
    """Normalise a feature id -> token(s) mapping loaded from YAML."""
    if not isinstance(data, Mapping):
        raise ConfigError(f"Script token table {origin} must be a mapping of feature id to tokens")

    table: dict[str, tuple[str, ...]] = {}
    for feature_id, tokens in data.items():
        if isinstance(tokens, str):
            tokens = [tokens]
        if not isinstance(tokens, list) or not all(isinstance(t, str) and t for t in tokens):
            raise ConfigError(
                f"Script token table {origin}: '{feature_id}' must map to a list of strings"
            )
        table[str(feature_id)] = tuple(tokens)
    return table


def load_token_table(path: Path | str | None = None) -> dict[str, tuple[str, ...]]:
    """Load the token table from ``path`` or the packaged default.

    Raises:
        ConfigError: If the file cannot be read or has the wrong shape.
    """
    if path is None:
        text = resources.files("baseline_guard.data").joinpath(DEFAULT_TOKENS_RESOURCE).read_text(
            encoding="utf-8"
        )
        origin = DEFAULT_TOKENS_RESOURCE
    else:
        origin = str(path)
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to read script token table: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in script token table {origin}: {exc}") from exc

    return _coerce_token_table(data, origin)


class ScriptScanner:
    """Low-confidence substring scanning strategy for script files."""

    name = "script"
    suffixes = (".js", ".mjs", ".cjs", ".jsx", ".ts", ".tsx")
    confidence = "low"

    def __init__(
        self, store: FeatureStore, tokens: Mapping[str, tuple[str, ...]] | None = None
    ) -> None:
        self.store = store
        table = tokens if tokens is not None else load_token_table()
        self.tokens: list[tuple[str, str]] = []
        for key, feature_tokens in table.items():
            feature_id = store.resolve(key)
            if feature_id is None:
                logger.debug("Script tokens for unknown feature %s ignored", key)
                continue
            self.tokens.extend((feature_id, token) for token in feature_tokens)

    def scan(self, path: Path, content: str) -> list[UsageCandidate]:
        return [
            UsageCandidate(feature_id=feature_id, file=path)
            for feature_id, token in self.tokens
            if token in content
        ]
