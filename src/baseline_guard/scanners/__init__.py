"""Per-file usage scanners and the registry selecting one by file kind."""

from __future__ import annotations

import logging
from pathlib import Path
from collections.abc import Mapping

from ..models import UsageCandidate
from ..result import Err, FileScanError, Ok, Result
from ..store import FeatureStore
from .base import Scanner
from .css import StylesheetScanner, extract_usages
from .script import ScriptScanner, load_token_table

logger = logging.getLogger(__name__)

ScannerRegistry = Mapping[str, Scanner]


def build_registry(store: FeatureStore, script_tokens: Path | str | None = None) -> ScannerRegistry:
    """Return the suffix -> scanner registry for a run.

    Raises:
        ConfigError: If a custom script token table cannot be loaded.
    """
    scanners: list[Scanner] = [
        StylesheetScanner(store),
        ScriptScanner(store, load_token_table(script_tokens)),
    ]
    return {suffix: scanner for scanner in scanners for suffix in scanner.suffixes}


def get_scanner(registry: ScannerRegistry, path: Path) -> Scanner | None:
    """Return the scanner for ``path``, or None if its kind is not scanned."""
    return registry.get(path.suffix.lower())


def scan_file(registry: ScannerRegistry, path: Path) -> Result[list[UsageCandidate]]:
    """Scan one file; read and parse failures are returned as recoverable errors."""
    scanner = get_scanner(registry, path)
    if scanner is None:
        logger.debug("Skipping %s: no scanner for this file kind", path)
        return Ok([])

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return Err.from_exception(FileScanError(f"Failed to read {path}: {exc}"))

    try:
        candidates = scanner.scan(path, content)
    except Exception as exc:  # noqa: BLE001 - third-party parser failures are per file
        return Err.from_exception(FileScanError(f"Failed to parse {path}: {exc}"))

    logger.debug("%s: %d usage candidates (%s scanner)", path, len(candidates), scanner.name)
    return Ok(candidates)


__all__ = [
    "Scanner",
    "ScannerRegistry",
    "ScriptScanner",
    "StylesheetScanner",
    "build_registry",
    "extract_usages",
    "get_scanner",
    "load_token_table",
    "scan_file",
]
