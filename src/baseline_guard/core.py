"""Core scanning entrypoint.

This module MUST NOT contain GitHub-specific dependencies so it can be used by
both the Action wrapper and the local CLI.

A run moves through the stages Idle -> Loaded -> Classified -> Scanned ->
Aggregated and ends in Pass or Fail. Failing to load the feature data or to
interpret the configuration ends the run before any source file is opened;
a file that cannot be scanned is logged, listed as skipped and contributes
no usages.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from collections.abc import Sequence
from typing import Any

from .classifier import partition
from .config import Settings
from .discovery import expand_patterns
from .ingestion import load_snapshot
from .models import ComplianceTarget, UsageCandidate, Violation
from .report import aggregate, build_report
from .result import BaselineGuardError, Err, Ok, Result
from .scanners import ScannerRegistry, build_registry, scan_file
from .store import FeatureStore

logger = logging.getLogger(__name__)


class Stage(str, Enum):
    IDLE = "idle"
    LOADED = "loaded"
    CLASSIFIED = "classified"
    SCANNED = "scanned"
    AGGREGATED = "aggregated"
    PASS = "pass"
    FAIL = "fail"


@dataclass(frozen=True)
class ScanOutcome:
    """Result of a completed run."""

    violations: list[Violation]
    failed: bool
    report: dict[str, Any]
    skipped: list[str] = field(default_factory=list)

    @property
    def stage(self) -> Stage:
        return Stage.FAIL if self.failed else Stage.PASS


def scan_files(
    registry: ScannerRegistry, files: Sequence[Path], max_workers: int = 1
) -> list[Result[list[UsageCandidate]]]:
    """Scan files, concurrently when ``max_workers`` > 1.

    Results are slotted by input position, so the returned list is in file
    order regardless of completion order.
    """
    if max_workers <= 1 or len(files) <= 1:
        return [scan_file(registry, path) for path in files]

    results: list[Result[list[UsageCandidate]] | None] = [None] * len(files)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(scan_file, registry, path): index for index, path in enumerate(files)
        }
        for future in as_completed(futures):
            results[futures[future]] = future.result()
    return results  # type: ignore[return-value]


def _enter(stage: Stage) -> None:
    logger.debug("Stage: %s", stage.value)


def run(root: Path, settings: Settings, snapshot: Any | None = None) -> Result[ScanOutcome]:
    """Evaluate the files under ``root`` against the configured Baseline target.

    Params:
        root: directory the ``scan_files`` patterns are relative to
        settings: run configuration
        snapshot: optional pre-loaded feature data; when None the data is
            loaded from ``settings.feature_source``

    Returns: Ok(ScanOutcome) when the run completes (pass or fail), or a
    fatal Err (data-load or config) when it cannot.
    """
    root = root.resolve()
    _enter(Stage.IDLE)

    try:
        raw = snapshot if snapshot is not None else load_snapshot(settings.feature_source)
        store = FeatureStore.load(raw)
    except BaselineGuardError as exc:
        logger.error("Failed to load feature data: %s", exc)
        return Err.from_exception(exc)
    _enter(Stage.LOADED)

    try:
        target = ComplianceTarget.parse(settings.target_baseline, settings.fail_on_newly)
        registry = build_registry(store, settings.script_tokens)
        files = expand_patterns(root, settings.scan_files)
    except BaselineGuardError as exc:
        logger.error("Invalid configuration: %s", exc)
        return Err.from_exception(exc)
    _, non_compliant = partition(store, target)
    _enter(Stage.CLASSIFIED)

    logger.info("Scanning %d files against target '%s'", len(files), target.label)
    candidates: list[UsageCandidate] = []
    skipped: list[str] = []
    for path, result in zip(files, scan_files(registry, files, settings.max_workers)):
        if isinstance(result, Err):
            logger.warning("Skipping file: %s", result.detail)
            skipped.append(path.relative_to(root).as_posix())
            continue
        candidates.extend(result.value)
    _enter(Stage.SCANNED)

    violations, failed = aggregate(candidates, non_compliant, target, root)
    report = build_report(violations, target, len(files) - len(skipped), skipped)
    _enter(Stage.AGGREGATED)

    outcome = ScanOutcome(violations=violations, failed=failed, report=report, skipped=skipped)
    logger.info(
        "%s: %d violations in %d files", outcome.stage.value.upper(), len(violations), len(files)
    )
    return Ok(outcome)
