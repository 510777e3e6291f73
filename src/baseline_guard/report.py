"""Violation aggregation and schema-friendly report output."""

from __future__ import annotations

from pathlib import Path
from collections.abc import Iterable, Set
from typing import Any

from .models import ComplianceTarget, UsageCandidate, Violation
from .models.violation import UNKNOWN_LOCATION


def _reason(feature_id: str, target: ComplianceTarget) -> str:
    reason = f"'{feature_id}' is not Baseline compliant for target '{target.label}'"
    if target.fail_on_newly:
        reason += " (newly available features rejected)"
    return reason


def _display_path(path: Path, root: Path | None) -> str:
    if root is not None:
        try:
            return path.relative_to(root).as_posix()
        except ValueError:
            pass
    return path.as_posix()


def aggregate(
    candidates: Iterable[UsageCandidate],
    non_compliant_ids: Set[str],
    target: ComplianceTarget,
    root: Path | None = None,
) -> tuple[list[Violation], bool]:
    """Judge usage candidates against the non-compliant set.

    Candidates are kept in the order given; each one whose feature id is
    non-compliant becomes one Violation. Missing locations are reported as
    ``"unknown"``. Returns the violations and whether the run failed.
    """
    violations = [
        Violation(
            file=_display_path(candidate.file, root),
            line=candidate.line if candidate.line is not None else UNKNOWN_LOCATION,
            column=candidate.column if candidate.column is not None else UNKNOWN_LOCATION,
            feature_id=candidate.feature_id,
            reason=_reason(candidate.feature_id, target),
        )
        for candidate in candidates
        if candidate.feature_id in non_compliant_ids
    ]
    return violations, bool(violations)


def build_report(
    violations: list[Violation],
    target: ComplianceTarget,
    files_scanned: int,
    skipped: list[str] | None = None,
) -> dict[str, Any]:
    """Assemble the JSON report for a completed run.

    Totals are derived from the violation list; ``skipped`` lists the files
    that could not be scanned and contributed no usages.
    """
    skipped = skipped or []
    features = sorted({v.feature_id for v in violations})

    report: dict[str, Any] = {
        "version": "1",
        "target": target.to_dict(),
        "hasViolations": bool(violations),
        "violations": [v.to_dict() for v in violations],
        "skipped": list(skipped),
        "totals": {
            "filesScanned": files_scanned,
            "filesSkipped": len(skipped),
            "violations": len(violations),
            "features": len(features),
        },
    }

    return report
