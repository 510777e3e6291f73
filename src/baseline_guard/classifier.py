"""Partition a feature store into compliant and non-compliant ids."""

from __future__ import annotations

import logging

from .models import ComplianceTarget, FeatureRecord
from .models.feature_record import HIGH, LOW
from .models.target import NEWLY, WIDELY
from .store import FeatureStore

logger = logging.getLogger(__name__)


def is_compliant(record: FeatureRecord, target: ComplianceTarget) -> bool:
    """Return True if ``record`` satisfies ``target``.

    Year targets are decided by the recorded dates alone: a feature marked
    "high" without dates is not compliant for any year. The fail-on-newly
    override runs last and can only reject.
    """
    if target.kind == WIDELY:
        compliant = record.baseline_status == HIGH
    elif target.kind == NEWLY:
        compliant = record.baseline_status in (HIGH, LOW)
    else:
        year = target.year
        compliant = (record.low_date is not None and record.low_date.year <= year) or (
            record.high_date is not None and record.high_date.year <= year
        )

    if target.fail_on_newly and record.baseline_status == LOW:
        compliant = False

    return compliant


def classify(store: FeatureStore, target: ComplianceTarget) -> frozenset[str]:
    """Return the ids of all features in ``store`` that satisfy ``target``."""
    compliant = frozenset(record.id for record in store if is_compliant(record, target))
    if not compliant:
        logger.warning(
            "No features are compliant with target '%s'; check the target-baseline input",
            target.label,
        )
    else:
        logger.debug(
            "%d of %d features compliant with '%s'", len(compliant), len(store), target.label
        )
    return compliant


def partition(
    store: FeatureStore, target: ComplianceTarget
) -> tuple[frozenset[str], frozenset[str]]:
    """Return (compliant, non_compliant) ids; together they cover the store exactly."""
    compliant = classify(store, target)
    return compliant, store.all_ids() - compliant
