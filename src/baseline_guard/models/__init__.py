"""Data models for the Baseline compliance engine."""

from __future__ import annotations

from .feature_record import FeatureRecord
from .target import ComplianceTarget
from .usage import UsageCandidate
from .violation import UNKNOWN_LOCATION, Violation

__all__ = [
    "ComplianceTarget",
    "FeatureRecord",
    "UNKNOWN_LOCATION",
    "UsageCandidate",
    "Violation",
]
