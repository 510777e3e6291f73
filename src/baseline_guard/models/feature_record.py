"""Feature record model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from collections.abc import Iterable, Mapping
from typing import Any

HIGH = "high"
LOW = "low"
_VALID_STATUSES = {HIGH, LOW}

# web-features marks approximate dates as "≤2020-01-15"
_RANGED_DATE_PREFIXES = ("≤", "<=")


def parse_baseline_date(value: Any) -> date | None:
    """Return the calendar date of a baseline date string, or None."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    for prefix in _RANGED_DATE_PREFIXES:
        if text.startswith(prefix):
            text = text[len(prefix):].strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def normalise_status(value: Any) -> str | None:
    if isinstance(value, str) and value.strip().lower() in _VALID_STATUSES:
        return value.strip().lower()
    return None


@dataclass(frozen=True)
class FeatureRecord:
    """Baseline status of a single web platform feature."""

    id: str
    baseline_status: str | None = None
    low_date: date | None = None
    high_date: date | None = None
    reference_url: str | None = None
    compat_keys: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Feature id must be non-empty")
        if self.baseline_status is not None and self.baseline_status not in _VALID_STATUSES:
            raise ValueError(f"Invalid baseline status: {self.baseline_status}")

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "baseline": self.baseline_status or False,
            "baselineLowDate": self.low_date.isoformat() if self.low_date else None,
            "baselineHighDate": self.high_date.isoformat() if self.high_date else None,
            "url": self.reference_url,
        }

    @classmethod
    def from_raw(cls, feature_id: str, raw: Mapping[str, Any]) -> FeatureRecord:
        """Build a record from a web-features entry.

        Status fields are read from the nested ``status`` object when present
        and from the top level otherwise, so both the published data set and
        flattened snapshots are accepted.
        """
        status = raw.get("status")
        source: Mapping[str, Any] = status if isinstance(status, Mapping) else raw

        return cls(
            id=feature_id,
            baseline_status=normalise_status(source.get("baseline")),
            low_date=parse_baseline_date(source.get("baseline_low_date")),
            high_date=parse_baseline_date(source.get("baseline_high_date")),
            reference_url=_reference_url(raw),
            compat_keys=_compat_keys(raw.get("compat_features")),
        )


def _reference_url(raw: Mapping[str, Any]) -> str | None:
    spec = raw.get("spec")
    if isinstance(spec, list):
        spec = spec[0] if spec else None
    if isinstance(spec, str) and spec:
        return spec
    url = raw.get("url")
    return url if isinstance(url, str) and url else None


def _compat_keys(value: Any) -> tuple[str, ...]:
    if not isinstance(value, Iterable) or isinstance(value, (str, bytes)):
        return ()
    return tuple(str(key) for key in value if key)
