"""Violation model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

UNKNOWN_LOCATION = "unknown"

Location = Union[int, str]


@dataclass(frozen=True)
class Violation:
    """A usage of a feature that is outside the compliant set of a run."""

    file: str
    line: Location
    column: Location
    feature_id: str
    reason: str

    def __post_init__(self) -> None:
        if not self.file:
            raise ValueError("Violation file must be non-empty")
        if not self.feature_id:
            raise ValueError("Violation feature id must be non-empty")
        for name in ("line", "column"):
            value = getattr(self, name)
            if isinstance(value, str) and value != UNKNOWN_LOCATION:
                raise ValueError(f"{name} must be an integer or '{UNKNOWN_LOCATION}'")

    def to_dict(self) -> dict[str, object]:
        return {
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "featureId": self.feature_id,
            "reason": self.reason,
        }
