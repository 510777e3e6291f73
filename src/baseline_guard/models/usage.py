"""Usage candidate model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class UsageCandidate:
    """A detected, not yet judged, occurrence of a feature in a file."""

    feature_id: str
    file: Path
    line: int | None = None
    column: int | None = None

    def __post_init__(self) -> None:
        if not self.feature_id:
            raise ValueError("Feature id must be non-empty")
        for name in ("line", "column"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ValueError(f"{name} must be a positive integer")
