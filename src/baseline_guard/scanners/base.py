"""Scanner protocol shared by all scanning strategies."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..models import UsageCandidate


class Scanner(Protocol):
    """Structural protocol for a per-file usage scanner.

    ``confidence`` is "high" for syntax-aware strategies and "low" for
    heuristic ones whose matches cannot be localised.
    """

    name: str
    suffixes: tuple[str, ...]
    confidence: str

    def scan(self, path: Path, content: str) -> list[UsageCandidate]: ...
