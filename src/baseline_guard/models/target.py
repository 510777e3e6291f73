"""Compliance target model."""

from __future__ import annotations

from dataclasses import dataclass

from ..result import ConfigError

WIDELY = "widely"
NEWLY = "newly"
YEAR = "year"
_VALID_KINDS = {WIDELY, NEWLY, YEAR}


@dataclass(frozen=True)
class ComplianceTarget:
    """The Baseline level a run is evaluated against."""

    kind: str
    year: int | None = None
    fail_on_newly: bool = False

    def __post_init__(self) -> None:
        if self.kind not in _VALID_KINDS:
            raise ConfigError(f"Invalid target kind: {self.kind}")
        if self.kind == YEAR and self.year is None:
            raise ConfigError("Year targets require a year")
        if self.kind != YEAR and self.year is not None:
            raise ConfigError(f"Target '{self.kind}' does not take a year")

    @property
    def label(self) -> str:
        return str(self.year) if self.kind == YEAR else self.kind

    def to_dict(self) -> dict[str, object]:
        return {
            "baseline": self.label,
            "failOnNewly": self.fail_on_newly,
        }

    @classmethod
    def parse(cls, text: str | None, fail_on_newly: bool = False) -> ComplianceTarget:
        """Parse a ``target-baseline`` input: "widely", "newly" or a year."""
        value = (text or "").strip().lower()
        if value in (WIDELY, NEWLY):
            return cls(kind=value, fail_on_newly=fail_on_newly)
        if value.isascii() and value.isdigit():
            return cls(kind=YEAR, year=int(value), fail_on_newly=fail_on_newly)
        raise ConfigError(
            f"Invalid target-baseline '{text}': expected 'widely', 'newly' or a year"
        )
