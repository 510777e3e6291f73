"""Stage results and the error taxonomy of a scan run.

Each stage of a run either produces a value (``Ok``) or an ``Err`` carrying an
``ErrorKind``. Whether an error ends the run is a property of its kind, not
of the call site that observed it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    DATA_LOAD = "data-load"
    CONFIG = "config"
    FILE_SCAN = "file-scan"

    @property
    def fatal(self) -> bool:
        return self is not ErrorKind.FILE_SCAN


class BaselineGuardError(RuntimeError):
    """Base error for failures raised inside a scan stage."""

    kind: ErrorKind = ErrorKind.CONFIG


class DataLoadError(BaselineGuardError):
    """Raised when the feature database is missing, unreadable or malformed."""

    kind = ErrorKind.DATA_LOAD


class ConfigError(BaselineGuardError):
    """Raised when configuration inputs cannot be interpreted."""

    kind = ErrorKind.CONFIG


class FileScanError(BaselineGuardError):
    """Raised when a single file cannot be read or parsed."""

    kind = ErrorKind.FILE_SCAN


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    detail: str

    @property
    def ok(self) -> bool:
        return False

    @property
    def fatal(self) -> bool:
        return self.kind.fatal

    @classmethod
    def from_exception(cls, exc: BaselineGuardError) -> Err:
        return cls(kind=exc.kind, detail=str(exc))


Result = Union[Ok[T], Err]
