"""Read outcome model: the tagged result of a single read attempt."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutcomeKind(Enum):
    """Possible results of one read from the input stream."""

    VALUE = "value"
    END_OF_INPUT = "end_of_input"
    ERROR = "error"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class ReadOutcome:
    """Result produced by a line source or the cancellation bridge."""

    kind: OutcomeKind
    value: str = ""
    error: BaseException | None = None
    reason: str | None = None

    @classmethod
    def of(cls, value: str) -> ReadOutcome:
        return cls(kind=OutcomeKind.VALUE, value=value)

    @classmethod
    def end_of_input(cls) -> ReadOutcome:
        return cls(kind=OutcomeKind.END_OF_INPUT)

    @classmethod
    def failure(cls, error: BaseException) -> ReadOutcome:
        return cls(kind=OutcomeKind.ERROR, error=error)

    @classmethod
    def cancelled(cls, reason: str | None = None) -> ReadOutcome:
        return cls(kind=OutcomeKind.CANCELLED, reason=reason)

    @property
    def is_value(self) -> bool:
        return self.kind is OutcomeKind.VALUE

    @property
    def is_end(self) -> bool:
        """True if the stream is exhausted."""
        return self.kind is OutcomeKind.END_OF_INPUT

    @property
    def failed(self) -> bool:
        """True if the read failed or was cancelled."""
        return self.kind in (OutcomeKind.ERROR, OutcomeKind.CANCELLED)
