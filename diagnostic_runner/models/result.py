"""Models for diagnostic test outcomes."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

type OutcomeStatus = Literal["success", "failure", "error"]


@dataclass(frozen=True, kw_only=True)
class _Outcome:
    name: str
    started_at: datetime | None = None
    finished_at: datetime | None = None

    @property
    def duration(self) -> float | None:
        """Seconds spent in the test body, if both timestamps were recorded."""
        if self.started_at is None or self.finished_at is None:
            return None
        return (self.finished_at - self.started_at).total_seconds()


@dataclass(frozen=True, kw_only=True)
class PassOutcome(_Outcome):
    """The test body completed without raising."""

    status: Literal["success"] = "success"


@dataclass(frozen=True, kw_only=True)
class FailOutcome(_Outcome):
    """The test body raised an assertion error.

    Only the assertion message is kept; an assertion is an expected way for a
    diagnostic to report a problem and its traceback carries no extra value.
    """

    message: str | None = None
    status: Literal["failure"] = "failure"


@dataclass(frozen=True, kw_only=True)
class ErrorOutcome(_Outcome):
    """Setup, the test body or cleanup raised an unexpected exception."""

    cause: BaseException
    status: Literal["error"] = "error"

    @property
    def message(self) -> str:
        """Human-readable summary of the cause."""
        return f"{type(self.cause).__name__}: {self.cause}"


type TestOutcome = PassOutcome | FailOutcome | ErrorOutcome
