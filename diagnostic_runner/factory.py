"""Construction of test outcomes."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from diagnostic_runner.models.result import (
    ErrorOutcome,
    FailOutcome,
    PassOutcome,
    TestOutcome,
)


class ResultFactory(ABC):
    """Builds the outcome records broadcast by an executor.

    Executors only decide which kind of outcome applies; the factory decides
    what record represents it, so callers can substitute richer records.
    """

    @abstractmethod
    def success(
        self,
        name: str,
        started_at: datetime | None,
        finished_at: datetime | None,
    ) -> TestOutcome:
        """Build the outcome of a test body that completed normally."""

    @abstractmethod
    def failure(
        self,
        name: str,
        message: str | None,
        started_at: datetime | None,
        finished_at: datetime | None,
    ) -> TestOutcome:
        """Build the outcome of a failed assertion."""

    @abstractmethod
    def error(
        self,
        name: str,
        cause: BaseException,
        started_at: datetime | None,
        finished_at: datetime | None,
    ) -> TestOutcome:
        """Build the outcome of an unexpected exception."""


@dataclass(frozen=True)
class OutcomeFactory(ResultFactory):
    """Default factory producing the built-in outcome dataclasses."""

    def success(
        self,
        name: str,
        started_at: datetime | None,
        finished_at: datetime | None,
    ) -> PassOutcome:
        return PassOutcome(name=name, started_at=started_at, finished_at=finished_at)

    def failure(
        self,
        name: str,
        message: str | None,
        started_at: datetime | None,
        finished_at: datetime | None,
    ) -> FailOutcome:
        return FailOutcome(
            name=name,
            message=message,
            started_at=started_at,
            finished_at=finished_at,
        )

    def error(
        self,
        name: str,
        cause: BaseException,
        started_at: datetime | None,
        finished_at: datetime | None,
    ) -> ErrorOutcome:
        return ErrorOutcome(
            name=name,
            cause=cause,
            started_at=started_at,
            finished_at=finished_at,
        )
