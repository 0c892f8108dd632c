"""Listeners notified of diagnostic outcomes."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from diagnostic_runner.models.result import (
    ErrorOutcome,
    FailOutcome,
    PassOutcome,
    TestOutcome,
)

log = logging.getLogger(__name__)

type Listener = Callable[[TestOutcome], None]

STATUS_SYMBOLS = {
    "success": "✓",
    "failure": "✗",
    "error": "!",
}


def format_duration(outcome: TestOutcome) -> str:
    """Render an outcome's duration, or ``-`` when it was never timed."""
    duration = outcome.duration
    return "-" if duration is None else f"{duration:.2f}s"


@dataclass(frozen=True, kw_only=True)
class LoggingListener:
    """Logs every outcome it receives."""

    logger: logging.Logger = field(default=log)

    def __call__(self, outcome: TestOutcome) -> None:
        symbol = STATUS_SYMBOLS[outcome.status]
        match outcome:
            case PassOutcome():
                self.logger.info(
                    "%s %s: %s (%s)",
                    symbol,
                    outcome.name,
                    outcome.status,
                    format_duration(outcome),
                )
            case FailOutcome():
                self.logger.warning(
                    "%s %s: %s (%s) - %s",
                    symbol,
                    outcome.name,
                    outcome.status,
                    format_duration(outcome),
                    outcome.message or "assertion failed",
                )
            case ErrorOutcome():
                self.logger.error(
                    "%s %s: %s (%s) - %s",
                    symbol,
                    outcome.name,
                    outcome.status,
                    format_duration(outcome),
                    outcome.message,
                    exc_info=outcome.cause,
                )


@dataclass(frozen=True, kw_only=True)
class OutcomeRecorder:
    """Keeps every outcome it receives, in arrival order."""

    _outcomes: list[TestOutcome] = field(default_factory=list)

    def __call__(self, outcome: TestOutcome) -> None:
        self._outcomes.append(outcome)

    @property
    def outcomes(self) -> Sequence[TestOutcome]:
        return tuple(self._outcomes)

    @property
    def has_failures(self) -> bool:
        """Whether any recorded outcome is a failure or an error."""
        return any(outcome.status != "success" for outcome in self._outcomes)

    def clear(self) -> None:
        self._outcomes.clear()
