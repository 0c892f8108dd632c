"""Execution of a single diagnostic test."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone

from diagnostic_runner.diagnostics.base import DiagnosticTest
from diagnostic_runner.factory import OutcomeFactory, ResultFactory
from diagnostic_runner.listeners import Listener
from diagnostic_runner.models.result import TestOutcome


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True, kw_only=True)
class TestExecutorTask:
    """Runs one diagnostic through its lifecycle and broadcasts the outcome.

    The task is a self-contained unit of work: calling it runs setup, the
    test body and cleanup on the calling thread, then hands the outcome to
    every listener in order. Exceptions raised by the diagnostic never escape;
    they become outcomes. Exceptions raised by listeners are not caught.

    Exactly one primary outcome is broadcast per run. A failing cleanup adds a
    second, error outcome after the primary one.

    Only ``Exception`` subclasses become outcomes. ``KeyboardInterrupt`` and
    ``SystemExit`` raised by the diagnostic skip the primary outcome: cleanup
    still runs, then they propagate to the caller.
    """

    __test__ = False

    test: DiagnosticTest
    listeners: Sequence[Listener]
    result_factory: ResultFactory = field(default_factory=OutcomeFactory)
    clock: Callable[[], datetime] = utc_now

    def __call__(self) -> None:
        self.run()

    def run(self) -> None:
        """Execute the diagnostic once."""
        name = self._resolve_name()
        started_at: datetime | None = None
        finished_at: datetime | None = None

        try:
            try:
                self.test.setup()
            except Exception as e:
                # Setup failures are errors, whatever their type.
                self._notify(self.result_factory.error(name, e, None, None))
                return

            started_at = self.clock()
            try:
                self.test.test()
            except AssertionError as e:
                finished_at = self._stamp(started_at, finished_at)
                self._notify(
                    self.result_factory.failure(
                        name, _assertion_message(e), started_at, finished_at
                    )
                )
            except Exception as e:
                finished_at = self._stamp(started_at, finished_at)
                self._notify(
                    self.result_factory.error(name, e, started_at, finished_at)
                )
            else:
                finished_at = self.clock()
                self._notify(
                    self.result_factory.success(name, started_at, finished_at)
                )
        finally:
            try:
                self.test.cleanup()
            except Exception as e:
                finished_at = self._stamp(started_at, finished_at)
                self._notify(
                    self.result_factory.error(name, e, started_at, finished_at)
                )

    def _resolve_name(self) -> str:
        try:
            return self.test.name
        except Exception:
            return type(self.test).__qualname__

    def _stamp(
        self, started_at: datetime | None, finished_at: datetime | None
    ) -> datetime | None:
        """Close an open timing window before an outcome is built."""
        if started_at is not None and finished_at is None:
            return self.clock()
        return finished_at

    def _notify(self, outcome: TestOutcome) -> None:
        for listener in self.listeners:
            listener(outcome)


def _assertion_message(error: AssertionError) -> str | None:
    message = str(error)
    return message or None


def execute(
    test: DiagnosticTest,
    result_factory: ResultFactory,
    listeners: Sequence[Listener],
) -> None:
    """Run ``test`` once and broadcast its outcome(s) to ``listeners``."""
    TestExecutorTask(test=test, result_factory=result_factory, listeners=listeners)()
