"""Tests for outcome models and the default result factory."""

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from diagnostic_runner.factory import OutcomeFactory
from diagnostic_runner.models.result import ErrorOutcome, FailOutcome, PassOutcome

STARTED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)
FINISHED_AT = STARTED_AT + timedelta(milliseconds=250)


def test_outcomes_are_immutable() -> None:
    """Outcomes cannot be modified after construction."""
    outcome = PassOutcome(name="ping", started_at=STARTED_AT, finished_at=FINISHED_AT)

    with pytest.raises(dataclasses.FrozenInstanceError):
        outcome.name = "other"  # type: ignore[misc]


def test_duration_in_seconds() -> None:
    """Duration is the time between the two timestamps."""
    outcome = PassOutcome(name="ping", started_at=STARTED_AT, finished_at=FINISHED_AT)

    assert outcome.duration == 0.25


@pytest.mark.parametrize(
    ("started_at", "finished_at"),
    [(None, None), (STARTED_AT, None), (None, FINISHED_AT)],
)
def test_duration_missing_without_both_timestamps(
    started_at: datetime | None, finished_at: datetime | None
) -> None:
    """Duration is unknown unless both ends were recorded."""
    outcome = FailOutcome(name="ping", started_at=started_at, finished_at=finished_at)

    assert outcome.duration is None


def test_error_message_names_cause_type() -> None:
    """Error messages include the exception type."""
    outcome = ErrorOutcome(name="ping", cause=ConnectionError("refused"))

    assert outcome.message == "ConnectionError: refused"


class TestOutcomeFactory:
    """Tests for OutcomeFactory."""

    def test_success(self) -> None:
        """Builds a pass outcome."""
        outcome = OutcomeFactory().success("ping", STARTED_AT, FINISHED_AT)

        assert outcome == PassOutcome(
            name="ping", started_at=STARTED_AT, finished_at=FINISHED_AT
        )
        assert outcome.status == "success"

    def test_failure(self) -> None:
        """Builds a fail outcome carrying the message."""
        outcome = OutcomeFactory().failure("ping", "expected 5", STARTED_AT, None)

        assert outcome == FailOutcome(
            name="ping", message="expected 5", started_at=STARTED_AT
        )
        assert outcome.status == "failure"

    def test_error(self) -> None:
        """Builds an error outcome carrying the cause."""
        cause = RuntimeError("boom")

        outcome = OutcomeFactory().error("ping", cause, None, None)

        assert outcome == ErrorOutcome(name="ping", cause=cause)
        assert outcome.status == "error"
