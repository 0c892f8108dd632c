"""Test factories for generating outcomes."""

from datetime import datetime, timedelta, timezone

from polyfactory import Use
from polyfactory.factories import DataclassFactory

from diagnostic_runner.models.result import ErrorOutcome, FailOutcome, PassOutcome

STARTED_AT = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
FINISHED_AT = STARTED_AT + timedelta(seconds=1.5)


class PassOutcomeFactory(DataclassFactory[PassOutcome]):
    """Factory for PassOutcome."""

    __model__ = PassOutcome

    started_at = STARTED_AT
    finished_at = FINISHED_AT


class FailOutcomeFactory(DataclassFactory[FailOutcome]):
    """Factory for FailOutcome."""

    __model__ = FailOutcome

    started_at = STARTED_AT
    finished_at = FINISHED_AT


class ErrorOutcomeFactory(DataclassFactory[ErrorOutcome]):
    """Factory for ErrorOutcome."""

    __model__ = ErrorOutcome

    cause = Use(RuntimeError, "boom")
    started_at = None
    finished_at = None
