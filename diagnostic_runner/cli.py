"""CLI entry point for running diagnostics."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from diagnostic_runner.config_loader import load_run_config
from diagnostic_runner.diagnostics.base import DiagnosticTest
from diagnostic_runner.diagnostics.loading import load_diagnostic_manifest
from diagnostic_runner.executor import execute
from diagnostic_runner.factory import OutcomeFactory
from diagnostic_runner.listeners import (
    STATUS_SYMBOLS,
    Listener,
    LoggingListener,
    OutcomeRecorder,
    format_duration,
)
from diagnostic_runner.models.config import DiagnosticEntry
from diagnostic_runner.models.result import ErrorOutcome, FailOutcome, TestOutcome


def log_results_summary(log: logging.Logger, outcomes: Sequence[TestOutcome]) -> None:
    """Log a formatted summary of diagnostic outcomes."""
    log.info("=" * 80)
    log.info("Diagnostic Results Summary:")
    log.info("=" * 80)

    for outcome in outcomes:
        log.info(
            "%s %s: %s (%s)",
            STATUS_SYMBOLS[outcome.status],
            outcome.name,
            outcome.status,
            format_duration(outcome),
        )
        if (message := outcome_message(outcome)) is not None:
            log.info("  Message: %s", message)


def outcome_message(outcome: TestOutcome) -> str | None:
    """Return the message carried by an outcome, if any."""
    match outcome:
        case FailOutcome() | ErrorOutcome():
            return outcome.message
        case _:
            return None


def format_output(outcomes: Sequence[TestOutcome]) -> dict[str, Any]:
    """Format outcomes for JSON output."""
    results = [
        {
            "name": outcome.name,
            "status": outcome.status,
            "duration": outcome.duration,
            "message": outcome_message(outcome),
        }
        for outcome in outcomes
    ]

    return {
        "total": len(results),
        "passed": sum(1 for r in results if r["status"] == "success"),
        "failed": sum(1 for r in results if r["status"] == "failure"),
        "errors": sum(1 for r in results if r["status"] == "error"),
        "results": results,
    }


def build_diagnostic(entry: DiagnosticEntry) -> DiagnosticTest:
    """Load the diagnostic named by ``entry`` and configure it."""
    manifest = load_diagnostic_manifest(entry.key)
    return manifest.create(entry.config)


def run(entries: Sequence[DiagnosticEntry]) -> int:
    """Run diagnostics one after another and return exit code."""
    log = logging.getLogger("diagnostic_runner")

    if not entries:
        log.info("No diagnostics configured")
        print(json.dumps(format_output([])))
        return 0

    factory = OutcomeFactory()
    recorder = OutcomeRecorder()
    listeners: Sequence[Listener] = (LoggingListener(), recorder)

    log.info("Running %d diagnostic(s)...", len(entries))
    for entry in entries:
        try:
            diagnostic = build_diagnostic(entry)
        except Exception as e:
            outcome = factory.error(entry.key, e, None, None)
            for listener in listeners:
                listener(outcome)
            continue

        execute(diagnostic, factory, listeners)

    log_results_summary(log, recorder.outcomes)
    print(json.dumps(format_output(recorder.outcomes), indent=2))

    return 1 if recorder.has_failures else 0


def collect_entries(
    config_path: Path | None,
    keys: Sequence[str],
    diagnostic_config_json: str,
) -> Sequence[DiagnosticEntry]:
    """Merge diagnostics from a config file and from command line keys."""
    entries: list[DiagnosticEntry] = []
    if config_path is not None:
        entries.extend(load_run_config(config_path).diagnostics)

    if keys:
        config = json.loads(diagnostic_config_json)
        if not isinstance(config, dict):
            raise ValueError("--diagnostic-config must be a JSON object")
        entries.extend(DiagnosticEntry(key=key, config=config) for key in keys)

    return entries


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Run diagnostic tests")
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a YAML run configuration",
    )
    parser.add_argument(
        "--diagnostic",
        action="append",
        default=[],
        help="Diagnostic key or module:attribute path (repeatable)",
    )
    parser.add_argument(
        "--diagnostic-config",
        default="{}",
        help="JSON configuration applied to every --diagnostic",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        entries = collect_entries(
            args.config, args.diagnostic, args.diagnostic_config
        )
    except (OSError, ValueError) as e:
        parser.error(str(e))

    sys.exit(run(entries))


if __name__ == "__main__":  # pragma: no cover
    main()
