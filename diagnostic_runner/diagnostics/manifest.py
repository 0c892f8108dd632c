"""Diagnostic manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel

from diagnostic_runner.diagnostics.base import DiagnosticTest


@dataclass(frozen=True, kw_only=True)
class DiagnosticManifest[ConfigT: BaseModel]:
    """Manifest describing a diagnostic plugin.

    The manifest references the configuration class and the factory building
    a fresh diagnostic from a validated configuration, so diagnostics are only
    imported and constructed when selected by key.
    """

    config_cls: type[ConfigT]
    test_factory: Callable[[ConfigT], DiagnosticTest]

    def create(self, raw_config: object) -> DiagnosticTest:
        """Validate ``raw_config`` and build a diagnostic from it."""
        config = self.config_cls.model_validate(raw_config)
        return self.test_factory(config)
