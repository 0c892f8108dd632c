"""Models for run configuration loaded from YAML files."""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import Field

from diagnostic_runner.models.base import Model


class DiagnosticEntry(Model):
    """One diagnostic to execute."""

    key: str = Field(..., description="Entry point name or module:attribute path")
    config: Mapping[str, Any] = Field(
        default_factory=dict, description="Configuration passed to the diagnostic"
    )


class RunConfig(Model):
    """Complete run configuration."""

    diagnostics: Sequence[DiagnosticEntry] = Field(
        default_factory=list, description="Diagnostics, executed in order"
    )
