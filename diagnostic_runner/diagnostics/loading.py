"""Loading of diagnostics from entry points."""

from importlib import import_module
from importlib.metadata import entry_points
from typing import Any

from diagnostic_runner.diagnostics.manifest import DiagnosticManifest

ENTRY_POINT_GROUP = "diagnostic_runner.diagnostics"


class DiagnosticNotFoundError(Exception):
    """Raised when a diagnostic is not found."""


def load_diagnostic_manifest(key: str) -> DiagnosticManifest[Any]:
    """Load a diagnostic manifest by key.

    Args:
        key: The diagnostic key as registered in pyproject.toml
             (e.g., "http-endpoint"), or an import path of the form
             "package.module:attribute" pointing at a manifest

    Returns:
        The diagnostic manifest instance

    Raises:
        DiagnosticNotFoundError: If no diagnostic with the given key is found

    """
    if ":" in key:
        return _load_from_path(key)

    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            try:
                manifest: DiagnosticManifest[Any] = entry.load()
            except (ImportError, AttributeError) as e:
                raise DiagnosticNotFoundError(
                    f"Diagnostic '{key}' could not be loaded: {e}"
                ) from e
            return manifest

    available = sorted(e.name for e in entries)
    raise DiagnosticNotFoundError(
        f"Diagnostic '{key}' not found. Available diagnostics: {available}"
    )


def _load_from_path(path: str) -> DiagnosticManifest[Any]:
    module_name, _, attribute = path.partition(":")
    try:
        module = import_module(module_name)
    except (ImportError, ValueError, TypeError) as e:
        raise DiagnosticNotFoundError(
            f"Diagnostic '{path}' not found: cannot import {module_name}"
        ) from e

    manifest = getattr(module, attribute, None)
    if not isinstance(manifest, DiagnosticManifest):
        raise DiagnosticNotFoundError(
            f"Diagnostic '{path}' not found: {attribute} is not a diagnostic manifest"
        )
    return manifest
