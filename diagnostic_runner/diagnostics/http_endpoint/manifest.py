"""HTTP endpoint diagnostic manifest."""

from diagnostic_runner.diagnostics.http_endpoint.config import HttpEndpointConfig
from diagnostic_runner.diagnostics.http_endpoint.diagnostic import (
    HttpEndpointDiagnostic,
)
from diagnostic_runner.diagnostics.manifest import DiagnosticManifest

http_endpoint_manifest = DiagnosticManifest(
    config_cls=HttpEndpointConfig,
    test_factory=HttpEndpointDiagnostic.from_config,
)
