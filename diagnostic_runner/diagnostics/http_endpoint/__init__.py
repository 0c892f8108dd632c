"""HTTP endpoint diagnostic module."""

from diagnostic_runner.diagnostics.http_endpoint.config import HttpEndpointConfig
from diagnostic_runner.diagnostics.http_endpoint.diagnostic import (
    HttpEndpointDiagnostic,
)
from diagnostic_runner.diagnostics.http_endpoint.manifest import (
    http_endpoint_manifest,
)

__all__ = ["HttpEndpointConfig", "HttpEndpointDiagnostic", "http_endpoint_manifest"]
