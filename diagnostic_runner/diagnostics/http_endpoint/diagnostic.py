"""HTTP endpoint diagnostic implementation."""

import asyncio
import logging
from dataclasses import dataclass

import aiohttp
from yarl import URL

from diagnostic_runner.diagnostics.base import DiagnosticTest
from diagnostic_runner.diagnostics.http_endpoint.config import HttpEndpointConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class EndpointResponse:
    """What the probe observed."""

    status: int
    body: str


class HttpEndpointDiagnostic(DiagnosticTest):
    """Checks that an HTTP endpoint answers with the expected status.

    The diagnostic owns a private event loop for the duration of one
    execution: setup creates it, cleanup closes it.
    """

    def __init__(self, config: HttpEndpointConfig) -> None:
        self.config = config
        self._loop: asyncio.AbstractEventLoop | None = None

    @classmethod
    def from_config(cls, config: HttpEndpointConfig) -> "HttpEndpointDiagnostic":
        return cls(config)

    @property
    def name(self) -> str:
        return self.config.name or f"{self.config.method} {self.config.url}"

    @property
    def url(self) -> URL:
        return URL(str(self.config.url))

    def setup(self) -> None:
        self._loop = asyncio.new_event_loop()

    def test(self) -> None:
        if self._loop is None:
            raise RuntimeError("setup() must run before test()")

        response = self._loop.run_until_complete(self.probe())
        log.debug("%s answered %d", self.url, response.status)

        if response.status != self.config.expected_status:
            raise AssertionError(
                f"expected status {self.config.expected_status}, got {response.status}"
            )
        contains = self.config.contains
        if contains is not None and contains not in response.body:
            raise AssertionError(f"response body does not contain {contains!r}")

    def cleanup(self) -> None:
        loop, self._loop = self._loop, None
        if loop is None:
            return
        try:
            loop.run_until_complete(loop.shutdown_asyncgens())
            loop.run_until_complete(loop.shutdown_default_executor())
        finally:
            loop.close()

    async def probe(self) -> EndpointResponse:
        """Send the configured request and capture the response."""
        timeout = aiohttp.ClientTimeout(total=self.config.timeout)
        async with aiohttp.ClientSession(
            timeout=timeout, headers=dict(self.config.headers)
        ) as session:
            async with session.request(self.config.method, self.url) as response:
                body = "" if self.config.method == "HEAD" else await response.text()
                return EndpointResponse(status=response.status, body=body)
