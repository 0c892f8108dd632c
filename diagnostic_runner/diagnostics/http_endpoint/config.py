"""Configuration for the HTTP endpoint diagnostic."""

from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, Field, HttpUrl


class HttpEndpointConfig(BaseModel):
    """Configuration for the HTTP endpoint diagnostic."""

    url: HttpUrl
    name: str | None = None
    method: Literal["GET", "HEAD"] = "GET"
    expected_status: int = Field(default=200, ge=100, le=599)
    contains: str | None = None
    timeout: float = Field(default=10.0, gt=0)
    headers: Mapping[str, str] = Field(default_factory=dict)
