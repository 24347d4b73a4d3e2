"""Endpoint description model."""

import json
from typing import Any
from urllib.parse import urlparse

import httpx
from pydantic import ConfigDict, Field, field_validator

from apiprobe.core.exceptions import RequestBuildError
from apiprobe.models.base import BaseSchema, HttpMethod


class EndpointSpec(BaseSchema):
    """A single HTTP endpoint to probe.

    Instances are frozen. Probes that need a variant (for example without
    credentials) build a local copy with ``model_copy``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    url: str = Field(description="Absolute http(s) URL", examples=["https://api.example.com/v1/users"])
    method: HttpMethod = HttpMethod.GET
    headers: dict[str, str] = Field(default_factory=dict)
    body: str | None = Field(default=None, description="Raw request body, expected to be JSON")

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        v = v.strip()
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"URL must use http or https: {v}")
        if not parsed.netloc:
            raise ValueError(f"URL has no host: {v}")
        return v

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("body")
    @classmethod
    def empty_body_is_none(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v

    def header_map(self) -> httpx.Headers:
        """Case-insensitive view of the request headers."""
        return httpx.Headers(self.headers)

    def json_body(self) -> Any:
        """Parse the body as JSON.

        Raises:
            RequestBuildError: If the body is present but not valid JSON.
        """
        if self.body is None:
            return None
        try:
            return json.loads(self.body)
        except ValueError as e:
            raise RequestBuildError(
                f"Request body is not valid JSON: {e}",
                field="body",
            ) from e

    def safe_json_body(self) -> Any:
        """Parse the body as JSON, returning None when it does not parse."""
        try:
            return self.json_body()
        except RequestBuildError:
            return None

    def without_headers(self, names: set[str]) -> "EndpointSpec":
        """Copy of this endpoint with the named headers removed (case-insensitive)."""
        lowered = {name.lower() for name in names}
        headers = {k: v for k, v in self.headers.items() if k.lower() not in lowered}
        return self.model_copy(update={"headers": headers})


class ProbeOptions(BaseSchema):
    """Per-scan HTTP client options. Unset values fall back to settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    timeout: float | None = Field(default=None, gt=0, le=120, description="Request timeout in seconds")
    retries: int | None = Field(default=None, ge=0, le=10, description="Connection retries per request")
