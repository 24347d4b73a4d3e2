"""HTTP client wrapper for probes.

Every request either returns the server's response, whatever its status code,
or a synthetic response describing the transport failure. Callers never see
``httpx`` exceptions.
"""

import time
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

from apiprobe.core.config import get_settings
from apiprobe.core.logging import get_logger
from apiprobe.core.serialization import sanitize


class ProbeResponse(BaseModel):
    """Observed (or synthesized) response to one probe request."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    status_code: int
    reason: str = ""
    headers: httpx.Headers = Field(default_factory=httpx.Headers)
    data: Any = None
    elapsed_ms: int = 0
    error: str | None = None

    @property
    def is_synthetic(self) -> bool:
        return self.error is not None

    @classmethod
    def from_httpx(cls, response: httpx.Response, elapsed_ms: int) -> "ProbeResponse":
        return cls(
            status_code=response.status_code,
            reason=response.reason_phrase,
            headers=response.headers,
            data=_decode_body(response),
            elapsed_ms=elapsed_ms,
        )

    @classmethod
    def from_error(cls, exc: Exception, elapsed_ms: int = 0) -> "ProbeResponse":
        message = str(exc) or type(exc).__name__
        response = exc.response if isinstance(exc, httpx.HTTPStatusError) else None

        if response is None:
            return cls(
                status_code=500,
                reason="Error",
                data={"message": message},
                elapsed_ms=elapsed_ms,
                error=message,
            )

        return cls(
            status_code=response.status_code,
            reason=response.reason_phrase or "Error",
            headers=httpx.Headers(sanitize(dict(response.headers))),
            data=sanitize(_decode_body(response)) or {"message": message},
            elapsed_ms=elapsed_ms,
            error=message,
        )


def _decode_body(response: httpx.Response) -> Any:
    """JSON-decode a body when possible, otherwise return its text."""
    if not response.content:
        return ""
    try:
        return response.json()
    except ValueError:
        return response.text


class HTTPClient:
    """Async HTTP client wrapper used by probes.

    ``default_transport`` lets an embedding application (or a test suite)
    route every probe request through a custom ``httpx`` transport.
    """

    default_transport: httpx.AsyncBaseTransport | None = None

    def __init__(
        self,
        timeout: float | None = None,
        retries: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = get_settings()
        self.timeout = timeout if timeout is not None else self.settings.http_timeout
        self.retries = retries if retries is not None else self.settings.http_retries
        self._transport = transport or self.default_transport
        self._client: httpx.AsyncClient | None = None
        self.logger = get_logger("http")

    async def __aenter__(self) -> "HTTPClient":
        transport = self._transport or httpx.AsyncHTTPTransport(
            retries=self.retries,
            verify=self.settings.verify_tls,
        )
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=self.settings.follow_redirects,
            transport=transport,
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | httpx.Headers | None = None,
        json_body: Any = None,
    ) -> ProbeResponse:
        """Make one request. Any status code counts as a response."""
        if not self._client:
            raise RuntimeError("Client not initialized. Use async with.")

        start = time.perf_counter()
        try:
            response = await self._client.request(
                method,
                url,
                headers=headers,
                json=json_body,
            )
        except httpx.HTTPError as e:
            elapsed_ms = _elapsed_ms(start)
            self.logger.debug(
                "request_failed",
                method=method,
                url=url,
                error=str(e) or type(e).__name__,
            )
            return ProbeResponse.from_error(e, elapsed_ms)

        return ProbeResponse.from_httpx(response, _elapsed_ms(start))


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)
