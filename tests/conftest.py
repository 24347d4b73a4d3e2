"""Pytest configuration and fixtures."""

from collections.abc import Callable, Iterator

import httpx
import pytest
import structlog

from apiprobe.core.config import get_settings
from apiprobe.infrastructure.http import HTTPClient
from apiprobe.models import EndpointSpec

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def quiet_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate settings and logging configuration per test."""
    monkeypatch.setenv("APIPROBE_LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def sample_endpoint() -> EndpointSpec:
    """Sample endpoint with credentials."""
    return EndpointSpec(
        url="https://api.example.com/v1/users",
        method="GET",
        headers={"Authorization": "Bearer secret-token", "Accept": "application/json"},
    )


@pytest.fixture
def use_transport(monkeypatch: pytest.MonkeyPatch) -> Callable[[Handler], list[httpx.Request]]:
    """Route every HTTPClient through a mock handler.

    Returns the list that records each request the handler receives.
    """

    def install(handler: Handler) -> list[httpx.Request]:
        seen: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        monkeypatch.setattr(HTTPClient, "default_transport", httpx.MockTransport(recording))
        return seen

    return install


def respond(
    status_code: int = 200,
    headers: dict[str, str] | None = None,
    json: object = None,
    text: str | None = None,
) -> Handler:
    """Handler that always returns the same response."""

    def handler(request: httpx.Request) -> httpx.Response:
        if text is not None:
            return httpx.Response(status_code, headers=headers, text=text)
        return httpx.Response(status_code, headers=headers, json=json if json is not None else {})

    return handler


def refuse(request: httpx.Request) -> httpx.Response:
    """Handler simulating an unreachable host."""
    raise httpx.ConnectError("Connection refused", request=request)
