"""Tests for the HTTP probe client."""

import asyncio
import json

import httpx
import pytest

from apiprobe.infrastructure.http import HTTPClient, ProbeResponse

from conftest import refuse, respond


async def _send(**kwargs) -> ProbeResponse:
    async with HTTPClient() as client:
        return await client.send(**kwargs)


def test_error_statuses_are_responses(use_transport):
    use_transport(respond(404, json={"error": "not found"}))

    response = asyncio.run(_send(method="GET", url="https://api.example.com/missing"))

    assert response.status_code == 404
    assert response.reason == "Not Found"
    assert response.data == {"error": "not found"}
    assert not response.is_synthetic


def test_text_body_is_kept_as_text(use_transport):
    use_transport(respond(200, text="<html>hello</html>"))

    response = asyncio.run(_send(method="GET", url="https://api.example.com/"))

    assert response.data == "<html>hello</html>"


def test_headers_are_case_insensitive(use_transport):
    use_transport(respond(200, headers={"X-Frame-Options": "DENY"}))

    response = asyncio.run(_send(method="GET", url="https://api.example.com/"))

    assert response.headers.get("x-frame-options") == "DENY"
    assert response.headers.get("X-FRAME-OPTIONS") == "DENY"


def test_request_carries_method_headers_and_json(use_transport):
    seen = use_transport(respond(201))

    asyncio.run(
        _send(
            method="POST",
            url="https://api.example.com/items",
            headers={"X-Custom": "1"},
            json_body={"name": "widget"},
        )
    )

    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert request.headers["x-custom"] == "1"
    assert json.loads(request.content) == {"name": "widget"}


def test_transport_failure_becomes_synthetic_response(use_transport):
    use_transport(refuse)

    response = asyncio.run(_send(method="GET", url="https://unreachable.example.com/"))

    assert response.status_code == 500
    assert response.reason == "Error"
    assert response.is_synthetic
    assert response.data == {"message": "Connection refused"}
    assert len(response.headers) == 0


def test_timeout_becomes_synthetic_response(use_transport):
    def slow(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    use_transport(slow)

    response = asyncio.run(_send(method="GET", url="https://slow.example.com/"))

    assert response.status_code == 500
    assert response.error == "timed out"


def test_status_error_keeps_transport_status():
    request = httpx.Request("GET", "https://api.example.com/")
    upstream = httpx.Response(502, json={"detail": "bad gateway"}, request=request)
    exc = httpx.HTTPStatusError("Bad Gateway", request=request, response=upstream)

    response = ProbeResponse.from_error(exc)

    assert response.status_code == 502
    assert response.data == {"detail": "bad gateway"}
    assert response.error == "Bad Gateway"


def test_send_requires_context():
    client = HTTPClient()
    with pytest.raises(RuntimeError):
        asyncio.run(client.send("GET", "https://api.example.com/"))


def test_timeout_and_retries_come_from_settings(monkeypatch):
    from apiprobe.core.config import get_settings

    monkeypatch.setenv("APIPROBE_HTTP_TIMEOUT", "5")
    monkeypatch.setenv("APIPROBE_HTTP_RETRIES", "2")
    get_settings.cache_clear()

    client = HTTPClient()
    assert client.timeout == 5
    assert client.retries == 2

    explicit = HTTPClient(timeout=1.5, retries=0)
    assert explicit.timeout == 1.5
    assert explicit.retries == 0
