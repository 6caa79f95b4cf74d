"""Tests for DaemonClient - all HTTP traffic goes through httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from webmcp.modules.conversation.client import (
    DaemonClient,
    DaemonRequestError,
    error_from_response,
    path_segment,
)
from webmcp.modules.conversation.tests.fixtures import STATUS_RESPONSE
from webmcp.shared.schemas.tools import CallerContext


def make_client(handler, **kwargs) -> DaemonClient:
    kwargs.setdefault("daemon_url", "http://daemon.test")
    kwargs.setdefault("api_base", "/api")
    return DaemonClient(transport=httpx.MockTransport(handler), **kwargs)


# ---------------------------------------------------------------------------
# Success path
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_request_returns_parsed_body():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=STATUS_RESPONSE)

    result = await make_client(handler).request("/status")

    assert result == STATUS_RESPONSE
    assert str(requests[0].url) == "http://daemon.test/api/status"
    assert requests[0].method == "GET"


@pytest.mark.asyncio
async def test_content_type_always_sent_and_no_auth_without_token():
    captured = {}

    def handler(request):
        captured["headers"] = request.headers
        return httpx.Response(200, json={})

    await make_client(handler).request("/status", CallerContext(user_id="u1"))

    assert captured["headers"]["content-type"] == "application/json"
    assert "authorization" not in captured["headers"]


@pytest.mark.asyncio
async def test_bearer_token_attached_when_present():
    captured = {}

    def handler(request):
        captured["headers"] = request.headers
        return httpx.Response(200, json={})

    await make_client(handler).request("/status", CallerContext(token="tok-123"))

    assert captured["headers"]["authorization"] == "Bearer tok-123"


@pytest.mark.asyncio
async def test_empty_token_sends_no_authorization():
    captured = {}

    def handler(request):
        captured["headers"] = request.headers
        return httpx.Response(200, json={})

    await make_client(handler).request("/status", CallerContext(token=""))

    assert "authorization" not in captured["headers"]


@pytest.mark.asyncio
async def test_post_sends_json_body():
    captured = {}

    def handler(request):
        captured["method"] = request.method
        captured["body"] = json.loads(request.content)
        return httpx.Response(201, json={"created": True})

    result = await make_client(handler).request("/sessions", method="POST", json={"name": "x"})

    assert result == {"created": True}
    assert captured == {"method": "POST", "body": {"name": "x"}}


@pytest.mark.asyncio
async def test_configurable_api_base():
    captured = {}

    def handler(request):
        captured["path"] = request.url.path
        return httpx.Response(200, json={})

    await make_client(handler, api_base="/v2/api/").request("/status")

    assert captured["path"] == "/v2/api/status"


# ---------------------------------------------------------------------------
# Error normalisation
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_error_field_becomes_message():
    client = make_client(lambda r: httpx.Response(404, json={"error": "Session not found"}))

    with pytest.raises(DaemonRequestError, match="^Session not found$") as exc_info:
        await client.request("/sessions/nope/history")

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_missing_error_field_embeds_status():
    client = make_client(lambda r: httpx.Response(500, json={}))

    with pytest.raises(DaemonRequestError, match="500"):
        await client.request("/status")


@pytest.mark.asyncio
async def test_unparseable_error_body_is_generic():
    client = make_client(lambda r: httpx.Response(502, text="<html>Bad gateway</html>"))

    with pytest.raises(DaemonRequestError) as exc_info:
        await client.request("/status")

    assert str(exc_info.value) == "Request failed"


@pytest.mark.asyncio
async def test_transport_error_wrapped():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(DaemonRequestError, match="Request failed") as exc_info:
        await make_client(handler).request("/status")

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_invalid_success_body():
    client = make_client(lambda r: httpx.Response(200, text="not json"))

    with pytest.raises(DaemonRequestError, match="invalid JSON"):
        await client.request("/status")


@pytest.mark.parametrize(
    "response,expected",
    [
        (httpx.Response(403, json={"error": "Forbidden"}), "Forbidden"),
        (httpx.Response(400, json={"error": ""}), "Request failed (400)"),
        (httpx.Response(400, json={"error": 7}), "Request failed (400)"),
        (httpx.Response(500, json=["not", "an", "object"]), "Request failed"),
        (httpx.Response(500, content=b""), "Request failed"),
    ],
)
def test_error_from_response(response, expected):
    assert str(error_from_response(response)) == expected


def test_path_segment_encodes_reserved_characters():
    assert path_segment("my session/1?x") == "my%20session%2F1%3Fx"
    assert path_segment("plain") == "plain"
