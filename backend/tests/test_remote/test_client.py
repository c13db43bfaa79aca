"""Tests for the remote generation backend client."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from app.engine.errors import BackendHTTPError, ConfigError, TransportError
from app.models.requests import GenerationRequest
from app.remote.client import BackendAdapter, build_form_fields


def _adapter(handler, api_base="https://gen.example.com/", api_key=""):
    return BackendAdapter(api_base=api_base, api_key=api_key, transport=httpx.MockTransport(handler))


def _generate(adapter, request=None, data=b"\x89PNG fake"):
    return asyncio.run(adapter.generate(request or GenerationRequest(), data, filename="room.png"))


def test_form_fields(kitchen_request):
    assert build_form_fields(kitchen_request) == {
        "roomType": "kitchen",
        "theme": "rustic",
        "palette": "warm",
        "budget": "450000",
        "notes": "open shelving",
    }


def test_fractional_budget_kept():
    assert build_form_fields(GenerationRequest(budget=1234.5))["budget"] == "1234.5"


def test_endpoint_strips_trailing_slash():
    assert BackendAdapter("https://gen.example.com/api/").endpoint == "https://gen.example.com/api/generate"
    assert BackendAdapter("https://gen.example.com").endpoint == "https://gen.example.com/generate"


def test_missing_api_base_fails_before_io():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={"images": []})

    with pytest.raises(ConfigError, match="Set API Base in Settings"):
        _generate(_adapter(handler, api_base="  "))
    assert calls == []


def test_posts_multipart_with_bearer_token(kitchen_request):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("authorization")
        seen["body"] = request.content
        return httpx.Response(200, json={"images": ["a", "b", "c"]})

    images = _generate(_adapter(handler, api_key="sk-test"), kitchen_request)
    assert images == ["a", "b", "c"]
    assert seen["method"] == "POST"
    assert seen["url"] == "https://gen.example.com/generate"
    assert seen["auth"] == "Bearer sk-test"
    body = seen["body"]
    assert b'name="roomType"' in body
    assert b"kitchen" in body
    assert b'name="image"; filename="room.png"' in body


def test_no_auth_header_without_key():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers.get("authorization")
        return httpx.Response(200, json={"images": []})

    _generate(_adapter(handler))
    assert seen["auth"] is None


def test_non_success_status():
    with pytest.raises(BackendHTTPError) as exc:
        _generate(_adapter(lambda request: httpx.Response(503)))
    assert exc.value.status_code == 503
    assert exc.value.message == "API 503"


def test_network_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError, match="Backend unreachable"):
        _generate(_adapter(handler))


def test_invalid_json():
    with pytest.raises(TransportError, match="invalid JSON"):
        _generate(_adapter(lambda request: httpx.Response(200, text="<html>")))


def test_missing_images_key():
    assert _generate(_adapter(lambda request: httpx.Response(200, json={"status": "queued"}))) == []


@pytest.mark.parametrize(
    "payload",
    [
        {"images": [{"url": "https://cdn.example.com/a.png"}]},
        {"images": ["ok.png", 42]},
        {"images": "a.png"},
    ],
)
def test_malformed_images(payload):
    with pytest.raises(TransportError, match="malformed images"):
        _generate(_adapter(lambda request: httpx.Response(200, json=payload)))
