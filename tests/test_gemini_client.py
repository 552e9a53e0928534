from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from recipe_importer.clients.gemini import GeminiClient
from recipe_importer.core.errors import UpstreamError


def _client(handler) -> GeminiClient:
    return GeminiClient(api_key="k-123", model="gemini-test", transport=httpx.MockTransport(handler))


def _ok(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}, "finishReason": "STOP"}]}


def test_generate_posts_prompt_and_returns_text():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_ok('{"name": "Soup"}'))

    out = asyncio.run(_client(handler).generate("extract this"))

    assert out == '{"name": "Soup"}'
    assert seen["url"].path == "/v1beta/models/gemini-test:generateContent"
    assert seen["url"].params["key"] == "k-123"
    assert seen["body"]["contents"] == [{"parts": [{"text": "extract this"}]}]
    assert seen["body"]["generationConfig"] == {"temperature": 0.1, "maxOutputTokens": 4096}


def test_configured_reflects_api_key():
    assert GeminiClient(api_key="x").configured
    assert not GeminiClient(api_key=None).configured
    assert not GeminiClient(api_key="").configured


def test_error_status_raises_upstream_error_with_status():
    client = _client(lambda request: httpx.Response(503, text="overloaded"))

    with pytest.raises(UpstreamError, match="503 - overloaded"):
        asyncio.run(client.generate("p"))


def test_transport_failure_raises_upstream_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamError, match="Failed to call Gemini API"):
        asyncio.run(_client(handler).generate("p"))


def test_non_json_body_raises_upstream_error():
    client = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(UpstreamError, match="as JSON"):
        asyncio.run(client.generate("p"))


def test_blocked_prompt_raises_upstream_error():
    client = _client(lambda request: httpx.Response(200, json={"promptFeedback": {"blockReason": "SAFETY"}}))

    with pytest.raises(UpstreamError, match="Content blocked by Gemini: SAFETY"):
        asyncio.run(client.generate("p"))


def test_safety_finish_reason_raises_upstream_error():
    body = {"candidates": [{"finishReason": "SAFETY"}]}
    client = _client(lambda request: httpx.Response(200, json=body))

    with pytest.raises(UpstreamError, match="blocked"):
        asyncio.run(client.generate("p"))


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
    ],
)
def test_missing_text_raises_upstream_error(body):
    client = _client(lambda request: httpx.Response(200, json=body))

    with pytest.raises(UpstreamError, match="No text content"):
        asyncio.run(client.generate("p"))


@pytest.mark.parametrize(
    "body",
    [
        {"promptFeedback": "blocked?", "candidates": []},
        {"candidates": {"0": {"content": {"parts": [{"text": "x"}]}}}},
        {"candidates": ["not a dict"]},
        {"candidates": [{"content": "text instead of object"}]},
        {"candidates": [{"content": {"parts": {"text": "x"}}}]},
        {"candidates": [{"content": {"parts": [{"text": 42}]}}]},
    ],
)
def test_unexpected_shapes_raise_upstream_error(body):
    client = _client(lambda request: httpx.Response(200, json=body))

    with pytest.raises(UpstreamError):
        asyncio.run(client.generate("p"))
