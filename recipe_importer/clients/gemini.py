# recipe_importer/clients/gemini.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from recipe_importer.core import config
from recipe_importer.core.errors import UpstreamError

log = logging.getLogger("recipe_importer.gemini")


class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gemini-2.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com",
        timeout_s: float = 60,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def generate(self, prompt: str, temperature: float = 0.1, max_output_tokens: int = 4096) -> str:
        payload: Dict[str, Any] = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": temperature,
                "maxOutputTokens": max_output_tokens,
            },
        }
        url = f"{self.base_url}/v1beta/models/{self.model}:generateContent"

        try:
            async with httpx.AsyncClient(timeout=self.timeout_s, transport=self.transport) as client:
                r = await client.post(url, params={"key": self.api_key}, json=payload)
        except httpx.HTTPError as e:
            raise UpstreamError(f"Failed to call Gemini API: {e}") from e

        if not r.is_success:
            log.error("gemini error response", extra={"status_code": r.status_code, "body": r.text[:1000]})
            raise UpstreamError(f"Gemini API error: {r.status_code} - {r.text[:200]}")

        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamError("Failed to parse Gemini API response as JSON") from e

        return _generated_text(data)


def _generated_text(data: Any) -> str:
    if not isinstance(data, dict):
        raise UpstreamError("Unexpected Gemini response structure")

    feedback = data.get("promptFeedback")
    block_reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
    if block_reason:
        raise UpstreamError(f"Content blocked by Gemini: {block_reason}")

    candidates = data.get("candidates")
    candidate = candidates[0] if isinstance(candidates, list) and candidates else None
    if not isinstance(candidate, dict):
        candidate = {}
    if candidate.get("finishReason") == "SAFETY":
        raise UpstreamError("Content blocked by Gemini: SAFETY")

    content = candidate.get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    first = parts[0] if isinstance(parts, list) and parts else None
    text = first.get("text") if isinstance(first, dict) else None
    if not isinstance(text, str) or not text:
        log.error("unexpected gemini response", extra={"body": str(data)[:500]})
        raise UpstreamError("No text content in Gemini response")
    return text


def get_model_client() -> GeminiClient:
    # Built per request so configuration changes (and tests) take effect immediately
    return GeminiClient(
        api_key=config.GEMINI_API_KEY,
        model=config.GEMINI_MODEL,
        base_url=config.GEMINI_BASE_URL,
        timeout_s=config.GEMINI_TIMEOUT_S,
    )
