"""Synthesis via the Gemini ``generateContent`` REST endpoint."""

import logging
import os
from typing import Any

import httpx

from prism_analysis.errors import SynthesisFailure

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"

logger = logging.getLogger(__name__)


class GeminiSynthesizer:
    """Generate analysis text with a Gemini model.

    When ``force_json`` is set the request asks for ``application/json``
    output, which Gemini enforces server-side.

    Args:
        api_key: Gemini API key (defaults to GEMINI_API_KEY env var).
        model: Gemini model ID.
        temperature: Sampling temperature; mid-low favours consistent structure.
        max_output_tokens: Upper bound on generated tokens.
        force_json: Request a JSON response mime type.
        timeout_seconds: HTTP timeout for the whole request.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        model: str = "gemini-2.0-flash",
        temperature: float = 0.5,
        max_output_tokens: int = 2048,
        force_json: bool = True,
        timeout_seconds: float = 60.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("GEMINI_API_KEY")
        if not self._api_key:
            raise ValueError("Gemini API key required. Pass api_key or set GEMINI_API_KEY env var.")
        self._model = model
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens
        self._force_json = force_json
        self._timeout = timeout_seconds

    async def synthesize(self, prompt: str) -> str:
        generation_config: dict[str, Any] = {
            "temperature": self._temperature,
            "maxOutputTokens": self._max_output_tokens,
        }
        if self._force_json:
            generation_config["responseMimeType"] = "application/json"
        body = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": generation_config,
        }
        url = f"{GEMINI_API_BASE}/models/{self._model}:generateContent"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    url,
                    json=body,
                    headers={"x-goog-api-key": self._api_key},  # type: ignore[dict-item]
                )
        except httpx.TimeoutException as e:
            logger.warning("Gemini request timed out after %ss", self._timeout)
            raise SynthesisFailure(None, "timeout") from e
        except httpx.HTTPError as e:
            logger.warning("Gemini request failed: %s", e)
            raise SynthesisFailure(None, str(e)) from e

        if response.is_error:
            logger.warning("Gemini API error %d: %s", response.status_code, response.text)
            raise SynthesisFailure(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise SynthesisFailure(response.status_code, response.text) from e

        text = _extract_text(data)
        if not text:
            logger.warning("Gemini returned no candidate text")
            return "{}"
        return text


def _extract_text(data: Any) -> str:
    """Join the text parts of the first candidate."""
    if not isinstance(data, dict):
        return ""
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return ""
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return ""
    return "".join(p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str))
