"""Synthesis via Anthropic's Claude API."""

import logging
import os

import anthropic

from prism_analysis.errors import SynthesisFailure

logger = logging.getLogger(__name__)


class ClaudeSynthesizer:
    """Generate analysis text with Claude.

    The Messages API has no JSON mode, so structure relies on the prompt and
    on the response validator.

    Args:
        model: Anthropic model to use.
        api_key: API key (defaults to CLAUDE_API_KEY, then ANTHROPIC_API_KEY).
        temperature: Sampling temperature.
        max_output_tokens: Upper bound on generated tokens.
        timeout_seconds: Request timeout passed to the SDK.
    """

    def __init__(
        self,
        model: str = "claude-haiku-4-5-20251001",
        api_key: str | None = None,
        *,
        temperature: float = 0.5,
        max_output_tokens: int = 2048,
        timeout_seconds: float = 60.0,
    ) -> None:
        resolved_key = (
            api_key or os.environ.get("CLAUDE_API_KEY") or os.environ.get("ANTHROPIC_API_KEY")
        )
        if not resolved_key:
            raise ValueError("Claude API key required. Pass api_key or set CLAUDE_API_KEY env var.")
        self._client = anthropic.AsyncAnthropic(api_key=resolved_key, timeout=timeout_seconds)
        self._model = model
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens

    async def synthesize(self, prompt: str) -> str:
        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self._max_output_tokens,
                temperature=self._temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIStatusError as e:
            logger.warning("Claude API error %d: %s", e.status_code, e.message)
            raise SynthesisFailure(e.status_code, e.response.text) from e
        except anthropic.APIConnectionError as e:
            logger.warning("Claude request failed: %s", e)
            raise SynthesisFailure(None, str(e)) from e

        response_text = ""
        for block in response.content:
            if hasattr(block, "text"):
                response_text += block.text
        return response_text
