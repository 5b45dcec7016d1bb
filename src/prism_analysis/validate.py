"""Validation and repair of raw model output into an AnalysisResult."""

import json
import logging
from typing import Any

from prism_analysis.data import SUMMARY_PLACEHOLDER, AnalysisResult, Perspective, Sentiment
from prism_analysis.errors import MalformedResponse

logger = logging.getLogger(__name__)

UNTITLED_PERSPECTIVE = "Untitled perspective"

_SENTIMENTS = {s.value.lower(): s for s in Sentiment}


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence, if present."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        lines = [line for line in cleaned.split("\n") if not line.strip().startswith("```")]
        cleaned = "\n".join(lines)
    return cleaned


def parse_sentiment(value: object) -> Sentiment:
    """Coerce a sentiment label, falling back to Neutral for anything unknown."""
    if isinstance(value, str):
        sentiment = _SENTIMENTS.get(value.strip().lower())
        if sentiment is not None:
            return sentiment
    return Sentiment.NEUTRAL


def _string_list(value: object) -> tuple[str, ...]:
    """Keep the string-like items of a list; anything else becomes empty."""
    if not isinstance(value, list):
        return ()
    items: list[str] = []
    for item in value:
        if isinstance(item, str):
            text = item.strip()
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            text = str(item)
        else:
            continue
        if text:
            items.append(text)
    return tuple(items)


def _parse_perspective(raw: dict[str, Any]) -> Perspective:
    """Parse a single perspective dict from the model response."""
    title = raw.get("title")
    if not isinstance(title, str) or not title.strip():
        title = UNTITLED_PERSPECTIVE
    content = raw.get("content")
    return Perspective(
        title=title.strip(),
        sentiment=parse_sentiment(raw.get("sentiment")),
        key_points=_string_list(raw.get("key_points")),
        content=content.strip() if isinstance(content, str) else "",
    )


class ResponseValidator:
    """Turn raw model text into a fully-populated AnalysisResult.

    Only text that cannot be read as a JSON object is rejected. Every other
    shape problem is repaired with a default so callers always receive every
    field.
    """

    def validate(self, raw_text: str) -> AnalysisResult:
        """Parse and repair model output.

        Args:
            raw_text: Text returned by the synthesis client.

        Returns:
            AnalysisResult with empty ``sources`` and ``source_stats``.

        Raises:
            MalformedResponse: If the text is not a JSON object.
        """
        try:
            parsed = json.loads(strip_code_fences(raw_text))
        except (json.JSONDecodeError, RecursionError) as e:
            logger.warning("Failed to parse model JSON response (%d chars)", len(raw_text))
            raise MalformedResponse(raw_text) from e

        if not isinstance(parsed, dict):
            logger.warning("Model response is %s, not an object", type(parsed).__name__)
            raise MalformedResponse(raw_text)

        summary = parsed.get("summary")
        if not isinstance(summary, str) or not summary.strip():
            summary = SUMMARY_PLACEHOLDER

        raw_perspectives = parsed.get("perspectives")
        perspectives: list[Perspective] = []
        if isinstance(raw_perspectives, list):
            for item in raw_perspectives:
                if isinstance(item, dict):
                    perspectives.append(_parse_perspective(item))

        missing = [
            key
            for key in ("summary", "perspectives", "contrasting_points", "insights")
            if key not in parsed
        ]
        if missing:
            logger.info("Model response missing fields, using defaults: %s", ", ".join(missing))

        return AnalysisResult(
            summary=summary.strip(),
            perspectives=tuple(perspectives),
            contrasting_points=_string_list(parsed.get("contrasting_points")),
            insights=_string_list(parsed.get("insights")),
        )
