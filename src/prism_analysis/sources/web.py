"""Generic web search using the official exa-py SDK."""

import logging
import os
from typing import Any

from exa_py import AsyncExa

from prism_analysis.data import FetchResult, WebResult

logger = logging.getLogger(__name__)


class WebSourceClient:
    """Search the open web using the Exa API.

    Uses ``search_and_contents`` with highlights so each result carries a
    short excerpt of the page rather than just a title.

    Args:
        api_key: Exa API key (defaults to EXA_API_KEY env var).
        name: Source tag for documents and statistics.
        max_results: Maximum results to return (1-100).
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        name: str = "Web",
        max_results: int = 10,
    ) -> None:
        self._api_key = api_key or os.environ.get("EXA_API_KEY")
        if not self._api_key:
            raise ValueError("Exa API key required. Pass api_key or set EXA_API_KEY env var.")
        self.name = name
        self._max_results = min(max(max_results, 1), 100)
        self._client = AsyncExa(api_key=self._api_key)

    async def fetch(self, topic: str) -> FetchResult:
        try:
            response = await self._client.search_and_contents(
                topic,
                num_results=self._max_results,
                highlights=True,
            )
        except Exception as e:  # exa-py does not expose a typed error hierarchy
            logger.warning("Error fetching web results for %r: %s", topic, e)
            return FetchResult.failure(self.name, str(e))

        results = getattr(response, "results", None)
        if not isinstance(results, list):
            logger.warning("Exa response has no result list for topic: %r", topic)
            return FetchResult.failure(self.name, "Exa response has no result list")

        records = [_parse_result(r) for r in results[: self._max_results]]
        return FetchResult(source=self.name, records=tuple(records))


def _parse_result(result: Any) -> WebResult:
    """Map an Exa result object to a WebResult."""
    return WebResult(
        url=getattr(result, "url", None) or "",
        title=getattr(result, "title", None) or "",
        snippet=_excerpt(result),
        published_date=getattr(result, "published_date", None),
        author=getattr(result, "author", None),
    )


def _excerpt(result: Any) -> str:
    """Pick the best available excerpt: highlights, then summary, then page text."""
    highlights = getattr(result, "highlights", None)
    if isinstance(highlights, list):
        joined = " ... ".join(h for h in highlights if isinstance(h, str) and h.strip())
        if joined:
            return joined
    for attr in ("summary", "text"):
        value = getattr(result, attr, None)
        if isinstance(value, str) and value.strip():
            return value
    return ""
