"""News search using the GNews API."""

import logging
import os
from typing import Any

import httpx

from prism_analysis.data import FetchResult, NewsArticle

GNEWS_API_URL = "https://gnews.io/api/v4/search"

logger = logging.getLogger(__name__)


class NewsSourceClient:
    """Search recent news articles using the GNews API.

    Args:
        api_key: GNews API key (defaults to GNEWS_API_KEY env var).
        name: Source tag for documents and statistics.
        lang: Language code for results (default: "en").
        max_results: Maximum articles to return (GNews caps this at 100).
        timeout_seconds: HTTP timeout for the search request.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        name: str = "News",
        lang: str = "en",
        max_results: int = 10,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("GNEWS_API_KEY")
        if not self._api_key:
            raise ValueError("GNews API key required. Pass api_key or set GNEWS_API_KEY env var.")
        self.name = name
        self._lang = lang
        self._max_results = min(max(max_results, 1), 100)
        self._timeout = timeout_seconds

    async def fetch(self, topic: str) -> FetchResult:
        params: dict[str, str | int] = {
            "q": topic,
            "lang": self._lang,
            "max": self._max_results,
            "apikey": self._api_key,  # type: ignore[dict-item]
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(GNEWS_API_URL, params=params)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Error fetching news articles for %r: %s", topic, e)
            return FetchResult.failure(self.name, str(e))

        items = data.get("articles") if isinstance(data, dict) else None
        if not isinstance(items, list):
            logger.warning("GNews response has no article list for topic: %r", topic)
            return FetchResult.failure(self.name, "GNews response has no article list")

        articles = [_parse_article(item) for item in items if isinstance(item, dict)]
        return FetchResult(source=self.name, records=tuple(articles[: self._max_results]))


def _parse_article(item: dict[str, Any]) -> NewsArticle:
    publisher = item.get("source")
    return NewsArticle(
        url=str(item.get("url") or ""),
        title=str(item.get("title") or ""),
        description=str(item.get("description") or ""),
        publisher=str(publisher.get("name") or "") if isinstance(publisher, dict) else "",
        published_at=item.get("publishedAt"),
    )
