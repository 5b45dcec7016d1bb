"""Reddit search using the OAuth2 API."""

import logging
from typing import Any

import httpx

from prism_analysis.auth.base import CredentialProvider
from prism_analysis.auth.reddit import DEFAULT_USER_AGENT
from prism_analysis.data import FetchResult, RedditPost
from prism_analysis.errors import CredentialError

REDDIT_SEARCH_URL = "https://oauth.reddit.com/search"
REDDIT_WEB_URL = "https://reddit.com"

logger = logging.getLogger(__name__)


class RedditSourceClient:
    """Search Reddit submissions for a topic.

    Calls the authenticated ``/search`` endpoint (server-side OAuth2 avoids the
    403s the public JSON endpoints return). The bearer token comes from a
    ``CredentialProvider``; token failures degrade to an empty result.

    Args:
        credentials: Provider of Reddit access tokens.
        name: Source tag for documents and statistics.
        max_results: Maximum posts to return (1-100).
        user_agent: User-Agent header; Reddit rejects generic agents.
        timeout_seconds: HTTP timeout for the search request.
    """

    def __init__(
        self,
        credentials: CredentialProvider,
        *,
        name: str = "Reddit",
        max_results: int = 10,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout_seconds: float = 10.0,
    ) -> None:
        self.name = name
        self._credentials = credentials
        self._max_results = min(max(max_results, 1), 100)
        self._user_agent = user_agent
        self._timeout = timeout_seconds

    async def fetch(self, topic: str) -> FetchResult:
        try:
            token = await self._credentials.get_access_token()
        except CredentialError as e:
            logger.warning("Reddit credentials unavailable, skipping source: %s", e)
            return FetchResult.failure(self.name, str(e))

        params: dict[str, str | int] = {
            "q": topic,
            "sort": "relevance",
            "limit": self._max_results,
            "type": "link",
        }
        headers = {
            "Authorization": f"Bearer {token}",
            "User-Agent": self._user_agent,
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(REDDIT_SEARCH_URL, params=params, headers=headers)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 401:
                # Token revoked or expired early; fetch a new one next time.
                self._credentials.invalidate()
            logger.warning("Error fetching Reddit posts for %r: %s", topic, e)
            return FetchResult.failure(self.name, str(e))
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Error fetching Reddit posts for %r: %s", topic, e)
            return FetchResult.failure(self.name, str(e))

        listing = data.get("data") if isinstance(data, dict) else None
        children = listing.get("children") if isinstance(listing, dict) else None
        if not isinstance(children, list):
            logger.warning("No Reddit posts found for topic: %r", topic)
            return FetchResult.failure(self.name, "Reddit response has no post listing")

        posts = [
            _parse_post(child["data"])
            for child in children
            if isinstance(child, dict) and isinstance(child.get("data"), dict)
        ]
        return FetchResult(source=self.name, records=tuple(posts[: self._max_results]))


def _parse_post(post: dict[str, Any]) -> RedditPost:
    """Map a Reddit ``t3`` listing entry to a RedditPost."""
    permalink = post.get("permalink") or ""
    thumbnail = post.get("thumbnail")
    created = post.get("created_utc")
    return RedditPost(
        url=str(post.get("url") or ""),
        post_id=str(post.get("id") or ""),
        title=str(post.get("title") or ""),
        selftext=str(post.get("selftext") or ""),
        author=str(post.get("author") or ""),
        subreddit=str(post.get("subreddit") or ""),
        score=_as_int(post.get("score")),
        num_comments=_as_int(post.get("num_comments")),
        created_utc=float(created) if isinstance(created, (int, float)) else None,
        permalink=f"{REDDIT_WEB_URL}{permalink}" if permalink else "",
        thumbnail=thumbnail if thumbnail and thumbnail != "self" else None,
    )


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    return 0
