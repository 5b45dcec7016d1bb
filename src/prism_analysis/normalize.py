"""Conversion of per-source records into canonical documents."""

import logging
import re
from collections.abc import Sequence
from typing import Any

from prism_analysis.data import Document, FetchResult, NewsArticle, RawRecord, RedditPost, WebResult

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def _clean(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def truncate(text: str, max_chars: int) -> str:
    """Cut text to at most ``max_chars`` characters, preferring a word boundary.

    A trailing ellipsis is added when anything was removed and counts toward
    the limit.
    """
    if len(text) <= max_chars:
        return text
    if max_chars <= 3:
        return text[:max_chars]
    cut = text[: max_chars - 3]
    space = cut.rfind(" ")
    if space > max_chars // 2:
        cut = cut[:space]
    return cut.rstrip() + "..."


def _reddit_fields(post: RedditPost) -> tuple[str, str, str, dict[str, Any]]:
    metadata: dict[str, Any] = {
        "subreddit": post.subreddit,
        "author": post.author,
        "score": post.score,
        "comments": post.num_comments,
    }
    if post.created_utc is not None:
        metadata["created_utc"] = post.created_utc
    url = post.permalink or post.url
    return post.title, url, post.selftext or post.title, metadata


def _web_fields(result: WebResult) -> tuple[str, str, str, dict[str, Any]]:
    metadata: dict[str, Any] = {}
    if result.published_date:
        metadata["published_date"] = result.published_date
    if result.author:
        metadata["author"] = result.author
    return result.title, result.url, result.snippet, metadata


def _news_fields(article: NewsArticle) -> tuple[str, str, str, dict[str, Any]]:
    metadata: dict[str, Any] = {}
    if article.publisher:
        metadata["publisher"] = article.publisher
    if article.published_at:
        metadata["published_at"] = article.published_at
    return article.title, article.url, article.description, metadata


class Normalizer:
    """Map heterogeneous source records onto ``Document``.

    Documents keep the order of the fetch results (source registration
    order), then the order each source returned them in. That order carries
    no ranking meaning.

    Args:
        max_snippet_chars: Snippets longer than this are truncated.
        max_documents: Global ceiling on documents passed to the prompt.
    """

    def __init__(self, *, max_snippet_chars: int = 1000, max_documents: int = 30) -> None:
        self._max_snippet_chars = max_snippet_chars
        self._max_documents = max_documents

    def normalize(self, results: Sequence[FetchResult]) -> list[Document]:
        """Flatten fetch results into documents, dropping ones with no signal."""
        documents: list[Document] = []
        dropped = 0
        for result in results:
            for record in result.records:
                document = self.to_document(result.source, record)
                if document is None:
                    dropped += 1
                    continue
                documents.append(document)

        if dropped:
            logger.info("Dropped %d empty or unrecognised records", dropped)
        if len(documents) > self._max_documents:
            logger.info(
                "Truncating %d documents to the %d-document ceiling",
                len(documents),
                self._max_documents,
            )
            documents = documents[: self._max_documents]
        return documents

    def to_document(self, source: str, record: RawRecord) -> Document | None:
        """Convert a single record, or return None if it should be dropped."""
        if isinstance(record, RedditPost):
            title, url, snippet, metadata = _reddit_fields(record)
        elif isinstance(record, WebResult):
            title, url, snippet, metadata = _web_fields(record)
        elif isinstance(record, NewsArticle):
            title, url, snippet, metadata = _news_fields(record)
        else:
            logger.warning("Skipping record of unknown type %s", type(record).__name__)
            return None

        title = _clean(title)
        snippet = truncate(_clean(snippet), self._max_snippet_chars)
        if not title and not snippet:
            return None
        return Document(source=source, title=title, url=url, snippet=snippet, metadata=metadata)
