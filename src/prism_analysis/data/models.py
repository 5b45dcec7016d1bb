"""Core data models for Prism analysis."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

SUMMARY_PLACEHOLDER = "No summary available."


class Sentiment(StrEnum):
    """Overall stance of a synthesized perspective."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


# ============================================================
# Raw source records
# ============================================================


@dataclass(frozen=True)
class RawRecord:
    """Base type for any record returned by a source client."""

    url: str = ""


@dataclass(frozen=True)
class RedditPost(RawRecord):
    """A Reddit submission returned by the search endpoint."""

    post_id: str = ""
    title: str = ""
    selftext: str = ""
    author: str = ""
    subreddit: str = ""
    score: int = 0
    num_comments: int = 0
    created_utc: float | None = None
    permalink: str = ""
    thumbnail: str | None = None


@dataclass(frozen=True)
class WebResult(RawRecord):
    """A generic web page returned by a web search API."""

    title: str = ""
    snippet: str = ""
    published_date: str | None = None
    author: str | None = None


@dataclass(frozen=True)
class NewsArticle(RawRecord):
    """A news article returned by a news search API."""

    title: str = ""
    description: str = ""
    publisher: str = ""
    published_at: str | None = None


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one source client call.

    A failed fetch carries no records and a short error description. Callers
    treat it like an empty success; it is never raised.
    """

    source: str
    records: tuple[RawRecord, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, source: str, error: str) -> "FetchResult":
        return cls(source=source, records=(), error=error)


# ============================================================
# Normalized documents and analysis output
# ============================================================


@dataclass(frozen=True)
class Document:
    """A normalized unit of retrieved content fed into the prompt."""

    source: str
    title: str
    url: str
    snippet: str
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "title": self.title,
            "url": self.url,
            "snippet": self.snippet,
            "metadata": dict(self.metadata),
        }


@dataclass(frozen=True)
class Perspective:
    """One viewpoint extracted by the synthesis step."""

    title: str
    sentiment: Sentiment = Sentiment.NEUTRAL
    key_points: tuple[str, ...] = ()
    content: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "sentiment": str(self.sentiment),
            "key_points": list(self.key_points),
            "content": self.content,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Root output of an analysis run.

    ``source_stats`` maps every registered source name to the number of
    documents it contributed, plus a ``total`` entry.
    """

    summary: str = SUMMARY_PLACEHOLDER
    perspectives: tuple[Perspective, ...] = ()
    contrasting_points: tuple[str, ...] = ()
    insights: tuple[str, ...] = ()
    sources: tuple[Document, ...] = ()
    source_stats: Mapping[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape returned to clients."""
        return {
            "summary": self.summary,
            "perspectives": [p.to_dict() for p in self.perspectives],
            "contrasting_points": list(self.contrasting_points),
            "insights": list(self.insights),
            "sources": [d.to_dict() for d in self.sources],
            "sourceStats": dict(self.source_stats),
        }
