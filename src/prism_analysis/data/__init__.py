"""Data models for Prism analysis."""

from prism_analysis.data.models import (
    SUMMARY_PLACEHOLDER,
    AnalysisResult,
    Document,
    FetchResult,
    NewsArticle,
    Perspective,
    RawRecord,
    RedditPost,
    Sentiment,
    WebResult,
)

__all__ = [
    "SUMMARY_PLACEHOLDER",
    "AnalysisResult",
    "Document",
    "FetchResult",
    "NewsArticle",
    "Perspective",
    "RawRecord",
    "RedditPost",
    "Sentiment",
    "WebResult",
]
