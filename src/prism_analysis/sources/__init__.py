from prism_analysis.sources.base import SourceClient
from prism_analysis.sources.news import NewsSourceClient
from prism_analysis.sources.reddit import RedditSourceClient
from prism_analysis.sources.web import WebSourceClient

__all__ = [
    "NewsSourceClient",
    "RedditSourceClient",
    "SourceClient",
    "WebSourceClient",
]
