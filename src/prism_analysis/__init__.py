"""Prism Analysis: multi-source, multi-perspective topic analysis."""

from importlib import metadata

from prism_analysis.auth import CredentialProvider, RedditCredentialProvider, TokenCache
from prism_analysis.config import PrismConfig, create_from_config, load_config
from prism_analysis.data import (
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
from prism_analysis.errors import (
    CredentialError,
    InvalidInput,
    MalformedResponse,
    PrismError,
    SynthesisFailure,
)
from prism_analysis.normalize import Normalizer
from prism_analysis.pipeline import AggregationPipeline, Pipeline
from prism_analysis.prompt import OUTPUT_SCHEMA, PromptBuilder
from prism_analysis.run_logger import RunLogger
from prism_analysis.sources import (
    NewsSourceClient,
    RedditSourceClient,
    SourceClient,
    WebSourceClient,
)
from prism_analysis.synthesis import ClaudeSynthesizer, GeminiSynthesizer, SynthesisClient
from prism_analysis.validate import ResponseValidator

try:
    __version__ = metadata.version("prism-analysis")
except metadata.PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    # Models
    "AnalysisResult",
    "Document",
    "FetchResult",
    "NewsArticle",
    "Perspective",
    "RawRecord",
    "RedditPost",
    "Sentiment",
    "WebResult",
    # Errors
    "CredentialError",
    "InvalidInput",
    "MalformedResponse",
    "PrismError",
    "SynthesisFailure",
    # Protocols
    "CredentialProvider",
    "Pipeline",
    "SourceClient",
    "SynthesisClient",
    # Credentials
    "RedditCredentialProvider",
    "TokenCache",
    # Sources
    "NewsSourceClient",
    "RedditSourceClient",
    "WebSourceClient",
    # Pipeline stages
    "Normalizer",
    "OUTPUT_SCHEMA",
    "PromptBuilder",
    "ResponseValidator",
    # Synthesizers
    "ClaudeSynthesizer",
    "GeminiSynthesizer",
    # Pipelines
    "AggregationPipeline",
    # Logging
    "RunLogger",
    # Config
    "PrismConfig",
    "create_from_config",
    "load_config",
]
