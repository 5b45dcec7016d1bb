"""Configuration module for Prism."""

from prism_analysis.config.factory import create_from_config
from prism_analysis.config.loader import (
    get_default_config_path,
    load_config,
    resolve_config_path,
)
from prism_analysis.config.models import (
    ClaudeSynthesisConfig,
    GeminiSynthesisConfig,
    LoggingConfig,
    NewsSourceConfig,
    PipelineConfig,
    PrismConfig,
    RedditSourceConfig,
    SourceConfig,
    SynthesisConfig,
    WebSourceConfig,
)

__all__ = [
    "ClaudeSynthesisConfig",
    "GeminiSynthesisConfig",
    "LoggingConfig",
    "NewsSourceConfig",
    "PipelineConfig",
    "PrismConfig",
    "RedditSourceConfig",
    "SourceConfig",
    "SynthesisConfig",
    "WebSourceConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
    "resolve_config_path",
]
