"""Pydantic configuration models for Prism components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

# ============================================================
# Source Configs
# ============================================================


class RedditSourceConfig(BaseModel):
    """Configuration for RedditSourceClient.

    Credentials are read from REDDIT_CLIENT_ID / REDDIT_CLIENT_SECRET.
    """

    type: Literal["reddit"] = "reddit"
    name: str = "Reddit"
    max_results: int = Field(default=10, ge=1, le=100)
    user_agent: str = "prism-analysis/0.1"
    timeout_seconds: float = Field(default=10.0, gt=0)

    model_config = {"frozen": True}


class WebSourceConfig(BaseModel):
    """Configuration for WebSourceClient (Exa)."""

    type: Literal["web"] = "web"
    name: str = "Web"
    max_results: int = Field(default=10, ge=1, le=100)

    model_config = {"frozen": True}


class NewsSourceConfig(BaseModel):
    """Configuration for NewsSourceClient (GNews)."""

    type: Literal["news"] = "news"
    name: str = "News"
    lang: str = "en"
    max_results: int = Field(default=10, ge=1, le=100)
    timeout_seconds: float = Field(default=10.0, gt=0)

    model_config = {"frozen": True}


SourceConfig = Annotated[
    RedditSourceConfig | WebSourceConfig | NewsSourceConfig,
    Field(discriminator="type"),
]


# ============================================================
# Synthesis Configs
# ============================================================


class GeminiSynthesisConfig(BaseModel):
    """Configuration for GeminiSynthesizer."""

    type: Literal["gemini"] = "gemini"
    model: str = "gemini-2.0-flash"
    temperature: float = Field(default=0.5, ge=0.0, le=2.0)
    max_output_tokens: int = Field(default=2048, ge=1)
    force_json: bool = True
    timeout_seconds: float = Field(default=60.0, gt=0)

    model_config = {"frozen": True}


class ClaudeSynthesisConfig(BaseModel):
    """Configuration for ClaudeSynthesizer."""

    type: Literal["claude"] = "claude"
    model: str = "claude-haiku-4-5-20251001"
    temperature: float = Field(default=0.5, ge=0.0, le=1.0)
    max_output_tokens: int = Field(default=2048, ge=1)
    timeout_seconds: float = Field(default=60.0, gt=0)

    model_config = {"frozen": True}


SynthesisConfig = Annotated[
    GeminiSynthesisConfig | ClaudeSynthesisConfig,
    Field(discriminator="type"),
]


# ============================================================
# Pipeline Config
# ============================================================


class PipelineConfig(BaseModel):
    """Configuration for the aggregation pipeline."""

    source_timeout_seconds: float = Field(default=10.0, gt=0)
    max_snippet_chars: int = Field(default=1000, ge=10)
    max_documents: int = Field(default=30, ge=0)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for intermediate pipeline logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class PrismConfig(BaseModel):
    """Root configuration for Prism."""

    sources: list[SourceConfig] = Field(default_factory=list)
    synthesis: SynthesisConfig = Field(default_factory=GeminiSynthesisConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
