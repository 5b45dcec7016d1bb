"""Factory functions to create components from configuration."""

from pathlib import Path

from prism_analysis.auth import RedditCredentialProvider, TokenCache
from prism_analysis.config.models import (
    ClaudeSynthesisConfig,
    GeminiSynthesisConfig,
    NewsSourceConfig,
    PrismConfig,
    RedditSourceConfig,
    SourceConfig,
    SynthesisConfig,
    WebSourceConfig,
)
from prism_analysis.normalize import Normalizer
from prism_analysis.pipeline.aggregation import AggregationPipeline
from prism_analysis.run_logger import RunLogger
from prism_analysis.sources import (
    NewsSourceClient,
    RedditSourceClient,
    SourceClient,
    WebSourceClient,
)
from prism_analysis.synthesis import ClaudeSynthesizer, GeminiSynthesizer, SynthesisClient


def create_source(config: SourceConfig) -> SourceClient:
    """Create a source client from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, RedditSourceConfig):
        credentials = RedditCredentialProvider(
            user_agent=config.user_agent,
            cache=TokenCache(),
            timeout_seconds=config.timeout_seconds,
        )
        return RedditSourceClient(
            credentials,
            name=config.name,
            max_results=config.max_results,
            user_agent=config.user_agent,
            timeout_seconds=config.timeout_seconds,
        )
    if isinstance(config, WebSourceConfig):
        return WebSourceClient(name=config.name, max_results=config.max_results)
    if isinstance(config, NewsSourceConfig):
        return NewsSourceClient(
            name=config.name,
            lang=config.lang,
            max_results=config.max_results,
            timeout_seconds=config.timeout_seconds,
        )
    msg = f"Unknown source config type: {type(config)}"
    raise ValueError(msg)


def create_synthesizer(config: SynthesisConfig) -> SynthesisClient:
    """Create a synthesis client from config."""
    if isinstance(config, GeminiSynthesisConfig):
        return GeminiSynthesizer(
            model=config.model,
            temperature=config.temperature,
            max_output_tokens=config.max_output_tokens,
            force_json=config.force_json,
            timeout_seconds=config.timeout_seconds,
        )
    if isinstance(config, ClaudeSynthesisConfig):
        return ClaudeSynthesizer(
            model=config.model,
            temperature=config.temperature,
            max_output_tokens=config.max_output_tokens,
            timeout_seconds=config.timeout_seconds,
        )
    msg = f"Unknown synthesis config type: {type(config)}"
    raise ValueError(msg)


def create_from_config(
    config: PrismConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[AggregationPipeline, RunLogger | None]:
    """Create a complete pipeline from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (pipeline, run_logger).
        run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    pipeline = AggregationPipeline(
        [create_source(s) for s in config.sources],
        create_synthesizer(config.synthesis),
        normalizer=Normalizer(
            max_snippet_chars=config.pipeline.max_snippet_chars,
            max_documents=config.pipeline.max_documents,
        ),
        source_timeout_seconds=config.pipeline.source_timeout_seconds,
        run_logger=run_logger,
    )
    return (pipeline, run_logger)
