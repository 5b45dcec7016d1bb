"""Topic-analysis aggregation pipeline."""

import asyncio
import dataclasses
import logging
import time
from collections.abc import Sequence

from prism_analysis.data import AnalysisResult, Document, FetchResult
from prism_analysis.errors import InvalidInput
from prism_analysis.normalize import Normalizer
from prism_analysis.prompt import PromptBuilder
from prism_analysis.run_logger import RunLogger, RunRecord
from prism_analysis.sources.base import SourceClient
from prism_analysis.synthesis.base import SynthesisClient
from prism_analysis.validate import ResponseValidator

logger = logging.getLogger(__name__)

TOTAL_KEY = "total"


class AggregationPipeline:
    """Fan out to every source, then synthesize one multi-perspective analysis.

    Flow:
    1. Reject a missing or blank topic before any network call
    2. Fetch from all sources concurrently, each bounded by ``source_timeout_seconds``
    3. Normalize records into documents
    4. Build the prompt
    5. Call the synthesis client
    6. Validate and repair the model output
    7. Attach the documents and per-source counts

    Source failures never fail the run; synthesis and parse failures do.

    Args:
        sources: Source clients, in registration order. Names must be unique.
        synthesizer: Generative-text client.
        normalizer: Record-to-document mapper.
        prompt_builder: Prompt assembler.
        validator: Model output validator.
        source_timeout_seconds: Per-source fetch timeout.
        run_logger: Optional RunLogger for intermediate result logging.
    """

    def __init__(
        self,
        sources: Sequence[SourceClient],
        synthesizer: SynthesisClient,
        *,
        normalizer: Normalizer | None = None,
        prompt_builder: PromptBuilder | None = None,
        validator: ResponseValidator | None = None,
        source_timeout_seconds: float = 10.0,
        run_logger: RunLogger | None = None,
    ) -> None:
        names = [source.name for source in sources]
        if len(set(names)) != len(names):
            raise ValueError(f"Source names must be unique, got {names}")
        if TOTAL_KEY in names:
            raise ValueError(f"'{TOTAL_KEY}' is reserved and cannot be a source name")
        self._sources = list(sources)
        self._synthesizer = synthesizer
        self._normalizer = normalizer or Normalizer()
        self._prompt_builder = prompt_builder or PromptBuilder()
        self._validator = validator or ResponseValidator()
        self._source_timeout = source_timeout_seconds
        self._run_logger = run_logger

    @property
    def source_names(self) -> list[str]:
        return [source.name for source in self._sources]

    async def run(self, topic: object) -> AnalysisResult:
        if not isinstance(topic, str) or not topic.strip():
            raise InvalidInput("Missing or invalid topic")
        topic = topic.strip()

        record = self._run_logger.start_run("aggregation", topic) if self._run_logger else None
        try:
            result = await self._run(topic, record)
        except Exception as e:
            if self._run_logger:
                self._run_logger.finish_run(record, error=f"{type(e).__name__}: {e}")
            raise

        if self._run_logger:
            self._run_logger.finish_run(record, document_count=len(result.sources))
        return result

    async def _run(self, topic: str, record: RunRecord | None) -> AnalysisResult:
        # Step 1: Fetch from all sources in parallel
        t0 = time.monotonic()
        results = await self.fetch_all(topic)
        fetch_duration = time.monotonic() - t0

        if self._run_logger:
            for result in results:
                self._run_logger.log_stage(
                    record,
                    stage="fetch",
                    component=result.source,
                    input_data=topic,
                    output_data=result,
                    duration_seconds=fetch_duration,
                )

        # Step 2: Normalize
        documents = self._normalizer.normalize(results)
        stats = self.source_stats(documents)
        logger.info(
            "Analysis %r: %s (fetched in %.2fs)",
            topic,
            ", ".join(f"{name}={count}" for name, count in stats.items()),
            fetch_duration,
        )
        if self._run_logger:
            self._run_logger.log_stage(
                record,
                stage="normalize",
                component=type(self._normalizer).__name__,
                input_data={"record_count": sum(len(r.records) for r in results)},
                output_data=documents,
                duration_seconds=0.0,
            )

        # Step 3: Build the prompt and synthesize
        prompt = self._prompt_builder.build(topic, documents)
        t0 = time.monotonic()
        raw_text = await self._synthesizer.synthesize(prompt)
        synthesis_duration = time.monotonic() - t0
        logger.info("Synthesis completed in %.2fs (%d chars)", synthesis_duration, len(raw_text))

        if self._run_logger:
            self._run_logger.log_stage(
                record,
                stage="synthesis",
                component=type(self._synthesizer).__name__,
                input_data={"prompt_chars": len(prompt)},
                output_data=raw_text,
                duration_seconds=synthesis_duration,
            )

        # Step 4: Validate and attach sources
        analysis = self._validator.validate(raw_text)
        result = dataclasses.replace(analysis, sources=tuple(documents), source_stats=stats)

        if self._run_logger:
            self._run_logger.log_stage(
                record,
                stage="validation",
                component=type(self._validator).__name__,
                input_data=None,
                output_data=result,
                duration_seconds=0.0,
            )
        return result

    async def fetch_all(self, topic: str) -> list[FetchResult]:
        """Fetch from every source concurrently; results keep registration order."""
        tasks = [self._fetch_one(source, topic) for source in self._sources]
        return list(await asyncio.gather(*tasks))

    async def _fetch_one(self, source: SourceClient, topic: str) -> FetchResult:
        try:
            return await asyncio.wait_for(source.fetch(topic), timeout=self._source_timeout)
        except TimeoutError:
            logger.warning("Source %s timed out after %ss", source.name, self._source_timeout)
            return FetchResult.failure(source.name, f"timed out after {self._source_timeout}s")
        except Exception as e:
            logger.warning("Source %s failed unexpectedly: %s", source.name, e)
            return FetchResult.failure(source.name, str(e))

    def source_stats(self, documents: Sequence[Document]) -> dict[str, int]:
        """Count documents per registered source, plus a ``total`` entry."""
        stats = {source.name: 0 for source in self._sources}
        for document in documents:
            stats[document.source] = stats.get(document.source, 0) + 1
        stats[TOTAL_KEY] = len(documents)
        return stats
