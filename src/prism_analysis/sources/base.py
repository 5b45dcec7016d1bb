from typing import Protocol

from prism_analysis.data import FetchResult


class SourceClient(Protocol):
    """Interface for one external content source.

    ``name`` tags every document the source contributes and keys its entry in
    the per-run source statistics, so it must be unique within a pipeline.
    """

    name: str

    async def fetch(self, topic: str) -> FetchResult:
        """Fetch raw records about a topic.

        Implementations must not raise: any failure is reported as
        ``FetchResult.failure(...)`` so the pipeline can carry on with the
        remaining sources.

        Args:
            topic: Free-text topic to search for.

        Returns:
            FetchResult holding at most the client's configured number of records.
        """
        ...
