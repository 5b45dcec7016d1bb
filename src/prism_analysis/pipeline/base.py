"""Pipeline protocol for topic analysis."""

from typing import Protocol

from prism_analysis.data import AnalysisResult


class Pipeline(Protocol):
    """Interface for end-to-end topic analysis pipelines."""

    async def run(self, topic: str) -> AnalysisResult:
        """Analyze a topic from multiple sources.

        Args:
            topic: Free-text topic supplied by the user.

        Returns:
            The validated analysis with its sources and per-source statistics.

        Raises:
            InvalidInput: If the topic is missing or blank.
            SynthesisFailure: If the generative service fails.
            MalformedResponse: If the model output is not a JSON object.
        """
        ...
