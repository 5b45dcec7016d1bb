"""Pipeline implementations."""

from prism_analysis.pipeline.aggregation import AggregationPipeline
from prism_analysis.pipeline.base import Pipeline

__all__ = [
    "AggregationPipeline",
    "Pipeline",
]
