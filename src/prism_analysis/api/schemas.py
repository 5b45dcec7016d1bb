"""Pydantic models for the Prism HTTP API."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class AnalyzeRequest(BaseModel):
    topic: str | None = Field(default=None, description="Topic to analyze")


class PerspectiveModel(BaseModel):
    title: str
    sentiment: Literal["Positive", "Negative", "Neutral"]
    key_points: list[str]
    content: str


class DocumentModel(BaseModel):
    source: str = Field(..., description="Source tag, e.g. Reddit or Web")
    title: str
    url: str
    snippet: str
    metadata: dict[str, Any] = Field(default_factory=dict)


class AnalyzeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    topic: str
    summary: str
    perspectives: list[PerspectiveModel]
    contrasting_points: list[str]
    insights: list[str]
    sources: list[DocumentModel]
    source_stats: dict[str, int] = Field(
        ...,
        alias="sourceStats",
        description="Documents per source plus a total",
    )


class ErrorResponse(BaseModel):
    error: str
