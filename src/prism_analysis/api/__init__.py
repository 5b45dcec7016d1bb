"""HTTP boundary for the analysis pipeline."""

from prism_analysis.api.app import create_app

__all__ = ["create_app"]
