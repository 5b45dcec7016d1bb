from prism_analysis.synthesis.base import SynthesisClient
from prism_analysis.synthesis.claude import ClaudeSynthesizer
from prism_analysis.synthesis.gemini import GeminiSynthesizer

__all__ = [
    "ClaudeSynthesizer",
    "GeminiSynthesizer",
    "SynthesisClient",
]
