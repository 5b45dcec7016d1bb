"""Prompt construction for the synthesis step."""

import json
from collections.abc import Sequence

from prism_analysis.data import Document

PREAMBLE = """\
You are a world-class analytical AI, renowned for your ability to synthesize \
information with nuance and clarity. Your task is to analyze the provided topic \
using the diverse sources below (community discussions, web pages and news \
reporting) together with your own knowledge. Stay neutral, separate reported \
facts from opinion, and represent each viewpoint fairly.\
"""

NO_SOURCES_INSTRUCTION = """\
No external sources were retrieved for this topic. Rely on your own background \
knowledge, and do not invent sources, quotes, URLs or citations.\
"""

INSTRUCTIONS = """\
Analyze the topic using all available sources and your knowledge. Pay special \
attention to:
- Different perspectives from different platforms (forums vs web vs news)
- Community sentiment in discussion threads
- Factual claims made by news reporting\
"""

OUTPUT_SCHEMA = """\
Generate a JSON object with the following exact structure:

{
  "summary": "A concise, neutral, synthesized summary of the entire topic, written in an encyclopedic tone.",
  "perspectives": [
    {
      "title": "Name of the perspective (e.g. Economic Viewpoint)",
      "sentiment": "Positive",
      "key_points": [
        "First key takeaway or argument of this perspective.",
        "Second key takeaway or argument."
      ],
      "content": "A detailed, paragraph-form explanation of this perspective."
    }
  ],
  "contrasting_points": [
    "A point summarizing a key area of disagreement between perspectives."
  ],
  "insights": [
    "A hidden insight, a note on potential bias, or an unexpected overlap."
  ]
}

Field rules:
- "summary" is a string.
- "perspectives" is an array of objects with exactly the fields "title" (string), \
"sentiment" (string), "key_points" (array of strings) and "content" (string).
- "sentiment" must be exactly one of: "Positive", "Negative", "Neutral".
- "key_points", "contrasting_points" and "insights" are arrays of strings.
- If you cannot find multiple perspectives, provide one broad, balanced perspective.
- If no insights, contrasts or key points are found, return an empty array [] for \
that field. Never return null and never omit a field.\
"""

JSON_ONLY_RULE = """\
Your entire response MUST be a single, valid JSON object. Do not include any text, \
markdown or explanations outside of it.\
"""


class PromptBuilder:
    """Assemble the synthesis prompt for a topic and its documents.

    The schema block is the same on every call; the response validator relies
    on the model having been shown it.
    """

    def build(self, topic: str, documents: Sequence[Document]) -> str:
        """Return the full prompt text.

        Args:
            topic: The user's topic.
            documents: Normalized documents, listed 1-indexed in order.
        """
        sections = [
            PREAMBLE,
            f'**Topic:** "{topic}"',
            f"**Sources ({len(documents)} total):**\n{self.format_sources(documents)}",
            "---",
            f"**Instructions:**\n{INSTRUCTIONS}",
            OUTPUT_SCHEMA,
            f"**Rules:**\n{JSON_ONLY_RULE}",
        ]
        return "\n\n".join(sections) + "\n"

    def format_sources(self, documents: Sequence[Document]) -> str:
        if not documents:
            return NO_SOURCES_INSTRUCTION
        return "\n\n".join(
            _format_document(doc, index) for index, doc in enumerate(documents, start=1)
        )


def _format_document(doc: Document, index: int) -> str:
    """Format one document as a numbered prompt entry."""
    lines = [f"[{index}] Source: {doc.source}", f"Title: {doc.title}", f"Content: {doc.snippet}"]
    if doc.url:
        lines.append(f"URL: {doc.url}")
    if doc.metadata:
        context = json.dumps(dict(doc.metadata), separators=(",", ":"), default=str)
        lines.append(f"Additional Context: {context}")
    return "\n".join(lines)
