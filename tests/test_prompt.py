"""Tests for PromptBuilder."""

from prism_analysis.data import Document
from prism_analysis.prompt import NO_SOURCES_INSTRUCTION, OUTPUT_SCHEMA, PromptBuilder


def _docs() -> list[Document]:
    return [
        Document(
            source="Reddit",
            title="EVs are great",
            url="https://reddit.com/r/ev/1",
            snippet="I switched last year.",
            metadata={"subreddit": "ev", "score": 12},
        ),
        Document(source="Web", title="Battery costs", url="", snippet="Costs fell."),
    ]


def test_includes_topic_and_schema() -> None:
    prompt = PromptBuilder().build("electric vehicles", _docs())
    assert '**Topic:** "electric vehicles"' in prompt
    assert OUTPUT_SCHEMA in prompt
    assert "single, valid JSON object" in prompt


def test_sources_are_one_indexed_in_order() -> None:
    prompt = PromptBuilder().build("electric vehicles", _docs())
    assert "**Sources (2 total):**" in prompt
    first = prompt.index("[1] Source: Reddit")
    second = prompt.index("[2] Source: Web")
    assert first < second
    assert "URL: https://reddit.com/r/ev/1" in prompt
    assert 'Additional Context: {"subreddit":"ev","score":12}' in prompt


def test_document_without_url_omits_url_line() -> None:
    text = PromptBuilder().format_sources(_docs()[1:])
    assert "URL:" not in text
    assert "Additional Context" not in text


def test_empty_sources_uses_background_knowledge_instruction() -> None:
    prompt = PromptBuilder().build("quantum gravity", [])
    assert "**Sources (0 total):**" in prompt
    assert NO_SOURCES_INSTRUCTION in prompt
    assert "[1]" not in prompt


def test_schema_lists_every_field_and_sentiment() -> None:
    for field in ("summary", "perspectives", "key_points", "contrasting_points", "insights"):
        assert f'"{field}"' in OUTPUT_SCHEMA
    assert '"Positive", "Negative", "Neutral"' in OUTPUT_SCHEMA


def test_build_is_deterministic() -> None:
    builder = PromptBuilder()
    assert builder.build("topic", _docs()) == builder.build("topic", _docs())
