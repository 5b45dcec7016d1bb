"""Tests for ResponseValidator."""

import json

import pytest

from prism_analysis.data import SUMMARY_PLACEHOLDER, Sentiment
from prism_analysis.errors import MalformedResponse
from prism_analysis.validate import (
    UNTITLED_PERSPECTIVE,
    ResponseValidator,
    parse_sentiment,
    strip_code_fences,
)


@pytest.fixture
def validator() -> ResponseValidator:
    return ResponseValidator()


def test_complete_response(validator: ResponseValidator) -> None:
    raw = json.dumps(
        {
            "summary": "EVs are growing.",
            "perspectives": [
                {
                    "title": "Economic",
                    "sentiment": "Positive",
                    "key_points": ["Lower running costs"],
                    "content": "Owners save on fuel.",
                }
            ],
            "contrasting_points": ["Upfront price"],
            "insights": ["Charging access drives adoption"],
        }
    )
    result = validator.validate(raw)

    assert result.summary == "EVs are growing."
    assert len(result.perspectives) == 1
    perspective = result.perspectives[0]
    assert perspective.title == "Economic"
    assert perspective.sentiment is Sentiment.POSITIVE
    assert perspective.key_points == ("Lower running costs",)
    assert result.contrasting_points == ("Upfront price",)
    assert result.insights == ("Charging access drives adoption",)
    assert result.sources == ()


def test_missing_fields_get_defaults(validator: ResponseValidator) -> None:
    result = validator.validate('{"summary": "S"}')
    assert result.summary == "S"
    assert result.perspectives == ()
    assert result.contrasting_points == ()
    assert result.insights == ()


def test_empty_object(validator: ResponseValidator) -> None:
    result = validator.validate("{}")
    assert result.summary == SUMMARY_PLACEHOLDER


def test_null_and_wrong_types_are_repaired(validator: ResponseValidator) -> None:
    raw = json.dumps(
        {
            "summary": None,
            "perspectives": [{"sentiment": "very happy", "key_points": None}, "not a dict"],
            "contrasting_points": "should be a list",
            "insights": ["ok", None, 3, ""],
        }
    )
    result = validator.validate(raw)

    assert result.summary == SUMMARY_PLACEHOLDER
    assert len(result.perspectives) == 1
    perspective = result.perspectives[0]
    assert perspective.title == UNTITLED_PERSPECTIVE
    assert perspective.sentiment is Sentiment.NEUTRAL
    assert perspective.key_points == ()
    assert perspective.content == ""
    assert result.contrasting_points == ()
    assert result.insights == ("ok", "3")


def test_strips_code_fences(validator: ResponseValidator) -> None:
    raw = '```json\n{"summary": "Fenced"}\n```'
    assert validator.validate(raw).summary == "Fenced"


def test_not_json_raises(validator: ResponseValidator) -> None:
    with pytest.raises(MalformedResponse) as exc_info:
        validator.validate("not json")
    assert exc_info.value.raw_text == "not json"


def test_deeply_nested_json_raises(validator: ResponseValidator) -> None:
    raw = "[" * 100000 + "]" * 100000
    with pytest.raises(MalformedResponse):
        validator.validate(raw)


def test_top_level_array_raises(validator: ResponseValidator) -> None:
    with pytest.raises(MalformedResponse):
        validator.validate('[{"summary": "S"}]')


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Positive", Sentiment.POSITIVE),
        ("negative", Sentiment.NEGATIVE),
        (" NEUTRAL ", Sentiment.NEUTRAL),
        ("Mixed", Sentiment.NEUTRAL),
        (None, Sentiment.NEUTRAL),
        (1, Sentiment.NEUTRAL),
    ],
)
def test_parse_sentiment(value: object, expected: Sentiment) -> None:
    assert parse_sentiment(value) is expected


def test_strip_code_fences_leaves_plain_text() -> None:
    assert strip_code_fences('  {"a": 1}  ') == '{"a": 1}'
