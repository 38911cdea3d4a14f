"""Tests for pattern tokens, match results and segment constructors."""

from __future__ import annotations

import dataclasses

import pytest

from segmatch import (
    LiteralToken,
    MatchResult,
    ParameterToken,
    RestParameterToken,
    TypedLiteralToken,
    face,
    image,
    is_optional,
    literal,
    parameter,
    rest_parameter,
    segment,
    text,
    typed_literal,
)


class TestTokenFactories:
    def test_literal(self) -> None:
        assert literal("hi ") == LiteralToken("hi ")

    def test_typed_literal(self) -> None:
        token = typed_literal("face", "1")
        assert token == TypedLiteralToken(segment_type="face", value="1")

    def test_parameter_defaults(self) -> None:
        token = parameter("name")
        assert token == ParameterToken(name="name", data_type="text", optional=False, default=None)
        assert not is_optional(token)

    def test_optional_parameter(self) -> None:
        token = parameter("n", "number", optional=True, default=5)
        assert is_optional(token)
        assert token.default == 5

    def test_rest_parameter(self) -> None:
        assert rest_parameter("rest") == RestParameterToken("rest", None)
        assert rest_parameter("faces", "face").data_type == "face"
        assert not is_optional(rest_parameter("rest"))

    def test_tokens_are_frozen(self) -> None:
        token = literal("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.value = "y"  # type: ignore[misc]

    def test_pattern_matchable(self) -> None:
        match parameter("who", "at"):
            case ParameterToken(name=name, data_type="at"):
                assert name == "who"
            case _:
                pytest.fail("parameter token did not match its case")


class TestMatchResult:
    def test_empty_result_is_invalid(self) -> None:
        assert not MatchResult().is_valid()

    def test_param_makes_valid(self) -> None:
        result = MatchResult()
        result.add_param("n", None)
        assert result.is_valid()
        assert result.has_param("n")
        assert not result.has_param("m")

    def test_matched_makes_valid(self) -> None:
        result = MatchResult()
        result.add_matched(text("a"))
        assert result.is_valid()

    def test_remaining_alone_is_invalid(self) -> None:
        result = MatchResult()
        result.add_remaining(text("a"))
        assert not result.is_valid()

    def test_as_dict(self) -> None:
        result = MatchResult()
        result.add_matched(text("a"))
        result.add_param("x", 1)
        result.add_remaining(face(2))
        assert result.as_dict() == {
            "matched": [text("a")],
            "params": {"x": 1},
            "remaining": [face(2)],
        }


class TestSegments:
    def test_text(self) -> None:
        assert text("hi") == {"type": "text", "data": {"text": "hi"}}

    def test_image_only_sets_given_fields(self) -> None:
        assert image(url="u") == {"type": "image", "data": {"url": "u"}}

    def test_empty_type_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            segment("")
