"""Pattern tokens — one compiled matching instruction each.

The PatternToken union is closed and pattern-matchable via match/case:

| Token               | Consumes                                       |
|---------------------|------------------------------------------------|
| LiteralToken        | a prefix of a text segment                     |
| TypedLiteralToken   | one segment of a given type with a fixed value |
| ParameterToken      | one segment, captured under a name             |
| RestParameterToken  | a run of segments, captured as a list          |

Tokens are frozen after construction. The compiler builds them through the
factory functions at the bottom of this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class LiteralToken:
    """Exact, case- and whitespace-sensitive text prefix."""

    value: str


@dataclass(frozen=True, slots=True)
class TypedLiteralToken:
    """A segment of segment_type whose mapped field equals (or, for text, contains) value."""

    segment_type: str
    value: str


@dataclass(frozen=True, slots=True)
class ParameterToken:
    """Extract one segment into a named parameter.

    data_type "text" captures the whole text field of a text segment; any
    other data_type captures the entire segment of that type.

    When optional and unmatched, the parameter takes ``default``. A default
    of None falls back to "" for text parameters and None otherwise.
    """

    name: str
    data_type: str = "text"
    optional: bool = False
    default: Any = None


@dataclass(frozen=True, slots=True)
class RestParameterToken:
    """Greedily collect consecutive segments of data_type (None = any type)."""

    name: str
    data_type: str | None = None


type PatternToken = LiteralToken | TypedLiteralToken | ParameterToken | RestParameterToken


def is_optional(token: PatternToken) -> bool:
    """Only parameters can be optional."""
    return isinstance(token, ParameterToken) and token.optional


def literal(value: str) -> LiteralToken:
    return LiteralToken(value)


def typed_literal(segment_type: str, value: str) -> TypedLiteralToken:
    return TypedLiteralToken(segment_type, value)


def parameter(
    name: str,
    data_type: str = "text",
    optional: bool = False,
    default: Any = None,
) -> ParameterToken:
    return ParameterToken(name, data_type, optional, default)


def rest_parameter(name: str, data_type: str | None = None) -> RestParameterToken:
    return RestParameterToken(name, data_type)
