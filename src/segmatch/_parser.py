"""Pattern compiler — pattern string → PatternToken tuple.

Grammar (scanned left to right):

| Form                    | Token                              |
|-------------------------|------------------------------------|
| ``{type:value}``        | TypedLiteralToken                  |
| ``<name:type>``         | mandatory ParameterToken           |
| ``[name:type]``         | optional ParameterToken            |
| ``[name:type=default]`` | optional ParameterToken w/ default |
| ``[...name:type]``      | RestParameterToken                 |
| anything else           | LiteralToken (whitespace verbatim) |

Parameter types default to ``text``; a rest parameter without a type
collects any segment. Type names are not checked against a whitelist:
any segment type is accepted.

Default values use ``google-re2`` for number and bare-key recognition,
giving linear-time scanning of pattern text.
"""

from __future__ import annotations

import functools
import json
import logging
from typing import TYPE_CHECKING, Any

import re2

from segmatch._errors import PatternParseError
from segmatch._tokens import literal, parameter, rest_parameter, typed_literal

if TYPE_CHECKING:
    from segmatch._tokens import PatternToken

logger = logging.getLogger(__name__)

PARSE_CACHE_SIZE = 1024

_CLOSING = {"{": "}", "<": ">", "[": "]"}
_REST_PREFIX = "..."

_NUMBER = re2.compile(r"-?\d+(\.\d+)?")
_BARE_KEY = re2.compile(r"([a-zA-Z0-9_]+):")


@functools.lru_cache(maxsize=PARSE_CACHE_SIZE)
def parse_pattern(pattern: str) -> tuple[PatternToken, ...]:
    """Compile a pattern string into tokens.

    Results are cached per pattern string; call ``parse_pattern.cache_clear()``
    to drop the cache.

    Raises:
        PatternParseError: If a bracket is never closed or a parameter has
            no name.
    """
    logger.debug("compiling pattern %r", pattern)
    tokens: list[PatternToken] = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char not in _CLOSING:
            end = _literal_end(pattern, i)
            tokens.append(literal(pattern[i:end]))
            i = end
            continue

        end = _find_closing(pattern, i)
        body = pattern[i + 1 : end - 1]
        if char == "{":
            tokens.append(_parse_typed_literal(body))
        elif char == "<":
            tokens.append(_parse_required(body, pattern, i))
        else:
            tokens.append(_parse_optional(body, pattern, i))
        i = end
    return tuple(tokens)


def _literal_end(pattern: str, start: int) -> int:
    i = start
    while i < len(pattern) and pattern[i] not in _CLOSING:
        i += 1
    return i


def _find_closing(pattern: str, start: int) -> int:
    """Return the index just past the bracket closing the one at start.

    Only the same bracket kind nests: ``[a=[1,2]]`` closes at the last ``]``.
    """
    open_char = pattern[start]
    close_char = _CLOSING[open_char]
    depth = 0
    for i in range(start, len(pattern)):
        if pattern[i] == open_char:
            depth += 1
        elif pattern[i] == close_char:
            depth -= 1
            if depth == 0:
                return i + 1
    msg = f"unmatched opening bracket {open_char!r} at position {start}"
    raise PatternParseError(msg, pattern, start)


def _split_once(content: str, sep: str) -> tuple[str, str | None]:
    head, found, tail = content.partition(sep)
    return head.strip(), (tail.strip() if found else None)


def _parse_typed_literal(body: str) -> PatternToken:
    # Split on the first colon only, so URLs keep theirs.
    seg_type, value = _split_once(body, ":")
    return typed_literal(seg_type, value or "")


def _parse_required(body: str, pattern: str, position: int) -> PatternToken:
    name, data_type = _split_once(body, ":")
    _check_name(name, pattern, position)
    return parameter(name, data_type or "text")


def _parse_optional(body: str, pattern: str, position: int) -> PatternToken:
    if body.startswith(_REST_PREFIX):
        name, data_type = _split_once(body[len(_REST_PREFIX) :], ":")
        _check_name(name, pattern, position)
        return rest_parameter(name, data_type or None)

    declaration, found, default_text = body.partition("=")
    name, data_type = _split_once(declaration, ":")
    _check_name(name, pattern, position)
    default = parse_default_value(default_text) if found else None
    return parameter(name, data_type or "text", optional=True, default=default)


def _check_name(name: str, pattern: str, position: int) -> None:
    if not name:
        msg = f"parameter at position {position} has no name"
        raise PatternParseError(msg, pattern, position)


def parse_default_value(raw: str) -> Any:
    """Interpret the text after ``=`` in an optional parameter.

    - ``{...}`` / ``[...]`` → JSON, retried once with bare keys quoted
    - ``-?\\d+(\\.\\d+)?`` → int or float
    - ``true`` / ``false`` → bool
    - anything else → the stripped string
    """
    value = raw.strip()
    if (value.startswith("{") and value.endswith("}")) or (
        value.startswith("[") and value.endswith("]")
    ):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            pass
        quoted = _BARE_KEY.sub(lambda m: f'"{m.group(1)}":', value)
        try:
            return json.loads(quoted)
        except json.JSONDecodeError:
            return value

    number = _NUMBER.fullmatch(value)
    if number is not None:
        return float(value) if number.group(1) else int(value)

    if value == "true":
        return True
    if value == "false":
        return False
    return value
