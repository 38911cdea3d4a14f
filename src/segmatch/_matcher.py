"""SegmentMatcher — single-pass matching of pattern tokens against segments.

Evaluation semantics:
- Tokens are consumed strictly left to right; there is no backtracking
- A mandatory token that does not match fails the whole pattern (None)
- An optional parameter that does not match takes its default and
  discards the segment it was tried against
- Segments left after the last token are reported as ``remaining``

The caller's segments are deep-copied into a deque before matching. Text
left over after a literal match is pushed back onto the front of the deque
so the next token sees it.
"""

from __future__ import annotations

import copy
import json
import logging
from collections import deque
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from segmatch._field_mapping import field_values, merge_field_map
from segmatch._result import MatchResult
from segmatch._segments import TEXT, text
from segmatch._tokens import (
    LiteralToken,
    ParameterToken,
    RestParameterToken,
    TypedLiteralToken,
)

if TYPE_CHECKING:
    from segmatch._field_mapping import FieldMapping
    from segmatch._segments import Segment
    from segmatch._tokens import PatternToken

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _TokenMatch:
    """What a single token consumed and, for parameters, what it captured."""

    matched: tuple[Segment, ...]
    param: tuple[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class SegmentMatcher:
    """A compiled token sequence bound to a field mapping.

    The field mapping is merged over DEFAULT_FIELD_MAP at construction.
    Instances hold no per-call state and are safe to share between threads.
    """

    tokens: tuple[PatternToken, ...]
    field_map: Mapping[str, FieldMapping] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", tuple(self.tokens))
        object.__setattr__(self, "field_map", merge_field_map(self.field_map))

    def match(self, segments: Sequence[Segment]) -> MatchResult | None:
        """Match segments against this matcher's tokens.

        Returns the populated MatchResult, or None if a mandatory token did
        not match or the result is not valid (nothing captured, nothing
        consumed).
        """
        result = MatchResult()
        queue: deque[Segment] = deque(copy.deepcopy(list(segments)))

        for token in self.tokens:
            step = _match_token(token, queue, self.field_map) if queue else None
            if step is not None:
                result.matched.extend(step.matched)
                if step.param is not None:
                    result.add_param(*step.param)
                continue

            if not (isinstance(token, ParameterToken) and token.optional):
                logger.debug("mandatory token unmatched, pattern fails: %r", token)
                return None

            value = _default_for(token)
            logger.debug("optional parameter %r defaulted to %r", token.name, value)
            result.add_param(token.name, value)
            if queue:
                queue.popleft()

        result.remaining.extend(queue)
        return result if result.is_valid() else None


def match_segments(
    tokens: Sequence[PatternToken],
    segments: Sequence[Segment],
    field_map: Mapping[str, Any] | None = None,
) -> MatchResult | None:
    """Match segments against tokens in one call.

    Equivalent to ``SegmentMatcher(tokens, field_map).match(segments)``.
    """
    return SegmentMatcher(tuple(tokens), field_map).match(segments)


def _match_token(
    token: PatternToken,
    queue: deque[Segment],
    field_map: Mapping[str, FieldMapping],
) -> _TokenMatch | None:
    """Try token against the head of queue.

    On success the consumed segments are popped from queue; on failure
    queue is left untouched.
    """
    match token:
        case LiteralToken():
            return _match_literal(token, queue)
        case TypedLiteralToken():
            return _match_typed_literal(token, queue, field_map)
        case ParameterToken():
            return _match_parameter(token, queue)
        case RestParameterToken():
            return _match_rest(token, queue)
    return None  # pragma: no cover


def _match_literal(token: LiteralToken, queue: deque[Segment]) -> _TokenMatch | None:
    content = _text_of(queue[0])
    if content is None or not content.startswith(token.value):
        return None
    queue.popleft()
    after = content[len(token.value):]
    if after:
        queue.appendleft(text(after))
    return _TokenMatch(matched=(text(token.value),))


def _match_typed_literal(
    token: TypedLiteralToken,
    queue: deque[Segment],
    field_map: Mapping[str, FieldMapping],
) -> _TokenMatch | None:
    head = queue[0]
    seg_type = head.get("type")
    if seg_type != token.segment_type:
        return None

    for value in field_values(head, field_map.get(seg_type)):
        if _stringify(value) == token.value:
            queue.popleft()
            return _TokenMatch(matched=(head,))
        if seg_type == TEXT and isinstance(value, str) and token.value in value:
            idx = value.find(token.value)
            before, after = value[:idx], value[idx + len(token.value) :]
            queue.popleft()
            if after:
                queue.appendleft(text(after))
            # Text before the match is kept, ahead of the matched part.
            if before:
                return _TokenMatch(matched=(text(before), text(token.value)))
            return _TokenMatch(matched=(text(token.value),))
    return None


def _match_parameter(token: ParameterToken, queue: deque[Segment]) -> _TokenMatch | None:
    head = queue[0]
    if token.data_type == TEXT:
        content = _text_of(head)
        if content is None:
            return None
        queue.popleft()
        return _TokenMatch(matched=(head,), param=(token.name, content))
    if head.get("type") != token.data_type:
        return None
    queue.popleft()
    return _TokenMatch(matched=(head,), param=(token.name, head))


def _match_rest(token: RestParameterToken, queue: deque[Segment]) -> _TokenMatch | None:
    run: list[Segment] = []
    while queue and (token.data_type is None or queue[0].get("type") == token.data_type):
        run.append(queue.popleft())
    if not run:
        return None
    return _TokenMatch(matched=tuple(run), param=(token.name, run))


def _default_for(token: ParameterToken) -> Any:
    if token.default is not None:
        return copy.deepcopy(token.default)
    return "" if token.data_type == TEXT else None


def _text_of(segment: Segment) -> str | None:
    """The text field of a text segment, or None for anything else."""
    if segment.get("type") != TEXT:
        return None
    content = (segment.get("data") or {}).get("text")
    return content if isinstance(content, str) else None


def _stringify(value: Any) -> str:
    """Render a field value the way it is spelled on the wire (JSON)."""
    match value:
        case str():
            return value
        case bool():
            return "true" if value else "false"
        case None:
            return "null"
        case float() if value.is_integer():
            return str(int(value))
        case int() | float():
            return str(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
