"""Commander — a compiled pattern plus a chain of callbacks.

    cmd = commander("hello <name:text>").action(lambda params, *rest: params["name"])
    cmd.match([text("hello Alice")])   # ["Alice"]

The first callback receives ``(params, *remaining)``; each later callback
receives the previous callback's return value. Callbacks run strictly in
registration order. A pattern that does not match runs no callbacks and
yields ``[]``.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from segmatch._config import CommanderConfig, parse_commander_config
from segmatch._errors import ValidationError
from segmatch._matcher import SegmentMatcher
from segmatch._parser import parse_pattern

if TYPE_CHECKING:
    from segmatch._field_mapping import FieldMapping
    from segmatch._result import MatchResult
    from segmatch._segments import Segment
    from segmatch._tokens import PatternToken

logger = logging.getLogger(__name__)

type Callback = Callable[..., Any]


class Commander:
    """Owns a compiled pattern and drives a callback chain with match results.

    Raises:
        PatternParseError: At construction, if the pattern does not compile.
    """

    def __init__(self, pattern: str, field_map: Mapping[str, Any] | None = None) -> None:
        self._pattern = pattern
        self._matcher = SegmentMatcher(parse_pattern(pattern), field_map)
        self._callbacks: list[Callback] = []

    @classmethod
    def from_config(cls, data: CommanderConfig | dict[str, Any]) -> Commander:
        """Build a Commander from a CommanderConfig or its dict shape."""
        config = data if isinstance(data, CommanderConfig) else parse_commander_config(data)
        return cls(config.pattern, config.field_map)

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def tokens(self) -> tuple[PatternToken, ...]:
        return self._matcher.tokens

    @property
    def field_map(self) -> Mapping[str, FieldMapping]:
        return self._matcher.field_map

    def action(self, callback: Callback) -> Commander:
        """Append a callback to the chain. Returns self for chaining."""
        self._callbacks.append(callback)
        return self

    def match_result(self, segments: Sequence[Segment]) -> MatchResult | None:
        """Run the matcher only, without invoking callbacks."""
        _validate_segments(segments)
        return self._matcher.match(segments)

    def match(self, segments: Sequence[Segment]) -> list[Any]:
        """Match segments and run the callback chain synchronously.

        Awaitables returned by callbacks are passed along as-is; use
        match_async() for async callbacks.
        """
        result = self.match_result(segments)
        if result is None:
            return []
        values: list[Any] = [result.params, *result.remaining]
        for callback in self._callbacks:
            values = [_invoke(callback, values)]
        return values

    async def match_async(self, segments: Sequence[Segment]) -> list[Any]:
        """Match segments and run the callback chain, awaiting each result in turn."""
        result = self.match_result(segments)
        if result is None:
            return []
        values: list[Any] = [result.params, *result.remaining]
        for callback in self._callbacks:
            value = _invoke(callback, values)
            if inspect.isawaitable(value):
                try:
                    value = await value
                except Exception:
                    logger.exception("callback %s failed for %r", _name(callback), self._pattern)
                    raise
            values = [value]
        return values

    def __repr__(self) -> str:
        return f"Commander(pattern={self._pattern!r}, callbacks={len(self._callbacks)})"


def commander(pattern: str, field_map: Mapping[str, Any] | None = None) -> Commander:
    """Create a Commander for pattern."""
    return Commander(pattern, field_map)


def _invoke(callback: Callback, values: list[Any]) -> Any:
    try:
        return callback(*values)
    except Exception:
        logger.exception("callback %s failed", _name(callback))
        raise


def _name(callback: Callback) -> str:
    return getattr(callback, "__qualname__", repr(callback))


def _validate_segments(segments: Any) -> None:
    if not isinstance(segments, (list, tuple)):
        msg = f"segments must be a list of segments, got {type(segments).__name__}"
        raise ValidationError(msg, "segments", segments)
    for i, seg in enumerate(segments):
        if not isinstance(seg, Mapping) or not isinstance(seg.get("type"), str):
            msg = f"segments[{i}] must be a segment dict with a string 'type'"
            raise ValidationError(msg, f"segments[{i}]", seg)
