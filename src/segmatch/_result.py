"""MatchResult — accumulator for one matching attempt."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from segmatch._segments import Segment


@dataclass(slots=True)
class MatchResult:
    """Matched segments, extracted parameters and leftover segments.

    Created fresh by the matcher for every attempt. ``params`` keeps
    first-seen insertion order.
    """

    matched: list[Segment] = field(default_factory=list)
    params: dict[str, Any] = field(default_factory=dict)
    remaining: list[Segment] = field(default_factory=list)

    def add_matched(self, segment: Segment) -> None:
        self.matched.append(segment)

    def add_param(self, name: str, value: Any) -> None:
        self.params[name] = value

    def add_remaining(self, segment: Segment) -> None:
        self.remaining.append(segment)

    def has_param(self, name: str) -> bool:
        return name in self.params

    def is_valid(self) -> bool:
        """A result is valid if it extracted a parameter (defaults count) or consumed a segment.

        An empty pattern therefore never produces a valid result.
        """
        return bool(self.params) or bool(self.matched)

    def as_dict(self) -> dict[str, Any]:
        """Return the wire shape ``{matched, params, remaining}``."""
        return {
            "matched": list(self.matched),
            "params": dict(self.params),
            "remaining": list(self.remaining),
        }
