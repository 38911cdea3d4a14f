"""Conformance tests for segmatch.

Runs every case under tests/fixtures/ through the full path:
pattern string → parse_pattern() → SegmentMatcher.match().

Run with: uv run pytest tests/test_conformance.py -v
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from segmatch import SegmentMatcher, parse_pattern

if TYPE_CHECKING:
    from conftest import FixtureCase


def test_conformance(conformance_case: FixtureCase) -> None:
    case = conformance_case
    matcher = SegmentMatcher(parse_pattern(case.pattern), case.field_map)
    original = copy.deepcopy(case.segments)

    result = matcher.match(case.segments)

    assert case.segments == original, "input segments were mutated"
    if case.expect is None:
        assert result is None, f"{case.id}: expected no match, got {result!r}"
        return

    assert result is not None, f"{case.id}: expected a match, got None"
    assert result.params == case.expect["params"]
    if "matched" in case.expect:
        assert result.matched == case.expect["matched"]
    if "remaining" in case.expect:
        assert result.remaining == case.expect["remaining"]
