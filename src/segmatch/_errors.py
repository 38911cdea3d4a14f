"""Exception taxonomy for segmatch.

Matching itself never raises: a pattern either matches or the matcher
returns None. Exceptions are reserved for the outer surfaces: compiling a
pattern string, parsing configuration, and validating commander input.
"""

from __future__ import annotations

from typing import Any


class SegmatchError(Exception):
    """Base class for all segmatch errors."""


class PatternParseError(SegmatchError):
    """A pattern string could not be compiled into tokens."""

    def __init__(self, message: str, pattern: str, position: int) -> None:
        self.pattern = pattern
        self.position = position
        super().__init__(message)


class ValidationError(SegmatchError):
    """An argument passed to the commander was malformed."""

    def __init__(self, message: str, field: str, value: Any = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message)


class ConfigParseError(SegmatchError):
    """Error parsing a config dict into config types."""
