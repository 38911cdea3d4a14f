"""Field mapping — which data field(s) to read for a given segment type.

A mapping entry is one of:

- a field name: ``"user_id"``
- a priority-ordered sequence of field names: ``("file", "url")``
- an extractor callable taking the segment and returning a value

Unknown segment types and missing fields are ordinary non-matches, never
errors.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from segmatch._segments import Segment

logger = logging.getLogger(__name__)

type FieldExtractor = Callable[[Segment], Any]
type FieldMapping = str | tuple[str, ...] | FieldExtractor

DEFAULT_FIELD_MAP: Mapping[str, FieldMapping] = MappingProxyType(
    {
        "text": "text",
        "face": "id",
        "image": ("file", "url"),
        "at": "user_id",
    }
)


def merge_field_map(
    overrides: Mapping[str, Any] | None = None,
) -> Mapping[str, FieldMapping]:
    """Merge caller overrides over DEFAULT_FIELD_MAP.

    Overrides win per segment type; defaults for types the caller does not
    mention are kept. Lists are frozen into tuples.
    """
    if not overrides:
        return DEFAULT_FIELD_MAP
    merged: dict[str, FieldMapping] = dict(DEFAULT_FIELD_MAP)
    for seg_type, mapping in overrides.items():
        if isinstance(mapping, list):
            mapping = tuple(mapping)
        merged[seg_type] = mapping
    return MappingProxyType(merged)


def field_values(segment: Segment, mapping: FieldMapping | None) -> Iterator[Any]:
    """Yield the candidate values of segment under mapping, in priority order.

    Field names absent from ``segment["data"]`` are skipped. An extractor
    that returns None or raises a lookup/type error yields nothing.
    """
    if mapping is None:
        return
    data = segment.get("data") or {}
    if isinstance(mapping, str):
        if mapping in data:
            yield data[mapping]
        return
    if callable(mapping):
        try:
            value = mapping(segment)
        except (LookupError, TypeError, ValueError, AttributeError) as e:
            logger.debug("field extractor failed for %r: %s", segment.get("type"), e)
            return
        if value is not None:
            yield value
        return
    for name in mapping:
        if name in data:
            yield data[name]
