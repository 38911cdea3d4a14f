"""Segment model and OneBot12 segment constructors.

A segment is the wire shape exchanged with the message-protocol layer:

    {"type": "text", "data": {"text": "hello"}}

Segments are plain dicts so callers can pass protocol payloads through
unchanged. The constructors below exist to cut boilerplate in tests and
examples; they are not required to use the matcher.
"""

from __future__ import annotations

from typing import Any, TypedDict


class Segment(TypedDict):
    """One structured unit of an incoming message."""

    type: str
    data: dict[str, Any]


# Segment type tags with special meaning to the matcher.
TEXT = "text"
FACE = "face"
IMAGE = "image"
AT = "at"


def segment(type_: str, /, **data: Any) -> Segment:
    """Build a segment of an arbitrary type.

    >>> segment("face", id=1)
    {'type': 'face', 'data': {'id': 1}}
    """
    if not type_:
        msg = "segment type must be a non-empty string"
        raise ValueError(msg)
    return {"type": type_, "data": dict(data)}


def text(value: str) -> Segment:
    return segment(TEXT, text=value)


def face(id_: int | str) -> Segment:
    return segment(FACE, id=id_)


def image(file: str | None = None, url: str | None = None) -> Segment:
    """Build an image segment. Only the fields given are set."""
    data: dict[str, Any] = {}
    if file is not None:
        data["file"] = file
    if url is not None:
        data["url"] = url
    return segment(IMAGE, **data)


def at(user_id: int | str) -> Segment:
    return segment(AT, user_id=user_id)
