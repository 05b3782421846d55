"""Body decoding over a fully-buffered response body.

A blank body on an accepted response means "no payload" and is not an error.
The single and list entry points are independent: a list payload handed to
``decode_one`` (or the reverse) fails in the codec as a shape mismatch.
"""

from __future__ import annotations

from typing import TypeVar

from .json_codec import Codec

T = TypeVar("T")


def is_blank(body: bytes) -> bool:
    """Return ``True`` when the body holds no payload."""
    return len(body.strip()) == 0


def decode_one(codec: Codec, body: bytes, shape: type[T]) -> T | None:
    """Decode one value, or ``None`` for a blank body."""
    if is_blank(body):
        return None
    return codec.decode_one(body, shape)


def decode_many(codec: Codec, body: bytes, shape: type[T]) -> tuple[T, ...]:
    """Decode an ordered sequence, or ``()`` for a blank body."""
    if is_blank(body):
        return ()
    return tuple(codec.decode_many(body, shape))
