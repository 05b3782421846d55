"""JSON codec and body decoding."""

from .decoder import decode_many, decode_one, is_blank
from .json_codec import Codec, JsonCodec, Shape

__all__ = [
    "Codec",
    "JsonCodec",
    "Shape",
    "decode_many",
    "decode_one",
    "is_blank",
]
