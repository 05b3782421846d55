"""Public typed REST client API."""

from .client import RestClient
from .codec import Codec, JsonCodec, Shape
from .config import HttpSettings, TypedRestSettings, load_settings
from .envelope import CallMeta, RestResult
from .errors import ErrorDetail, ErrorKind
from .http import HttpxTransport, RawResponse, StatusClass, Transport, Verb

__all__ = [
    "CallMeta",
    "Codec",
    "ErrorDetail",
    "ErrorKind",
    "HttpSettings",
    "HttpxTransport",
    "JsonCodec",
    "RawResponse",
    "RestClient",
    "RestResult",
    "Shape",
    "StatusClass",
    "Transport",
    "TypedRestSettings",
    "Verb",
    "load_settings",
]
