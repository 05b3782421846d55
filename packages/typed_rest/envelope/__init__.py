"""Result envelope and its call-local builder."""

from .builders import Cardinality, EnvelopeBuilder, request_path_of
from .meta import CallMeta, new_call_id, utc_now
from .result import RestResult

__all__ = [
    "CallMeta",
    "Cardinality",
    "EnvelopeBuilder",
    "RestResult",
    "new_call_id",
    "request_path_of",
    "utc_now",
]
