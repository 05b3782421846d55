"""Transport adapter and response classification."""

from .status import Outcome, StatusClass, Verb, classify, is_retryable_status, status_class
from .transport import DEFAULT_HEADERS, HttpxTransport, RawResponse, Transport

__all__ = [
    "DEFAULT_HEADERS",
    "HttpxTransport",
    "Outcome",
    "RawResponse",
    "StatusClass",
    "Transport",
    "Verb",
    "classify",
    "is_retryable_status",
    "status_class",
]
