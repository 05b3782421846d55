"""Verb-specific response status classification."""

from __future__ import annotations

from enum import Enum


class Verb(str, Enum):
    """HTTP verbs supported by the pipeline."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    PUT = "PUT"
    DELETE = "DELETE"


class Outcome(str, Enum):
    """Binary classification of one response status."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"


class StatusClass(str, Enum):
    """Coarse status families, keyed on the leading digit."""

    INFORMATIONAL = "informational"
    SUCCESS = "success"
    REDIRECTION = "redirection"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    UNKNOWN = "unknown"


_DELETE_ACCEPTED: frozenset[int] = frozenset({200, 204})

_STATUS_CLASSES: dict[int, StatusClass] = {
    1: StatusClass.INFORMATIONAL,
    2: StatusClass.SUCCESS,
    3: StatusClass.REDIRECTION,
    4: StatusClass.CLIENT_ERROR,
    5: StatusClass.SERVER_ERROR,
}


def classify(verb: Verb, status_code: int) -> Outcome:
    """Return whether ``status_code`` is accepted for ``verb``."""
    if verb == Verb.DELETE:
        accepted = status_code in _DELETE_ACCEPTED
    else:
        accepted = 200 <= status_code < 300
    return Outcome.ACCEPTED if accepted else Outcome.REJECTED


def status_class(status_code: int) -> StatusClass:
    """Return the status family for one status code."""
    if not 100 <= status_code < 600:
        return StatusClass.UNKNOWN
    return _STATUS_CLASSES[status_code // 100]


def is_retryable_status(status_code: int) -> bool:
    """Return ``True`` for statuses a caller may reasonably retry."""
    return status_code >= 500 or status_code == 429
