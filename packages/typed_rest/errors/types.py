"""Canonical error types for typed REST calls.

Every failure a call can hit is represented by one ``ErrorDetail`` whose
``kind`` is one of four categories. Callers branch on ``kind`` and
``status_code`` only; ``cause`` is retained for diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from packages.typed_rest.http.status import StatusClass


class ErrorKind(str, Enum):
    """Failure categories surfaced in a result envelope."""

    HTTP_STATUS = "http_status"
    DECODE = "decode"
    TRANSPORT = "transport"
    ENCODE = "encode"


class Stage(str, Enum):
    """Pipeline stage a fault escaped from."""

    ENCODE = "encode"
    TRANSPORT = "transport"
    CLASSIFY = "classify"
    DECODE = "decode"


@dataclass(frozen=True)
class ErrorDetail:
    """Structured error object carried by a failed ``RestResult``."""

    kind: ErrorKind
    message: str
    status_code: int | None = None
    cause: BaseException | None = None
    status_class: StatusClass | None = None
    retryable: bool = False
    metadata: Mapping[str, str] = field(default_factory=dict)
