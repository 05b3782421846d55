"""Typed faults raised by pipeline collaborators.

Faults never reach callers of ``RestClient``; the pipeline converts them into
``ErrorDetail`` values. Transports and codecs raise them so the conversion can
map by type instead of guessing from third-party exception classes.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RestFault(Exception):
    """Base fault type for typed REST pipeline failures."""

    message: str

    def __str__(self) -> str:
        """Return the human-readable fault message."""
        return self.message


@dataclass(frozen=True)
class EncodeFault(RestFault):
    """Outgoing payload could not be serialized."""

    cause: BaseException | None = None


@dataclass(frozen=True)
class TransportFault(RestFault):
    """No response was obtained from the remote side."""

    method: str = ""
    url: str = ""
    cause: BaseException | None = None


@dataclass(frozen=True)
class StatusRejected(RestFault):
    """Response status is outside the accepted set for the verb."""

    method: str = ""
    url: str = ""
    status_code: int = 0


@dataclass(frozen=True)
class DecodeFault(RestFault):
    """Response body could not be decoded into the requested shape."""

    body_preview: str = ""
    cause: BaseException | None = None
