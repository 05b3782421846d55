"""Factory helpers for creating consistent error details."""

from __future__ import annotations

from typing import Mapping

from packages.typed_rest.http.status import is_retryable_status, status_class

from .types import ErrorDetail, ErrorKind


def encode_error(
    message: str,
    *,
    cause: BaseException | None = None,
    metadata: Mapping[str, str] | None = None,
) -> ErrorDetail:
    """Create an encode-kind error; the request never left the process."""
    return ErrorDetail(
        kind=ErrorKind.ENCODE,
        message=message,
        cause=cause,
        retryable=False,
        metadata=_meta(metadata),
    )


def transport_error(
    message: str,
    *,
    cause: BaseException | None = None,
    metadata: Mapping[str, str] | None = None,
) -> ErrorDetail:
    """Create a transport-kind error."""
    return ErrorDetail(
        kind=ErrorKind.TRANSPORT,
        message=message,
        cause=cause,
        retryable=True,
        metadata=_meta(metadata),
    )


def status_error(
    message: str,
    *,
    status_code: int,
    cause: BaseException | None = None,
    metadata: Mapping[str, str] | None = None,
) -> ErrorDetail:
    """Create an HTTP-status-kind error for a rejected response."""
    return ErrorDetail(
        kind=ErrorKind.HTTP_STATUS,
        message=message,
        status_code=status_code,
        cause=cause,
        status_class=status_class(status_code),
        retryable=is_retryable_status(status_code),
        metadata=_meta(metadata),
    )


def decode_error(
    message: str,
    *,
    cause: BaseException | None = None,
    metadata: Mapping[str, str] | None = None,
) -> ErrorDetail:
    """Create a decode-kind error for an accepted but unreadable response."""
    return ErrorDetail(
        kind=ErrorKind.DECODE,
        message=message,
        cause=cause,
        retryable=False,
        metadata=_meta(metadata),
    )


def _meta(metadata: Mapping[str, str] | None) -> dict[str, str]:
    """Normalize optional metadata into a plain dict."""
    if metadata is None:
        return {}
    return dict(metadata)
