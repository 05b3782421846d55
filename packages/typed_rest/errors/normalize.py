"""Exception normalization for the typed REST pipeline.

Typed faults map by type. Anything else is attributed to the stage it escaped
from, so a misbehaving collaborator still yields one of the four error kinds.
"""

from __future__ import annotations

from .factories import decode_error, encode_error, status_error, transport_error
from .faults import DecodeFault, EncodeFault, StatusRejected, TransportFault
from .types import ErrorDetail, Stage


def exception_to_error(
    exc: Exception,
    *,
    stage: Stage,
    method: str = "",
    url: str = "",
) -> ErrorDetail:
    """Normalize one pipeline exception into an ``ErrorDetail``."""
    metadata = {"exception_type": type(exc).__name__, "stage": stage.value}
    if method:
        metadata["method"] = method
    if url:
        metadata["url"] = url

    if isinstance(exc, EncodeFault):
        return encode_error(exc.message, cause=exc.cause or exc, metadata=metadata)

    if isinstance(exc, TransportFault):
        return transport_error(exc.message, cause=exc.cause or exc, metadata=metadata)

    if isinstance(exc, StatusRejected):
        return status_error(
            exc.message,
            status_code=exc.status_code,
            cause=exc,
            metadata=metadata,
        )

    if isinstance(exc, DecodeFault):
        return decode_error(exc.message, cause=exc.cause or exc, metadata=metadata)

    message = str(exc) or f"unexpected {type(exc).__name__} during {stage.value}"
    if stage == Stage.ENCODE:
        return encode_error(message, cause=exc, metadata=metadata)
    if stage == Stage.DECODE:
        return decode_error(message, cause=exc, metadata=metadata)
    # Classification is pure; a fault there can only come from a broken
    # response object handed back by the transport.
    return transport_error(message, cause=exc, metadata=metadata)
