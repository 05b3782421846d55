"""Public error API for typed REST calls."""

from .factories import decode_error, encode_error, status_error, transport_error
from .faults import DecodeFault, EncodeFault, RestFault, StatusRejected, TransportFault
from .normalize import exception_to_error
from .types import ErrorDetail, ErrorKind, Stage

__all__ = [
    "DecodeFault",
    "EncodeFault",
    "ErrorDetail",
    "ErrorKind",
    "RestFault",
    "Stage",
    "StatusRejected",
    "TransportFault",
    "decode_error",
    "encode_error",
    "exception_to_error",
    "status_error",
    "transport_error",
]
