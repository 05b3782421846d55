"""Typed result envelope returned by every ``RestClient`` operation."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Generic, Mapping, TypeVar

from packages.typed_rest.errors import ErrorDetail, ErrorKind

from .meta import CallMeta

T = TypeVar("T")


def _no_headers() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class RestResult(Generic[T]):
    """Uniform outcome of one REST call.

    Exactly one of ``success_value``/``success_values`` is the carrier for a
    successful call, depending on cardinality; ``error_detail`` is set iff
    ``success`` is false.
    """

    success: bool
    http_method: str
    request_path: str
    meta: CallMeta
    success_value: T | None = None
    success_values: tuple[T, ...] | None = None
    error_detail: ErrorDetail | None = None
    status_code: int | None = None
    reason_phrase: str | None = None
    response_headers: Mapping[str, str] = field(default_factory=_no_headers)
    request_headers: Mapping[str, str] = field(default_factory=_no_headers)
    is_multiple: bool = False

    @property
    def has_value(self) -> bool:
        """Return ``True`` when a decoded value or a non-empty sequence is present."""
        if self.is_multiple:
            return bool(self.success_values)
        return self.success_value is not None

    @property
    def error_kind(self) -> ErrorKind | None:
        """Return the error kind, or ``None`` for a successful call."""
        if self.error_detail is None:
            return None
        return self.error_detail.kind
