"""Call-local builder that assembles one frozen ``RestResult``."""

from __future__ import annotations

from enum import Enum
from time import perf_counter
from types import MappingProxyType
from typing import Generic, Iterable, TypeVar
from urllib.parse import urlsplit

from packages.typed_rest.errors import ErrorDetail
from packages.typed_rest.http.transport import RawResponse

from .meta import CallMeta, new_call_id, utc_now
from .result import RestResult

T = TypeVar("T")


class Cardinality(str, Enum):
    """How many decoded values a call carries on success."""

    ONE = "one"
    MANY = "many"
    NONE = "none"


def request_path_of(url: str) -> str:
    """Return path plus query of ``url``, or ``url`` itself when unparseable."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return url
    path = parts.path or "/"
    return f"{path}?{parts.query}" if parts.query else path


class EnvelopeBuilder(Generic[T]):
    """Mutable accumulator owned by exactly one call.

    Stages record into the builder as they complete. The first recorded error
    wins; ``build`` may be called once and returns an immutable result.
    """

    def __init__(
        self,
        *,
        method: str,
        url: str,
        cardinality: Cardinality,
        call_id: str | None = None,
    ) -> None:
        self._method = method.upper()
        self._cardinality = cardinality
        self._request_path = request_path_of(url)
        self._call_id = call_id or new_call_id()
        self._started_at = utc_now()
        self._started = perf_counter()
        self._response: RawResponse | None = None
        self._value: T | None = None
        self._values: tuple[T, ...] | None = None
        self._error: ErrorDetail | None = None
        self._completed = False
        self._built = False

    @property
    def call_id(self) -> str:
        """Return the correlation id of the call being built."""
        return self._call_id

    def record_response(self, response: RawResponse) -> None:
        """Record response metadata; the body is not retained."""
        self._response = response
        if response.request_path:
            self._request_path = response.request_path

    def succeed_one(self, value: T | None) -> None:
        """Record the decoded single value (``None`` when there was no payload)."""
        self._require_cardinality(Cardinality.ONE)
        self._value = value
        self._completed = True

    def succeed_many(self, values: Iterable[T]) -> None:
        """Record the decoded sequence in payload order."""
        self._require_cardinality(Cardinality.MANY)
        self._values = tuple(values)
        self._completed = True

    def succeed_empty(self) -> None:
        """Record success for a call that carries no value."""
        self._require_cardinality(Cardinality.NONE)
        self._completed = True

    def fail(self, error: ErrorDetail) -> None:
        """Record an error unless one was already recorded."""
        if self._error is None:
            self._error = error

    def build(self) -> RestResult[T]:
        """Return the frozen envelope for this call."""
        if self._built:
            raise RuntimeError(f"envelope for call {self._call_id} already built")
        if self._error is None and not self._completed:
            raise RuntimeError(f"envelope for call {self._call_id} is incomplete")
        self._built = True

        success = self._error is None
        response = self._response
        return RestResult(
            success=success,
            http_method=self._method,
            request_path=self._request_path,
            meta=CallMeta(
                call_id=self._call_id,
                started_at=self._started_at,
                duration_ms=round((perf_counter() - self._started) * 1000, 3),
            ),
            success_value=self._value if success else None,
            success_values=self._values if success else None,
            error_detail=self._error,
            status_code=response.status_code if response is not None else None,
            reason_phrase=response.reason_phrase if response is not None else None,
            response_headers=MappingProxyType(
                dict(response.headers) if response is not None else {}
            ),
            request_headers=MappingProxyType(
                dict(response.request_headers) if response is not None else {}
            ),
            is_multiple=self._cardinality == Cardinality.MANY,
        )

    def _require_cardinality(self, expected: Cardinality) -> None:
        if self._cardinality != expected:
            raise ValueError(
                f"call {self._call_id} expects {self._cardinality.value} values, "
                f"not {expected.value}"
            )
