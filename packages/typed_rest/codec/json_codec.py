"""JSON codec backed by pydantic ``TypeAdapter`` validation."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from packages.typed_rest.errors.faults import DecodeFault, EncodeFault

T = TypeVar("T")

_PREVIEW_BYTES = 200


class Shape(BaseModel):
    """Base class for decode targets.

    Unknown payload fields are dropped so newer servers do not break older
    clients.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)


class Codec(Protocol):
    """Serialization collaborator used by the pipeline."""

    def encode(self, value: Any) -> bytes:
        """Serialize one value; raise ``EncodeFault`` on failure."""

    def decode_one(self, body: bytes, shape: type[T]) -> T:
        """Decode one value; raise ``DecodeFault`` on failure."""

    def decode_many(self, body: bytes, shape: type[T]) -> list[T]:
        """Decode an ordered list of values; raise ``DecodeFault`` on failure."""


@lru_cache(maxsize=256)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    """Return a cached ``TypeAdapter`` for one shape."""
    return TypeAdapter(shape)


def _preview(body: bytes) -> str:
    """Return a short, always-decodable prefix of ``body``."""
    return body[:_PREVIEW_BYTES].decode("utf-8", errors="replace")


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", None) or repr(shape)


class JsonCodec:
    """Encode values to JSON bytes and decode JSON bytes into typed values."""

    def encode(self, value: Any) -> bytes:
        """Serialize ``value`` to JSON, using field aliases for models."""
        try:
            if isinstance(value, BaseModel):
                return value.model_dump_json(by_alias=True).encode("utf-8")
            return _adapter(type(value)).dump_json(value, by_alias=True)
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise EncodeFault(
                message=f"Could not encode {type(value).__name__} payload: {exc}",
                cause=exc,
            ) from exc

    def decode_one(self, body: bytes, shape: type[T]) -> T:
        """Decode one JSON document into ``shape``."""
        return self._validate(body, shape, _shape_name(shape))

    def decode_many(self, body: bytes, shape: type[T]) -> list[T]:
        """Decode one JSON array into a list of ``shape`` in payload order."""
        return self._validate(body, list[shape], f"list[{_shape_name(shape)}]")

    def _validate(self, body: bytes, target: Any, label: str) -> Any:
        try:
            return _adapter(target).validate_json(body)
        except ValidationError as exc:
            raise DecodeFault(
                message=f"Could not decode response body as {label}: {exc.errors()[0]['msg']}",
                body_preview=_preview(body),
                cause=exc,
            ) from exc
