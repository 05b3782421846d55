"""Tests for the pydantic-backed JSON codec and body decoder."""

from __future__ import annotations

import json
from dataclasses import dataclass

import pytest
from pydantic import ValidationError

from packages.typed_rest.codec import JsonCodec, Shape, decode_many, decode_one, is_blank
from packages.typed_rest.errors import DecodeFault, EncodeFault


class Widget(Shape):
    """Minimal decode target used across codec tests."""

    id: int
    name: str = ""


@dataclass(frozen=True)
class Gadget:
    """Dataclass decode target."""

    sku: str
    price: float


def test_decode_one_ignores_unknown_fields() -> None:
    """Extra payload fields should be dropped rather than rejected."""
    codec = JsonCodec()

    widget = codec.decode_one(b'{"id":1,"name":"a","extra":"ignored"}', Widget)

    assert widget == Widget(id=1, name="a")


def test_encode_then_decode_reconstructs_value_with_injected_fields() -> None:
    """Encoded values should decode back to an equal value despite extra fields."""
    codec = JsonCodec()
    original = Widget(id=7, name="seven")

    document = json.loads(codec.encode(original))
    document["added_by_server"] = {"nested": [1, 2, 3]}

    assert codec.decode_one(json.dumps(document).encode(), Widget) == original


def test_dataclass_shapes_round_trip() -> None:
    """Dataclass shapes should be supported through TypeAdapter."""
    codec = JsonCodec()
    gadget = Gadget(sku="g-1", price=2.5)

    assert codec.decode_one(codec.encode(gadget), Gadget) == gadget


def test_decode_many_preserves_payload_order() -> None:
    """decode_many should return values in array order."""
    codec = JsonCodec()

    widgets = codec.decode_many(b'[{"id":2},{"id":1},{"id":3}]', Widget)

    assert [widget.id for widget in widgets] == [2, 1, 3]


def test_decode_one_rejects_list_payload() -> None:
    """A list payload for a single-value decode is a shape mismatch."""
    with pytest.raises(DecodeFault) as exc_info:
        JsonCodec().decode_one(b'[{"id":1}]', Widget)

    assert isinstance(exc_info.value.cause, ValidationError)
    assert "Widget" in exc_info.value.message


def test_decode_many_rejects_object_payload() -> None:
    """An object payload for a list decode is a shape mismatch."""
    with pytest.raises(DecodeFault) as exc_info:
        JsonCodec().decode_many(b'{"id":1}', Widget)

    assert "list[Widget]" in exc_info.value.message


def test_decode_one_maps_malformed_json_to_decode_fault() -> None:
    """Malformed JSON should raise DecodeFault with a body preview."""
    with pytest.raises(DecodeFault) as exc_info:
        JsonCodec().decode_one(b'{"id": 1,', Widget)

    assert exc_info.value.body_preview == '{"id": 1,'


def test_decode_one_maps_type_mismatch_to_decode_fault() -> None:
    """Wrongly-typed fields should raise DecodeFault."""
    with pytest.raises(DecodeFault):
        JsonCodec().decode_one(b'{"id":"not-a-number"}', Widget)


def test_encode_maps_unserializable_values_to_encode_fault() -> None:
    """Values pydantic cannot serialize should raise EncodeFault."""
    with pytest.raises(EncodeFault) as exc_info:
        JsonCodec().encode({"handle": object()})

    assert exc_info.value.cause is not None


@pytest.mark.parametrize("body", [b"", b"   ", b"\n\t \r\n"])
def test_blank_bodies_decode_to_no_payload(body: bytes) -> None:
    """Blank bodies mean no payload for both cardinalities."""
    codec = JsonCodec()

    assert is_blank(body) is True
    assert decode_one(codec, body, Widget) is None
    assert decode_many(codec, body, Widget) == ()


def test_decode_many_returns_tuple() -> None:
    """The body decoder should hand back an immutable sequence."""
    values = decode_many(JsonCodec(), b'[{"id":1}]', Widget)

    assert values == (Widget(id=1),)
