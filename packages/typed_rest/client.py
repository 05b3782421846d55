"""Typed asynchronous REST client.

Usage:

    class Widget(Shape):
        id: int
        name: str = ""

    async with RestClient.from_settings(load_settings().http) as client:
        result = await client.fetch_one("/widgets/1", Widget)
        if result.success:
            print(result.success_value)
        elif result.error_kind == ErrorKind.HTTP_STATUS:
            print(result.error_detail.status_code)

Every operation returns a ``RestResult``; failures of any stage are reported
in ``error_detail`` and never raised. One client may serve many concurrent
calls; its transport and codec configuration is fixed at construction.
"""

from __future__ import annotations

from typing import Any, TypeVar

import httpx

from packages.typed_rest.codec import Codec, JsonCodec
from packages.typed_rest.config import HttpSettings
from packages.typed_rest.envelope import Cardinality, RestResult
from packages.typed_rest.http import HttpxTransport, Transport, Verb

from .pipeline import CallSpec, execute

T = TypeVar("T")


class RestClient:
    """Thin facade composing the shared pipeline per verb and cardinality."""

    def __init__(
        self,
        *,
        transport: Transport | None = None,
        codec: Codec | None = None,
        owns_transport: bool | None = None,
    ) -> None:
        """Create a client; a default ``HttpxTransport`` is owned and closed by it."""
        self._owns_transport = transport is None if owns_transport is None else owns_transport
        self._transport: Transport = transport if transport is not None else HttpxTransport()
        self._codec: Codec = codec if codec is not None else JsonCodec()

    @classmethod
    def from_settings(
        cls,
        settings: HttpSettings,
        *,
        codec: Codec | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> RestClient:
        """Build a client owning an ``HttpxTransport`` configured from settings."""
        transport = HttpxTransport(
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            connect_timeout_seconds=settings.connect_timeout_seconds,
            headers=settings.default_headers,
            follow_redirects=settings.follow_redirects,
            transport=http_transport,
        )
        return cls(transport=transport, codec=codec, owns_transport=True)

    async def aclose(self) -> None:
        """Close the transport when this client owns it."""
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> RestClient:
        """Enter async context manager scope."""
        return self

    async def __aexit__(self, *_: object) -> None:
        """Exit async context manager scope and close owned resources."""
        await self.aclose()

    async def fetch_one(self, url: str, shape: type[T]) -> RestResult[T]:
        """GET one resource and decode it into ``shape``."""
        return await self._call(
            CallSpec(verb=Verb.GET, url=url, cardinality=Cardinality.ONE, shape=shape)
        )

    async def fetch_many(self, url: str, shape: type[T]) -> RestResult[T]:
        """GET a collection and decode it into an ordered tuple of ``shape``."""
        return await self._call(
            CallSpec(verb=Verb.GET, url=url, cardinality=Cardinality.MANY, shape=shape)
        )

    async def create(self, url: str, payload: T) -> RestResult[T]:
        """POST ``payload`` and decode the server representation of it."""
        return await self._send(Verb.POST, url, payload)

    async def patch(self, url: str, payload: T) -> RestResult[T]:
        """PATCH ``payload`` and decode the server representation of it."""
        return await self._send(Verb.PATCH, url, payload)

    async def replace(self, url: str, payload: T) -> RestResult[T]:
        """PUT ``payload`` and decode the server representation of it."""
        return await self._send(Verb.PUT, url, payload)

    async def delete(self, url: str) -> RestResult[Any]:
        """DELETE one resource; success carries no value."""
        return await self._call(
            CallSpec(verb=Verb.DELETE, url=url, cardinality=Cardinality.NONE)
        )

    async def _send(self, verb: Verb, url: str, payload: T) -> RestResult[T]:
        return await self._call(
            CallSpec(
                verb=verb,
                url=url,
                cardinality=Cardinality.ONE,
                shape=type(payload),
                payload=payload,
                sends_payload=True,
            )
        )

    async def _call(self, call: CallSpec) -> RestResult[Any]:
        return await execute(transport=self._transport, codec=self._codec, call=call)
