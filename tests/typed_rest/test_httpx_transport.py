"""Unit tests for the httpx-backed transport adapter."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from packages.typed_rest.errors import TransportFault
from packages.typed_rest.http import HttpxTransport


def test_send_returns_buffered_response_with_metadata() -> None:
    """send should return status, headers, request path and full body."""

    async def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        return httpx.Response(
            200,
            content=b'{"id":1}',
            headers={"content-type": "application/json", "x-request-id": "abc"},
            request=request,
        )

    transport = HttpxTransport(
        base_url="https://example.test",
        transport=httpx.MockTransport(handler),
    )

    async def _run() -> None:
        try:
            response = await transport.send("GET", "/widgets/1?expand=all")
        finally:
            await transport.aclose()

        assert response.status_code == 200
        assert response.reason_phrase == "OK"
        assert response.body == b'{"id":1}'
        assert response.headers["x-request-id"] == "abc"
        assert response.request_path == "/widgets/1?expand=all"

    asyncio.run(_run())


def test_send_applies_json_default_headers_and_body() -> None:
    """Requests should carry JSON content negotiation headers and the body."""
    seen: dict[str, object] = {}

    async def handler(request: httpx.Request) -> httpx.Response:
        seen["content_type"] = request.headers.get("content-type")
        seen["accept"] = request.headers.get("accept")
        seen["custom"] = request.headers.get("x-client")
        seen["body"] = request.content
        return httpx.Response(201, json={"id": 9}, request=request)

    transport = HttpxTransport(
        base_url="https://example.test",
        headers={"X-Client": "typed-rest"},
        transport=httpx.MockTransport(handler),
    )

    async def _run() -> None:
        try:
            response = await transport.send("POST", "/widgets", b'{"name":"a"}')
        finally:
            await transport.aclose()
        assert response.request_headers["accept"] == "application/json"

    asyncio.run(_run())

    assert seen == {
        "content_type": "application/json",
        "accept": "application/json",
        "custom": "typed-rest",
        "body": b'{"name":"a"}',
    }


def test_send_maps_connection_failure_to_transport_fault() -> None:
    """Connection errors should become TransportFault with the httpx cause."""

    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = HttpxTransport(
        base_url="https://example.test",
        transport=httpx.MockTransport(handler),
    )

    async def _run() -> TransportFault:
        try:
            with pytest.raises(TransportFault) as exc_info:
                await transport.send("DELETE", "/widgets/1")
        finally:
            await transport.aclose()
        return exc_info.value

    fault = asyncio.run(_run())

    assert fault.method == "DELETE"
    assert fault.url == "https://example.test/widgets/1"
    assert isinstance(fault.cause, httpx.ConnectError)


def test_send_maps_timeout_to_transport_fault() -> None:
    """Timeouts enforced by the transport should become TransportFault."""

    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    transport = HttpxTransport(
        base_url="https://example.test",
        transport=httpx.MockTransport(handler),
    )

    async def _run() -> None:
        try:
            with pytest.raises(TransportFault) as exc_info:
                await transport.send("GET", "/slow")
        finally:
            await transport.aclose()
        assert isinstance(exc_info.value.cause, httpx.ReadTimeout)

    asyncio.run(_run())


def test_send_maps_invalid_url_to_transport_fault() -> None:
    """URLs httpx cannot parse should become TransportFault before dispatch."""

    async def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("request should not be dispatched")

    transport = HttpxTransport(
        base_url="https://example.test",
        transport=httpx.MockTransport(handler),
    )

    async def _run() -> TransportFault:
        try:
            with pytest.raises(TransportFault) as exc_info:
                await transport.send("get", "https://example.test:port/widgets")
        finally:
            await transport.aclose()
        return exc_info.value

    fault = asyncio.run(_run())

    assert fault.method == "GET"
    assert fault.url == "https://example.test:port/widgets"
    assert isinstance(fault.cause, httpx.InvalidURL)


def test_injected_client_is_not_closed_by_transport() -> None:
    """A caller-supplied httpx client stays open after aclose."""

    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(204, request=request)

    async def _run() -> None:
        client = httpx.AsyncClient(
            base_url="https://example.test",
            transport=httpx.MockTransport(handler),
        )
        transport = HttpxTransport(client=client)
        await transport.aclose()
        assert client.is_closed is False
        response = await transport.send("DELETE", "/widgets/1")
        assert response.status_code == 204
        assert response.body == b""
        await client.aclose()

    asyncio.run(_run())
