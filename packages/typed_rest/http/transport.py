"""Transport adapter contract and the default ``httpx`` implementation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

import httpx

from packages.typed_rest.errors.faults import TransportFault

JSON_MEDIA_TYPE = "application/json"

DEFAULT_HEADERS: Mapping[str, str] = {
    "Content-Type": JSON_MEDIA_TYPE,
    "Accept": JSON_MEDIA_TYPE,
}


@dataclass(frozen=True)
class RawResponse:
    """Fully-buffered response metadata and body for one request."""

    status_code: int
    body: bytes = b""
    reason_phrase: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    request_path: str = ""
    request_headers: Mapping[str, str] = field(default_factory=dict)


class Transport(Protocol):
    """Network collaborator used by the pipeline.

    Implementations must buffer the complete body before returning and raise
    ``TransportFault`` when no response could be obtained.
    """

    async def send(
        self, method: str, url: str, body: bytes | None = None
    ) -> RawResponse:
        """Send one request and return its buffered response."""

    async def aclose(self) -> None:
        """Release transport resources."""


def _failed_request(exc: httpx.HTTPError) -> httpx.Request | None:
    """Return the request attached to an httpx error, if any."""
    try:
        return exc.request
    except RuntimeError:
        return None


class HttpxTransport:
    """Asynchronous transport over ``httpx.AsyncClient``.

    Headers, timeouts and base URL are fixed at construction; concurrent calls
    share the same underlying client.
    """

    def __init__(
        self,
        *,
        base_url: str = "",
        timeout_seconds: float = 10.0,
        connect_timeout_seconds: float | None = None,
        headers: Mapping[str, str] | None = None,
        follow_redirects: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Create a transport that owns its client unless one is injected."""
        if connect_timeout_seconds is None:
            connect_timeout_seconds = timeout_seconds
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout_seconds, connect=connect_timeout_seconds),
            headers={**DEFAULT_HEADERS, **dict(headers or {})},
            follow_redirects=follow_redirects,
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close underlying transport resources when owned."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxTransport:
        """Enter async context manager scope."""
        return self

    async def __aexit__(self, *_: object) -> None:
        """Exit async context manager scope and close client."""
        await self.aclose()

    async def send(
        self, method: str, url: str, body: bytes | None = None
    ) -> RawResponse:
        """Issue one request and map transport failures to ``TransportFault``."""
        try:
            response = await self._client.request(method=method, url=url, content=body)
        except httpx.InvalidURL as exc:
            raise TransportFault(
                message=f"Invalid URL for {method.upper()} {url}: {exc}",
                method=method.upper(),
                url=url,
                cause=exc,
            ) from exc
        except httpx.RequestError as exc:
            request = _failed_request(exc)
            request_url = str(request.url) if request is not None else url
            request_method = request.method if request is not None else method.upper()
            raise TransportFault(
                message=f"HTTP request failed for {request_method} {request_url}: {exc}",
                method=request_method,
                url=request_url,
                cause=exc,
            ) from exc

        return RawResponse(
            status_code=response.status_code,
            body=response.content,
            reason_phrase=response.reason_phrase,
            headers=dict(response.headers.items()),
            request_path=response.request.url.raw_path.decode("ascii"),
            request_headers=dict(response.request.headers.items()),
        )
