"""Shared async HTTP client with configurable timeout."""

from typing import Any

import httpx


class HttpClient:
    """Thin async wrapper around httpx.AsyncClient with a configurable timeout.

    ``transport`` is passed straight to httpx, which lets tests mount a
    MockTransport or an ASGI app in place of the network.
    """

    def __init__(
        self, timeout: float = 5.0, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def send(self, request: httpx.Request, **kwargs: Any) -> httpx.Response:
        return await self._client.send(request, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
