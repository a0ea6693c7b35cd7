# ABOUTME: httpx-based implementation of AbstractHttpTransport
# ABOUTME: Sends requests through an httpx.AsyncClient and returns httpx responses unchanged

import httpx

from storefront_auth.interfaces.http import AbstractHttpTransport
from storefront_auth.models.http.request import RequestOptions


class HttpxTransport(AbstractHttpTransport):
    """
    HTTP transport backed by `httpx.AsyncClient`.

    The transport either owns its client (created on first use, closed by
    `aclose`) or uses one injected by the caller, which stays the caller's
    responsibility to close. httpx exceptions propagate unchanged.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = 30.0):
        """
        Initialize the transport.

        Args:
            client: An existing client to send requests through.
            timeout: Default timeout in seconds for an owned client.
        """
        self._client = client
        self._owns_client = client is None
        self.timeout = timeout

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def request(self, url: str, options: RequestOptions) -> httpx.Response:
        return await self.client.request(
            options.method,
            url,
            headers=options.headers,
            content=options.content,
            json=options.json_body,
            params=options.params,
            timeout=options.timeout if options.timeout is not None else httpx.USE_CLIENT_DEFAULT,
        )

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
