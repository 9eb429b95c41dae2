"""HTTP client whose requests are throttled through an AsyncQueue."""

import logging
from typing import Any

import httpx

from ..core.queue import AsyncQueue

logger = logging.getLogger(__name__)


class ThrottledClient:
    """
    Wraps an httpx.AsyncClient so that at most ``queue.concurrency`` requests
    are in flight at once. Requests beyond the limit wait in FIFO order.

    Usage:
        async with ThrottledClient(AsyncQueue(concurrency=4), base_url="https://api.example.com") as api:
            response = await api.get("/users/1")

    Pass ``client=`` to reuse an existing httpx.AsyncClient; a supplied client
    is not closed by this wrapper.
    """

    def __init__(
        self,
        queue: AsyncQueue | None = None,
        client: httpx.AsyncClient | None = None,
        raise_for_status: bool = False,
        **client_kwargs: Any,
    ):
        """
        Args:
            queue: Queue to route requests through (default: concurrency 1)
            client: Existing client to use; mutually exclusive with client_kwargs
            raise_for_status: Reject futures with httpx.HTTPStatusError on 4xx/5xx
            **client_kwargs: Passed to httpx.AsyncClient when no client is given

        Raises:
            ValueError: If both client and client_kwargs are given
        """
        if client is not None and client_kwargs:
            raise ValueError("Pass either client or httpx.AsyncClient keyword arguments, not both")

        self._owns_queue = queue is None
        self.queue = queue if queue is not None else AsyncQueue()
        self._owns_client = client is None
        self.client = client if client is not None else httpx.AsyncClient(**client_kwargs)
        self.raise_for_status = raise_for_status

    async def _send(self, method: str, url: httpx.URL | str, **kwargs: Any) -> httpx.Response:
        response = await self.client.request(method, url, **kwargs)
        if self.raise_for_status:
            response.raise_for_status()
        return response

    async def request(self, method: str, url: httpx.URL | str, **kwargs: Any) -> httpx.Response:
        """Queue a request and wait for its response."""
        return await self.queue.submit(self._send, method, url, **kwargs)

    async def get(self, url: httpx.URL | str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: httpx.URL | str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: httpx.URL | str, **kwargs: Any) -> httpx.Response:
        return await self.request("PUT", url, **kwargs)

    async def patch(self, url: httpx.URL | str, **kwargs: Any) -> httpx.Response:
        return await self.request("PATCH", url, **kwargs)

    async def delete(self, url: httpx.URL | str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", url, **kwargs)

    async def aclose(self) -> None:
        """Close the client if this wrapper created it.

        When the queue was also created here, queued requests finish first.
        """
        if self._owns_queue:
            await self.queue.join()
        if self._owns_client:
            try:
                await self.client.aclose()
            except Exception as e:
                logger.error("Error closing HTTP client: %s", e)

    async def __aenter__(self) -> "ThrottledClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
