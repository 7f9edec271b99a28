"""HTTP transport implementations for sync and async clients."""

from __future__ import annotations

import abc
import logging
from typing import IO

import httpx

from .auth import XRAY_TOKEN_PARAM
from .config import ClientConfig

logger = logging.getLogger(__name__)


def _loggable_url(url: httpx.URL) -> httpx.URL:
    return url.copy_remove_param(XRAY_TOKEN_PARAM)


class BaseTransport(abc.ABC):
    """Abstract transport with an async interface.

    A transport owns the underlying httpx client unless one was injected, in
    which case closing the transport leaves it open for its owner.
    """

    def __init__(self, config: ClientConfig) -> None:
        self.config = config
        self._owns_client = True

    @abc.abstractmethod
    def _get_client(self) -> httpx.Client | httpx.AsyncClient: ...

    def build_request(
        self,
        method: str,
        url: str,
        *,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Request:
        request_headers = self.config.get_default_headers()
        if headers:
            request_headers.update(headers)
        return self._get_client().build_request(
            method, url, content=content, headers=request_headers
        )

    @abc.abstractmethod
    async def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        """Send ``request``. Unless ``stream`` is set the body is read eagerly."""
        ...

    @abc.abstractmethod
    async def read(self, response: httpx.Response) -> bytes:
        """Read the remaining body of a streamed response and close it."""
        ...

    @abc.abstractmethod
    async def stream_into(self, response: httpx.Response, sink: IO[bytes]) -> int:
        """Copy a streamed response body into ``sink`` and close the response."""
        ...

    @abc.abstractmethod
    async def close(self) -> None: ...


class BlockingTransport(BaseTransport):
    """Sync I/O transport. Methods are async def but don't suspend."""

    def __init__(self, config: ClientConfig, client: httpx.Client | None = None) -> None:
        super().__init__(config)
        self._client: httpx.Client | None = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=httpx.Timeout(self.config.timeout))
        return self._client

    async def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        logger.debug("%s %s", request.method, _loggable_url(request.url))
        return self._get_client().send(request, stream=stream)

    async def read(self, response: httpx.Response) -> bytes:
        try:
            return response.read()
        finally:
            response.close()

    async def stream_into(self, response: httpx.Response, sink: IO[bytes]) -> int:
        written = 0
        try:
            for chunk in response.iter_bytes():
                sink.write(chunk)
                written += len(chunk)
        finally:
            response.close()
        return written

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None


class AsyncTransport(BaseTransport):
    """Async I/O transport using httpx.AsyncClient."""

    def __init__(self, config: ClientConfig, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(config)
        self._client: httpx.AsyncClient | None = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.config.timeout))
        return self._client

    async def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        logger.debug("%s %s", request.method, _loggable_url(request.url))
        return await self._get_client().send(request, stream=stream)

    async def read(self, response: httpx.Response) -> bytes:
        try:
            return await response.aread()
        finally:
            await response.aclose()

    async def stream_into(self, response: httpx.Response, sink: IO[bytes]) -> int:
        written = 0
        try:
            async for chunk in response.aiter_bytes():
                sink.write(chunk)
                written += len(chunk)
        finally:
            await response.aclose()
        return written

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None


__all__ = [
    "BaseTransport",
    "BlockingTransport",
    "AsyncTransport",
]
