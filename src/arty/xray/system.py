"""Xray health and version."""

from __future__ import annotations

from .._http import iter_coroutine
from .._service import BaseService
from .models import Ping, Versions


class _BaseSystemService(BaseService):
    async def _ping(self) -> Ping | None:
        response = await self._client._call("GET", "/api/v1/system/ping", into=Ping)
        return response.data

    async def _version(self) -> Versions | None:
        response = await self._client._call("GET", "/api/v1/system/version", into=Versions)
        return response.data


class SystemService(_BaseSystemService):
    def ping(self) -> Ping | None:
        return iter_coroutine(self._ping())

    def version(self) -> Versions | None:
        return iter_coroutine(self._version())


class AsyncSystemService(_BaseSystemService):
    async def ping(self) -> Ping | None:
        return await self._ping()

    async def version(self) -> Versions | None:
        return await self._version()


__all__ = ["SystemService", "AsyncSystemService"]
