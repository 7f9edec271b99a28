"""Build info lookups."""

from __future__ import annotations

from .._http import iter_coroutine
from .._service import BaseService
from .models import Build


class _BaseBuildsService(BaseService):
    async def _get_info(self, name: str, number: str) -> Build | None:
        response = await self._client._call("GET", f"/api/build/{name}/{number}", into=Build)
        return response.data


class BuildsService(_BaseBuildsService):
    def get_info(self, name: str, number: str) -> Build | None:
        """Return the build info published for build ``name`` number ``number``."""
        return iter_coroutine(self._get_info(name, number))


class AsyncBuildsService(_BaseBuildsService):
    async def get_info(self, name: str, number: str) -> Build | None:
        """Return the build info published for build ``name`` number ``number``."""
        return await self._get_info(name, number)


__all__ = ["BuildsService", "AsyncBuildsService"]
