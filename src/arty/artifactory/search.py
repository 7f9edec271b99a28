"""Artifact searches."""

from __future__ import annotations

from .._http import add_options, iter_coroutine
from .._service import BaseService
from .models import GAVCRequest, GAVCResponse


class _BaseSearchService(BaseService):
    async def _gavc(self, request: GAVCRequest) -> GAVCResponse | None:
        url = add_options("/api/search/gavc", request)
        response = await self._client._call("GET", url, into=GAVCResponse)
        return response.data


class SearchService(_BaseSearchService):
    def gavc(self, request: GAVCRequest) -> GAVCResponse | None:
        """Search Maven artifacts by group, artifact, version and classifier."""
        return iter_coroutine(self._gavc(request))


class AsyncSearchService(_BaseSearchService):
    async def gavc(self, request: GAVCRequest) -> GAVCResponse | None:
        """Search Maven artifacts by group, artifact, version and classifier."""
        return await self._gavc(request)


__all__ = ["SearchService", "AsyncSearchService"]
