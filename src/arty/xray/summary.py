"""Issue and license summaries."""

from __future__ import annotations

from .._http import add_options, iter_coroutine
from .._service import BaseService
from .models import SummaryArtifactRequest, SummaryBuildOptions, SummaryResponse


class _BaseSummaryService(BaseService):
    async def _artifact(self, request: SummaryArtifactRequest) -> SummaryResponse | None:
        response = await self._client._call(
            "POST", "/api/v1/summary/artifact", body=request, into=SummaryResponse
        )
        return response.data

    async def _build(self, build_name: str, build_number: int) -> SummaryResponse | None:
        options = SummaryBuildOptions(build_name=build_name, build_number=build_number)
        url = add_options("/api/v1/summary/build", options)
        response = await self._client._call("GET", url, into=SummaryResponse)
        return response.data


class SummaryService(_BaseSummaryService):
    def artifact(self, request: SummaryArtifactRequest) -> SummaryResponse | None:
        """Summarize the artifacts matching the given checksums or paths."""
        return iter_coroutine(self._artifact(request))

    def build(self, build_name: str, build_number: int) -> SummaryResponse | None:
        return iter_coroutine(self._build(build_name, build_number))


class AsyncSummaryService(_BaseSummaryService):
    async def artifact(self, request: SummaryArtifactRequest) -> SummaryResponse | None:
        """Summarize the artifacts matching the given checksums or paths."""
        return await self._artifact(request)

    async def build(self, build_name: str, build_number: int) -> SummaryResponse | None:
        return await self._build(build_name, build_number)


__all__ = ["SummaryService", "AsyncSummaryService"]
