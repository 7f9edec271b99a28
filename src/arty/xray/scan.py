"""On-demand scans of artifacts and builds."""

from __future__ import annotations

from .._http import iter_coroutine
from .._service import BaseService
from .models import (
    ScanArtifactRequest,
    ScanArtifactResponse,
    ScanBuildRequest,
    ScanBuildResponse,
)


class _BaseScanService(BaseService):
    async def _artifact(self, request: ScanArtifactRequest) -> ScanArtifactResponse | None:
        response = await self._client._call(
            "POST", "/api/v1/scanArtifact", body=request, into=ScanArtifactResponse
        )
        return response.data

    async def _build(self, request: ScanBuildRequest) -> ScanBuildResponse | None:
        response = await self._client._call(
            "POST", "/api/v1/scanBuild", body=request, into=ScanBuildResponse
        )
        return response.data


class ScanService(_BaseScanService):
    def artifact(self, request: ScanArtifactRequest) -> ScanArtifactResponse | None:
        """Queue a scan of a component."""
        return iter_coroutine(self._artifact(request))

    def build(self, request: ScanBuildRequest) -> ScanBuildResponse | None:
        """Scan a published build and return its alerts and licenses."""
        return iter_coroutine(self._build(request))


class AsyncScanService(_BaseScanService):
    async def artifact(self, request: ScanArtifactRequest) -> ScanArtifactResponse | None:
        """Queue a scan of a component."""
        return await self._artifact(request)

    async def build(self, request: ScanBuildRequest) -> ScanBuildResponse | None:
        """Scan a published build and return its alerts and licenses."""
        return await self._build(request)


__all__ = ["ScanService", "AsyncScanService"]
