"""Docker registry endpoints of a Docker repository."""

from __future__ import annotations

from .._http import iter_coroutine
from .._service import BaseService
from .models import ImagePromotion, Registry, Tags


class _BaseDockerService(BaseService):
    async def _get_repositories(self, registry: str) -> Registry | None:
        url = f"/api/docker/{registry}/v2/_catalog"
        response = await self._client._call("GET", url, into=Registry)
        return response.data

    async def _get_tags(self, registry: str, repository: str) -> Tags | None:
        url = f"/api/docker/{registry}/v2/{repository}/tags/list"
        response = await self._client._call("GET", url, into=Tags)
        return response.data

    async def _promote_image(self, registry: str, promotion: ImagePromotion) -> str:
        url = f"/api/docker/{registry}/v2/promote"
        response = await self._client._call("POST", url, body=promotion, into=str)
        return response.data


class DockerService(_BaseDockerService):
    def get_repositories(self, registry: str) -> Registry | None:
        """List the Docker repositories hosted in ``registry``."""
        return iter_coroutine(self._get_repositories(registry))

    def get_tags(self, registry: str, repository: str) -> Tags | None:
        """List the tags of a Docker repository."""
        return iter_coroutine(self._get_tags(registry, repository))

    def promote_image(self, registry: str, promotion: ImagePromotion) -> str:
        """Promote a Docker image, or a whole Docker repository, to another registry."""
        return iter_coroutine(self._promote_image(registry, promotion))


class AsyncDockerService(_BaseDockerService):
    async def get_repositories(self, registry: str) -> Registry | None:
        """List the Docker repositories hosted in ``registry``."""
        return await self._get_repositories(registry)

    async def get_tags(self, registry: str, repository: str) -> Tags | None:
        """List the tags of a Docker repository."""
        return await self._get_tags(registry, repository)

    async def promote_image(self, registry: str, promotion: ImagePromotion) -> str:
        """Promote a Docker image, or a whole Docker repository, to another registry."""
        return await self._promote_image(registry, promotion)


__all__ = ["DockerService", "AsyncDockerService"]
