"""Repository configuration."""

from __future__ import annotations

from typing import Any

from .._http import iter_coroutine
from .._service import BaseService
from .models import GenericRepository, Repository, RepositoryConfig

_REPOSITORIES = "/api/repositories"


class _BaseRepositoriesService(BaseService):
    async def _get_all(self) -> list[Repository] | None:
        response = await self._client._call("GET", _REPOSITORIES, into=list[Repository])
        return response.data

    async def _get(self, repo: str) -> GenericRepository | None:
        url = f"{_REPOSITORIES}/{repo}"
        response = await self._client._call("GET", url, into=RepositoryConfig)
        return response.data

    async def _create(self, repo: str, body: Any) -> str:
        url = f"{_REPOSITORIES}/{repo}"
        response = await self._client._call("PUT", url, body=body, into=str)
        return response.data

    async def _update(self, repo: str, body: Any) -> str:
        url = f"{_REPOSITORIES}/{repo}"
        response = await self._client._call("POST", url, body=body, into=str)
        return response.data

    async def _delete(self, repo: str) -> str:
        response = await self._client._call("DELETE", f"{_REPOSITORIES}/{repo}", into=str)
        return response.data


class RepositoriesService(_BaseRepositoriesService):
    def get_all(self) -> list[Repository] | None:
        return iter_coroutine(self._get_all())

    def get(self, repo: str) -> GenericRepository | None:
        """Return the configuration of ``repo``.

        The result is a LocalRepository, RemoteRepository or
        VirtualRepository according to its ``rclass``, or a plain
        GenericRepository for any other class.
        """
        return iter_coroutine(self._get(repo))

    def create(self, repo: str, body: Any) -> str:
        """Create ``repo`` from a repository model or a plain mapping."""
        return iter_coroutine(self._create(repo, body))

    def update(self, repo: str, body: Any) -> str:
        return iter_coroutine(self._update(repo, body))

    def delete(self, repo: str) -> str:
        return iter_coroutine(self._delete(repo))


class AsyncRepositoriesService(_BaseRepositoriesService):
    async def get_all(self) -> list[Repository] | None:
        return await self._get_all()

    async def get(self, repo: str) -> GenericRepository | None:
        """Return the configuration of ``repo``.

        The result is a LocalRepository, RemoteRepository or
        VirtualRepository according to its ``rclass``, or a plain
        GenericRepository for any other class.
        """
        return await self._get(repo)

    async def create(self, repo: str, body: Any) -> str:
        """Create ``repo`` from a repository model or a plain mapping."""
        return await self._create(repo, body)

    async def update(self, repo: str, body: Any) -> str:
        return await self._update(repo, body)

    async def delete(self, repo: str) -> str:
        return await self._delete(repo)


__all__ = ["RepositoriesService", "AsyncRepositoriesService"]
