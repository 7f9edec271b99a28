"""Repository replication settings."""

from __future__ import annotations

from pydantic import TypeAdapter

from .._http import iter_coroutine
from .._service import BaseService
from ..errors import APIError
from .models import MultiPushReplication, Replication, Replications

_REPLICATIONS = "/api/replications"

_REPLICATION_LIST: TypeAdapter[list[Replication]] = TypeAdapter(list[Replication])


def parse_replications(content: bytes) -> list[Replication]:
    """Parse a replication body into a list.

    Local repositories answer with a JSON array of replications, remote
    repositories with a single object. The first non-blank byte decides.
    """
    body = content.lstrip()
    if body.startswith(b"["):
        return _REPLICATION_LIST.validate_json(body)
    if body.startswith(b"{"):
        return [Replication.model_validate_json(body)]
    return []


class _BaseReplicationsService(BaseService):
    async def _get_all(self) -> list[Replications] | None:
        response = await self._client._call("GET", _REPLICATIONS, into=list[Replications])
        return response.data

    async def _get(self, repo: str) -> list[Replication] | None:
        try:
            response = await self._client._call("GET", f"{_REPLICATIONS}/{repo}")
        except APIError as ex:
            if ex.status_code == 404:
                return []
            raise
        return response.decode_with(parse_replications)

    async def _create(self, repo: str, replication: Replication) -> str:
        url = f"{_REPLICATIONS}/{repo}"
        response = await self._client._call("PUT", url, body=replication, into=str)
        return response.data

    async def _update(self, repo: str, replication: Replication) -> str:
        url = f"{_REPLICATIONS}/{repo}"
        response = await self._client._call("POST", url, body=replication, into=str)
        return response.data

    async def _delete(self, repo: str) -> str:
        response = await self._client._call("DELETE", f"{_REPLICATIONS}/{repo}", into=str)
        return response.data

    async def _create_multi_push(self, repo: str, replications: MultiPushReplication) -> str:
        url = f"{_REPLICATIONS}/multiple/{repo}"
        response = await self._client._call("PUT", url, body=replications, into=str)
        return response.data

    async def _update_multi_push(self, repo: str, replications: MultiPushReplication) -> str:
        url = f"{_REPLICATIONS}/multiple/{repo}"
        response = await self._client._call("POST", url, body=replications, into=str)
        return response.data

    async def _delete_multi_push(self, repo: str, url: str) -> str:
        path = f"{_REPLICATIONS}/{repo}?url={url}"
        response = await self._client._call("DELETE", path, into=str)
        return response.data


class ReplicationsService(_BaseReplicationsService):
    def get_all(self) -> list[Replications] | None:
        """List the replications of every repository."""
        return iter_coroutine(self._get_all())

    def get(self, repo: str) -> list[Replication] | None:
        """Return the replications configured for ``repo``.

        A repository without replication (404) yields an empty list.
        """
        return iter_coroutine(self._get(repo))

    def create(self, repo: str, replication: Replication) -> str:
        return iter_coroutine(self._create(repo, replication))

    def update(self, repo: str, replication: Replication) -> str:
        return iter_coroutine(self._update(repo, replication))

    def delete(self, repo: str) -> str:
        return iter_coroutine(self._delete(repo))

    def create_multi_push(self, repo: str, replications: MultiPushReplication) -> str:
        """Configure push replication of ``repo`` to several targets."""
        return iter_coroutine(self._create_multi_push(repo, replications))

    def update_multi_push(self, repo: str, replications: MultiPushReplication) -> str:
        return iter_coroutine(self._update_multi_push(repo, replications))

    def delete_multi_push(self, repo: str, url: str) -> str:
        """Remove the push replication of ``repo`` that targets ``url``."""
        return iter_coroutine(self._delete_multi_push(repo, url))


class AsyncReplicationsService(_BaseReplicationsService):
    async def get_all(self) -> list[Replications] | None:
        """List the replications of every repository."""
        return await self._get_all()

    async def get(self, repo: str) -> list[Replication] | None:
        """Return the replications configured for ``repo``.

        A repository without replication (404) yields an empty list.
        """
        return await self._get(repo)

    async def create(self, repo: str, replication: Replication) -> str:
        return await self._create(repo, replication)

    async def update(self, repo: str, replication: Replication) -> str:
        return await self._update(repo, replication)

    async def delete(self, repo: str) -> str:
        return await self._delete(repo)

    async def create_multi_push(self, repo: str, replications: MultiPushReplication) -> str:
        """Configure push replication of ``repo`` to several targets."""
        return await self._create_multi_push(repo, replications)

    async def update_multi_push(self, repo: str, replications: MultiPushReplication) -> str:
        return await self._update_multi_push(repo, replications)

    async def delete_multi_push(self, repo: str, url: str) -> str:
        """Remove the push replication of ``repo`` that targets ``url``."""
        return await self._delete_multi_push(repo, url)


__all__ = ["ReplicationsService", "AsyncReplicationsService", "parse_replications"]
