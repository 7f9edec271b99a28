"""Security groups."""

from __future__ import annotations

from .._http import iter_coroutine
from .._service import BaseService
from .models import Group

_GROUPS = "/api/security/groups"


class _BaseGroupsService(BaseService):
    async def _get_all(self) -> list[Group] | None:
        response = await self._client._call("GET", _GROUPS, into=list[Group])
        return response.data

    async def _get(self, name: str) -> Group | None:
        response = await self._client._call("GET", f"{_GROUPS}/{name}", into=Group)
        return response.data

    async def _get_include_users(self, name: str) -> Group | None:
        url = f"{_GROUPS}/{name}?includeUsers=true"
        response = await self._client._call("GET", url, into=Group)
        return response.data

    async def _create(self, group: Group) -> str:
        url = f"{_GROUPS}/{group.name}"
        response = await self._client._call("PUT", url, body=group, into=str)
        return response.data

    async def _update(self, group: Group) -> str:
        url = f"{_GROUPS}/{group.name}"
        response = await self._client._call("POST", url, body=group, into=str)
        return response.data

    async def _delete(self, name: str) -> str:
        response = await self._client._call("DELETE", f"{_GROUPS}/{name}", into=str)
        return response.data


class GroupsService(_BaseGroupsService):
    def get_all(self) -> list[Group] | None:
        return iter_coroutine(self._get_all())

    def get(self, name: str) -> Group | None:
        return iter_coroutine(self._get(name))

    def get_include_users(self, name: str) -> Group | None:
        """Like ``get``, with the group's member names filled in."""
        return iter_coroutine(self._get_include_users(name))

    def create(self, group: Group) -> str:
        """Create or replace the group named ``group.name``."""
        return iter_coroutine(self._create(group))

    def update(self, group: Group) -> str:
        """Update the fields set on ``group``."""
        return iter_coroutine(self._update(group))

    def delete(self, name: str) -> str:
        return iter_coroutine(self._delete(name))


class AsyncGroupsService(_BaseGroupsService):
    async def get_all(self) -> list[Group] | None:
        return await self._get_all()

    async def get(self, name: str) -> Group | None:
        return await self._get(name)

    async def get_include_users(self, name: str) -> Group | None:
        """Like ``get``, with the group's member names filled in."""
        return await self._get_include_users(name)

    async def create(self, group: Group) -> str:
        """Create or replace the group named ``group.name``."""
        return await self._create(group)

    async def update(self, group: Group) -> str:
        """Update the fields set on ``group``."""
        return await self._update(group)

    async def delete(self, name: str) -> str:
        return await self._delete(name)


__all__ = ["GroupsService", "AsyncGroupsService"]
