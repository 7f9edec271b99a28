"""Xray users."""

from __future__ import annotations

from .._http import iter_coroutine
from .._service import BaseService
from .models import User

_USERS = "/api/v1/users"


class _BaseUsersService(BaseService):
    async def _get_all(self) -> list[User] | None:
        response = await self._client._call("GET", _USERS, into=list[User])
        return response.data

    async def _get(self, name: str) -> User | None:
        response = await self._client._call("GET", f"{_USERS}/{name}", into=User)
        return response.data

    async def _create(self, user: User) -> User | None:
        response = await self._client._call("POST", _USERS, body=user, into=User)
        return response.data

    async def _update(self, user: User) -> str:
        url = f"{_USERS}/{user.name}"
        response = await self._client._call("PUT", url, body=user, into=str)
        return response.data

    async def _delete(self, name: str) -> str:
        response = await self._client._call("DELETE", f"{_USERS}/{name}", into=str)
        return response.data


class UsersService(_BaseUsersService):
    def get_all(self) -> list[User] | None:
        return iter_coroutine(self._get_all())

    def get(self, name: str) -> User | None:
        return iter_coroutine(self._get(name))

    def create(self, user: User) -> User | None:
        """Create a user and return it as stored."""
        return iter_coroutine(self._create(user))

    def update(self, user: User) -> str:
        return iter_coroutine(self._update(user))

    def delete(self, name: str) -> str:
        return iter_coroutine(self._delete(name))


class AsyncUsersService(_BaseUsersService):
    async def get_all(self) -> list[User] | None:
        return await self._get_all()

    async def get(self, name: str) -> User | None:
        return await self._get(name)

    async def create(self, user: User) -> User | None:
        """Create a user and return it as stored."""
        return await self._create(user)

    async def update(self, user: User) -> str:
        return await self._update(user)

    async def delete(self, name: str) -> str:
        return await self._delete(name)


__all__ = ["UsersService", "AsyncUsersService"]
