"""Users, API keys and encrypted passwords."""

from __future__ import annotations

from .._http import iter_coroutine
from .._service import BaseService
from .models import APIKey, DeleteAPIKey, User

_USERS = "/api/security/users"
_API_KEY = "/api/security/apiKey"


class _BaseUsersService(BaseService):
    async def _get_all(self) -> list[User] | None:
        response = await self._client._call("GET", _USERS, into=list[User])
        return response.data

    async def _get(self, name: str) -> User | None:
        response = await self._client._call("GET", f"{_USERS}/{name}", into=User)
        return response.data

    async def _create(self, user: User) -> str:
        url = f"{_USERS}/{user.name}"
        response = await self._client._call("PUT", url, body=user, into=str)
        return response.data

    async def _update(self, user: User) -> str:
        url = f"{_USERS}/{user.name}"
        response = await self._client._call("POST", url, body=user, into=str)
        return response.data

    async def _delete(self, name: str) -> str:
        response = await self._client._call("DELETE", f"{_USERS}/{name}", into=str)
        return response.data

    async def _api_key(self, method: str, path: str = _API_KEY) -> APIKey | None:
        response = await self._client._call(method, path, into=APIKey)
        return response.data

    async def _revoke(self, path: str) -> DeleteAPIKey | None:
        response = await self._client._call("DELETE", path, into=DeleteAPIKey)
        return response.data

    async def _get_encrypted_password(self) -> str:
        url = "/api/security/encryptedPassword"
        response = await self._client._call("GET", url, into=str)
        return response.data


class UsersService(_BaseUsersService):
    def get_all(self) -> list[User] | None:
        return iter_coroutine(self._get_all())

    def get(self, name: str) -> User | None:
        return iter_coroutine(self._get(name))

    def create(self, user: User) -> str:
        """Create or replace the user named ``user.name``."""
        return iter_coroutine(self._create(user))

    def update(self, user: User) -> str:
        """Update the fields set on ``user``."""
        return iter_coroutine(self._update(user))

    def delete(self, name: str) -> str:
        return iter_coroutine(self._delete(name))

    def get_api_key(self) -> APIKey | None:
        """Return the API key of the authenticated user."""
        return iter_coroutine(self._api_key("GET"))

    def create_api_key(self) -> APIKey | None:
        return iter_coroutine(self._api_key("POST"))

    def regenerate_api_key(self) -> APIKey | None:
        return iter_coroutine(self._api_key("PUT"))

    def delete_api_key(self) -> DeleteAPIKey | None:
        """Revoke the API key of the authenticated user."""
        return iter_coroutine(self._revoke(_API_KEY))

    def delete_user_api_key(self, user: str) -> DeleteAPIKey | None:
        """Revoke the API key of ``user``. Requires an admin."""
        return iter_coroutine(self._revoke(f"{_API_KEY}/{user}"))

    def delete_all_api_keys(self) -> DeleteAPIKey | None:
        """Revoke every API key. Requires an admin."""
        return iter_coroutine(self._revoke(f"{_API_KEY}?deleteAll=1"))

    def get_encrypted_password(self) -> str:
        return iter_coroutine(self._get_encrypted_password())


class AsyncUsersService(_BaseUsersService):
    async def get_all(self) -> list[User] | None:
        return await self._get_all()

    async def get(self, name: str) -> User | None:
        return await self._get(name)

    async def create(self, user: User) -> str:
        """Create or replace the user named ``user.name``."""
        return await self._create(user)

    async def update(self, user: User) -> str:
        """Update the fields set on ``user``."""
        return await self._update(user)

    async def delete(self, name: str) -> str:
        return await self._delete(name)

    async def get_api_key(self) -> APIKey | None:
        """Return the API key of the authenticated user."""
        return await self._api_key("GET")

    async def create_api_key(self) -> APIKey | None:
        return await self._api_key("POST")

    async def regenerate_api_key(self) -> APIKey | None:
        return await self._api_key("PUT")

    async def delete_api_key(self) -> DeleteAPIKey | None:
        """Revoke the API key of the authenticated user."""
        return await self._revoke(_API_KEY)

    async def delete_user_api_key(self, user: str) -> DeleteAPIKey | None:
        """Revoke the API key of ``user``. Requires an admin."""
        return await self._revoke(f"{_API_KEY}/{user}")

    async def delete_all_api_keys(self) -> DeleteAPIKey | None:
        """Revoke every API key. Requires an admin."""
        return await self._revoke(f"{_API_KEY}?deleteAll=1")

    async def get_encrypted_password(self) -> str:
        return await self._get_encrypted_password()


__all__ = ["UsersService", "AsyncUsersService"]
