"""Permission targets, through the v1 and v2 security APIs."""

from __future__ import annotations

from .._http import iter_coroutine
from .._service import BaseService
from ..errors import APIError
from .models import PermissionTarget

_PERMISSIONS = "/api/security/permissions"
_PERMISSIONS_V2 = "/api/v2/security/permissions"


class _BasePermissionsService(BaseService):
    async def _get_all(self) -> list[PermissionTarget] | None:
        response = await self._client._call("GET", _PERMISSIONS, into=list[PermissionTarget])
        return response.data

    async def _get(self, name: str) -> PermissionTarget | None:
        url = f"{_PERMISSIONS}/{name}"
        response = await self._client._call("GET", url, into=PermissionTarget)
        return response.data

    async def _create(self, target: PermissionTarget) -> str:
        url = f"{_PERMISSIONS}/{target.name}"
        response = await self._client._call("PUT", url, body=target, into=str)
        return response.data

    async def _update(self, target: PermissionTarget) -> str:
        # The v1 API only replaces permission targets; PUT is used for both.
        url = f"{_PERMISSIONS}/{target.name}"
        response = await self._client._call("PUT", url, body=target, into=str)
        return response.data

    async def _delete(self, name: str) -> str:
        response = await self._client._call("DELETE", f"{_PERMISSIONS}/{name}", into=str)
        return response.data


class PermissionsService(_BasePermissionsService):
    def get_all(self) -> list[PermissionTarget] | None:
        return iter_coroutine(self._get_all())

    def get(self, name: str) -> PermissionTarget | None:
        return iter_coroutine(self._get(name))

    def create(self, target: PermissionTarget) -> str:
        """Create or replace the permission target named ``target.name``."""
        return iter_coroutine(self._create(target))

    def update(self, target: PermissionTarget) -> str:
        return iter_coroutine(self._update(target))

    def delete(self, name: str) -> str:
        return iter_coroutine(self._delete(name))


class AsyncPermissionsService(_BasePermissionsService):
    async def get_all(self) -> list[PermissionTarget] | None:
        return await self._get_all()

    async def get(self, name: str) -> PermissionTarget | None:
        return await self._get(name)

    async def create(self, target: PermissionTarget) -> str:
        """Create or replace the permission target named ``target.name``."""
        return await self._create(target)

    async def update(self, target: PermissionTarget) -> str:
        return await self._update(target)

    async def delete(self, name: str) -> str:
        return await self._delete(name)


class _BasePermissionsV2Service(BaseService):
    async def _exists(self, name: str) -> bool:
        try:
            await self._client._call("HEAD", f"{_PERMISSIONS_V2}/{name}")
        except APIError as ex:
            if ex.status_code == 404:
                return False
            raise
        return True


class PermissionsV2Service(_BasePermissionsV2Service):
    def exists(self, name: str) -> bool:
        """True if the permission target exists, False on a 404.

        Raises:
            APIError: On any other non-2xx status.
        """
        return iter_coroutine(self._exists(name))


class AsyncPermissionsV2Service(_BasePermissionsV2Service):
    async def exists(self, name: str) -> bool:
        """True if the permission target exists, False on a 404.

        Raises:
            APIError: On any other non-2xx status.
        """
        return await self._exists(name)


__all__ = [
    "PermissionsService",
    "AsyncPermissionsService",
    "PermissionsV2Service",
    "AsyncPermissionsV2Service",
]
