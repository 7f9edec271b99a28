"""License management for single instances and HA clusters."""

from __future__ import annotations

from .._http import add_options, iter_coroutine
from .._service import BaseService
from .models import (
    HALicenseResponse,
    HALicenses,
    License,
    LicenseRemoval,
    LicenseRequest,
    LicenseResponse,
)

_LICENSES = "/api/system/licenses"


class _BaseLicensesService(BaseService):
    async def _get(self) -> License | None:
        response = await self._client._call("GET", _LICENSES, into=License)
        return response.data

    async def _install(self, license: LicenseRequest) -> LicenseResponse | None:
        response = await self._client._call(
            "POST", _LICENSES, body=license, into=LicenseResponse
        )
        return response.data

    async def _get_ha(self) -> HALicenses | None:
        response = await self._client._call("GET", _LICENSES, into=HALicenses)
        return response.data

    async def _install_ha(self, licenses: list[LicenseRequest]) -> HALicenseResponse | None:
        response = await self._client._call(
            "POST", _LICENSES, body=licenses, into=HALicenseResponse
        )
        return response.data

    async def _delete_ha(self, removal: LicenseRemoval) -> HALicenseResponse | None:
        url = add_options(_LICENSES, removal)
        response = await self._client._call("DELETE", url, into=HALicenseResponse)
        return response.data


class LicensesService(_BaseLicensesService):
    def get(self) -> License | None:
        """Return the license of a single-node installation."""
        return iter_coroutine(self._get())

    def install(self, license: LicenseRequest) -> LicenseResponse | None:
        return iter_coroutine(self._install(license))

    def get_ha(self) -> HALicenses | None:
        """Return the licenses of every node in an HA cluster."""
        return iter_coroutine(self._get_ha())

    def install_ha(self, licenses: list[LicenseRequest]) -> HALicenseResponse | None:
        return iter_coroutine(self._install_ha(licenses))

    def delete_ha(self, removal: LicenseRemoval) -> HALicenseResponse | None:
        """Remove the HA licenses whose hashes are listed in ``removal``."""
        return iter_coroutine(self._delete_ha(removal))


class AsyncLicensesService(_BaseLicensesService):
    async def get(self) -> License | None:
        """Return the license of a single-node installation."""
        return await self._get()

    async def install(self, license: LicenseRequest) -> LicenseResponse | None:
        return await self._install(license)

    async def get_ha(self) -> HALicenses | None:
        """Return the licenses of every node in an HA cluster."""
        return await self._get_ha()

    async def install_ha(self, licenses: list[LicenseRequest]) -> HALicenseResponse | None:
        return await self._install_ha(licenses)

    async def delete_ha(self, removal: LicenseRemoval) -> HALicenseResponse | None:
        """Remove the HA licenses whose hashes are listed in ``removal``."""
        return await self._delete_ha(removal)


__all__ = ["LicensesService", "AsyncLicensesService"]
