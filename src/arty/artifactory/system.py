"""System health, version and global configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from .._http import YAMLBody, iter_coroutine
from .._service import BaseService
from .configuration import ConfigurationPatch, GlobalConfig
from .models import Versions

_CONFIGURATION = "/api/system/configuration"


class _BaseSystemService(BaseService):
    async def _ping(self) -> str:
        response = await self._client._call("GET", "/api/system/ping", into=str)
        return response.data

    async def _get(self) -> str:
        response = await self._client._call("GET", "/api/system", into=str)
        return response.data

    async def _get_version_and_add_ons(self) -> Versions | None:
        response = await self._client._call("GET", "/api/system/version", into=Versions)
        return response.data

    async def _get_configuration(self) -> GlobalConfig | None:
        response = await self._client._call("GET", _CONFIGURATION)
        return response.decode_with(GlobalConfig.from_xml)

    async def _update_configuration(
        self, config: Union[ConfigurationPatch, Mapping[str, Any]]
    ) -> str:
        body = YAMLBody(config)
        response = await self._client._call("PATCH", _CONFIGURATION, body=body, into=str)
        return response.data


class SystemService(_BaseSystemService):
    def ping(self) -> str:
        """Return the health check answer, ``OK`` when the server is up."""
        return iter_coroutine(self._ping())

    def get(self) -> str:
        """Return the general system information as text."""
        return iter_coroutine(self._get())

    def get_version_and_add_ons(self) -> Versions | None:
        return iter_coroutine(self._get_version_and_add_ons())

    def get_configuration(self) -> GlobalConfig | None:
        """Fetch and parse the global XML configuration.

        Returns None if the document cannot be parsed.
        """
        return iter_coroutine(self._get_configuration())

    def update_configuration(
        self, config: Union[ConfigurationPatch, Mapping[str, Any]]
    ) -> str:
        """Apply a partial configuration update, sent as YAML."""
        return iter_coroutine(self._update_configuration(config))


class AsyncSystemService(_BaseSystemService):
    async def ping(self) -> str:
        """Return the health check answer, ``OK`` when the server is up."""
        return await self._ping()

    async def get(self) -> str:
        """Return the general system information as text."""
        return await self._get()

    async def get_version_and_add_ons(self) -> Versions | None:
        return await self._get_version_and_add_ons()

    async def get_configuration(self) -> GlobalConfig | None:
        """Fetch and parse the global XML configuration.

        Returns None if the document cannot be parsed.
        """
        return await self._get_configuration()

    async def update_configuration(
        self, config: Union[ConfigurationPatch, Mapping[str, Any]]
    ) -> str:
        """Apply a partial configuration update, sent as YAML."""
        return await self._update_configuration(config)


__all__ = ["SystemService", "AsyncSystemService"]
