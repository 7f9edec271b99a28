"""Storage API: item metadata, properties, listings and storage summary."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Union

from .._http import iter_coroutine
from .._service import BaseService
from .models import (
    File,
    FileList,
    FileStatistics,
    Folder,
    ItemLastModified,
    ItemProperties,
    StorageSummary,
)

Properties = Mapping[str, Union[str, Sequence[str]]]


def property_query(properties: Properties) -> str:
    """Render properties for the storage API, e.g. ``os=linux;arch=[amd64,arm64]``."""
    rendered = []
    for key, value in properties.items():
        values = [value] if isinstance(value, str) else list(value)
        if len(values) == 1:
            rendered.append(f"{key}={values[0]}")
        else:
            rendered.append(f"{key}=[{','.join(values)}]")
    return ";".join(rendered)


class _BaseStorageService(BaseService):
    def _item(self, repo: str, path: str) -> str:
        return f"/api/storage/{repo}/{path}"

    async def _get_folder(self, repo: str, path: str) -> Folder | None:
        response = await self._client._call("GET", self._item(repo, path), into=Folder)
        return response.data

    async def _get_file(self, repo: str, path: str) -> File | None:
        response = await self._client._call("GET", self._item(repo, path), into=File)
        return response.data

    async def _get_item_last_modified(self, repo: str, path: str) -> ItemLastModified | None:
        url = f"{self._item(repo, path)}?lastModified"
        response = await self._client._call("GET", url, into=ItemLastModified)
        return response.data

    async def _get_file_statistics(self, repo: str, path: str) -> FileStatistics | None:
        url = f"{self._item(repo, path)}?stats"
        response = await self._client._call("GET", url, into=FileStatistics)
        return response.data

    async def _get_item_properties(self, repo: str, path: str) -> ItemProperties | None:
        url = f"{self._item(repo, path)}?properties"
        response = await self._client._call("GET", url, into=ItemProperties)
        return response.data

    async def _set_item_properties(self, repo: str, path: str, properties: Properties) -> None:
        url = f"{self._item(repo, path)}?properties={property_query(properties)}&recursive=1"
        await self._client._call("PUT", url)

    async def _delete_item_properties(
        self, repo: str, path: str, properties: Sequence[str]
    ) -> None:
        url = f"{self._item(repo, path)}?properties={','.join(properties)}"
        await self._client._call("DELETE", url)

    async def _get_file_list(self, repo: str, path: str) -> FileList | None:
        url = f"{self._item(repo, path)}?list&deep=1"
        response = await self._client._call("GET", url, into=FileList)
        return response.data

    async def _get_storage_summary(self) -> StorageSummary | None:
        response = await self._client._call("GET", "/api/storageinfo", into=StorageSummary)
        return response.data


class StorageService(_BaseStorageService):
    def get_folder(self, repo: str, path: str) -> Folder | None:
        return iter_coroutine(self._get_folder(repo, path))

    def get_file(self, repo: str, path: str) -> File | None:
        return iter_coroutine(self._get_file(repo, path))

    def get_item_last_modified(self, repo: str, path: str) -> ItemLastModified | None:
        """Return the most recent modification time within ``path``."""
        return iter_coroutine(self._get_item_last_modified(repo, path))

    def get_file_statistics(self, repo: str, path: str) -> FileStatistics | None:
        """Return download statistics of a file."""
        return iter_coroutine(self._get_file_statistics(repo, path))

    def get_item_properties(self, repo: str, path: str) -> ItemProperties | None:
        return iter_coroutine(self._get_item_properties(repo, path))

    def set_item_properties(self, repo: str, path: str, properties: Properties) -> None:
        """Attach ``properties`` to an item, recursively for folders."""
        return iter_coroutine(self._set_item_properties(repo, path, properties))

    def delete_item_properties(self, repo: str, path: str, properties: Sequence[str]) -> None:
        """Remove the named properties from an item."""
        return iter_coroutine(self._delete_item_properties(repo, path, properties))

    def get_file_list(self, repo: str, path: str) -> FileList | None:
        """List every file below ``path``, at any depth."""
        return iter_coroutine(self._get_file_list(repo, path))

    def get_storage_summary(self) -> StorageSummary | None:
        return iter_coroutine(self._get_storage_summary())


class AsyncStorageService(_BaseStorageService):
    async def get_folder(self, repo: str, path: str) -> Folder | None:
        return await self._get_folder(repo, path)

    async def get_file(self, repo: str, path: str) -> File | None:
        return await self._get_file(repo, path)

    async def get_item_last_modified(self, repo: str, path: str) -> ItemLastModified | None:
        """Return the most recent modification time within ``path``."""
        return await self._get_item_last_modified(repo, path)

    async def get_file_statistics(self, repo: str, path: str) -> FileStatistics | None:
        """Return download statistics of a file."""
        return await self._get_file_statistics(repo, path)

    async def get_item_properties(self, repo: str, path: str) -> ItemProperties | None:
        return await self._get_item_properties(repo, path)

    async def set_item_properties(self, repo: str, path: str, properties: Properties) -> None:
        """Attach ``properties`` to an item, recursively for folders."""
        return await self._set_item_properties(repo, path, properties)

    async def delete_item_properties(
        self, repo: str, path: str, properties: Sequence[str]
    ) -> None:
        """Remove the named properties from an item."""
        return await self._delete_item_properties(repo, path, properties)

    async def get_file_list(self, repo: str, path: str) -> FileList | None:
        """List every file below ``path``, at any depth."""
        return await self._get_file_list(repo, path)

    async def get_storage_summary(self) -> StorageSummary | None:
        return await self._get_storage_summary()


__all__ = ["StorageService", "AsyncStorageService", "property_query"]
