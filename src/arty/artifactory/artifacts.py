"""Deploy, fetch, copy, move and delete artifacts."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, BinaryIO, Union

from .._http import BytesBody, iter_coroutine
from .._service import BaseService
from .models import Artifacts

Properties = Mapping[str, Union[str, Sequence[str]]]
UploadSource = Union[str, "os.PathLike[str]", bytes, BinaryIO]


def _values(value: str | Sequence[str]) -> list[str]:
    return [value] if isinstance(value, str) else list(value)


def matrix_params(properties: Properties | None) -> str:
    """Render properties as matrix parameters, e.g. ``os=linux;arch=amd64,arm64``."""
    if not properties:
        return ""
    return ";".join(f"{key}={','.join(_values(value))}" for key, value in properties.items())


def _read_source(file: UploadSource) -> bytes:
    if isinstance(file, (bytes, bytearray)):
        return bytes(file)
    if isinstance(file, (str, os.PathLike)):
        return Path(file).read_bytes()
    return file.read()


class _BaseArtifactsService(BaseService):
    async def _download(self, repo: str, path: str, into: Any = None) -> bytes | None:
        response = await self._client._call(
            "GET", f"/{repo}/{path}", into=bytes if into is None else into
        )
        return response.content if into is None else None

    async def _upload(
        self,
        repo: str,
        path: str,
        file: UploadSource,
        properties: Properties | None = None,
    ) -> str:
        url = f"/{repo}/{path}"
        params = matrix_params(properties)
        if params:
            url = f"{url};{params}"
        body = BytesBody(_read_source(file))
        response = await self._client._call("PUT", url, body=body, into=str)
        return response.data

    async def _copy(
        self, source_repo: str, source_path: str, target_repo: str, target_path: str
    ) -> Artifacts | None:
        url = f"/api/copy/{source_repo}/{source_path}?to=/{target_repo}/{target_path}"
        response = await self._client._call("POST", url, into=Artifacts)
        return response.data

    async def _move(
        self, source_repo: str, source_path: str, target_repo: str, target_path: str
    ) -> Artifacts | None:
        url = f"/api/move/{source_repo}/{source_path}?to=/{target_repo}/{target_path}"
        response = await self._client._call("POST", url, into=Artifacts)
        return response.data

    async def _delete(self, repo: str, path: str) -> str:
        response = await self._client._call("DELETE", f"/{repo}/{path}", into=str)
        return response.data


class ArtifactsService(_BaseArtifactsService):
    def download(self, repo: str, path: str, into: Any = None) -> bytes | None:
        """Fetch an artifact.

        Returns the content, or None when ``into`` (any object with a
        ``write`` method) was given and received the streamed body instead.
        """
        return iter_coroutine(self._download(repo, path, into))

    def upload(
        self,
        repo: str,
        path: str,
        file: UploadSource,
        properties: Properties | None = None,
    ) -> str:
        """Deploy ``file`` (a path, bytes or binary file object) to ``repo/path``.

        ``properties`` are attached as matrix parameters; a list value is
        stored as a multi-valued property.
        """
        return iter_coroutine(self._upload(repo, path, file, properties))

    def copy(
        self, source_repo: str, source_path: str, target_repo: str, target_path: str
    ) -> Artifacts | None:
        """Copy an artifact or folder to another location."""
        return iter_coroutine(self._copy(source_repo, source_path, target_repo, target_path))

    def move(
        self, source_repo: str, source_path: str, target_repo: str, target_path: str
    ) -> Artifacts | None:
        """Move an artifact or folder to another location."""
        return iter_coroutine(self._move(source_repo, source_path, target_repo, target_path))

    def delete(self, repo: str, path: str) -> str:
        """Delete an artifact or folder."""
        return iter_coroutine(self._delete(repo, path))


class AsyncArtifactsService(_BaseArtifactsService):
    async def download(self, repo: str, path: str, into: Any = None) -> bytes | None:
        """Fetch an artifact.

        Returns the content, or None when ``into`` (any object with a
        ``write`` method) was given and received the streamed body instead.
        """
        return await self._download(repo, path, into)

    async def upload(
        self,
        repo: str,
        path: str,
        file: UploadSource,
        properties: Properties | None = None,
    ) -> str:
        """Deploy ``file`` (a path, bytes or binary file object) to ``repo/path``.

        ``properties`` are attached as matrix parameters; a list value is
        stored as a multi-valued property.
        """
        return await self._upload(repo, path, file, properties)

    async def copy(
        self, source_repo: str, source_path: str, target_repo: str, target_path: str
    ) -> Artifacts | None:
        """Copy an artifact or folder to another location."""
        return await self._copy(source_repo, source_path, target_repo, target_path)

    async def move(
        self, source_repo: str, source_path: str, target_repo: str, target_path: str
    ) -> Artifacts | None:
        """Move an artifact or folder to another location."""
        return await self._move(source_repo, source_path, target_repo, target_path)

    async def delete(self, repo: str, path: str) -> str:
        """Delete an artifact or folder."""
        return await self._delete(repo, path)


__all__ = ["ArtifactsService", "AsyncArtifactsService", "matrix_params"]
