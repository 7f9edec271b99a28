"""Artifactory API clients."""

from __future__ import annotations

import httpx

from .._http import (
    ArtifactoryAuthentication,
    AsyncClient,
    ClientConfig,
    SyncClient,
    configure_auth,
    make_config,
)
from .artifacts import ArtifactsService, AsyncArtifactsService
from .builds import AsyncBuildsService, BuildsService
from .docker import AsyncDockerService, DockerService
from .groups import AsyncGroupsService, GroupsService
from .licenses import AsyncLicensesService, LicensesService
from .permissions import (
    AsyncPermissionsService,
    AsyncPermissionsV2Service,
    PermissionsService,
    PermissionsV2Service,
)
from .replications import AsyncReplicationsService, ReplicationsService
from .repositories import AsyncRepositoriesService, RepositoriesService
from .search import AsyncSearchService, SearchService
from .storage import AsyncStorageService, StorageService
from .system import AsyncSystemService, SystemService
from .users import AsyncUsersService, UsersService

URL_ENV = "ARTIFACTORY_URL"
TOKEN_ENV = "ARTIFACTORY_TOKEN"


def _setup(
    base_url: str | None,
    token: str | None,
    username: str | None,
    password: str | None,
    timeout: float | None,
    user_agent: str | None,
    headers: dict[str, str] | None,
) -> tuple[ClientConfig, ArtifactoryAuthentication]:
    config = make_config(
        base_url, URL_ENV, timeout=timeout, user_agent=user_agent, headers=headers
    )
    authentication = ArtifactoryAuthentication()
    configure_auth(
        authentication, token=token, username=username, password=password, token_env=TOKEN_ENV
    )
    return config, authentication


class ArtifactoryClient(SyncClient):
    """Synchronous Artifactory client.

    ``base_url`` points at the Artifactory application root, e.g.
    ``https://example.jfrog.io/artifactory``; it defaults to the
    ARTIFACTORY_URL environment variable. Credentials are a token (default
    ARTIFACTORY_TOKEN) or a username and password, and can be changed later
    through ``client.authentication``.

    Example:
        >>> with ArtifactoryClient("https://example.jfrog.io/artifactory", token="...") as art:
        ...     art.system.ping()
        'OK'
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        token: str | None = None,
        username: str | None = None,
        password: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
        headers: dict[str, str] | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        config, authentication = _setup(
            base_url, token, username, password, timeout, user_agent, headers
        )
        super().__init__(config, authentication, client=client)

        self.artifacts = ArtifactsService(self)
        self.builds = BuildsService(self)
        self.docker = DockerService(self)
        self.groups = GroupsService(self)
        self.licenses = LicensesService(self)
        self.permissions = PermissionsService(self)
        self.permissions_v2 = PermissionsV2Service(self)
        self.replications = ReplicationsService(self)
        self.repositories = RepositoriesService(self)
        self.search = SearchService(self)
        self.storage = StorageService(self)
        self.system = SystemService(self)
        self.users = UsersService(self)


class AsyncArtifactoryClient(AsyncClient):
    """Asynchronous Artifactory client, see ``ArtifactoryClient``."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        token: str | None = None,
        username: str | None = None,
        password: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
        headers: dict[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        config, authentication = _setup(
            base_url, token, username, password, timeout, user_agent, headers
        )
        super().__init__(config, authentication, client=client)

        self.artifacts = AsyncArtifactsService(self)
        self.builds = AsyncBuildsService(self)
        self.docker = AsyncDockerService(self)
        self.groups = AsyncGroupsService(self)
        self.licenses = AsyncLicensesService(self)
        self.permissions = AsyncPermissionsService(self)
        self.permissions_v2 = AsyncPermissionsV2Service(self)
        self.replications = AsyncReplicationsService(self)
        self.repositories = AsyncRepositoriesService(self)
        self.search = AsyncSearchService(self)
        self.storage = AsyncStorageService(self)
        self.system = AsyncSystemService(self)
        self.users = AsyncUsersService(self)


__all__ = ["ArtifactoryClient", "AsyncArtifactoryClient"]
