"""Xray API clients."""

from __future__ import annotations

import httpx

from .._http import (
    AsyncClient,
    ClientConfig,
    SyncClient,
    XrayAuthentication,
    configure_auth,
    make_config,
)
from .scan import AsyncScanService, ScanService
from .summary import AsyncSummaryService, SummaryService
from .system import AsyncSystemService, SystemService
from .users import AsyncUsersService, UsersService

URL_ENV = "XRAY_URL"
TOKEN_ENV = "XRAY_TOKEN"


def _setup(
    base_url: str | None,
    token: str | None,
    username: str | None,
    password: str | None,
    timeout: float | None,
    user_agent: str | None,
    headers: dict[str, str] | None,
) -> tuple[ClientConfig, XrayAuthentication]:
    config = make_config(
        base_url, URL_ENV, timeout=timeout, user_agent=user_agent, headers=headers
    )
    authentication = XrayAuthentication()
    configure_auth(
        authentication, token=token, username=username, password=password, token_env=TOKEN_ENV
    )
    return config, authentication


class XrayClient(SyncClient):
    """Synchronous Xray client.

    ``base_url`` defaults to the XRAY_URL environment variable and the token
    to XRAY_TOKEN. Tokens are sent as a ``token`` query parameter, which is
    kept out of logs and error messages.
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

        self.scan = ScanService(self)
        self.summary = SummaryService(self)
        self.system = SystemService(self)
        self.users = UsersService(self)


class AsyncXrayClient(AsyncClient):
    """Asynchronous Xray client, see ``XrayClient``."""

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

        self.scan = AsyncScanService(self)
        self.summary = AsyncSummaryService(self)
        self.system = AsyncSystemService(self)
        self.users = AsyncUsersService(self)


__all__ = ["XrayClient", "AsyncXrayClient"]
