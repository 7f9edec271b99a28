"""Authentication strategies applied to outgoing requests.

Artifactory and Xray accept the same HTTP Basic credentials but carry API
tokens differently: Artifactory reads a custom header while Xray expects a
``token`` query parameter. Each API family gets its own strategy class.

Strategies are plain mutable state with no locking. Share a client between
threads only if credentials are not changed while requests are in flight.
"""

from __future__ import annotations

import abc
import base64
import enum

import httpx

from ..errors import ConfigurationError
from .config import resolve_token

ARTIFACTORY_TOKEN_HEADER = "X-JFrog-Art-Api"
XRAY_TOKEN_PARAM = "token"


class AuthType(enum.Enum):
    NONE = "none"
    BASIC = "basic"
    TOKEN = "token"


def basic_auth_header(username: str, password: str) -> str:
    """Build an HTTP Basic ``Authorization`` header value."""
    credentials = f"{username}:{password}".encode()
    return "Basic " + base64.b64encode(credentials).decode("ascii")


class Authentication(abc.ABC):
    """Credentials held by a client, in at most one mode at a time."""

    def __init__(self) -> None:
        self._auth_type = AuthType.NONE
        self._username: str | None = None
        self._secret: str | None = None

    @property
    def auth_type(self) -> AuthType:
        return self._auth_type

    @property
    def username(self) -> str | None:
        return self._username

    def set_basic_auth(self, username: str, password: str) -> None:
        """Use HTTP Basic auth for every following request."""
        self._username = username
        self._secret = password
        self._auth_type = AuthType.BASIC

    def set_token_auth(self, token: str) -> None:
        """Use API token auth for every following request."""
        self._username = None
        self._secret = token
        self._auth_type = AuthType.TOKEN

    def clear(self) -> None:
        """Send requests anonymously."""
        self._username = None
        self._secret = None
        self._auth_type = AuthType.NONE

    def has_auth(self) -> bool:
        return self._auth_type is not AuthType.NONE

    def has_basic_auth(self) -> bool:
        return self._auth_type is AuthType.BASIC

    def has_token_auth(self) -> bool:
        return self._auth_type is AuthType.TOKEN

    def apply(self, request: httpx.Request) -> httpx.Request:
        """Attach the configured credentials to ``request``."""
        if self._auth_type is AuthType.BASIC:
            request.headers["Authorization"] = basic_auth_header(
                self._username or "", self._secret or ""
            )
        elif self._auth_type is AuthType.TOKEN:
            self._apply_token(request, self._secret or "")
        return request

    def query_secret(self) -> str | None:
        """Name of the query parameter that carries the secret, if any."""
        return None

    @abc.abstractmethod
    def _apply_token(self, request: httpx.Request, token: str) -> None: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(auth_type={self._auth_type.value!r})"


class ArtifactoryAuthentication(Authentication):
    """Artifactory credentials; tokens go in the ``X-JFrog-Art-Api`` header."""

    def _apply_token(self, request: httpx.Request, token: str) -> None:
        request.headers[ARTIFACTORY_TOKEN_HEADER] = token


class XrayAuthentication(Authentication):
    """Xray credentials; tokens go in the ``token`` query parameter."""

    def _apply_token(self, request: httpx.Request, token: str) -> None:
        request.url = request.url.copy_add_param(XRAY_TOKEN_PARAM, token)

    def query_secret(self) -> str | None:
        return XRAY_TOKEN_PARAM if self.has_token_auth() else None


def configure_auth(
    authentication: Authentication,
    *,
    token: str | None = None,
    username: str | None = None,
    password: str | None = None,
    token_env: str | None = None,
) -> Authentication:
    """Load constructor credentials into ``authentication``.

    Without a username and password, the token falls back to the
    ``token_env`` environment variable.

    Raises:
        ConfigurationError: If only one of username and password is given,
            or a token is given alongside them.
    """
    if (username is None) != (password is None):
        raise ConfigurationError("username and password must be given together")
    if username is not None and password is not None:
        if token:
            raise ConfigurationError("pass either token or username/password, not both")
        authentication.set_basic_auth(username, password)
        return authentication

    if token_env is not None:
        token = resolve_token(token, token_env)
    if token:
        authentication.set_token_auth(token)
    return authentication


__all__ = [
    "ARTIFACTORY_TOKEN_HEADER",
    "XRAY_TOKEN_PARAM",
    "AuthType",
    "Authentication",
    "ArtifactoryAuthentication",
    "XrayAuthentication",
    "basic_auth_header",
    "configure_auth",
]
