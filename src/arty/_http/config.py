"""HTTP configuration shared by the Artifactory and Xray clients."""

from __future__ import annotations

import os
import platform
import sys
from dataclasses import dataclass, field

from ..errors import ConfigurationError
from .url import build_url, normalize_base_url

VERSION = "0.1.0"
USER_AGENT = f"arty/{VERSION} (Python/{sys.version.split()[0]}; {platform.system()})"
DEFAULT_TIMEOUT = 60.0


@dataclass
class ClientConfig:
    """Settings for one API client."""

    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = USER_AGENT
    headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.base_url = normalize_base_url(self.base_url)

    def get_default_headers(self) -> dict[str, str]:
        return {
            "user-agent": self.user_agent,
            "accept": "application/json",
            **self.headers,
        }

    def build_url(self, path: str) -> str:
        return build_url(self.base_url, path)


def resolve_base_url(base_url: str | None, env_var: str) -> str:
    """Resolve the base URL from argument or environment, raising if not found."""
    resolved = base_url or os.getenv(env_var)
    if not resolved:
        raise ConfigurationError(f"Missing base URL. Pass base_url=... or set {env_var}.")
    return resolved


def make_config(
    base_url: str | None,
    url_env: str,
    *,
    timeout: float | None = None,
    user_agent: str | None = None,
    headers: dict[str, str] | None = None,
) -> ClientConfig:
    """Build a ClientConfig from client constructor arguments."""
    return ClientConfig(
        base_url=resolve_base_url(base_url, url_env),
        timeout=DEFAULT_TIMEOUT if timeout is None else timeout,
        user_agent=user_agent or USER_AGENT,
        headers=dict(headers or {}),
    )


def resolve_token(token: str | None, env_var: str) -> str | None:
    """Resolve an API token from argument or environment."""
    return token or os.getenv(env_var) or None


__all__ = [
    "ClientConfig",
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
    "VERSION",
    "make_config",
    "resolve_base_url",
    "resolve_token",
]
