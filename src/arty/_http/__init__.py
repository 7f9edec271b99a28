"""Shared HTTP infrastructure for the Artifactory and Xray clients."""

from .auth import (
    ArtifactoryAuthentication,
    Authentication,
    AuthType,
    XrayAuthentication,
    configure_auth,
)
from .client import (
    AsyncClient,
    BaseClient,
    BytesBody,
    JSONBody,
    RequestBody,
    SyncClient,
    YAMLBody,
    encode_body,
)
from .config import (
    DEFAULT_TIMEOUT,
    USER_AGENT,
    VERSION,
    ClientConfig,
    make_config,
    resolve_base_url,
    resolve_token,
)
from .iter_coroutine import iter_coroutine
from .response import Response, check_response
from .transport import AsyncTransport, BaseTransport, BlockingTransport
from .url import add_options, build_url

__all__ = [
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
    "VERSION",
    "iter_coroutine",
    "ClientConfig",
    "make_config",
    "resolve_base_url",
    "resolve_token",
    "AuthType",
    "Authentication",
    "ArtifactoryAuthentication",
    "XrayAuthentication",
    "configure_auth",
    "build_url",
    "add_options",
    "BaseTransport",
    "BlockingTransport",
    "AsyncTransport",
    "JSONBody",
    "YAMLBody",
    "BytesBody",
    "RequestBody",
    "encode_body",
    "Response",
    "check_response",
    "BaseClient",
    "SyncClient",
    "AsyncClient",
]
