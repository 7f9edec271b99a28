"""Python client for the Artifactory and Xray REST APIs."""

from ._http import (
    DEFAULT_TIMEOUT,
    USER_AGENT,
    VERSION,
    ArtifactoryAuthentication,
    Authentication,
    AuthType,
    BytesBody,
    JSONBody,
    Response,
    XrayAuthentication,
    YAMLBody,
    add_options,
    build_url,
)
from .artifactory import ArtifactoryClient, AsyncArtifactoryClient
from .errors import (
    APIError,
    ArtyError,
    ConfigurationError,
    EncodeError,
    OptionsError,
    URLError,
)
from .timestamp import Timestamp
from .xray import AsyncXrayClient, XrayClient

__version__ = VERSION

__all__ = [
    "ArtifactoryClient",
    "AsyncArtifactoryClient",
    "XrayClient",
    "AsyncXrayClient",
    "Authentication",
    "ArtifactoryAuthentication",
    "XrayAuthentication",
    "AuthType",
    "Response",
    "JSONBody",
    "YAMLBody",
    "BytesBody",
    "add_options",
    "build_url",
    "Timestamp",
    "ArtyError",
    "APIError",
    "ConfigurationError",
    "EncodeError",
    "OptionsError",
    "URLError",
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
    "__version__",
]
