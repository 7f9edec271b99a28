"""Exceptions raised by the Artifactory and Xray clients."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ._http.response import Response


class ArtyError(Exception):
    """Base class for every error raised by this library."""


class ConfigurationError(ArtyError, ValueError):
    """The client could not be constructed from the given settings."""


class URLError(ArtyError, ValueError):
    """A request URL could not be built."""


class OptionsError(ArtyError, TypeError):
    """Query options were not a structured options model."""


class EncodeError(ArtyError, ValueError):
    """A request body could not be serialized."""

    def __init__(self, message: str, cause: Exception | None = None):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause


class APIError(ArtyError):
    """A call returned a status outside the 2xx range.

    The wrapped response stays available on ``response`` so failure bodies
    can be inspected, e.g. to read the vendor's structured error payload.
    """

    def __init__(self, response: Response, message: str, *, data: Any | None = None):
        super().__init__(message)
        self.response = response
        self.status_code = response.status_code
        self.url = str(response.url)
        self.data = data

    @property
    def messages(self) -> list[str]:
        """Messages from an Artifactory ``{"errors": [{"message": ...}]}`` body."""
        if not isinstance(self.data, dict):
            return []
        errors = self.data.get("errors")
        if not isinstance(errors, list):
            return []
        return [
            err["message"]
            for err in errors
            if isinstance(err, dict) and isinstance(err.get("message"), str)
        ]


__all__ = [
    "ArtyError",
    "ConfigurationError",
    "URLError",
    "OptionsError",
    "EncodeError",
    "APIError",
]
