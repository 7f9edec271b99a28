"""Response envelope, status classification and body decoding."""

from __future__ import annotations

import logging
from typing import Any, Callable

import httpx
from pydantic import TypeAdapter

from ..errors import APIError

logger = logging.getLogger(__name__)


class Response:
    """An API response with its body already read.

    ``data`` holds the value decoded from the body when the caller asked for
    one. Decoding never raises: a body that is not JSON, or does not fit the
    requested type, leaves ``decoded`` False and the reason in
    ``decode_error``. Vendor endpoints answer some successful calls with
    plain text or HTML, so the status code is the authoritative signal.
    """

    def __init__(self, response: httpx.Response, *, redact_param: str | None = None) -> None:
        self._response = response
        self._redact_param = redact_param
        self.data: Any = None
        self.decoded = False
        self.decode_error: Exception | None = None

    @property
    def http(self) -> httpx.Response:
        """The underlying httpx response."""
        return self._response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def reason_phrase(self) -> str:
        return self._response.reason_phrase

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    @property
    def url(self) -> httpx.URL:
        """The requested URL, without the query parameter that carried the token."""
        url = self._response.request.url
        if self._redact_param is None:
            return url
        return url.copy_remove_param(self._redact_param)

    @property
    def content(self) -> bytes:
        return self._response.content

    @property
    def text(self) -> str:
        return self._response.text

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299

    def json(self) -> Any:
        return self._response.json()

    def decode(self, into: Any) -> Any:
        """Decode the body as ``into`` and record the outcome on the envelope."""
        value, error = decode_body(self._response, into)
        return self._record(value, error, into)

    def decode_with(self, parse: Callable[[bytes], Any]) -> Any:
        """Decode the body with ``parse``, which raises ValueError on bad input."""
        try:
            value, error = parse(self.content), None
        except ValueError as ex:
            value, error = None, ex
        return self._record(value, error, parse)

    def _record(self, value: Any, error: Exception | None, into: Any) -> Any:
        self.data = value
        self.decoded = error is None
        self.decode_error = error
        if error is not None:
            logger.debug("response body from %s not decoded as %r: %s", self.url, into, error)
        return value

    def __repr__(self) -> str:
        return f"<Response [{self.status_code} {self.reason_phrase}]>"


def decode_body(response: httpx.Response, into: Any) -> tuple[Any, Exception | None]:
    """Decode a response body.

    ``str`` and ``bytes`` return the body as text or raw bytes; any other
    type is validated from JSON through a pydantic ``TypeAdapter``.
    """
    if into is bytes:
        return response.content, None
    if into is str:
        return response.text, None
    try:
        return TypeAdapter(into).validate_json(response.content), None
    except (ValueError, OverflowError, OSError) as ex:
        # ValidationError is a ValueError; the others escape custom validators.
        return None, ex


def is_byte_sink(target: Any) -> bool:
    """True when ``target`` is a writable object rather than a decode type."""
    return not isinstance(target, type) and callable(getattr(target, "write", None))


def _parse_error_body(response: httpx.Response) -> Any | None:
    try:
        return response.json()
    except ValueError:
        return None


def check_response(response: Response) -> None:
    """Raise ``APIError`` unless the status code is in the 2xx range."""
    if response.is_success:
        return

    logger.debug("%s returned %s", response.url, response.status_code)
    message = (
        f"API call to {response.url} failed: "
        f"{response.status_code} {response.reason_phrase}".rstrip()
    )
    raise APIError(response, message, data=_parse_error_body(response.http))


__all__ = [
    "Response",
    "check_response",
    "decode_body",
    "is_byte_sink",
]
