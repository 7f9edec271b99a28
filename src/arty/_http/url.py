"""URL construction for API requests."""

from __future__ import annotations

import re
import urllib.parse
from enum import Enum
from typing import Any

from pydantic import BaseModel

from ..errors import ConfigurationError, OptionsError, URLError

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _check_characters(url: str) -> None:
    """Reject control characters and broken percent-escapes."""
    for ch in url:
        if ord(ch) < 0x20 or ord(ch) == 0x7F:
            raise URLError(f"parse {url!r}: invalid control character in URL")

    match = _BAD_ESCAPE_RE.search(url)
    if match is not None:
        escape = url[match.start() : match.start() + 3]
        raise URLError(f'parse {url!r}: invalid URL escape "{escape}"')


def _is_absolute(url: str) -> bool:
    parts = urllib.parse.urlsplit(url)
    return bool(parts.scheme and parts.netloc and _SCHEME_RE.match(parts.scheme))


def validate_url(url: str) -> str:
    """Validate a URL or relative reference, returning it unchanged."""
    _check_characters(url)
    if _is_absolute(url):
        return url

    # A relative reference whose first segment holds a colon would be read as
    # a scheme by any later parser.
    first_segment = re.split(r"[/?#]", url, maxsplit=1)[0]
    if ":" in first_segment:
        raise URLError(f"parse {url!r}: first path segment in URL cannot contain colon")
    return url


def normalize_base_url(base_url: str | None) -> str:
    """Validate a client base URL and ensure it ends with a trailing slash.

    Raises:
        ConfigurationError: If the URL is empty, malformed or not absolute.
    """
    if not base_url:
        raise ConfigurationError("No base URL provided")
    try:
        _check_characters(base_url)
    except URLError as ex:
        raise ConfigurationError(str(ex)) from None
    if not _is_absolute(base_url):
        raise ConfigurationError(f"parse {base_url!r}: base URL must be absolute")
    return base_url.rstrip("/") + "/"


def build_url(base_url: str, path: str) -> str:
    """Join ``path`` onto ``base_url`` with exactly one slash between them.

    ``path`` may carry its own query string or matrix parameters; both are
    kept as-is. An absolute URL in ``path`` is returned without joining.

    Raises:
        URLError: If the combined URL is malformed.
    """
    if _is_absolute(path):
        return validate_url(path)
    relative = path.lstrip("/")
    validate_url(relative)
    return validate_url(base_url.rstrip("/") + "/" + relative)


def _format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def add_options(url: str, options: BaseModel | None) -> str:
    """Append the populated fields of ``options`` to the query string of ``url``.

    Field aliases are used as query keys, in declaration order. Fields set to
    None are skipped and list values repeat their key. Any query string
    already on ``url`` is preserved.

    Raises:
        OptionsError: If ``options`` is not a pydantic model.
        URLError: If ``url`` is malformed.
    """
    if options is None:
        return url
    if not isinstance(options, BaseModel):
        raise OptionsError(f"expected structured options, got {type(options).__name__}")
    validate_url(url)

    pairs: list[tuple[str, str]] = []
    for name, field in type(options).model_fields.items():
        value = getattr(options, name)
        if value is None:
            continue
        key = field.alias or name
        values = value if isinstance(value, (list, tuple)) else [value]
        pairs.extend((key, _format_query_value(v)) for v in values)

    if not pairs:
        return url

    base, sep, fragment = url.partition("#")
    if "?" not in base:
        joiner = "?"
    elif base.endswith(("?", "&")):
        joiner = ""
    else:
        joiner = "&"
    return base + joiner + urllib.parse.urlencode(pairs) + sep + fragment


__all__ = [
    "add_options",
    "build_url",
    "normalize_base_url",
    "validate_url",
]
