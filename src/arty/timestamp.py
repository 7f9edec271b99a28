"""Timestamp scalar used by Artifactory payloads.

Artifactory reports times in several shapes depending on the endpoint:
Unix epoch seconds, RFC3339 strings, or ``YYYY-MM-DD HH:MM:SS`` without a
zone. ``Timestamp`` accepts each of them, tried in that order, and always
serializes back to RFC3339 in UTC.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

FALLBACK_FORMAT = "%Y-%m-%d %H:%M:%S"

_RFC3339_RE = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[Tt](?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?(?P<zone>[Zz]|[+-]\d{2}:\d{2})$"
)
_EPOCH_RE = re.compile(r"^-?\d+$")


def _parse_rfc3339(text: str) -> datetime | None:
    match = _RFC3339_RE.match(text)
    if match is None:
        return None

    parsed = datetime.strptime(f"{match['date']}T{match['time']}", "%Y-%m-%dT%H:%M:%S")
    fraction = match["fraction"]
    if fraction:
        parsed = parsed.replace(microsecond=int(fraction[:6].ljust(6, "0")))

    zone = match["zone"]
    if zone in ("Z", "z"):
        return parsed.replace(tzinfo=timezone.utc)
    sign = 1 if zone[0] == "+" else -1
    hours, minutes = int(zone[1:3]), int(zone[4:6])
    offset = timedelta(hours=hours, minutes=minutes) * sign
    return parsed.replace(tzinfo=timezone(offset))


def _from_epoch(value: Any, seconds: float) -> datetime:
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise ValueError(f"invalid timestamp {value!r}: out of range") from None


def parse_timestamp(value: Any) -> datetime:
    """Parse an epoch, RFC3339 or fallback-format value into an aware datetime.

    Raises:
        ValueError: If ``value`` matches none of the accepted formats.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
    if isinstance(value, bool):
        raise ValueError(f"invalid timestamp {value!r}")
    if isinstance(value, (int, float)):
        return _from_epoch(value, value)
    if not isinstance(value, str):
        raise ValueError(f"invalid timestamp {value!r}")

    text = value.strip()
    if _EPOCH_RE.match(text):
        return _from_epoch(value, int(text))

    parsed = _parse_rfc3339(text)
    if parsed is not None:
        return parsed

    try:
        return datetime.strptime(text, FALLBACK_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        raise ValueError(f"invalid timestamp {value!r}") from None


def format_timestamp(value: datetime) -> str:
    """Render ``value`` as an RFC3339 string in UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


Timestamp = Annotated[
    datetime,
    PlainValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str),
]


__all__ = ["Timestamp", "parse_timestamp", "format_timestamp"]
