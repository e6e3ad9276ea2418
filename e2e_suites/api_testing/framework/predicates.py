"""
Plain predicates for assertions on API payloads.

    assert is_one_of(user["is_active"], (1, True))
    assert is_after(data["access_token_expire_at"], datetime.now(timezone.utc))
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Iterable, Optional, Union


# Timestamp format emitted by the backend, e.g. 2024-01-01T00:00:00.000000Z
ISO_TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{6}Z$")

# datetime.fromisoformat before 3.11 takes only 3 or 6 fraction digits and
# HH:MM offsets; timestamps are rewritten into that shape first.
_ISO_PARTS = re.compile(
    r"^(?P<main>\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}(?::\d{2})?)"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>Z|[+-]\d{2}:?\d{2})?$"
)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

DateLike = Union[datetime, str]


def is_one_of(value: Any, options: Iterable[Any]) -> bool:
    """Whether `value` equals one of `options`."""
    return value in tuple(options)


def _normalize_iso(text: str) -> str:
    match = _ISO_PARTS.match(text)
    if match is None:
        return text
    normalized = match.group("main")
    fraction = match.group("fraction")
    if fraction:
        normalized += "." + fraction[:6].ljust(6, "0")
    offset = match.group("offset")
    if offset == "Z":
        normalized += "+00:00"
    elif offset:
        normalized += offset if ":" in offset else f"{offset[:3]}:{offset[3:]}"
    return normalized


def parse_iso_datetime(value: Any) -> Optional[datetime]:
    """
    Parse a timestamp into an aware datetime.

    Accepts ISO-8601 (trailing "Z", "+0000" or "+00:00" offsets, any number
    of fraction digits) and RFC 1123 dates such as
    "Tue, 01 Jan 2999 00:00:00 GMT". Naive values are assumed to be UTC.
    Returns None for anything that is not a parseable string or datetime.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            parsed = datetime.fromisoformat(_normalize_iso(text))
        except ValueError:
            try:
                parsed = parsedate_to_datetime(text)
            except (TypeError, ValueError):
                return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_after(value: DateLike, reference: DateLike) -> bool:
    """Whether `value` is strictly later than `reference` (False if either is unparseable)."""
    parsed_value = parse_iso_datetime(value)
    parsed_reference = parse_iso_datetime(reference)
    if parsed_value is None or parsed_reference is None:
        return False
    return parsed_value > parsed_reference


def matches_iso_timestamp(value: Any) -> bool:
    return isinstance(value, str) and bool(ISO_TIMESTAMP_PATTERN.match(value))


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and bool(EMAIL_PATTERN.match(value))


__all__ = [
    "ISO_TIMESTAMP_PATTERN",
    "EMAIL_PATTERN",
    "is_one_of",
    "is_after",
    "parse_iso_datetime",
    "matches_iso_timestamp",
    "is_valid_email",
]
