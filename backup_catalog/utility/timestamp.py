from datetime import datetime, timezone
from typing import Optional


__all__ = [
    'format_iso_time',
    'parse_iso_time',
    'ZERO_TIME_YEAR'
]


ZERO_TIME_YEAR = 1
"""Timestamps in year 1 (e.g. "0001-01-01T00:00:00Z") are written by some backup tools to mean "no time"."""


def parse_iso_time(value: str, /) -> Optional[datetime]:
    """Parses an RFC 3339 / ISO-8601 timestamp as written into backup metadata.

        Accepts a trailing "Z" for UTC and more than 6 fractional second digits (the excess is truncated).
        Timestamps without an offset are assumed to be UTC.

        :return: The timestamp, or `None` if it is the "zero" time.
        :except ValueError: If the string is not a valid timestamp.
    """

    if not isinstance(value, str):
        raise ValueError(f'Expected a string, got {type(value).__name__}')
    if value.endswith(('Z', 'z')):
        value = value[:-1] + '+00:00'
    # Fractional seconds to exactly 6 digits, older fromisoformat() accepts nothing else.
    if '.' in value:
        head, _, tail = value.partition('.')
        digits = len(tail) - len(tail.lstrip('0123456789'))
        value = head + '.' + tail[:digits][:6].ljust(6, '0') + tail[digits:]
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    if parsed.year == ZERO_TIME_YEAR:
        return None
    return parsed


def format_iso_time(value: Optional[datetime], /) -> Optional[str]:
    """Formats a timestamp for backup metadata. The inverse of `parse_iso_time()`, `None` stays `None`."""

    if value is None:
        return None
    return value.isoformat()
