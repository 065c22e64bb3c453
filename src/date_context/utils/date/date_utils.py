"""
Timestamp parsing, formatting and day-boundary helpers.

Pure functions, no API dependencies, no I/O. Every datetime leaving this
module is timezone-aware and normalized to UTC.
"""
from datetime import datetime, timedelta, timezone


# Accepted layouts for strings that datetime.fromisoformat() rejects
TIMESTAMP_FORMATS = [
    "%Y-%m-%dT%H:%M:%S.%fZ",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%MZ",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
]


def utc_now() -> datetime:

    """Current instant as an aware UTC datetime."""

    return datetime.now(timezone.utc)


def ensure_utc(
        dt: datetime ) -> datetime:

    """Treat naive datetimes as UTC; convert aware ones to UTC."""

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def try_parse_timestamp(
        value ) -> datetime | None:

    """
    Parse an ISO 8601 string (or pass through a datetime) into aware UTC.

    Returns None for empty or unparseable input.
    """

    if value is None:
        return None

    if isinstance(value, datetime):
        return ensure_utc(value)

    if not isinstance(value, str) or not value.strip():
        return None

    raw = value.strip()

    try:
        return ensure_utc(datetime.fromisoformat(raw.replace("Z", "+00:00")))
    except ValueError:
        pass

    for fmt in TIMESTAMP_FORMATS:
        try:
            return ensure_utc(datetime.strptime(raw, fmt))
        except ValueError:
            continue

    return None


def format_timestamp(
        dt: datetime ) -> str:

    """Format as ISO 8601 UTC with milliseconds, e.g. 2026-01-14T00:00:00.000Z"""

    return ensure_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def start_of_day_utc(
        dt: datetime ) -> datetime:

    """00:00:00.000 UTC on the UTC calendar day of dt."""

    return ensure_utc(dt).replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day_utc(
        dt: datetime ) -> datetime:

    """23:59:59.999 UTC on the UTC calendar day of dt."""

    return ensure_utc(dt).replace(hour=23, minute=59, second=59, microsecond=999000)


def span_days(
        start: datetime,
        end: datetime ) -> float:

    """Signed length of [start, end] in days."""

    return (ensure_utc(end) - ensure_utc(start)) / timedelta(days=1)


def excerpt(
        text: str,
        limit: int = 100 ) -> str:

    """First `limit` characters of text, for log diagnostics."""

    if not text:
        return ""

    return str(text)[:limit]
