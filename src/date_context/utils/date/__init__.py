"""Date utilities: timestamp parsing, formatting, day boundaries."""

from .date_utils import (
    utc_now,
    ensure_utc,
    try_parse_timestamp,
    format_timestamp,
    start_of_day_utc,
    end_of_day_utc,
    span_days,
    excerpt,
)

__all__ = [
    'utc_now',
    'ensure_utc',
    'try_parse_timestamp',
    'format_timestamp',
    'start_of_day_utc',
    'end_of_day_utc',
    'span_days',
    'excerpt',
]
