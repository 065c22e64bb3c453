from .date.date_utils import (
    utc_now, try_parse_timestamp, format_timestamp,
    start_of_day_utc, end_of_day_utc, excerpt
)


__all__ = [
    "utc_now",
    "try_parse_timestamp",
    "format_timestamp",
    "start_of_day_utc",
    "end_of_day_utc",
    "excerpt",
]
