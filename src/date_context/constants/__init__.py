"""Date context constants"""

from .date_periods import DEFAULT_TIMEZONE, PERIOD_NONE, KNOWN_PERIODS, DEFAULT_HUMAN_READABLE
from .validation_issues import (
    FUTURE_DATE_PHRASES,
    is_future_date_issue,
    partition_issues,
    only_future_date_issues,
)

__all__ = [
    'DEFAULT_TIMEZONE',
    'PERIOD_NONE',
    'KNOWN_PERIODS',
    'DEFAULT_HUMAN_READABLE',
    'FUTURE_DATE_PHRASES',
    'is_future_date_issue',
    'partition_issues',
    'only_future_date_issues',
]
