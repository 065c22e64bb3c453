"""
Date context validation: sanity checks plus an automatic correction.

Pure function, no API dependencies, no I/O.
"""
from dataclasses import replace
from datetime import datetime

from ..constants.validation_issues import (
    START_IN_FUTURE,
    END_IN_FUTURE,
    START_AFTER_END,
    RANGE_NEGATIVE,
    RANGE_TOO_LARGE,
)
from ..context._dataclass.date_context import DateContext
from ..utils.date.date_utils import ensure_utc, utc_now, start_of_day_utc, end_of_day_utc, span_days
from ._dataclass.validation_result import ValidationResult


MAX_RANGE_DAYS = 365


def validate_date_context(
        context: DateContext,
        now: datetime | None = None ) -> ValidationResult:

    """
    Check a date context for historical-query sanity.

    Date contexts describe the past, so anything after `now` is flagged.
    When any issue is found a corrected copy is attached:
    future instants clamp to now, an inverted pair is swapped, and the
    range is snapped to whole UTC days.

    Args:
        context: Context produced by an extractor
        now:     Reference instant (defaults to current UTC time)

    Returns:
        ValidationResult; is_valid is True exactly when issues is empty
    """

    now    = ensure_utc(now) if now else utc_now()
    start  = context.start_date
    end    = context.end_date
    issues: list[str] = []

    if start > now:
        issues.append(START_IN_FUTURE)

    if end > now:
        issues.append(END_IN_FUTURE)

    if start > end:
        issues.append(START_AFTER_END)

    days = span_days(start, end)

    if days > MAX_RANGE_DAYS:
        issues.append(f"{RANGE_TOO_LARGE}: {days:.0f} days")

    if days < 0:
        issues.append(RANGE_NEGATIVE)

    if not issues:
        return ValidationResult(is_valid=True)

    return ValidationResult(
        is_valid=False,
        issues=issues,
        corrected=_correct(context, now),
    )


def _correct(
        context: DateContext,
        now: datetime ) -> DateContext:

    """Clamp, swap, then snap to day boundaries."""

    start = min(context.start_date, now)
    end   = min(context.end_date, now)

    # Inversion is judged on the extractor's values, not the clamped ones
    if context.start_date > context.end_date:
        start, end = end, start

    return replace(
        context,
        start_date=start_of_day_utc(start),
        end_date=end_of_day_utc(end),
    )
