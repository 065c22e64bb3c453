"""
Validation issue vocabulary and severity routing.

The validator reports issues as plain strings. Future-date issues are routine
(relative dates resolved against a stale client clock) and get auto-corrected.
Anything else points at a defect in the upstream extractor.
"""

START_IN_FUTURE = "Start date is in the future"
END_IN_FUTURE   = "End date is in the future"
START_AFTER_END = "Start date is after end date"
RANGE_NEGATIVE  = "Date range is negative"
RANGE_TOO_LARGE = "Date range is very large"

FUTURE_DATE_PHRASES: tuple[str, ...] = (END_IN_FUTURE, START_IN_FUTURE)


def is_future_date_issue(
        issue: str ) -> bool:

    """True when the issue text contains one of the future-date phrases."""

    return any(phrase in issue for phrase in FUTURE_DATE_PHRASES)


def partition_issues(
        issues: list[str] ) -> tuple[list[str], list[str]]:

    """
    Split issues into (future_date, significant).

    Order within each group follows the input.
    """

    future      = [i for i in issues if is_future_date_issue(i)]
    significant = [i for i in issues if not is_future_date_issue(i)]

    return future, significant


def only_future_date_issues(
        issues: list[str] ) -> bool:

    """True when every issue is a future-date issue. False for an empty list."""

    future, significant = partition_issues(issues)

    return bool(future) and not significant
