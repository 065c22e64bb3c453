"""Tests for future-date vs significant issue classification."""
import pytest

from date_context.constants import (
    FUTURE_DATE_PHRASES,
    is_future_date_issue,
    partition_issues,
    only_future_date_issues,
)


class TestIssueClassification:

    def test_phrases_are_the_validator_vocabulary(self):
        assert set(FUTURE_DATE_PHRASES) == {"End date is in the future", "Start date is in the future"}

    @pytest.mark.parametrize("issue", [
        "End date is in the future",
        "Start date is in the future",
        "Warning: End date is in the future (client clock skew)",
    ])
    def test_future_date_issue_matches_by_substring(self, issue):
        assert is_future_date_issue(issue)

    @pytest.mark.parametrize("issue", [
        "Start date is after end date",
        "Date range is negative",
        "Date range is very large: 400 days",
        "end date is in the future",  # case-sensitive
    ])
    def test_other_issues_are_significant(self, issue):
        assert not is_future_date_issue(issue)

    def test_partition_preserves_order(self):
        issues = [
            "Start date is in the future",
            "Start date is after end date",
            "End date is in the future",
            "Date range is negative",
        ]

        future, significant = partition_issues(issues)

        assert future == ["Start date is in the future", "End date is in the future"]
        assert significant == ["Start date is after end date", "Date range is negative"]

    def test_only_future_requires_at_least_one_issue(self):
        assert only_future_date_issues(["End date is in the future"])
        assert not only_future_date_issues([])
        assert not only_future_date_issues(["End date is in the future", "Date range is negative"])
