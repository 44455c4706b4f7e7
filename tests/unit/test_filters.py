from __future__ import annotations

from datetime import date

import pytest

from impact_dashboard.aggregation.productivity import aggregate_flat
from impact_dashboard.analytics.filters import (
    DateRange,
    filter_records,
    filter_summaries,
    range_cutoff,
    shift_months,
)

TODAY = date(2025, 6, 15)


@pytest.fixture
def records(make_record):
    return [
        make_record(developer="Sarah Chen", day=date(2025, 6, 2)),
        make_record(developer="Jordan Park", day=date(2025, 3, 10)),
        make_record(developer="Jamie Lee", day=date(2024, 12, 15)),
        make_record(developer="Sarah Chen", day=date(2025, 5, 10)),
    ]


def _names_and_days(records):
    return [(r.developer, r.date) for r in records]


def test_no_filters_keeps_everything_in_order(records):
    assert filter_records(records, today=TODAY) == records


@pytest.mark.parametrize(
    "date_range,expected_days",
    [
        (DateRange.LAST_30_DAYS, [date(2025, 6, 2)]),
        (DateRange.LAST_3_MONTHS, [date(2025, 6, 2), date(2025, 5, 10)]),
        # The cutoff day itself is kept
        (
            DateRange.LAST_6_MONTHS,
            [date(2025, 6, 2), date(2025, 3, 10), date(2024, 12, 15), date(2025, 5, 10)],
        ),
        (DateRange.POST_CURSOR_ONLY, [date(2025, 6, 2), date(2025, 5, 10)]),
        (DateRange.PRE_CURSOR_ONLY, [date(2024, 12, 15)]),
        ("Last 30 Days", [date(2025, 6, 2)]),
    ],
)
def test_date_range_presets(records, date_range, expected_days):
    kept = filter_records(records, date_range=date_range, today=TODAY)
    assert [r.date for r in kept] == expected_days


def test_team_project_and_developer_filters(records):
    assert {r.developer for r in filter_records(records, team="Canvas Architecture Core")} == {
        "Sarah Chen"
    }
    assert _names_and_days(filter_records(records, project="Photoshop Web")) == [
        ("Jordan Park", date(2025, 3, 10))
    ]
    picked = filter_records(records, developers=["Jamie Lee", "Jordan Park"])
    assert [r.developer for r in picked] == ["Jordan Park", "Jamie Lee"]
    # An empty developer list means no developer filter
    assert filter_records(records, developers=[]) == records


def test_filters_combine(records):
    kept = filter_records(
        records,
        team="Canvas Architecture Core",
        date_range=DateRange.LAST_30_DAYS,
        today=TODAY,
    )
    assert _names_and_days(kept) == [("Sarah Chen", date(2025, 6, 2))]


def test_shift_months_clamps_to_month_end():
    assert shift_months(date(2025, 5, 31), -3) == date(2025, 2, 28)
    assert shift_months(date(2024, 3, 31), -1) == date(2024, 2, 29)
    assert shift_months(date(2025, 1, 15), -6) == date(2024, 7, 15)


def test_range_cutoff():
    assert range_cutoff(DateRange.ALL_TIME, TODAY) is None
    assert range_cutoff(DateRange.PRE_CURSOR_ONLY, TODAY) is None
    assert range_cutoff(DateRange.LAST_30_DAYS, TODAY) == date(2025, 5, 16)
    assert range_cutoff(DateRange.POST_CURSOR_ONLY, TODAY) == date(2025, 4, 1)


def test_unknown_date_range_rejected(records):
    with pytest.raises(ValueError, match="Unknown date range"):
        filter_records(records, date_range="Last Decade", today=TODAY)


def test_filter_summaries(records):
    summaries = aggregate_flat(records)
    assert [s.developer for s in filter_summaries(summaries, project="Project Canvas")] == [
        "Sarah Chen"
    ]
    assert [s.developer for s in filter_summaries(summaries, team="Document Cloud Infrastructure")] == [
        "Jamie Lee"
    ]
    assert len(filter_summaries(summaries)) == len(summaries)
    assert filter_summaries(summaries, developers=["Nobody"]) == []
