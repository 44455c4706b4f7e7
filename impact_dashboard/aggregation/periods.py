"""
Period keys for time-bucketed aggregation and navigation.

Monthly keys are ``YYYY-MM``. Weekly keys take the Monday on or before the
date and number weeks by ``ceil(monday.day / 7)`` within that Monday's month,
so the counter restarts every month: ``2025-06-02`` is ``2025-W01``. Keys from
the same granularity compare correctly as strings within a year only.
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import List, Optional, Union

from impact_dashboard.domain.models import Granularity

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def coerce_granularity(value: Union[Granularity, str]) -> Granularity:
    try:
        return Granularity(value)
    except ValueError:
        valid = ", ".join(g.value for g in Granularity)
        raise ValueError(f"Unknown granularity '{value}'. Available: {valid}") from None


def week_start(day: date) -> date:
    """Monday on or before ``day`` (Sunday rolls back six days)."""
    return day - timedelta(days=day.isoweekday() - 1)


def weekly_key(day: date) -> str:
    monday = week_start(day)
    return f"{monday.year}-W{math.ceil(monday.day / 7):02d}"


def monthly_key(day: date) -> str:
    return f"{day.year}-{day.month:02d}"


def period_key(day: date, granularity: Union[Granularity, str]) -> str:
    if coerce_granularity(granularity) is Granularity.WEEKLY:
        return weekly_key(day)
    return monthly_key(day)


def display_period(key: str, granularity: Union[Granularity, str]) -> str:
    """Human label for a period key: ``Week 01, 2025`` or ``Jun 2025``."""
    if coerce_granularity(granularity) is Granularity.WEEKLY:
        year, week = key.split("-W")
        return f"Week {week}, {year}"
    year, month = key.split("-")
    return f"{MONTH_ABBREVIATIONS[int(month) - 1]} {year}"


def recent_periods(
    granularity: Union[Granularity, str], today: date, count: int = 12
) -> List[str]:
    """
    Keys for the ``count`` most recent periods ending at ``today``, newest first.

    Weekly navigation steps back seven days at a time, so two steps can map to
    the same key around month boundaries; duplicates are kept, matching the
    stepping rather than the key.
    """
    granularity = coerce_granularity(granularity)
    periods: List[str] = []
    if granularity is Granularity.WEEKLY:
        for i in range(count):
            periods.append(weekly_key(today - timedelta(days=7 * i)))
    else:
        year, month = today.year, today.month
        for _ in range(count):
            periods.append(f"{year}-{month:02d}")
            month -= 1
            if month == 0:
                year, month = year - 1, 12
    return periods


def previous_period(periods: List[str], current: str) -> Optional[str]:
    """Older neighbour of ``current`` in a newest-first period list."""
    index = periods.index(current)
    return periods[index + 1] if index + 1 < len(periods) else None


def next_period(periods: List[str], current: str) -> Optional[str]:
    """Newer neighbour of ``current`` in a newest-first period list."""
    index = periods.index(current)
    return periods[index - 1] if index > 0 else None


__all__ = [
    "MONTH_ABBREVIATIONS",
    "coerce_granularity",
    "display_period",
    "monthly_key",
    "next_period",
    "period_key",
    "previous_period",
    "recent_periods",
    "week_start",
    "weekly_key",
]
