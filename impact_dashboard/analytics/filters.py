"""
Record and summary filters backing the dashboard's team, project, developer
and date-range selectors.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Union

from impact_dashboard.domain.catalog import teams_in_project
from impact_dashboard.domain.models import POST_ROLLOUT_START, Phase, ProductivitySummary, Record


class DateRange(str, Enum):
    ALL_TIME = "All Time"
    LAST_30_DAYS = "Last 30 Days"
    LAST_3_MONTHS = "Last 3 Months"
    LAST_6_MONTHS = "Last 6 Months"
    POST_CURSOR_ONLY = "Post-Cursor Only"
    PRE_CURSOR_ONLY = "Pre-Cursor Only"


def coerce_date_range(value: Union[DateRange, str]) -> DateRange:
    try:
        return DateRange(value)
    except ValueError:
        valid = ", ".join(r.value for r in DateRange)
        raise ValueError(f"Unknown date range '{value}'. Available: {valid}") from None


def shift_months(day: date, months: int) -> date:
    """Move ``day`` by whole months, clamping to the target month's last day."""
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    last_day = calendar.monthrange(year, month + 1)[1]
    return date(year, month + 1, min(day.day, last_day))


def range_cutoff(date_range: Union[DateRange, str], today: date) -> Optional[date]:
    """Earliest date kept by a preset, or None when the preset has no lower bound."""
    date_range = coerce_date_range(date_range)
    if date_range is DateRange.LAST_30_DAYS:
        return today - timedelta(days=30)
    if date_range is DateRange.LAST_3_MONTHS:
        return shift_months(today, -3)
    if date_range is DateRange.LAST_6_MONTHS:
        return shift_months(today, -6)
    if date_range is DateRange.POST_CURSOR_ONLY:
        return POST_ROLLOUT_START
    return None


def filter_records(
    records: Iterable[Record],
    team: Optional[str] = None,
    project: Optional[str] = None,
    developers: Optional[Sequence[str]] = None,
    date_range: Union[DateRange, str] = DateRange.ALL_TIME,
    today: Optional[date] = None,
) -> List[Record]:
    """
    Apply the dashboard filters to a record collection, preserving input order.

    ``None`` (or an empty developer list) disables a filter. Relative presets
    are measured back from ``today``, which defaults to the current date.
    """
    date_range = coerce_date_range(date_range)
    cutoff = range_cutoff(date_range, today or date.today())
    wanted = set(developers) if developers else None

    result: List[Record] = []
    for record in records:
        if team is not None and record.team != team:
            continue
        if project is not None and record.project != project:
            continue
        if wanted is not None and record.developer not in wanted:
            continue
        if date_range is DateRange.PRE_CURSOR_ONLY and record.phase is not Phase.PRE_CURSOR:
            continue
        if cutoff is not None and record.date < cutoff:
            continue
        result.append(record)
    return result


def filter_summaries(
    summaries: Iterable[ProductivitySummary],
    team: Optional[str] = None,
    project: Optional[str] = None,
    developers: Optional[Sequence[str]] = None,
) -> List[ProductivitySummary]:
    """Filter summaries by team, project (through the team catalog) and developer."""
    project_teams = set(teams_in_project(project)) if project is not None else None
    wanted = set(developers) if developers else None
    return [
        s
        for s in summaries
        if (team is None or s.team == team)
        and (project_teams is None or s.team in project_teams)
        and (wanted is None or s.developer in wanted)
    ]


__all__ = [
    "DateRange",
    "coerce_date_range",
    "filter_records",
    "filter_summaries",
    "range_cutoff",
    "shift_months",
]
