"""
Aggregation package for the Impact Dashboard.

Exports the flat and time-bucketed productivity aggregators plus the period
and work-summary helpers they are built from.
"""

from impact_dashboard.aggregation.periods import (
    display_period,
    next_period,
    period_key,
    previous_period,
    recent_periods,
)
from impact_dashboard.aggregation.productivity import (
    aggregate_by_period,
    aggregate_flat,
    summaries_for_period,
)
from impact_dashboard.aggregation.work_summary import activity_level, summarize_work

__all__ = [
    "activity_level",
    "aggregate_by_period",
    "aggregate_flat",
    "display_period",
    "next_period",
    "period_key",
    "previous_period",
    "recent_periods",
    "summaries_for_period",
    "summarize_work",
]
