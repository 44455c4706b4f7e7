"""
Productivity aggregation: regroup flat records into per-developer summaries.

Two variants share the per-group derivation:
- ``aggregate_flat``: one summary per developer present in the input.
- ``aggregate_by_period``: one summary per (developer, period) pair.

Neither depends on the order of the input. Group records are sorted
newest-first (ties by higher id) before the top record is chosen, so the
result is the same for any permutation of the input.

Usage:
    from impact_dashboard.aggregation.productivity import aggregate_by_period

    monthly = aggregate_by_period(records, "monthly")
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from impact_dashboard.aggregation.periods import coerce_granularity, display_period, period_key
from impact_dashboard.aggregation.work_summary import activity_level, summarize_work
from impact_dashboard.domain.catalog import UNKNOWN_TEAM, find_developer
from impact_dashboard.domain.models import Granularity, ProductivitySummary, Record
from impact_dashboard.utils.logging import get_logger
from impact_dashboard.utils.rounding import round_half_up_to

log = get_logger(__name__)

DEFAULT_SPAN_DAYS = 365


def newest_first(records: Iterable[Record]) -> List[Record]:
    return sorted(records, key=lambda r: (r.date, r.id), reverse=True)


def _summarize_group(
    developer: str,
    team: Optional[str],
    records: Sequence[Record],
    activity_span: Union[int, Granularity],
    time_period: Optional[str] = None,
    display_time_period: Optional[str] = None,
) -> ProductivitySummary:
    ordered = newest_first(records)
    pr_count = len(ordered)
    total_impact = sum(r.impact_score for r in ordered)
    total_ai = sum(r.ai_usage for r in ordered)
    # max() keeps the first maximal element, i.e. the newest top-scoring record
    top = max(ordered, key=lambda r: r.impact_score)

    return ProductivitySummary(
        developer=developer,
        team=team if team is not None else ordered[0].team,
        pr_count=pr_count,
        avg_impact_score=round_half_up_to(total_impact / pr_count, 2),
        total_impact_points=total_impact,
        avg_ai_usage=round_half_up_to(total_ai / pr_count, 1),
        prs=ordered,
        work_summary=summarize_work(ordered),
        top_impact_pr=top,
        recent_activity=activity_level(pr_count, activity_span),
        time_period=time_period,
        display_time_period=display_time_period,
    )


def aggregate_flat(
    records: Iterable[Record], span_days: int = DEFAULT_SPAN_DAYS
) -> List[ProductivitySummary]:
    """
    Collapse records into one summary per developer name found on the records.

    Parameters
    ----------
    records : iterable[Record]
        Records to aggregate; order is irrelevant.
    span_days : int
        Day span used to normalize the record count to a 30-day activity rate.

    Returns
    -------
    List[ProductivitySummary]
        Sorted by total impact points descending, then developer name.
    """
    groups: Dict[str, List[Record]] = defaultdict(list)
    for record in records:
        groups[record.developer].append(record)

    summaries = [
        _summarize_group(developer, None, group, span_days)
        for developer, group in groups.items()
    ]
    summaries.sort(key=lambda s: (-s.total_impact_points, s.developer))
    log.debug("Flat aggregation complete", extra={"developers": len(summaries)})
    return summaries


def aggregate_by_period(
    records: Iterable[Record], granularity: Union[Granularity, str] = Granularity.MONTHLY
) -> List[ProductivitySummary]:
    """
    Collapse records into one summary per (developer, period) pair.

    The team is resolved through the static roster; developers missing from it
    are reported under ``UNKNOWN_TEAM``. Output is ordered by period key
    descending (string comparison), then total impact points descending, then
    developer name.

    Raises
    ------
    ValueError
        If ``granularity`` is not weekly or monthly.
    """
    granularity = coerce_granularity(granularity)

    groups: Dict[Tuple[str, str], List[Record]] = defaultdict(list)
    for record in records:
        groups[(record.developer, period_key(record.date, granularity))].append(record)

    summaries: List[ProductivitySummary] = []
    for (developer, key), group in groups.items():
        roster_entry = find_developer(developer)
        team = roster_entry.team if roster_entry is not None else UNKNOWN_TEAM
        summaries.append(
            _summarize_group(
                developer,
                team,
                group,
                granularity,
                time_period=key,
                display_time_period=display_period(key, granularity),
            )
        )

    # Two stable passes: the primary key is a string sorted descending.
    summaries.sort(key=lambda s: (-s.total_impact_points, s.developer))
    summaries.sort(key=lambda s: s.time_period or "", reverse=True)
    log.debug(
        "Period aggregation complete",
        extra={"granularity": granularity.value, "summaries": len(summaries)},
    )
    return summaries


def summaries_for_period(
    summaries: Iterable[ProductivitySummary], time_period: str
) -> List[ProductivitySummary]:
    return [s for s in summaries if s.time_period == time_period]


__all__ = [
    "DEFAULT_SPAN_DAYS",
    "aggregate_by_period",
    "aggregate_flat",
    "newest_first",
    "summaries_for_period",
]
