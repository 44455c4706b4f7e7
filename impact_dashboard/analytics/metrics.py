"""Headline metrics shown above the dashboard tables."""

from __future__ import annotations

from typing import Dict, Optional, Sequence, TypedDict

from impact_dashboard.domain.models import Phase, Record
from impact_dashboard.utils.rounding import round_half_up_to

AI_ASSISTED_THRESHOLD = 30
HIGH_IMPACT_THRESHOLD = 4


class HeadlineMetrics(TypedDict):
    total_prs: int
    filtered_prs: int
    avg_impact_score: float
    ai_assisted_percent: int
    high_impact_prs: int
    high_impact_percent: int
    phase_counts: Dict[str, int]
    volume_increase_percent: int


def _percent(part: int, whole: int) -> int:
    return int(part * 100 / whole + 0.5) if whole else 0


def compute_metrics(
    all_records: Sequence[Record], filtered: Optional[Sequence[Record]] = None
) -> HeadlineMetrics:
    """
    Summarize the current selection against the full dataset.

    Averages and shares come from ``filtered`` (the full dataset when omitted);
    the phase comparison always uses the full dataset. Volume increase is the
    growth of all non-baseline records over the pre-cursor count.
    """
    selection = all_records if filtered is None else filtered
    count = len(selection)

    high_impact = sum(1 for r in selection if r.impact_score >= HIGH_IMPACT_THRESHOLD)
    ai_assisted = sum(1 for r in selection if r.ai_usage > AI_ASSISTED_THRESHOLD)
    avg_impact = round_half_up_to(sum(r.impact_score for r in selection) / count, 2) if count else 0.0

    phase_counts = {phase.value: 0 for phase in Phase}
    for record in all_records:
        phase_counts[record.phase.value] += 1
    pre = phase_counts[Phase.PRE_CURSOR.value]
    total = len(all_records)

    return HeadlineMetrics(
        total_prs=total,
        filtered_prs=count,
        avg_impact_score=avg_impact,
        ai_assisted_percent=_percent(ai_assisted, count),
        high_impact_prs=high_impact,
        high_impact_percent=_percent(high_impact, count),
        phase_counts=phase_counts,
        volume_increase_percent=_percent(total - pre, pre),
    )


__all__ = ["AI_ASSISTED_THRESHOLD", "HIGH_IMPACT_THRESHOLD", "HeadlineMetrics", "compute_metrics"]
