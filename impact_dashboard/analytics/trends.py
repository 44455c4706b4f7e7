"""
Quarterly impact trends per team or developer.

Each point carries the quarter label plus one value per selected entity: the
entity's average impact score that quarter (2 dp), or None when it has no
records there.
"""

from __future__ import annotations

from collections import defaultdict
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from impact_dashboard.domain.models import Record
from impact_dashboard.utils.rounding import round_half_up_to


class TrendGroup(str, Enum):
    TEAM = "team"
    DEVELOPER = "developer"
    QUARTER = "quarter"


TrendPoint = Dict[str, Union[str, float, None]]


def quarter_sort_key(label: str) -> Tuple[int, int]:
    """Chronological key for a ``"Q<n> <year>"`` label."""
    quarter, year = label.split(" ")
    return int(year), int(quarter[1:])


def _entity_of(record: Record, group_by: TrendGroup) -> str:
    if group_by is TrendGroup.TEAM:
        return record.team
    if group_by is TrendGroup.DEVELOPER:
        return record.developer
    return record.quarter


def impact_trends(
    records: Iterable[Record],
    group_by: Union[TrendGroup, str],
    entities: Sequence[str],
    quarters: Optional[Sequence[str]] = None,
) -> List[TrendPoint]:
    """
    Build one point per quarter, in chronological order.

    Parameters
    ----------
    records : iterable[Record]
        Source records.
    group_by : TrendGroup | str
        Which record attribute identifies an entity.
    entities : sequence[str]
        Entities to plot; each becomes a key on every point.
    quarters : sequence[str] | None
        Quarter labels to emit. Defaults to the quarters present in ``records``.
    """
    group_by = TrendGroup(group_by)
    scores: Dict[Tuple[str, str], List[int]] = defaultdict(list)
    seen_quarters = set()
    for record in records:
        seen_quarters.add(record.quarter)
        scores[(record.quarter, _entity_of(record, group_by))].append(record.impact_score)

    labels = sorted(quarters if quarters is not None else seen_quarters, key=quarter_sort_key)

    points: List[TrendPoint] = []
    for quarter in labels:
        point: TrendPoint = {"quarter": quarter}
        for entity in entities:
            values = scores.get((quarter, entity))
            point[entity] = round_half_up_to(sum(values) / len(values), 2) if values else None
        points.append(point)
    return points


__all__ = ["TrendGroup", "TrendPoint", "impact_trends", "quarter_sort_key"]
