"""
Dataset builder: drives the synthesizer week by week over a historical window.

Usage:
    from impact_dashboard.generation.builder import build_dataset
    from impact_dashboard.generation.random_source import make_random_source

    records = build_dataset(rng=make_random_source(42))
"""

from __future__ import annotations

import itertools
from datetime import date, datetime, time, timedelta
from typing import Dict, Iterator, List, Optional

from impact_dashboard.domain.catalog import DEVELOPERS
from impact_dashboard.domain.models import Phase, Record, phase_for
from impact_dashboard.generation.random_source import RandomSource, make_random_source
from impact_dashboard.generation.synthesizer import synthesize
from impact_dashboard.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_START = date(2024, 7, 1)
DEFAULT_END = date(2025, 7, 31)

WEEKLY_VOLUME: Dict[Phase, int] = {
    Phase.PRE_CURSOR: 8,
    Phase.CURSOR_ROLLOUT: 12,
    Phase.POST_CURSOR: 15,
}


def week_anchors(start: date, end: date) -> Iterator[date]:
    """Yield week anchor dates from ``start`` while they are on or before ``end``."""
    anchor = start
    while anchor <= end:
        yield anchor
        anchor += timedelta(days=7)


def _jittered_timestamp(anchor: date, rng: RandomSource) -> datetime:
    offset = timedelta(
        days=rng.randrange(7),
        hours=rng.randrange(24),
        minutes=rng.randrange(60),
    )
    return datetime.combine(anchor, time()) + offset


def build_dataset(
    start: date = DEFAULT_START,
    end: date = DEFAULT_END,
    rng: Optional[RandomSource] = None,
) -> List[Record]:
    """
    Generate every record for the window and return them newest-first.

    Weekly volume follows the phase of the week's anchor date. Each record's
    own phase is derived from its jittered date, so records near a cutoff can
    land in the next phase. Identifiers come from a counter local to this
    build, starting at 1. A window whose end precedes its start yields no
    records.
    """
    rng = rng if rng is not None else make_random_source()

    ids = itertools.count(1)
    records: List[Record] = []
    weeks = 0
    for anchor in week_anchors(start, end):
        weeks += 1
        volume = WEEKLY_VOLUME[phase_for(anchor)]
        for _ in range(volume):
            developer = DEVELOPERS[rng.randrange(len(DEVELOPERS))]
            when = _jittered_timestamp(anchor, rng)
            records.append(synthesize(developer, when, phase_for(when.date()), next(ids), rng))

    records.sort(key=lambda r: r.date, reverse=True)
    log.info(
        f"Built {len(records)} records over {weeks} weeks",
        extra={"records": len(records), "weeks": weeks, "start": str(start), "end": str(end)},
    )
    return records


__all__ = ["DEFAULT_END", "DEFAULT_START", "WEEKLY_VOLUME", "build_dataset", "week_anchors"]
