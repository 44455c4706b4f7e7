"""Work-summary keyword extraction and activity labels."""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Pattern, Tuple, Union

from impact_dashboard.aggregation.periods import coerce_granularity
from impact_dashboard.domain.models import Granularity, Record

GENERAL_WORK = "General development work"
TOP_AREAS = 3

# Declaration order breaks ties between equal counts.
WORK_PATTERNS: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"real-time|collaborative|sync", re.IGNORECASE), "real-time collaboration"),
    (re.compile(r"webgl|rendering|graphics", re.IGNORECASE), "graphics optimization"),
    (re.compile(r"performance|optimization|memory", re.IGNORECASE), "performance improvements"),
    (re.compile(r"architecture|system|infrastructure", re.IGNORECASE), "system architecture"),
    (re.compile(r"ui|interface|component", re.IGNORECASE), "UI components"),
    (re.compile(r"api|endpoint|service", re.IGNORECASE), "API development"),
    (re.compile(r"security|auth|permission", re.IGNORECASE), "security features"),
    (re.compile(r"test|unit|integration", re.IGNORECASE), "testing infrastructure"),
    (re.compile(r"deploy|build|pipeline", re.IGNORECASE), "deployment systems"),
    (re.compile(r"bug|fix|issue", re.IGNORECASE), "bug fixes"),
    (re.compile(r"webassembly|wasm", re.IGNORECASE), "WebAssembly integration"),
    (re.compile(r"cursor|presence|indicator", re.IGNORECASE), "collaborative features"),
)


def summarize_work(records: Iterable[Record]) -> str:
    """Top three work areas across record titles, or a generic fallback."""
    counts: Counter[str] = Counter()
    for record in records:
        for pattern, term in WORK_PATTERNS:
            if pattern.search(record.title):
                counts[term] += 1

    order = {term: i for i, (_, term) in enumerate(WORK_PATTERNS)}
    ranked = sorted(counts, key=lambda term: (-counts[term], order[term]))
    if not ranked:
        return GENERAL_WORK
    return ", ".join(ranked[:TOP_AREAS])


def activity_level(pr_count: int, span: Union[int, Granularity, str] = 365) -> str:
    """
    Label a record count as High, Moderate or Low.

    With a day span the count is normalized to a 30-day rate (8+ High, 4+
    Moderate). With a granularity the raw count is compared to fixed bands:
    weekly 8/4, monthly 20/10.
    """
    if isinstance(span, str):
        span = coerce_granularity(span)
    if isinstance(span, Granularity):
        high, moderate = (8, 4) if span is Granularity.WEEKLY else (20, 10)
        rate = float(pr_count)
    else:
        if span <= 0:
            raise ValueError(f"span must be a positive number of days, got {span}")
        high, moderate = 8, 4
        rate = pr_count * 30 / span

    if rate >= high:
        return "High"
    if rate >= moderate:
        return "Moderate"
    return "Low"


__all__ = ["GENERAL_WORK", "WORK_PATTERNS", "activity_level", "summarize_work"]
