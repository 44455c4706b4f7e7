"""
Record synthesizer: one developer, one timestamp, one phase -> one Record.

Sampling order matters for reproducibility with a seeded source:
impact score, AI usage, title index, explanation index, lines, files.
"""

from __future__ import annotations

from datetime import datetime

from impact_dashboard.domain.catalog import project_for
from impact_dashboard.domain.models import Developer, Phase, Record, quarter_for
from impact_dashboard.generation.distributions import (
    round_half_up,
    sample_ai_usage,
    sample_impact_score,
)
from impact_dashboard.generation.random_source import RandomSource
from impact_dashboard.generation.templates import IMPACT_REASONS, PR_TEMPLATES


def _pick_index(length: int, rng: RandomSource) -> int:
    return rng.randrange(length)


def synthesize(
    developer: Developer,
    when: datetime,
    phase: Phase,
    record_id: int,
    rng: RandomSource,
) -> Record:
    """
    Produce one complete record for ``developer`` at ``when``.

    Parameters
    ----------
    developer : Developer
        Catalog entry the record is attributed to.
    when : datetime
        Creation timestamp; the record's calendar date is ``when.date()``.
    phase : Phase
        Lifecycle phase, which must agree with ``when.date()``.
    record_id : int
        Identifier assigned by the caller.
    rng : RandomSource
        Source of every random draw.

    Raises
    ------
    pydantic.ValidationError
        If ``phase`` disagrees with the date or a sampled value leaves its range.
    """
    impact_score = sample_impact_score(developer, phase, rng)
    ai_usage = sample_ai_usage(developer, phase, impact_score, rng)

    templates = PR_TEMPLATES[impact_score]
    title, description = templates[_pick_index(len(templates), rng)]
    reasons = IMPACT_REASONS[impact_score]
    explanation = reasons[_pick_index(len(reasons), rng)]

    lines_changed = round_half_up(rng.uniform(50, 1050)) * impact_score
    files_modified = round_half_up(rng.uniform(1, 21)) * max(1, impact_score - 1)

    day = when.date()
    return Record(
        id=record_id,
        title=title,
        description=description,
        explanation=explanation,
        developer=developer.name,
        team=developer.team,
        project=project_for(developer),
        impact_score=impact_score,
        ai_usage=ai_usage,
        created_at=when,
        date=day,
        quarter=quarter_for(day),
        phase=phase,
        lines_changed=lines_changed,
        files_modified=files_modified,
    )


__all__ = ["synthesize"]
