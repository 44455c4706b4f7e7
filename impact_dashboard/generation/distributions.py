"""
Probability tables for record synthesis.

Impact-score weights are an explicit lookup keyed by
``(TeamTier, Phase, persona-or-skill)``. Before the rollout the key is the
developer's base skill; from the rollout onward it is the adoption persona.
Rollout and post-rollout share the same vectors, which leaves fourteen distinct
five-element vectors in the table. Both tables are validated at import time.
"""

from __future__ import annotations

import math
from typing import Dict, Tuple, Union

from impact_dashboard.domain.catalog import team_tier
from impact_dashboard.domain.models import Developer, Persona, Phase, Skill, TeamTier
from impact_dashboard.generation.random_source import RandomSource

Weights = Tuple[float, float, float, float, float]
Profile = Union[Persona, Skill]
WeightKey = Tuple[TeamTier, Phase, Profile]

FALLBACK_SCORE = 3

_BASELINE: Dict[Tuple[TeamTier, Skill], Weights] = {
    # Power-user teams start lower so the post-rollout change stands out
    (TeamTier.POWER_USER, Skill.SENIOR): (0.08, 0.20, 0.45, 0.22, 0.05),
    (TeamTier.POWER_USER, Skill.MID): (0.15, 0.30, 0.35, 0.15, 0.05),
    (TeamTier.POWER_USER, Skill.JUNIOR): (0.30, 0.40, 0.20, 0.08, 0.02),
    (TeamTier.STANDARD, Skill.SENIOR): (0.05, 0.15, 0.35, 0.35, 0.10),
    (TeamTier.STANDARD, Skill.MID): (0.10, 0.25, 0.40, 0.20, 0.05),
    (TeamTier.STANDARD, Skill.JUNIOR): (0.25, 0.35, 0.25, 0.10, 0.05),
}

_AI_ENABLED: Dict[Tuple[TeamTier, Persona], Weights] = {
    (TeamTier.POWER_USER, Persona.EARLY_ADOPTER): (0.01, 0.04, 0.15, 0.45, 0.35),
    (TeamTier.POWER_USER, Persona.GRADUAL_ADOPTER): (0.02, 0.08, 0.25, 0.45, 0.20),
    (TeamTier.POWER_USER, Persona.CONSERVATIVE): (0.05, 0.15, 0.35, 0.35, 0.10),
    (TeamTier.POWER_USER, Persona.AI_DEPENDENT): (0.15, 0.25, 0.35, 0.20, 0.05),
    (TeamTier.STANDARD, Persona.EARLY_ADOPTER): (0.03, 0.10, 0.25, 0.40, 0.22),
    (TeamTier.STANDARD, Persona.GRADUAL_ADOPTER): (0.05, 0.15, 0.35, 0.35, 0.10),
    (TeamTier.STANDARD, Persona.CONSERVATIVE): (0.08, 0.20, 0.40, 0.25, 0.07),
    (TeamTier.STANDARD, Persona.AI_DEPENDENT): (0.20, 0.30, 0.30, 0.15, 0.05),
}

IMPACT_WEIGHTS: Dict[WeightKey, Weights] = {
    **{(tier, Phase.PRE_CURSOR, skill): w for (tier, skill), w in _BASELINE.items()},
    **{
        (tier, phase, persona): w
        for (tier, persona), w in _AI_ENABLED.items()
        for phase in (Phase.CURSOR_ROLLOUT, Phase.POST_CURSOR)
    },
}

# Base AI-usage percentage by persona, indexed by phase
AI_USAGE_BASE: Dict[Persona, Dict[Phase, int]] = {
    Persona.EARLY_ADOPTER: {Phase.PRE_CURSOR: 0, Phase.CURSOR_ROLLOUT: 70, Phase.POST_CURSOR: 70},
    Persona.GRADUAL_ADOPTER: {Phase.PRE_CURSOR: 0, Phase.CURSOR_ROLLOUT: 35, Phase.POST_CURSOR: 55},
    Persona.CONSERVATIVE: {Phase.PRE_CURSOR: 0, Phase.CURSOR_ROLLOUT: 5, Phase.POST_CURSOR: 20},
    Persona.AI_DEPENDENT: {Phase.PRE_CURSOR: 0, Phase.CURSOR_ROLLOUT: 85, Phase.POST_CURSOR: 85},
}

AI_DEPENDENT_LOW_IMPACT_BONUS = 5
AI_USAGE_NOISE = 10.0


def validate_tables() -> None:
    """
    Check both tables for completeness and well-formed weights.

    Raises
    ------
    ValueError
        If a weight vector is malformed or does not sum to 1.0, or a lookup key is missing.
    """
    for key, weights in IMPACT_WEIGHTS.items():
        if len(weights) != 5:
            raise ValueError(f"Weight vector for {key} must have 5 entries, got {len(weights)}")
        if any(w < 0 for w in weights):
            raise ValueError(f"Weight vector for {key} contains a negative weight")
        if not math.isclose(sum(weights), 1.0, abs_tol=1e-9):
            raise ValueError(f"Weight vector for {key} sums to {sum(weights)}, expected 1.0")

    for tier in TeamTier:
        for skill in Skill:
            if (tier, Phase.PRE_CURSOR, skill) not in IMPACT_WEIGHTS:
                raise ValueError(f"Missing baseline weights for {tier.value}/{skill.value}")
        for phase in (Phase.CURSOR_ROLLOUT, Phase.POST_CURSOR):
            for persona in Persona:
                if (tier, phase, persona) not in IMPACT_WEIGHTS:
                    raise ValueError(
                        f"Missing weights for {tier.value}/{phase.value}/{persona.value}"
                    )

    for persona in Persona:
        if set(AI_USAGE_BASE.get(persona, {})) != set(Phase):
            raise ValueError(f"AI usage base for {persona.value} must cover every phase")


def weight_key(developer: Developer, phase: Phase) -> WeightKey:
    tier = team_tier(developer.team)
    profile: Profile = developer.base_skill if phase is Phase.PRE_CURSOR else developer.persona
    return (tier, phase, profile)


def impact_weights(developer: Developer, phase: Phase) -> Weights:
    return IMPACT_WEIGHTS[weight_key(developer, phase)]


def pick_bucket(weights: Weights, draw: float) -> int:
    """
    Map a uniform draw in [0, 1) to a 1-based score via cumulative-sum thresholding.

    Bucket i wins when the running sum first exceeds the draw. A draw left
    unreached by floating-point shortfall falls back to ``FALLBACK_SCORE``.
    """
    cumulative = 0.0
    for index, weight in enumerate(weights):
        cumulative += weight
        if draw < cumulative:
            return index + 1
    return FALLBACK_SCORE


def sample_impact_score(developer: Developer, phase: Phase, rng: RandomSource) -> int:
    return pick_bucket(impact_weights(developer, phase), rng.random())


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def sample_ai_usage(
    developer: Developer, phase: Phase, impact_score: int, rng: RandomSource
) -> int:
    """Sample an AI-usage percentage, clamped to [0, 100]."""
    base = AI_USAGE_BASE[developer.persona][phase]
    # Heavy AI use with little to show for it
    if developer.persona is Persona.AI_DEPENDENT and impact_score <= 2:
        base += AI_DEPENDENT_LOW_IMPACT_BONUS
    noise = rng.random() * 2 * AI_USAGE_NOISE - AI_USAGE_NOISE
    return max(0, min(100, round_half_up(base + noise)))


validate_tables()


__all__ = [
    "AI_USAGE_BASE",
    "FALLBACK_SCORE",
    "IMPACT_WEIGHTS",
    "Weights",
    "impact_weights",
    "pick_bucket",
    "round_half_up",
    "sample_ai_usage",
    "sample_impact_score",
    "validate_tables",
    "weight_key",
]
