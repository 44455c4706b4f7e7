from __future__ import annotations

import math

import pytest

from impact_dashboard.domain.catalog import get_developer
from impact_dashboard.domain.models import Persona, Phase, Skill, TeamTier
from impact_dashboard.generation import distributions
from impact_dashboard.generation.distributions import (
    FALLBACK_SCORE,
    IMPACT_WEIGHTS,
    impact_weights,
    pick_bucket,
    round_half_up,
    sample_ai_usage,
    validate_tables,
    weight_key,
)

DISTINCT_VECTORS = 14
TABLE_ENTRIES = 6 + 8 * 2  # baseline entries + AI-enabled entries for two phases


class _ConstantRandom:
    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.value

    def randrange(self, stop: int) -> int:
        return int(stop * self.value)


def test_every_vector_sums_to_one():
    for key, weights in IMPACT_WEIGHTS.items():
        assert len(weights) == 5, key
        assert math.isclose(sum(weights), 1.0), key


def test_table_has_fourteen_distinct_entries():
    assert len(IMPACT_WEIGHTS) == TABLE_ENTRIES
    bands = {(tier, phase is Phase.PRE_CURSOR, profile) for tier, phase, profile in IMPACT_WEIGHTS}
    assert len(bands) == DISTINCT_VECTORS


def test_rollout_and_post_share_vectors():
    for tier in TeamTier:
        for persona in Persona:
            assert (
                IMPACT_WEIGHTS[(tier, Phase.CURSOR_ROLLOUT, persona)]
                == IMPACT_WEIGHTS[(tier, Phase.POST_CURSOR, persona)]
            )


def test_weight_key_uses_skill_before_rollout_and_persona_after():
    priya = get_developer("Priya Patel")  # power-user team, gradual adopter, mid
    assert weight_key(priya, Phase.PRE_CURSOR) == (TeamTier.POWER_USER, Phase.PRE_CURSOR, Skill.MID)
    assert weight_key(priya, Phase.POST_CURSOR) == (
        TeamTier.POWER_USER,
        Phase.POST_CURSOR,
        Persona.GRADUAL_ADOPTER,
    )
    casey = get_developer("Casey Johnson")
    assert impact_weights(casey, Phase.PRE_CURSOR) == (0.05, 0.15, 0.35, 0.35, 0.10)


def test_pick_bucket_cumulative_thresholds():
    weights = (0.1, 0.2, 0.3, 0.2, 0.2)
    assert pick_bucket(weights, 0.0) == 1
    assert pick_bucket(weights, 0.09) == 1
    assert pick_bucket(weights, 0.1) == 2
    assert pick_bucket(weights, 0.55) == 3
    assert pick_bucket(weights, 0.99) == 5


def test_pick_bucket_falls_back_on_shortfall():
    assert pick_bucket((0.2, 0.2, 0.2, 0.2, 0.1999), 0.99995) == FALLBACK_SCORE


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0
    assert round_half_up(69.49) == 69


def test_ai_usage_is_zero_centred_noise_before_rollout():
    sarah = get_developer("Sarah Chen")
    assert sample_ai_usage(sarah, Phase.PRE_CURSOR, 3, _ConstantRandom(0.0)) == 0
    assert sample_ai_usage(sarah, Phase.PRE_CURSOR, 3, _ConstantRandom(0.99)) == 10


@pytest.mark.parametrize(
    "name,phase,expected",
    [
        ("Sarah Chen", Phase.POST_CURSOR, 70),
        ("Priya Patel", Phase.CURSOR_ROLLOUT, 35),
        ("Priya Patel", Phase.POST_CURSOR, 55),
        ("Riley Zhang", Phase.CURSOR_ROLLOUT, 5),
        ("Riley Zhang", Phase.POST_CURSOR, 20),
        ("Taylor Swift", Phase.POST_CURSOR, 85),
    ],
)
def test_ai_usage_base_by_persona_and_phase(name, phase, expected):
    # A draw of 0.5 produces zero noise
    assert sample_ai_usage(get_developer(name), phase, 3, _ConstantRandom(0.5)) == expected


def test_ai_dependent_low_impact_bonus():
    taylor = get_developer("Taylor Swift")
    assert sample_ai_usage(taylor, Phase.POST_CURSOR, 2, _ConstantRandom(0.5)) == 90
    assert sample_ai_usage(taylor, Phase.POST_CURSOR, 3, _ConstantRandom(0.5)) == 85


def test_ai_usage_stays_within_bounds():
    taylor = get_developer("Taylor Swift")
    assert sample_ai_usage(taylor, Phase.POST_CURSOR, 1, _ConstantRandom(0.99)) == 100
    assert sample_ai_usage(taylor, Phase.PRE_CURSOR, 1, _ConstantRandom(0.0)) == 0


def test_validate_tables_rejects_bad_vector(monkeypatch):
    broken = dict(IMPACT_WEIGHTS)
    key = next(iter(broken))
    broken[key] = (0.5, 0.5, 0.5, 0.0, 0.0)
    monkeypatch.setattr(distributions, "IMPACT_WEIGHTS", broken)
    with pytest.raises(ValueError, match="sums to"):
        validate_tables()


def test_validate_tables_rejects_missing_key(monkeypatch):
    broken = dict(IMPACT_WEIGHTS)
    del broken[(TeamTier.STANDARD, Phase.POST_CURSOR, Persona.CONSERVATIVE)]
    monkeypatch.setattr(distributions, "IMPACT_WEIGHTS", broken)
    with pytest.raises(ValueError, match="Missing weights"):
        validate_tables()
