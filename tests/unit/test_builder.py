from __future__ import annotations

from collections import Counter
from datetime import date

from impact_dashboard.domain.catalog import DEVELOPERS, get_developer
from impact_dashboard.domain.models import Phase, phase_for, quarter_for
from impact_dashboard.generation.builder import WEEKLY_VOLUME, build_dataset, week_anchors
from impact_dashboard.generation.random_source import make_random_source

# 31 pre-cursor weeks * 8 + 9 rollout weeks * 12 + 17 post-cursor weeks * 15
EXPECTED_DEFAULT_RECORDS = 611
BOUNDARY_START = date(2025, 3, 31)
BOUNDARY_END = date(2025, 4, 7)
EXPECTED_BOUNDARY_RECORDS = 12 + 15
SEED = 42


def test_default_window_volume(dataset):
    assert len(dataset) == EXPECTED_DEFAULT_RECORDS


def test_week_anchors_include_final_partial_week():
    anchors = list(week_anchors(date(2025, 7, 1), date(2025, 7, 29)))
    assert anchors == [date(2025, 7, d) for d in (1, 8, 15, 22, 29)]


def test_phase_volume_counts_match_anchor_phases():
    anchors = list(week_anchors(date(2024, 7, 1), date(2025, 7, 31)))
    phases = Counter(phase_for(a) for a in anchors)
    assert phases == {Phase.PRE_CURSOR: 31, Phase.CURSOR_ROLLOUT: 9, Phase.POST_CURSOR: 17}
    assert sum(WEEKLY_VOLUME[p] * n for p, n in phases.items()) == EXPECTED_DEFAULT_RECORDS


def test_records_satisfy_invariants(dataset):
    for record in dataset:
        assert record.phase is phase_for(record.date)
        assert record.quarter == quarter_for(record.date)
        assert record.impact_score in {1, 2, 3, 4, 5}
        assert isinstance(record.ai_usage, int)
        assert 0 <= record.ai_usage <= 100
        assert record.team == get_developer(record.developer).team


def test_records_stay_inside_jitter_window(dataset):
    assert min(r.date for r in dataset) >= date(2024, 7, 1)
    # Last anchor 2025-07-28 plus at most six days
    assert max(r.date for r in dataset) <= date(2025, 8, 3)


def test_identifiers_are_unique_and_contiguous(dataset):
    ids = sorted(r.id for r in dataset)
    assert ids == list(range(1, len(dataset) + 1))


def test_sorted_newest_first(dataset):
    dates = [r.date for r in dataset]
    assert dates == sorted(dates, reverse=True)


def test_same_seed_same_dataset():
    first = build_dataset(rng=make_random_source(SEED))
    second = build_dataset(rng=make_random_source(SEED))
    assert [r.model_dump() for r in first] == [r.model_dump() for r in second]


def test_different_seed_different_dataset():
    first = build_dataset(BOUNDARY_START, BOUNDARY_END, rng=make_random_source(1))
    second = build_dataset(BOUNDARY_START, BOUNDARY_END, rng=make_random_source(2))
    assert [r.model_dump() for r in first] != [r.model_dump() for r in second]


def test_records_near_cutoff_take_phase_of_their_own_date():
    records = build_dataset(BOUNDARY_START, BOUNDARY_END, rng=make_random_source(SEED))
    assert len(records) == EXPECTED_BOUNDARY_RECORDS
    # Only a zero-day offset from the 2025-03-31 anchor stays in the rollout phase
    for record in records:
        expected = Phase.CURSOR_ROLLOUT if record.date == BOUNDARY_START else Phase.POST_CURSOR
        assert record.phase is expected


def test_identifiers_restart_per_build():
    records = build_dataset(BOUNDARY_START, BOUNDARY_START, rng=make_random_source(SEED))
    assert sorted(r.id for r in records) == list(range(1, 13))


def test_all_developers_drawn_from_roster(dataset):
    roster = {d.name for d in DEVELOPERS}
    assert {r.developer for r in dataset} <= roster


def test_end_before_start_yields_no_records():
    assert build_dataset(date(2025, 1, 10), date(2025, 1, 1), rng=make_random_source(SEED)) == []
