"""
Pytest configuration for the Impact Dashboard.

Provides fixtures for:
- A seeded, session-wide generated dataset
- A record factory for hand-built aggregation inputs
- Settings cache isolation
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Callable, List, Optional

import pytest

from impact_dashboard.config import get_settings
from impact_dashboard.domain.catalog import find_developer, get_team
from impact_dashboard.domain.models import Record, phase_for, quarter_for
from impact_dashboard.generation.builder import build_dataset
from impact_dashboard.generation.random_source import make_random_source

DATASET_SEED = 1234

RecordFactory = Callable[..., Record]


@pytest.fixture(scope="session")
def dataset() -> List[Record]:
    """
    Full default-window dataset built from a fixed seed.

    Shared read-only across the session; tests must not mutate it.
    """
    return build_dataset(rng=make_random_source(DATASET_SEED))


@pytest.fixture
def make_record() -> RecordFactory:
    """
    Build a valid Record with sensible defaults.

    Team and project resolve through the catalog; developers missing from the
    roster get a placeholder team unless one is given.
    """
    counter = iter(range(1, 1_000_000))

    def _make(
        developer: str = "Sarah Chen",
        day: date = date(2025, 6, 2),
        impact_score: int = 3,
        ai_usage: int = 50,
        title: str = "Add keyboard shortcuts for power users",
        record_id: Optional[int] = None,
        team: Optional[str] = None,
    ) -> Record:
        entry = find_developer(developer)
        if team is None:
            team = entry.team if entry is not None else "Ghost Team"
        project = get_team(team).project if entry is not None else "Ghost Project"
        return Record(
            id=record_id if record_id is not None else next(counter),
            title=title,
            description="description",
            explanation="explanation",
            developer=developer,
            team=team,
            project=project,
            impact_score=impact_score,
            ai_usage=ai_usage,
            created_at=datetime.combine(day, time(hour=10)),
            date=day,
            quarter=quarter_for(day),
            phase=phase_for(day),
            lines_changed=100 * impact_score,
            files_modified=impact_score,
        )

    return _make


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """
    Reset the cached Settings so env overrides in one test do not leak.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
