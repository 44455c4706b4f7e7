"""
Impact Dashboard - synthetic pull request data and productivity aggregation.

This package provides the data core behind an engineering impact dashboard:

- A fixed catalog of teams and developers with AI-adoption personas
- A procedural generator of internally consistent pull request records
- Flat and weekly/monthly productivity aggregation per developer
- Filters, headline metrics and quarterly trend series

The dataset is generated once per session from an injectable random source,
so a seeded build is fully reproducible.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from impact_dashboard.aggregation.productivity import aggregate_by_period, aggregate_flat
from impact_dashboard.aggregation.work_summary import summarize_work
from impact_dashboard.config import Settings, get_settings
from impact_dashboard.domain.catalog import (
    DEVELOPERS,
    TEAMS,
    get_developer,
    get_team,
    projects,
)
from impact_dashboard.domain.models import (
    Developer,
    Granularity,
    Phase,
    ProductivitySummary,
    Record,
    Team,
)
from impact_dashboard.generation.builder import build_dataset
from impact_dashboard.generation.random_source import RandomSource, make_random_source
from impact_dashboard.pipeline import DashboardSession, run_pipeline
from impact_dashboard.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Catalog
    "DEVELOPERS",
    "TEAMS",
    "get_developer",
    "get_team",
    "projects",
    # Models
    "Developer",
    "Granularity",
    "Phase",
    "ProductivitySummary",
    "Record",
    "Team",
    # Generation
    "RandomSource",
    "build_dataset",
    "make_random_source",
    # Aggregation
    "aggregate_by_period",
    "aggregate_flat",
    "summarize_work",
    # Session
    "DashboardSession",
    "run_pipeline",
    # Logging
    "configure_logging",
    "get_logger",
]
