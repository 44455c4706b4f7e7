"""
Domain package for the Impact Dashboard.

Exports the reference catalog and the record/summary models shared by the
generation and aggregation packages. Keep this package free of randomness and
aggregation logic.
"""

from impact_dashboard.domain.catalog import (
    DEVELOPERS,
    POWER_USER_TEAMS,
    TEAMS,
    UNKNOWN_TEAM,
    find_developer,
    get_developer,
    get_team,
    projects,
)
from impact_dashboard.domain.models import (
    Developer,
    Granularity,
    Persona,
    Phase,
    ProductivitySummary,
    Record,
    Skill,
    Team,
    phase_for,
    quarter_for,
)

__all__ = [
    "DEVELOPERS",
    "POWER_USER_TEAMS",
    "TEAMS",
    "UNKNOWN_TEAM",
    "Developer",
    "Granularity",
    "Persona",
    "Phase",
    "ProductivitySummary",
    "Record",
    "Skill",
    "Team",
    "find_developer",
    "get_developer",
    "get_team",
    "phase_for",
    "projects",
    "quarter_for",
]
