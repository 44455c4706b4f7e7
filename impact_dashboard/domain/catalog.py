"""
Static reference data: teams and developers.

The roster is fixed. Every developer belongs to exactly one team and a
developer's project is always resolved through that team.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from impact_dashboard.domain.models import (
    AdoptionTier,
    Developer,
    Persona,
    Skill,
    Team,
    TeamTier,
)

TEAMS: Tuple[Team, ...] = (
    Team(
        name="Canvas Architecture Core",
        project="Project Canvas",
        focus="Real-time collaboration, state management, conflict resolution",
        cursor_adoption=AdoptionTier.HIGH,
    ),
    Team(
        name="WebGL Performance Engine",
        project="Project Canvas",
        focus="Graphics optimization, rendering pipeline, memory management",
        cursor_adoption=AdoptionTier.HIGH,
    ),
    Team(
        name="Multi-User Synchronization",
        project="Project Canvas",
        focus="Operational transforms, presence awareness, data sync",
        cursor_adoption=AdoptionTier.HIGH,
    ),
    Team(
        name="Photoshop Core Engine",
        project="Photoshop Web",
        focus="C++ modernization, WebAssembly, AI features",
        cursor_adoption=AdoptionTier.MEDIUM,
    ),
    Team(
        name="Illustrator Web Platform",
        project="Illustrator Web",
        focus="Browser vector rendering, collaborative editing",
        cursor_adoption=AdoptionTier.MEDIUM,
    ),
    Team(
        name="Document Cloud Infrastructure",
        project="Acrobat Web",
        focus="PDF processing, security, enterprise features",
        cursor_adoption=AdoptionTier.LOW,
    ),
    Team(
        name="Creative SDK Platform",
        project="Creative SDK",
        focus="Cross-app integrations, developer tools",
        cursor_adoption=AdoptionTier.LOW,
    ),
)


def _dev(name: str, team: str, persona: Persona, skill: Skill) -> Developer:
    return Developer(name=name, team=team, persona=persona, base_skill=skill)


DEVELOPERS: Tuple[Developer, ...] = (
    _dev("Sarah Chen", "Canvas Architecture Core", Persona.EARLY_ADOPTER, Skill.SENIOR),
    _dev("David Kim", "Canvas Architecture Core", Persona.EARLY_ADOPTER, Skill.SENIOR),
    _dev("Priya Patel", "Canvas Architecture Core", Persona.GRADUAL_ADOPTER, Skill.MID),
    _dev("Marcus Rodriguez", "WebGL Performance Engine", Persona.EARLY_ADOPTER, Skill.SENIOR),
    _dev("Elena Vasquez", "WebGL Performance Engine", Persona.EARLY_ADOPTER, Skill.MID),
    _dev("James Wilson", "WebGL Performance Engine", Persona.GRADUAL_ADOPTER, Skill.SENIOR),
    _dev("Emma Thompson", "Multi-User Synchronization", Persona.GRADUAL_ADOPTER, Skill.MID),
    _dev("Raj Sharma", "Multi-User Synchronization", Persona.EARLY_ADOPTER, Skill.SENIOR),
    _dev("Lisa Chen", "Multi-User Synchronization", Persona.GRADUAL_ADOPTER, Skill.JUNIOR),
    _dev("Jordan Park", "Photoshop Core Engine", Persona.EARLY_ADOPTER, Skill.SENIOR),
    _dev("Alex Kim", "Photoshop Core Engine", Persona.GRADUAL_ADOPTER, Skill.MID),
    _dev("Riley Zhang", "Photoshop Core Engine", Persona.CONSERVATIVE, Skill.SENIOR),
    _dev("Taylor Swift", "Illustrator Web Platform", Persona.AI_DEPENDENT, Skill.JUNIOR),
    _dev("Morgan Davis", "Illustrator Web Platform", Persona.GRADUAL_ADOPTER, Skill.MID),
    # Control group
    _dev("Casey Johnson", "Document Cloud Infrastructure", Persona.CONSERVATIVE, Skill.SENIOR),
    _dev("Jamie Lee", "Document Cloud Infrastructure", Persona.CONSERVATIVE, Skill.MID),
    _dev("Quinn Adams", "Creative SDK Platform", Persona.CONSERVATIVE, Skill.SENIOR),
    _dev("Avery Brown", "Creative SDK Platform", Persona.GRADUAL_ADOPTER, Skill.MID),
)

POWER_USER_TEAMS = frozenset(
    {
        "Canvas Architecture Core",
        "WebGL Performance Engine",
        "Multi-User Synchronization",
    }
)

UNKNOWN_TEAM = "Unknown Team"

_TEAMS_BY_NAME: Dict[str, Team] = {team.name: team for team in TEAMS}
_DEVELOPERS_BY_NAME: Dict[str, Developer] = {dev.name: dev for dev in DEVELOPERS}


def get_team(name: str) -> Team:
    if name not in _TEAMS_BY_NAME:
        raise KeyError(f"Unknown team '{name}'. Available: {', '.join(_TEAMS_BY_NAME)}")
    return _TEAMS_BY_NAME[name]


def get_developer(name: str) -> Developer:
    if name not in _DEVELOPERS_BY_NAME:
        raise KeyError(
            f"Unknown developer '{name}'. Available: {', '.join(_DEVELOPERS_BY_NAME)}"
        )
    return _DEVELOPERS_BY_NAME[name]


def find_developer(name: str) -> Optional[Developer]:
    """Non-raising lookup used where a missing developer has a fallback."""
    return _DEVELOPERS_BY_NAME.get(name)


def team_tier(team_name: str) -> TeamTier:
    return TeamTier.POWER_USER if team_name in POWER_USER_TEAMS else TeamTier.STANDARD


def project_for(developer: Developer) -> str:
    return get_team(developer.team).project


def projects() -> List[str]:
    """Distinct project names in catalog order."""
    return list(dict.fromkeys(team.project for team in TEAMS))


def teams_in_project(project: str) -> List[str]:
    return [team.name for team in TEAMS if team.project == project]


def _check_roster() -> None:
    for dev in DEVELOPERS:
        if dev.team not in _TEAMS_BY_NAME:
            raise ValueError(f"Developer '{dev.name}' references unknown team '{dev.team}'")
    if len(_DEVELOPERS_BY_NAME) != len(DEVELOPERS):
        raise ValueError("Developer names must be unique")
    if not POWER_USER_TEAMS <= set(_TEAMS_BY_NAME):
        raise ValueError("Power-user teams must exist in the team catalog")


_check_roster()


__all__ = [
    "DEVELOPERS",
    "POWER_USER_TEAMS",
    "TEAMS",
    "UNKNOWN_TEAM",
    "find_developer",
    "get_developer",
    "get_team",
    "project_for",
    "projects",
    "team_tier",
    "teams_in_project",
]
