"""
Domain models for the Impact Dashboard.

Defines the reference entities (teams, developers), the synthesized pull request
record and the productivity summary produced by the aggregators. All models are
frozen: the dataset is built once per session and shared read-only between the
views that consume it.
"""
from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

# Phase cutoffs (exclusive upper bounds)
ROLLOUT_START = dt.date(2025, 2, 1)
POST_ROLLOUT_START = dt.date(2025, 4, 1)


class Phase(str, Enum):
    PRE_CURSOR = "pre-cursor"
    CURSOR_ROLLOUT = "cursor-rollout"
    POST_CURSOR = "post-cursor"


class Persona(str, Enum):
    EARLY_ADOPTER = "early-adopter"
    GRADUAL_ADOPTER = "gradual-adopter"
    CONSERVATIVE = "conservative"
    AI_DEPENDENT = "ai-dependent"


class Skill(str, Enum):
    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"


class AdoptionTier(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TeamTier(str, Enum):
    """Whether a team belongs to the designated power-user group."""

    POWER_USER = "power-user"
    STANDARD = "standard"


class Granularity(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"


def phase_for(day: dt.date) -> Phase:
    """Return the lifecycle phase a calendar date falls into."""
    if day < ROLLOUT_START:
        return Phase.PRE_CURSOR
    if day < POST_ROLLOUT_START:
        return Phase.CURSOR_ROLLOUT
    return Phase.POST_CURSOR


def quarter_for(day: dt.date) -> str:
    """Return the year-qualified quarter label, e.g. ``"Q1 2025"``."""
    return f"Q{(day.month - 1) // 3 + 1} {day.year}"


class Team(BaseModel):
    name: str
    project: str
    focus: str
    cursor_adoption: AdoptionTier

    model_config = {"frozen": True}


class Developer(BaseModel):
    name: str
    team: str
    persona: Persona
    base_skill: Skill

    model_config = {"frozen": True}


class Record(BaseModel):
    """
    A single synthesized pull request.

    Derived fields (``date``, ``quarter``, ``phase``) are checked against
    ``created_at`` on construction, so a record can never carry a phase or
    quarter that disagrees with its date.
    """

    id: int = Field(..., ge=1, description="Monotonic identifier within a build.")
    title: str
    description: str
    explanation: str
    developer: str
    team: str
    project: str
    impact_score: int = Field(..., ge=1, le=5)
    ai_usage: int = Field(..., ge=0, le=100, description="AI-usage percentage.")
    created_at: dt.datetime
    date: dt.date
    quarter: str
    phase: Phase
    lines_changed: int = Field(..., ge=0)
    files_modified: int = Field(..., ge=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_derived_fields(self) -> "Record":
        if self.created_at.date() != self.date:
            raise ValueError(f"date {self.date} does not match created_at {self.created_at}")
        expected_phase = phase_for(self.date)
        if self.phase != expected_phase:
            raise ValueError(
                f"phase {self.phase.value!r} inconsistent with date {self.date} "
                f"(expected {expected_phase.value!r})"
            )
        expected_quarter = quarter_for(self.date)
        if self.quarter != expected_quarter:
            raise ValueError(f"quarter {self.quarter!r} does not match date {self.date}")
        return self

    @property
    def slug(self) -> str:
        return f"pr-{self.id}"


class ProductivitySummary(BaseModel):
    """
    Aggregated productivity of one developer, optionally within one time period.
    """

    developer: str
    team: str
    pr_count: int = Field(..., ge=1)
    avg_impact_score: float
    total_impact_points: int
    avg_ai_usage: float
    prs: List[Record]
    work_summary: str
    top_impact_pr: Record
    recent_activity: str
    time_period: Optional[str] = Field(None, description="Period key, e.g. 2025-06 or 2025-W01.")
    display_time_period: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def display_name(self) -> str:
        if self.display_time_period:
            return f"{self.developer} ({self.display_time_period})"
        return self.developer


__all__ = [
    "AdoptionTier",
    "Developer",
    "Granularity",
    "Persona",
    "Phase",
    "POST_ROLLOUT_START",
    "ProductivitySummary",
    "Record",
    "ROLLOUT_START",
    "Skill",
    "Team",
    "TeamTier",
    "phase_for",
    "quarter_for",
]
