from __future__ import annotations

import json
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

import typer

from impact_dashboard.aggregation.periods import recent_periods
from impact_dashboard.aggregation.productivity import summaries_for_period
from impact_dashboard.analytics.filters import DateRange
from impact_dashboard.analytics.trends import TrendGroup
from impact_dashboard.config import get_settings
from impact_dashboard.domain.catalog import DEVELOPERS, TEAMS
from impact_dashboard.domain.models import Granularity
from impact_dashboard.pipeline import DashboardSession, run_pipeline
from impact_dashboard.reporter import print_metrics, print_productivity, print_trends
from impact_dashboard.utils.logging import configure_logging

app = typer.Typer(help="Impact Dashboard CLI.")

SeedOption = typer.Option(None, "--seed", help="Deterministic RNG seed (default from settings).")
TeamOption = typer.Option(None, "--team", "-t", help="Only include this team.")
ProjectOption = typer.Option(None, "--project", "-p", help="Only include this project.")
RangeOption = typer.Option(
    DateRange.ALL_TIME.value,
    "--range",
    help="Date range preset: " + ", ".join(r.value for r in DateRange) + ".",
)


def _setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


def _date_range(value: str) -> DateRange:
    try:
        return DateRange(value)
    except ValueError:
        raise typer.BadParameter(
            f"Unknown range '{value}'. Available: {', '.join(r.value for r in DateRange)}"
        ) from None


@app.command()
def info() -> None:
    """
    Show effective configuration values and the catalog size.
    """
    settings = get_settings()
    typer.echo(
        f"window={settings.start_date}..{settings.end_date} seed={settings.seed} "
        f"granularity={settings.granularity.value} flat_span_days={settings.flat_span_days} | "
        f"teams={len(TEAMS)} developers={len(DEVELOPERS)}"
    )


@app.command()
def build(
    seed: Optional[int] = SeedOption,
    granularity: Optional[Granularity] = typer.Option(
        None, "--granularity", "-g", help="Bucket size for the period view."
    ),
    persist: bool = typer.Option(False, "--persist", help="Write JSON results to the results dir."),
    results_dir: Optional[Path] = typer.Option(None, "--results-dir", help="Override results dir."),
) -> None:
    """
    Build a dataset and print the pipeline payload summary.
    """
    _setup()
    payload = run_pipeline(
        seed=seed, granularity=granularity, results_dir=results_dir, persist=persist
    )
    typer.echo(
        json.dumps(
            {k: payload[k] for k in ("seed", "records", "granularity", "metrics", "profile")},
            indent=2,
        )
    )


@app.command()
def productivity(
    seed: Optional[int] = SeedOption,
    granularity: Optional[Granularity] = typer.Option(
        None, "--granularity", "-g", help="weekly or monthly; omit for one row per developer."
    ),
    period: Optional[str] = typer.Option(
        None, "--period", help="Only show this period key (e.g. 2025-06 or 2025-W01)."
    ),
    latest: bool = typer.Option(
        False, "--latest", help="Show the most recent period of the dataset."
    ),
    team: Optional[str] = TeamOption,
    project: Optional[str] = ProjectOption,
    date_range: str = RangeOption,
    developer: Optional[List[str]] = typer.Option(
        None, "--developer", "-d", help="Only include these developers (repeatable)."
    ),
) -> None:
    """
    Show developer productivity, optionally bucketed by week or month.
    """
    _setup()
    if granularity is None and (period or latest):
        raise typer.BadParameter("--period and --latest require --granularity")
    session = DashboardSession.create(seed=seed)
    summaries = session.productivity(
        granularity=granularity,
        team=team,
        project=project,
        developers=developer,
        date_range=_date_range(date_range),
    )
    if granularity is not None and (period or latest):
        if latest:
            newest = max(r.date for r in session.records)
            period = recent_periods(granularity, newest, count=1)[0]
        summaries = summaries_for_period(summaries, period)
    print_productivity(summaries)


@app.command()
def trends(
    seed: Optional[int] = SeedOption,
    group_by: TrendGroup = typer.Option(TrendGroup.TEAM, "--group-by", help="team or developer."),
    entity: Optional[List[str]] = typer.Option(
        None, "--entity", "-e", help="Entities to plot (repeatable). Defaults to all."
    ),
    team: Optional[str] = TeamOption,
    project: Optional[str] = ProjectOption,
) -> None:
    """
    Show average impact per quarter for teams or developers.
    """
    _setup()
    if entity:
        entities = list(entity)
    elif group_by is TrendGroup.DEVELOPER:
        entities = [d.name for d in DEVELOPERS]
    else:
        entities = [t.name for t in TEAMS]
    session = DashboardSession.create(seed=seed)
    print_trends(session.trends(group_by, entities, team=team, project=project), entities)


@app.command()
def metrics(
    seed: Optional[int] = SeedOption,
    team: Optional[str] = TeamOption,
    project: Optional[str] = ProjectOption,
    date_range: str = RangeOption,
    today: Optional[str] = typer.Option(
        None, "--today", help="Reference date (YYYY-MM-DD) for relative ranges."
    ),
) -> None:
    """
    Show headline metrics for the current selection.
    """
    _setup()
    try:
        reference = date.fromisoformat(today) if today else None
    except ValueError:
        raise typer.BadParameter(f"Invalid --today value '{today}', expected YYYY-MM-DD") from None
    session = DashboardSession.create(seed=seed)
    print_metrics(
        session.metrics(
            team=team, project=project, date_range=_date_range(date_range), today=reference
        )
    )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
