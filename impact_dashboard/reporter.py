from __future__ import annotations

from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from impact_dashboard.analytics.metrics import HeadlineMetrics
from impact_dashboard.analytics.trends import TrendPoint
from impact_dashboard.domain.models import ProductivitySummary

ACTIVITY_STYLES = {"High": "bold green", "Moderate": "yellow", "Low": "red"}
IMPACT_STYLES = {5: "bold green", 4: "green", 3: "yellow", 2: "dark_orange", 1: "red"}


def _impact_badges(summary: ProductivitySummary, max_display: int = 15) -> str:
    """Compact per-record score strip, newest first."""
    shown = summary.prs[:max_display]
    badges = " ".join(
        f"[{IMPACT_STYLES[pr.impact_score]}]{pr.impact_score}[/]" for pr in shown
    )
    remaining = len(summary.prs) - len(shown)
    if remaining > 0:
        badges += f" [dim]+{remaining}[/dim]"
    return badges


def print_productivity(
    summaries: List[ProductivitySummary],
    title: str = "Developer Productivity",
    console: Optional[Console] = None,
) -> None:
    """
    Render productivity summaries as a rich table.

    Handles both flat and period-bucketed summaries; the period column is only
    shown when at least one summary carries a period.
    """
    console = console or Console()

    if not summaries:
        console.print("[yellow]No productivity data to display.[/yellow]")
        return

    with_period = any(s.time_period for s in summaries)

    table = Table(
        title=title,
        box=box.ROUNDED,
        caption="Sorted by period (newest first), then total impact" if with_period
        else "Sorted by total impact (descending)",
    )
    table.add_column("Developer", style="cyan", no_wrap=True)
    if with_period:
        table.add_column("Period", style="blue", no_wrap=True)
    table.add_column("Team", style="magenta")
    table.add_column("PRs", justify="right")
    table.add_column("Avg Impact", justify="right", style="green")
    table.add_column("Total", justify="right", style="bold green")
    table.add_column("AI %", justify="right", style="yellow")
    table.add_column("Activity", justify="center")
    table.add_column("Work Summary")
    table.add_column("Scores")

    for s in summaries:
        activity = f"[{ACTIVITY_STYLES.get(s.recent_activity, 'white')}]{s.recent_activity}[/]"
        row = [s.developer]
        if with_period:
            row.append(s.display_time_period or "")
        row.extend(
            [
                s.team,
                str(s.pr_count),
                f"{s.avg_impact_score:.2f}",
                str(s.total_impact_points),
                f"{s.avg_ai_usage:.1f}",
                activity,
                s.work_summary,
                _impact_badges(s),
            ]
        )
        table.add_row(*row)

    console.print(table)


def print_metrics(metrics: HeadlineMetrics, console: Optional[Console] = None) -> None:
    console = console or Console()
    table = Table(title="Headline Metrics", box=box.ROUNDED, show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="bold")

    table.add_row("Total PRs", f"{metrics['filtered_prs']:,} of {metrics['total_prs']:,}")
    table.add_row("Avg Impact Score", f"{metrics['avg_impact_score']:.2f}")
    table.add_row("AI-Assisted PRs", f"{metrics['ai_assisted_percent']}%")
    table.add_row(
        "High Impact PRs",
        f"{metrics['high_impact_prs']:,} ({metrics['high_impact_percent']}%)",
    )
    for phase, count in metrics["phase_counts"].items():
        table.add_row(f"  {phase}", f"{count:,}")
    table.add_row("Volume vs. pre-cursor", f"+{metrics['volume_increase_percent']}%")
    console.print(table)


def print_trends(
    points: List[TrendPoint], entities: Sequence[str], console: Optional[Console] = None
) -> None:
    console = console or Console()
    if not points:
        console.print("[yellow]No trend data to display.[/yellow]")
        return

    table = Table(title="Average Impact by Quarter", box=box.ROUNDED)
    table.add_column("Quarter", style="cyan", no_wrap=True)
    for entity in entities:
        table.add_column(entity, justify="right")

    for point in points:
        cells = []
        for entity in entities:
            value = point.get(entity)
            cells.append("-" if value is None else f"{value:.2f}")
        table.add_row(str(point["quarter"]), *cells)

    console.print(table)


__all__ = ["print_metrics", "print_productivity", "print_trends"]
