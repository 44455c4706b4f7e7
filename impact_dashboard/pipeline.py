"""
Session pipeline: build the dataset once, then derive every dashboard view from it.

Usage (example from CLI):
    from impact_dashboard.pipeline import DashboardSession, run_pipeline

    session = DashboardSession.create(seed=42)
    monthly = session.productivity(granularity="monthly")

    payload = run_pipeline(seed=42, persist=True)

Persisted outputs are saved to `results/` by default:
- `results/latest.json` (last run)
- `results/run-<timestamp>.json` (timestamped archive)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from impact_dashboard.aggregation.productivity import aggregate_by_period, aggregate_flat
from impact_dashboard.analytics.filters import DateRange, filter_records
from impact_dashboard.analytics.metrics import HeadlineMetrics, compute_metrics
from impact_dashboard.analytics.trends import TrendGroup, TrendPoint, impact_trends
from impact_dashboard.config import get_settings
from impact_dashboard.domain.models import Granularity, ProductivitySummary, Record
from impact_dashboard.generation.builder import build_dataset
from impact_dashboard.generation.random_source import make_random_source
from impact_dashboard.utils.logging import get_logger
from impact_dashboard.utils.profiler import ProfileStats, profile_block

log = get_logger(__name__)


@dataclass(frozen=True)
class DashboardSession:
    """
    Immutable snapshot of one generated dataset.

    Views are recomputed on every call; nothing is cached between calls.
    """

    records: Tuple[Record, ...]
    seed: Optional[int] = None
    build_stats: Optional[ProfileStats] = field(default=None, compare=False)

    @classmethod
    def create(
        cls,
        seed: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> "DashboardSession":
        settings = get_settings()
        effective_seed = seed if seed is not None else settings.seed
        rng = make_random_source(effective_seed)
        with profile_block("build_dataset") as stats:
            records = build_dataset(
                start or settings.start_date, end or settings.end_date, rng=rng
            )
        stats.extra["records"] = len(records)
        log.info(
            f"[BUILD COMPLETE] {len(records)} records in {stats.duration_seconds:.3f}s",
            extra={"seed": effective_seed, "records": len(records)},
        )
        return cls(records=tuple(records), seed=effective_seed, build_stats=stats)

    def select(
        self,
        team: Optional[str] = None,
        project: Optional[str] = None,
        developers: Optional[Sequence[str]] = None,
        date_range: Union[DateRange, str] = DateRange.ALL_TIME,
        today: Optional[date] = None,
    ) -> List[Record]:
        return filter_records(
            self.records,
            team=team,
            project=project,
            developers=developers,
            date_range=date_range,
            today=today,
        )

    def productivity(
        self,
        granularity: Optional[Union[Granularity, str]] = None,
        span_days: Optional[int] = None,
        **filters: Any,
    ) -> List[ProductivitySummary]:
        """Flat summaries when ``granularity`` is None, bucketed ones otherwise."""
        selection = self.select(**filters)
        if granularity is None:
            return aggregate_flat(selection, span_days or get_settings().flat_span_days)
        return aggregate_by_period(selection, granularity)

    def metrics(self, **filters: Any) -> HeadlineMetrics:
        return compute_metrics(self.records, self.select(**filters))

    def trends(
        self,
        group_by: Union[TrendGroup, str],
        entities: Sequence[str],
        **filters: Any,
    ) -> List[TrendPoint]:
        return impact_trends(self.select(**filters), group_by, entities)


def summary_to_dict(summary: ProductivitySummary, include_prs: bool = False) -> Dict[str, Any]:
    exclude = None if include_prs else {"prs"}
    payload = summary.model_dump(mode="json", exclude=exclude)
    payload["display_name"] = summary.display_name
    return payload


def _persist_results(payload: dict, results_dir: Path) -> Path:
    results_dir.mkdir(parents=True, exist_ok=True)
    latest_path = results_dir / "latest.json"
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    archive_path = results_dir / f"run-{timestamp}.json"

    for path in (latest_path, archive_path):
        with path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, sort_keys=True)

    log.info("Results persisted", extra={"latest": str(latest_path), "archive": str(archive_path)})
    return latest_path


def run_pipeline(
    seed: Optional[int] = None,
    granularity: Optional[Union[Granularity, str]] = None,
    results_dir: Optional[Union[Path, str]] = None,
    persist: bool = False,
) -> Dict[str, Any]:
    """
    Build a session and compute the flat, bucketed and headline views.

    Parameters
    ----------
    seed : int | None
        Random seed; falls back to settings, then to a nondeterministic source.
    granularity : Granularity | str | None
        Bucket size for the period view. Defaults to settings.granularity.
    results_dir : Path | str | None
        Directory for JSON artifacts. Defaults to settings.results_dir.
    persist : bool
        Whether to write results to disk.

    Returns
    -------
    dict
        JSON-serializable payload with the build profile and every view.
    """
    settings = get_settings()
    effective_granularity = Granularity(granularity or settings.granularity)

    session = DashboardSession.create(seed=seed)
    with profile_block("aggregate", enable_tracemalloc=False) as stats:
        flat = session.productivity()
        bucketed = session.productivity(granularity=effective_granularity)
    log.info(
        f"[AGGREGATION COMPLETE] {len(flat)} developers, {len(bucketed)} developer-periods",
        extra={"granularity": effective_granularity.value, "duration": stats.duration_seconds},
    )

    payload: Dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "seed": session.seed,
        "records": len(session.records),
        "granularity": effective_granularity.value,
        "profile": {
            "build": session.build_stats.as_dict() if session.build_stats else None,
            "aggregate": stats.as_dict(),
        },
        "metrics": dict(session.metrics()),
        "productivity": [summary_to_dict(s) for s in flat],
        "productivity_by_period": [summary_to_dict(s) for s in bucketed],
    }

    if persist:
        _persist_results(payload, Path(results_dir or settings.results_dir))

    return payload


__all__ = ["DashboardSession", "run_pipeline", "summary_to_dict"]
