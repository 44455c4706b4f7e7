"""
Profiling utilities for the Impact Dashboard.

Wraps dataset builds and aggregations to record:
- Wall-clock time (perf_counter)
- Resident memory before/after (psutil)
- Peak Python allocations (tracemalloc)

Usage:
    from impact_dashboard.utils.profiler import profile_block

    with profile_block("build") as stats:
        records = build_dataset()

    print(stats.duration_seconds, stats.peak_traced_bytes)
"""

from __future__ import annotations

import contextlib
import time
import tracemalloc
from dataclasses import dataclass, field
from typing import Any, Generator, Optional

import psutil


@dataclass
class ProfileStats:
    """
    Container for profiling measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    rss_bytes: Optional[int] = field(default=None)
    peak_traced_bytes: Optional[int] = field(default=None)
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "duration_seconds": round(self.duration_seconds, 4),
            "rss_bytes": self.rss_bytes,
            "peak_traced_bytes": self.peak_traced_bytes,
            **self.extra,
        }


@contextlib.contextmanager
def profile_block(
    label: str, enable_tracemalloc: bool = True
) -> Generator[ProfileStats, None, None]:
    """
    Context manager to profile a block of code.

    Parameters
    ----------
    label : str
        Human-friendly label for the profiled block.
    enable_tracemalloc : bool
        Whether to track peak Python-level allocations. If tracing is already
        on, its peak is reset so the reported peak covers this block only;
        tracemalloc is only stopped on exit if this block started it.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()

    tracemalloc_was_running = tracemalloc.is_tracing()
    if enable_tracemalloc:
        if tracemalloc_was_running:
            tracemalloc.reset_peak()
        else:
            tracemalloc.start()

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts
        stats.rss_bytes = process.memory_info().rss

        if enable_tracemalloc and tracemalloc.is_tracing():
            _, peak_traced = tracemalloc.get_traced_memory()
            stats.peak_traced_bytes = peak_traced
            if not tracemalloc_was_running:
                tracemalloc.stop()


__all__ = ["ProfileStats", "profile_block"]
