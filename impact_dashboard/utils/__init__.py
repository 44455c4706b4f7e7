"""
Utilities package for the Impact Dashboard.

Exports shared helpers for logging, profiling and rounding. Keep this package free of
domain-specific logic.
"""

from impact_dashboard.utils.logging import configure_logging, get_logger
from impact_dashboard.utils.profiler import ProfileStats, profile_block
from impact_dashboard.utils.rounding import round_half_up_to

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
    "round_half_up_to",
]
