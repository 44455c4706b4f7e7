"""
Analytics package for the Impact Dashboard.

Filters, headline metrics and trend series computed from record collections.
"""

from impact_dashboard.analytics.filters import DateRange, filter_records, filter_summaries
from impact_dashboard.analytics.metrics import HeadlineMetrics, compute_metrics
from impact_dashboard.analytics.trends import TrendGroup, impact_trends

__all__ = [
    "DateRange",
    "HeadlineMetrics",
    "TrendGroup",
    "compute_metrics",
    "filter_records",
    "filter_summaries",
    "impact_trends",
]
