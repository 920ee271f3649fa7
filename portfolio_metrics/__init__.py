"""
portfolio-metrics

Validated metrics store, queries, aggregation and dashboard
reporting for a customer-success portfolio.
"""

from .__version__ import __version__

# Keep package init lightweight and safe
# Chart, Markdown and PDF renderers are imported explicitly by users

from .core import (
    CATEGORIES,
    TRENDS,
    KEY_METRIC_IDS,
    Metric,
    MetricLoadError,
    MetricStore,
    load_metrics,
    get_all_metrics,
    get_metrics_by_category,
    get_key_metrics,
    get_trending_metrics,
    get_metrics_by_timeframe,
    search_metrics,
    group_by_category,
    get_category_stats,
    get_metrics_summary,
)
from .reporting.formatters import (
    format_metric_value,
    get_metric_category_color,
    get_metric_category_icon,
    get_trend_icon,
)

__all__ = [
    "__version__",
    "CATEGORIES",
    "TRENDS",
    "KEY_METRIC_IDS",
    "Metric",
    "MetricLoadError",
    "MetricStore",
    "load_metrics",
    "get_all_metrics",
    "get_metrics_by_category",
    "get_key_metrics",
    "get_trending_metrics",
    "get_metrics_by_timeframe",
    "search_metrics",
    "group_by_category",
    "get_category_stats",
    "get_metrics_summary",
    "format_metric_value",
    "get_metric_category_color",
    "get_metric_category_icon",
    "get_trend_icon",
]
