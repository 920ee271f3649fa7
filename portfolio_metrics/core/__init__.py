"""Core Module - Metric schema, validated store, queries and aggregation."""

from .schema import CATEGORIES, TRENDS, Metric
from .validator import MetricLoadError, MetricValidator
from .store import MetricStore, load_metrics, get_all_metrics
from .queries import (
    KEY_METRIC_IDS,
    get_metrics_by_category,
    get_key_metrics,
    get_trending_metrics,
    get_metrics_by_timeframe,
    search_metrics,
    group_by_category,
)
from .aggregation import get_category_stats, get_metrics_summary

__all__ = [
    "CATEGORIES",
    "TRENDS",
    "Metric",
    "MetricLoadError",
    "MetricValidator",
    "MetricStore",
    "load_metrics",
    "get_all_metrics",
    "KEY_METRIC_IDS",
    "get_metrics_by_category",
    "get_key_metrics",
    "get_trending_metrics",
    "get_metrics_by_timeframe",
    "search_metrics",
    "group_by_category",
    "get_category_stats",
    "get_metrics_summary",
]
