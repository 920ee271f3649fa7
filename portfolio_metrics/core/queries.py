from typing import Dict, List

from .schema import Metric
from .store import MetricStore

# Featured metrics for the dashboard highlight row
KEY_METRIC_IDS = (
    "metric-cs-engagement",
    "metric-nps-current",
    "metric-operational-efficiency-high",
    "metric-customer-retention",
)


def get_metrics_by_category(store: MetricStore, category: str) -> List[Metric]:
    return [m for m in store.metrics if m.category == category]


def get_key_metrics(store: MetricStore) -> List[Metric]:
    """
    Featured metrics, in store order.

    Ids missing from the store are skipped.
    """
    key_ids = set(KEY_METRIC_IDS)
    return [m for m in store.metrics if m.id in key_ids]


def get_trending_metrics(store: MetricStore) -> List[Metric]:
    return [m for m in store.metrics if m.trend == "up"]


def get_metrics_by_timeframe(store: MetricStore, timeframe: str) -> List[Metric]:
    # case-sensitive containment
    return [m for m in store.metrics if timeframe in m.timeframe]


def search_metrics(
    store: MetricStore,
    query: str,
    include_context: bool = False,
) -> List[Metric]:
    """
    Case-insensitive search over name and description.

    An empty query matches every metric.
    """
    needle = (query or "").lower()
    if not needle:
        return list(store.metrics)

    results = []
    for metric in store.metrics:
        haystacks = [metric.name, metric.description]
        if include_context:
            haystacks.append(metric.context)

        if any(needle in h.lower() for h in haystacks):
            results.append(metric)

    return results


def group_by_category(store: MetricStore) -> Dict[str, List[Metric]]:
    """
    Metrics grouped by category, in first-appearance order.
    Categories with no metrics are absent.
    """
    groups: Dict[str, List[Metric]] = {}
    for metric in store.metrics:
        groups.setdefault(metric.category, []).append(metric)
    return groups


__all__ = [
    "KEY_METRIC_IDS",
    "get_metrics_by_category",
    "get_key_metrics",
    "get_trending_metrics",
    "get_metrics_by_timeframe",
    "search_metrics",
    "group_by_category",
]
