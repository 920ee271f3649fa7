"""
Category statistics and dashboard summary.

Numeric values drive the arithmetic; string values (e.g. "10+")
are counted but never averaged. Any statistic over zero numeric
values is reported as 0.
"""

from typing import Any, Dict

import numpy as np
import pandas as pd

from .schema import CATEGORIES
from .store import MetricStore

FRAME_COLUMNS = ["id", "name", "category", "trend", "numeric_value"]


def metrics_frame(store: MetricStore) -> pd.DataFrame:
    """
    One row per metric. Non-numeric values become NaN in `numeric_value`.
    """
    rows = [
        {
            "id": m.id,
            "name": m.name,
            "category": m.category,
            "trend": m.trend,
            "numeric_value": float(m.value) if m.is_numeric else np.nan,
        }
        for m in store.metrics
    ]

    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    df["numeric_value"] = pd.to_numeric(df["numeric_value"], errors="coerce")
    return df


def safe_stat(series: pd.Series, stat: str) -> float:
    values = series.dropna()
    if values.empty:
        return 0
    return float(getattr(values, stat)())


def get_category_stats(store: MetricStore) -> Dict[str, Dict[str, Any]]:
    """
    Per-category count, average, min, max and trending count.

    Every enumerated category is present in the result, including
    categories with no metrics.
    """
    df = metrics_frame(store)
    stats: Dict[str, Dict[str, Any]] = {}

    for category in CATEGORIES:
        subset = df[df["category"] == category]
        values = subset["numeric_value"]

        stats[category] = {
            "count": int(len(subset)),
            "average": safe_stat(values, "mean"),
            "min": safe_stat(values, "min"),
            "max": safe_stat(values, "max"),
            "trending": int((subset["trend"] == "up").sum()),
        }

    return stats


def get_metrics_summary(store: MetricStore) -> Dict[str, Any]:
    df = metrics_frame(store)
    category_stats = get_category_stats(store)

    return {
        "total_metrics": int(len(df)),
        "categories": sum(1 for s in category_stats.values() if s["count"] > 0),
        "trending_up": int((df["trend"] == "up").sum()),
        "average_score": safe_stat(df["numeric_value"], "mean"),
        "category_stats": category_stats,
    }


__all__ = [
    "metrics_frame",
    "safe_stat",
    "get_category_stats",
    "get_metrics_summary",
]
