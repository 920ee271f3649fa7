"""
Dashboard payload

Packages queries, aggregation and formatting into one plain dict
that the Markdown and PDF renderers consume. Renderers never
compute anything themselves.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from portfolio_metrics.core.aggregation import get_metrics_summary
from portfolio_metrics.core.queries import (
    get_key_metrics,
    get_metrics_by_category,
    group_by_category,
)
from portfolio_metrics.core.schema import Metric
from portfolio_metrics.core.store import MetricStore, get_all_metrics
from portfolio_metrics.reporting.formatters import (
    display_icon,
    format_metric_value,
    get_metric_category_color,
    get_metric_category_icon,
    get_trend_icon,
)
from portfolio_metrics.visuals.charts import chart_rows

ALL_CATEGORIES = "all"


def metric_row(metric: Metric) -> Dict[str, Any]:
    row = metric.to_dict()
    row.update({
        "display_value": format_metric_value(metric.value, metric.unit),
        "color": get_metric_category_color(metric.category),
        "display_icon": display_icon(metric),
        "trend_icon": get_trend_icon(metric.trend or "stable"),
    })
    return row


def build_dashboard_payload(
    store: MetricStore,
    category: Optional[str] = None,
    title: str = "Performance Metrics",
) -> Dict[str, Any]:
    """
    Build the dashboard payload.

    category=None or "all" shows every metric; any other value
    filters the detailed grid and chart to that category.
    """
    if category and category != ALL_CATEGORIES:
        selected = get_metrics_by_category(store, category)
    else:
        category = ALL_CATEGORIES
        selected = get_all_metrics(store)

    categories = [
        {
            "name": name,
            "label": name.title(),
            "count": len(items),
            "color": get_metric_category_color(name),
            "icon": get_metric_category_icon(name),
        }
        for name, items in group_by_category(store).items()
    ]

    return {
        "meta": {
            "title": title,
            "category": category,
            "generated": datetime.utcnow().strftime("%Y-%m-%d %H:%M UTC"),
        },
        "summary": get_metrics_summary(store),
        "key_metrics": [metric_row(m) for m in get_key_metrics(store)],
        "categories": categories,
        "metrics": [metric_row(m) for m in selected],
        "chart_rows": chart_rows(selected),
        "visuals": [],
    }
