"""Reporting Module - Display formatting, dashboard payload and report renderers."""

# Keep package init lightweight.
# Renderers (markdown, pdf_renderer) and the dashboard payload are imported explicitly.

from .formatters import (
    format_metric_value,
    get_metric_category_color,
    get_metric_category_icon,
    get_trend_icon,
)

__all__ = [
    "format_metric_value",
    "get_metric_category_color",
    "get_metric_category_icon",
    "get_trend_icon",
]
