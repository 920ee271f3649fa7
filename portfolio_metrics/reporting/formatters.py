from typing import Optional

from portfolio_metrics.core.schema import (
    Metric,
    MetricValue,
    UNIT_MILLION,
    UNIT_NPS,
    UNIT_PERCENT,
    UNIT_POSITIONS,
    UNIT_THOUSAND,
)

CATEGORY_COLORS = {
    "retention": "#3B82F6",     # blue
    "growth": "#10B981",        # green
    "satisfaction": "#F59E0B",  # amber
    "efficiency": "#8B5CF6",    # purple
    "revenue": "#EF4444",       # red
}
DEFAULT_COLOR = "#6B7280"       # gray

CATEGORY_ICONS = {
    "retention": "🔄",
    "growth": "📈",
    "satisfaction": "😊",
    "efficiency": "⚡",
    "revenue": "💰",
}
DEFAULT_ICON = "📊"

TREND_ICONS = {
    "up": "📈",
    "down": "📉",
    "stable": "➡️",
}


def fmt_number(value) -> str:
    """
    Plain number text. Whole floats drop the trailing ".0".
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_metric_value(value: MetricValue, unit: str) -> str:
    """
    Canonical display string for a metric value.

    String values are always joined to the unit as-is.
    Position deltas are always prefixed with "+", so a negative
    delta renders as "+-3".
    """
    if isinstance(value, str):
        return f"{value}{unit}"

    text = fmt_number(value)

    if unit in UNIT_MILLION:
        return f"${text}M"
    if unit in UNIT_THOUSAND:
        return f"{text}K"
    if unit == UNIT_PERCENT:
        return f"{text}%"
    if unit == UNIT_NPS:
        return text
    if unit == UNIT_POSITIONS:
        return f"+{text}"

    return f"{text}{unit}"


def get_metric_category_color(category: str) -> str:
    return CATEGORY_COLORS.get(category, DEFAULT_COLOR)


def get_metric_category_icon(category: str) -> str:
    return CATEGORY_ICONS.get(category, DEFAULT_ICON)


def get_trend_icon(trend: Optional[str]) -> str:
    return TREND_ICONS.get(trend, DEFAULT_ICON)


def display_icon(metric: Metric) -> str:
    """Metric's own icon when set, otherwise its category icon."""
    return metric.icon or get_metric_category_icon(metric.category)


def fmt_average(value: Optional[float], decimals: int = 1) -> str:
    if value is None:
        return "-"
    return f"{value:,.{decimals}f}"
