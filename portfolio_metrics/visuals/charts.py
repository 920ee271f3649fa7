from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from matplotlib.ticker import FuncFormatter

from portfolio_metrics.core.schema import Metric
from portfolio_metrics.reporting.formatters import (
    format_metric_value,
    get_metric_category_color,
)


def chart_rows(metrics: Sequence[Metric]) -> List[Dict[str, Any]]:
    """
    Bar rows for numeric metrics only.

    `percentage` is each value relative to the largest value,
    0 when the largest value is not positive.
    """
    numeric = [m for m in metrics if m.is_numeric]
    if not numeric:
        return []

    max_value = max(m.value for m in numeric)

    rows = []
    for m in numeric:
        percentage = (m.value / max_value) * 100 if max_value > 0 else 0
        rows.append({
            "id": m.id,
            "name": m.name,
            "category": m.category,
            "value": m.value,
            "display_value": format_metric_value(m.value, m.unit),
            "percentage": round(percentage, 2),
            "color": get_metric_category_color(m.category),
        })

    return rows


def plot_chart_rows(rows: List[Dict[str, Any]], ax):
    """
    Draw chart rows as horizontal bars on `ax`, one bar per metric.

    Bars are keyed by metric id so metrics sharing a name keep
    their own bar; tick labels show the names.
    """
    df = pd.DataFrame(rows)
    palette = {row["category"]: row["color"] for row in rows}

    sns.barplot(
        data=df,
        x="percentage",
        y="id",
        hue="category",
        palette=palette,
        dodge=False,
        ax=ax,
    )

    ax.set_yticks(range(len(df)))
    ax.set_yticklabels(df["name"].tolist())

    # -------------------------------
    # VALUE LABELS
    # -------------------------------
    for pos, row in enumerate(df.itertuples(index=False)):
        if row.percentage >= 0:
            ax.text(row.percentage + 1, pos, row.display_value, va="center", ha="left", fontsize=8)
        else:
            ax.text(row.percentage - 1, pos, row.display_value, va="center", ha="right", fontsize=8)

    # negative values get room on the left
    lowest = df["percentage"].min()
    left = lowest - 15 if lowest < 0 else 0
    ax.set_xlim(left, 115)
    ax.axvline(0, color="#9ca3af", linewidth=0.8)

    return ax


def render_chart_rows(
    rows: List[Dict[str, Any]],
    output_path: Union[str, Path],
    title: Optional[str] = None,
) -> Optional[Path]:
    """
    Render precomputed chart rows to a PNG.
    Returns None when there are no rows.
    """
    if not rows:
        return None

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    height = max(2.5, 0.45 * len(rows) + 1)
    fig, ax = plt.subplots(figsize=(7, height))

    plot_chart_rows(rows, ax)

    ax.set_title(title or "Performance Metrics", fontsize=11, pad=10)
    ax.set_xlabel("Relative to top metric")
    ax.set_ylabel("")
    ax.grid(axis="x", linestyle="--", alpha=0.4)
    ax.get_xaxis().set_major_formatter(FuncFormatter(lambda x, _: f"{x:.0f}%"))

    fig.tight_layout()
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close(fig)

    return output_path


def render_metrics_chart(
    metrics: Sequence[Metric],
    output_path: Union[str, Path],
    title: Optional[str] = None,
) -> Optional[Path]:
    """
    Horizontal bar chart of numeric metrics, coloured by category.
    Returns None when there is nothing numeric to plot.
    """
    return render_chart_rows(chart_rows(metrics), output_path, title=title)
