from pathlib import Path
from typing import Any, Dict, List

from portfolio_metrics.__version__ import __version__
from portfolio_metrics.reporting.base import BaseReport
from portfolio_metrics.reporting.formatters import fmt_average, get_metric_category_icon


def _cell(text: Any) -> str:
    return str(text).replace("|", "\\|").replace("\n", " ")


# =====================================================
# MARKDOWN DASHBOARD REPORT
# =====================================================

class MarkdownDashboardReport(BaseReport):
    """
    Renders the dashboard payload as a single Markdown file.
    Markdown is the source of truth; the PDF mirrors it.
    """

    name = "markdown"
    filename = "Metrics_Dashboard.md"

    def build(self, payload: Dict[str, Any], output_dir: Path) -> Path:
        self.validate_payload(payload)

        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        report_path = output_dir / self.filename

        with open(report_path, "w", encoding="utf-8") as f:
            self._write_header(f, payload.get("meta", {}))
            self._write_summary(f, payload["summary"])
            self._write_key_metrics(f, payload["key_metrics"])
            self._write_categories(f, payload.get("categories", []), payload["summary"])
            self._write_visuals(f, payload.get("visuals", []))
            self._write_metrics(f, payload["metrics"], payload.get("meta", {}))
            self._write_footer(f)

        return report_path

    # -------------------------------------------------
    # HEADER
    # -------------------------------------------------
    def _write_header(self, f, meta: Dict[str, Any]):
        f.write(f"# {meta.get('title', 'Performance Metrics')}\n\n")
        if meta.get("generated"):
            f.write(f"**Generated:** {meta['generated']}\n\n")
        f.write("---\n\n")

    # -------------------------------------------------
    # SUMMARY
    # -------------------------------------------------
    def _write_summary(self, f, summary: Dict[str, Any]):
        f.write("## Summary\n\n")
        f.write(f"- **Total Metrics**: {summary.get('total_metrics', 0)}\n")
        f.write(f"- **Categories**: {summary.get('categories', 0)}\n")
        f.write(f"- **Trending Up**: {summary.get('trending_up', 0)}\n")
        f.write(f"- **Average Score**: {fmt_average(summary.get('average_score'))}\n")
        f.write("\n")

    # -------------------------------------------------
    # KEY METRICS
    # -------------------------------------------------
    def _write_key_metrics(self, f, rows: List[Dict[str, Any]]):
        if not rows:
            return

        f.write("## Key Metrics\n\n")
        f.write("| | Metric | Value | Trend |\n")
        f.write("| :--- | :--- | :--- | :--- |\n")
        for row in rows:
            f.write(
                f"| {row['display_icon']} | {_cell(row['name'])} | "
                f"{_cell(row['display_value'])} | {row['trend_icon']} |\n"
            )
        f.write("\n")

    # -------------------------------------------------
    # CATEGORY BREAKDOWN
    # -------------------------------------------------
    def _write_categories(self, f, categories: List[Dict[str, Any]], summary: Dict[str, Any]):
        stats = summary.get("category_stats", {})
        if not categories:
            return

        f.write("## Categories\n\n")
        f.write("| Category | Count | Average | Min | Max | Trending |\n")
        f.write("| :--- | ---: | ---: | ---: | ---: | ---: |\n")
        for cat in categories:
            s = stats.get(cat["name"], {})
            f.write(
                f"| {cat['icon']} {cat['label']} | {cat['count']} | "
                f"{fmt_average(s.get('average'))} | {fmt_average(s.get('min'))} | "
                f"{fmt_average(s.get('max'))} | {s.get('trending', 0)} |\n"
            )
        f.write("\n")

    def _write_visuals(self, f, visuals: List[Dict[str, Any]]):
        if not visuals:
            return

        f.write("## Visualization\n\n")
        for vis in visuals:
            f.write(f"![{vis.get('caption')}]({vis.get('path')})\n")
            f.write(f"> {vis.get('caption')}\n\n")

    # -------------------------------------------------
    # DETAILED METRICS
    # -------------------------------------------------
    def _write_metrics(self, f, rows: List[Dict[str, Any]], meta: Dict[str, Any]):
        category = meta.get("category", "all")
        heading = "Detailed Metrics"
        if category != "all":
            heading += f": {get_metric_category_icon(category)} {category.title()}"
        f.write(f"## {heading}\n\n")

        if not rows:
            f.write("_No metrics available for the selected category._\n\n")
            return

        f.write("| Metric | Value | Category | Timeframe | Description |\n")
        f.write("| :--- | :--- | :--- | :--- | :--- |\n")
        for row in rows:
            f.write(
                f"| {_cell(row['name'])} | {_cell(row['display_value'])} | "
                f"{row['category']} | {_cell(row['timeframe'])} | "
                f"{_cell(row['description'])} |\n"
            )
        f.write("\n")

    def _write_footer(self, f):
        f.write("---\n")
        f.write(f"_Generated by portfolio-metrics v{__version__}_\n")
