"""
portfolio-metrics CLI
Summary, search and dashboard report generation over the metrics dataset.
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from portfolio_metrics.__version__ import __version__
from portfolio_metrics.config.loader import load_config
from portfolio_metrics.core.aggregation import get_metrics_summary
from portfolio_metrics.core.queries import (
    get_metrics_by_category,
    get_metrics_by_timeframe,
    get_trending_metrics,
    search_metrics,
)
from portfolio_metrics.core.schema import Metric
from portfolio_metrics.core.store import MetricStore, load_metrics
from portfolio_metrics.core.validator import MetricLoadError
from portfolio_metrics.reporting.formatters import (
    display_icon,
    fmt_average,
    format_metric_value,
)

logger = logging.getLogger(__name__)


# -------------------------------------------------
# PROGRAMMATIC ENTRY
# -------------------------------------------------
def run_report(
    store: MetricStore,
    config: Dict[str, Any],
    run_dir: Optional[Path] = None,
) -> Dict[str, Optional[str]]:
    """
    Build the dashboard report for a loaded store.

    Returns:
        {
            "markdown": <path>,
            "chart": <path or None>,
            "pdf": <path or None>,
            "run_dir": <path>
        }
    """
    from portfolio_metrics.reporting.dashboard import build_dashboard_payload
    from portfolio_metrics.reporting.markdown import MarkdownDashboardReport
    from portfolio_metrics.visuals.charts import render_chart_rows

    report_cfg = config["report_config"]

    if run_dir is None:
        run_dir = Path(config["output_dir"]) / datetime.utcnow().strftime("%Y-%m-%d_%H-%M-%S")
    run_dir = Path(run_dir)
    run_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Run directory: %s", run_dir)

    payload = build_dashboard_payload(
        store,
        category=report_cfg.category,
        title=report_cfg.title,
    )

    # -------------------------------------------------
    # CHART
    # -------------------------------------------------
    chart_path = None
    if report_cfg.chart:
        chart_path = render_chart_rows(
            payload["chart_rows"],
            run_dir / "metrics_chart.png",
            title=report_cfg.title,
        )
        if chart_path:
            payload["visuals"].append({
                "path": chart_path.name,
                "caption": "Numeric metrics relative to the top value",
            })
        else:
            logger.info("No numeric metrics to chart")

    md_path = MarkdownDashboardReport().build(payload, run_dir)
    logger.info("Markdown report: %s", md_path)

    # -------------------------------------------------
    # PDF (optional)
    # -------------------------------------------------
    pdf_path = None
    if report_cfg.pdf:
        try:
            from portfolio_metrics.reporting.pdf_renderer import MetricsPDFRenderer

            # PDF resolves image paths from the working directory
            pdf_payload = dict(payload)
            pdf_payload["visuals"] = [
                {**v, "path": str(run_dir / v["path"])} for v in payload["visuals"]
            ]
            pdf_path = MetricsPDFRenderer().render(
                pdf_payload, run_dir / "Metrics_Dashboard.pdf"
            )
            logger.info("PDF generated: %s", pdf_path)
        except Exception:
            logger.exception("PDF generation failed")

    return {
        "markdown": str(md_path),
        "chart": str(chart_path) if chart_path else None,
        "pdf": str(pdf_path) if pdf_path else None,
        "run_dir": str(run_dir),
    }


# -------------------------------------------------
# OUTPUT HELPERS
# -------------------------------------------------
def _print_metrics(metrics: List[Metric]):
    if not metrics:
        print("No metrics found.")
        return
    for m in metrics:
        print(f"{display_icon(m)} {m.name}: {format_metric_value(m.value, m.unit)} ({m.category}, {m.timeframe})")


def _print_summary(summary: Dict[str, Any]):
    print(f"Total metrics: {summary['total_metrics']}")
    print(f"Categories:    {summary['categories']}")
    print(f"Trending up:   {summary['trending_up']}")
    print(f"Average score: {fmt_average(summary['average_score'])}")
    print()
    for category, stats in summary["category_stats"].items():
        print(
            f"  {category:<13} count={stats['count']} "
            f"avg={fmt_average(stats['average'])} "
            f"min={fmt_average(stats['min'])} max={fmt_average(stats['max'])}"
        )


# -------------------------------------------------
# CLI ENTRY
# -------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio-metrics",
        description=f"portfolio-metrics v{__version__}",
    )
    parser.add_argument("--version", action="store_true")
    parser.add_argument("--config", help="Path to config YAML")
    parser.add_argument("--data", help="Path to metrics JSON (overrides config)")
    parser.add_argument("-v", "--verbose", action="store_true")

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("summary", help="Print the metrics summary")

    search = sub.add_parser("search", help="Search metric names and descriptions")
    search.add_argument("query")
    search.add_argument("--context", action="store_true", help="Also search the context field")

    category = sub.add_parser("category", help="List metrics in a category")
    category.add_argument("name")

    timeframe = sub.add_parser("timeframe", help="List metrics whose timeframe contains TEXT")
    timeframe.add_argument("text")

    sub.add_parser("trending", help="List metrics trending up")

    report = sub.add_parser("report", help="Generate the dashboard report")
    report.add_argument("--output-dir", help="Report directory")
    report.add_argument("--category", help="Limit detailed metrics to one category")
    report.add_argument("--pdf", action="store_true", help="Also export PDF")
    report.add_argument("--no-chart", action="store_true", help="Skip the chart")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # ---- VERSION ----
    if args.version:
        print(f"portfolio-metrics v{__version__}")
        return 0

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Config error: %s", exc)
        return 2

    # ---- LOGGING ----
    level = "DEBUG" if args.verbose else str(config["logging"].get("level", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    # ---- LOAD ----
    try:
        store = load_metrics(args.data or config.get("data_path"))
    except (FileNotFoundError, MetricLoadError) as exc:
        logger.error("Could not load metrics: %s", exc)
        return 2

    if args.command == "summary":
        _print_summary(get_metrics_summary(store))
    elif args.command == "search":
        _print_metrics(search_metrics(store, args.query, include_context=args.context))
    elif args.command == "category":
        _print_metrics(get_metrics_by_category(store, args.name))
    elif args.command == "timeframe":
        _print_metrics(get_metrics_by_timeframe(store, args.text))
    elif args.command == "trending":
        _print_metrics(get_trending_metrics(store))
    elif args.command == "report":
        report_cfg = config["report_config"]
        if args.category:
            report_cfg.category = args.category
        if args.pdf:
            report_cfg.pdf = True
        if args.no_chart:
            report_cfg.chart = False
        if args.output_dir:
            config["output_dir"] = args.output_dir

        result = run_report(store, config)

        print("\n✅ Report generated")
        print(f"📝 Markdown: {result['markdown']}")
        if result["chart"]:
            print(f"📊 Chart: {result['chart']}")
        if result["pdf"]:
            print(f"📄 PDF: {result['pdf']}")
        print(f"📁 Run folder: {result['run_dir']}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
