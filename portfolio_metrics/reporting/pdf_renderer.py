from pathlib import Path
from typing import Any, Dict, List
from xml.sax.saxutils import escape

from reportlab.lib import utils
from reportlab.lib.colors import HexColor
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import (
    Image, PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle
)

from portfolio_metrics.reporting.base import BaseReport
from portfolio_metrics.reporting.formatters import fmt_average


# =====================================================
# METRICS PDF RENDERER
# =====================================================

class MetricsPDFRenderer(BaseReport):
    """
    Renders the dashboard payload to PDF.

    Built-in PDF fonts have no emoji glyphs, so icons are left out
    and category colour is carried by the table cell instead.
    """

    PRIMARY = HexColor("#1f2937")
    BORDER = HexColor("#e5e7eb")
    HEADER_BG = HexColor("#f3f4f6")

    name = "pdf"
    filename = "Metrics_Dashboard.pdf"

    def build(self, payload: Dict[str, Any], output_dir: Path) -> Path:
        return self.render(payload, Path(output_dir) / self.filename)

    def render(self, payload: Dict[str, Any], output_path: Path) -> Path:
        self.validate_payload(payload)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=A4,
            rightMargin=40,
            leftMargin=40,
            topMargin=40,
            bottomMargin=40,
        )

        styles = getSampleStyleSheet()
        story: List[Any] = []

        # -------------------------------------------------
        # STYLES
        # -------------------------------------------------
        def add_style(name, **kwargs):
            if name not in styles:
                styles.add(ParagraphStyle(name=name, **kwargs))

        add_style(
            "DashTitle",
            fontSize=22,
            alignment=TA_CENTER,
            spaceAfter=18,
            fontName="Helvetica-Bold",
            textColor=self.PRIMARY,
        )
        add_style(
            "DashSection",
            fontSize=15,
            spaceBefore=18,
            spaceAfter=10,
            fontName="Helvetica-Bold",
        )
        add_style("DashBody", fontSize=11, leading=15, spaceAfter=6)
        add_style(
            "DashCaption",
            fontSize=9,
            alignment=TA_CENTER,
            textColor=HexColor("#6b7280"),
            spaceAfter=12,
        )

        meta = payload.get("meta", {})
        summary = payload.get("summary", {})

        # =================================================
        # TITLE + SUMMARY
        # =================================================
        story.append(Paragraph(escape(meta.get("title", "Performance Metrics")), styles["DashTitle"]))
        if meta.get("generated"):
            story.append(Paragraph(f"Generated: {meta['generated']}", styles["DashCaption"]))

        story.append(Paragraph(
            f"Total metrics: <b>{summary.get('total_metrics', 0)}</b><br/>"
            f"Categories: <b>{summary.get('categories', 0)}</b><br/>"
            f"Trending up: <b>{summary.get('trending_up', 0)}</b><br/>"
            f"Average score: <b>{fmt_average(summary.get('average_score'))}</b>",
            styles["DashBody"],
        ))
        story.append(Spacer(1, 12))

        # =================================================
        # KEY METRICS
        # =================================================
        key_metrics = payload.get("key_metrics", [])
        if key_metrics:
            story.append(Paragraph("Key Metrics", styles["DashSection"]))
            rows = [["Metric", "Value", "Trend"]]
            for row in key_metrics:
                rows.append([row["name"], row["display_value"], row.get("trend") or "-"])
            story.append(self._table(rows, [3.5 * inch, 1.5 * inch, 1 * inch]))

        # =================================================
        # CATEGORY BREAKDOWN
        # =================================================
        categories = payload.get("categories", [])
        stats = summary.get("category_stats", {})
        if categories:
            story.append(Paragraph("Categories", styles["DashSection"]))
            rows = [["Category", "Count", "Average", "Min", "Max"]]
            for cat in categories:
                s = stats.get(cat["name"], {})
                rows.append([
                    cat["label"],
                    str(cat["count"]),
                    fmt_average(s.get("average")),
                    fmt_average(s.get("min")),
                    fmt_average(s.get("max")),
                ])
            table = self._table(rows, [2 * inch] + [1 * inch] * 4)
            for idx, cat in enumerate(categories, start=1):
                table.setStyle(TableStyle([
                    ("TEXTCOLOR", (0, idx), (0, idx), HexColor(cat["color"])),
                ]))
            story.append(table)

        story.append(PageBreak())

        # =================================================
        # VISUALS
        # =================================================
        for vis in payload.get("visuals", []):
            path = Path(vis.get("path", ""))
            if not path.exists():
                continue
            img = utils.ImageReader(str(path))
            iw, ih = img.getSize()
            w = 6 * inch
            h = min((ih / iw) * w, 7 * inch)
            story.append(Image(str(path), width=w, height=h))
            story.append(Paragraph(escape(vis.get("caption", "")), styles["DashCaption"]))

        # =================================================
        # DETAILED METRICS
        # =================================================
        metrics = payload.get("metrics", [])
        story.append(Paragraph("Detailed Metrics", styles["DashSection"]))
        if not metrics:
            story.append(Paragraph("No metrics available for the selected category.", styles["DashBody"]))
        for row in metrics:
            story.append(Paragraph(
                f"<font color='{row['color']}'><b>{escape(row['name'])}</b></font>"
                f" - {escape(row['display_value'])}",
                styles["DashBody"],
            ))
            story.append(Paragraph(escape(row["description"]), styles["DashBody"]))
            if row.get("timeframe") or row.get("context"):
                story.append(Paragraph(
                    escape(" | ".join(filter(None, [row.get("timeframe"), row.get("context")]))),
                    styles["DashCaption"],
                ))

        doc.build(story)
        return output_path

    def _table(self, rows: List[List[str]], col_widths: List[float]) -> Table:
        table = Table(rows, colWidths=col_widths)
        table.setStyle(TableStyle([
            ("GRID", (0, 0), (-1, -1), 0.5, self.BORDER),
            ("BACKGROUND", (0, 0), (-1, 0), self.HEADER_BG),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("PADDING", (0, 0), (-1, -1), 8),
        ]))
        return table
