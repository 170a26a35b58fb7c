# -*- coding: utf-8 -*-
"""
Progress report PDF generator.

Renders the weight, engagement and nutrition summary that users can download
and share with their care team.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from io import BytesIO
from typing import Any, Dict, List, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import HRFlowable, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..dates import parse_timestamp
from ..numbers import round_half_up

BRAND_COLOR = colors.HexColor("#14b8a6")

DISCLAIMER = (
    "This report is for informational purposes only and does not constitute medical advice. "
    "Consult with a healthcare professional before making significant changes to your diet or exercise routine."
)


@dataclass
class WeightEntry:
    weight: float
    logged_at: str


@dataclass
class ProgressReport:
    """Everything the PDF needs, already aggregated."""
    user_name: str
    current_weight: float
    target_weight: float
    weight_logs: List[WeightEntry] = field(default_factory=list)  # newest first
    nutrition_stats: Dict[str, float] = field(default_factory=dict)
    streaks: Dict[str, int] = field(default_factory=dict)
    daily_wins: Dict[str, Any] = field(default_factory=dict)
    generated_at: Optional[datetime] = None

    @property
    def weight_to_go(self) -> float:
        return self.current_weight - self.target_weight

    @property
    def total_progress(self) -> float:
        """Current minus oldest logged weight; negative means lost."""
        if not self.weight_logs:
            return 0.0
        return self.current_weight - self.weight_logs[-1].weight


class ProgressPDFGenerator:
    """PDF progress report generator."""

    def __init__(self) -> None:
        self._setup_styles()

    def _setup_styles(self) -> None:
        self.styles = getSampleStyleSheet()

        self.styles.add(ParagraphStyle(
            name="BrandTitle",
            fontName="Helvetica-Bold",
            fontSize=24,
            leading=30,
            alignment=1,
            textColor=BRAND_COLOR,
        ))
        self.styles.add(ParagraphStyle(
            name="BrandSubtitle",
            fontName="Helvetica",
            fontSize=12,
            leading=16,
            alignment=1,
            textColor=colors.HexColor("#64748b"),
            spaceAfter=12,
        ))
        self.styles.add(ParagraphStyle(
            name="SectionHeading",
            fontName="Helvetica-Bold",
            fontSize=14,
            leading=18,
            spaceBefore=12,
            spaceAfter=6,
            textColor=colors.HexColor("#0f172a"),
        ))
        self.styles.add(ParagraphStyle(
            name="ReportBody",
            fontName="Helvetica",
            fontSize=10,
            leading=14,
            spaceBefore=2,
            spaceAfter=2,
        ))
        self.styles.add(ParagraphStyle(
            name="ReportSmall",
            fontName="Helvetica",
            fontSize=8,
            leading=10,
            textColor=colors.grey,
        ))

    def generate_report(self, report: ProgressReport) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=2*cm,
            leftMargin=2*cm,
            topMargin=2*cm,
            bottomMargin=2*cm,
            title="MetaBalance Progress Report",
        )

        story: List[Any] = []
        story.append(Paragraph("MetaBalance", self.styles["BrandTitle"]))
        story.append(Paragraph("Your Metabolic Health Journey", self.styles["BrandSubtitle"]))
        story.append(Paragraph(f"Progress Report for {_escape(report.user_name)}", self.styles["SectionHeading"]))
        story.append(Spacer(1, 6))

        story.extend(self._build_weight_section(report))
        story.extend(self._build_engagement_section(report))
        story.extend(self._build_nutrition_section(report))
        if report.weight_logs:
            story.extend(self._build_history_section(report))
        story.extend(self._build_footer(report))

        doc.build(story)
        pdf_content = buffer.getvalue()
        buffer.close()
        return pdf_content

    def _section(self, title: str) -> List[Any]:
        return [
            Paragraph(title, self.styles["SectionHeading"]),
            HRFlowable(width="100%", thickness=1, color=BRAND_COLOR),
            Spacer(1, 4),
        ]

    def _table(self, rows: List[List[str]]) -> Table:
        table = Table(rows, colWidths=[7*cm, 8*cm])
        table.setStyle(TableStyle([
            ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("TEXTCOLOR", (0, 0), (0, -1), colors.grey),
            ("ALIGN", (0, 0), (-1, -1), "LEFT"),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
            ("TOPPADDING", (0, 0), (-1, -1), 4),
        ]))
        return table

    def _build_weight_section(self, report: ProgressReport) -> List[Any]:
        progress = report.total_progress
        direction = "lost" if progress < 0 else "gained"
        elements = self._section("Weight Progress")
        elements.append(self._table([
            ["Current Weight", f"{report.current_weight:g} lbs"],
            ["Target Weight", f"{report.target_weight:g} lbs"],
            ["Weight to Go", f"{report.weight_to_go:.1f} lbs"],
            ["Total Progress", f"{abs(progress):.1f} lbs {direction}"],
        ]))
        elements.append(Spacer(1, 8))
        return elements

    def _build_engagement_section(self, report: ProgressReport) -> List[Any]:
        wins = report.daily_wins
        elements = self._section("Engagement & Consistency")
        elements.append(self._table([
            ["Current Streak", f"{report.streaks.get('current_streak', 0)} days"],
            ["Longest Streak", f"{report.streaks.get('longest_streak', 0)} days"],
            ["Total Days Tracked", str(wins.get("total_days", 0))],
            ["Average Daily Stars", f"{float(wins.get('avg_stars', 0.0)):.1f} / 5.0"],
            ["Perfect Days (5 stars)", str(wins.get("perfect_days", 0))],
        ]))
        elements.append(Spacer(1, 8))
        return elements

    def _build_nutrition_section(self, report: ProgressReport) -> List[Any]:
        stats = report.nutrition_stats
        elements = self._section("Nutrition Summary (7-Day Average)")
        elements.append(self._table([
            ["Average Calories", f"{round_half_up(stats.get('avg_calories', 0))} cal/day"],
            ["Average Protein", f"{round_half_up(stats.get('avg_protein', 0))}g/day"],
            ["Average Carbs", f"{round_half_up(stats.get('avg_carbs', 0))}g/day"],
            ["Average Fats", f"{round_half_up(stats.get('avg_fats', 0))}g/day"],
        ]))
        elements.append(Spacer(1, 8))
        return elements

    def _build_history_section(self, report: ProgressReport) -> List[Any]:
        elements = self._section("Recent Weight Entries")
        rows = [["Date", "Weight"]]
        for entry in report.weight_logs[:10]:
            rows.append([parse_timestamp(entry.logged_at).strftime("%b %d, %Y"), f"{entry.weight:g} lbs"])
        table = self._table(rows)
        table.setStyle(TableStyle([
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.black),
            ("LINEBELOW", (0, 0), (-1, 0), 0.5, colors.grey),
        ]))
        elements.append(table)
        elements.append(Spacer(1, 8))
        return elements

    def _build_footer(self, report: ProgressReport) -> List[Any]:
        generated = report.generated_at or datetime.now()
        return [
            Spacer(1, 16),
            HRFlowable(width="100%", thickness=0.5, color=colors.grey),
            Paragraph(f"Generated on {generated.strftime('%B %d, %Y')}", self.styles["ReportSmall"]),
            Paragraph(DISCLAIMER, self.styles["ReportSmall"]),
        ]


def _escape(text: str) -> str:
    # Paragraph parses a mini-markup; user text must not inject tags.
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
