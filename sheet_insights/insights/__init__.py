"""
Insights Engine - generated findings over a spreadsheet grid.

This module provides:
- Insight / InsightType / Severity: the finding model
- generate_insights: missing-data alerts, outlier anomalies and the overview
- analyze: full sheet analysis (profiles, insights, healthcare metrics)

Usage:
    from sheet_insights.insights import analyze

    summary = analyze(grid, "Sheet1")
    for insight in summary.insights:
        print(insight.title, insight.description)
"""

from sheet_insights.insights.engine import analyze, analyze_workbook, generate_insights
from sheet_insights.insights.models import Insight, InsightType, Severity

__all__ = [
    "analyze",
    "analyze_workbook",
    "generate_insights",
    "Insight",
    "InsightType",
    "Severity",
]
