"""
Sheet Insights - typed profiles, insights, healthcare metrics, search and
chart data for uploaded spreadsheets.

Usage:
    from sheet_insights import analyze, search, prepare_chart_data

    summary = analyze(grid, "Sheet1")
    matches = search(grid[1:], "chest pain")
    points = prepare_chart_data(summary.columns, grid[1:])
"""

from sheet_insights.charts import CategoryPoint, TimeSeriesPoint, prepare_chart_data
from sheet_insights.columns_analyzer import profile_columns
from sheet_insights.healthcare import extract_healthcare_metrics
from sheet_insights.insights import (
    Insight,
    InsightType,
    Severity,
    analyze,
    analyze_workbook,
    generate_insights,
)
from sheet_insights.models import ColumnProfile, ColumnType, DataSummary, HealthcareMetrics
from sheet_insights.search import search
from sheet_insights.xlsx_loader import SheetData, WorkbookData, load_workbook_file

__all__ = [
    "analyze",
    "analyze_workbook",
    "search",
    "prepare_chart_data",
    "profile_columns",
    "generate_insights",
    "extract_healthcare_metrics",
    "load_workbook_file",
    "ColumnProfile",
    "ColumnType",
    "DataSummary",
    "HealthcareMetrics",
    "Insight",
    "InsightType",
    "Severity",
    "TimeSeriesPoint",
    "CategoryPoint",
    "SheetData",
    "WorkbookData",
]
