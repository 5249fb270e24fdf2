"""
Main Insights Engine - turns a raw sheet grid into profiles, insights and
healthcare metrics.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Sequence

from sheet_insights.columns_analyzer import profile_columns
from sheet_insights.healthcare import extract_healthcare_metrics
from sheet_insights.insights.models import Insight, InsightType, Severity
from sheet_insights.models import ColumnProfile, DataSummary
from sheet_insights.statistics import ColumnStatistics, analyze_numeric_columns

if TYPE_CHECKING:
    from sheet_insights.xlsx_loader import WorkbookData

logger = logging.getLogger(__name__)

MISSING_DATA_RATIO = 0.3


# =========================
# Insight rules
# =========================

def missing_data_alert(profiles: Sequence[ColumnProfile], total_rows: int) -> List[Insight]:
    """A single alert naming every column with more than 30% empty cells."""
    if total_rows == 0:
        return []
    sparse = [p for p in profiles if p.null_count / total_rows > MISSING_DATA_RATIO]
    if not sparse:
        return []
    return [
        Insight(
            type=InsightType.ALERT,
            severity=Severity.MEDIUM,
            title="Missing Data Detected",
            description=(
                f"{len(sparse)} column(s) have >30% missing values: "
                f"{', '.join(p.name for p in sparse)}"
            ),
        )
    ]


def outlier_anomalies(statistics: Sequence[ColumnStatistics]) -> List[Insight]:
    """One anomaly per numeric column that has outliers."""
    insights = []
    for stats in statistics:
        if not stats.has_outliers:
            continue
        insights.append(
            Insight(
                type=InsightType.ANOMALY,
                severity=Severity.LOW,
                title=f"Outliers in {stats.column}",
                description=(
                    f"Found {len(stats.outliers)} outlier(s). "
                    f"Range: {stats.min:.2f} - {stats.max:.2f}, Avg: {stats.mean:.2f}"
                ),
                metric=stats.column,
                value=len(stats.outliers),
            )
        )
    return insights


def overview_summary(profiles: Sequence[ColumnProfile], total_rows: int) -> Insight:
    return Insight(
        type=InsightType.SUMMARY,
        title="Data Overview",
        description=f"{total_rows:,} records across {len(profiles)} columns",
        value=total_rows,
    )


def generate_insights(
    profiles: Sequence[ColumnProfile],
    rows: Sequence[Sequence[Any]],
    sheet_name: str,
) -> List[Insight]:
    """
    Findings for a sheet, data-quality alerts and anomalies first.

    The overview summary is always the last entry, so the list is never
    empty.
    """
    insights: List[Insight] = []
    insights.extend(missing_data_alert(profiles, len(rows)))
    insights.extend(outlier_anomalies(analyze_numeric_columns(profiles, rows)))
    insights.append(overview_summary(profiles, len(rows)))

    logger.debug(f"Sheet '{sheet_name}': {len(insights)} insight(s)")
    return insights


# =========================
# Public entry points
# =========================

def analyze(grid: Sequence[Sequence[Any]], sheet_label: str = "") -> DataSummary:
    """
    Analyze a header-first grid.

    Args:
        grid: Row 0 holds the headers, later rows hold cell values
        sheet_label: Name of the sheet, used for logging

    Returns:
        DataSummary; an empty grid gives the zero-valued summary.
    """
    if not grid:
        return DataSummary(total_rows=0, total_columns=0)

    headers = grid[0]
    rows = grid[1:]

    columns = profile_columns(headers, rows)
    insights = generate_insights(columns, rows, sheet_label)
    healthcare_metrics = extract_healthcare_metrics(columns, rows)

    logger.info(
        f"Analyzed sheet '{sheet_label}': {len(rows)} rows, {len(headers)} columns, "
        f"{len(insights)} insight(s)"
    )
    return DataSummary(
        total_rows=len(rows),
        total_columns=len(headers),
        columns=columns,
        insights=insights,
        healthcare_metrics=healthcare_metrics,
    )


def analyze_workbook(workbook: "WorkbookData") -> Dict[str, DataSummary]:
    """Analyze every sheet of a loaded workbook independently."""
    return {sheet.name: analyze(sheet.preview, sheet.name) for sheet in workbook.sheets}
