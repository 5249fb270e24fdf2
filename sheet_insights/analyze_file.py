#!/usr/bin/env python3
"""
Spreadsheet Analysis Script.

Loads an uploaded workbook (or CSV), profiles every sheet and prints the
generated insights, healthcare metrics and chart series.

Usage:
    # Analyze every sheet
    sheet-insights data/ed_visits.xlsx

    # Only one sheet, as JSON
    sheet-insights data/ed_visits.xlsx --sheet "Triage" --json

    # Search rows and show the chart series
    sheet-insights data/ed_visits.xlsx --search "chest pain" --chart
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from sheet_insights.charts import prepare_chart_data
from sheet_insights.core.cells import row_text
from sheet_insights.core.config import get_settings
from sheet_insights.exceptions import SheetInsightsError
from sheet_insights.insights.engine import analyze
from sheet_insights.models import DataSummary
from sheet_insights.search import search
from sheet_insights.xlsx_loader import SheetData, load_workbook_file

logger = logging.getLogger(__name__)


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def configure_logging(verbose: bool = False) -> None:
    settings = get_settings()
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=settings.log_format)


def print_summary(sheet: SheetData, summary: DataSummary) -> None:
    """Print a human-readable report for one sheet."""
    print("=" * 70)
    print(f"SHEET: {sheet.name}")
    print("=" * 70)
    print(f"Rows: {summary.total_rows}  Columns: {summary.total_columns}")

    if summary.columns:
        print("\nColumns:")
        for col in summary.columns:
            print(
                f"  • {col.name}: {col.type.value} "
                f"(unique={col.unique_count}, empty={col.null_count})"
            )

    if summary.insights:
        print("\nInsights:")
        for insight in summary.insights:
            severity = f" [{insight.severity.value}]" if insight.severity else ""
            print(f"  - {insight.type.value}{severity} {insight.title}: {insight.description}")

    metrics = summary.healthcare_metrics
    if metrics is not None:
        print("\nHealthcare metrics:")
        for key, value in metrics.to_dict().items():
            print(f"  {key}: {value}")


def sheet_payload(
    sheet: SheetData,
    summary: DataSummary,
    query: Optional[str],
    chart: bool,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"sheet": sheet.name, "summary": summary.to_dict()}
    rows = sheet.preview[1:]
    if query is not None:
        payload["searchResults"] = [list(r) for r in search(rows, query)]
    if chart:
        payload["chartData"] = [p.to_dict() for p in prepare_chart_data(summary.columns, rows)]
    return payload


def analyze_file(args) -> int:
    """Load the file and report on the requested sheets."""
    settings = get_settings()

    try:
        workbook = load_workbook_file(args.file, max_rows=args.max_rows)
    except SheetInsightsError as e:
        logger.error(e.message)
        return 1

    sheets: List[SheetData] = workbook.sheets
    if args.sheet:
        selected = workbook.get_sheet(args.sheet)
        if selected is None:
            logger.error(f"Sheet not found: {args.sheet}")
            logger.error(f"Available sheets: {', '.join(s.name for s in workbook.sheets)}")
            return 1
        sheets = [selected]

    payloads = []
    for sheet in sheets:
        summary = analyze(sheet.preview, sheet.name)

        if args.json:
            payloads.append(sheet_payload(sheet, summary, args.search, args.chart))
            continue

        print_summary(sheet, summary)
        rows = sheet.preview[1:]
        if args.search is not None:
            matches = search(rows, args.search)
            print(f"\nSearch '{args.search}': {len(matches)} row(s)")
            for row in matches:
                print(f"  {row_text(row)}")
        if args.chart:
            points = prepare_chart_data(summary.columns, rows)
            print(f"\nChart data ({len(points)} point(s)):")
            for point in points:
                print(f"  {point.to_dict()}")
        print()

    if args.json:
        output = {
            "fileName": workbook.file_name,
            "fileSize": workbook.file_size,
            "fileType": workbook.file_type,
            "uploadedAt": workbook.uploaded_at,
            "sheets": payloads,
        }
        print(json.dumps(output, indent=settings.json_indent, default=str))

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Analyze a spreadsheet and generate insights"
    )

    parser.add_argument(
        "file",
        type=str,
        help="Path to .xlsx, .xlsm or .csv file"
    )
    parser.add_argument(
        "--sheet",
        type=str,
        help="Only analyze this sheet (default: all sheets)"
    )
    parser.add_argument(
        "--search",
        type=str,
        help="Print data rows matching any of the search terms"
    )
    parser.add_argument(
        "--chart",
        action="store_true",
        help="Print the chart series for each sheet"
    )
    parser.add_argument(
        "--max-rows",
        type=non_negative_int,
        default=None,
        dest="max_rows",
        help="Cap preview rows per sheet, header included (default: from settings, 0 = no cap)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )

    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    return analyze_file(args)


if __name__ == "__main__":
    sys.exit(main())
