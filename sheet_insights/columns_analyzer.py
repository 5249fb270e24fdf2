from __future__ import annotations

import logging
import re
from typing import Any, List, Sequence

from sheet_insights.core.cells import Cell, cells_for_column
from sheet_insights.models import ColumnProfile, ColumnType

logger = logging.getLogger(__name__)

# =========================
# Config / constants
# =========================

# NOTE:
# - Tests run in a fixed order (numeric, date, time, boolean, categorical) and
#   each one is a ratio over the non-empty values, so a few stray cells do not
#   flip a column's type.
# - These thresholds decide observable output; keep them exact.

TYPE_MATCH_RATIO = 0.8
CATEGORICAL_MAX_UNIQUE = 20
CATEGORICAL_MAX_UNIQUE_RATIO = 0.5
SAMPLE_SIZE = 5

BOOL_VALUES = {"true", "false", "yes", "no", "1", "0"}

# D-M-Y or Y-M-D with '-' or '/' separators; the second branch is unanchored so
# "12/01/2024 08:30" still counts as a date.
RE_DATE = re.compile(r"^\d{1,4}[-/]\d{1,2}[-/]\d{1,4}|\d{1,2}[-/]\d{1,2}[-/]\d{2,4}")
RE_TIME = re.compile(r"^\d{1,2}:\d{2}(:\d{2})?(\s?[AP]M)?$", re.IGNORECASE)


# =========================
# Helpers
# =========================

def _ratio(matches: int, total: int) -> float:
    return matches / total


def _non_empty(cells: Sequence[Cell]) -> List[Cell]:
    return [c for c in cells if not c.is_empty]


def _header_name(header: Any, index: int) -> str:
    cell = Cell.of(header)
    if cell.is_empty:
        return f"Column {index + 1}"
    return cell.text


# =========================
# Type detection
# =========================

def detect_column_type(cells: Sequence[Cell]) -> ColumnType:
    """
    Classify a column from its cells.

    Empty cells are ignored; a column with no values at all is TEXT.
    """
    values = _non_empty(cells)
    n = len(values)
    if n == 0:
        return ColumnType.TEXT

    numeric_count = sum(1 for c in values if c.as_number() is not None)
    if _ratio(numeric_count, n) >= TYPE_MATCH_RATIO:
        return ColumnType.NUMERIC

    texts = [c.text for c in values]

    date_count = sum(1 for s in texts if RE_DATE.search(s))
    if _ratio(date_count, n) >= TYPE_MATCH_RATIO:
        return ColumnType.DATE

    time_count = sum(1 for s in texts if RE_TIME.match(s))
    if _ratio(time_count, n) >= TYPE_MATCH_RATIO:
        return ColumnType.TIME

    bool_count = sum(1 for s in texts if s.lower() in BOOL_VALUES)
    if _ratio(bool_count, n) >= TYPE_MATCH_RATIO:
        return ColumnType.BOOLEAN

    unique_count = len(set(values))
    if unique_count < CATEGORICAL_MAX_UNIQUE and unique_count < n * CATEGORICAL_MAX_UNIQUE_RATIO:
        return ColumnType.CATEGORICAL

    return ColumnType.TEXT


# =========================
# Profiling
# =========================

def profile_column(name: str, cells: Sequence[Cell]) -> ColumnProfile:
    """Build the profile of a single column from its cells."""
    values = _non_empty(cells)
    detected = detect_column_type(values)

    logger.debug(f"Column '{name}': {detected.value} ({len(values)}/{len(cells)} non-empty)")

    return ColumnProfile(
        name=name,
        type=detected,
        sample_values=[c.value for c in values[:SAMPLE_SIZE]],
        unique_count=len(set(values)),
        null_count=len(cells) - len(values),
    )


def profile_columns(headers: Sequence[Any], rows: Sequence[Sequence[Any]]) -> List[ColumnProfile]:
    """One profile per header position, whatever the row lengths."""
    return [
        profile_column(_header_name(header, i), cells_for_column(rows, i))
        for i, header in enumerate(headers)
    ]
