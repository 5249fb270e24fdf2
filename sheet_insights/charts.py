"""Chart-ready series built from the first usable column pair."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np

from sheet_insights.core.cells import Cell, cells_for_column
from sheet_insights.models import ColumnProfile, ColumnType

logger = logging.getLogger(__name__)

MAX_TIME_SERIES_POINTS = 50
MAX_CATEGORIES = 20


@dataclass(frozen=True)
class TimeSeriesPoint:
    date: Any
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "value": self.value}


@dataclass(frozen=True)
class CategoryPoint:
    category: str
    value: Optional[float]
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"category": self.category, "value": self.value, "count": self.count}


ChartPoint = Union[TimeSeriesPoint, CategoryPoint]


def _first_index(profiles: Sequence[ColumnProfile], column_type: ColumnType) -> Optional[int]:
    for index, profile in enumerate(profiles):
        if profile.type == column_type:
            return index
    return None


def build_time_series(date_cells: Sequence[Cell], value_cells: Sequence[Cell]) -> List[TimeSeriesPoint]:
    """One point per row; zero or non-numeric values are dropped."""
    points = []
    for date_cell, value_cell in zip(date_cells, value_cells):
        value = value_cell.as_number()
        if not value:
            continue
        points.append(TimeSeriesPoint(date=date_cell.value, value=value))
        if len(points) >= MAX_TIME_SERIES_POINTS:
            break
    return points


def build_category_series(category_cells: Sequence[Cell], value_cells: Sequence[Cell]) -> List[CategoryPoint]:
    """Mean value and row count per category, in first-seen order.

    Blank category cells form their own "" group, so counts cover every row.
    """
    groups: Dict[str, List[Cell]] = {}
    for category_cell, value_cell in zip(category_cells, value_cells):
        groups.setdefault(category_cell.text, []).append(value_cell)

    points = []
    for category, cells in list(groups.items())[:MAX_CATEGORIES]:
        values = [v for v in (c.as_number() for c in cells) if v is not None]
        mean = float(np.mean(values)) if values else None
        points.append(CategoryPoint(category=category, value=mean, count=len(cells)))
    return points


def prepare_chart_data(
    profiles: Sequence[ColumnProfile],
    rows: Sequence[Sequence[Any]],
) -> List[ChartPoint]:
    """
    Pick a chart for the sheet.

    Prefers a time series (first date column against first numeric column),
    then a categorical aggregate (first categorical column against first
    numeric column). Sheets without either pair yield an empty series.
    """
    numeric_index = _first_index(profiles, ColumnType.NUMERIC)
    if numeric_index is None:
        return []

    value_cells = cells_for_column(rows, numeric_index)

    date_index = _first_index(profiles, ColumnType.DATE)
    if date_index is not None:
        logger.debug(
            f"Time series: '{profiles[date_index].name}' vs '{profiles[numeric_index].name}'"
        )
        return build_time_series(cells_for_column(rows, date_index), value_cells)

    category_index = _first_index(profiles, ColumnType.CATEGORICAL)
    if category_index is not None:
        logger.debug(
            f"Category series: '{profiles[category_index].name}' vs '{profiles[numeric_index].name}'"
        )
        return build_category_series(cells_for_column(rows, category_index), value_cells)

    return []
