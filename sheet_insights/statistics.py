"""
Descriptive statistics and outlier detection for numeric columns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

import numpy as np

from sheet_insights.core.cells import Cell, cells_for_column
from sheet_insights.models import ColumnProfile, ColumnType

logger = logging.getLogger(__name__)

OUTLIER_STD_MULTIPLIER = 3.0


@dataclass(frozen=True)
class ColumnStatistics:
    """Descriptive statistics of one numeric column."""
    column: str
    count: int
    mean: float
    median: float
    max: float
    min: float
    std_dev: float
    outliers: List[float] = field(default_factory=list)

    @property
    def has_outliers(self) -> bool:
        return len(self.outliers) > 0


def numeric_values(cells: Sequence[Cell]) -> List[float]:
    """Coerced numbers of a column; anything non-numeric is dropped."""
    values = []
    for cell in cells:
        number = cell.as_number()
        if number is not None:
            values.append(number)
    return values


def detect_outliers(values: Sequence[float], mean: float, std_dev: float) -> List[float]:
    """Values further than three population standard deviations from the mean."""
    limit = OUTLIER_STD_MULTIPLIER * std_dev
    return [v for v in values if abs(v - mean) > limit]


def compute_column_statistics(profile: ColumnProfile, cells: Sequence[Cell]) -> Optional[ColumnStatistics]:
    """
    Statistics for a column, or None when it holds no valid numbers.

    The standard deviation is the population one (ddof=0).
    """
    values = numeric_values(cells)
    if not values:
        logger.debug(f"Column '{profile.name}' has no numeric values, skipping")
        return None

    arr = np.asarray(values, dtype=float)
    mean = float(arr.mean())
    std_dev = float(arr.std())

    return ColumnStatistics(
        column=profile.name,
        count=len(values),
        mean=mean,
        median=float(np.median(arr)),
        max=float(arr.max()),
        min=float(arr.min()),
        std_dev=std_dev,
        outliers=detect_outliers(values, mean, std_dev),
    )


def analyze_numeric_columns(
    profiles: Sequence[ColumnProfile],
    rows: Sequence[Sequence[Any]],
) -> List[ColumnStatistics]:
    """Statistics for every numeric column, in column order."""
    results = []
    for index, profile in enumerate(profiles):
        if profile.type != ColumnType.NUMERIC:
            continue
        stats = compute_column_statistics(profile, cells_for_column(rows, index))
        if stats is not None:
            results.append(stats)
    return results
