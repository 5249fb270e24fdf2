"""
Healthcare metric detection.

Metrics are inferred from column names and types rather than a fixed
schema: any patient/admission/discharge column, any wait/time/duration
column, or any date or time column is enough to treat the sheet as
clinical operations data.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Any, List, Optional, Sequence

import numpy as np

from sheet_insights.core.cells import cells_for_column
from sheet_insights.models import ColumnProfile, ColumnType, HealthcareMetrics
from sheet_insights.statistics import numeric_values

logger = logging.getLogger(__name__)

PATIENT_HINTS = ("patient", "admission", "discharge")
WAIT_TIME_HINTS = ("wait", "time", "duration")
WAIT_COLUMN_HINT = "wait"
TIME_COLUMN_HINT = "time"

RE_HOUR = re.compile(r"(\d{1,2}):(\d{2})")


def _name_has(profile: ColumnProfile, hints: Sequence[str]) -> bool:
    name = profile.name.lower()
    return any(h in name for h in hints)


def has_healthcare_signals(profiles: Sequence[ColumnProfile]) -> bool:
    """True when any column name or type suggests clinical data."""
    has_patient_data = any(_name_has(p, PATIENT_HINTS) for p in profiles)
    has_wait_time = any(_name_has(p, WAIT_TIME_HINTS) for p in profiles)
    has_timestamp = any(p.type in (ColumnType.DATE, ColumnType.TIME) for p in profiles)
    return has_patient_data or has_wait_time or has_timestamp


def _average_wait_time(profiles: Sequence[ColumnProfile], rows: Sequence[Sequence[Any]]) -> Optional[float]:
    for index, profile in enumerate(profiles):
        if profile.type == ColumnType.NUMERIC and _name_has(profile, (WAIT_COLUMN_HINT,)):
            values = numeric_values(cells_for_column(rows, index))
            if not values:
                return None
            return float(np.mean(values))
    return None


def _peak_hours(profiles: Sequence[ColumnProfile], rows: Sequence[Sequence[Any]]) -> Optional[List[str]]:
    for index, profile in enumerate(profiles):
        if profile.type == ColumnType.TIME or _name_has(profile, (TIME_COLUMN_HINT,)):
            break
    else:
        return None

    hours: Counter = Counter()
    for cell in cells_for_column(rows, index):
        match = RE_HOUR.search(cell.text)
        if match:
            hours[int(match.group(1))] += 1

    if not hours:
        return None

    # Ties go to the hour seen first in row order (Counter.most_common), not the smallest hour
    hour, count = hours.most_common(1)[0]
    logger.debug(f"Peak hour from '{profile.name}': {hour} ({count} rows)")
    return [f"{hour}:00 - {hour + 1}:00"]


def extract_healthcare_metrics(
    profiles: Sequence[ColumnProfile],
    rows: Sequence[Sequence[Any]],
) -> Optional[HealthcareMetrics]:
    """
    Derive healthcare metrics, or None when no column looks clinical.

    Returns:
        HealthcareMetrics with patient_volume always set, plus
        average_wait_time and peak_hours when they can be computed.
    """
    if not has_healthcare_signals(profiles):
        return None

    return HealthcareMetrics(
        patient_volume=len(rows),
        average_wait_time=_average_wait_time(profiles, rows),
        peak_hours=_peak_hours(profiles, rows),
    )
