"""
Data models for column profiles and analysis summaries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from sheet_insights.insights.models import Insight


class ColumnType(str, Enum):
    """Semantic type inferred for a column."""
    NUMERIC = "numeric"
    DATE = "date"
    TIME = "time"
    BOOLEAN = "boolean"
    CATEGORICAL = "categorical"
    TEXT = "text"


@dataclass(frozen=True)
class ColumnProfile:
    """
    Inferred type and basic statistics for one column.

    Attributes:
        name: Header label (or "Column N" when the header is blank)
        type: Detected semantic type
        sample_values: First five non-empty raw values, in row order
        unique_count: Number of distinct non-empty values
        null_count: Number of empty cells, counting missing trailing cells
    """
    name: str
    type: ColumnType
    sample_values: List[Any]
    unique_count: int
    null_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type.value,
            "sampleValues": list(self.sample_values),
            "uniqueCount": self.unique_count,
            "nullCount": self.null_count,
        }


@dataclass(frozen=True)
class HealthcareMetrics:
    """
    Summary figures inferred from healthcare-looking columns.

    department_utilization and critical_alerts are part of the shape but no
    heuristic fills them; None means "not computed".
    """
    patient_volume: Optional[int] = None
    average_wait_time: Optional[float] = None
    peak_hours: Optional[List[str]] = None
    department_utilization: Optional[float] = None
    critical_alerts: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Only the computed fields are emitted."""
        data = {
            "patientVolume": self.patient_volume,
            "averageWaitTime": self.average_wait_time,
            "peakHours": list(self.peak_hours) if self.peak_hours is not None else None,
            "departmentUtilization": self.department_utilization,
            "criticalAlerts": self.critical_alerts,
        }
        return {k: v for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class DataSummary:
    """Result of analyzing one sheet."""
    total_rows: int
    total_columns: int
    columns: List[ColumnProfile] = field(default_factory=list)
    insights: List["Insight"] = field(default_factory=list)
    healthcare_metrics: Optional[HealthcareMetrics] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "totalRows": self.total_rows,
            "totalColumns": self.total_columns,
            "columns": [c.to_dict() for c in self.columns],
            "insights": [i.to_dict() for i in self.insights],
        }
        if self.healthcare_metrics is not None:
            data["healthcareMetrics"] = self.healthcare_metrics.to_dict()
        return data
