"""
Data models for generated insights.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class InsightType(str, Enum):
    """Kinds of findings. TREND and RECOMMENDATION are reserved."""
    TREND = "trend"
    ANOMALY = "anomaly"
    SUMMARY = "summary"
    RECOMMENDATION = "recommendation"
    ALERT = "alert"


class Severity(str, Enum):
    """How urgently an insight should be surfaced."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Insight:
    """
    A single generated finding about a dataset.

    Attributes:
        type: Kind of finding
        title: Short heading
        description: Human-readable explanation
        severity: Optional urgency
        value: Optional headline number or label
        metric: Optional name of the column the finding is about
    """
    type: InsightType
    title: str
    description: str
    severity: Optional[Severity] = None
    value: Optional[Union[int, float, str]] = None
    metric: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: Dict[str, Any] = {
            "type": self.type.value,
            "title": self.title,
            "description": self.description,
        }
        if self.severity is not None:
            data["severity"] = self.severity.value
        if self.value is not None:
            data["value"] = self.value
        if self.metric is not None:
            data["metric"] = self.metric
        return data
