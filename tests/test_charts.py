"""
Unit tests for chart data preparation.
"""

import pytest

from sheet_insights.charts import (
    MAX_CATEGORIES,
    MAX_TIME_SERIES_POINTS,
    CategoryPoint,
    TimeSeriesPoint,
    prepare_chart_data,
)
from sheet_insights.columns_analyzer import profile_columns
from sheet_insights.models import ColumnProfile, ColumnType


def chart_for(headers, rows):
    return prepare_chart_data(profile_columns(headers, rows), rows)


class TestSelection:
    """Test which column pair is charted."""

    def test_no_numeric_columns(self):
        """Without numeric columns there is nothing to chart."""
        rows = [["ER", "2024-01-01"], ["ICU", "2024-01-02"]]
        assert chart_for(["Dept", "Date"], rows) == []

    def test_numeric_without_partner(self):
        """Numeric columns alone do not produce an index series."""
        rows = [[f"note {i}", i] for i in range(10)]
        assert chart_for(["Notes", "Value"], rows) == []

    def test_date_preferred_over_category(self):
        """A date column wins over a categorical one."""
        rows = [[["ER", "ICU"][i % 2], f"2024-02-{i + 1:02d}", i + 1] for i in range(10)]
        points = chart_for(["Dept", "Day", "Visits"], rows)
        assert all(isinstance(p, TimeSeriesPoint) for p in points)

    def test_first_numeric_column_used(self):
        """The first numeric column supplies the values."""
        rows = [[f"2024-03-{i + 1:02d}", i + 1, 100] for i in range(5)]
        points = chart_for(["Day", "Visits", "Beds"], rows)
        assert [p.value for p in points] == [1.0, 2.0, 3.0, 4.0, 5.0]


class TestTimeSeries:
    """Test time series points."""

    def test_points_use_raw_dates(self):
        """Dates are passed through untouched."""
        rows = [["2024-01-01", "5"], ["2024-01-02", 7]]
        points = chart_for(["Date", "Visits"], rows)
        assert points == [
            TimeSeriesPoint(date="2024-01-01", value=5.0),
            TimeSeriesPoint(date="2024-01-02", value=7.0),
        ]
        assert points[0].to_dict() == {"date": "2024-01-01", "value": 5.0}

    def test_zero_and_non_numeric_dropped(self):
        """Zero, non-numeric and blank values are skipped."""
        rows = [
            ["2024-01-01", 0],
            ["2024-01-02", "5"],
            ["2024-01-03", "x"],
            ["2024-01-04", 7],
            ["2024-01-05", 3],
        ]
        points = chart_for(["Date", "Visits"], rows)
        assert [p.date for p in points] == ["2024-01-02", "2024-01-04", "2024-01-05"]

    def test_capped(self):
        """At most 50 points, the first ones in row order."""
        rows = [[f"2024-{m:02d}-{d:02d}", m * 100 + d] for m in range(1, 4) for d in range(1, 29)]
        points = chart_for(["Date", "Visits"], rows)
        assert len(points) == MAX_TIME_SERIES_POINTS
        assert points[0].date == "2024-01-01"
        assert points[-1].date == rows[49][0]


class TestCategories:
    """Test categorical aggregates."""

    def test_mean_and_count_per_category(self):
        """Groups keep first-seen order."""
        depts = ["ER", "ICU", "Ward"]
        rows = [[depts[i % 3], i % 3 + 1] for i in range(30)]
        points = chart_for(["Dept", "LOS"], rows)
        assert points == [
            CategoryPoint(category="ER", value=1.0, count=10),
            CategoryPoint(category="ICU", value=2.0, count=10),
            CategoryPoint(category="Ward", value=3.0, count=10),
        ]

    def test_mean_ignores_non_numeric(self):
        """Non-numeric values do not count toward the mean but do toward the size."""
        rows = [["A", 2], ["A", 4], ["A", "n/a"], ["B", 1], ["B", 1], ["A", 6], ["B", 1], ["B", 1], ["A", 4], ["B", 1]]
        points = chart_for(["Group", "Score"], rows)
        assert points[0] == CategoryPoint(category="A", value=pytest.approx(4.0), count=5)
        assert points[1] == CategoryPoint(category="B", value=1.0, count=5)

    def test_blank_categories_grouped(self):
        """Rows without a category form an empty-string group."""
        rows = [["A", 1], ["A", 2], ["", 3], ["B", 4], ["B", 5], ["A", 6], ["B", 7], ["A", 8]]
        points = chart_for(["Group", "Score"], rows)
        assert [p.category for p in points] == ["A", "", "B"]
        assert points[1] == CategoryPoint(category="", value=3.0, count=1)
        assert sum(p.count for p in points) == len(rows)

    def test_capped(self):
        """At most 20 categories whatever the input size."""
        profiles = [
            ColumnProfile(name="Code", type=ColumnType.CATEGORICAL, sample_values=[], unique_count=30, null_count=0),
            ColumnProfile(name="Cost", type=ColumnType.NUMERIC, sample_values=[], unique_count=30, null_count=0),
        ]
        rows = [[f"C{i}", i] for i in range(30)]
        points = prepare_chart_data(profiles, rows)
        assert len(points) == MAX_CATEGORIES
        assert points[0].category == "C0"
        assert points[-1].category == "C19"

    def test_to_dict(self):
        """Category points serialize all three fields."""
        assert CategoryPoint(category="ER", value=2.5, count=4).to_dict() == {
            "category": "ER",
            "value": 2.5,
            "count": 4,
        }
