"""
Unit tests for column profiling and type detection.
"""

import pytest

from sheet_insights.columns_analyzer import detect_column_type, profile_columns
from sheet_insights.core.cells import Cell, CellKind, cells_for_column
from sheet_insights.models import ColumnType


def cells(values):
    return [Cell.of(v) for v in values]


class TestCells:
    """Test the typed cell wrapper."""

    def test_empty_values(self):
        """None, empty string and NaN are empty cells."""
        assert Cell.of(None).is_empty
        assert Cell.of("").is_empty
        assert Cell.of(float("nan")).is_empty
        assert not Cell.of(" ").is_empty

    def test_kinds(self):
        """Booleans are not numbers."""
        assert Cell.of(True).kind == CellKind.BOOLEAN
        assert Cell.of(3).kind == CellKind.NUMBER
        assert Cell.of("3").kind == CellKind.STRING

    def test_as_number_coerces_strings(self):
        """Numeric strings coerce, other strings do not."""
        assert Cell.of(" 12 ").as_number() == 12.0
        assert Cell.of("1e3").as_number() == 1000.0
        assert Cell.of("-0.5").as_number() == -0.5
        assert Cell.of("12 mins").as_number() is None
        assert Cell.of("1,000").as_number() is None
        assert Cell.of(True).as_number() is None
        assert Cell.of(None).as_number() is None

    def test_text_rendering(self):
        """Integral floats render without a decimal part."""
        assert Cell.of(3.0).text == "3"
        assert Cell.of(2.5).text == "2.5"
        assert Cell.of(False).text == "false"
        assert Cell.of(None).text == ""

    def test_cells_for_short_rows(self):
        """Missing trailing cells are empty."""
        column = cells_for_column([[1, 2], [3]], 1)
        assert column[0] == Cell.of(2)
        assert column[1].is_empty


class TestTypeDetection:
    """Test detect_column_type precedence and thresholds."""

    def test_numeric_strings(self):
        """Numeric strings are classified numeric via coercion."""
        assert detect_column_type(cells(["1", "2", "3"])) == ColumnType.NUMERIC

    def test_numeric_tolerates_noise(self):
        """Eight numbers out of ten is enough."""
        values = ["1", "2", "3", "4", "5", "6", "7", "8", "n/a", "-"]
        assert detect_column_type(cells(values)) == ColumnType.NUMERIC

    def test_zero_one_is_numeric_before_boolean(self):
        """Numeric is tested before boolean."""
        assert detect_column_type(cells(["1", "0", "1", "0"])) == ColumnType.NUMERIC

    def test_dates(self):
        """Both Y-M-D and D/M/Y forms count as dates."""
        values = ["2024-01-05", "05/01/2024", "2024/1/5", "12-3-24"]
        assert detect_column_type(cells(values)) == ColumnType.DATE

    def test_datetime_strings_are_dates(self):
        """A date followed by a time still matches the date pattern."""
        values = ["2024-01-05 08:30:00", "2024-01-06 09:15:00"]
        assert detect_column_type(cells(values)) == ColumnType.DATE

    def test_times(self):
        """H:MM, H:MM:SS and AM/PM suffixes count as times."""
        values = ["08:30", "14:45:10", "9:05 PM", "7:00am"]
        assert detect_column_type(cells(values)) == ColumnType.TIME

    def test_boolean_strings(self):
        """yes/no/true/false in any case are booleans."""
        values = ["yes", "No", "TRUE", "false", "Yes"]
        assert detect_column_type(cells(values)) == ColumnType.BOOLEAN

    def test_boolean_values(self):
        """Real booleans classify as boolean."""
        assert detect_column_type(cells([True, False, True])) == ColumnType.BOOLEAN

    def test_categorical(self):
        """Few repeated values are categorical."""
        values = ["ER", "ICU", "OR", "Peds", "Lab"] * 4
        assert detect_column_type(cells(values)) == ColumnType.CATEGORICAL

    def test_categorical_needs_repetition(self):
        """15 distinct values out of 20 is not under the 50% unique ratio."""
        values = [f"unit {i}" for i in range(15)] + ["unit 0"] * 5
        assert detect_column_type(cells(values)) == ColumnType.TEXT

    def test_categorical_unique_limit(self):
        """20 distinct values is too many for categorical."""
        values = [f"ward {i}" for i in range(20)] * 3
        assert detect_column_type(cells(values)) == ColumnType.TEXT

    def test_free_text(self):
        """All-unique text is text."""
        values = [f"Patient reported symptom number {i}" for i in range(10)]
        assert detect_column_type(cells(values)) == ColumnType.TEXT

    def test_empty_column(self):
        """A column with no values is text."""
        assert detect_column_type(cells([None, "", None])) == ColumnType.TEXT
        assert detect_column_type([]) == ColumnType.TEXT


class TestProfileColumns:
    """Test profile_columns over whole grids."""

    def test_one_profile_per_header(self):
        """Ragged rows still give one profile per header."""
        profiles = profile_columns(["a", "b", "c"], [[1], [2, "x"]])
        assert [p.name for p in profiles] == ["a", "b", "c"]
        assert profiles[0].null_count == 0
        assert profiles[1].null_count == 1
        assert profiles[2].null_count == 2
        assert profiles[2].type == ColumnType.TEXT

    def test_null_count_invariant(self):
        """null_count plus non-empty values equals the row count."""
        rows = [["x", None], ["", 2], ["y", ""], [None, 4]]
        profiles = profile_columns(["first", "second"], rows)
        for index, profile in enumerate(profiles):
            non_empty = [c for c in cells_for_column(rows, index) if not c.is_empty]
            assert profile.null_count + len(non_empty) == len(rows)

    def test_sample_values_not_deduplicated(self):
        """Samples are the first five non-empty values in row order."""
        rows = [["a"], ["a"], [""], ["b"], ["a"], ["c"], ["d"]]
        profile = profile_columns(["col"], rows)[0]
        assert profile.sample_values == ["a", "a", "b", "a", "c"]

    def test_unique_count_by_value(self):
        """1 and 1.0 are the same value; the string '1' is not."""
        profile = profile_columns(["col"], [[1], [1.0], ["1"], [None]])[0]
        assert profile.unique_count == 2

    def test_blank_header_gets_position_name(self):
        """Blank headers are named after their position."""
        profiles = profile_columns(["id", "", None], [[1, 2, 3]])
        assert [p.name for p in profiles] == ["id", "Column 2", "Column 3"]

    def test_to_dict(self):
        """Profiles serialize with camelCase keys."""
        profile = profile_columns(["score"], [["1"], ["2"]])[0]
        assert profile.to_dict() == {
            "name": "score",
            "type": "numeric",
            "sampleValues": ["1", "2"],
            "uniqueCount": 2,
            "nullCount": 0,
        }

    @pytest.mark.parametrize("header", ["Visits", 2024])
    def test_header_rendered_as_text(self, header):
        """Non-string headers are rendered as text."""
        assert profile_columns([header], [])[0].name == str(header)
