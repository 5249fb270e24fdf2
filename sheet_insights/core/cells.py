"""
Typed cell values.

Spreadsheet grids mix strings, numbers, booleans and blanks in the same
column. Every raw value is wrapped once in a Cell so the rest of the
package works with an explicit kind instead of re-guessing types.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, List, Optional, Sequence

RE_NUMBER = re.compile(r"^[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$")


class CellKind(str, Enum):
    """Kind of a single grid value."""
    EMPTY = "empty"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class Cell:
    """A grid value tagged with its kind. Equality is by (kind, value)."""
    kind: CellKind
    value: Any = None

    @classmethod
    def of(cls, raw: Any) -> "Cell":
        """Wrap a raw decoder value."""
        if raw is None:
            return EMPTY_CELL
        if isinstance(raw, bool):
            return cls(CellKind.BOOLEAN, raw)
        if isinstance(raw, Real):
            if isinstance(raw, float) and math.isnan(raw):
                return EMPTY_CELL
            return cls(CellKind.NUMBER, raw)
        if isinstance(raw, str):
            if raw == "":
                return EMPTY_CELL
            return cls(CellKind.STRING, raw)
        return cls(CellKind.STRING, str(raw))

    @property
    def is_empty(self) -> bool:
        return self.kind == CellKind.EMPTY

    @property
    def text(self) -> str:
        """String form used for pattern tests, search and grouping."""
        if self.kind == CellKind.EMPTY:
            return ""
        if self.kind == CellKind.BOOLEAN:
            return "true" if self.value else "false"
        if self.kind == CellKind.NUMBER:
            return format_number(self.value)
        return self.value

    def as_number(self) -> Optional[float]:
        """Coerce to a finite float, or None when the cell is not numeric."""
        if self.kind == CellKind.NUMBER:
            number = float(self.value)
        elif self.kind == CellKind.STRING:
            s = self.value.strip()
            if not RE_NUMBER.match(s):
                return None
            number = float(s)
        else:
            return None
        if not math.isfinite(number):
            return None
        return number


EMPTY_CELL = Cell(CellKind.EMPTY)


def format_number(value: Real) -> str:
    """Render a number without a trailing '.0' for integral values."""
    if isinstance(value, int):
        return str(value)
    f = float(value)
    if math.isfinite(f) and f.is_integer():
        return str(int(f))
    return repr(f)


def cells_for_column(rows: Sequence[Sequence[Any]], index: int) -> List[Cell]:
    """Cells of one column; rows shorter than the index yield empty cells."""
    return [Cell.of(row[index]) if index < len(row) else EMPTY_CELL for row in rows]


def row_text(row: Sequence[Any]) -> str:
    """Cells joined with single spaces, blanks rendered as empty strings."""
    return " ".join(Cell.of(value).text for value in row)
