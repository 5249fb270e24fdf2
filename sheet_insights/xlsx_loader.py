"""
Workbook Loader - decode an uploaded spreadsheet into header-first grids.

Every sheet becomes a SheetData whose preview is the grid handed to
analyze(): row 0 holds the headers, empty cells are "" and dates/times are
rendered as ISO strings.

Usage:
    workbook = load_workbook_file("admissions.xlsx")
    for sheet in workbook.sheets:
        print(sheet.name, sheet.row_count, sheet.col_count)
"""

import csv
import logging
import zipfile
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pandas as pd
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from sheet_insights.core.config import get_settings
from sheet_insights.exceptions import (
    FileTooLargeError,
    UnsupportedFileTypeError,
    WorkbookDecodeError,
    WorkbookNotFoundError,
)

logger = logging.getLogger(__name__)

EXCEL_EXTENSIONS = {".xlsx", ".xlsm"}
CSV_EXTENSIONS = {".csv"}


@dataclass
class SheetData:
    """One decoded sheet."""
    name: str
    row_count: int
    col_count: int
    preview: List[List[Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "rowCount": self.row_count,
            "colCount": self.col_count,
            "preview": self.preview,
        }


@dataclass
class WorkbookData:
    """A decoded upload with all of its sheets."""
    file_name: str
    file_size: str
    file_type: str
    sheets: List[SheetData] = field(default_factory=list)
    uploaded_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def get_sheet(self, name: str) -> Optional[SheetData]:
        """Get a sheet by name."""
        for sheet in self.sheets:
            if sheet.name == name:
                return sheet
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fileName": self.file_name,
            "fileSize": self.file_size,
            "fileType": self.file_type,
            "sheets": [s.to_dict() for s in self.sheets],
            "uploadedAt": self.uploaded_at,
        }


def format_file_size(size_bytes: int) -> str:
    """Human-readable size: bytes, KB or MB with two decimals."""
    if size_bytes < 1024:
        return f"{size_bytes} bytes"
    if size_bytes < 1048576:
        return f"{size_bytes / 1024:.2f} KB"
    return f"{size_bytes / 1048576:.2f} MB"


def convert_cell_value(value: Any) -> Any:
    """Map a decoded cell to a grid scalar (string, number, boolean or "")."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.date().isoformat()
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, time):
        return value.strftime("%H:%M:%S")
    if isinstance(value, (str, bool, int, float)):
        return value
    return str(value)


def _is_blank_row(row: List[Any]) -> bool:
    return all(v == "" for v in row)


def _strip_trailing_blank_rows(grid: List[List[Any]]) -> List[List[Any]]:
    end = len(grid)
    while end > 0 and _is_blank_row(grid[end - 1]):
        end -= 1
    return grid[:end]


def _cap(grid: List[List[Any]], max_rows: Optional[int]) -> List[List[Any]]:
    if max_rows:
        return grid[:max_rows]
    return grid


def _read_worksheet(ws: Worksheet, max_rows: Optional[int]) -> SheetData:
    row_count = ws.max_row - ws.min_row + 1
    col_count = ws.max_column - ws.min_column + 1

    grid = [
        [convert_cell_value(v) for v in row]
        for row in ws.iter_rows(
            min_row=ws.min_row,
            max_row=ws.max_row,
            min_col=ws.min_column,
            max_col=ws.max_column,
            values_only=True,
        )
    ]
    grid = _strip_trailing_blank_rows(grid)

    return SheetData(
        name=ws.title,
        row_count=row_count,
        col_count=col_count,
        preview=_cap(grid, max_rows),
    )


def _load_excel(path: Path, max_rows: Optional[int]) -> List[SheetData]:
    try:
        wb = load_workbook(path, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, ValueError, OSError) as e:
        raise WorkbookDecodeError(str(path), str(e)) from e

    try:
        sheets = []
        for ws in wb.worksheets:
            sheet = _read_worksheet(ws, max_rows)
            logger.info(f"Loaded sheet '{sheet.name}': {sheet.row_count} rows x {sheet.col_count} columns")
            sheets.append(sheet)
        return sheets
    finally:
        wb.close()


def _csv_width(path: Path) -> int:
    """Widest row in the file; the first line can be narrower than later ones."""
    with open(path, newline="", encoding="utf-8") as f:
        return max((len(row) for row in csv.reader(f)), default=0)


def _load_csv(path: Path, max_rows: Optional[int]) -> List[SheetData]:
    try:
        width = _csv_width(path)
        if width == 0:
            logger.warning(f"CSV file is empty: {path}")
            return [SheetData(name=path.stem, row_count=0, col_count=0)]
        df = pd.read_csv(
            path,
            header=None,
            names=list(range(width)),
            dtype=str,
            keep_default_na=False,
        )
    except (csv.Error, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise WorkbookDecodeError(str(path), str(e)) from e

    # short rows are padded with NaN
    df = df.fillna("")
    grid = _strip_trailing_blank_rows(df.values.tolist())

    sheet = SheetData(
        name=path.stem,
        row_count=len(df),
        col_count=df.shape[1],
        preview=_cap(grid, max_rows),
    )
    logger.info(f"Loaded CSV '{sheet.name}': {sheet.row_count} rows x {sheet.col_count} columns")
    return [sheet]


def load_workbook_file(
    file_path: Union[str, Path],
    max_rows: Optional[int] = None,
) -> WorkbookData:
    """
    Decode a workbook or CSV file.

    Args:
        file_path: Path to a .xlsx, .xlsm or .csv file
        max_rows: Cap on preview rows, header included. None uses the
            configured preview_max_rows; 0 disables the cap. Negative
            values raise ValueError.

    Raises:
        WorkbookNotFoundError, UnsupportedFileTypeError, FileTooLargeError,
        WorkbookDecodeError
    """
    settings = get_settings()
    path = Path(file_path)

    if not path.is_file():
        raise WorkbookNotFoundError(str(path))

    extension = path.suffix.lower()
    if extension not in EXCEL_EXTENSIONS | CSV_EXTENSIONS:
        raise UnsupportedFileTypeError(str(path), extension)

    size_bytes = path.stat().st_size
    if size_bytes > settings.max_file_size_bytes:
        raise FileTooLargeError(str(path), size_bytes, settings.max_file_size_bytes)

    if max_rows is None:
        max_rows = settings.preview_max_rows
    if max_rows < 0:
        raise ValueError(f"max_rows must be >= 0, got {max_rows}")

    if extension in EXCEL_EXTENSIONS:
        sheets = _load_excel(path, max_rows)
        file_type = "Excel"
    else:
        sheets = _load_csv(path, max_rows)
        file_type = "CSV"

    return WorkbookData(
        file_name=path.name,
        file_size=format_file_size(size_bytes),
        file_type=file_type,
        sheets=sheets,
    )
