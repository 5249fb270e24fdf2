"""Shared fixtures."""

from datetime import datetime

import pytest
from openpyxl import Workbook

from sheet_insights.core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings for every test so env overrides take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def visits_xlsx(tmp_path):
    """Workbook with an ED visits sheet and an empty sheet."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Visits"
    ws.append(["Patient", "Arrival", "Wait Minutes", "Dept"])
    ws.append(["P001", datetime(2024, 1, 5), 15, "ER"])
    ws.append(["P002", datetime(2024, 1, 5, 8, 30), 20, "ER"])
    ws.append(["P003", datetime(2024, 1, 6), None, "ICU"])
    ws.append(["P004", datetime(2024, 1, 7, 14, 0), 40, "ER"])
    ws.append(["P005", datetime(2024, 1, 7), 25, "ER"])
    ws.append(["P006", datetime(2024, 1, 8), 30, "ICU"])
    wb.create_sheet("Notes")

    path = tmp_path / "visits.xlsx"
    wb.save(path)
    return path
