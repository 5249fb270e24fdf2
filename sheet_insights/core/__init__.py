"""Core building blocks: typed cells and settings."""

from sheet_insights.core.cells import Cell, CellKind, cells_for_column, row_text
from sheet_insights.core.config import Settings, get_settings

__all__ = [
    "Cell",
    "CellKind",
    "cells_for_column",
    "row_text",
    "Settings",
    "get_settings",
]
