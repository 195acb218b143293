"""
Spreadsheet model.

This module provides the addressing primitives (Address, Range), formula
construction helpers and the workbook/worksheet/cell model that consumes
them.
"""

from sheetsmith.spreadsheet.address import (
    Address,
    ReferenceType,
    resolve_cell_address,
    resolve_cell_coordinate,
    resolve_column,
    resolve_column_address,
)
from sheetsmith.spreadsheet.range import CellDirection, Range
from sheetsmith.spreadsheet.formula import Formula, Reference
from sheetsmith.spreadsheet.cell import Cell, CellType
from sheetsmith.spreadsheet.worksheet import Worksheet
from sheetsmith.spreadsheet.workbook import Shortener, Workbook

__all__ = [
    "Address",
    "ReferenceType",
    "resolve_cell_address",
    "resolve_cell_coordinate",
    "resolve_column",
    "resolve_column_address",
    "CellDirection",
    "Range",
    "Formula",
    "Reference",
    "Cell",
    "CellType",
    "Worksheet",
    "Workbook",
    "Shortener",
]
