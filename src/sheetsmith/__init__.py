"""
sheetsmith - Procedural construction of formatted, multi-sheet spreadsheet workbooks.

This package builds workbooks in memory without a host office application.
Two subsystems carry everything else:

- Addressing: A1 references and zero-based (column, row) coordinates,
  including $ absolute markers, and normalized rectangular ranges
- Styles: every cell format is a composition of five facets (border, fill,
  font, number format, cell alignment), deduplicated by content hash into
  one canonical Style per workbook

Usage:
    >>> from sheetsmith import Workbook, basic_styles
    >>> wb = Workbook("Sheet1")
    >>> wb.ws.value("Total", basic_styles.bold())
    >>> wb.current_worksheet.add_cell_range([1, 2, 3], "A2:C2")
"""

from .exceptions import *
from .spreadsheet import (
    Address,
    Cell,
    CellDirection,
    CellType,
    Formula,
    Range,
    Reference,
    ReferenceType,
    Workbook,
    Worksheet,
)
from .spreadsheet import formula as formulas
from .style import (
    Border,
    CellXf,
    Fill,
    Font,
    NumberFormat,
    Style,
    StyleManager,
    basic_styles,
)

# Version
__version__ = "0.1.0"

__all__ = [
    'Address',
    'Range',
    'ReferenceType',
    'CellDirection',
    'Cell',
    'CellType',
    'Formula',
    'Reference',
    'formulas',
    'Workbook',
    'Worksheet',
    'Border',
    'CellXf',
    'Fill',
    'Font',
    'NumberFormat',
    'Style',
    'StyleManager',
    'basic_styles',
    'SheetsmithError',
    'RangeError',
    'FormatError',
    'StyleError',
    'MissingReferenceError',
    'WorksheetError',
    'UnsupportedDataTypeError',
]
