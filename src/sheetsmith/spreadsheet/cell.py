"""
Cell model.

A Cell holds one value at one address plus an optional canonical Style.
Values are normalized on assignment so that numpy and pandas scalars can be
written directly:
- numpy scalars become the equivalent Python scalars
- pandas Timestamp / Timedelta become datetime / timedelta
- None, NaN, NaT and pandas.NA become an empty cell
"""

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Tuple

import numpy as np
import pandas as pd

from sheetsmith.exceptions import UnsupportedDataTypeError
from sheetsmith.spreadsheet.address import Address
from sheetsmith.spreadsheet.formula import Formula
from sheetsmith.style.style import Style

if TYPE_CHECKING:
    from sheetsmith.spreadsheet.worksheet import Worksheet


class CellType(Enum):
    """Data type of a cell, derived from its value."""

    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    TIME = "time"
    BOOL = "bool"
    FORMULA = "formula"
    EMPTY = "empty"


def normalize_value(value: Any) -> Tuple[Any, CellType]:
    """Convert a Python, numpy or pandas value into a storable value and its type.

    Raises:
        UnsupportedDataTypeError: If the value cannot be stored in a cell
    """
    if value is None:
        return None, CellType.EMPTY
    if isinstance(value, Formula):
        return value, CellType.FORMULA
    if isinstance(value, np.datetime64):
        value = pd.Timestamp(value)
    elif isinstance(value, np.timedelta64):
        value = pd.Timedelta(value)
    elif isinstance(value, np.generic):
        value = value.item()
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None, CellType.EMPTY
    if isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()
    elif isinstance(value, pd.Timedelta):
        value = value.to_pytimedelta()

    if isinstance(value, bool):
        return value, CellType.BOOL
    if isinstance(value, (int, float, Decimal)):
        return value, CellType.NUMBER
    if isinstance(value, (datetime, date)):
        return value, CellType.DATE
    if isinstance(value, (time, timedelta)):
        return value, CellType.TIME
    if isinstance(value, str):
        return value, CellType.STRING
    raise UnsupportedDataTypeError(
        f"The data type {type(value).__name__!r} is not supported as a cell value"
    )


class Cell:
    """A single cell of a worksheet.

    Attributes:
        address: Position of the cell
        value: Normalized value
        data_type: CellType derived from the value
        style: Canonical style of the owning workbook, or None for the default
    """

    def __init__(
        self,
        value: Any,
        column: int,
        row: int,
        style: Optional[Style] = None,
        worksheet: Optional["Worksheet"] = None,
    ) -> None:
        self.address = Address(column, row)
        self._worksheet = worksheet
        self._style: Optional[Style] = None
        self.value = value
        if style is not None:
            self.style = style

    @property
    def column(self) -> int:
        return self.address.column

    @property
    def row(self) -> int:
        return self.address.row

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value, self.data_type = normalize_value(value)

    @property
    def style(self) -> Optional[Style]:
        return self._style

    @style.setter
    def style(self, style: Optional[Style]) -> None:
        if style is not None and self._worksheet is not None:
            style = self._worksheet.workbook.resolve_style(style)
        self._style = style

    def remove_style(self) -> None:
        self._style = None

    def __repr__(self) -> str:
        style = self._style.name if self._style is not None else None
        return f"Cell({self.address.to_a1()!r}, value={self._value!r}, style={style!r})"
