"""
Worksheet model.

A Worksheet is an ordered map of cells keyed by address text, plus the
sheet-level declarations that reference ranges: merged cells, the selection
and the auto-filter. Every style assigned to a cell is resolved through the
owning workbook's StyleManager, so cells always hold canonical styles.
"""

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence, Set, Tuple, Union

import pandas as pd

from sheetsmith.conf import (
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_ROW_HEIGHT,
    FORBIDDEN_WORKSHEET_NAME_CHARS,
    MAX_COLUMN_WIDTH,
    MAX_ROW_HEIGHT,
    MAX_WORKSHEET_NAME_LENGTH,
)
from sheetsmith.exceptions import RangeError, WorksheetError
from sheetsmith.spreadsheet.address import (
    Address,
    resolve_column,
    validate_column_number,
    validate_row_number,
)
from sheetsmith.spreadsheet.cell import Cell, CellType, normalize_value
from sheetsmith.spreadsheet.formula import Formula
from sheetsmith.spreadsheet.range import CellDirection, Range
from sheetsmith.style import basic_styles
from sheetsmith.style.style import Style

if TYPE_CHECKING:
    from sheetsmith.spreadsheet.workbook import Workbook

logger = logging.getLogger(__name__)

AddressLike = Union[Address, str, Tuple[int, int]]
RangeLike = Union[Range, str]


def validate_worksheet_name(name: str) -> None:
    """Raise WorksheetError if name cannot be used as a worksheet name."""
    if not isinstance(name, str) or not name:
        raise WorksheetError("The worksheet name must be a non-empty string")
    if len(name) > MAX_WORKSHEET_NAME_LENGTH:
        raise WorksheetError(
            f"The worksheet name {name!r} is longer than {MAX_WORKSHEET_NAME_LENGTH} characters"
        )
    forbidden = sorted(set(name) & FORBIDDEN_WORKSHEET_NAME_CHARS)
    if forbidden:
        raise WorksheetError(
            f"The worksheet name {name!r} contains forbidden characters: {''.join(forbidden)}"
        )
    if name.startswith("'") or name.endswith("'"):
        raise WorksheetError(f"The worksheet name {name!r} must not start or end with an apostrophe")


class Worksheet:
    """A single sheet of a workbook.

    Attributes:
        name: Worksheet name
        workbook: Owning workbook (provides the StyleManager)
        cell_direction: Direction used by add_next_cell and add_cell_range
        selected_cells: Selected range, if any
        auto_filter: Auto-filter range (always on the first row), if any
        column_widths / row_heights: Explicit sizes by zero-based index
        hidden_columns / hidden_rows: Zero-based indices of hidden lines
    """

    def __init__(self, name: str, workbook: "Workbook") -> None:
        validate_worksheet_name(name)
        self.name = name
        self.workbook = workbook
        self.cell_direction = CellDirection.COLUMN_TO_COLUMN
        self.selected_cells: Optional[Range] = None
        self.auto_filter: Optional[Range] = None
        self.default_column_width = DEFAULT_COLUMN_WIDTH
        self.default_row_height = DEFAULT_ROW_HEIGHT
        self.column_widths: Dict[int, float] = {}
        self.row_heights: Dict[int, float] = {}
        self.hidden_columns: Set[int] = set()
        self.hidden_rows: Set[int] = set()
        self._cells: Dict[str, Cell] = {}
        self._merged_cells: Dict[str, Range] = {}
        self._active_style: Optional[Style] = None
        self._current_column = 0
        self._current_row = 0

    @property
    def cells(self) -> Mapping[str, Cell]:
        """Read-only view of the cells keyed by A1 text, in insertion order."""
        return MappingProxyType(self._cells)

    @property
    def merged_cells(self) -> Tuple[Range, ...]:
        return tuple(self._merged_cells.values())

    @property
    def active_style(self) -> Optional[Style]:
        return self._active_style

    @property
    def current_address(self) -> Address:
        """Cursor position; RangeError once the cursor has moved past the grid edge."""
        return Address(self._current_column, self._current_row)

    # -- cell writes -----------------------------------------------------

    def add_next_cell(self, value: Any, style: Optional[Style] = None) -> Cell:
        """Write a value at the cursor and advance it along cell_direction.

        Raises:
            RangeError: If a previous write moved the cursor past the last
                column or row; nothing is written
        """
        cell = self._put(value, self.current_address, style)
        self._advance(cell.address)
        return cell

    def add_cell(self, value: Any, address: AddressLike, style: Optional[Style] = None) -> Cell:
        """Write a value at an address; the cursor continues after that cell.

        Args:
            value: Cell value (str, number, bool, date/time, Formula, None,
                numpy/pandas scalars)
            address: Address, A1 text or a (column, row) tuple
            style: Optional style; falls back to the active style

        Raises:
            RangeError: If the address is invalid
            UnsupportedDataTypeError: If the value type is not supported
        """
        cell = self._put(value, Address.coerce(address), style)
        self._advance(cell.address)
        return cell

    def add_cell_formula(
        self, formula: Union[Formula, str], address: AddressLike, style: Optional[Style] = None
    ) -> Cell:
        if not isinstance(formula, Formula):
            formula = Formula(formula)
        return self.add_cell(formula, address, style)

    def add_next_cell_formula(self, formula: Union[Formula, str], style: Optional[Style] = None) -> Cell:
        if not isinstance(formula, Formula):
            formula = Formula(formula)
        return self.add_next_cell(formula, style)

    def add_cell_range(
        self, values: Sequence[Any], target: RangeLike, style: Optional[Style] = None
    ) -> List[Cell]:
        """Write a flat list of values into a range.

        The range is filled row by row, or column by column when the
        worksheet's cell_direction is ROW_TO_ROW. The cursor is not moved.

        Nothing is written if any value or the style is invalid.

        Raises:
            RangeError: If the number of values differs from the cell count
            UnsupportedDataTypeError: If a value cannot be stored in a cell
        """
        rng = Range.coerce(target)
        values = list(values)
        if len(values) != len(rng):
            raise RangeError(
                f"The number of values ({len(values)}) does not match "
                f"the number of cells in {rng} ({len(rng)})"
            )
        return self._put_block(
            [(address, value, style) for address, value in zip(rng.addresses(self.cell_direction), values)]
        )

    def add_dataframe(
        self,
        frame: pd.DataFrame,
        start: AddressLike = "A1",
        include_header: bool = True,
        header_style: Optional[Style] = None,
        style: Optional[Style] = None,
    ) -> Range:
        """Write a DataFrame as a block of cells.

        Args:
            frame: Data to write; the index is not written
            start: Top-left cell of the block
            include_header: Write the column labels as the first row
            header_style: Style of the header row (defaults to ``style``)
            style: Style of the data cells

        Returns:
            The range covered by the written block

        Raises:
            WorksheetError: If the frame has no columns
            RangeError: If the block does not fit on the worksheet
            UnsupportedDataTypeError: If a value cannot be stored in a cell;
                nothing is written
        """
        if not isinstance(frame, pd.DataFrame):
            raise TypeError(f"Expected pandas.DataFrame, got {type(frame).__name__}")
        if len(frame.columns) == 0:
            raise WorksheetError("Cannot write a DataFrame without columns")
        origin = Address.coerce(start)
        n_rows = len(frame) + (1 if include_header else 0)
        if n_rows == 0:
            raise WorksheetError("Cannot write an empty DataFrame without a header")
        block = Range(
            origin,
            _shifted(origin, len(frame.columns) - 1, n_rows - 1),
        )

        entries: List[Tuple[Address, Any, Optional[Style]]] = []
        row = origin.row
        if include_header:
            for offset, label in enumerate(frame.columns):
                entries.append((Address(origin.column + offset, row), str(label), header_style or style))
            row += 1
        for record in frame.itertuples(index=False, name=None):
            for offset, value in enumerate(record):
                entries.append((Address(origin.column + offset, row), value, style))
            row += 1
        self._put_block(entries)
        logger.debug("Wrote DataFrame block %s on worksheet %r", block, self.name)
        return block

    def set_style(self, target: Union[RangeLike, Address], style: Style) -> None:
        """Apply a style to every cell of a range, creating empty cells where needed."""
        if isinstance(target, str) and ":" not in target:
            target = Address.parse(target)
        rng = Range(target, target) if isinstance(target, Address) else _as_range(target)
        for address in rng.addresses():
            key = address.to_a1()
            if key in self._cells:
                self._cells[key].style = style
            else:
                self._cells[key] = Cell(None, address.column, address.row, style, worksheet=self)

    # -- cell lookup -----------------------------------------------------

    def get_cell(self, address: AddressLike) -> Cell:
        key = _key(address)
        try:
            return self._cells[key]
        except KeyError as e:
            raise WorksheetError(f"The cell {key} does not exist on worksheet {self.name!r}") from e

    def has_cell(self, address: AddressLike) -> bool:
        return _key(address) in self._cells

    def remove_cell(self, address: AddressLike) -> bool:
        """Remove a cell; returns False if there was none."""
        return self._cells.pop(_key(address), None) is not None

    # -- cursor ----------------------------------------------------------

    def set_current_cell_address(self, address: AddressLike) -> None:
        target = Address.coerce(address)
        self._current_column = target.column
        self._current_row = target.row

    def go_to_next_column(self, number: int = 1, keep_row_position: bool = False) -> None:
        """Move the cursor right; the row resets to the first one unless kept."""
        column = self._current_column + number
        validate_column_number(column)
        self._current_column = column
        if not keep_row_position:
            self._current_row = 0

    def go_to_next_row(self, number: int = 1, keep_column_position: bool = False) -> None:
        """Move the cursor down; the column resets to the first one unless kept."""
        row = self._current_row + number
        validate_row_number(row)
        self._current_row = row
        if not keep_column_position:
            self._current_column = 0

    # -- sheet declarations ----------------------------------------------

    def merge_cells(self, target: RangeLike) -> str:
        """Merge a range and return its A1 text.

        Raises:
            RangeError: If the range overlaps an already merged range
        """
        rng = _as_range(target)
        for existing in self._merged_cells.values():
            if existing.intersect(rng) is not None:
                raise RangeError(f"The range {rng} overlaps the merged range {existing}")
        key = rng.to_a1()
        self._merged_cells[key] = rng
        return key

    def remove_merged_cells(self, target: RangeLike) -> None:
        key = _as_range(target).to_a1()
        if key not in self._merged_cells:
            raise RangeError(f"The range {key} is not merged on worksheet {self.name!r}")
        del self._merged_cells[key]

    def set_selected_cells(self, target: RangeLike) -> None:
        self.selected_cells = _as_range(target)

    def remove_selected_cells(self) -> None:
        self.selected_cells = None

    def set_auto_filter(self, start_column: int, end_column: int) -> None:
        """Declare an auto-filter over the given columns of the first row."""
        self.auto_filter = Range(Address(start_column, 0), Address(end_column, 0))

    def set_auto_filter_range(self, target: RangeLike) -> None:
        """Declare an auto-filter from a range; only its columns are used."""
        rng = _as_range(target)
        self.set_auto_filter(rng.start.column, rng.end.column)

    def remove_auto_filter(self) -> None:
        self.auto_filter = None

    def set_column_width(self, column: Union[int, str], width: float) -> None:
        index = _column_index(column)
        if not 0 <= width <= MAX_COLUMN_WIDTH:
            raise RangeError(f"The column width {width} is out of range (0 to {MAX_COLUMN_WIDTH:g})")
        self.column_widths[index] = float(width)

    def set_row_height(self, row: int, height: float) -> None:
        validate_row_number(row)
        if not 0 <= height <= MAX_ROW_HEIGHT:
            raise RangeError(f"The row height {height} is out of range (0 to {MAX_ROW_HEIGHT:g})")
        self.row_heights[row] = float(height)

    def add_hidden_column(self, column: Union[int, str]) -> None:
        self.hidden_columns.add(_column_index(column))

    def remove_hidden_column(self, column: Union[int, str]) -> None:
        self.hidden_columns.discard(_column_index(column))

    def add_hidden_row(self, row: int) -> None:
        validate_row_number(row)
        self.hidden_rows.add(row)

    def remove_hidden_row(self, row: int) -> None:
        self.hidden_rows.discard(row)

    def set_active_style(self, style: Style) -> None:
        """Style used for every following write that does not name its own."""
        self._active_style = self.workbook.resolve_style(style)

    def clear_active_style(self) -> None:
        self._active_style = None

    @staticmethod
    def sanitize_worksheet_name(name: Optional[str], workbook: Optional["Workbook"] = None) -> str:
        """Turn any string into a valid, unused worksheet name.

        Forbidden characters become '_', an empty name becomes 'Sheet1', the
        name is cut to 31 characters, and a number is appended if the
        workbook already has a worksheet of that name.
        """
        if not name:
            candidate = "Sheet1"
        else:
            candidate = "".join(
                "_" if char in FORBIDDEN_WORKSHEET_NAME_CHARS else char for char in name
            ).strip("'") or "Sheet1"
        candidate = candidate[:MAX_WORKSHEET_NAME_LENGTH]
        if workbook is None:
            return candidate
        existing = {sheet.name for sheet in workbook.worksheets}
        base = candidate
        number = 1
        while candidate in existing:
            suffix = str(number)
            candidate = base[: MAX_WORKSHEET_NAME_LENGTH - len(suffix)] + suffix
            number += 1
        if candidate != name:
            logger.info("Worksheet name %r sanitized to %r", name, candidate)
        return candidate

    # -- internals -------------------------------------------------------

    def _put(self, value: Any, address: Address, style: Optional[Style]) -> Cell:
        cell = Cell(value, address.column, address.row, worksheet=self)
        effective = style if style is not None else self._active_style
        if effective is None:
            effective = _implicit_style(cell)
        if effective is not None:
            cell.style = effective
        self._cells[cell.address.to_a1()] = cell
        return cell

    def _put_block(self, entries: List[Tuple[Address, Any, Optional[Style]]]) -> List[Cell]:
        """Write many cells, checking every value and style before the first write."""
        values = [normalize_value(value)[0] for _, value, _ in entries]
        resolved: Dict[int, Style] = {}
        for _, _, style in entries:
            if style is not None and id(style) not in resolved:
                resolved[id(style)] = self.workbook.resolve_style(style)
        return [
            self._put(value, address, resolved[id(style)] if style is not None else None)
            for (address, _, style), value in zip(entries, values)
        ]

    def _advance(self, address: Address) -> None:
        # Not clamped: a cursor past the edge fails on the next write
        if self.cell_direction is CellDirection.COLUMN_TO_COLUMN:
            self._current_column = address.column + 1
            self._current_row = address.row
        elif self.cell_direction is CellDirection.ROW_TO_ROW:
            self._current_column = address.column
            self._current_row = address.row + 1
        else:
            self._current_column = address.column
            self._current_row = address.row

    def __repr__(self) -> str:
        return f"Worksheet(name={self.name!r}, cells={len(self._cells)})"


def _implicit_style(cell: Cell) -> Optional[Style]:
    if cell.data_type is CellType.DATE:
        return basic_styles.date_format()
    if cell.data_type is CellType.TIME:
        return basic_styles.time_format()
    return None


def _key(address: AddressLike) -> str:
    target = Address.coerce(address)
    return Address(target.column, target.row).to_a1()


def _as_range(target: RangeLike) -> Range:
    rng = Range.coerce(target)
    return Range(
        Address(rng.start.column, rng.start.row),
        Address(rng.end.column, rng.end.row),
    )


def _shifted(origin: Address, columns: int, rows: int) -> Address:
    return Address(origin.column + columns, origin.row + rows)


def _column_index(column: Union[int, str]) -> int:
    if isinstance(column, str):
        return resolve_column(column)
    validate_column_number(column)
    return column
