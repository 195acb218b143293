"""
Workbook model.

The Workbook owns its worksheets and exactly one StyleManager. The manager
is created with the workbook and lives exactly as long as it; every style a
cell receives is resolved through it, which is how identical formatting ends
up as one shared style entry.
"""

import logging
from typing import Any, List, Optional, Tuple, Union

from sheetsmith.exceptions import WorksheetError
from sheetsmith.spreadsheet.cell import Cell
from sheetsmith.spreadsheet.formula import Formula
from sheetsmith.spreadsheet.range import CellDirection
from sheetsmith.spreadsheet.worksheet import Worksheet, validate_worksheet_name
from sheetsmith.style.manager import StyleManager
from sheetsmith.style.style import Style

logger = logging.getLogger(__name__)

WorksheetRef = Union[str, int, Worksheet]


class Workbook:
    """A collection of worksheets sharing one style registry.

    Usage::

        wb = Workbook("Sheet1")
        wb.ws.value("Header", basic_styles.bold())
        wb.ws.value(42)
        wb.current_worksheet.merge_cells("A3:C3")

    Attributes:
        style_manager: The workbook-scoped StyleManager
        selected_worksheet: Index of the worksheet selected when opening
    """

    def __init__(self, first_worksheet: Optional[str] = None, sanitize: bool = False) -> None:
        """Initialize a Workbook.

        Args:
            first_worksheet: Name of a worksheet to create right away
            sanitize: Sanitize that name instead of rejecting invalid names
        """
        self.style_manager = StyleManager()
        self.selected_worksheet = 0
        self._worksheets: List[Worksheet] = []
        self._current: Optional[Worksheet] = None
        self._shortener = Shortener(self)
        if first_worksheet is not None:
            self.add_worksheet(first_worksheet, sanitize=sanitize)

    @property
    def worksheets(self) -> Tuple[Worksheet, ...]:
        return tuple(self._worksheets)

    @property
    def current_worksheet(self) -> Worksheet:
        if self._current is None:
            raise WorksheetError("The workbook has no worksheet; add one first")
        return self._current

    @property
    def ws(self) -> "Shortener":
        """Shortcut writer for the current worksheet."""
        return self._shortener

    def add_worksheet(self, name: str, sanitize: bool = False) -> Worksheet:
        """Add a worksheet and make it the current one.

        Raises:
            WorksheetError: If the name is invalid or already used (and
                sanitize is False)
        """
        if sanitize:
            name = Worksheet.sanitize_worksheet_name(name, self)
        else:
            validate_worksheet_name(name)
            if any(sheet.name == name for sheet in self._worksheets):
                raise WorksheetError(f"The worksheet name {name!r} already exists")
        worksheet = Worksheet(name, self)
        self._worksheets.append(worksheet)
        self._current = worksheet
        logger.debug("Added worksheet %r", name)
        return worksheet

    def get_worksheet(self, ref: WorksheetRef) -> Worksheet:
        """Look up a worksheet by name, zero-based index or instance."""
        if isinstance(ref, Worksheet):
            if ref in self._worksheets:
                return ref
            raise WorksheetError(f"The worksheet {ref.name!r} does not belong to this workbook")
        if isinstance(ref, int) and not isinstance(ref, bool):
            if 0 <= ref < len(self._worksheets):
                return self._worksheets[ref]
            raise WorksheetError(f"No worksheet at index {ref}")
        for sheet in self._worksheets:
            if sheet.name == ref:
                return sheet
        raise WorksheetError(f"The worksheet {ref!r} does not exist")

    def set_current_worksheet(self, ref: WorksheetRef) -> Worksheet:
        self._current = self.get_worksheet(ref)
        return self._current

    def set_selected_worksheet(self, ref: WorksheetRef) -> None:
        self.selected_worksheet = self._worksheets.index(self.get_worksheet(ref))

    def remove_worksheet(self, ref: WorksheetRef) -> None:
        """Remove a worksheet; the current/selected sheet moves to the last one left."""
        worksheet = self.get_worksheet(ref)
        self._worksheets.remove(worksheet)
        if self._current is worksheet:
            self._current = self._worksheets[-1] if self._worksheets else None
        if self.selected_worksheet >= len(self._worksheets):
            self.selected_worksheet = max(len(self._worksheets) - 1, 0)
        logger.debug("Removed worksheet %r", worksheet.name)

    def resolve_style(self, style: Style) -> Style:
        """Canonical instance of a style in this workbook's StyleManager."""
        return self.style_manager.add_style(style)

    def __repr__(self) -> str:
        names = [sheet.name for sheet in self._worksheets]
        return f"Workbook(worksheets={names!r}, styles={len(self.style_manager)})"


class Shortener:
    """Compact cursor-based writer bound to the current worksheet of a workbook."""

    def __init__(self, workbook: Workbook) -> None:
        self._workbook = workbook

    def value(self, value: Any, style: Optional[Style] = None) -> Cell:
        return self._workbook.current_worksheet.add_next_cell(value, style)

    def formula(self, formula: Union[Formula, str], style: Optional[Style] = None) -> Cell:
        return self._workbook.current_worksheet.add_next_cell_formula(formula, style)

    def right(self, number: int = 1) -> None:
        """Move the cursor right, keeping the row."""
        self._workbook.current_worksheet.go_to_next_column(number, keep_row_position=True)

    def left(self, number: int = 1) -> None:
        self._workbook.current_worksheet.go_to_next_column(-number, keep_row_position=True)

    def down(self, number: int = 1) -> None:
        """Move the cursor down, keeping the column."""
        self._workbook.current_worksheet.go_to_next_row(number, keep_column_position=True)

    def up(self, number: int = 1) -> None:
        self._workbook.current_worksheet.go_to_next_row(-number, keep_column_position=True)

    def direction(self, direction: CellDirection) -> None:
        self._workbook.current_worksheet.cell_direction = direction
