"""
Unit tests for worksheets.

Tests cover:
- Cell writes at addresses and at the cursor
- Range writes in both fill directions
- DataFrame blocks
- Styles on cells (explicit, active, implicit date/time formats)
- Merged cells, selection, auto-filter, sizes and hidden lines
- Worksheet names
"""

from datetime import date, time

import pandas as pd
import pytest

from sheetsmith.exceptions import RangeError, UnsupportedDataTypeError, WorksheetError
from sheetsmith.spreadsheet.address import Address
from sheetsmith.spreadsheet.cell import CellType
from sheetsmith.spreadsheet.formula import Formula
from sheetsmith.spreadsheet.range import CellDirection, Range
from sheetsmith.spreadsheet.worksheet import Worksheet, validate_worksheet_name
from sheetsmith.style import basic_styles
from sheetsmith.style.font import Font
from sheetsmith.style.style import Style


class TestCellWrites:
    """Test Suite for single cell writes and the cursor."""

    def test_add_cell_at_address(self, worksheet):
        cell = worksheet.add_cell(42, "C5")
        assert cell.address == Address(2, 4)
        assert worksheet.get_cell("C5") is cell
        assert worksheet.get_cell((2, 4)) is cell

    def test_fixed_markers_ignored_for_lookup(self, worksheet):
        cell = worksheet.add_cell("x", "$B$2")
        assert list(worksheet.cells) == ["B2"]
        assert worksheet.get_cell("B$2") is cell

    def test_overwrite_replaces_cell(self, worksheet):
        worksheet.add_cell(1, "A1")
        worksheet.add_cell(2, "A1")
        assert len(worksheet.cells) == 1
        assert worksheet.get_cell("A1").value == 2

    def test_cursor_moves_along_row(self, worksheet):
        for value in ("a", "b", "c"):
            worksheet.add_next_cell(value)
        assert list(worksheet.cells) == ["A1", "B1", "C1"]
        assert worksheet.current_address == Address(3, 0)

    def test_cursor_moves_down_column(self, worksheet):
        worksheet.cell_direction = CellDirection.ROW_TO_ROW
        worksheet.add_next_cell("a")
        worksheet.add_next_cell("b")
        assert list(worksheet.cells) == ["A1", "A2"]

    def test_disabled_direction_keeps_cursor(self, worksheet):
        worksheet.cell_direction = CellDirection.DISABLED
        worksheet.add_next_cell("a")
        worksheet.add_next_cell("b")
        assert list(worksheet.cells) == ["A1"]
        assert worksheet.get_cell("A1").value == "b"

    def test_add_cell_continues_after_address(self, worksheet):
        worksheet.add_cell("x", "D4")
        worksheet.add_next_cell("y")
        assert worksheet.get_cell("E4").value == "y"

    def test_cursor_navigation(self, worksheet):
        worksheet.set_current_cell_address("C3")
        worksheet.go_to_next_row()
        assert worksheet.current_address == Address(0, 3)
        worksheet.set_current_cell_address("C3")
        worksheet.go_to_next_row(2, keep_column_position=True)
        assert worksheet.current_address == Address(2, 4)
        worksheet.go_to_next_column(keep_row_position=True)
        assert worksheet.current_address == Address(3, 4)
        worksheet.go_to_next_column()
        assert worksheet.current_address == Address(4, 0)

    def test_cursor_cannot_leave_grid(self, worksheet):
        with pytest.raises(RangeError):
            worksheet.go_to_next_row(-1)

    def test_write_past_last_column_fails(self, worksheet):
        """A cursor moved past column XFD rejects the next write."""
        worksheet.set_current_cell_address("XFD1")
        worksheet.add_next_cell("first")
        with pytest.raises(RangeError):
            worksheet.add_next_cell("second")
        assert worksheet.get_cell("XFD1").value == "first"
        assert len(worksheet.cells) == 1

    def test_write_past_last_row_fails(self, worksheet):
        worksheet.cell_direction = CellDirection.ROW_TO_ROW
        worksheet.set_current_cell_address("B1048576")
        worksheet.add_next_cell("first")
        with pytest.raises(RangeError):
            worksheet.add_next_cell("second")
        assert worksheet.get_cell("B1048576").value == "first"

    def test_cursor_moved_back_onto_grid(self, worksheet):
        worksheet.set_current_cell_address("XFD1")
        worksheet.add_next_cell("first")
        worksheet.go_to_next_column(-2, keep_row_position=True)
        assert worksheet.add_next_cell("second").address.to_a1() == "XFC1"

    def test_formula_cells(self, worksheet):
        cell = worksheet.add_cell_formula("=SUM(A1:A2)", "A3")
        assert cell.data_type is CellType.FORMULA
        assert cell.value == Formula("SUM(A1:A2)")
        worksheet.set_current_cell_address("B1")
        assert worksheet.add_next_cell_formula("A1*2").address == Address(1, 0)

    def test_unsupported_value(self, worksheet):
        with pytest.raises(UnsupportedDataTypeError):
            worksheet.add_cell([1, 2], "A1")
        assert not worksheet.has_cell("A1")

    def test_remove_cell(self, worksheet):
        worksheet.add_cell(1, "A1")
        assert worksheet.remove_cell("A1") is True
        assert worksheet.remove_cell("A1") is False
        with pytest.raises(WorksheetError):
            worksheet.get_cell("A1")

    def test_cells_view_is_read_only(self, worksheet):
        worksheet.add_cell(1, "A1")
        with pytest.raises(TypeError):
            worksheet.cells["B1"] = worksheet.get_cell("A1")


class TestRangeWrites:
    """Test Suite for add_cell_range and add_dataframe."""

    def test_row_major_fill(self, worksheet):
        worksheet.add_cell_range([1, 2, 3, 4], "A1:B2")
        assert [worksheet.get_cell(a).value for a in ("A1", "B1", "A2", "B2")] == [1, 2, 3, 4]

    def test_column_major_fill(self, worksheet):
        worksheet.cell_direction = CellDirection.ROW_TO_ROW
        worksheet.add_cell_range([1, 2, 3, 4], "B2:A1")
        assert [worksheet.get_cell(a).value for a in ("A1", "A2", "B1", "B2")] == [1, 2, 3, 4]

    def test_count_mismatch(self, worksheet):
        with pytest.raises(RangeError, match="does not match"):
            worksheet.add_cell_range([1, 2, 3], "A1:B2")
        assert len(worksheet.cells) == 0

    def test_range_write_keeps_cursor(self, worksheet):
        worksheet.add_cell_range(["a", "b"], "C3:D3")
        assert worksheet.current_address == Address(0, 0)

    def test_range_write_with_style(self, worksheet):
        cells = worksheet.add_cell_range([1, 2], "A1:B1", basic_styles.round_format())
        assert cells[0].style is cells[1].style
        assert cells[0].style.ordinal == 10

    def test_dataframe_block(self, worksheet, sales):
        block = worksheet.add_dataframe(sales, "B2", header_style=basic_styles.bold())
        assert block == Range.parse("B2:D5")
        assert worksheet.get_cell("B2").value == "region"
        assert worksheet.get_cell("B2").style.name == "bold"
        assert worksheet.get_cell("C3").value == 120
        assert type(worksheet.get_cell("C3").value) is int
        assert worksheet.get_cell("D5").value == 410.25
        assert worksheet.get_cell("C3").style is None

    def test_dataframe_without_header(self, worksheet, sales):
        block = worksheet.add_dataframe(sales, include_header=False)
        assert block == Range.parse("A1:C3")
        assert worksheet.get_cell("A1").value == "north"

    def test_dataframe_missing_values(self, worksheet):
        frame = pd.DataFrame({"a": [1.0, None], "b": [pd.Timestamp("2024-01-01"), pd.NaT]})
        worksheet.add_dataframe(frame)
        assert worksheet.get_cell("A3").data_type is CellType.EMPTY
        assert worksheet.get_cell("B2").data_type is CellType.DATE
        assert worksheet.get_cell("B3").data_type is CellType.EMPTY

    def test_dataframe_errors(self, worksheet):
        with pytest.raises(TypeError):
            worksheet.add_dataframe([[1, 2]])  # type: ignore
        with pytest.raises(WorksheetError):
            worksheet.add_dataframe(pd.DataFrame())
        with pytest.raises(WorksheetError):
            worksheet.add_dataframe(pd.DataFrame({"a": []}), include_header=False)

    def test_dataframe_must_fit(self, worksheet, sales):
        with pytest.raises(RangeError):
            worksheet.add_dataframe(sales, "XFD1")

    def test_dataframe_with_unsupported_value_writes_nothing(self, worksheet):
        frame = pd.DataFrame({"a": [1, 2, 3], "b": ["x", ["nested"], "z"]})
        with pytest.raises(UnsupportedDataTypeError):
            worksheet.add_dataframe(frame, header_style=Style(font=Font(size=13)))
        assert len(worksheet.cells) == 0
        assert len(worksheet.workbook.style_manager) == 14

    def test_range_with_unsupported_value_writes_nothing(self, worksheet):
        with pytest.raises(UnsupportedDataTypeError):
            worksheet.add_cell_range([1, 2, {"a": 1}, 4], "A1:B2")
        assert len(worksheet.cells) == 0


class TestCellStyles:
    """Test Suite for style resolution on cells."""

    def test_equal_styles_share_canonical_instance(self, worksheet):
        first = worksheet.add_cell("a", "A1", Style(font=Font(size=16)))
        second = worksheet.add_cell("b", "A2", Style(font=Font(size=16)))
        assert first.style is second.style
        assert first.style.ordinal == 14

    def test_active_style(self, worksheet):
        worksheet.set_active_style(basic_styles.italic())
        assert worksheet.active_style.ordinal == 3
        assert worksheet.add_next_cell("a").style is worksheet.active_style
        explicit = worksheet.add_next_cell("b", basic_styles.bold())
        assert explicit.style.ordinal == 2
        worksheet.clear_active_style()
        assert worksheet.add_next_cell("c").style is None

    def test_dates_get_date_format(self, worksheet):
        assert worksheet.add_cell(date(2024, 5, 1), "A1").style.name == "dateFormat"
        assert worksheet.add_cell(time(8, 0), "A2").style.name == "timeFormat"

    def test_explicit_style_wins_over_date_format(self, worksheet):
        cell = worksheet.add_cell(date(2024, 5, 1), "A1", basic_styles.bold())
        assert cell.style.name == "bold"

    def test_set_style_on_range(self, worksheet):
        worksheet.add_cell(1, "A1")
        worksheet.set_style("A1:B2", basic_styles.border_frame())
        assert len(worksheet.cells) == 4
        assert all(cell.style.ordinal == 11 for cell in worksheet.cells.values())
        assert worksheet.get_cell("A1").value == 1
        assert worksheet.get_cell("B2").data_type is CellType.EMPTY

    def test_set_style_on_single_cell(self, worksheet):
        worksheet.set_style("C3", basic_styles.strike())
        assert worksheet.get_cell("C3").style.ordinal == 7


class TestSheetDeclarations:
    """Test Suite for merges, selection, filters and sizes."""

    def test_merge_cells(self, worksheet):
        assert worksheet.merge_cells("C1:A2") == "A1:C2"
        assert worksheet.merged_cells == (Range.parse("A1:C2"),)

    def test_overlapping_merge_rejected(self, worksheet):
        worksheet.merge_cells("A1:C2")
        with pytest.raises(RangeError, match="overlaps"):
            worksheet.merge_cells("C2:D4")
        worksheet.merge_cells("D1:E2")
        assert len(worksheet.merged_cells) == 2

    def test_remove_merged_cells(self, worksheet):
        worksheet.merge_cells("$A$1:B2")
        worksheet.remove_merged_cells("A1:B2")
        assert worksheet.merged_cells == ()
        with pytest.raises(RangeError):
            worksheet.remove_merged_cells("A1:B2")

    def test_selection(self, worksheet):
        worksheet.set_selected_cells("B2:A1")
        assert worksheet.selected_cells == Range.parse("A1:B2")
        worksheet.remove_selected_cells()
        assert worksheet.selected_cells is None

    def test_auto_filter(self, worksheet):
        worksheet.set_auto_filter(1, 3)
        assert worksheet.auto_filter.to_a1() == "B1:D1"
        worksheet.set_auto_filter_range("C5:A9")
        assert worksheet.auto_filter.to_a1() == "A1:C1"
        worksheet.remove_auto_filter()
        assert worksheet.auto_filter is None

    def test_sizes(self, worksheet):
        worksheet.set_column_width("C", 20)
        worksheet.set_column_width(0, 5.5)
        worksheet.set_row_height(3, 30)
        assert worksheet.column_widths == {2: 20.0, 0: 5.5}
        assert worksheet.row_heights == {3: 30.0}

    def test_invalid_sizes(self, worksheet):
        with pytest.raises(RangeError):
            worksheet.set_column_width(0, 256)
        with pytest.raises(RangeError):
            worksheet.set_row_height(0, -1)
        with pytest.raises(RangeError):
            worksheet.set_column_width("XFE", 10)

    def test_hidden_lines(self, worksheet):
        worksheet.add_hidden_column("B")
        worksheet.add_hidden_row(4)
        assert worksheet.hidden_columns == {1}
        assert worksheet.hidden_rows == {4}
        worksheet.remove_hidden_column(1)
        worksheet.remove_hidden_row(4)
        assert not worksheet.hidden_columns
        assert not worksheet.hidden_rows


class TestWorksheetNames:
    """Test Suite for worksheet name validation and sanitizing."""

    @pytest.mark.parametrize("name", ["", "a" * 32, "Q1/Q2", "what?", "'quoted'", "[x]"])
    def test_invalid_names(self, name):
        with pytest.raises(WorksheetError):
            validate_worksheet_name(name)

    def test_valid_name(self):
        validate_worksheet_name("Sales 2024 (final)")

    def test_sanitize(self):
        assert Worksheet.sanitize_worksheet_name("Q1/Q2: plan") == "Q1_Q2_ plan"
        assert Worksheet.sanitize_worksheet_name("") == "Sheet1"
        assert Worksheet.sanitize_worksheet_name("b" * 40) == "b" * 31

    def test_sanitize_appends_number(self, workbook):
        workbook.add_worksheet("Data")
        workbook.add_worksheet("Data1")
        assert Worksheet.sanitize_worksheet_name("Data", workbook) == "Data2"
        long_name = "x" * 31
        workbook.add_worksheet(long_name)
        assert Worksheet.sanitize_worksheet_name(long_name, workbook) == "x" * 30 + "1"
