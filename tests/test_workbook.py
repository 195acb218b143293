"""
Unit tests for workbooks and the shortcut writer.
"""

import pytest

from sheetsmith import Workbook
from sheetsmith.exceptions import WorksheetError
from sheetsmith.spreadsheet.address import Address
from sheetsmith.spreadsheet.range import CellDirection
from sheetsmith.style import basic_styles
from sheetsmith.style.font import Font
from sheetsmith.style.style import Style


class TestWorkbook:
    """Test Suite for worksheet management."""

    def test_empty_workbook(self):
        wb = Workbook()
        assert wb.worksheets == ()
        assert len(wb.style_manager) == 14
        with pytest.raises(WorksheetError, match="no worksheet"):
            wb.current_worksheet

    def test_first_worksheet(self, workbook):
        assert workbook.current_worksheet.name == "Sheet1"
        assert workbook.current_worksheet.workbook is workbook

    def test_add_worksheet_becomes_current(self, workbook):
        sheet = workbook.add_worksheet("Data")
        assert workbook.current_worksheet is sheet
        assert [s.name for s in workbook.worksheets] == ["Sheet1", "Data"]

    def test_duplicate_name_rejected(self, workbook):
        with pytest.raises(WorksheetError, match="already exists"):
            workbook.add_worksheet("Sheet1")

    def test_invalid_name_rejected_unless_sanitized(self, workbook):
        with pytest.raises(WorksheetError):
            workbook.add_worksheet("a/b")
        assert workbook.add_worksheet("a/b", sanitize=True).name == "a_b"
        assert workbook.add_worksheet("Sheet1", sanitize=True).name == "Sheet11"

    def test_sanitized_first_worksheet(self):
        assert Workbook("x:y", sanitize=True).current_worksheet.name == "x_y"

    def test_get_worksheet(self, workbook):
        data = workbook.add_worksheet("Data")
        assert workbook.get_worksheet("Data") is data
        assert workbook.get_worksheet(1) is data
        assert workbook.get_worksheet(data) is data
        with pytest.raises(WorksheetError):
            workbook.get_worksheet("Missing")
        with pytest.raises(WorksheetError):
            workbook.get_worksheet(5)
        with pytest.raises(WorksheetError):
            workbook.get_worksheet(Workbook("Other").current_worksheet)

    def test_switch_and_select(self, workbook):
        workbook.add_worksheet("Data")
        workbook.set_current_worksheet("Sheet1")
        assert workbook.current_worksheet.name == "Sheet1"
        workbook.set_selected_worksheet("Data")
        assert workbook.selected_worksheet == 1

    def test_remove_worksheet(self, workbook):
        workbook.add_worksheet("Data")
        workbook.set_selected_worksheet(1)
        workbook.remove_worksheet("Data")
        assert workbook.current_worksheet.name == "Sheet1"
        assert workbook.selected_worksheet == 0
        workbook.remove_worksheet(0)
        assert workbook.worksheets == ()

    def test_styles_shared_across_worksheets(self, workbook):
        first = workbook.current_worksheet.add_cell("a", "A1", Style(font=Font(size=18)))
        second = workbook.add_worksheet("Data").add_cell("b", "A1", Style(font=Font(size=18)))
        assert first.style is second.style
        assert len(workbook.style_manager) == 15

    def test_workbooks_do_not_share_styles(self):
        first, second = Workbook("S"), Workbook("S")
        a = first.current_worksheet.add_cell("a", "A1", Style(font=Font(size=18)))
        b = second.current_worksheet.add_cell("b", "A1", Style(font=Font(size=18)))
        assert a.style is not b.style
        assert a.style.ordinal == b.style.ordinal == 14

    def test_resolve_style(self, workbook):
        assert workbook.resolve_style(basic_styles.bold()) is workbook.style_manager.get_style(2)


class TestShortener:
    """Test Suite for the ws shortcut writer."""

    def test_values_and_moves(self, workbook):
        ws = workbook.ws
        ws.value("Name", basic_styles.bold())
        ws.value("Total")
        ws.down()
        ws.left(2)
        ws.value("Alice")
        ws.formula("LEN(A2)")
        sheet = workbook.current_worksheet
        assert list(sheet.cells) == ["A1", "B1", "A2", "B2"]
        assert sheet.get_cell("A1").style.name == "bold"
        assert str(sheet.get_cell("B2").value) == "=LEN(A2)"

    def test_direction(self, workbook):
        ws = workbook.ws
        ws.direction(CellDirection.ROW_TO_ROW)
        ws.value(1)
        ws.value(2)
        ws.right()
        ws.up(2)
        ws.value(3)
        sheet = workbook.current_worksheet
        assert sheet.get_cell("A2").value == 2
        assert sheet.get_cell("B1").value == 3
        assert sheet.current_address == Address(1, 1)

    def test_writes_follow_current_worksheet(self, workbook):
        workbook.add_worksheet("Data")
        workbook.ws.value("x")
        assert workbook.get_worksheet("Data").has_cell("A1")
        assert not workbook.get_worksheet("Sheet1").has_cell("A1")
