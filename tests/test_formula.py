"""
Unit tests for formula construction.

Tests cover:
- Formula normalization of the leading '='
- Same-sheet and cross-sheet references
- Function shortcuts
"""

import pytest

from sheetsmith.exceptions import RangeError
from sheetsmith.spreadsheet import formula as formulas
from sheetsmith.spreadsheet.address import Address
from sheetsmith.spreadsheet.formula import Formula, Reference
from sheetsmith.spreadsheet.range import Range


class TestFormula:
    """Test Suite for Formula."""

    def test_leading_equals_is_optional(self):
        assert Formula("=SUM(A1:A3)") == Formula("SUM(A1:A3)")
        assert Formula("=SUM(A1:A3)").expression == "SUM(A1:A3)"
        assert str(Formula("SUM(A1:A3)")) == "=SUM(A1:A3)"

    @pytest.mark.parametrize("expression", ["", "=", "   "])
    def test_empty_rejected(self, expression):
        with pytest.raises(ValueError):
            Formula(expression)

    def test_non_string_rejected(self):
        with pytest.raises(ValueError):
            Formula(42)  # type: ignore

    def test_hashable(self):
        assert len({Formula("A1+1"), Formula("=A1+1")}) == 1


class TestReference:
    """Test Suite for Reference."""

    def test_same_sheet_range(self):
        assert Reference("B2:A1").to_string() == "A1:B2"

    def test_same_sheet_cell(self):
        reference = Reference("$C$3")
        assert isinstance(reference.target, Address)
        assert str(reference) == "$C$3"
        assert not reference.is_cross_sheet()

    def test_plain_sheet_name(self):
        assert str(Reference(Range.parse("A1:B2"), "Data")) == "Data!A1:B2"

    def test_quoted_sheet_name(self):
        assert str(Reference("A1", "My Sheet")) == "'My Sheet'!A1"
        assert str(Reference("A1", "Bob's")) == "'Bob''s'!A1"

    def test_invalid_target(self):
        with pytest.raises(RangeError):
            Reference("A0")
        with pytest.raises(ValueError):
            Reference(3)  # type: ignore

    def test_equality(self):
        assert Reference("A1:B2", "S") == Reference(Range.parse("B2:A1"), "S")
        assert Reference("A1:B2") != Reference("A1:B2", "S")


class TestFunctionShortcuts:
    """Test Suite for the formula helpers."""

    @pytest.mark.parametrize(
        "helper, name",
        [(formulas.average, "AVERAGE"), (formulas.max_value, "MAX"),
         (formulas.min_value, "MIN"), (formulas.median, "MEDIAN"),
         (formulas.sum_values, "SUM")],
    )
    def test_aggregates(self, helper, name):
        assert str(helper("A1:A10")) == f"={name}(A1:A10)"

    def test_rounding(self):
        assert str(formulas.ceil("B2")) == "=ROUNDUP(B2,0)"
        assert str(formulas.floor("B2", 2)) == "=ROUNDDOWN(B2,2)"
        assert str(formulas.round_value(Address(1, 1), 1)) == "=ROUND(B2,1)"

    def test_cross_sheet_aggregate(self):
        result = formulas.sum_values(Reference("A1:A3", "Other Sheet"))
        assert str(result) == "=SUM('Other Sheet'!A1:A3)"

    def test_vlookup(self):
        result = formulas.vlookup("A1", "D1:F20", 3)
        assert result.expression == "VLOOKUP(A1,D1:F20,3,FALSE)"

    def test_vlookup_approximate_with_literal(self):
        result = formulas.vlookup(42, "D1:E5", 2, exact_match=False)
        assert result.expression == "VLOOKUP(42,D1:E5,2,TRUE)"

    @pytest.mark.parametrize("column_index", [0, 4])
    def test_vlookup_index_outside_table(self, column_index):
        with pytest.raises(ValueError, match="outside"):
            formulas.vlookup("A1", "D1:F20", column_index)
