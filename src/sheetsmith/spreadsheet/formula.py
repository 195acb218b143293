"""
Formula construction helpers.

This module builds formula text for cells; nothing here evaluates formulas:
- Formula: A cell formula expression (e.g., =SUM(A1:A10))
- Reference: Cell/range reference for use in formulas, optionally cross-sheet
- average, ceil, floor, ...: shortcuts for common functions
"""

import re
from typing import Optional, Union

from sheetsmith.spreadsheet.address import Address
from sheetsmith.spreadsheet.range import Range

_PLAIN_SHEET_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_.]*$")


class Formula:
    """Represents a cell formula expression.

    The expression may be given with or without the leading '='; the stored
    form never carries it, which is how it is written into a cell.

    Attributes:
        expression: The formula expression string without '='
    """

    def __init__(self, expression: str) -> None:
        if not isinstance(expression, str):
            raise ValueError("Formula expression must be a string")
        expression = expression.strip()
        if expression.startswith("="):
            expression = expression[1:].lstrip()
        if not expression:
            raise ValueError("Formula expression must not be empty")
        self.expression = expression

    def __str__(self) -> str:
        return f"={self.expression}"

    def __repr__(self) -> str:
        return f"Formula({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Formula):
            return NotImplemented
        return self.expression == other.expression

    def __hash__(self) -> int:
        return hash(self.expression)


RangeLike = Union[Range, Address, str]


class Reference:
    """Represents a cell or range reference for use in formulas.

    A Reference can be:
    - Same-sheet: A1:B10
    - Cross-sheet: Sheet2!A1:B10, or 'My Sheet'!A1:B10 when quoting is needed

    Attributes:
        target: The referenced Range or Address
        sheet_name: Optional sheet name for cross-sheet references
    """

    def __init__(self, target: RangeLike, sheet_name: Optional[str] = None) -> None:
        if isinstance(target, (Range, Address)):
            self.target = target
        elif isinstance(target, str):
            text = target.strip()
            self.target = Range.parse(text) if ":" in text else Address.parse(text)
        else:
            raise ValueError("target must be a Range, Address or string")
        self.sheet_name = sheet_name.strip() if sheet_name else None

    def to_string(self) -> str:
        if self.sheet_name:
            if _PLAIN_SHEET_NAME.match(self.sheet_name):
                return f"{self.sheet_name}!{self.target}"
            escaped = self.sheet_name.replace("'", "''")
            return f"'{escaped}'!{self.target}"
        return str(self.target)

    def is_cross_sheet(self) -> bool:
        return self.sheet_name is not None

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self.sheet_name:
            return f"Reference({str(self.target)!r}, sheet_name={self.sheet_name!r})"
        return f"Reference({str(self.target)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reference):
            return NotImplemented
        return self.target == other.target and self.sheet_name == other.sheet_name


def _ref(target: Union[RangeLike, Reference]) -> str:
    if isinstance(target, Reference):
        return target.to_string()
    return Reference(target).to_string()


def average(target: Union[RangeLike, Reference]) -> Formula:
    return Formula(f"AVERAGE({_ref(target)})")


def ceil(target: Union[Address, str, Reference], decimals: int = 0) -> Formula:
    return Formula(f"ROUNDUP({_ref(target)},{decimals})")


def floor(target: Union[Address, str, Reference], decimals: int = 0) -> Formula:
    return Formula(f"ROUNDDOWN({_ref(target)},{decimals})")


def round_value(target: Union[Address, str, Reference], decimals: int = 0) -> Formula:
    return Formula(f"ROUND({_ref(target)},{decimals})")


def max_value(target: Union[RangeLike, Reference]) -> Formula:
    return Formula(f"MAX({_ref(target)})")


def min_value(target: Union[RangeLike, Reference]) -> Formula:
    return Formula(f"MIN({_ref(target)})")


def median(target: Union[RangeLike, Reference]) -> Formula:
    return Formula(f"MEDIAN({_ref(target)})")


def sum_values(target: Union[RangeLike, Reference]) -> Formula:
    return Formula(f"SUM({_ref(target)})")


def vlookup(
    lookup: Union[Address, str, Reference, int, float],
    table: Union[RangeLike, Reference],
    column_index: int,
    exact_match: bool = True,
) -> Formula:
    """Build a VLOOKUP formula.

    Args:
        lookup: Cell reference holding the lookup value, or a literal number
        table: Range to search; its first column is matched
        column_index: 1-based column of ``table`` to return
        exact_match: FALSE-style exact matching (default) or approximate

    Raises:
        ValueError: If column_index is outside the table width
    """
    table_ref = table if isinstance(table, Reference) else Reference(table)
    width = table_ref.target.width if isinstance(table_ref.target, Range) else 1
    if not 1 <= column_index <= width:
        raise ValueError(
            f"Column index {column_index} is outside the lookup table (1 to {width})"
        )
    if isinstance(lookup, (int, float)) and not isinstance(lookup, bool):
        lookup_text = repr(lookup) if isinstance(lookup, float) else str(lookup)
    else:
        lookup_text = _ref(lookup)
    match = "FALSE" if exact_match else "TRUE"
    return Formula(f"VLOOKUP({lookup_text},{table_ref},{column_index},{match})")
