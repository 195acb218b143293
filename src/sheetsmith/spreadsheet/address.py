"""
Cell address model.

This module converts between textual A1 references ("B3", "$B$3") and
zero-based (column, row) coordinates:
- ReferenceType: which parts of a reference are fixed ($ markers)
- Address: a validated, immutable cell coordinate
- resolve_* helpers: the column-letter codec and A1 formatting/parsing

IMPORTANT: Addresses are 0-indexed internally (column 0 = "A", row 0 = "1"),
while the A1 text form uses 1-based rows.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from sheetsmith.conf import MAX_COLUMN, MAX_ROW, MIN_COLUMN, MIN_ROW
from sheetsmith.exceptions import RangeError

_CELL_PATTERN = re.compile(r"^(\$?)([A-Z]{1,3})(\$?)([0-9]{1,7})$")
_COLUMN_PATTERN = re.compile(r"^[A-Z]{1,3}$")


class ReferenceType(Enum):
    """Referencing type of an address (relative or absolute parts)."""

    DEFAULT = "default"
    FIXED_ROW = "fixed_row"
    FIXED_COLUMN = "fixed_column"
    FIXED_BOTH = "fixed_both"

    @property
    def fixed_column(self) -> bool:
        return self in (ReferenceType.FIXED_COLUMN, ReferenceType.FIXED_BOTH)

    @property
    def fixed_row(self) -> bool:
        return self in (ReferenceType.FIXED_ROW, ReferenceType.FIXED_BOTH)

    @classmethod
    def from_markers(cls, fixed_column: bool, fixed_row: bool) -> "ReferenceType":
        if fixed_column and fixed_row:
            return cls.FIXED_BOTH
        if fixed_column:
            return cls.FIXED_COLUMN
        if fixed_row:
            return cls.FIXED_ROW
        return cls.DEFAULT


def validate_column_number(column: int) -> None:
    """Raise RangeError if column is outside 0..16383."""
    if not isinstance(column, int) or isinstance(column, bool):
        raise RangeError(f"Column number must be an integer, got {column!r}")
    if column < MIN_COLUMN or column > MAX_COLUMN:
        raise RangeError(
            f"The column number ({column}) is out of range. "
            f"Range is from {MIN_COLUMN} to {MAX_COLUMN} ({MAX_COLUMN + 1} columns)."
        )


def validate_row_number(row: int) -> None:
    """Raise RangeError if row is outside 0..1048575."""
    if not isinstance(row, int) or isinstance(row, bool):
        raise RangeError(f"Row number must be an integer, got {row!r}")
    if row < MIN_ROW or row > MAX_ROW:
        raise RangeError(
            f"The row number ({row}) is out of range. "
            f"Range is from {MIN_ROW} to {MAX_ROW} ({MAX_ROW + 1} rows)."
        )


def resolve_column_address(column: int) -> str:
    """Convert a column number (0-indexed) to letter(s) for A1 notation.

    The codec is bijective base-26 without a zero digit, so every position is
    shifted by one: 0 = A, 25 = Z, 26 = AA, 701 = ZZ, 702 = AAA.

    Args:
        column: Column number (0-indexed)

    Returns:
        Column letter(s) in A1 notation

    Raises:
        RangeError: If the column is out of range
    """
    validate_column_number(column)
    remaining = column + 1
    letters = ""
    while remaining > 0:
        remaining -= 1
        letters = chr(65 + (remaining % 26)) + letters
        remaining //= 26
    return letters


def resolve_column(letters: str) -> int:
    """Convert column letter(s) to a column number (0-indexed).

    Args:
        letters: Column letter(s) in A1 notation (A, Z, AA, ...), any case

    Returns:
        Column number (A = 0, Z = 25, AA = 26, ...)

    Raises:
        RangeError: If the letters are malformed or beyond column XFD
    """
    if not isinstance(letters, str):
        raise RangeError(f"Column address must be a string, got {letters!r}")
    normalized = letters.strip().upper()
    if not _COLUMN_PATTERN.match(normalized):
        raise RangeError(f"Invalid column address: {letters!r}")
    column = 0
    for char in normalized:
        column = column * 26 + (ord(char) - 64)
    column -= 1
    validate_column_number(column)
    return column


def resolve_cell_address(
    column: int, row: int, reference_type: ReferenceType = ReferenceType.DEFAULT
) -> str:
    """Format zero-based coordinates as A1 text, with $ markers if fixed."""
    validate_row_number(row)
    letters = resolve_column_address(column)
    column_marker = "$" if reference_type.fixed_column else ""
    row_marker = "$" if reference_type.fixed_row else ""
    return f"{column_marker}{letters}{row_marker}{row + 1}"


def resolve_cell_coordinate(text: str) -> "Address":
    """Parse A1 text ("B3", "$B$3", "b$3") into an Address.

    Raises:
        RangeError: If the text is malformed or out of range. Row digits are
            1-based, so "A0" is invalid.
    """
    if not isinstance(text, str):
        raise RangeError(f"Address must be a string, got {text!r}")
    match = _CELL_PATTERN.match(text.strip().upper())
    if not match:
        raise RangeError(f"Invalid cell address: {text!r}")
    column_marker, letters, row_marker, digits = match.groups()
    row = int(digits) - 1
    if row < MIN_ROW:
        raise RangeError(f"Invalid cell address: {text!r} (rows start at 1)")
    return Address(
        resolve_column(letters),
        row,
        ReferenceType.from_markers(bool(column_marker), bool(row_marker)),
    )


@dataclass(frozen=True)
class Address:
    """A single cell coordinate.

    Attributes:
        column: Column (0-indexed, 0..16383)
        row: Row (0-indexed, 0..1048575)
        reference_type: Which parts are fixed; ignored by equality and hashing
    """

    column: int
    row: int
    reference_type: ReferenceType = field(default=ReferenceType.DEFAULT, compare=False)

    def __post_init__(self) -> None:
        validate_column_number(self.column)
        validate_row_number(self.row)
        if not isinstance(self.reference_type, ReferenceType):
            raise RangeError(f"Invalid reference type: {self.reference_type!r}")

    @classmethod
    def parse(cls, text: str, reference_type: Optional[ReferenceType] = None) -> "Address":
        """Parse A1 text; an explicit reference_type overrides the $ markers."""
        address = resolve_cell_coordinate(text)
        if reference_type is not None:
            return cls(address.column, address.row, reference_type)
        return address

    @classmethod
    def coerce(cls, value: Union["Address", str, Tuple[int, int]]) -> "Address":
        """Accept an Address, A1 text or a (column, row) tuple."""
        if isinstance(value, Address):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, tuple) and len(value) == 2:
            return cls(value[0], value[1])
        raise RangeError(f"Cannot interpret {value!r} as a cell address")

    @property
    def column_letters(self) -> str:
        """Column part of the address (A..XFD)."""
        return resolve_column_address(self.column)

    @property
    def sort_key(self) -> Tuple[int, int]:
        """Total order key (row, then column)."""
        return (self.row, self.column)

    def to_a1(self) -> str:
        return resolve_cell_address(self.column, self.row, self.reference_type)

    def compare_to(self, other: "Address") -> int:
        """Compare two addresses the way the cell model always has.

        Returns 0 if equal, -1 if this address is neither right of nor below
        the other, +1 otherwise. This is NOT a total order: (2, 0) and (0, 2)
        both report +1 against each other. Use ``sort_key`` for sorting.
        """
        if self == other:
            return 0
        if self.column <= other.column and self.row <= other.row:
            return -1
        return 1

    def __str__(self) -> str:
        return self.to_a1()

    def __repr__(self) -> str:
        return f"Address({self.to_a1()!r})"
