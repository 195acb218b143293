"""
Cell range model.

A Range is a rectangular block of cells described by two Addresses. The
corners are normalized on construction so that ``start`` is always the
top-left and ``end`` the bottom-right cell, whatever order the caller gave
them in. Bulk cell writes, merges, selections and auto-filters all consume
the normalized rectangle.
"""

from enum import Enum
from typing import Iterator, Optional, Union

from sheetsmith.conf import MAX_COLUMN, MAX_ROW
from sheetsmith.exceptions import RangeError
from sheetsmith.spreadsheet.address import Address, ReferenceType


class CellDirection(Enum):
    """Direction in which consecutive cells are filled.

    COLUMN_TO_COLUMN fills along a row (row-major), ROW_TO_ROW fills down a
    column (column-major), DISABLED keeps the cursor where it is.
    """

    COLUMN_TO_COLUMN = "column_to_column"
    ROW_TO_ROW = "row_to_row"
    DISABLED = "disabled"


AddressLike = Union[Address, str]


class Range:
    """Represents a normalized rectangular cell region.

    Attributes:
        start: Top-left address
        end: Bottom-right address
    """

    __slots__ = ("start", "end")

    def __init__(self, start: AddressLike, end: AddressLike) -> None:
        """Initialize a Range from two corners in any order.

        Args:
            start: First corner (Address or A1 text)
            end: Opposite corner (Address or A1 text)

        Raises:
            RangeError: If either corner is invalid
        """
        first = Address.coerce(start)
        second = Address.coerce(end)
        # Each axis keeps the $ marker of the input that supplied its coordinate
        low_col, high_col = (first, second) if first.column <= second.column else (second, first)
        low_row, high_row = (first, second) if first.row <= second.row else (second, first)
        self.start = Address(
            low_col.column,
            low_row.row,
            ReferenceType.from_markers(
                low_col.reference_type.fixed_column, low_row.reference_type.fixed_row
            ),
        )
        self.end = Address(
            high_col.column,
            high_row.row,
            ReferenceType.from_markers(
                high_col.reference_type.fixed_column, high_row.reference_type.fixed_row
            ),
        )

    @classmethod
    def parse(cls, text: str) -> "Range":
        """Parse a colon-joined pair such as "A1:C3" or "$A$1:B2".

        Raises:
            RangeError: If the text is not exactly two valid addresses
        """
        if not isinstance(text, str):
            raise RangeError(f"Range must be a string, got {text!r}")
        parts = text.strip().split(":")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise RangeError(f"Invalid range notation: {text!r}")
        return cls(Address.parse(parts[0]), Address.parse(parts[1]))

    @classmethod
    def coerce(cls, value: Union["Range", str]) -> "Range":
        if isinstance(value, Range):
            return value
        return cls.parse(value)

    @property
    def width(self) -> int:
        return self.end.column - self.start.column + 1

    @property
    def height(self) -> int:
        return self.end.row - self.start.row + 1

    @property
    def is_single_cell(self) -> bool:
        return self.start == self.end

    def contains(self, address: AddressLike) -> bool:
        """Check whether an address lies inside the range (corners inclusive)."""
        target = Address.coerce(address)
        return (
            self.start.column <= target.column <= self.end.column
            and self.start.row <= target.row <= self.end.row
        )

    def addresses(
        self, direction: CellDirection = CellDirection.COLUMN_TO_COLUMN
    ) -> Iterator[Address]:
        """Enumerate the contained addresses.

        Args:
            direction: COLUMN_TO_COLUMN walks each row left to right before
                moving down (row-major); ROW_TO_ROW walks each column top to
                bottom before moving right (column-major). DISABLED is
                treated as row-major.

        Yields:
            Addresses with the default reference type
        """
        if direction is CellDirection.ROW_TO_ROW:
            for column in range(self.start.column, self.end.column + 1):
                for row in range(self.start.row, self.end.row + 1):
                    yield Address(column, row)
        else:
            for row in range(self.start.row, self.end.row + 1):
                for column in range(self.start.column, self.end.column + 1):
                    yield Address(column, row)

    def intersect(self, other: "Range") -> Optional["Range"]:
        """Compute the intersection of two ranges.

        Returns:
            New Range representing the overlap, or None if there is none
        """
        column_start = max(self.start.column, other.start.column)
        row_start = max(self.start.row, other.start.row)
        column_end = min(self.end.column, other.end.column)
        row_end = min(self.end.row, other.end.row)

        if column_start > column_end or row_start > row_end:
            return None
        return Range(Address(column_start, row_start), Address(column_end, row_end))

    def union(self, other: "Range") -> "Range":
        """Compute the bounding box of two ranges."""
        return Range(
            Address(
                min(self.start.column, other.start.column),
                min(self.start.row, other.start.row),
            ),
            Address(
                max(self.end.column, other.end.column),
                max(self.end.row, other.end.row),
            ),
        )

    def offset(self, rows: int = 0, columns: int = 0) -> "Range":
        """Create a new Range moved by the given amounts.

        Raises:
            RangeError: If the moved range leaves the grid
        """
        return Range(
            Address(self.start.column + columns, self.start.row + rows),
            Address(self.end.column + columns, self.end.row + rows),
        )

    def expand(self, rows: int = 0, columns: int = 0) -> "Range":
        """Create a new Range with its bottom-right corner moved outwards.

        Raises:
            RangeError: If the expansion would shrink the range past its
                top-left corner or leave the grid
        """
        row_end = self.end.row + rows
        column_end = self.end.column + columns
        if row_end < self.start.row or column_end < self.start.column:
            raise RangeError("Expansion results in invalid range")
        if row_end > MAX_ROW or column_end > MAX_COLUMN:
            raise RangeError("Expansion exceeds the worksheet grid")
        return Range(self.start, Address(column_end, row_end))

    def to_a1(self) -> str:
        return f"{self.start.to_a1()}:{self.end.to_a1()}"

    def with_reference_type(self, reference_type: ReferenceType) -> "Range":
        """Return the same rectangle with both corners using reference_type."""
        return Range(
            Address(self.start.column, self.start.row, reference_type),
            Address(self.end.column, self.end.row, reference_type),
        )

    def __contains__(self, address: object) -> bool:
        if not isinstance(address, (Address, str)):
            return False
        return self.contains(address)

    def __iter__(self) -> Iterator[Address]:
        return self.addresses()

    def __len__(self) -> int:
        return self.width * self.height

    def __str__(self) -> str:
        return self.to_a1()

    def __repr__(self) -> str:
        return f"Range({self.to_a1()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return self.start == other.start and self.end == other.end

    def __hash__(self) -> int:
        return hash((self.start, self.end))
