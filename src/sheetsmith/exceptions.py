"""
Exception classes for sheetsmith.

These exceptions are used throughout the sheetsmith package to signal invalid
addresses, invalid formatting values and misuse of the style model. Every
failure is deterministic given the same input, so none of them is retried.
"""


class SheetsmithError(Exception):
    """Base class of every error raised by sheetsmith."""
    pass


class RangeError(SheetsmithError):
    """Raised when a cell address or range is invalid.

    Examples:
        - Column outside 0..16383 or row outside 0..1048575
        - Malformed address text such as "A0", "1A" or "A1:"
        - A value list that does not fit the target range
        - A merged range overlapping an existing merged range
    """
    pass


class FormatError(SheetsmithError):
    """Raised when a style facet receives an invalid value.

    The error is raised at the point of assignment so that invalid state never
    reaches a StyleManager. Examples:
        - Malformed ARGB color ("FF00ZZ00")
        - Font size outside 1..409
        - Text rotation outside -90..90
        - Custom number format id below 164
    """
    pass


class StyleError(SheetsmithError):
    """Raised when the style model is misused.

    The typical case is an attempt to mutate a registered style (or one of its
    facets) in place. Registered styles are shared by every cell that uses
    them; use the ``with_*`` methods or ``copy()`` to derive a variant.
    """
    pass


class MissingReferenceError(StyleError):
    """Raised when a style is hashed, copied or registered with a missing facet."""
    pass


class WorksheetError(SheetsmithError):
    """Raised for invalid worksheet names and unknown worksheets or cells."""
    pass


class UnsupportedDataTypeError(SheetsmithError):
    """Raised when a cell value has a type that cannot be stored in a cell."""
    pass
