"""Color value validation shared by the style facets."""

import re

from sheetsmith.exceptions import FormatError

_HEX_PATTERN = re.compile(r"^[0-9A-F]+$")


def validate_color(value: str, use_alpha: bool = True, allow_empty: bool = False) -> str:
    """Validate a hex color and return it upper-cased.

    Args:
        value: Hex color, "FF22FF11" (ARGB) or "22FF11" (RGB)
        use_alpha: Expect 8 digits (ARGB) instead of 6 (RGB)
        allow_empty: Accept None or "" (automatic color), returned as ""

    Raises:
        FormatError: If the value is not a well-formed hex color
    """
    if value is None or value == "":
        if allow_empty:
            return ""
        raise FormatError("The color value must not be empty")
    if not isinstance(value, str):
        raise FormatError(f"The color value must be a string, got {value!r}")
    normalized = value.strip().upper()
    expected = 8 if use_alpha else 6
    if len(normalized) != expected:
        raise FormatError(
            f"The color {value!r} must have {expected} hex digits "
            f"({'ARGB' if use_alpha else 'RGB'})"
        )
    if not _HEX_PATTERN.match(normalized):
        raise FormatError(f"The color {value!r} contains non-hex characters")
    return normalized
