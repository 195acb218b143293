"""Font facet of a style."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from sheetsmith.conf import DEFAULT_FONT, MAX_FONT_SIZE, MIN_FONT_SIZE
from sheetsmith.exceptions import FormatError
from sheetsmith.style.colors import validate_color
from sheetsmith.style.component import StyleComponent, coerce_bool, coerce_enum


class UnderlineValue(Enum):
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"
    SINGLE_ACCOUNTING = "singleAccounting"
    DOUBLE_ACCOUNTING = "doubleAccounting"


class FontVerticalAlignValue(Enum):
    NONE = "none"
    SUBSCRIPT = "subscript"
    SUPERSCRIPT = "superscript"


class SchemeValue(Enum):
    MAJOR = "major"
    MINOR = "minor"
    NONE = "none"


@dataclass
class Font(StyleComponent):
    """Typeface, size, emphasis and color of the cell text.

    ``color_value`` is an ARGB color; when empty the theme color
    ``color_theme`` applies.
    """

    TAG = "font"

    name: str = DEFAULT_FONT["name"]
    size: float = DEFAULT_FONT["size"]
    family: str = DEFAULT_FONT["family"]
    bold: bool = False
    italic: bool = False
    strike: bool = False
    underline: UnderlineValue = UnderlineValue.NONE
    vertical_align: FontVerticalAlignValue = FontVerticalAlignValue.NONE
    color_theme: int = DEFAULT_FONT["color_theme"]
    color_value: str = ""
    scheme: SchemeValue = SchemeValue.MINOR
    charset: str = ""

    @staticmethod
    def _check_name(value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise FormatError(f"Font name must be a non-empty string, got {value!r}")
        return value

    @staticmethod
    def _check_size(value: Any) -> float:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise FormatError(f"Font size must be a number, got {value!r}")
        if not MIN_FONT_SIZE <= value <= MAX_FONT_SIZE:
            raise FormatError(
                f"Font size {value} is out of range ({MIN_FONT_SIZE:g} to {MAX_FONT_SIZE:g})"
            )
        return float(value)

    @staticmethod
    def _check_family(value: Any) -> str:
        if not isinstance(value, str):
            raise FormatError(f"Font family must be a string, got {value!r}")
        return value

    @staticmethod
    def _check_bold(value: Any) -> bool:
        return coerce_bool(value, "bold")

    @staticmethod
    def _check_italic(value: Any) -> bool:
        return coerce_bool(value, "italic")

    @staticmethod
    def _check_strike(value: Any) -> bool:
        return coerce_bool(value, "strike")

    @staticmethod
    def _check_underline(value: Any) -> UnderlineValue:
        return coerce_enum(UnderlineValue, value, "underline")

    @staticmethod
    def _check_vertical_align(value: Any) -> FontVerticalAlignValue:
        return coerce_enum(FontVerticalAlignValue, value, "vertical alignment")

    @staticmethod
    def _check_color_theme(value: Any) -> int:
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise FormatError(f"Theme color must be a non-negative integer, got {value!r}")
        return value

    @staticmethod
    def _check_color_value(value: Any) -> str:
        return validate_color(value, use_alpha=True, allow_empty=True)

    @staticmethod
    def _check_scheme(value: Any) -> SchemeValue:
        return coerce_enum(SchemeValue, value, "font scheme")

    @staticmethod
    def _check_charset(value: Any) -> str:
        if not isinstance(value, str):
            raise FormatError(f"Charset must be a string, got {value!r}")
        return value

    @property
    def is_default_font(self) -> bool:
        return self == Font()
