"""Fill facet of a style."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from sheetsmith.conf import DEFAULT_COLOR, DEFAULT_INDEXED_COLOR
from sheetsmith.exceptions import FormatError
from sheetsmith.style.colors import validate_color
from sheetsmith.style.component import StyleComponent, coerce_enum


class PatternValue(Enum):
    """Pattern of a cell fill (file format names as values)."""

    NONE = "none"
    SOLID = "solid"
    DARK_GRAY = "darkGray"
    MEDIUM_GRAY = "mediumGray"
    LIGHT_GRAY = "lightGray"
    GRAY_0625 = "gray0625"
    GRAY_125 = "gray125"


class FillType(Enum):
    """Which color set_color() assigns."""

    FILL_COLOR = "fill_color"
    PATTERN_COLOR = "pattern_color"


def _color(value: Any) -> str:
    return validate_color(value, use_alpha=True)


@dataclass
class Fill(StyleComponent):
    """Background pattern and colors of a cell."""

    TAG = "fill"

    pattern_fill: PatternValue = PatternValue.NONE
    foreground_color: str = DEFAULT_COLOR
    background_color: str = DEFAULT_COLOR
    indexed_color: int = DEFAULT_INDEXED_COLOR

    _check_foreground_color = staticmethod(_color)
    _check_background_color = staticmethod(_color)

    @staticmethod
    def _check_pattern_fill(value: Any) -> PatternValue:
        return coerce_enum(PatternValue, value, "pattern fill")

    @staticmethod
    def _check_indexed_color(value: Any) -> int:
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise FormatError(f"Indexed color must be a non-negative integer, got {value!r}")
        return value

    @classmethod
    def solid(cls, color: str) -> "Fill":
        """A solid fill with the given ARGB foreground color."""
        fill = cls()
        fill.set_color(color, FillType.FILL_COLOR)
        return fill

    def set_color(self, value: str, fill_type: FillType = FillType.FILL_COLOR) -> None:
        """Set the fill or pattern color and switch the pattern to solid.

        FILL_COLOR sets the foreground and resets the background to the
        default color; PATTERN_COLOR sets the background only.
        """
        color = validate_color(value, use_alpha=True)
        if coerce_enum(FillType, fill_type, "fill type") is FillType.FILL_COLOR:
            self.foreground_color = color
            self.background_color = DEFAULT_COLOR
        else:
            self.background_color = color
        self.pattern_fill = PatternValue.SOLID
