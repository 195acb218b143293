"""Cell alignment / protection facet of a style (the "cellXf" record)."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from sheetsmith.exceptions import FormatError
from sheetsmith.style.component import StyleComponent, coerce_bool, coerce_enum


class HorizontalAlignValue(Enum):
    NONE = "none"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    FILL = "fill"
    JUSTIFY = "justify"
    GENERAL = "general"
    CENTER_CONTINUOUS = "centerContinuous"
    DISTRIBUTED = "distributed"


class VerticalAlignValue(Enum):
    NONE = "none"
    BOTTOM = "bottom"
    TOP = "top"
    CENTER = "center"
    JUSTIFY = "justify"
    DISTRIBUTED = "distributed"


class TextBreakValue(Enum):
    NONE = "none"
    WRAP_TEXT = "wrapText"
    SHRINK_TO_FIT = "shrinkToFit"


class TextDirectionValue(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


# Rotation value the file format uses for vertically stacked text
VERTICAL_TEXT_ROTATION = 255


@dataclass
class CellXf(StyleComponent):
    """Alignment, wrapping, rotation, indentation and protection flags."""

    TAG = "cellxf"

    horizontal_align: HorizontalAlignValue = HorizontalAlignValue.NONE
    vertical_align: VerticalAlignValue = VerticalAlignValue.NONE
    text_break: TextBreakValue = TextBreakValue.NONE
    text_direction: TextDirectionValue = TextDirectionValue.HORIZONTAL
    text_rotation: int = 0
    indent: int = 0
    locked: bool = False
    hidden: bool = False
    force_apply_alignment: bool = False

    @staticmethod
    def _check_horizontal_align(value: Any) -> HorizontalAlignValue:
        return coerce_enum(HorizontalAlignValue, value, "horizontal alignment")

    @staticmethod
    def _check_vertical_align(value: Any) -> VerticalAlignValue:
        return coerce_enum(VerticalAlignValue, value, "vertical alignment")

    @staticmethod
    def _check_text_break(value: Any) -> TextBreakValue:
        return coerce_enum(TextBreakValue, value, "text break")

    @staticmethod
    def _check_text_direction(value: Any) -> TextDirectionValue:
        return coerce_enum(TextDirectionValue, value, "text direction")

    @staticmethod
    def _check_text_rotation(value: Any) -> int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise FormatError(f"Text rotation must be an integer, got {value!r}")
        if not -90 <= value <= 90:
            raise FormatError(f"Text rotation {value} is out of range (-90 to 90 degrees)")
        return value

    @staticmethod
    def _check_indent(value: Any) -> int:
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise FormatError(f"Indent must be a non-negative integer, got {value!r}")
        return value

    @staticmethod
    def _check_locked(value: Any) -> bool:
        return coerce_bool(value, "locked")

    @staticmethod
    def _check_hidden(value: Any) -> bool:
        return coerce_bool(value, "hidden")

    @staticmethod
    def _check_force_apply_alignment(value: Any) -> bool:
        return coerce_bool(value, "force_apply_alignment")

    @property
    def calculated_text_rotation(self) -> int:
        """Rotation in file convention.

        0..90 counter-clockwise stays as is, -1..-90 clockwise maps to
        91..180, vertical text is 255.
        """
        if self.text_direction is TextDirectionValue.VERTICAL:
            return VERTICAL_TEXT_ROTATION
        if self.text_rotation < 0:
            return 90 - self.text_rotation
        return self.text_rotation

    def validate(self) -> None:
        if self.text_direction is TextDirectionValue.VERTICAL and self.text_rotation != 0:
            raise FormatError("Vertical text cannot be rotated; set text_rotation to 0")
