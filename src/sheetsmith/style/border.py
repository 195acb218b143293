"""Border facet of a style."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from sheetsmith.style.colors import validate_color
from sheetsmith.style.component import StyleComponent, coerce_bool, coerce_enum


class BorderStyle(Enum):
    """Line style of a single border edge (file format names as values)."""

    NONE = "none"
    HAIR = "hair"
    DOTTED = "dotted"
    DASH_DOT_DOT = "dashDotDot"
    DASH_DOT = "dashDot"
    DASHED = "dashed"
    THIN = "thin"
    MEDIUM_DASH_DOT_DOT = "mediumDashDotDot"
    SLANT_DASH_DOT = "slantDashDot"
    MEDIUM_DASH_DOT = "mediumDashDot"
    MEDIUM_DASHED = "mediumDashed"
    MEDIUM = "medium"
    THICK = "thick"
    DOUBLE = "double"


def _edge_style(value: Any) -> BorderStyle:
    return coerce_enum(BorderStyle, value, "border style")


def _edge_color(value: Any) -> str:
    return validate_color(value, use_alpha=True, allow_empty=True)


@dataclass
class Border(StyleComponent):
    """Style and color of each cell edge plus the diagonal.

    An empty color means the automatic (default) color.
    """

    TAG = "border"

    left_style: BorderStyle = BorderStyle.NONE
    right_style: BorderStyle = BorderStyle.NONE
    top_style: BorderStyle = BorderStyle.NONE
    bottom_style: BorderStyle = BorderStyle.NONE
    diagonal_style: BorderStyle = BorderStyle.NONE
    left_color: str = ""
    right_color: str = ""
    top_color: str = ""
    bottom_color: str = ""
    diagonal_color: str = ""
    diagonal_up: bool = False
    diagonal_down: bool = False

    _check_left_style = staticmethod(_edge_style)
    _check_right_style = staticmethod(_edge_style)
    _check_top_style = staticmethod(_edge_style)
    _check_bottom_style = staticmethod(_edge_style)
    _check_diagonal_style = staticmethod(_edge_style)
    _check_left_color = staticmethod(_edge_color)
    _check_right_color = staticmethod(_edge_color)
    _check_top_color = staticmethod(_edge_color)
    _check_bottom_color = staticmethod(_edge_color)
    _check_diagonal_color = staticmethod(_edge_color)

    @staticmethod
    def _check_diagonal_up(value: Any) -> bool:
        return coerce_bool(value, "diagonal_up")

    @staticmethod
    def _check_diagonal_down(value: Any) -> bool:
        return coerce_bool(value, "diagonal_down")

    @property
    def is_empty(self) -> bool:
        """True if no edge has a style or color."""
        return self == Border()

    def set_frame(self, style: BorderStyle, color: str = "") -> None:
        """Apply the same style and color to the four outer edges."""
        for edge in ("left", "right", "top", "bottom"):
            setattr(self, f"{edge}_style", style)
            setattr(self, f"{edge}_color", color)
