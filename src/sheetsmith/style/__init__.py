"""
Style model.

This module provides the five style facets, the Style aggregate composing
them, and the workbook-scoped StyleManager that deduplicates styles by
content hash.
"""

from sheetsmith.style import basic_styles
from sheetsmith.style.border import Border, BorderStyle
from sheetsmith.style.cell_xf import (
    CellXf,
    HorizontalAlignValue,
    TextBreakValue,
    TextDirectionValue,
    VerticalAlignValue,
)
from sheetsmith.style.colors import validate_color
from sheetsmith.style.fill import Fill, FillType, PatternValue
from sheetsmith.style.font import Font, FontVerticalAlignValue, SchemeValue, UnderlineValue
from sheetsmith.style.manager import StyleManager
from sheetsmith.style.number_format import FormatNumber, NumberFormat
from sheetsmith.style.style import FACET_ORDER, Style

__all__ = [
    "basic_styles",
    "Border",
    "BorderStyle",
    "CellXf",
    "HorizontalAlignValue",
    "VerticalAlignValue",
    "TextBreakValue",
    "TextDirectionValue",
    "Fill",
    "FillType",
    "PatternValue",
    "Font",
    "FontVerticalAlignValue",
    "SchemeValue",
    "UnderlineValue",
    "FormatNumber",
    "NumberFormat",
    "Style",
    "StyleManager",
    "FACET_ORDER",
    "validate_color",
]
