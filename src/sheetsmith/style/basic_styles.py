"""
Built-in styles.

The first block of styles of every StyleManager. Each factory returns a fresh
free Style carrying a fixed internal id, which is part of its hash; a fresh
manager registers them in this order, so their ordinals equal their internal
ids in every workbook. Resolving a factory result against a manager returns
the pre-registered canonical instance.
"""

from typing import Callable, Tuple

from sheetsmith.style.border import BorderStyle
from sheetsmith.style.cell_xf import HorizontalAlignValue, VerticalAlignValue
from sheetsmith.style.colors import validate_color
from sheetsmith.style.fill import Fill, PatternValue
from sheetsmith.style.font import Font, UnderlineValue
from sheetsmith.style.number_format import FormatNumber
from sheetsmith.style.style import Style


def default() -> Style:
    return Style.builtin("default", 0)


def dotted_fill_0_125() -> Style:
    style = Style.builtin("dottedFill_0_125", 1)
    style.fill.pattern_fill = PatternValue.GRAY_125
    return style


def bold() -> Style:
    style = Style.builtin("bold", 2)
    style.font.bold = True
    return style


def italic() -> Style:
    style = Style.builtin("italic", 3)
    style.font.italic = True
    return style


def bold_italic() -> Style:
    style = Style.builtin("boldItalic", 4)
    style.font.bold = True
    style.font.italic = True
    return style


def underline() -> Style:
    style = Style.builtin("underline", 5)
    style.font.underline = UnderlineValue.SINGLE
    return style


def double_underline() -> Style:
    style = Style.builtin("doubleUnderline", 6)
    style.font.underline = UnderlineValue.DOUBLE
    return style


def strike() -> Style:
    style = Style.builtin("strike", 7)
    style.font.strike = True
    return style


def date_format() -> Style:
    style = Style.builtin("dateFormat", 8)
    style.number_format.number = FormatNumber.FORMAT_14
    return style


def time_format() -> Style:
    style = Style.builtin("timeFormat", 9)
    style.number_format.number = FormatNumber.FORMAT_21
    return style


def round_format() -> Style:
    style = Style.builtin("roundFormat", 10)
    style.number_format.number = FormatNumber.FORMAT_1
    return style


def border_frame() -> Style:
    style = Style.builtin("borderFrame", 11)
    style.border.set_frame(BorderStyle.THIN)
    return style


def border_frame_header() -> Style:
    style = Style.builtin("borderFrameHeader", 12)
    style.border.set_frame(BorderStyle.THIN)
    style.font.bold = True
    return style


def merge_cell_style() -> Style:
    style = Style.builtin("mergeCellStyle", 13)
    style.cell_xf.force_apply_alignment = True
    style.cell_xf.horizontal_align = HorizontalAlignValue.CENTER
    style.cell_xf.vertical_align = VerticalAlignValue.CENTER
    return style


BASIC_STYLES: Tuple[Callable[[], Style], ...] = (
    default,
    dotted_fill_0_125,
    bold,
    italic,
    bold_italic,
    underline,
    double_underline,
    strike,
    date_format,
    time_format,
    round_format,
    border_frame,
    border_frame_header,
    merge_cell_style,
)


# User style shortcuts (no internal id; deduplicated like any user style)

def colorized_text(rgb: str) -> Style:
    """Text in the given RGB color ("FF0000")."""
    style = Style()
    style.font.color_value = "FF" + validate_color(rgb, use_alpha=False)
    return style


def colorized_background(rgb: str) -> Style:
    """Solid background in the given RGB color ("FFFF00")."""
    return Style(fill=Fill.solid("FF" + validate_color(rgb, use_alpha=False)))


def font(name: str, size: float = 11.0, is_bold: bool = False, is_italic: bool = False) -> Style:
    return Style(font=Font(name=name, size=size, bold=is_bold, italic=is_italic))
