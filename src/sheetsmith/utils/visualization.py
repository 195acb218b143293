"""
Text rendering utilities.

Renders a StyleManager's style table and a worksheet's cell grid as plain
text, which is handy when checking what a document writer will receive.
"""

from typing import List

from ..spreadsheet.address import resolve_column_address
from ..spreadsheet.cell import CellType
from ..spreadsheet.worksheet import Worksheet
from ..style.manager import StyleManager
from ..style.style import Style


def visualize_styles(manager: StyleManager) -> str:
    """Render the style table, one line per canonical style in ordinal order.

    Styles without an explicit name are listed as ``<unnamed>`` instead of
    their (long) hash.
    """
    if not isinstance(manager, StyleManager):
        raise TypeError(f"Expected StyleManager, got {type(manager)}")

    lines = [f"{'#':<4} {'name':<20} facets"]
    for style in manager:
        name = style.name if style.has_explicit_name else "<unnamed>"
        lines.append(f"{style.ordinal:<4} {name:<20} {_summarize(style)}".rstrip())
    return "\n".join(lines)


def _summarize(style: Style) -> str:
    """Describe the facets that differ from their defaults."""
    parts = []
    font = style.font
    flags = [flag for flag in ("bold", "italic", "strike") if getattr(font, flag)]
    if font.underline.value != "none":
        flags.append(f"underline:{font.underline.value}")
    if font.color_value:
        flags.append(f"color:{font.color_value}")
    if not font.is_default_font and not flags:
        flags.append(f"{font.name} {font.size:g}")
    if flags:
        parts.append("font=" + ",".join(flags))
    if style.fill.pattern_fill.value != "none":
        parts.append(f"fill={style.fill.pattern_fill.value}:{style.fill.foreground_color}")
    if not style.border.is_empty:
        parts.append(f"border={style.border.left_style.value}")
    if style.number_format.number.value != 0:
        code = style.number_format.custom_format_code or style.number_format.number.value
        parts.append(f"numfmt={code}")
    xf = style.cell_xf
    if xf.horizontal_align.value != "none" or xf.vertical_align.value != "none":
        parts.append(f"align={xf.horizontal_align.value}/{xf.vertical_align.value}")
    if xf.text_rotation:
        parts.append(f"rotation={xf.text_rotation}")
    return " ".join(parts)


def visualize_worksheet(worksheet: Worksheet, width: int = 10) -> str:
    """Render the used area of a worksheet as a fixed-width text grid.

    Formulas are shown with their leading '=', empty cells as blanks.
    """
    if not isinstance(worksheet, Worksheet):
        raise TypeError(f"Expected Worksheet, got {type(worksheet)}")
    if not worksheet.cells:
        return ""

    cells = list(worksheet.cells.values())
    max_column = max(cell.column for cell in cells)
    max_row = max(cell.row for cell in cells)
    grid = {(cell.column, cell.row): cell for cell in cells}

    header = " " * 6 + "".join(
        f"{resolve_column_address(column):<{width}}" for column in range(max_column + 1)
    )
    lines: List[str] = [header.rstrip()]
    for row in range(max_row + 1):
        line = f"{row + 1:<6}"
        for column in range(max_column + 1):
            cell = grid.get((column, row))
            text = ""
            if cell is not None and cell.data_type is not CellType.EMPTY:
                text = str(cell.value)
            line += f"{text[: width - 1]:<{width}}"
        lines.append(line.rstrip())
    return "\n".join(lines)
