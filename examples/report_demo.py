"""
Demo script showing the workbook and style functionality.

This script demonstrates:
1. Writing a DataFrame block with a header style
2. Cursor-based writes with the ws shortcut
3. Style deduplication through the workbook's StyleManager
4. Deriving a variant of a shared style without touching other cells
"""

import pandas as pd

from sheetsmith import Workbook, basic_styles, formulas
from sheetsmith.style import Fill, Font, Style
from sheetsmith.utils import to_json, visualize_styles, visualize_worksheet

sales = pd.DataFrame({
    'region': ['north', 'south', 'east', 'west'],
    'units': [120, 85, 42, 77],
    'revenue': [1500.5, 990.0, 410.25, 880.0],
})

# Example 1: DataFrame block
print("=" * 60)
print("Example 1: DataFrame block")
print("=" * 60)

wb = Workbook("Sales")
sheet = wb.current_worksheet
block = sheet.add_dataframe(sales, header_style=basic_styles.border_frame_header())
sheet.set_auto_filter_range(block)
print(f"\nWritten block: {block}")
print(visualize_worksheet(sheet))

# Example 2: Totals row through the shortcut writer
print("\n" + "=" * 60)
print("Example 2: Totals row")
print("=" * 60)

sheet.set_current_cell_address((0, block.end.row + 1))
wb.ws.value("total", basic_styles.bold())
wb.ws.formula(formulas.sum_values("B2:B5"), basic_styles.round_format())
wb.ws.formula(formulas.sum_values("C2:C5"), basic_styles.round_format())
print(visualize_worksheet(sheet))

# Example 3: Deduplication
print("\n" + "=" * 60)
print("Example 3: Style deduplication")
print("=" * 60)

highlight = Style(fill=Fill.solid("FFFFFF00"), font=Font(bold=True))
for address in ("A2", "A3", "A4"):
    sheet.get_cell(address).style = highlight
print(f"\nCells share one style: {sheet.get_cell('A2').style is sheet.get_cell('A4').style}")
print(visualize_styles(wb.style_manager))

# Example 4: Variants leave shared styles untouched
print("\n" + "=" * 60)
print("Example 4: Style variants")
print("=" * 60)

cell = sheet.get_cell("A2")
cell.style = cell.style.with_fill(Fill.solid("FFFF0000"))
print(f"\nA2 fill: {cell.style.fill.foreground_color}")
print(f"A3 fill: {sheet.get_cell('A3').style.fill.foreground_color}")
print(f"\nStyle table as JSON ({len(wb.style_manager)} styles):")
print(to_json(wb.style_manager)[:200] + "...")
