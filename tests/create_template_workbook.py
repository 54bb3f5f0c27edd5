"""
Create a sample invoice template for testing the template renderer.

The workbook has:
- Invoice: a title field, an $Each block over ``items`` with a styled
  template row, and a footer row with a total field
- Notes: a single title field
"""

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill

ITEM_FILL = PatternFill(start_color="FFFFFF00", end_color="FFFFFF00", fill_type="solid")
ITEM_FONT = Font(bold=True, color="FF0000FF")

INVOICE_MODEL = {
    "title": "Invoice",
    "items": [
        {"name": "Pen", "price": 1.5},
        {"name": "Cup", "price": 3},
    ],
    "total": 4.5,
}


def build_invoice_sheet(ws):
    """Write the invoice template onto *ws* and return it."""
    ws["A1"] = "$F{title}"
    ws["A2"] = "$Each{items}"
    ws["A3"] = "$F{name}"
    ws["B3"] = "$F{price}"
    for coord in ("A3", "B3"):
        ws[coord].font = ITEM_FONT
        ws[coord].fill = ITEM_FILL
    ws["B3"].number_format = "0.00"
    ws["A4"] = "Total"
    ws["B4"] = "$F{total}"
    return ws


def create_template_workbook(output_path):
    """Create the two-sheet invoice template at *output_path*."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Invoice"
    build_invoice_sheet(ws)

    notes = wb.create_sheet("Notes")
    notes["A1"] = "$F{title}"

    wb.save(output_path)
    wb.close()
    return output_path
