"""
Cell grid access used by the renderer.

:class:`CellGrid` is the small contract the expander needs; any
spreadsheet backend can provide it.  :class:`WorksheetGrid` is the
openpyxl implementation.  Rows and columns are 1-based.
"""

from copy import copy
from typing import Any, Protocol

from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet


class CellGrid(Protocol):
    def highest_row(self) -> int: ...

    def highest_column(self) -> int: ...

    def cell(self, col: int, row: int) -> Any: ...

    def insert_row_before(self, row: int, count: int = 1) -> None: ...

    def remove_row(self, row: int) -> None: ...

    def style_of(self, col: int, row: int) -> Any: ...

    def clone_style(self, style: Any, coordinate: str) -> None: ...


class WorksheetGrid:
    """:class:`CellGrid` over an openpyxl worksheet, mutated in place."""

    def __init__(self, ws: Worksheet):
        self.ws = ws

    def highest_row(self) -> int:
        return self.ws.max_row

    def highest_column(self) -> int:
        return self.ws.max_column

    def cell(self, col: int, row: int):
        return self.ws.cell(row=row, column=col)

    def insert_row_before(self, row: int, count: int = 1) -> None:
        self.ws.insert_rows(row, count)

    def remove_row(self, row: int) -> None:
        self.ws.delete_rows(row, 1)

    def style_of(self, col: int, row: int):
        # The source cell itself is the style handle; only its style
        # attributes are read when cloning.
        return self.ws.cell(row=row, column=col)

    def clone_style(self, style, coordinate: str) -> None:
        target = self.ws[coordinate]
        target.font = copy(style.font)
        target.fill = copy(style.fill)
        target.border = copy(style.border)
        target.alignment = copy(style.alignment)
        target.protection = copy(style.protection)
        target.number_format = style.number_format

    def __repr__(self):
        return (f"WorksheetGrid({self.ws.title!r}, rows={self.highest_row()}, "
                f"cols={get_column_letter(self.highest_column())})")


def as_grid(obj) -> CellGrid:
    """Wrap an openpyxl worksheet; pass any other grid through."""
    if isinstance(obj, Worksheet):
        return WorksheetGrid(obj)
    return obj
