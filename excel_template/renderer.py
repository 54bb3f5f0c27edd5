"""
Apply a data model to a template worksheet.

``$F{field}`` cells are overwritten with the model's value.  A
``$Each{items}`` cell marks a block: the row below it is the template
row, and one row is generated per child of ``items`` using the template
row's ``$F{...}`` markers and styles.  The marker row and the template
row are removed afterwards.

The worksheet is changed in place.  Make a copy of the template file
first, or save the result under a new name (see :func:`render_workbook`).
"""

import logging
import os

from openpyxl import load_workbook
from openpyxl.utils import get_column_letter

from .grid import as_grid
from .markers import EachMarker, FieldMarker, classify_cell
from .records import as_record

logger = logging.getLogger(__name__)


def _set_cell_data(cell, marker, record):
    if isinstance(marker, FieldMarker) and record.has_field(marker.name):
        cell.value = record.get_field(marker.name)


def _expand_each(grid, marker_row, marker, record):
    """Expand one ``$Each`` block and return the next row to scan."""
    row = marker_row + 1  # template row
    if not record.has_field(marker.name):
        # Unknown collection: leave marker and template rows as they are.
        return marker_row + 2

    # A null collection renders like an empty one
    for item in record.get_field(marker.name) or ():
        child = as_record(item)
        grid.insert_row_before(row, 1)
        for col, sub_marker in marker.column_map.items():
            _set_cell_data(grid.cell(col, row), sub_marker, child)
            # The template row always sits directly below the new row
            grid.clone_style(grid.style_of(col, row + 1),
                             f"{get_column_letter(col)}{row}")
        row += 1

    grid.remove_row(marker_row)
    grid.remove_row(row - 1)
    # Generated rows now start at marker_row
    return row - 1


def apply_data(grid, model):
    """Render *model* into *grid* in place.

    Parameters
    ----------
    grid : CellGrid or openpyxl Worksheet
        The template.  Its bounds are re-read on every step since rows
        are inserted and removed while it is being scanned.
    model : Record, mapping or object
        Read-only data source.

    Missing fields are skipped silently.  Errors raised by the grid or
    the model propagate unchanged and leave the grid partially rendered.
    """
    grid = as_grid(grid)
    record = as_record(model)

    row = 1
    while row <= grid.highest_row():
        next_row = row + 1
        col = 1
        while col <= grid.highest_column():
            marker = classify_cell(grid, col, row)
            if isinstance(marker, FieldMarker):
                _set_cell_data(grid.cell(col, row), marker, record)
            elif isinstance(marker, EachMarker):
                next_row = _expand_each(grid, row, marker, record)
                break
            col += 1
        row = next_row


def render_workbook(template_path, model, output_path=None, sheet_names=None):
    """Render every selected sheet of a template workbook and save it.

    Parameters
    ----------
    template_path : str
        Path to the ``.xlsx`` template.  It is not modified unless
        *output_path* points at it.
    model : Record, mapping or object
        Data to apply to each sheet.
    output_path : str or None
        Where to save.  Defaults to
        ``<template_dir>/output/<template_name>_rendered.xlsx``.
    sheet_names : list[str] or None
        Sheets to render.  ``None`` means *all* sheets.

    Returns
    -------
    str
        Path to the rendered workbook.
    """
    wb = load_workbook(template_path)

    if sheet_names is None:
        sheet_names = list(wb.sheetnames)
    else:
        missing = [s for s in sheet_names if s not in wb.sheetnames]
        for s in missing:
            logger.warning(f"Sheet '{s}' not found in {template_path}, skipping")
        sheet_names = [s for s in sheet_names if s in wb.sheetnames]

    if output_path is None:
        stem = os.path.splitext(os.path.basename(template_path))[0]
        out_dir = os.path.join(os.path.dirname(template_path) or ".", "output")
        output_path = os.path.join(out_dir, f"{stem}_rendered.xlsx")
    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)

    record = as_record(model)
    for sn in sheet_names:
        ws = wb[sn]
        rows_before = ws.max_row
        apply_data(ws, record)
        logger.info(f"  Sheet '{sn}': {rows_before} -> {ws.max_row} rows")

    wb.save(output_path)
    wb.close()

    logger.info(f"Rendered workbook: {output_path}")
    return output_path
