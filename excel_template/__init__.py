"""Excel Template Renderer.

Fills an Excel template worksheet with values from a data model.  Cells
may carry two kinds of markers:

  * ``$F{field}`` – replaced by the model's ``field`` value.
  * ``$Each{items}`` – the row below is a template row; one row is
    generated per child record of ``items`` (values from the template
    row's ``$F{...}`` markers, styles copied from the template row), and
    the marker and template rows are removed.

:func:`apply_data` works on a worksheet in place; :func:`render_workbook`
loads a template file, renders it and saves a copy.
"""

from .errors import ModelLoadError
from .grid import CellGrid, WorksheetGrid
from .loader import load_config, load_model
from .markers import NO_MARKER, EachMarker, FieldMarker, NoMarker, classify
from .records import MappingRecord, ObjectRecord, Record, as_record
from .renderer import apply_data, render_workbook

__all__ = [
    "apply_data",
    "render_workbook",
    "classify",
    "NoMarker",
    "NO_MARKER",
    "FieldMarker",
    "EachMarker",
    "CellGrid",
    "WorksheetGrid",
    "Record",
    "MappingRecord",
    "ObjectRecord",
    "as_record",
    "load_model",
    "load_config",
    "ModelLoadError",
]
