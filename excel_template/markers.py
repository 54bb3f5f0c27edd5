"""
Marker classification for template cells.

A cell is one of three things:

  * plain content (``NO_MARKER``),
  * a scalar field reference ``$F{name}`` (:class:`FieldMarker`),
  * a collection block ``$Each{name}`` (:class:`EachMarker`), whose
    ``column_map`` describes the row directly below it.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Union

# Markers are searched anywhere in the cell text, case sensitive.
_FIELD_RE = re.compile(r'\$F\{(\S+)\}')
_EACH_RE = re.compile(r'\$Each\{(\S+)\}')


@dataclass(frozen=True)
class NoMarker:
    """Plain cell, nothing to substitute."""


@dataclass(frozen=True)
class FieldMarker:
    name: str


@dataclass(frozen=True)
class EachMarker:
    name: str
    # column index -> NoMarker | FieldMarker, taken from the template row
    column_map: dict = field(default_factory=dict, hash=False)


Marker = Union[NoMarker, FieldMarker, EachMarker]

NO_MARKER = NoMarker()


def classify(text: Any) -> Marker:
    """Classify a single cell value.

    An Each match is returned with an empty column map; use
    :func:`classify_cell` to get one bound to its template row.
    """
    if not isinstance(text, str):
        return NO_MARKER
    m = _FIELD_RE.search(text)
    if m:
        return FieldMarker(m.group(1))
    m = _EACH_RE.search(text)
    if m:
        return EachMarker(m.group(1))
    return NO_MARKER


def classify_template_row(grid, row: int) -> dict:
    """Return ``{col: marker}`` for every column of a template row.

    Each markers are not allowed inside a template row and are treated
    as plain text.
    """
    column_map = {}
    if row > grid.highest_row():
        # Reading a missing row would create it
        return column_map
    for col in range(1, grid.highest_column() + 1):
        marker = classify(grid.cell(col, row).value)
        if isinstance(marker, EachMarker):
            marker = NO_MARKER
        column_map[col] = marker
    return column_map


def classify_cell(grid, col: int, row: int) -> Marker:
    """Classify the cell at (*col*, *row*) of *grid*."""
    marker = classify(grid.cell(col, row).value)
    if isinstance(marker, EachMarker):
        return EachMarker(marker.name, classify_template_row(grid, row + 1))
    return marker
