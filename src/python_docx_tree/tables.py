"""
Table cell merge reconstruction.

Word stores a vertically merged cell as one cell per row: the top cell starts
the merge and every cell below it is marked as a continuation. This module
folds those continuation cells into a row span on the cell that owns them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace
from enum import Enum

from lxml import etree

from .constants import w
from .models.document import Node, TableCell, TableRow
from .results import Result, warning

logger = logging.getLogger(__name__)


class VerticalMerge(Enum):
    """A cell's ``w:vMerge`` state."""

    NONE = "none"
    RESTART = "restart"
    CONTINUE = "continue"


def read_vertical_merge(tc_pr: etree._Element | None) -> VerticalMerge:
    """Read ``w:vMerge`` from a ``w:tcPr`` element.

    A ``w:vMerge`` with no value (or "continue") continues the cell above.
    """
    if tc_pr is None:
        return VerticalMerge.NONE
    element = tc_pr.find(w("vMerge"))
    if element is None:
        return VerticalMerge.NONE
    value = element.get(w("val"))
    if not value or value == "continue":
        return VerticalMerge.CONTINUE
    return VerticalMerge.RESTART


def calculate_row_spans(
    rows: Sequence[Node], merges: Mapping[int, VerticalMerge]
) -> Result:
    """Turn vertical merge markers into row spans.

    Rows are walked top to bottom and cells left to right, keeping track of
    which cell owns each grid column. A continuation cell adds one to the row
    span of the owner at its column and is dropped; any other cell becomes
    the owner of its column.

    Args:
        rows: The table's children, expected to be TableRow nodes of TableCell nodes
        merges: Vertical merge state by ``id()`` of each cell. Cells missing
            from the mapping are treated as unmerged.

    Returns:
        A result holding the rows. If anything other than rows of cells is
        found, the rows are returned unchanged with a warning.
    """
    if any(not isinstance(row, TableRow) for row in rows):
        return Result(
            list(rows),
            messages=[warning("unexpected non-row element in table, cell merging may be incorrect")],
        )
    if any(not isinstance(cell, TableCell) for row in rows for cell in row.children):
        return Result(
            list(rows),
            messages=[
                warning("unexpected non-cell element in table row, cell merging may be incorrect")
            ],
        )

    owners: dict[int, TableCell] = {}
    merged: set[int] = set()

    for row in rows:
        column = 0
        for cell in row.children:
            owner = owners.get(column)
            if merges.get(id(cell)) is VerticalMerge.CONTINUE and owner is not None:
                owner.row_span += 1
                merged.add(id(cell))
            else:
                owners[column] = cell
            column += cell.col_span

    if merged:
        logger.debug(f"Merged {len(merged)} continuation cells into row spans")

    return Result(
        [
            replace(row, children=[cell for cell in row.children if id(cell) not in merged])
            for row in rows
        ]
    )
