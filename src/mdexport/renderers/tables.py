#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdexport/renderers/tables.py
"""Pipe table layout.

The table rule owns all layout: cell rules pass their content through, and
row and body containers are suppressed. Only the table sees the whole grid,
which it needs to size the columns.

Layout steps:

1. Render every cell of every ``tr`` in the table's ``tbody``.
2. Size each column to its longest rendered cell.
3. Pad each cell according to its ``align`` attribute.
4. Emit ``| a | b |`` rows, with a dash separator after the first row. The
   dialect requires a header row, so a table without one uses its first
   data row as the header.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from mdexport.ast.nodes import ElementNode
from mdexport.renderers.context import RenderHost
from mdexport.renderers.result import SUPPRESS, Emit, RuleResult
from mdexport.utils.layout import justify_center, justify_left, justify_right

logger = logging.getLogger(__name__)

CELL_TAGS = frozenset({"td", "th"})


@dataclass
class TableCell:
    """A rendered cell awaiting layout."""

    inner_markup: str
    header: bool = False
    align: Optional[str] = None

    def justify(self, width: int) -> str:
        if self.align == "center":
            return justify_center(self.inner_markup, width)
        if self.align == "right":
            return justify_right(self.inner_markup, width)
        return justify_left(self.inner_markup, width)


Grid = list[list[TableCell]]


def collect_grid(tbody: ElementNode, host: RenderHost) -> Grid:
    """Render the cells of every row in ``tbody``."""
    grid: Grid = []
    for row in tbody.element_children():
        if row.tag != "tr":
            continue
        cells = [
            TableCell(
                inner_markup=host.render_node(cell),
                header=cell.tag == "th",
                align=cell.attributes.get("align"),
            )
            for cell in row.element_children()
            if cell.tag in CELL_TAGS
        ]
        grid.append(cells)
    return grid


def column_widths(grid: Grid) -> list[int]:
    """Return the widest rendered cell of each column."""
    return [max(len(row[column].inner_markup) for row in grid) for column in range(len(grid[0]))]


def layout_grid(grid: Grid) -> str:
    """Lay out a rectangular grid as a pipe table.

    Parameters
    ----------
    grid : list of list of TableCell
        Non-empty grid whose rows all have the same length

    Returns
    -------
    str
        Table markup followed by a blank line

    """
    widths = column_widths(grid)
    lines: list[str] = []
    for index, row in enumerate(grid):
        cells = [cell.justify(width) for cell, width in zip(row, widths)]
        lines.append("| " + " | ".join(cells) + " |")
        if index == 0:
            lines.append("|-" + "-|-".join("-" * width for width in widths) + "-|")
    return "\n".join(lines) + "\n\n"


def render_table(node: ElementNode, host: RenderHost) -> RuleResult:
    """Render a ``table`` element, or suppress it if its shape is unsupported.

    Parameters
    ----------
    node : ElementNode
        The ``table`` element
    host : RenderHost
        Used to render cells independently of the main traversal

    Returns
    -------
    RuleResult
        The laid out table, or SUPPRESS when there is no ``tbody``, no rows,
        or the rows have differing cell counts

    """
    tbody = node.find_child("tbody")
    if tbody is None:
        logger.warning("Skipping <table> without <tbody>")
        return SUPPRESS

    grid = collect_grid(tbody, host)
    if not grid or not grid[0]:
        logger.warning("Skipping <table> without cells")
        return SUPPRESS

    column_count = len(grid[0])
    if any(len(row) != column_count for row in grid):
        logger.warning("Skipping <table> with ragged rows (expected %d cells per row)", column_count)
        return SUPPRESS

    return Emit(layout_grid(grid))


__all__ = ["TableCell", "collect_grid", "column_widths", "layout_grid", "render_table"]
