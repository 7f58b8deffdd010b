"""Pipe table rendering."""

import logging
from typing import Optional

from ..models.nodes import Element, NodeKind, find_all, find_first
from .protocols import NodeRenderer

logger = logging.getLogger(__name__)


def _row_cells(renderer: NodeRenderer, row: Element) -> list[str]:
    """Render every cell below a row, trimmed."""
    return [renderer.render_children(cell).strip() for cell, _ in find_all(row, NodeKind.TABLE_CELL)]


def _format_row(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def render_table(renderer: NodeRenderer, node: Element) -> str:
    """
    Render a table element as a Markdown pipe table.

    The header comes from the first row of an explicit header section.
    Without one, the first row found anywhere in the table becomes the
    header, so a single-row table renders with an empty body. Short body
    rows are padded with empty cells; long rows are kept as-is.

    Args:
        renderer: Renderer used for cell content
        node: The table element

    Returns:
        Table lines ending in a newline, or an empty string when no
        header row can be determined
    """
    header: list[str] = []
    body: list[list[str]] = []

    head: Optional[Element] = find_first(node, NodeKind.TABLE_HEAD)
    if head is not None:
        head_row = find_first(head, NodeKind.TABLE_ROW)
        if head_row is not None:
            header.extend(_row_cells(renderer, head_row))

    rows_root = find_first(node, NodeKind.TABLE_BODY) or node
    for row, parent in find_all(rows_root, NodeKind.TABLE_ROW):
        # Header rows were already captured above
        if head is not None and parent is head:
            continue

        cells = _row_cells(renderer, row)
        if not header and not body:
            header.extend(cells)
        else:
            body.append(cells)

    if not header:
        logger.debug("Skipping table without a header row")
        return ""

    lines = [_format_row(header), _format_row(["---"] * len(header))]
    for cells in body:
        cells.extend([""] * (len(header) - len(cells)))
        lines.append(_format_row(cells))

    return "\n".join(lines) + "\n"
