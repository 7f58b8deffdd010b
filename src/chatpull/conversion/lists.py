"""Ordered and unordered list rendering."""

from ..models.nodes import LIST_KINDS, Element, NodeKind
from .protocols import NodeRenderer

INDENT = "  "


def render_list(renderer: NodeRenderer, node: Element, ordered: bool, depth: int = 0) -> str:
    """
    Render a list element as Markdown list lines.

    Only direct list-item children are rendered. Nested lists inside an
    item are rendered one level deeper and placed right after the item's
    line. Numbering restarts at 1 for every list.

    Args:
        renderer: Renderer used for item content
        node: The list element
        ordered: Emit ``N.`` markers instead of ``-``
        depth: Nesting depth (two spaces of indent per level)

    Returns:
        List lines joined with newlines (no trailing newline)
    """
    indent = INDENT * depth
    lines: list[str] = []
    counter = 1

    for item in node.elements:
        if item.kind != NodeKind.LIST_ITEM:
            continue

        content = ""
        nested: list[str] = []
        for child in item.children:
            if isinstance(child, Element) and child.kind in LIST_KINDS:
                nested.append(
                    render_list(renderer, child, child.kind == NodeKind.ORDERED_LIST, depth + 1)
                )
            else:
                content += renderer.render(child, item)

        content = content.strip("\n")
        marker = f"{counter}. " if ordered else "- "
        lines.append(indent + marker + content)

        if nested:
            lines.append("\n".join(nested))

        counter += 1

    return "\n".join(lines)
