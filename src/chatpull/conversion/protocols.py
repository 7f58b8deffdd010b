"""Protocol definitions for content conversion."""

from typing import Any, Optional, Protocol

from ..models.nodes import Element, Node


class NodeRenderer(Protocol):
    """
    Protocol for rendering a node tree to Markdown.

    Implementations must be total over well-formed trees and keep no
    state between calls.
    """

    def render(self, node: Node, parent: Optional[Element] = None) -> str:
        """
        Render a node and its descendants.

        Args:
            node: Node to render
            parent: Direct structural parent of ``node``, if known

        Returns:
            Markdown fragment
        """
        ...

    def render_children(self, node: Element) -> str:
        """Render the children of ``node`` concatenated in order."""
        ...


class NodeAdapter(Protocol):
    """
    Protocol for turning a parsed page element into a node tree.

    Implementations classify source tags into node kinds and extract
    the attributes the renderer needs (href, src, alt, code language).
    """

    def adapt(self, source: Any) -> Optional[Node]:
        """
        Convert a source element into a node.

        Args:
            source: Parsed page element or string

        Returns:
            The node, or None when the source carries no content
        """
        ...
