"""Node tree to Markdown conversion."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..models.nodes import Element, Node, NodeKind, Text, find_first, text_content
from .lists import render_list
from .tables import render_table
from .whitespace import normalize_whitespace

logger = logging.getLogger(__name__)

FENCE = "```"
DEFAULT_IMAGE_ALT = "Image"


class MarkdownRenderer:
    """
    Renders a node tree to Markdown.

    Dispatches on the node kind; kinds without a dedicated rule render
    their children unchanged so unknown containers never swallow text.
    The renderer is stateless and can be shared freely.

    Example:
        renderer = MarkdownRenderer()
        markdown = renderer.convert(Element(NodeKind.PARAGRAPH, (Text("Hello"),)))
    """

    def __init__(self) -> None:
        self._handlers: dict[NodeKind, Callable[[Element, Optional[Element]], str]] = {
            NodeKind.PARAGRAPH: lambda node, _: self.render_children(node) + "\n\n",
            NodeKind.LINE_BREAK: lambda node, _: "\n",
            NodeKind.BOLD: lambda node, _: self._wrap(node, "**"),
            NodeKind.ITALIC: lambda node, _: self._wrap(node, "*"),
            NodeKind.STRIKE: lambda node, _: self._wrap(node, "~~"),
            NodeKind.INLINE_CODE: self._render_inline_code,
            NodeKind.CODE_BLOCK: self._render_code_block,
            NodeKind.HEADING: self._render_heading,
            NodeKind.UNORDERED_LIST: lambda node, _: render_list(self, node, ordered=False) + "\n",
            NodeKind.ORDERED_LIST: lambda node, _: render_list(self, node, ordered=True) + "\n",
            NodeKind.LIST_ITEM: lambda node, _: self.render_children(node).rstrip("\n"),
            NodeKind.BLOCKQUOTE: self._render_blockquote,
            NodeKind.LINK: self._render_link,
            NodeKind.IMAGE: lambda node, _: render_image(node.alt, node.src),
            NodeKind.RULE: lambda node, _: "\n---\n\n",
            NodeKind.TABLE: lambda node, _: render_table(self, node) + "\n",
            NodeKind.SUPERSCRIPT: lambda node, _: f"<sup>{self.render_children(node)}</sup>",
            NodeKind.SUBSCRIPT: lambda node, _: f"<sub>{self.render_children(node)}</sub>",
            NodeKind.IGNORED: lambda node, _: "",
        }

    def render(self, node: Node, parent: Optional[Element] = None) -> str:
        """
        Render a node and its descendants to a Markdown fragment.

        Args:
            node: Node to render
            parent: Direct structural parent of ``node``, if known

        Returns:
            Markdown fragment (not whitespace-normalized)
        """
        if isinstance(node, Text):
            return node.content

        handler = self._handlers.get(node.kind)
        if handler is None:
            return self.render_children(node)
        return handler(node, parent)

    def render_children(self, node: Element) -> str:
        """Render the children of ``node`` concatenated in order."""
        return "".join(self.render(child, node) for child in node.children)

    def convert(self, node: Node) -> str:
        """
        Render ``node`` and normalize blank lines.

        Args:
            node: Root of a content subtree

        Returns:
            Trimmed Markdown without runs of blank lines
        """
        markdown = normalize_whitespace(self.render(node))
        logger.debug(f"Rendered {len(markdown)} characters of Markdown")
        return markdown

    def _wrap(self, node: Element, marker: str) -> str:
        return marker + self.render_children(node) + marker

    def _render_inline_code(self, node: Element, parent: Optional[Element]) -> str:
        # Inside a code block the element is the block's text source
        if parent is not None and parent.kind == NodeKind.CODE_BLOCK:
            return text_content(node)
        return "`" + text_content(node) + "`"

    def _render_code_block(self, node: Element, parent: Optional[Element]) -> str:
        code_el = find_first(node, NodeKind.INLINE_CODE)
        code = text_content(code_el if code_el is not None else node)
        if code.endswith("\n"):
            code = code[:-1]
        return f"\n{FENCE}{node.lang or ''}\n{code}\n{FENCE}\n\n"

    def _render_heading(self, node: Element, parent: Optional[Element]) -> str:
        return "#" * node.level + " " + self.render_children(node) + "\n\n"

    def _render_blockquote(self, node: Element, parent: Optional[Element]) -> str:
        lines = self.render_children(node).strip().split("\n")
        return "\n".join("> " + line for line in lines) + "\n\n"

    def _render_link(self, node: Element, parent: Optional[Element]) -> str:
        href = node.href or ""
        text = self.render_children(node)
        if not href or href == text:
            return text
        return f"[{text}]({href})"


def render_image(alt: Optional[str], src: Optional[str]) -> str:
    """Render an image reference, defaulting the alt text to ``Image``."""
    return f"![{alt or DEFAULT_IMAGE_ALT}]({src or ''})"
