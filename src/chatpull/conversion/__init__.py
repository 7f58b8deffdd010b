"""Content conversion for chatpull (HTML to nodes, nodes to Markdown)."""

from .adapter import HtmlNodeAdapter, code_language
from .lists import render_list
from .markdown import MarkdownRenderer, render_image
from .protocols import NodeAdapter, NodeRenderer
from .tables import render_table
from .whitespace import normalize_whitespace

__all__ = [
    # Protocols
    "NodeAdapter",
    "NodeRenderer",
    # Implementations
    "HtmlNodeAdapter",
    "MarkdownRenderer",
    # Helpers
    "code_language",
    "normalize_whitespace",
    "render_image",
    "render_list",
    "render_table",
]
