"""BeautifulSoup element to node tree adaptation."""

import logging
import re
from typing import Optional, Union

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString

from ..models.nodes import Element, Node, NodeKind, Text

logger = logging.getLogger(__name__)

# Tag names mapped to node kinds; anything else is a passthrough container
TAG_KINDS = {
    "p": NodeKind.PARAGRAPH,
    "br": NodeKind.LINE_BREAK,
    "strong": NodeKind.BOLD,
    "b": NodeKind.BOLD,
    "em": NodeKind.ITALIC,
    "i": NodeKind.ITALIC,
    "del": NodeKind.STRIKE,
    "s": NodeKind.STRIKE,
    "code": NodeKind.INLINE_CODE,
    "pre": NodeKind.CODE_BLOCK,
    "h1": NodeKind.HEADING,
    "h2": NodeKind.HEADING,
    "h3": NodeKind.HEADING,
    "h4": NodeKind.HEADING,
    "h5": NodeKind.HEADING,
    "h6": NodeKind.HEADING,
    "ul": NodeKind.UNORDERED_LIST,
    "ol": NodeKind.ORDERED_LIST,
    "li": NodeKind.LIST_ITEM,
    "blockquote": NodeKind.BLOCKQUOTE,
    "a": NodeKind.LINK,
    "img": NodeKind.IMAGE,
    "hr": NodeKind.RULE,
    "table": NodeKind.TABLE,
    "thead": NodeKind.TABLE_HEAD,
    "tbody": NodeKind.TABLE_BODY,
    "tr": NodeKind.TABLE_ROW,
    "th": NodeKind.TABLE_CELL,
    "td": NodeKind.TABLE_CELL,
    "sup": NodeKind.SUPERSCRIPT,
    "sub": NodeKind.SUBSCRIPT,
}

# Interactive controls, iconography and styling metadata
IGNORED_TAGS = {"button", "svg", "style", "script"}

_LANGUAGE_CLASS = re.compile(r"language-(\S+)")


def code_language(pre: Tag) -> Optional[str]:
    """
    Extract the language tag of a ``<pre>`` block.

    Looks at the class list of the first ``<code>`` inside the block for
    a ``language-<name>`` token.

    Args:
        pre: The ``<pre>`` element

    Returns:
        Language name, or None when the block is not annotated
    """
    code = pre.find("code")
    if not isinstance(code, Tag):
        return None

    classes = code.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    match = _LANGUAGE_CLASS.search(" ".join(classes))
    return match.group(1) if match else None


def _attr(tag: Tag, name: str) -> Optional[str]:
    value = tag.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


class HtmlNodeAdapter:
    """
    Adapts parsed HTML into the node tree the renderer consumes.

    Classifies tags by name and copies only the attributes the renderer
    needs. Comments, doctypes and other non-content strings are dropped.

    Example:
        soup = BeautifulSoup(html, "html.parser")
        node = HtmlNodeAdapter().adapt(soup.select_one(".markdown"))
    """

    def adapt(self, source: Union[Tag, NavigableString, None]) -> Optional[Node]:
        """
        Convert a BeautifulSoup element or string into a node.

        Args:
            source: Element or string to convert

        Returns:
            The node, or None for non-content strings and missing input
        """
        if source is None:
            return None

        if isinstance(source, NavigableString):
            if isinstance(source, PreformattedString):
                return None
            return Text(str(source))

        if not isinstance(source, Tag):
            return None

        name = source.name.lower()
        children = tuple(
            node for node in (self.adapt(child) for child in source.children) if node is not None
        )

        # Ignored elements keep their text for plain-text reads but never render
        if name in IGNORED_TAGS:
            return Element(NodeKind.IGNORED, children)

        kind = TAG_KINDS.get(name, NodeKind.PASSTHROUGH)

        if kind == NodeKind.HEADING:
            return Element(kind, children, level=int(name[1]))
        if kind == NodeKind.CODE_BLOCK:
            return Element(kind, children, lang=code_language(source))
        if kind == NodeKind.LINK:
            return Element(kind, children, href=_attr(source, "href"))
        if kind == NodeKind.IMAGE:
            return Element(kind, children, alt=_attr(source, "alt"), src=_attr(source, "src"))
        if kind == NodeKind.TABLE_CELL:
            return Element(kind, children, is_header=name == "th")
        return Element(kind, children)
