"""Typed content tree consumed by the Markdown renderer and turn extractor."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class NodeKind(str, Enum):
    """Element kinds understood by the renderer."""

    PARAGRAPH = "paragraph"
    LINE_BREAK = "line_break"
    BOLD = "bold"
    ITALIC = "italic"
    STRIKE = "strike"
    INLINE_CODE = "inline_code"
    CODE_BLOCK = "code_block"
    HEADING = "heading"
    UNORDERED_LIST = "unordered_list"
    ORDERED_LIST = "ordered_list"
    LIST_ITEM = "list_item"
    BLOCKQUOTE = "blockquote"
    LINK = "link"
    IMAGE = "image"
    RULE = "rule"
    TABLE = "table"
    TABLE_HEAD = "table_head"
    TABLE_BODY = "table_body"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"
    PASSTHROUGH = "passthrough"
    IGNORED = "ignored"


LIST_KINDS = frozenset({NodeKind.UNORDERED_LIST, NodeKind.ORDERED_LIST})


@dataclass(frozen=True)
class Text:
    """A run of raw text."""

    content: str


@dataclass(frozen=True)
class Element:
    """
    A tagged container node.

    Only the attribute fields relevant to ``kind`` are meaningful:
    ``href`` for links, ``alt``/``src`` for images, ``lang`` for code
    blocks, ``level`` for headings and ``is_header`` for table cells.
    Missing attributes stay ``None``; the renderer applies defaults.

    Example:
        Element(NodeKind.PARAGRAPH, (Text("Hello "), Element(NodeKind.BOLD, (Text("world"),))))
    """

    kind: NodeKind
    children: tuple[Node, ...] = ()
    href: Optional[str] = None
    alt: Optional[str] = None
    src: Optional[str] = None
    lang: Optional[str] = None
    level: int = 1
    is_header: bool = False

    def __post_init__(self) -> None:
        if self.kind == NodeKind.HEADING and not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be between 1 and 6, got {self.level}")
        # Accept any iterable of children but store an immutable tuple
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def elements(self) -> Iterator[Element]:
        """Direct children that are elements (text children skipped)."""
        return (child for child in self.children if isinstance(child, Element))


Node = Union[Text, Element]


class Role(str, Enum):
    """Author of a conversation turn."""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ImageRef:
    """Image attached to a user turn."""

    alt: Optional[str] = None
    src: Optional[str] = None


@dataclass(frozen=True)
class Turn:
    """
    One role-attributed message segment, in source document order.

    Attributes:
        role: Who wrote the turn
        content: Content subtree (None when the turn has no body element)
        images: Images attached to the turn (user turns only)
        order: Position of the turn container in the source document
    """

    role: Role
    content: Optional[Node] = None
    images: tuple[ImageRef, ...] = field(default_factory=tuple)
    order: int = 0


def iter_descendants(node: Node) -> Iterator[tuple[Node, Element]]:
    """
    Walk all descendants of ``node`` depth-first, in document order.

    Yields:
        (descendant, parent) pairs
    """
    if isinstance(node, Text):
        return
    stack: list[tuple[Node, Element]] = [(child, node) for child in reversed(node.children)]
    while stack:
        current, parent = stack.pop()
        yield current, parent
        if isinstance(current, Element):
            stack.extend((child, current) for child in reversed(current.children))


def find_first(node: Node, *kinds: NodeKind) -> Optional[Element]:
    """Return the first descendant element of one of ``kinds``, or None."""
    for descendant, _ in iter_descendants(node):
        if isinstance(descendant, Element) and descendant.kind in kinds:
            return descendant
    return None


def find_all(node: Node, *kinds: NodeKind) -> list[tuple[Element, Element]]:
    """Return all descendant elements of one of ``kinds`` with their parents."""
    return [
        (descendant, parent)
        for descendant, parent in iter_descendants(node)
        if isinstance(descendant, Element) and descendant.kind in kinds
    ]


def text_content(node: Node) -> str:
    """Concatenate every text run below ``node``, ignoring markup."""
    if isinstance(node, Text):
        return node.content
    return "".join(d.content for d, _ in iter_descendants(node) if isinstance(d, Text))
