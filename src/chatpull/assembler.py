"""Final Markdown document assembly from extracted turns."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from .conversion.markdown import MarkdownRenderer, render_image
from .conversion.protocols import NodeRenderer
from .conversion.whitespace import normalize_whitespace
from .extraction.page import DEFAULT_TITLE
from .models.config import HeadingConfig
from .models.nodes import Role, Turn, text_content

logger = logging.getLogger(__name__)


class DocumentAssembler:
    """
    Joins extracted turns into one Markdown document.

    Each turn gets a role heading. User turns list their images before
    their plain text; assistant turns are rendered from their content
    tree. The title heading is only written for a real (non-default) title.

    Example:
        assembler = DocumentAssembler()
        markdown = assembler.assemble("Test Chat", turns)
        if markdown is None:
            print("Nothing to export")
    """

    def __init__(
        self,
        renderer: Optional[NodeRenderer] = None,
        headings: Optional[HeadingConfig] = None,
        default_title: str = DEFAULT_TITLE,
    ):
        """
        Initialize the assembler.

        Args:
            renderer: Renderer for assistant content (uses MarkdownRenderer if None)
            headings: Heading lines per role
            default_title: Placeholder title that is never written as a heading
        """
        self._renderer = renderer or MarkdownRenderer()
        self._headings = headings or HeadingConfig()
        self._default_title = default_title

    def _heading(self, role: Role) -> str:
        return self._headings.user if role == Role.USER else self._headings.assistant

    def _turn_lines(self, turn: Turn) -> list[str]:
        lines = [self._heading(turn.role), ""]

        if turn.role == Role.USER:
            for image in turn.images:
                lines.extend([render_image(image.alt, image.src), ""])
            if turn.content is not None:
                lines.extend([text_content(turn.content).strip(), ""])
        elif turn.content is not None:
            body = normalize_whitespace(self._renderer.render(turn.content))
            lines.extend([body, ""])

        return lines

    def assemble(self, title: Optional[str], turns: Sequence[Turn]) -> Optional[str]:
        """
        Assemble the final document.

        Args:
            title: Derived conversation title
            turns: Turns in document order

        Returns:
            Markdown ending in exactly one newline, or None when there
            are no turns to export
        """
        if not turns:
            return None

        lines: list[str] = []
        if title and title != self._default_title:
            lines.extend([f"# {title}", ""])

        for turn in turns:
            lines.extend(self._turn_lines(turn))

        return normalize_whitespace("\n".join(lines)) + "\n"
