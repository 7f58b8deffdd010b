"""Result types returned by the export pipeline."""

from dataclasses import dataclass, field

from .nodes import Role, Turn


@dataclass(frozen=True)
class ConversionResult:
    """
    A converted conversation, ready to be saved.

    Attributes:
        title: Derived conversation title (the default title when the page has none)
        markdown: Final Markdown document, ending in exactly one newline
        turns: Extracted turns in document order
        filename: Suggested output filename
    """

    title: str
    markdown: str
    turns: tuple[Turn, ...] = field(default_factory=tuple)
    filename: str = "conversation.md"

    @property
    def turn_count(self) -> int:
        """Number of extracted turns."""
        return len(self.turns)

    def count_by_role(self, role: Role) -> int:
        """Number of turns written by ``role``."""
        return sum(1 for turn in self.turns if turn.role == role)
