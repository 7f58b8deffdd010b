"""Tests for DocumentAssembler."""

import pytest
from chatpull.assembler import DocumentAssembler
from chatpull.models.config import HeadingConfig
from chatpull.models.nodes import Element, ImageRef, NodeKind, Role, Text, Turn
from conftest import SIMPLE_MARKDOWN


def paragraph(text):
    return Element(NodeKind.PARAGRAPH, (Text(text),))


@pytest.fixture
def assembler():
    return DocumentAssembler()


@pytest.fixture
def simple_turns():
    return [
        Turn(role=Role.USER, content=Text("Hi"), order=0),
        Turn(role=Role.ASSISTANT, content=Element(NodeKind.PASSTHROUGH, (paragraph("Hello!"),)), order=1),
    ]


class TestDocumentAssembler:
    """Tests for DocumentAssembler.assemble."""

    def test_simple_conversation(self, assembler, simple_turns):
        """Test the full document for a two-turn exchange."""
        assert assembler.assemble("Test Chat", simple_turns) == SIMPLE_MARKDOWN

    def test_no_turns_is_none(self, assembler):
        """Test the no-content signal differs from an empty document."""
        assert assembler.assemble("Test Chat", []) is None

    def test_default_title_is_not_written(self, assembler, simple_turns):
        """Test that the placeholder title never becomes a heading."""
        assert assembler.assemble("conversation", simple_turns).startswith("##### You said:\n\nHi")
        assert assembler.assemble(None, simple_turns).startswith("##### You said:")

    def test_user_images_precede_text(self, assembler):
        """Test image lines come before the user's text."""
        turns = [
            Turn(
                role=Role.USER,
                content=Text("  look at these  "),
                images=(ImageRef(alt="cat", src="cat.png"), ImageRef(src="dog.png")),
            )
        ]
        assert assembler.assemble(None, turns) == (
            "##### You said:\n\n![cat](cat.png)\n\n![Image](dog.png)\n\nlook at these\n"
        )

    def test_user_text_is_plain(self, assembler):
        """Test that user content is taken as plain text, not rendered."""
        content = Element(NodeKind.PASSTHROUGH, (Text("use "), Element(NodeKind.BOLD, (Text("this"),))))
        turns = [Turn(role=Role.USER, content=content)]
        assert assembler.assemble(None, turns) == "##### You said:\n\nuse this\n"

    def test_turn_without_content_keeps_heading(self, assembler):
        """Test an assistant turn without a body."""
        turns = [Turn(role=Role.ASSISTANT), Turn(role=Role.USER, content=Text("ok"))]
        assert assembler.assemble(None, turns) == "###### ChatGPT said:\n\n##### You said:\n\nok\n"

    def test_no_triple_newlines(self, assembler):
        """Test that block spacing collapses across turns."""
        content = Element(
            NodeKind.PASSTHROUGH,
            (
                Element(NodeKind.RULE),
                Element(NodeKind.CODE_BLOCK, (Text("x\n\n\n\n"),)),
                Element(NodeKind.PARAGRAPH, (Text("\n\n\n"),)),
                Element(NodeKind.RULE),
            ),
        )
        turns = [Turn(role=Role.ASSISTANT, content=content), Turn(role=Role.USER, content=Text("\n\nq\n\n"))]
        result = assembler.assemble("Title", turns)

        assert "\n\n\n" not in result
        assert result.endswith("\n") and not result.endswith("\n\n")

    def test_custom_headings(self, simple_turns):
        """Test configurable role headings."""
        assembler = DocumentAssembler(headings=HeadingConfig(user="### Me", assistant="### Bot"))
        result = assembler.assemble(None, simple_turns)
        assert result == "### Me\n\nHi\n\n### Bot\n\nHello!\n"

    def test_custom_default_title(self, simple_turns):
        """Test the placeholder title is configurable."""
        assembler = DocumentAssembler(default_title="untitled")
        assert assembler.assemble("untitled", simple_turns).startswith("#####")
        assert assembler.assemble("conversation", simple_turns).startswith("# conversation\n\n")
