"""Tests for output filename construction."""

import pytest
from chatpull.naming import MAX_FILENAME_LENGTH, build_filename, sanitize_filename


class TestSanitizeFilename:
    """Tests for sanitize_filename."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Test Chat", "Test-Chat"),
            ('a<b>c:d"e/f\\g|h?i*j', "abcdefghij"),
            ("  spaced   out  ", "spaced-out"),
            ("dash - separated", "dash-separated"),
            ("tab\tand\nnewline", "tabandnewline"),
            ("bell\x07char", "bellchar"),
            ("Ünïcödé titles", "Ünïcödé-titles"),
        ],
    )
    def test_sanitize(self, name, expected):
        """Test character removal and whitespace collapsing."""
        assert sanitize_filename(name) == expected

    def test_empty_uses_fallback(self):
        """Test names with nothing usable left."""
        assert sanitize_filename("???") == "conversation"
        assert sanitize_filename("", fallback="chat") == "chat"

    def test_truncates_long_names(self):
        """Test length limit."""
        assert len(sanitize_filename("x" * 500)) == MAX_FILENAME_LENGTH


class TestBuildFilename:
    """Tests for build_filename."""

    def test_adds_extension(self):
        """Test default and custom extensions."""
        assert build_filename("Test Chat") == "Test-Chat.md"
        assert build_filename("Test Chat", extension=".markdown") == "Test-Chat.markdown"

    def test_fallback(self):
        """Test fallback stem for unusable titles."""
        assert build_filename("***", fallback="untitled") == "untitled.md"
