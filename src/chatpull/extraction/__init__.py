"""Conversation structure extraction from saved pages."""

from .page import DEFAULT_TITLE, derive_title, is_streaming, parse_page
from .turns import TurnExtractor

__all__ = [
    "DEFAULT_TITLE",
    "TurnExtractor",
    "derive_title",
    "is_streaming",
    "parse_page",
]
