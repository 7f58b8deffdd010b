"""Saved page parsing, title derivation and streaming detection."""

import logging
import re
from typing import Union

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "conversation"
TITLE_SUFFIX_PATTERN = r"\s*[-–|]\s*ChatGPT\s*$"


def _detect_encoding(html: bytes) -> str:
    """Detect character encoding from a meta charset declaration."""
    head = html[:2048].decode("latin-1", errors="ignore")
    charset_match = re.search(r'charset=["\']?([^"\'\s>;]+)', head, re.IGNORECASE)
    if charset_match:
        return charset_match.group(1).strip()
    return "utf-8"


def parse_page(html: Union[bytes, str]) -> BeautifulSoup:
    """
    Parse a saved conversation page.

    Args:
        html: Raw HTML bytes or already-decoded text

    Returns:
        Parsed document
    """
    if isinstance(html, bytes):
        encoding = _detect_encoding(html)
        try:
            text = html.decode(encoding, errors="replace")
        except LookupError:
            logger.debug(f"Unknown charset {encoding!r}, decoding as UTF-8")
            text = html.decode("utf-8", errors="replace")
    else:
        text = html
    return BeautifulSoup(text, "html.parser")


def derive_title(
    soup: BeautifulSoup,
    default: str = DEFAULT_TITLE,
    suffix_pattern: str = TITLE_SUFFIX_PATTERN,
) -> str:
    """
    Derive the conversation title from the page ``<title>``.

    The trailing application name (``Title - ChatGPT``) is removed.

    Args:
        soup: Parsed page
        default: Title returned when the page has no usable title
        suffix_pattern: Regex stripped from the end of the title

    Returns:
        Conversation title, or ``default``
    """
    title_tag = soup.find("title")
    # Browsers collapse whitespace in document titles
    raw = " ".join(title_tag.get_text().split()) if title_tag is not None else ""
    title = re.sub(suffix_pattern, "", raw, flags=re.IGNORECASE).strip()
    if title and title != "ChatGPT":
        return title
    return default


def is_streaming(soup: BeautifulSoup, selector: str) -> bool:
    """Check whether a response is still being generated on the page."""
    return soup.select_one(selector) is not None
