"""Output filename construction from conversation titles."""

import re

MAX_FILENAME_LENGTH = 200


def sanitize_filename(name: str, fallback: str = "conversation") -> str:
    """Sanitize a conversation title for use as a filename stem.

    Args:
        name: Title to sanitize
        fallback: Name used when nothing usable remains

    Returns:
        Sanitized name (without extension)
    """
    # Remove invalid and control characters
    name = re.sub(r'[<>:"/\\|?*\x00-\x1f]', "", name)
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"-+", "-", name)
    name = name.strip("-")

    return name[:MAX_FILENAME_LENGTH] or fallback


def build_filename(title: str, extension: str = ".md", fallback: str = "conversation") -> str:
    """Build the output filename for a conversation title."""
    return sanitize_filename(title, fallback) + extension
