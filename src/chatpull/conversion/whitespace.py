"""Blank-line normalization for rendered Markdown."""

import re

_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def normalize_whitespace(text: str) -> str:
    """
    Collapse runs of three or more newlines to two and trim the result.

    Idempotent: normalizing already-normalized text returns it unchanged.

    Args:
        text: Rendered Markdown

    Returns:
        Normalized Markdown without leading or trailing whitespace
    """
    return _EXCESS_NEWLINES.sub("\n\n", text).strip()
