"""Shared fixtures for chatpull tests."""

import logging

import pytest


def turn(index, role, body):
    """Build one conversation turn container."""
    return (
        f'<article data-testid="conversation-turn-{index}">'
        f'<div data-message-author-role="{role}">{body}</div></article>'
    )


def page(*turns, title="Test Chat - ChatGPT", extra=""):
    """Build a saved conversation page."""
    return (
        f"<html><head><title>{title}</title></head><body>"
        f'<div id="thread">{"".join(turns)}</div>{extra}</body></html>'
    )


SIMPLE_PAGE = page(
    turn(1, "user", '<div class="whitespace-pre-wrap">Hi</div>'),
    turn(2, "assistant", '<div class="markdown prose"><p>Hello!</p></div>'),
)

SIMPLE_MARKDOWN = "# Test Chat\n\n##### You said:\n\nHi\n\n###### ChatGPT said:\n\nHello!\n"


@pytest.fixture
def simple_page():
    return SIMPLE_PAGE


@pytest.fixture(autouse=True)
def reset_chatpull_logger():
    """Drop handlers installed by setup_logging between tests."""
    yield
    logger = logging.getLogger("chatpull")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
