"""Conversation turn extraction from a parsed page."""

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag

from ..conversion.adapter import HtmlNodeAdapter
from ..conversion.protocols import NodeAdapter
from ..models.config import SelectorConfig
from ..models.nodes import ImageRef, Role, Turn

logger = logging.getLogger(__name__)


class TurnExtractor:
    """
    Splits a conversation page into role-tagged turns.

    Turns are returned in document order, one per turn container that
    carries a role. Containers without a role are structural wrappers
    and are skipped. Nothing is reordered or deduplicated.

    Example:
        extractor = TurnExtractor()
        turns = extractor.extract(parse_page(html))
        for turn in turns:
            print(turn.role, turn.order)
    """

    def __init__(
        self,
        selectors: Optional[SelectorConfig] = None,
        adapter: Optional[NodeAdapter] = None,
    ):
        """
        Initialize the extractor.

        Args:
            selectors: CSS selectors describing the page structure
            adapter: Converts page elements to nodes (uses HtmlNodeAdapter if None)
        """
        self._selectors = selectors or SelectorConfig()
        self._adapter = adapter or HtmlNodeAdapter()

    def _role(self, container: Tag) -> Optional[Role]:
        role_el = container.select_one(self._selectors.message_role)
        if role_el is None:
            return None

        value = str(role_el.get(self._selectors.role_attribute) or "")
        if value == Role.USER.value:
            return Role.USER
        if value != Role.ASSISTANT.value:
            logger.debug(f"Treating role {value!r} as assistant")
        return Role.ASSISTANT

    def _images(self, container: Tag) -> tuple[ImageRef, ...]:
        images = []
        for img in container.find_all("img"):
            alt = img.get("alt")
            src = img.get("src")
            images.append(
                ImageRef(
                    alt=str(alt) if alt is not None else None,
                    src=str(src) if src is not None else None,
                )
            )
        return tuple(images)

    def _extract_turn(self, container: Tag, order: int) -> Optional[Turn]:
        role = self._role(container)
        if role is None:
            logger.debug(f"Skipping turn container {order}: no role found")
            return None

        if role == Role.USER:
            text_el = container.select_one(self._selectors.user_text)
            return Turn(
                role=role,
                content=self._adapter.adapt(text_el),
                images=self._images(container),
                order=order,
            )

        content_el = container.select_one(self._selectors.assistant_content)
        if content_el is None:
            logger.debug(f"No content found for assistant turn {order}")
        return Turn(role=role, content=self._adapter.adapt(content_el), order=order)

    def extract(self, soup: BeautifulSoup) -> list[Turn]:
        """
        Extract all turns from a parsed page.

        Args:
            soup: Parsed conversation page

        Returns:
            Turns in document order (empty when the page has no turn containers)
        """
        turns = []
        for order, container in enumerate(soup.select(self._selectors.turn)):
            turn = self._extract_turn(container, order)
            if turn is not None:
                turns.append(turn)

        logger.debug(f"Extracted {len(turns)} turns")
        return turns
