# app/services/card_service.py

import logging
from typing import Sequence

from app.repositories.card_repo import CardRepository
from app.schemas.card_schema import CardIn, CardView
from app.services.card_projector import to_entity, to_view

logger = logging.getLogger(__name__)


class CardNotFound(Exception):
    def __init__(self, card_id: int):
        super().__init__(f"Card {card_id} not found")
        self.card_id = card_id


class BulkCreateError(Exception):
    def __init__(self, index: int, cause: Exception):
        super().__init__(f"Failed to store card at index {index}: {cause}")
        self.index = index
        self.cause = cause


class CardService:
    def __init__(self, card_repo: CardRepository):
        self.card_repo = card_repo

    async def get_all_cards(self) -> list[dict]:
        return await self.card_repo.list_all()

    async def get_card_by_id(self, card_id: int) -> CardView:
        card = await self.card_repo.get_by_id(card_id)
        if card is None:
            raise CardNotFound(card_id)
        return to_view(card)

    async def add_card(self, card_in: CardIn) -> dict:
        card = await self.card_repo.create(to_entity(card_in))
        logger.info("Created card id=%s name=%r", card["id"], card.get("name"))
        return card

    async def create_multiple_cards(self, views: Sequence[CardView]) -> list[CardView]:
        """Store every view in input order inside one transaction.

        Returns the input views unchanged. If any insert fails the batch is
        rolled back and ``BulkCreateError`` names the failing position.
        """
        if not views:
            return []

        async with self.card_repo.transaction():
            for index, view in enumerate(views):
                try:
                    await self.card_repo.create(to_entity(view))
                except Exception as e:
                    raise BulkCreateError(index, e) from e

        logger.info("Created %d cards in bulk", len(views))
        return list(views)
