# app/schemas/card_schema.py

from typing import Optional
from pydantic import BaseModel, Field


class CardView(BaseModel):
    """External shape of a card: every field except the identifier."""
    name: Optional[str] = None
    type: Optional[str] = None
    rarity: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }


class CardIn(CardView):
    """Body of a single-card create. Unknown keys, id included, are ignored."""


class CardOut(CardView):
    id: int
