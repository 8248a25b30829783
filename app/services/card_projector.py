# app/services/card_projector.py

from app.schemas.card_schema import CardView

CARD_FIELDS = ("name", "type", "rarity", "image_url")


def to_view(card: dict | None) -> CardView:
    if card is None:
        raise ValueError("Cannot project a missing card.")
    return CardView(**{field: card.get(field) for field in CARD_FIELDS})


def to_entity(view: CardView) -> dict:
    # id is assigned by the store on insert
    return {field: getattr(view, field) for field in CARD_FIELDS}
