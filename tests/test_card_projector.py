import pytest

from app.schemas.card_schema import CardView
from app.services.card_projector import to_entity, to_view


def test_to_view_drops_id():
    card = {"id": 7, "name": "Bolt", "type": "Spell", "rarity": "Common", "image_url": "http://x/1.png"}
    view = to_view(card)
    assert view == CardView(name="Bolt", type="Spell", rarity="Common", imageUrl="http://x/1.png")
    assert "id" not in view.model_dump()


def test_to_entity_has_no_id():
    view = CardView(name="Bolt", type="Spell", rarity="Common", imageUrl="http://x/1.png")
    entity = to_entity(view)
    assert entity == {"name": "Bolt", "type": "Spell", "rarity": "Common", "image_url": "http://x/1.png"}


@pytest.mark.parametrize("view", [
    CardView(),
    CardView(name="Bolt", type="Spell", rarity="Common", imageUrl="http://x/1.png"),
    CardView(name="", rarity="Mythic"),
])
def test_round_trip(view):
    assert to_view(to_entity(view)) == view


def test_to_view_rejects_missing_card():
    with pytest.raises(ValueError):
        to_view(None)


def test_view_ignores_incoming_id():
    view = CardView.model_validate({"id": 3, "name": "Bolt"})
    assert not hasattr(view, "id")
    assert view.model_dump(by_alias=True) == {"name": "Bolt", "type": None, "rarity": None, "imageUrl": None}
