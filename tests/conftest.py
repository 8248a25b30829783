# tests/conftest.py
import copy
from contextlib import asynccontextmanager

import pytest
from fastapi.testclient import TestClient

from app.api.v1.deps import get_card_repo
from app.main import app


class InMemoryCardRepository:
    """Stands in for CardRepository; same three operations plus transaction()."""

    def __init__(self, fail_on_create: int | None = None):
        self.rows: dict[int, dict] = {}
        self.next_id = 1
        self.create_calls = 0
        self.fail_on_create = fail_on_create

    async def get_by_id(self, card_id: int) -> dict | None:
        row = self.rows.get(card_id)
        return dict(row) if row else None

    async def list_all(self) -> list[dict]:
        return [dict(self.rows[k]) for k in sorted(self.rows)]

    async def create(self, card: dict) -> dict:
        self.create_calls += 1
        if self.fail_on_create is not None and self.create_calls == self.fail_on_create:
            raise ConnectionError("database unreachable")
        row = {
            "id": self.next_id,
            "name": card.get("name"),
            "type": card.get("type"),
            "rarity": card.get("rarity"),
            "image_url": card.get("image_url"),
        }
        self.rows[self.next_id] = row
        self.next_id += 1
        return dict(row)

    @asynccontextmanager
    async def transaction(self):
        snapshot = copy.deepcopy(self.rows), self.next_id
        try:
            yield
        except BaseException:
            self.rows, self.next_id = snapshot
            raise


@pytest.fixture
def repo():
    return InMemoryCardRepository()


@pytest.fixture
def client(repo):
    app.dependency_overrides[get_card_repo] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def bolt():
    return {
        "name": "Bolt",
        "type": "Spell",
        "rarity": "Common",
        "imageUrl": "http://x/1.png",
    }


@pytest.fixture
def make_repo():
    return InMemoryCardRepository


@pytest.fixture
def client_for():
    def _client(repo):
        app.dependency_overrides[get_card_repo] = lambda: repo
        return TestClient(app)
    yield _client
    app.dependency_overrides.clear()
