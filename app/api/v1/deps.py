from fastapi import Depends
from asyncpg import Connection

from app.db.session import get_db_connection
from app.repositories.card_repo import CardRepository
from app.services.card_service import CardService


def get_card_repo(conn: Connection = Depends(get_db_connection)) -> CardRepository:
    return CardRepository(conn)


def get_card_service(card_repo: CardRepository = Depends(get_card_repo)) -> CardService:
    return CardService(card_repo)
