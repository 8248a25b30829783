from asyncpg import Connection

# cards.id is a 32-bit integer column
MAX_CARD_ID = 2_147_483_647


class CardRepository:
    """Repository for the cards table, backed by asyncpg."""

    def __init__(self, conn: Connection):
        self.conn = conn

    # ------------------ Retrieval Methods ------------------ #

    async def get_by_id(self, card_id: int) -> dict | None:
        if not 0 < card_id <= MAX_CARD_ID:
            return None
        sql = "SELECT * FROM cards WHERE id = $1;"
        record = await self.conn.fetchrow(sql, card_id)
        return dict(record) if record else None

    async def list_all(self) -> list[dict]:
        sql = "SELECT * FROM cards ORDER BY id;"
        records = await self.conn.fetch(sql)
        return [dict(record) for record in records]

    # ------------------ Creation ------------------ #

    async def create(self, card: dict) -> dict:
        sql = """
            INSERT INTO cards (name, type, rarity, image_url)
            VALUES ($1, $2, $3, $4)
            RETURNING *;
        """
        record = await self.conn.fetchrow(
            sql,
            card.get("name"),
            card.get("type"),
            card.get("rarity"),
            card.get("image_url"),
        )
        return dict(record)

    def transaction(self):
        return self.conn.transaction()
