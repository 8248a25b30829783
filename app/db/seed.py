# app/db/seed.py
import asyncio
import logging
import random
from faker import Faker
from tqdm import tqdm

from app.db.session import connect_db_pool, get_pool, close_db_pool

logger = logging.getLogger(__name__)

fake = Faker()

NUM_CARDS = 5_000
BATCH_CARDS = 500

CARD_TYPES = ["Creature", "Spell", "Artifact", "Land", "Enchantment"]
RARITIES = ["Common", "Uncommon", "Rare", "Mythic"]
RARITY_WEIGHTS = [0.60, 0.25, 0.12, 0.03]


def fake_card() -> tuple[str, str, str, str]:
    name = " ".join(w.capitalize() for w in fake.words(nb=random.randint(1, 3)))
    card_type = random.choice(CARD_TYPES)
    rarity = random.choices(RARITIES, weights=RARITY_WEIGHTS)[0]
    image_url = fake.image_url()
    return name, card_type, rarity, image_url


async def seed():
    await connect_db_pool()
    pool = await get_pool()
    if pool is None:
        raise RuntimeError("Database pool could not be initialized")

    sql = """
    INSERT INTO cards (name, type, rarity, image_url)
    VALUES ($1, $2, $3, $4)
    """

    async with pool.acquire() as conn:
        batch = []
        for _ in tqdm(range(NUM_CARDS), desc="Generating cards"):
            batch.append(fake_card())
            if len(batch) >= BATCH_CARDS:
                await conn.executemany(sql, batch)
                batch.clear()

        if batch:
            await conn.executemany(sql, batch)

    logger.info("Seeded %d cards.", NUM_CARDS)
    await close_db_pool()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())
