from sqlalchemy import Column, Integer, String
from app.db.base import Base


class Card(Base):
    __tablename__ = "cards"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=True)
    type = Column(String(255), nullable=True)
    rarity = Column(String(255), nullable=True)
    image_url = Column(String(2048), nullable=True, doc="Exposed as imageUrl on the wire")

    def __repr__(self):
        return f"<Card(id={self.id}, name={self.name}, rarity={self.rarity})>"
