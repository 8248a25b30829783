"""create cards table

Revision ID: 3f2a9c1d4b7e
Revises:
Create Date: 2026-10-19 10:12:44.518203
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d4b7e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'cards',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('type', sa.String(length=255), nullable=True),
        sa.Column('rarity', sa.String(length=255), nullable=True),
        sa.Column('image_url', sa.String(length=2048), nullable=True),
    )
    op.create_index(op.f('ix_cards_id'), 'cards', ['id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_cards_id'), table_name='cards')
    op.drop_table('cards')
