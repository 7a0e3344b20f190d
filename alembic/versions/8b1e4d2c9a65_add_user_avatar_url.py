"""add_user_avatar_url

Revision ID: 8b1e4d2c9a65
Revises: 3f2a9c1d7b40
Create Date: 2026-10-19 15:40:02.118904

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8b1e4d2c9a65'
down_revision: Union[str, None] = '3f2a9c1d7b40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column('user', sa.Column('avatar_url', sa.String(), nullable=True))


def downgrade() -> None:
    op.drop_column('user', 'avatar_url')
