"""create_user_table

Revision ID: 4b1d9e2a7c30
Revises:
Create Date: 2026-10-17 10:12:44.318205

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1d9e2a7c30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the User table with a unique email."""
    op.create_table('User',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('avatar_url', sa.String(length=500), nullable=True),
        sa.Column('follwers', sa.Integer(), server_default='0', nullable=False),
        sa.Column('isActive', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('registeredAt', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Drop the User table."""
    op.drop_table('User')
