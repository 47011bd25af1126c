"""Add shared_defaults table

Revision ID: 001
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create shared_defaults table."""
    op.create_table('shared_defaults', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('suite_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('key', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('value', sa.Float(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('suite_name', 'key', name='uq_shared_defaults_suite_key'))
    op.create_index(op.f('ix_shared_defaults_suite_name'), 'shared_defaults', ['suite_name'], unique=False)


def downgrade() -> None:
    """Drop shared_defaults table."""
    op.drop_index(op.f('ix_shared_defaults_suite_name'), table_name='shared_defaults')
    op.drop_table('shared_defaults')
