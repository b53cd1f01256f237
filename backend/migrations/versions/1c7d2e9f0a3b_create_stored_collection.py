"""create stored_collection table for the sql collection store

Revision ID: 1c7d2e9f0a3b
Revises:
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '1c7d2e9f0a3b'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'stored_collection' in insp.get_table_names():
        return
    op.create_table(
        'stored_collection',
        sa.Column('name', sa.String(length=64), nullable=False),
        sa.Column('payload', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('name'),
    )


def downgrade():
    op.drop_table('stored_collection')
