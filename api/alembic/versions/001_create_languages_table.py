"""Create languages table

Revision ID: 001_create_languages_table
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_create_languages_table'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create languages table
    op.create_table(
        'languages',
        sa.Column('language_code', sa.String(), nullable=False),
        sa.Column('language_name', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('language_code')
    )


def downgrade() -> None:
    op.drop_table('languages')
