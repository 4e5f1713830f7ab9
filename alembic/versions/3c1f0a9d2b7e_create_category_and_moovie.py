"""create_category_and_moovie

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-17 10:12:41.208114

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f0a9d2b7e'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

def upgrade():
    op.create_table(
        "category",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )
    op.create_index("ix_category_id", "category", ["id"])

    op.create_table(
        "moovie",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("category.id"), nullable=False),
        sa.Column("realease_date", sa.Date(), nullable=True),
    )
    op.create_index("ix_moovie_id", "moovie", ["id"])
    op.create_index("ix_moovie_category_id", "moovie", ["category_id"])

def downgrade():
    op.drop_index("ix_moovie_category_id", table_name="moovie")
    op.drop_index("ix_moovie_id", table_name="moovie")
    op.drop_table("moovie")
    op.drop_index("ix_category_id", table_name="category")
    op.drop_table("category")
