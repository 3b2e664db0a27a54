"""Cities schema — cities and their points of interest.

Revision ID: 001_cities
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_cities"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "cities",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("description", sa.String(200), nullable=True),
    )

    op.create_table(
        "points_of_interest",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "city_id", sa.Integer,
            sa.ForeignKey("cities.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("description", sa.String(200), nullable=True),
    )
    op.create_index(
        "ix_points_of_interest_city_id", "points_of_interest", ["city_id"],
    )


def downgrade() -> None:
    op.drop_index("ix_points_of_interest_city_id", table_name="points_of_interest")
    op.drop_table("points_of_interest")
    op.drop_table("cities")
