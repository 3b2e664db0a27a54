"""Seed cities — sample cities and points of interest for local environments.

Revision ID: 002_seed_cities
Revises: 001_cities
Create Date: 2026-10-19

Ids are explicit so points of interest can reference their city; the
Postgres sequences are advanced past them afterwards.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "002_seed_cities"
down_revision: Union[str, None] = "001_cities"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_cities = sa.table(
    "cities",
    sa.column("id", sa.Integer),
    sa.column("name", sa.String),
    sa.column("description", sa.String),
)
_points_of_interest = sa.table(
    "points_of_interest",
    sa.column("id", sa.Integer),
    sa.column("city_id", sa.Integer),
    sa.column("name", sa.String),
    sa.column("description", sa.String),
)

CITIES = [
    {"id": 1, "name": "New York City",
     "description": "The one with that big park."},
    {"id": 2, "name": "Antwerp",
     "description": "The one with the cathedral that was never really finished."},
    {"id": 3, "name": "Paris",
     "description": "The one with that big tower on the river Seine."},
]

POINTS_OF_INTEREST = [
    {"id": 1, "city_id": 1, "name": "Central Park",
     "description": "The most visited urban park in the United States."},
    {"id": 2, "city_id": 1, "name": "Empire State Building",
     "description": "A 102-story skyscraper located in Midtown Manhattan."},
    {"id": 3, "city_id": 2, "name": "Cathedral of Our Lady",
     "description": "A Gothic style cathedral, conceived by architects Jan and Pieter Appelmans."},
    {"id": 4, "city_id": 2, "name": "Antwerp Central Station",
     "description": "The finest example of railway architecture in Belgium."},
    {"id": 5, "city_id": 3, "name": "Eiffel Tower",
     "description": "A wrought iron lattice tower on the Champ de Mars."},
    {"id": 6, "city_id": 3, "name": "The Louvre",
     "description": "The world's largest museum."},
]


def upgrade() -> None:
    op.bulk_insert(_cities, CITIES)
    op.bulk_insert(_points_of_interest, POINTS_OF_INTEREST)
    if op.get_bind().dialect.name == "postgresql":
        op.execute(
            "SELECT setval(pg_get_serial_sequence('cities', 'id'), "
            "(SELECT MAX(id) FROM cities))",
        )
        op.execute(
            "SELECT setval(pg_get_serial_sequence('points_of_interest', 'id'), "
            "(SELECT MAX(id) FROM points_of_interest))",
        )


def downgrade() -> None:
    op.execute(
        _points_of_interest.delete().where(
            _points_of_interest.c.id.in_([p["id"] for p in POINTS_OF_INTEREST]),
        ),
    )
    op.execute(
        _cities.delete().where(_cities.c.id.in_([c["id"] for c in CITIES])),
    )
