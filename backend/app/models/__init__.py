"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - City is the aggregate root; points of interest are scoped by city_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references and the City count column before any query runs
"""

from app.models.city import City  # noqa: F401
from app.models.point_of_interest import PointOfInterest  # noqa: F401
