"""City ORM — persists the aggregate root for points of interest.

Invariants:
    - id is an autoincrement integer primary key (assigned on insert, never changed)
    - name is non-nullable, max 50 chars; description optional, max 200 chars
    - points_of_interest never lazy-loads: readers must selectinload() it explicitly

Design Decisions:
    - lazy="raise" on children: implicit IO in async context fails loudly instead of
      silently issuing a query; light projections only read the count column
    - number_of_points_of_interest is a correlated count column_property, attached in
      point_of_interest.py once both tables are mapped
    - cascade delete: points of interest have no lifecycle outside their city
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class City(Base):
    """City aggregate root — owns its points of interest."""
    __tablename__ = "cities"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(200), nullable=True,
    )

    # Relationships
    points_of_interest: Mapped[list["PointOfInterest"]] = relationship(
        "PointOfInterest", back_populates="city",
        cascade="all, delete-orphan", lazy="raise",
        order_by="PointOfInterest.id",
    )
