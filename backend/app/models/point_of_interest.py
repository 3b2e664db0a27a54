"""PointOfInterest ORM — persists a named place that belongs to one city.

Invariants:
    - Always belongs to a City (city_id FK, cascade on delete)
    - name is non-nullable, max 50 chars; description optional, max 200 chars
"""

from sqlalchemy import Integer, String, ForeignKey, func, select
from sqlalchemy.orm import Mapped, mapped_column, relationship, column_property

from app.db.base import Base
from app.models.city import City


class PointOfInterest(Base):
    """Point of interest entity — child of a City."""
    __tablename__ = "points_of_interest"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    city_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("cities.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(200), nullable=True,
    )

    # Relationships
    city: Mapped["City"] = relationship(
        "City", back_populates="points_of_interest",
    )


# Loaded with every City row; lets light projections skip the child collection
City.number_of_points_of_interest = column_property(
    select(func.count(PointOfInterest.id))
    .where(PointOfInterest.city_id == City.id)
    .correlate_except(PointOfInterest)
    .scalar_subquery(),
)
