"""City Projections — pure mapping from persisted cities to response schemas.

Invariants:
    - Deterministic and side-effect-free: field selection and count derivation only
    - Light projection never touches points_of_interest (children may be unloaded)
    - Full projection preserves the repository's child order (no re-sorting)
"""

from app.core.repository_protocols import CityLike, PointOfInterestLike
from app.schemas.city import City, CityWithoutPointsOfInterest, PointOfInterest


def to_point_of_interest(poi: PointOfInterestLike) -> PointOfInterest:
    return PointOfInterest(id=poi.id, name=poi.name, description=poi.description)


def to_city_without_points_of_interest(city: CityLike) -> CityWithoutPointsOfInterest:
    """Light projection: child count only."""
    return CityWithoutPointsOfInterest(
        id=city.id,
        name=city.name,
        description=city.description,
        number_of_points_of_interest=city.number_of_points_of_interest,
    )


def to_city(city: CityLike) -> City:
    """Full projection: every child mapped in order."""
    return City(
        id=city.id,
        name=city.name,
        description=city.description,
        points_of_interest=[
            to_point_of_interest(poi) for poi in city.points_of_interest
        ],
    )
