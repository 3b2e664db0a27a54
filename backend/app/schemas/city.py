"""City Schemas — Pydantic response models for the two city projections.

Invariants:
    - CityWithoutPointsOfInterest has NO pointsOfInterest field (omitted, not empty)
    - City carries the full child list and no count field
    - JSON keys are camelCase (alias_generator); Python attributes stay snake_case

Design Decisions:
    - Two explicit models over one model with optional children: the projection
      flag picks the class, never a runtime shape inference
    - populate_by_name: mapper builds models with snake_case keyword arguments
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PointOfInterest(_CamelModel):
    """Point of interest as exposed inside the full city projection."""
    id: int
    name: str
    description: str | None = None


class CityWithoutPointsOfInterest(_CamelModel):
    """Light projection — used by listing and by fetches without expansion."""
    id: int
    name: str
    description: str | None = None
    number_of_points_of_interest: int


class City(_CamelModel):
    """Full projection — city plus its points of interest in stored order."""
    id: int
    name: str
    description: str | None = None
    points_of_interest: list[PointOfInterest]
