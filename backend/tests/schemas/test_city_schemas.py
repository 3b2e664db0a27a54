"""City schemas — camelCase JSON, snake_case construction, distinct shapes.

Invariants:
    - Both snake_case names and camelCase aliases populate the models
    - Serialization by alias produces camelCase keys
    - Each projection requires its own distinguishing field
"""

import pytest
from pydantic import ValidationError

from app.schemas.city import City, CityWithoutPointsOfInterest, PointOfInterest


def test_light_projection_accepts_alias_and_field_name():
    by_name = CityWithoutPointsOfInterest(
        id=1, name="Antwerp", description=None, number_of_points_of_interest=2,
    )
    by_alias = CityWithoutPointsOfInterest.model_validate({
        "id": 1, "name": "Antwerp", "description": None,
        "numberOfPointsOfInterest": 2,
    })
    assert by_name == by_alias


def test_full_projection_serializes_camel_case():
    city = City(
        id=2, name="Paris", description="Tower",
        points_of_interest=[PointOfInterest(id=5, name="Eiffel Tower")],
    )
    assert city.model_dump(by_alias=True) == {
        "id": 2,
        "name": "Paris",
        "description": "Tower",
        "pointsOfInterest": [
            {"id": 5, "name": "Eiffel Tower", "description": None},
        ],
    }


def test_light_projection_requires_count():
    with pytest.raises(ValidationError):
        CityWithoutPointsOfInterest(id=1, name="Antwerp")


def test_full_projection_requires_children():
    with pytest.raises(ValidationError):
        City(id=1, name="Antwerp")
