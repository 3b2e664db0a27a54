"""Tests for city projections — pure mapping to the light and full shapes."""

from dataclasses import dataclass, field

from app.core.project_city import (
    to_city, to_city_without_points_of_interest, to_point_of_interest,
)


@dataclass
class _Poi:
    id: int
    name: str
    description: str | None = None


@dataclass
class _City:
    id: int
    name: str
    description: str | None = None
    points_of_interest: list = field(default_factory=list)

    @property
    def number_of_points_of_interest(self) -> int:
        return len(self.points_of_interest)


class _UnloadedCity:
    """City whose children must not be touched (mirrors lazy='raise')."""
    id = 9
    name = "Ghent"
    description = "Medieval"
    number_of_points_of_interest = 4

    @property
    def points_of_interest(self):
        raise AssertionError("children accessed")


def _paris():
    return _City(
        id=3, name="Paris", description="Tower on the river",
        points_of_interest=[
            _Poi(6, "The Louvre", "Museum"),
            _Poi(5, "Eiffel Tower", None),
        ],
    )


def test_light_projection_carries_count_not_children():
    dto = to_city_without_points_of_interest(_paris())
    assert dto.number_of_points_of_interest == 2
    dumped = dto.model_dump(by_alias=True)
    assert dumped == {
        "id": 3,
        "name": "Paris",
        "description": "Tower on the river",
        "numberOfPointsOfInterest": 2,
    }
    assert "pointsOfInterest" not in dumped


def test_light_projection_never_reads_children():
    dto = to_city_without_points_of_interest(_UnloadedCity())
    assert dto.number_of_points_of_interest == 4


def test_full_projection_keeps_stored_child_order():
    dto = to_city(_paris())
    assert [p.id for p in dto.points_of_interest] == [6, 5]
    assert [p.name for p in dto.points_of_interest] == ["The Louvre", "Eiffel Tower"]


def test_full_projection_has_no_count_field():
    dumped = to_city(_paris()).model_dump(by_alias=True)
    assert "numberOfPointsOfInterest" not in dumped
    assert dumped["pointsOfInterest"][1] == {
        "id": 5, "name": "Eiffel Tower", "description": None,
    }


def test_full_projection_of_city_without_children_is_empty_list():
    dto = to_city(_City(id=1, name="Nowhere"))
    assert dto.points_of_interest == []


def test_point_of_interest_projection_copies_fields():
    dto = to_point_of_interest(_Poi(1, "Central Park", "Big park"))
    assert (dto.id, dto.name, dto.description) == (1, "Central Park", "Big park")


def test_projection_is_deterministic():
    city = _paris()
    assert to_city(city) == to_city(city)
    assert to_city_without_points_of_interest(city) == to_city_without_points_of_interest(city)
