"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - fetch_page reports the total matching count BEFORE pagination

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE these protocols are never async themselves —
      the shell orchestrates the async calls around the pure logic
"""

from typing import Protocol, Sequence

from app.core.domain_types import CityId


class PointOfInterestLike(Protocol):
    """Structural contract for a persisted point of interest."""
    id: int
    name: str
    description: str | None


class CityLike(Protocol):
    """Structural contract for a persisted city.

    points_of_interest is only guaranteed to be readable when the city was
    fetched with include_points_of_interest=True; number_of_points_of_interest
    is always available.
    """
    id: int
    name: str
    description: str | None
    number_of_points_of_interest: int

    @property
    def points_of_interest(self) -> Sequence[PointOfInterestLike]: ...


class CityInfoRepository(Protocol):
    """Contract for city reads — implemented by shell."""
    async def fetch_page(
        self,
        name: str | None,
        search_query: str | None,
        page_number: int,
        page_size: int,
    ) -> tuple[Sequence[CityLike], int]: ...

    async def fetch_by_id(
        self, city_id: CityId, include_points_of_interest: bool,
    ) -> CityLike | None: ...
