"""City Queries — read gateway between the cities routes and the repository.

Invariants:
    - Exactly one awaited repository call per operation; no retries, no caching
    - page_size clamped to MAX_CITIES_PAGE_SIZE before the repository sees it
    - Blank filters are dropped (None), non-blank filters are stripped
    - Listing always maps to the light projection
    - get_city raises ResourceNotFoundError for unknown ids, whatever the flag

Design Decisions:
    - Repository injected via constructor: tests pass an in-memory fake (ADR: impureim sandwich)
    - Returns (items, PaginationMetadata) instead of writing headers: transport stays in api/
    - Repository failures propagate untouched; the global handlers own the 500 mapping
"""

import logging

from app.core.domain_types import CityId, DEFAULT_CITIES_PAGE_SIZE
from app.core.errors import ErrorContext, ResourceNotFoundError
from app.core.pagination import PaginationMetadata, clamp_page_size
from app.core.project_city import to_city, to_city_without_points_of_interest
from app.core.repository_protocols import CityInfoRepository
from app.schemas.city import City, CityWithoutPointsOfInterest

logger = logging.getLogger(__name__)


def normalize_filter(value: str | None) -> str | None:
    """Strip a text filter; blank means 'no filter'."""
    if value is None:
        return None
    value = value.strip()
    return value or None


class CityQueryService:
    """List and fetch cities through a CityInfoRepository."""

    def __init__(self, repository: CityInfoRepository):
        self.repository = repository

    async def list_cities(
        self,
        name: str | None = None,
        search_query: str | None = None,
        page_number: int = 1,
        page_size: int = DEFAULT_CITIES_PAGE_SIZE,
    ) -> tuple[list[CityWithoutPointsOfInterest], PaginationMetadata]:
        effective_size = clamp_page_size(page_size)
        if effective_size != page_size:
            logger.debug(
                f"Page size {page_size} clamped to {effective_size}",
                extra={"page_size": effective_size},
            )

        cities, total = await self.repository.fetch_page(
            normalize_filter(name),
            normalize_filter(search_query),
            page_number,
            effective_size,
        )
        metadata = PaginationMetadata(
            total_item_count=total,
            page_size=effective_size,
            current_page=page_number,
        )
        logger.info(
            "Cities listed",
            extra={
                "page_number": page_number,
                "page_size": effective_size,
                "total_item_count": total,
            },
        )
        return [to_city_without_points_of_interest(c) for c in cities], metadata

    async def get_city(
        self, city_id: CityId, include_points_of_interest: bool = False,
    ) -> City | CityWithoutPointsOfInterest:
        city = await self.repository.fetch_by_id(
            city_id, include_points_of_interest,
        )
        if city is None:
            raise ResourceNotFoundError(
                "City", city_id, context=ErrorContext(city_id=city_id),
            )
        logger.info(
            "City fetched",
            extra={
                "city_id": city_id,
                "include_points_of_interest": include_points_of_interest,
            },
        )
        if include_points_of_interest:
            return to_city(city)
        return to_city_without_points_of_interest(city)
