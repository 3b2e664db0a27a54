"""Cities — read-only listing and lookup of cities and their points of interest.

Invariants:
    - GET /cities body is a bare JSON array of light projections;
      page facts travel in the X-Pagination header, never in the body
    - pageSize above the maximum is clamped by the service, never rejected
    - pageSize below 1 and non-numeric parameters are rejected here (400)
    - GET /cities/{city_id} answers 404 with an empty body for unknown ids

Design Decisions:
    - Query aliases keep the public camelCase parameter names
      (searchQuery, pageNumber, pageSize, includePointsOfInterest)
    - Service built per request from the request-scoped session (Depends chain),
      so tests can override either get_db or get_city_repository
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import CityId, DEFAULT_CITIES_PAGE_SIZE
from app.core.errors import ResourceNotFoundError
from app.core.repository_protocols import CityInfoRepository
from app.infrastructure.city_repository import SqlAlchemyCityInfoRepository
from app.infrastructure.database import get_db
from app.schemas.city import City, CityWithoutPointsOfInterest
from app.services.city_queries import CityQueryService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/cities", tags=["cities"])

PAGINATION_HEADER = "X-Pagination"


def get_city_repository(
    db: AsyncSession = Depends(get_db),
) -> CityInfoRepository:
    return SqlAlchemyCityInfoRepository(db)


def get_city_query_service(
    repository: CityInfoRepository = Depends(get_city_repository),
) -> CityQueryService:
    return CityQueryService(repository)


@router.get("", response_model=list[CityWithoutPointsOfInterest])
async def list_cities(
    response: Response,
    name: str | None = Query(None),
    search_query: str | None = Query(None, alias="searchQuery"),
    page_number: int = Query(1, alias="pageNumber"),
    page_size: int = Query(
        DEFAULT_CITIES_PAGE_SIZE, alias="pageSize", ge=1,
    ),
    service: CityQueryService = Depends(get_city_query_service),
):
    """List cities, filtered and paginated. Points of interest are never expanded."""
    cities, metadata = await service.list_cities(
        name=name,
        search_query=search_query,
        page_number=page_number,
        page_size=page_size,
    )
    response.headers[PAGINATION_HEADER] = metadata.to_header()
    return cities


@router.get(
    "/{city_id}",
    response_model=City | CityWithoutPointsOfInterest,
    responses={status.HTTP_404_NOT_FOUND: {"description": "City not found"}},
)
async def get_city(
    city_id: int,
    include_points_of_interest: bool = Query(
        False, alias="includePointsOfInterest",
    ),
    service: CityQueryService = Depends(get_city_query_service),
):
    """Get one city, with its points of interest when requested."""
    try:
        return await service.get_city(
            CityId(city_id), include_points_of_interest,
        )
    except ResourceNotFoundError as e:
        logger.info(e.message, extra={"city_id": city_id})
        return Response(status_code=status.HTTP_404_NOT_FOUND)
