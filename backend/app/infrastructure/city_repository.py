"""City Repository — SQLAlchemy implementation of CityInfoRepository.

Invariants:
    - name filter: case-insensitive exact match on City.name, both sides folded by SQL lower()
    - search_query: case-insensitive substring match on name OR description,
      LIKE wildcards in the query match literally (autoescape)
    - Both filters conjunctive; None means "no filter"
    - Count is taken over the filtered set BEFORE limit/offset
    - Page order is deterministic: name, then id
    - Children loaded (selectinload) only when include_points_of_interest is True
    - A page_number below 1 yields no rows but still reports the true count

Design Decisions:
    - Session injected per request (get_db): no engine or pool knowledge here
    - SQLAlchemy errors NOT caught here: DatabaseSessionManager maps them to DatabaseError
"""

from typing import Sequence

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.domain_types import CityId
from app.core.pagination import page_offset
from app.models import City


def _apply_filters(
    query: Select, name: str | None, search_query: str | None,
) -> Select:
    if name:
        query = query.where(func.lower(City.name) == func.lower(name))
    if search_query:
        query = query.where(
            or_(
                City.name.icontains(search_query, autoescape=True),
                City.description.icontains(search_query, autoescape=True),
            ),
        )
    return query


class SqlAlchemyCityInfoRepository:
    """Reads cities and their points of interest from the relational store."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def fetch_page(
        self,
        name: str | None,
        search_query: str | None,
        page_number: int,
        page_size: int,
    ) -> tuple[Sequence[City], int]:
        count_query = _apply_filters(
            select(func.count(City.id)), name, search_query,
        )
        total = (await self.db.execute(count_query)).scalar_one()

        offset = page_offset(page_number, page_size)
        if offset is None or offset >= total:
            return [], total

        page_query = (
            _apply_filters(select(City), name, search_query)
            .order_by(City.name, City.id)
            .limit(page_size)
            .offset(offset)
        )
        result = await self.db.execute(page_query)
        return result.scalars().all(), total

    async def fetch_by_id(
        self, city_id: CityId, include_points_of_interest: bool,
    ) -> City | None:
        query = select(City).where(City.id == city_id)
        if include_points_of_interest:
            query = query.options(selectinload(City.points_of_interest))
        result = await self.db.execute(query)
        return result.scalar_one_or_none()
