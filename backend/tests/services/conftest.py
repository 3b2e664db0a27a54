"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
    - StaticPool: every session shares the single in-memory connection
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.models import City, PointOfInterest
import app.infrastructure.database as db_module
from app.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_cities(test_session_factory):
    """Insert sample cities in their own session; returns {name: id}."""
    cities = [
        City(
            name="New York City", description="The one with that big park.",
            points_of_interest=[
                PointOfInterest(name="Central Park", description="Urban park"),
                PointOfInterest(name="Empire State Building", description="Skyscraper"),
            ],
        ),
        City(
            name="Antwerp", description="The one with the unfinished cathedral.",
            points_of_interest=[
                PointOfInterest(name="Cathedral of Our Lady", description="Gothic"),
            ],
        ),
        City(
            name="Paris", description="The one with that big tower on the river Seine.",
            points_of_interest=[
                PointOfInterest(name="Eiffel Tower", description="Iron lattice"),
                PointOfInterest(name="The Louvre", description="Museum"),
                PointOfInterest(name="Notre-Dame", description=None),
            ],
        ),
        City(name="Parma", description=None),
        City(name="100% Town", description="Literal percent sign"),
    ]
    async with test_session_factory() as session:
        session.add_all(cities)
        await session.commit()
        return {c.name: c.id for c in cities}
