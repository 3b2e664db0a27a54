"""CityInfo API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CityInfoError → structured JSON responses
    - CORS configured from settings (not hardcoded); X-Pagination exposed to browsers
    - Database initialized on startup via lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import cities, health
from app.api.routes.cities import PAGINATION_HEADER
from app.config import get_settings
from app.infrastructure import database
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("CityInfo API started")
    yield
    logger.info("CityInfo API shutting down")
    if database.db_manager:
        await database.db_manager.dispose()


app = FastAPI(
    title="CityInfo API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
    expose_headers=[PAGINATION_HEADER],
)

app.include_router(health.router)
app.include_router(cities.router)

register_error_handlers(app)
