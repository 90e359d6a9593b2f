"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.v1.router import api_router
from app.core.config import Settings, get_settings
from app.core.logging import configure_logging
from app.db.init_db import database_version, init_db
from app.db.session import get_engine

logger = logging.getLogger(__name__)


def startup(settings: Settings) -> None:
    """Validate configuration and bring the schema up to date."""
    settings.validate_database()
    logger.info("Configuration loaded successfully: %s", settings.masked_summary())

    engine = get_engine()
    if settings.AUTO_MIGRATE:
        init_db(engine)
    logger.info("Connected to database: version=%s", database_version(engine))


def create_app(settings: Settings | None = None, run_startup: bool = True) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to report in service info; defaults to get_settings()
        run_startup: Validate config and create tables when the app starts
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        configure_logging(settings.LOG_LEVEL)
        if run_startup:
            startup(settings)
        logger.info("Starting API server: port=%s db_type=%s", settings.SERVER_PORT, settings.DB_TYPE)
        yield

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="E-commerce backend: user registration, login and lookup.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan)

    # Include API router
    application.include_router(api_router, prefix="/api/v1")

    @application.get("/")
    async def root():
        """Root endpoint - service summary."""
        return {
            "message": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "status": "healthy"
        }

    @application.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        return {
            "status": "OK",
            "service": "ecomgo-api",
            "version": settings.VERSION
        }

    @application.get("/info")
    async def info():
        return {
            "project name": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "authors": settings.AUTHORS,
            "project url": settings.PROJECT_URL
        }

    return application


app = create_app()
