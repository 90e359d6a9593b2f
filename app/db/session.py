"""
Database session management.

Provides SQLModel engine and session creation.
"""

from functools import lru_cache
from typing import Generator

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from app.core.config import Settings, get_settings


def build_engine(settings: Settings) -> Engine:
    """Create an engine for the configured database type."""
    if settings.DATABASE_URL.startswith("sqlite"):
        return create_engine(settings.DATABASE_URL, echo=settings.DEBUG,
                             connect_args={"check_same_thread": False})

    return create_engine(
        settings.DATABASE_URL,
        echo=settings.DEBUG,  # Log SQL queries in debug mode
        pool_pre_ping=True,   # Verify connections before using
        pool_size=5,          # Idle connections kept in the pool
        max_overflow=20,      # Up to 25 open connections in total
        pool_recycle=300      # Recycle connections after 5 minutes
    )


@lru_cache()
def get_engine() -> Engine:
    """Get the cached engine for the application settings."""
    return build_engine(get_settings())


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance
    """
    with Session(get_engine()) as session:
        yield session
