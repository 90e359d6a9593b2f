"""
Database initialization.

Creates all tables from the SQLModel metadata.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from app.db import base  # noqa: F401  registers models on SQLModel.metadata

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """
    Initialize database schema.

    Creates missing tables and indexes; existing columns are never dropped.
    """
    logger.info("Running database migrations")
    SQLModel.metadata.create_all(engine)
    logger.info("All migrations completed successfully")


def database_version(engine: Engine) -> str | None:
    """Return the server version string, or None if the dialect has no VERSION()."""
    query = "SELECT sqlite_version()" if engine.dialect.name == "sqlite" else "SELECT VERSION()"
    with engine.connect() as conn:
        return conn.execute(text(query)).scalar()
