"""
Pytest configuration and fixtures.

Every test gets a fresh in-memory SQLite database.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.core.config import Settings, get_settings
from app.core.security import PasswordHasher, TokenIssuer
from app.db import base  # noqa: F401
from app.db.repositories.user import UserRepository
from app.db.session import get_db
from app.main import create_app
from app.services.auth_service import AuthService


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, DB_TYPE="sqlite", DATABASE_URL="sqlite://")


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def repository(session: Session) -> UserRepository:
    return UserRepository(session)


@pytest.fixture
def service(repository: UserRepository) -> AuthService:
    return AuthService(repository=repository, hasher=PasswordHasher(), tokens=TokenIssuer())


@pytest.fixture
def client(engine: Engine, settings: Settings) -> Generator[TestClient, None, None]:
    """Test client with the database dependency pointed at the test engine."""
    app = create_app(settings, run_startup=False)

    def override_get_db() -> Generator[Session, None, None]:
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
