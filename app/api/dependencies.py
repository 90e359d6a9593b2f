"""
Shared API dependencies.

Reusable FastAPI dependencies wiring the auth service to a database session.
"""

from fastapi import Depends
from sqlmodel import Session

from app.core.config import Settings, get_settings
from app.core.context import OperationContext
from app.core.security import PasswordHasher, TokenIssuer
from app.db.repositories.user import UserRepository
from app.db.session import get_db
from app.services.auth_service import AuthService


def get_auth_service(db: Session = Depends(get_db), settings: Settings = Depends(get_settings)) -> AuthService:
    """Build the auth service for one request."""
    return AuthService(
        repository=UserRepository(db),
        hasher=PasswordHasher(),
        tokens=TokenIssuer(prefix=settings.TOKEN_PREFIX, expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )


def get_operation_context(settings: Settings = Depends(get_settings)) -> OperationContext:
    """Per-request cancellation context bounded by the configured timeout."""
    return OperationContext(timeout=settings.REQUEST_TIMEOUT_SECONDS)
