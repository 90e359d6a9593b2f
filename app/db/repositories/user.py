"""
User repository.

Handles database operations for User model. Every lookup skips soft-deleted
rows, and every write is a single add + commit so a failure or cancellation
leaves nothing behind.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, col, select

from app.core.context import OperationContext
from app.core.exceptions import Cancelled, StoreError, UniquenessViolation
from app.models.user import User, utcnow

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def find_by_email(self, email: str, ctx: Optional[OperationContext] = None) -> Optional[User]:
        """
        Get a live user by email address.

        Args:
            email: User email (exact, case-sensitive match)
            ctx: Optional cancellation context

        Returns:
            User instance if found, None otherwise
        """
        statement = select(User).where(User.email == email, col(User.deleted_at).is_(None))
        return self._first(statement, ctx, email=email)

    def find_by_id(self, user_id: str, ctx: Optional[OperationContext] = None) -> Optional[User]:
        """
        Get a live user by ID.

        Args:
            user_id: User ID
            ctx: Optional cancellation context

        Returns:
            User instance if found, None otherwise
        """
        statement = select(User).where(User.id == user_id, col(User.deleted_at).is_(None))
        return self._first(statement, ctx, id=user_id)

    def insert(self, user: User, ctx: Optional[OperationContext] = None) -> User:
        """
        Insert a new user.

        Args:
            user: User instance to create (id and timestamps filled by the model)
            ctx: Optional cancellation context

        Returns:
            Created user, refreshed from the database

        Raises:
            UniquenessViolation: If the email is already taken
            StoreError: On any other database failure
            Cancelled: If ctx was cancelled before the commit
        """
        try:
            self._check(ctx)
            self.session.add(user)
            self._check(ctx)
            self.session.commit()
            self.session.refresh(user)
        except Cancelled:
            self.session.rollback()
            raise
        except IntegrityError as e:
            self.session.rollback()
            logger.warning("Insert rejected by unique constraint: email=%s", user.email)
            raise UniquenessViolation("User already exists") from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Failed to create user: email=%s error=%s", user.email, e)
            raise StoreError() from e

        logger.info("User created: email=%s id=%s", user.email, user.id)
        return user

    def update(self, user: User, ctx: Optional[OperationContext] = None) -> User:
        """
        Update an existing user and refresh ``updated_at``.

        Args:
            user: User instance with updated data
            ctx: Optional cancellation context

        Returns:
            Updated user
        """
        try:
            self._check(ctx)
            user.updated_at = utcnow()
            self.session.add(user)
            self._check(ctx)
            self.session.commit()
            self.session.refresh(user)
        except Cancelled:
            self.session.rollback()
            raise
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Failed to update user: id=%s error=%s", user.id, e)
            raise StoreError() from e

        logger.info("User updated: id=%s", user.id)
        return user

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _check(ctx: Optional[OperationContext]) -> None:
        if ctx is not None:
            ctx.check()

    def _first(self, statement, ctx: Optional[OperationContext], **lookup) -> Optional[User]:
        self._check(ctx)
        try:
            user = self.session.exec(statement).first()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Failed to fetch user: %s error=%s", lookup, e)
            raise StoreError() from e
        if user is None:
            logger.debug("User not found: %s", lookup)
        return user
