"""
Auth service.

Business logic for registration, login and user lookup.
"""

import logging
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from app.core.context import OperationContext
from app.core.exceptions import AlreadyExists, InvalidCredentials, InvalidInput, NotFound, UniquenessViolation
from app.core.security import PasswordHasher, TokenIssuer
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserResponse

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class AuthService:
    """Service for user authentication business logic."""

    def __init__(self, repository: UserRepository, hasher: PasswordHasher, tokens: TokenIssuer):
        """
        Initialize service with its collaborators.

        Args:
            repository: User store
            hasher: Password hasher
            tokens: Token issuer
        """
        self.repository = repository
        self.hasher = hasher
        self.tokens = tokens

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def register(self, data: Union[RegisterRequest, Mapping[str, Any]],
                 ctx: Optional[OperationContext] = None) -> AuthResponse:
        """
        Register a new user.

        Args:
            data: User registration data (email, password, first_name, last_name)
            ctx: Optional cancellation context for store calls

        Returns:
            Token and created user data (without password hash)

        Raises:
            InvalidInput: If data fails validation
            AlreadyExists: If email already registered
            StoreError: On persistence failure
        """
        data = self._parse(RegisterRequest, data)
        logger.info("Registering new user: email=%s", data.email)

        if self.repository.find_by_email(data.email, ctx) is not None:
            logger.warning("Registration failed, user already exists: email=%s", data.email)
            raise AlreadyExists()

        user = User(email=data.email, password_hash=self.hasher.hash(data.password),
                    first_name=data.first_name, last_name=data.last_name)
        try:
            user = self.repository.insert(user, ctx)
        except UniquenessViolation as e:
            # Lost a race with a concurrent registration for the same email.
            logger.warning("Registration failed, email taken concurrently: email=%s", data.email)
            raise AlreadyExists() from e

        logger.info("User registered successfully: email=%s id=%s", user.email, user.id)
        return self._auth_response(user)

    def login(self, data: Union[LoginRequest, Mapping[str, Any]],
              ctx: Optional[OperationContext] = None) -> AuthResponse:
        """
        Authenticate user and return access token.

        Args:
            data: User login credentials
            ctx: Optional cancellation context for store calls

        Returns:
            Token and user data

        Raises:
            InvalidInput: If data fails validation
            InvalidCredentials: If the email is unknown or the password is wrong
            StoreError: On persistence failure
        """
        data = self._parse(LoginRequest, data)
        logger.info("User login attempt: email=%s", data.email)

        user = self.repository.find_by_email(data.email, ctx)
        if user is None:
            logger.warning("Login failed, user not found: email=%s", data.email)
            raise InvalidCredentials()

        if not self.hasher.verify(data.password, user.password_hash):
            logger.warning("Login failed, invalid password: email=%s", data.email)
            raise InvalidCredentials()

        logger.info("User logged in successfully: email=%s", user.email)
        return self._auth_response(user)

    def get_by_id(self, user_id: str, ctx: Optional[OperationContext] = None) -> UserResponse:
        """
        Get user by ID.

        Args:
            user_id: User ID
            ctx: Optional cancellation context for store calls

        Returns:
            Public user data

        Raises:
            NotFound: If no live user has this id
            StoreError: On persistence failure
        """
        user = self.repository.find_by_id(user_id, ctx)
        if user is None:
            logger.warning("User not found: id=%s", user_id)
            raise NotFound()
        return UserResponse.model_validate(user)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _auth_response(self, user: User) -> AuthResponse:
        issued = self.tokens.issue(user.id)
        return AuthResponse(token=issued.token, user=UserResponse.model_validate(user),
                            expires_at=issued.expires_at)

    @staticmethod
    def _parse(schema: Type[SchemaT], data: Union[SchemaT, Mapping[str, Any]]) -> SchemaT:
        """Validate raw input against ``schema``; already-parsed models pass through."""
        if isinstance(data, schema):
            return data
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise InvalidInput(errors=e.errors(include_url=False)) from e
