"""
Authentication endpoints.

Handles user registration and login.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import get_auth_service, get_operation_context
from app.api.errors import to_http_exception
from app.core.context import OperationContext
from app.core.exceptions import AppError, InvalidCredentials
from app.schemas.user import AuthResponse, LoginRequest, RegisterRequest
from app.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register",
             summary="User registration endpoint.",
             response_model=AuthResponse,
             status_code=status.HTTP_201_CREATED)
def register(user_data: RegisterRequest, service: AuthService = Depends(get_auth_service),
             ctx: OperationContext = Depends(get_operation_context)):
    """
    Register a new user.

    Args:
        user_data: User registration data (email, password, first_name, last_name)

    Returns:
        Access token and created user data (without password)

    Raises:
        HTTPException 409: If email already registered
    """
    logger.info("Register endpoint called")
    try:
        return service.register(user_data, ctx)
    except AppError as e:
        logger.warning("Registration failed: %s", e)
        raise to_http_exception(e) from e


@router.post("/login",
             summary="User login endpoint.",
             response_model=AuthResponse)
def login(login_data: LoginRequest, service: AuthService = Depends(get_auth_service),
          ctx: OperationContext = Depends(get_operation_context)):
    """
    Authenticate user via JSON body.

    Args:
        login_data: User login credentials (email, password)

    Returns:
        Access token and user data
    """
    logger.info("Login endpoint called")
    try:
        return service.login(login_data, ctx)
    except InvalidCredentials as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message,
                            headers={"WWW-Authenticate": "Bearer"}) from e
    except AppError as e:
        logger.warning("Login failed: %s", e)
        raise to_http_exception(e) from e
