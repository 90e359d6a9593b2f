"""
User endpoints.

Lookup by id. The bearer token is not checked here.
"""
import logging

from fastapi import APIRouter, Depends

from app.api.dependencies import get_auth_service, get_operation_context
from app.api.errors import to_http_exception
from app.core.context import OperationContext
from app.core.exceptions import AppError
from app.schemas.user import UserResponse
from app.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{user_id}", summary="Get user by id.", response_model=UserResponse)
def get_user(user_id: str, service: AuthService = Depends(get_auth_service),
             ctx: OperationContext = Depends(get_operation_context)):
    logger.info("Get user endpoint called: id=%s", user_id)
    try:
        return service.get_by_id(user_id, ctx)
    except AppError as e:
        logger.warning("Get user failed: id=%s error=%s", user_id, e)
        raise to_http_exception(e) from e
