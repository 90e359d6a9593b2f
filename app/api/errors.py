"""
Error kind to HTTP status mapping.

Only the generic ``message`` of an error reaches the client.
"""

from fastapi import HTTPException, status

from app.core.exceptions import (
    AlreadyExists,
    AppError,
    Cancelled,
    InvalidCredentials,
    InvalidInput,
    NotFound,
)

STATUS_BY_ERROR = {
    InvalidInput: 422,
    AlreadyExists: status.HTTP_409_CONFLICT,
    InvalidCredentials: status.HTTP_401_UNAUTHORIZED,
    NotFound: status.HTTP_404_NOT_FOUND,
    Cancelled: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def to_http_exception(error: AppError) -> HTTPException:
    """Translate an application error; unknown kinds become a 500."""
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=error.message)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=AppError.message)
