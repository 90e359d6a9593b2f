"""Pydantic schemas for request/response validation."""

from app.schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserResponse

__all__ = [
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    "UserResponse",
]
