"""
User API schemas.

Pydantic models for user-related request/response validation.
"""

from datetime import datetime
from typing import Annotated, Optional

from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _check_email_shape(value: str) -> str:
    """Reject malformed addresses but keep the input exactly as given."""
    validate_email(value, check_deliverability=False)
    return value


# Emails are compared case-sensitively, so no normalization is applied.
EmailAddress = Annotated[str, AfterValidator(_check_email_shape)]


# Request schemas
class RegisterRequest(BaseModel):
    """Schema for user registration."""
    email: EmailAddress
    password: str = Field(..., min_length=6, description="Password (min 6 characters)")
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class LoginRequest(BaseModel):
    """Schema for user login."""
    email: EmailAddress
    password: str = Field(..., min_length=1)


# Response schemas
class UserResponse(BaseModel):
    """Schema for user data in API responses (no password hash)."""
    model_config = ConfigDict(from_attributes=True)  # Allows creation from SQLModel objects

    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class AuthResponse(BaseModel):
    """Token, public user view and nominal token expiry (unix seconds)."""
    token: str
    user: UserResponse
    expires_at: int
