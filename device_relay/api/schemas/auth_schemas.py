"""
Pydantic schemas for authentication and user management endpoints.
"""
from datetime import datetime
from typing import Any

from pydantic import Field

from .base import CamelModel
from ...domain.entities import User


class LoginRequest(CamelModel):
    """Operator login request."""
    username: str = Field(..., min_length=1, description="Account name")
    password: str = Field(..., min_length=1, description="Account password")


class LoginResponse(CamelModel):
    """Issued session token."""
    token: str
    role: str
    expires_at: datetime


class UserCreateRequest(CamelModel):
    """Request to create an operator account."""
    username: Any = None
    password: Any = None
    role: Any = None


class UserResponse(CamelModel):
    """Public view of an account; never includes credentials."""
    username: str
    role: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls.model_validate(user.to_public_dict())


class UserCreatedResponse(CamelModel):
    message: str
    user: UserResponse
