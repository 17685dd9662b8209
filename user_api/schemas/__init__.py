"""Pydantic schemas package."""

from user_api.schemas.auth import LoginResponse
from user_api.schemas.base import BaseResponse, ErrorResponse, MessageResponse
from user_api.schemas.user import (
    UserCreate,
    UserCreatedResponse,
    UserResponse,
    UserUpdate,
)

__all__ = [
    "BaseResponse",
    "ErrorResponse",
    "LoginResponse",
    "MessageResponse",
    "UserCreate",
    "UserCreatedResponse",
    "UserResponse",
    "UserUpdate",
]
