"""Pydantic schemas for users."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from user_api.schemas.base import BaseResponse


class UserCreate(BaseModel):
    """Schema for signing up a user.

    Fields are only required to be present; no format rules are applied.
    """

    username: str
    email: str
    password: str


class UserUpdate(BaseModel):
    """Schema for updating a user.

    Unknown keys (``id`` included) are dropped, so only the writable columns
    ever reach storage.
    """

    model_config = ConfigDict(extra="ignore")

    username: str | None = None
    email: str | None = None
    password: str | None = None

    def changes(self) -> dict[str, Any]:
        """Return the fields the client actually supplied with a value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class UserCreatedResponse(BaseResponse):
    """Schema for the signup response; never carries the password."""

    id: int
    username: str
    email: str


class UserResponse(UserCreatedResponse):
    """Full user row as stored."""

    password: str
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def ensure_timezone_aware(cls, v: datetime) -> datetime:
        """Ensure datetime fields are timezone-aware."""
        if isinstance(v, datetime) and v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v
