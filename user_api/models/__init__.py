"""SQLAlchemy models package."""

from user_api.models.base import TimestampMixin
from user_api.models.user import User

__all__ = [
    "TimestampMixin",
    "User",
]
