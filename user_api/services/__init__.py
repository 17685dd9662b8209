"""Service layer package."""

from user_api.services.user_store import UserStore

__all__ = ["UserStore"]
