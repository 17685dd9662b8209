"""Common FastAPI dependencies for consistent type annotations.

Usage:
    from user_api.deps import Store

    async def my_endpoint(store: Store):
        # store is a UserStore bound to the request's AsyncSession
        ...
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.database import get_db
from user_api.services import UserStore

DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_user_store(db: DbSession) -> UserStore:
    """Bind a storage client to the request-scoped session."""
    return UserStore(db)


Store = Annotated[UserStore, Depends(get_user_store)]

__all__ = ["DbSession", "Store", "get_user_store"]
