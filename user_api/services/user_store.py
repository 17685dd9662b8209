"""Storage client for the users table.

``UserStore`` is the only component that talks to the database. It exposes the
narrow CRUD surface the router needs and keeps transaction handling in one
place: mutating calls commit on success and roll back before re-raising any
``SQLAlchemyError``.
"""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.logger import async_log_timing, get_logger
from user_api.models import User

logger = get_logger(__name__)

WRITABLE_FIELDS = frozenset({"username", "email", "password"})


class UserStore:
    """CRUD operations on ``User`` keyed by username."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create(self, *, username: str, email: str, password: str) -> User:
        """Insert a user. ``password`` must already be hashed."""
        user = User(username=username, email=email, password=password)
        self.db.add(user)
        async with async_log_timing("user_store.create", logger=logger, username=username):
            await self._commit()
        await self.db.refresh(user)
        return user

    async def find_all(self, *, limit: int | None = None, offset: int = 0) -> list[User]:
        """Return users ordered by id; ``limit=None`` returns every row."""
        query = select(User).order_by(User.id).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        async with async_log_timing("user_store.find_all", logger=logger, limit=limit, offset=offset):
            result = await self.db.execute(query)
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.db.execute(select(func.count(User.id)))
        return result.scalar_one()

    async def find_one(self, username: str) -> User | None:
        async with async_log_timing("user_store.find_one", logger=logger, username=username):
            # Bulk UPDATEs bypass the identity map, so reload any cached instance
            result = await self.db.execute(
                select(User)
                .where(User.username == username)
                .execution_options(populate_existing=True)
            )
        return result.scalar_one_or_none()

    async def update(self, username: str, fields: Mapping[str, Any]) -> int:
        """Apply ``fields`` to the user named ``username``.

        Returns:
            Number of rows affected (0 or 1). With no writable fields nothing is
            written and the count reflects whether the user exists.
        """
        values = {key: value for key, value in fields.items() if key in WRITABLE_FIELDS}
        if not values:
            return 1 if await self.find_one(username) is not None else 0

        statement = (
            update(User)
            .where(User.username == username)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        async with async_log_timing(
            "user_store.update", logger=logger, username=username, fields=sorted(values)
        ):
            result = await self._execute_and_commit(statement)
        return result.rowcount

    async def destroy(self, username: str) -> int:
        """Delete the user named ``username``. Returns rows removed."""
        statement = (
            delete(User)
            .where(User.username == username)
            .execution_options(synchronize_session=False)
        )
        async with async_log_timing("user_store.destroy", logger=logger, username=username):
            result = await self._execute_and_commit(statement)
        return result.rowcount

    async def _execute_and_commit(self, statement: Any) -> Any:
        try:
            result = await self.db.execute(statement)
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        await self._commit()
        return result

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
