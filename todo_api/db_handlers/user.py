from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.db_handlers.base import BaseDBHandler, check_local_db
from todo_api.models.user import User
from todo_api.utils.logger import setup_logger

logger = setup_logger("db_handlers.user")


class UserDBHandler(BaseDBHandler[User]):
    def __init__(self):
        super().__init__(User)

    @check_local_db
    async def get_user_by_username(
        self, username: str, *, db: AsyncSession = None
    ) -> User | None:
        """Get a user by username."""
        try:
            stmt = select(User).filter(User.username == username)
            result = await db.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving user by username '{username}': {e}")
            raise

    @check_local_db
    async def create_user(
        self, username: str, hashed_password: str, *, db: AsyncSession = None
    ) -> User:
        """
        Insert a user row.

        The unique index on ``username`` is the final arbiter: a concurrent
        duplicate surfaces here as ``IntegrityError``.
        """
        return await self.create(
            {"username": username, "hashed_password": hashed_password}, db=db
        )
