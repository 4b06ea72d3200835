from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.db_handlers.base import BaseDBHandler, check_local_db
from todo_api.models.todo import Todo
from todo_api.utils.logger import setup_logger

logger = setup_logger("todo_db_handler")

UPDATABLE_FIELDS = ("description", "completed")


class TodoDBHandler(BaseDBHandler[Todo]):
    """
    Todo storage scoped to an owner.

    Every lookup by id filters on ``(id, user_id)`` in one query, so a todo
    owned by someone else looks exactly like one that does not exist.
    """

    def __init__(self):
        super().__init__(Todo)

    @check_local_db
    async def create_todo(
        self,
        owner_id: int,
        description: str,
        completed: bool = False,
        *,
        db: AsyncSession = None,
    ) -> Todo:
        """Create a todo owned by ``owner_id``."""
        return await self.create(
            {"description": description, "completed": completed, "user_id": owner_id},
            db=db,
        )

    @check_local_db
    async def list_todos_by_owner(
        self, owner_id: int, *, db: AsyncSession = None
    ) -> list[Todo]:
        """All todos owned by ``owner_id``, in creation order."""
        return await self.get_multi_by_attributes(db=db, user_id=owner_id)

    @check_local_db
    async def get_owned_todo(
        self, todo_id: int, owner_id: int, *, db: AsyncSession = None
    ) -> Todo | None:
        """Get todo by ID that belongs to specific user."""
        try:
            stmt = select(Todo).where(Todo.id == todo_id, Todo.user_id == owner_id)
            result = await db.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(
                f"Error retrieving owned todo {todo_id} for user {owner_id}: {e}"
            )
            raise

    @check_local_db
    async def update_owned_todo(
        self,
        todo_id: int,
        owner_id: int,
        update_data: dict[str, Any],
        *,
        db: AsyncSession = None,
    ) -> Todo | None:
        """Apply a partial update to an owned todo; ``None`` if not found."""
        todo = await self.get_owned_todo(todo_id, owner_id, db=db)
        if todo is None:
            return None

        changes = {
            field: value
            for field, value in update_data.items()
            if field in UPDATABLE_FIELDS and value is not None
        }
        if not changes:
            return todo
        return await self.update(todo, changes, db=db)

    @check_local_db
    async def delete_owned_todo(
        self, todo_id: int, owner_id: int, *, db: AsyncSession = None
    ) -> bool:
        """Delete an owned todo. Returns False if there was nothing to delete."""
        todo = await self.get_owned_todo(todo_id, owner_id, db=db)
        if todo is None:
            return False
        await self.delete_obj(todo, db=db)
        return True
