from todo_api.db_handlers.base import BaseDBHandler, check_local_db
from todo_api.db_handlers.todo import TodoDBHandler
from todo_api.db_handlers.user import UserDBHandler

__all__ = [
    "BaseDBHandler",
    "check_local_db",
    "TodoDBHandler",
    "UserDBHandler",
]
