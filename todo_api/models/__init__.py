"""
Database models for the Todo API.

Architecture: User → Todo (one owner per todo, cascade on user delete).
"""

from todo_api.models.todo import Todo
from todo_api.models.user import User

__all__ = [
    "User",
    "Todo",
]
