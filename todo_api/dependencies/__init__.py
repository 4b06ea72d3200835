from todo_api.dependencies.auth import get_current_user, get_current_user_id

__all__ = [
    "get_current_user",
    "get_current_user_id",
]
