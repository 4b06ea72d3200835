"""
Todo API Routes - CRUD over the authenticated user's todos.

Every route depends on ``get_current_user_id``; todos are always looked up
together with their owner, so another user's todo is reported as 404.
OSErrors are left to the application handler, which reports an unreachable
database as 503.
"""

from fastapi import APIRouter, Depends, Path, status

from todo_api.db_handlers import TodoDBHandler
from todo_api.dependencies.auth import get_current_user_id
from todo_api.exceptions import InternalError, NotFoundError
from todo_api.schemas import MessageResponse, TodoCreate, TodoResponse, TodoUpdate
from todo_api.utils.logger import setup_logger

logger = setup_logger("api.todos")

# Ids are stored in a 32-bit INTEGER column
MAX_TODO_ID = 2**31 - 1

router = APIRouter(prefix="/todos", tags=["Todos"])


@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
async def create_todo(
    todo_data: TodoCreate,
    user_id: int = Depends(get_current_user_id),
    todo_db_handler: TodoDBHandler = Depends(),
):
    """Create a new todo for the authenticated user."""
    try:
        todo = await todo_db_handler.create_todo(
            user_id, todo_data.title, completed=todo_data.completed
        )
    except OSError:
        raise
    except Exception as e:
        logger.error(f"Error creating todo for user {user_id}: {e}", exc_info=True)
        raise InternalError("Failed to create todo") from e

    logger.info(f"Created todo {todo.id} for user {user_id}")
    return TodoResponse.model_validate(todo)


@router.get("", response_model=list[TodoResponse])
async def list_todos(
    user_id: int = Depends(get_current_user_id),
    todo_db_handler: TodoDBHandler = Depends(),
):
    """Get all todos for the authenticated user."""
    try:
        todos = await todo_db_handler.list_todos_by_owner(user_id)
    except OSError:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch todos for user {user_id}: {e}", exc_info=True)
        raise InternalError("Failed to fetch todos") from e

    return [TodoResponse.model_validate(todo) for todo in todos]


@router.get("/{todo_id}", response_model=TodoResponse)
async def get_todo(
    todo_id: int = Path(..., ge=1, le=MAX_TODO_ID, description="The todo id"),
    user_id: int = Depends(get_current_user_id),
    todo_db_handler: TodoDBHandler = Depends(),
):
    """Get a single todo owned by the authenticated user."""
    try:
        todo = await todo_db_handler.get_owned_todo(todo_id, user_id)
    except OSError:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch todo {todo_id}: {e}", exc_info=True)
        raise InternalError("Failed to fetch todo") from e

    if todo is None:
        raise NotFoundError()
    return TodoResponse.model_validate(todo)


@router.put("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    todo_data: TodoUpdate,
    todo_id: int = Path(..., ge=1, le=MAX_TODO_ID, description="The todo id"),
    user_id: int = Depends(get_current_user_id),
    todo_db_handler: TodoDBHandler = Depends(),
):
    """Update the title and/or completion state of an owned todo."""
    update_data = {
        "description": todo_data.title,
        "completed": todo_data.completed,
    }
    try:
        todo = await todo_db_handler.update_owned_todo(todo_id, user_id, update_data)
    except OSError:
        raise
    except Exception as e:
        logger.error(f"Failed to update todo {todo_id}: {e}", exc_info=True)
        raise InternalError("Failed to update todo") from e

    if todo is None:
        raise NotFoundError()

    logger.info(f"Updated todo {todo_id} for user {user_id}")
    return TodoResponse.model_validate(todo)


@router.delete("/{todo_id}", response_model=MessageResponse)
async def delete_todo(
    todo_id: int = Path(..., ge=1, le=MAX_TODO_ID, description="The todo id"),
    user_id: int = Depends(get_current_user_id),
    todo_db_handler: TodoDBHandler = Depends(),
):
    """Delete an owned todo."""
    try:
        deleted = await todo_db_handler.delete_owned_todo(todo_id, user_id)
    except OSError:
        raise
    except Exception as e:
        logger.error(f"Failed to delete todo {todo_id}: {e}", exc_info=True)
        raise InternalError("Failed to delete todo") from e

    if not deleted:
        raise NotFoundError()

    logger.info(f"Deleted todo {todo_id} for user {user_id}")
    return MessageResponse(message="Todo deleted successfully")
