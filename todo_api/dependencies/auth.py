"""
Authentication dependencies for FastAPI route protection.
"""


from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from todo_api.exceptions import CredentialError, InternalError, UnauthenticatedError
from todo_api.models import User
from todo_api.services.user_service import UserService
from todo_api.utils.auth import verify_access_token
from todo_api.utils.logger import setup_logger

logger = setup_logger("dependencies.auth")

# auto_error=False so a missing header is reported as 401 by us, not 403
security = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> int:
    """
    Dependency resolving the bearer token to the caller's user id.

    Runs before any handler logic; a missing, malformed, tampered or
    expired token short-circuits with ``UnauthenticatedError``.
    """
    if credentials is None:
        raise UnauthenticatedError()

    try:
        return verify_access_token(credentials.credentials)
    except CredentialError as e:
        logger.error(f"Token verification unavailable: {e}")
        raise InternalError() from e


async def get_current_user(
    user_id: int = Depends(get_current_user_id),
    user_service: UserService = Depends(),
) -> User:
    """Dependency loading the authenticated user's record."""
    user = await user_service.get_user(user_id)
    if user is None:
        raise UnauthenticatedError()
    return user
