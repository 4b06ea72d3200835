# User directory: registration and credential checks on top of UserDBHandler

import asyncio
from functools import lru_cache

from sqlalchemy.exc import IntegrityError

from todo_api.db_handlers import UserDBHandler
from todo_api.exceptions import (
    InvalidCredentialsError,
    UsernameTakenError,
    ValidationFailedError,
)
from todo_api.models import User
from todo_api.utils.auth import get_password_hash, verify_password
from todo_api.utils.logger import setup_logger
from todo_api.utils.validation import credential_errors, normalize_username

logger = setup_logger(__name__)


@lru_cache(maxsize=1)
def _unknown_user_hash() -> str:
    # Checked against on unknown usernames so both login failures cost one bcrypt run
    return get_password_hash("unknown-user-placeholder")


def validate_credentials(username: str, password: str) -> str:
    """Apply the username/password policy; returns the normalized username."""
    username = normalize_username(username)
    errors = credential_errors(username, password)
    if errors:
        raise ValidationFailedError(errors)
    return username


class UserService:
    def __init__(self):
        self.db_handler = UserDBHandler()

    async def register(self, username: str, password: str) -> User:
        """
        Create a user after validating the credentials.

        Raises ``ValidationFailedError`` before any storage access, and
        ``UsernameTakenError`` when the name exists, whether that is seen by
        the pre-check or only by the unique index during a concurrent insert.
        """
        username = validate_credentials(username, password)

        existing_user = await self.db_handler.get_user_by_username(username)
        if existing_user:
            raise UsernameTakenError()

        hashed_password = await asyncio.to_thread(get_password_hash, password)
        try:
            user = await self.db_handler.create_user(username, hashed_password)
        except IntegrityError as e:
            logger.info(f"Concurrent registration lost the race for '{username}'")
            raise UsernameTakenError() from e

        logger.info(f"Registered user {user.id} ('{user.username}')")
        return user

    async def authenticate(self, username: str, password: str) -> User:
        """
        Return the user owning these credentials.

        An unknown username and a wrong password both raise the same
        ``InvalidCredentialsError``.
        """
        username = normalize_username(username)
        user = await self.db_handler.get_user_by_username(username)

        if user:
            hashed_password = user.hashed_password
        else:
            hashed_password = await asyncio.to_thread(_unknown_user_hash)
        password_ok = await asyncio.to_thread(verify_password, password, hashed_password)

        if not user or not password_ok:
            logger.info("Rejected login attempt")
            raise InvalidCredentialsError()

        return user

    async def get_user(self, user_id: int) -> User | None:
        return await self.db_handler.get(user_id)
