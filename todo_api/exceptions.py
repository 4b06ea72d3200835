"""
Error taxonomy for the Todo API.

Each error carries the HTTP status it maps to and renders its own response
body. Authentication, credential and ownership failures deliberately use a
single fixed message so callers cannot tell which check failed.
"""

from typing import Any

from fastapi import status


class TodoAPIError(Exception):
    """Base class for errors that are reported to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"
    headers: dict[str, str] | None = None

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_response(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationFailedError(TodoAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation failed"

    def __init__(self, errors: list[dict[str, str]]):
        self.errors = errors
        super().__init__()

    def to_response(self) -> dict[str, Any]:
        return {"errors": self.errors}


class UsernameTakenError(TodoAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Username already exists"


class InvalidCredentialsError(TodoAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid credentials"


class UnauthenticatedError(TodoAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Please authenticate."
    headers = {"WWW-Authenticate": "Bearer"}


class NotFoundError(TodoAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Todo not found"


class InternalError(TodoAPIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"


class CredentialError(Exception):
    """Hashing, verification or signing could not be performed."""
