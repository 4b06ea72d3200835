"""
Authentication utilities: peppered bcrypt password hashing and JWT access tokens.

- Passwords are concatenated with the configured pepper and hashed with
  bcrypt at the configured cost factor; every hash gets a fresh salt and
  embeds version, cost and salt, so verification needs nothing else.
- Access tokens are HS256-signed JWTs carrying the user id in ``sub`` and
  expiring ``ACCESS_TOKEN_EXPIRE_MINUTES`` after issue.
- There are no built-in fallback secrets: an unset pepper or signing key
  raises ``CredentialError``.
"""

from datetime import UTC, datetime, timedelta

import bcrypt
from jose import JWTError, jwt

from todo_api.config import settings
from todo_api.exceptions import CredentialError, UnauthenticatedError

# bcrypt ignores (or, in newer releases, rejects) input beyond 72 bytes
BCRYPT_MAX_INPUT_BYTES = 72


def _peppered(password: str) -> bytes:
    if not settings.password_pepper:
        raise CredentialError("PASSWORD_PEPPER is not configured")
    return (password + settings.password_pepper).encode("utf-8")


def _signing_key() -> str:
    if not settings.jwt_secret_key:
        raise CredentialError("JWT_SECRET_KEY is not configured")
    return settings.jwt_secret_key


def get_password_hash(password: str) -> str:
    """Hash a plain text password (plus pepper) using bcrypt."""
    peppered = _peppered(password)
    if len(peppered) > BCRYPT_MAX_INPUT_BYTES:
        raise CredentialError(
            f"Peppered password exceeds {BCRYPT_MAX_INPUT_BYTES} bytes"
        )
    try:
        salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
        return bcrypt.hashpw(peppered, salt).decode("utf-8")
    except ValueError as e:
        raise CredentialError(f"Password hashing failed: {e}") from e


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain text password against a stored bcrypt hash."""
    peppered = _peppered(plain_password)
    if len(peppered) > BCRYPT_MAX_INPUT_BYTES:
        # Nothing this long was ever hashed
        return False
    try:
        return bcrypt.checkpw(peppered, hashed_password.encode("utf-8"))
    except ValueError as e:
        raise CredentialError(f"Stored password hash is malformed: {e}") from e


def create_access_token(user_id: int, expires_delta: timedelta | None = None) -> str:
    """Create a signed JWT access token for the given user id."""
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {"sub": str(user_id), "iat": now, "exp": now + expires_delta}
    return jwt.encode(to_encode, _signing_key(), algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict | None:
    """Decode and verify a JWT access token; ``None`` if it is invalid or expired."""
    try:
        return jwt.decode(token, _signing_key(), algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def verify_access_token(token: str) -> int:
    """
    Resolve a token to the user id it was issued for.

    Malformed, tampered and expired tokens all raise the same
    ``UnauthenticatedError``.
    """
    payload = decode_access_token(token)
    if payload is None:
        raise UnauthenticatedError()

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError) as e:
        raise UnauthenticatedError() from e
