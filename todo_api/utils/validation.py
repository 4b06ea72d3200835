"""
Username and password policy.

Each check returns the list of violated rules so that every problem can be
reported to the caller at once.
"""

import re

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")

PASSWORD_MIN_LENGTH = 8
# Leaves room for a 32-byte pepper inside bcrypt's 72-byte input
PASSWORD_MAX_BYTES = 40
PASSWORD_SYMBOLS = "!@#$%^&*"

_PASSWORD_RULES = [
    (re.compile(r"[A-Z]"), "Password must contain at least one uppercase letter"),
    (re.compile(r"[a-z]"), "Password must contain at least one lowercase letter"),
    (re.compile(r"[0-9]"), "Password must contain at least one number"),
    (
        re.compile(f"[{re.escape(PASSWORD_SYMBOLS)}]"),
        "Password must contain at least one special character",
    ),
]


def normalize_username(username: str) -> str:
    return username.strip()


def username_violations(username: str) -> list[str]:
    violations = []
    if len(username) < USERNAME_MIN_LENGTH:
        violations.append(
            f"Username must be at least {USERNAME_MIN_LENGTH} characters long"
        )
    if len(username) > USERNAME_MAX_LENGTH:
        violations.append(
            f"Username must be at most {USERNAME_MAX_LENGTH} characters long"
        )
    if not USERNAME_PATTERN.match(username):
        violations.append("Username can only contain letters, numbers and underscores")
    return violations


def password_violations(password: str) -> list[str]:
    violations = []
    if len(password) < PASSWORD_MIN_LENGTH:
        violations.append(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
        )
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        violations.append(f"Password must be at most {PASSWORD_MAX_BYTES} bytes long")
    for pattern, message in _PASSWORD_RULES:
        if not pattern.search(password):
            violations.append(message)
    return violations


def credential_errors(username: str, password: str) -> list[dict[str, str]]:
    """All policy violations for a username/password pair, as API error entries."""
    errors = [
        {"field": "username", "message": message}
        for message in username_violations(username)
    ]
    errors.extend(
        {"field": "password", "message": message}
        for message in password_violations(password)
    )
    return errors
