"""
Tests for the username and password policy.
"""

import pytest

from todo_api.utils.validation import (
    credential_errors,
    password_violations,
    username_violations,
)


def test_valid_credentials_have_no_errors():
    assert credential_errors("alice", "Passw0rd!") == []


@pytest.mark.parametrize("username", ["bob", "alice_99", "A_1", "x" * 50])
def test_accepted_usernames(username):
    assert username_violations(username) == []


@pytest.mark.parametrize(
    "username, expected",
    [
        ("ab", "Username must be at least 3 characters long"),
        ("alice smith", "Username can only contain letters, numbers and underscores"),
        ("al-ice", "Username can only contain letters, numbers and underscores"),
        ("x" * 51, "Username must be at most 50 characters long"),
    ],
)
def test_rejected_usernames(username, expected):
    assert expected in username_violations(username)


@pytest.mark.parametrize(
    "password, expected",
    [
        ("Pw0!", "Password must be at least 8 characters long"),
        ("passw0rd!", "Password must contain at least one uppercase letter"),
        ("PASSW0RD!", "Password must contain at least one lowercase letter"),
        ("Password!", "Password must contain at least one number"),
        ("Passw0rd", "Password must contain at least one special character"),
        ("Passw0rd?", "Password must contain at least one special character"),
        ("Aa1!" * 11, "Password must be at most 40 bytes long"),
    ],
)
def test_each_password_rule(password, expected):
    assert expected in password_violations(password)


def test_every_violation_is_reported():
    errors = credential_errors("a", "short")

    fields = [error["field"] for error in errors]
    assert fields.count("username") == 1
    # too short, no uppercase, no digit, no symbol
    assert fields.count("password") == 4
