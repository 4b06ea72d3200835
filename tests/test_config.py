"""
Tests for settings validation and the startup secret check.
"""

import pytest
from pydantic import ValidationError

from todo_api.config import Settings, settings


def test_require_secrets_passes_when_configured():
    settings.require_secrets()


@pytest.mark.parametrize(
    "field, name",
    [("jwt_secret_key", "JWT_SECRET_KEY"), ("password_pepper", "PASSWORD_PEPPER")],
)
def test_require_secrets_fails_fast_when_unset(monkeypatch, field, name):
    monkeypatch.setattr(settings, field, None)

    with pytest.raises(RuntimeError, match=name):
        settings.require_secrets()


def test_defaults(monkeypatch):
    monkeypatch.delenv("BCRYPT_ROUNDS", raising=False)

    fresh = Settings(_env_file=None)

    assert fresh.bcrypt_rounds == 12
    assert fresh.access_token_expire_minutes == 60
    assert fresh.jwt_algorithm == "HS256"


@pytest.mark.parametrize("rounds", ["3", "17"])
def test_bcrypt_cost_is_bounded(monkeypatch, rounds):
    monkeypatch.setenv("BCRYPT_ROUNDS", rounds)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_pepper_length_is_bounded(monkeypatch):
    monkeypatch.setenv("PASSWORD_PEPPER", "p" * 33)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
