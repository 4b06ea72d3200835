"""
Tests for the user directory: registration, uniqueness and authentication.
"""

import pytest

from todo_api.db_handlers import UserDBHandler
from todo_api.exceptions import (
    InvalidCredentialsError,
    UsernameTakenError,
    ValidationFailedError,
)
from todo_api.services import user_service
from todo_api.services.user_service import UserService
from todo_api.utils.auth import verify_password


@pytest.mark.asyncio
async def test_register_stores_only_the_derived_secret():
    user = await UserService().register("alice", "Passw0rd!")

    assert user.id is not None
    assert user.username == "alice"
    assert user.hashed_password != "Passw0rd!"
    assert verify_password("Passw0rd!", user.hashed_password)
    assert user.created_at is not None
    assert user.updated_at is not None


@pytest.mark.asyncio
async def test_register_trims_username():
    user = await UserService().register("  alice  ", "Passw0rd!")

    assert user.username == "alice"


@pytest.mark.asyncio
async def test_second_registration_of_a_username_is_rejected():
    service = UserService()
    await service.register("alice", "Passw0rd!")

    with pytest.raises(UsernameTakenError):
        await service.register("alice", "Differ3nt!")


@pytest.mark.asyncio
async def test_registration_race_is_settled_by_the_unique_index(monkeypatch):
    await UserService().register("alice", "Passw0rd!")

    # A concurrent request that passed its pre-check before the first insert
    async def no_existing_user(self, username, *, db=None):
        return None

    monkeypatch.setattr(UserDBHandler, "get_user_by_username", no_existing_user)

    with pytest.raises(UsernameTakenError):
        await UserService().register("alice", "Passw0rd!")


@pytest.mark.asyncio
async def test_invalid_registration_never_touches_storage(monkeypatch):
    async def fail(*args, **kwargs):
        raise AssertionError("storage must not be reached")

    monkeypatch.setattr(UserDBHandler, "get_user_by_username", fail)
    monkeypatch.setattr(UserDBHandler, "create_user", fail)

    with pytest.raises(ValidationFailedError) as exc_info:
        await UserService().register("al", "weak")

    fields = {error["field"] for error in exc_info.value.errors}
    assert fields == {"username", "password"}


@pytest.mark.asyncio
async def test_authenticate_returns_the_user():
    service = UserService()
    registered = await service.register("alice", "Passw0rd!")

    user = await service.authenticate("alice", "Passw0rd!")

    assert user.id == registered.id


@pytest.mark.asyncio
async def test_wrong_password_and_unknown_user_look_the_same():
    service = UserService()
    await service.register("alice", "Passw0rd!")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        await service.authenticate("alice", "Wr0ngpass!")
    with pytest.raises(InvalidCredentialsError) as unknown_user:
        await service.authenticate("mallory", "Passw0rd!")

    assert wrong_password.value.to_response() == unknown_user.value.to_response()
    assert wrong_password.value.status_code == unknown_user.value.status_code


@pytest.mark.asyncio
async def test_unknown_user_still_runs_a_password_check(monkeypatch):
    checked = []

    def recording_verify(password, hashed_password):
        checked.append(hashed_password)
        return verify_password(password, hashed_password)

    monkeypatch.setattr(user_service, "verify_password", recording_verify)

    with pytest.raises(InvalidCredentialsError):
        await UserService().authenticate("mallory", "Passw0rd!")

    assert len(checked) == 1
    assert checked[0].startswith("$2")
