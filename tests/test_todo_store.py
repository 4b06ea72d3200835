"""
Tests for owner-scoped todo storage.
"""

import pytest

from todo_api.db_handlers import TodoDBHandler, UserDBHandler


async def _make_user(username: str) -> int:
    user = await UserDBHandler().create_user(username, "not-a-real-hash")
    return user.id


@pytest.mark.asyncio
async def test_create_defaults():
    owner_id = await _make_user("alice")

    todo = await TodoDBHandler().create_todo(owner_id, "buy milk")

    assert todo.id is not None
    assert todo.description == "buy milk"
    assert todo.completed is False
    assert todo.due_date is None
    assert todo.user_id == owner_id
    assert todo.created_at is not None


@pytest.mark.asyncio
async def test_list_only_returns_the_owners_todos():
    handler = TodoDBHandler()
    alice = await _make_user("alice")
    bob = await _make_user("bob")
    first = await handler.create_todo(alice, "buy milk")
    await handler.create_todo(bob, "walk the dog")
    second = await handler.create_todo(alice, "pay rent", completed=True)

    todos = await handler.list_todos_by_owner(alice)

    assert [todo.id for todo in todos] == [first.id, second.id]
    assert await handler.list_todos_by_owner(await _make_user("carol")) == []


@pytest.mark.asyncio
async def test_foreign_todo_is_invisible():
    handler = TodoDBHandler()
    alice = await _make_user("alice")
    bob = await _make_user("bob")
    todo = await handler.create_todo(bob, "walk the dog")

    assert await handler.get_owned_todo(todo.id, alice) is None
    assert await handler.get_owned_todo(todo.id + 1000, alice) is None
    assert (await handler.get_owned_todo(todo.id, bob)).id == todo.id


@pytest.mark.asyncio
async def test_partial_update():
    handler = TodoDBHandler()
    alice = await _make_user("alice")
    todo = await handler.create_todo(alice, "buy milk")

    updated = await handler.update_owned_todo(
        todo.id, alice, {"description": None, "completed": True}
    )

    assert updated.completed is True
    assert updated.description == "buy milk"

    renamed = await handler.update_owned_todo(
        todo.id, alice, {"description": "buy oat milk"}
    )

    assert renamed.description == "buy oat milk"
    assert renamed.completed is True


@pytest.mark.asyncio
async def test_update_ignores_ownership_and_unknown_fields():
    handler = TodoDBHandler()
    alice = await _make_user("alice")
    bob = await _make_user("bob")
    todo = await handler.create_todo(alice, "buy milk")

    updated = await handler.update_owned_todo(
        todo.id, alice, {"user_id": bob, "completed": True}
    )

    assert updated.user_id == alice


@pytest.mark.asyncio
async def test_foreign_update_is_not_found_and_changes_nothing():
    handler = TodoDBHandler()
    alice = await _make_user("alice")
    bob = await _make_user("bob")
    todo = await handler.create_todo(bob, "walk the dog")

    assert await handler.update_owned_todo(todo.id, alice, {"completed": True}) is None

    unchanged = await handler.get_owned_todo(todo.id, bob)
    assert unchanged.completed is False


@pytest.mark.asyncio
async def test_delete_is_owner_scoped():
    handler = TodoDBHandler()
    alice = await _make_user("alice")
    bob = await _make_user("bob")
    todo = await handler.create_todo(bob, "walk the dog")

    assert await handler.delete_owned_todo(todo.id, alice) is False
    assert await handler.get_owned_todo(todo.id, bob) is not None

    assert await handler.delete_owned_todo(todo.id, bob) is True
    assert await handler.get_owned_todo(todo.id, bob) is None
    assert await handler.delete_owned_todo(todo.id, bob) is False
