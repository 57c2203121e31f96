"""Document Stores — the same contract against memory and SQLite backends."""

import pytest

from app.core.documents import User, Classroom, Program
from app.core.domain_types import Collection


@pytest.fixture(params=["memory", "sql"])
def store(request):
    return request.getfixturevalue(f"{request.param}_store")


async def test_missing_documents_load_as_none(store):
    assert await store.load_user("nobody") is None
    assert await store.load_class("nothing") is None
    assert await store.load_program("nothing") is None


async def test_store_and_load_user(store):
    await store.store_user(User(uid="u1", name="Ada", classes=["c1"]))
    user = await store.load_user("u1")
    assert user == User(uid="u1", name="Ada", classes=["c1"])


async def test_store_replaces_existing_document(store):
    await store.store_user(User(uid="u1", name="Ada"))
    user = await store.load_user("u1")
    user.add_program("p1")
    await store.store_user(user)

    assert (await store.load_user("u1")).programs == ["p1"]


async def test_loaded_documents_are_copies(store):
    await store.store_user(User(uid="u1", name="Ada"))
    user = await store.load_user("u1")
    user.add_program("p1")

    assert (await store.load_user("u1")).programs == []


async def test_collections_are_separate(store):
    await store.store_class(Classroom(cid="x", name="Intro", creator="u1"))
    await store.store_program(Program(pid="x", uid="u1", name="p", language="python"))

    assert (await store.load_class("x")).name == "Intro"
    assert (await store.load_program("x")).name == "p"
    assert await store.load_user("x") is None


async def test_delete_is_idempotent(store):
    await store.store_program(Program(pid="p1", uid="u1", name="p", language="python"))
    await store.delete_program("p1")
    await store.delete_program("p1")
    assert await store.load_program("p1") is None


async def test_memory_store_counts(memory_store):
    await memory_store.store_user(User(uid="u1", name="Ada"))
    await memory_store.store_user(User(uid="u2", name="Bob"))
    await memory_store.delete_user("u1")
    assert memory_store.count(Collection.USERS) == 1
    assert memory_store.count(Collection.CLASSES) == 0
