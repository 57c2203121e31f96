"""Program Routes — initialization, merge updates and deletion."""

import pytest

from app.core.domain_types import DEFAULT_CODE, Language


@pytest.fixture
async def program(client, seed_user):
    res = await client.post("/api/v1/programs", json={
        "uid": "ada", "name": "Bernoulli", "language": "python", "thumbnail": 2,
    })
    assert res.status_code == 201
    return res.json()


async def test_create_program_links_owner(client, memory_store, program):
    assert program["uid"] == "ada"
    assert program["code"] == DEFAULT_CODE[Language.PYTHON]
    user = await memory_store.load_user("ada")
    assert user.programs == [program["pid"]]


async def test_create_program_keeps_given_code(client, seed_user):
    res = await client.post("/api/v1/programs", json={
        "uid": "ada", "name": "x", "language": "javascript", "code": "alert(1)",
    })
    assert res.json()["code"] == "alert(1)"


async def test_create_program_unknown_language(client, seed_user):
    res = await client.post("/api/v1/programs", json={
        "uid": "ada", "name": "x", "language": "cobol",
    })
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "UNSUPPORTED_LANGUAGE"


async def test_create_program_missing_user(client):
    res = await client.post("/api/v1/programs", json={
        "uid": "ghost", "name": "x", "language": "python",
    })
    assert res.status_code == 404


@pytest.mark.parametrize("thumbnail", [-1, 50, 1000])
async def test_create_program_thumbnail_out_of_bounds(client, seed_user, thumbnail):
    res = await client.post("/api/v1/programs", json={
        "uid": "ada", "name": "x", "language": "python", "thumbnail": thumbnail,
    })
    assert res.status_code == 400


async def test_get_program(client, program):
    res = await client.get(f"/api/v1/programs/{program['pid']}")
    assert res.status_code == 200
    assert res.json() == program


async def test_get_missing_program(client):
    res = await client.get("/api/v1/programs/nope")
    assert res.status_code == 404


async def test_update_merges_sent_fields(client, program):
    res = await client.put(
        f"/api/v1/programs/{program['pid']}",
        json={"uid": "ada", "code": "print(42)"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["code"] == "print(42)"
    assert body["name"] == "Bernoulli"
    assert body["thumbnail"] == 2


async def test_update_requires_uid(client, program):
    res = await client.put(f"/api/v1/programs/{program['pid']}", json={"code": "x"})
    assert res.status_code == 400


async def test_update_by_other_user_is_forbidden(client, program):
    res = await client.put(
        f"/api/v1/programs/{program['pid']}", json={"uid": "bob", "code": "x"},
    )
    assert res.status_code == 403


async def test_update_rejects_unknown_language(client, program):
    res = await client.put(
        f"/api/v1/programs/{program['pid']}", json={"uid": "ada", "language": "cobol"},
    )
    assert res.status_code == 400


async def test_delete_program(client, memory_store, program):
    res = await client.delete(
        f"/api/v1/programs/{program['pid']}", params={"user_id": "ada"},
    )
    assert res.status_code == 204
    assert await memory_store.load_program(program["pid"]) is None
    assert (await memory_store.load_user("ada")).programs == []


async def test_delete_program_missing_user(client, program):
    res = await client.delete(
        f"/api/v1/programs/{program['pid']}", params={"user_id": "ghost"},
    )
    assert res.status_code == 404


async def test_delete_program_not_owned_by_user(client, memory_store, program):
    res = await client.delete("/api/v1/programs/other", params={"user_id": "ada"})
    assert res.status_code == 404
    assert await memory_store.load_program(program["pid"]) is not None
