"""Application Middleware — preflight policy from settings on the real app.

Settings come from tests/conftest.py: origin https://app.test, methods
GET/POST/PUT/DELETE, headers Content-Type/Authorization, credentials on,
max age 600.
"""

import logging

import pytest

from app.api.dependencies import get_store
from app.config import get_settings
from app.infrastructure import database
from app.infrastructure.document_store import SqlDocumentStore


PREFLIGHT = {
    "Origin": "https://app.test",
    "Access-Control-Request-Method": "PUT",
    "Access-Control-Request-Headers": "Content-Type, authorization",
}


async def test_preflight_accepted_on_any_path(client):
    res = await client.options("/api/v1/users/ada", headers=PREFLIGHT)
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "https://app.test"
    assert res.headers["access-control-allow-credentials"] == "true"
    assert res.headers["access-control-max-age"] == "600"


async def test_preflight_rejected_for_unknown_origin(client):
    res = await client.options(
        "/api/v1/users/ada", headers={**PREFLIGHT, "Origin": "https://evil.test"},
    )
    assert res.status_code == 400
    assert "access-control-allow-origin" not in res.headers


async def test_preflight_never_reaches_routes(client):
    """An unknown path still gets the preflight decision, not a 404."""
    res = await client.options("/does/not/exist", headers=PREFLIGHT)
    assert res.status_code == 200


async def test_actual_response_has_no_cors_headers(client, seed_user):
    res = await client.get(
        "/api/v1/users/ada", headers={"Origin": "https://app.test"},
    )
    assert res.status_code == 200
    assert "access-control-allow-origin" not in res.headers


async def test_unknown_route_is_404(client):
    res = await client.get("/nowhere")
    assert res.status_code == 404


async def test_requests_are_logged(client, caplog):
    caplog.set_level(logging.INFO, logger="app.middleware.request_logging")
    await client.options("/api/v1/users/ada", headers=PREFLIGHT)
    await client.get("/api/v1/health/")

    records = [
        r for r in caplog.records if r.name == "app.middleware.request_logging"
    ]
    assert [(r.method, r.status_code) for r in records] == [
        ("OPTIONS", 200), ("GET", 200),
    ]


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_memory_store(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"document_store": "memory"}


# ─── SQL store selected ──────────────────────────────────────────

@pytest.fixture
async def sql_selected(monkeypatch):
    monkeypatch.setattr(get_settings(), "document_store", "sql")
    yield
    await database.close_db()


async def test_readiness_with_reachable_database(client, sql_selected):
    database.init_db("sqlite+aiosqlite:///:memory:")
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"database": "healthy"}


async def test_readiness_with_unreachable_database(client, sql_selected, tmp_path):
    database.init_db(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'tla.db'}")
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json() == {"status": "not_ready", "reason": "database_unavailable"}


async def test_readiness_without_database_manager(client, sql_selected):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503


async def test_get_store_opens_sql_session(sql_selected):
    database.init_db("sqlite+aiosqlite:///:memory:")
    stores = get_store()
    store = await stores.__anext__()
    assert isinstance(store, SqlDocumentStore)
    await stores.aclose()


async def test_get_store_requires_initialized_database(sql_selected):
    with pytest.raises(RuntimeError, match="Database not initialized"):
        await get_store().__anext__()
