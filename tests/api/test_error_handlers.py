"""Error Handlers — global handlers on a minimal app.

Tests cover:
    - TinMarinError subclasses render with their own status and {"error", "code"}
    - Request validation failures render as 400 with field details
"""

import pytest
from fastapi import Body, FastAPI
from httpx import ASGITransport, AsyncClient

from tinmarin.api.error_handlers import register_error_handlers
from tinmarin.core.errors import DatabaseError, UniqueViolationError


@pytest.fixture
async def client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/db-down")
    async def db_down():
        raise DatabaseError("Connection or operational error", "execute")

    @app.get("/duplicate")
    async def duplicate():
        raise UniqueViolationError("Integrity constraint violated")

    @app.post("/echo")
    async def echo(body: dict = Body(...)):
        return body

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


async def test_database_error_renders_503(client):
    res = await client.get("/db-down")
    assert res.status_code == 503
    assert res.json() == {
        "error": "Database execute failed: Connection or operational error",
        "code": "DATABASE_ERROR",
    }


async def test_unique_violation_renders_403(client):
    res = await client.get("/duplicate")
    assert res.status_code == 403
    assert res.json()["code"] == "UNIQUE_VIOLATION"


async def test_validation_error_renders_400_with_details(client):
    res = await client.post("/echo", json=[1, 2])
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Invalid request data."
    assert body["details"][0]["field"].startswith("body")
