"""API test fixtures — FastAPI app wired to the in-memory test database.

Invariants:
    - Each test builds its own app via create_app(); nothing leaks between tests
    - app.state.db is set directly (ASGITransport does not run the lifespan)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from inventory.config import Settings
from inventory.main import create_app


def _settings(**overrides) -> Settings:
    return Settings(database_url="sqlite+aiosqlite://", **overrides)


@pytest.fixture
async def app(db):
    application = create_app(_settings())
    application.state.db = db
    return application


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def strict_client(db):
    """Client for an app running with strict_writes enabled."""
    application = create_app(_settings(strict_writes=True))
    application.state.db = db
    async with AsyncClient(
        transport=ASGITransport(app=application), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def owner_id(client):
    res = await client.post("/api/v1/owners", json={
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@example.com",
    })
    return res.json()["id"]


@pytest.fixture
async def type_id(client):
    res = await client.post("/api/v1/types", json={"name": "Test Type"})
    return res.json()["id"]


@pytest.fixture
async def device_id(client, owner_id, type_id):
    res = await client.post("/api/v1/devices", json={
        "serial_number": "SN123456",
        "name": "Test Device",
        "type_id": type_id,
        "owner_id": owner_id,
        "purchase_date": "2023-01-01",
        "status": "active",
    })
    return res.json()["id"]
