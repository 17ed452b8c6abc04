import os

import httpx
import mongomock
import pytest
from httpx import AsyncClient, ASGITransport
from pymongo.errors import ServerSelectionTimeoutError

from ratingz_api.core.config import settings
from ratingz_api.db.indexes import ensure_indexes
from ratingz_api.dependencies import get_db, get_outbound_http
from ratingz_api.main import app
from tests.mongo_fakes import AsyncDatabase, FailingDatabase

PUBLIC_IP = "203.0.113.7"


@pytest.fixture(scope="session", autouse=True)
def test_env():
    os.environ["SENTRY_DSN"] = ""  # отключаем Sentry
    settings.sentry_dsn = ""


@pytest.fixture
def mongo_db() -> AsyncDatabase:
    """Свежая in-memory база на каждый тест."""
    return AsyncDatabase(mongomock.MongoClient()["ratingz_test"])


def ip_lookup_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"ip": PUBLIC_IP})


@pytest.fixture
async def ip_http():
    async with httpx.AsyncClient(
            transport=httpx.MockTransport(ip_lookup_handler)) as http:
        yield http


@pytest.fixture
async def client(mongo_db, ip_http):
    await ensure_indexes(mongo_db)

    async def override_db():
        return mongo_db

    app.dependency_overrides[get_db] = override_db
    app.dependency_overrides[get_outbound_http] = lambda: ip_http
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport,
                           base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()



@pytest.fixture
async def broken_client(ip_http):
    """Client whose database is unreachable."""
    db = FailingDatabase(ServerSelectionTimeoutError("mongo down"))

    async def override_db():
        return db

    app.dependency_overrides[get_db] = override_db
    app.dependency_overrides[get_outbound_http] = lambda: ip_http
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport,
                           base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def admin_headers(client) -> dict:
    r = await client.post(
        "/api/v1/admin/login",
        json={"username": settings.admin_username,
              "password": settings.admin_password},
    )
    assert r.status_code == 200
    return {"X-Admin-Token": r.json()["token"]}
