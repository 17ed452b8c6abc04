"""Unreachable store: every route answers 500 internal_error."""

import logging
import uuid

import pytest

from ratingz_api.core.config import settings
from tests.helpers import device_header, new_device, new_user, uid_header

MOVIE_ID = str(uuid.uuid4())
DEVICE = device_header(new_device(), ip="8.8.8.8")
ADMIN = {"X-Admin-Token": "some-token"}


@pytest.mark.parametrize("method, path, headers, body", [
    ("get", "/api/v1/movies", {}, None),
    ("get", f"/api/v1/movies/{MOVIE_ID}", {}, None),
    ("get", f"/api/v1/movies/{MOVIE_ID}/stats", {}, None),
    ("get", f"/api/v1/ratings/{MOVIE_ID}", DEVICE, None),
    ("post", f"/api/v1/ratings/{MOVIE_ID}", DEVICE, {"overall": 4}),
    ("get", f"/api/v1/reactions/{MOVIE_ID}", DEVICE, None),
    ("post", f"/api/v1/reactions/{MOVIE_ID}", DEVICE,
     {"reaction_type": "thumbs_up"}),
    ("get", "/api/v1/analytics/home", {}, None),
    ("get", "/api/v1/profiles/me", uid_header(new_user()), None),
    ("get", "/api/v1/admin/session", ADMIN, None),
    ("post", "/api/v1/admin/logout", ADMIN, None),
    ("get", "/api/v1/admin/dashboard", ADMIN, None),
    ("post", "/api/v1/admin/login",
     {}, {"username": settings.admin_username,
          "password": settings.admin_password}),
])
async def test_store_failure_returns_internal_error(
        broken_client, method, path, headers, body):
    kwargs = {"headers": headers}
    if body is not None:
        kwargs["json"] = body
    r = await getattr(broken_client, method)(path, **kwargs)
    assert r.status_code == 500
    assert r.json()["detail"] == "internal_error"


async def test_store_failure_is_logged(broken_client, caplog):
    with caplog.at_level(logging.ERROR):
        r = await broken_client.get(f"/api/v1/movies/{MOVIE_ID}")
    assert r.status_code == 500
    messages = [rec.getMessage() for rec in caplog.records]
    assert "movie_get_failed" in messages
    assert "unhandled_service_error" in messages
