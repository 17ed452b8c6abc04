"""Tests for locked thumbs up/down reactions."""

from __future__ import annotations

from tests.helpers import (
    create_movie, device_header, new_device, react, read_stats,
)


async def test_reaction_initial_value_is_none(client, admin_headers):
    movie = await create_movie(client, admin_headers)
    r = await client.get(f"/api/v1/reactions/{movie['id']}",
                         headers=device_header(new_device()))
    assert r.status_code == 200
    assert r.json()["reaction_type"] is None


async def test_reaction_is_recorded_and_counted(client, admin_headers):
    movie = await create_movie(client, admin_headers)
    headers = device_header(new_device())

    r = await react(client, movie["id"], headers, "thumbs_up")
    assert r.status_code == 201
    assert r.json()["reaction_type"] == "thumbs_up"

    r = await client.get(f"/api/v1/reactions/{movie['id']}",
                         headers=headers)
    assert r.json()["reaction_type"] == "thumbs_up"

    s = await read_stats(client, movie["id"])
    assert s["thumbs_up"] == 1 and s["thumbs_down"] == 0


async def test_reaction_cannot_be_changed(client, admin_headers):
    movie = await create_movie(client, admin_headers)
    headers = device_header(new_device())

    await react(client, movie["id"], headers, "thumbs_up")
    r = await react(client, movie["id"], headers, "thumbs_down")
    assert r.status_code == 409
    assert r.json()["detail"] == "already_reacted"

    s = await read_stats(client, movie["id"])
    assert s["thumbs_up"] == 1 and s["thumbs_down"] == 0


async def test_reaction_invalid_kind_returns_422(client, admin_headers):
    movie = await create_movie(client, admin_headers)
    r = await react(client, movie["id"], device_header(new_device()), "meh")
    assert r.status_code == 422
