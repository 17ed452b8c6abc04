"""Tests for the public catalog and per-movie stats."""

from __future__ import annotations

import uuid

import pytest

from tests.helpers import (
    create_movie, device_header, new_device, rate, react, read_stats,
)

BASE = "/api/v1/movies"


async def test_list_movies_ordered_by_title_with_stats(client,
                                                       admin_headers):
    b = await create_movie(client, admin_headers, title="Brazil", year=1985)
    await create_movie(client, admin_headers, title="Alien", year=1979)
    await rate(client, b["id"], device_header(new_device()), overall=4)
    await rate(client, b["id"], device_header(new_device()), overall=5)
    await react(client, b["id"], device_header(new_device()), "thumbs_down")

    r = await client.get(BASE)
    assert r.status_code == 200
    body = r.json()
    assert body["total"] == 2
    assert [m["title"] for m in body["items"]] == ["Alien", "Brazil"]

    brazil = body["items"][1]
    assert brazil["total_ratings"] == 2
    assert brazil["average_rating"] == pytest.approx(4.5)
    assert brazil["thumbs_down"] == 1
    assert body["items"][0]["average_rating"] == 0.0


@pytest.mark.parametrize("query, expected", [
    ("ali", ["Alien"]),
    ("198", ["Brazil"]),
    ("tt0078", ["Alien"]),
    ("zzz", []),
])
async def test_search_by_title_year_or_imdb(client, admin_headers,
                                            query, expected):
    await create_movie(client, admin_headers, title="Alien", year=1979,
                       imdb_id="tt0078748")
    await create_movie(client, admin_headers, title="Brazil", year=1985,
                       imdb_id="tt0088846")

    r = await client.get(BASE, params={"q": query})
    assert [m["title"] for m in r.json()["items"]] == expected


async def test_get_movie_and_404(client, admin_headers):
    movie = await create_movie(client, admin_headers)
    r = await client.get(f"{BASE}/{movie['id']}")
    assert r.status_code == 200 and r.json()["title"] == "Inception"

    r = await client.get(f"{BASE}/{uuid.uuid4()}")
    assert r.status_code == 404


async def test_stats_recomputed_from_rows(client, admin_headers):
    movie = await create_movie(client, admin_headers)
    mid = movie["id"]

    s = await read_stats(client, mid)
    assert s["total_ratings"] == 0 and s["average_overall"] == 0.0

    await rate(client, mid, device_header(new_device()),
               overall=5, story=4, direction=5)
    await rate(client, mid, device_header(new_device()),
               overall=2, story=2)
    await rate(client, mid, device_header(new_device()), overall=5)
    await react(client, mid, device_header(new_device()), "thumbs_up")
    await react(client, mid, device_header(new_device()), "thumbs_up")
    await react(client, mid, device_header(new_device()), "thumbs_down")

    s = await read_stats(client, mid)
    assert s["total_ratings"] == 3
    assert s["average_overall"] == pytest.approx(4.0)
    # категории считаются только по заполненным строкам
    assert s["average_story"] == pytest.approx(3.0)
    assert s["average_direction"] == pytest.approx(5.0)
    assert s["average_music"] == 0.0
    assert s["distribution"] == [0, 1, 0, 0, 2]
    assert s["thumbs_up"] == 2 and s["thumbs_down"] == 1

    story = next(c for c in s["categories"] if c["category"] == "Story")
    assert story["count"] == 2


async def test_stats_unknown_movie_returns_404(client):
    r = await client.get(f"{BASE}/{uuid.uuid4()}/stats")
    assert r.status_code == 404


async def test_invalid_movie_id_returns_422(client):
    r = await client.get(f"{BASE}/not-a-uuid")
    assert r.status_code == 422
