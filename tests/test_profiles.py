from tests.helpers import create_movie, new_user, rate, react, uid_header

BASE = "/api/v1/profiles/me"


async def test_profile_missing_returns_404(client):
    r = await client.get(BASE, headers=uid_header(new_user()))
    assert r.status_code == 404
    assert r.json()["detail"] == "profile_not_found"


async def test_profile_upsert_is_idempotent(client):
    user = new_user()
    r1 = await client.put(BASE, json={"email": "a@example.com",
                                      "full_name": "Ann"},
                          headers=uid_header(user))
    r2 = await client.put(BASE, json={"email": "a@example.com",
                                      "full_name": "Ann B"},
                          headers=uid_header(user))
    assert r1.status_code == r2.status_code == 200
    assert r2.json()["id"] == user
    assert r2.json()["full_name"] == "Ann B"


async def test_profile_summary_lists_activity(client, admin_headers):
    user = new_user()
    await client.put(BASE, json={"full_name": "Ann"},
                     headers=uid_header(user))
    first = await create_movie(client, admin_headers, title="Heat")
    second = await create_movie(client, admin_headers, title="Ronin")
    await rate(client, first["id"], uid_header(user), overall=4)
    await rate(client, second["id"], uid_header(user), overall=2)
    await react(client, first["id"], uid_header(user), "thumbs_up")

    r = await client.get(BASE, headers=uid_header(user))
    assert r.status_code == 200
    body = r.json()
    assert body["profile"]["full_name"] == "Ann"
    assert body["total_ratings"] == 2
    assert body["average_rating"] == 3.0
    assert body["thumbs_up"] == 1 and body["thumbs_down"] == 0
    assert {x["movie"]["title"] for x in body["ratings"]} == {
        "Heat", "Ronin"}
    assert body["reactions"][0]["movie"]["id"] == first["id"]


async def test_profile_requires_user_header(client):
    r = await client.get(BASE)
    assert r.status_code == 422
