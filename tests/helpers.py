import uuid
from typing import Dict, Optional
from httpx import AsyncClient


def new_user() -> str:
    return str(uuid.uuid4())


def new_device() -> str:
    return f"device_{uuid.uuid4().hex[:9]}_1700000000000"


def uid_header(user_id: str) -> Dict[str, str]:
    return {"X-User-Id": user_id}


def device_header(device_id: str,
                  ip: Optional[str] = None,
                  fingerprint: Optional[str] = None) -> Dict[str, str]:
    headers = {"X-Device-Id": device_id}
    if ip:
        headers["X-Forwarded-For"] = ip
    if fingerprint:
        headers["X-Fingerprint"] = fingerprint
    return headers


async def create_movie(client: AsyncClient, admin_headers: dict,
                       **fields) -> dict:
    body = {"title": "Inception", "year": 2010, "imdb_id": "tt1375666",
            **fields}
    r = await client.post("/api/v1/admin/movies", json=body,
                          headers=admin_headers)
    assert r.status_code == 201
    return r.json()


async def rate(client: AsyncClient, movie_id: str, headers: dict,
               overall: int, **categories):
    return await client.post(f"/api/v1/ratings/{movie_id}",
                             json={"overall": overall, **categories},
                             headers=headers)


async def react(client: AsyncClient, movie_id: str, headers: dict,
                reaction_type: str):
    return await client.post(f"/api/v1/reactions/{movie_id}",
                             json={"reaction_type": reaction_type},
                             headers=headers)


async def read_stats(client: AsyncClient, movie_id: str) -> dict:
    r = await client.get(f"/api/v1/movies/{movie_id}/stats")
    assert r.status_code == 200
    return r.json()
