from ratingz_api.services.analytics_service import rating_ranges
from tests.helpers import create_movie, device_header, new_device, rate


async def test_home_analytics_sections(client, admin_headers):
    popular = await create_movie(client, admin_headers, title="Popular",
                                 year=2001)
    niche = await create_movie(client, admin_headers, title="Niche",
                               year=2020)
    await create_movie(client, admin_headers, title="Old", year=1950)

    for score in (3, 4, 3, 4):
        await rate(client, popular["id"], device_header(new_device()),
                   overall=score)
    # две пятёрки: мало для top_rated
    for _ in range(2):
        await rate(client, niche["id"], device_header(new_device()),
                   overall=5)

    r = await client.get("/api/v1/analytics/home")
    assert r.status_code == 200
    body = r.json()
    assert [m["title"] for m in body["top_rated"]] == ["Popular"]
    assert [m["title"] for m in body["most_popular"]] == [
        "Popular", "Niche", "Old"]
    assert [m["title"] for m in body["recent"]] == [
        "Niche", "Popular", "Old"]


async def test_home_analytics_empty_catalog(client):
    r = await client.get("/api/v1/analytics/home")
    assert r.json() == {"top_rated": [], "most_popular": [], "recent": []}


def test_rating_ranges_bucket_the_exact_mean():
    movies = [
        # 1124 / 250 = 4.496: показывается как 4.5, но в корзину не попадает
        {'total_ratings': 250, 'rating_sum': 1124, 'average_rating': 4.5},
        {'total_ratings': 2, 'rating_sum': 9, 'average_rating': 4.5},
        {'total_ratings': 0, 'rating_sum': 0, 'average_rating': 0.0},
    ]
    assert rating_ranges(movies) == [{'range': '4.5-5.0', 'count': 1}]
