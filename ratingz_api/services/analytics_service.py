"""Catalog-wide analytics for the home page and the admin panel."""

from __future__ import annotations

from typing import Any, Dict, List

from motor.motor_asyncio import AsyncIOMotorDatabase

from ratingz_api.core.config import settings
from ratingz_api.models.admin import (
    AdminAnalyticsResponse,
    AdminDashboardResponse,
    AdminMovieItem,
    AdminTotals,
    MostRatedItem,
    RatingRangeItem,
    TopRatedItem,
)
from ratingz_api.models.analytics import HomeAnalyticsResponse
from ratingz_api.models.movies import MovieListItem
from ratingz_api.services.aggregates import (
    RATING_RANGES,
    decade_of,
    rating_range_of,
)
from ratingz_api.services.movies_service import MoviesService

HOME_LIMIT = 3
ADMIN_LIMIT = 5


def top_rated(movies: List[Dict[str, Any]], min_ratings: int,
              limit: int) -> List[Dict[str, Any]]:
    """Best average among movies with enough ratings to be meaningful."""
    eligible = [m for m in movies if m['total_ratings'] >= min_ratings]
    eligible.sort(key=lambda m: m['average_rating'], reverse=True)
    return eligible[:limit]


def most_rated(movies: List[Dict[str, Any]],
               limit: int) -> List[Dict[str, Any]]:
    return sorted(movies, key=lambda m: m['total_ratings'],
                  reverse=True)[:limit]


def by_decade(movies: List[Dict[str, Any]]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for movie in movies:
        key = decade_of(movie['year'])
        counts[key] = counts.get(key, 0) + 1
    return dict(sorted(counts.items()))


def rating_ranges(movies: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Bucket rated movies by average; empty buckets are dropped."""
    counts = {label: 0 for label, _, _ in RATING_RANGES}
    for movie in movies:
        if movie['total_ratings'] == 0:
            continue
        # корзина по точному среднему, округлённое только для показа
        label = rating_range_of(
            movie['rating_sum'] / movie['total_ratings'])
        if label is not None:
            counts[label] += 1
    return [
        {'range': label, 'count': counts[label]}
        for label, _, _ in RATING_RANGES
        if counts[label] > 0
    ]


class AnalyticsService:
    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.movies = MoviesService(db)

    async def home(self) -> HomeAnalyticsResponse:
        movies = await self.movies.list_with_stats()
        recent = sorted(movies, key=lambda m: m['year'], reverse=True)
        return HomeAnalyticsResponse(
            top_rated=[
                MovieListItem(**m) for m in top_rated(
                    movies, settings.top_rated_min_ratings, HOME_LIMIT)
            ],
            most_popular=[
                MovieListItem(**m) for m in most_rated(movies, HOME_LIMIT)
            ],
            recent=[MovieListItem(**m) for m in recent[:HOME_LIMIT]],
        )

    async def admin_dashboard(self) -> AdminDashboardResponse:
        movies = await self.movies.list_with_stats(
            sort_field='created_at', direction=-1)
        total_ratings = sum(m['total_ratings'] for m in movies)
        rating_sum = sum(m['rating_sum'] for m in movies)
        totals = AdminTotals(
            total_movies=len(movies),
            total_ratings=total_ratings,
            total_reactions=sum(m['reactions_count'] for m in movies),
            average_rating=round(rating_sum / total_ratings, 2)
            if total_ratings else 0.0,
        )
        return AdminDashboardResponse(
            stats=totals,
            movies=[AdminMovieItem(**m) for m in movies],
        )

    async def admin_analytics(self) -> AdminAnalyticsResponse:
        movies = await self.movies.list_with_stats()
        return AdminAnalyticsResponse(
            top_rated=[
                TopRatedItem(
                    id=m['id'], title=m['title'],
                    rating=m['average_rating'], count=m['total_ratings'])
                for m in top_rated(
                    movies, settings.top_rated_min_ratings, ADMIN_LIMIT)
            ],
            most_rated=[
                MostRatedItem(
                    id=m['id'], title=m['title'],
                    ratings=m['total_ratings'],
                    reactions=m['reactions_count'])
                for m in most_rated(movies, ADMIN_LIMIT)
            ],
            by_decade=by_decade(movies),
            rating_ranges=[RatingRangeItem(**r)
                           for r in rating_ranges(movies)],
        )
