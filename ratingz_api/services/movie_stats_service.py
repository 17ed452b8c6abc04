"""Service layer for per-movie rating statistics."""

from __future__ import annotations

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from ratingz_api.models.stats import MovieStats
from ratingz_api.services.aggregates import compute_rating_stats
from ratingz_api.services.repositories.movies_repo import MoviesRepo
from ratingz_api.services.repositories.ratings_repo import RatingsRepo
from ratingz_api.services.repositories.reactions_repo import ReactionsRepo

logger = logging.getLogger(__name__)


class MovieStatsService:
    """Recompute a movie's stats from its rows on every request."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.movies = MoviesRepo(db)
        self.ratings = RatingsRepo(db)
        self.reactions = ReactionsRepo(db)

    async def get_stats(self, movie_id: str) -> MovieStats:
        try:
            movie = await self.movies.get(movie_id)
            if movie is not None:
                ratings = await self.ratings.list_by_movie(movie_id)
                reactions = await self.reactions.list_by_movie(movie_id)
        except PyMongoError as error:
            logger.error('movie_stats_failed',
                         extra={'movie_id': movie_id, 'err': str(error)})
            raise RuntimeError(f'mongo_movie_stats_error: {error}') from error
        if movie is None:
            raise RuntimeError('movie_not_found')

        stats = compute_rating_stats(ratings, reactions)
        for key, value in stats.items():
            if key.startswith('average_'):
                stats[key] = round(value, 2)
        for item in stats['categories']:
            item['average'] = round(item['average'], 2)
        return MovieStats(movie_id=movie_id, **stats)
