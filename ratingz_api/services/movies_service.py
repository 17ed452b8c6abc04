"""Service layer for the movie catalog."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from ratingz_api.models.movies import (
    Movie,
    MovieCreateRequest,
    MovieDeleteResponse,
    MovieListItem,
    MovieListResponse,
    MovieUpdateRequest,
)
from ratingz_api.services.aggregates import THUMBS_DOWN, THUMBS_UP
from .repositories.movies_repo import MoviesRepo
from .repositories.ratings_repo import RatingsRepo
from .repositories.reactions_repo import ReactionsRepo

logger = logging.getLogger(__name__)


class MoviesService:
    """Catalog CRUD plus per-movie display aggregates."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.repo = MoviesRepo(db)
        self.ratings = RatingsRepo(db)
        self.reactions = ReactionsRepo(db)

    # ---------- READ ----------

    async def get_movie(self, movie_id: str) -> Movie:
        try:
            doc = await self.repo.get(movie_id)
        except PyMongoError as error:
            logger.error('movie_get_failed',
                         extra={'movie_id': movie_id, 'err': str(error)})
            raise RuntimeError(f'mongo_movie_get_error: {error}') from error
        if doc is None:
            raise RuntimeError('movie_not_found')
        return Movie(**doc)

    async def list_with_stats(
        self,
        sort_field: str = 'title',
        direction: int = 1,
        query: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Movies decorated with rating/reaction aggregates.

        Recomputed from the raw rows on every call.
        """
        try:
            movies = await self.repo.list_all(
                sort_field=sort_field,
                direction=direction,
                query=query,
            )
            summary = await self.ratings.per_movie_summary()
            counts = await self.reactions.per_movie_counts()
        except PyMongoError as error:
            logger.error('movies_list_failed', extra={'err': str(error)})
            raise RuntimeError(f'mongo_movies_list_error: {error}') from error

        result = []
        for movie in movies:
            rating = summary.get(movie['id'], {'count': 0, 'sum': 0})
            reaction = counts.get(movie['id'], {})
            total = rating['count']
            up = reaction.get(THUMBS_UP, 0)
            down = reaction.get(THUMBS_DOWN, 0)
            avg = rating['sum'] / total if total else 0.0
            result.append({
                **movie,
                'average_rating': round(avg, 2),
                'total_ratings': total,
                'ratings_count': total,
                'rating_sum': rating['sum'],
                'thumbs_up': up,
                'thumbs_down': down,
                'reactions_count': sum(reaction.values()),
            })
        return result

    async def list_movies(
        self,
        query: Optional[str] = None,
    ) -> MovieListResponse:
        items = await self.list_with_stats(query=query)
        return MovieListResponse(
            items=[MovieListItem(**doc) for doc in items],
            total=len(items),
        )

    # ---------- WRITE (admin) ----------

    async def create_movie(self, data: MovieCreateRequest) -> Movie:
        try:
            doc = await self.repo.insert(data.model_dump())
        except PyMongoError as error:
            logger.error('movie_create_failed', extra={'err': str(error)})
            raise RuntimeError(f'mongo_movie_create_error: {error}') from error
        logger.info('movie_created', extra={'movie_id': doc['id']})
        return Movie(**doc)

    async def update_movie(
        self,
        movie_id: str,
        data: MovieUpdateRequest,
    ) -> Movie:
        fields = data.model_dump(exclude_unset=True)
        if not fields:
            return await self.get_movie(movie_id)
        try:
            doc = await self.repo.update(movie_id, fields)
        except PyMongoError as error:
            logger.error('movie_update_failed', extra={'err': str(error)})
            raise RuntimeError(f'mongo_movie_update_error: {error}') from error
        if doc is None:
            raise RuntimeError('movie_not_found')
        return Movie(**doc)

    async def delete_movie(self, movie_id: str) -> MovieDeleteResponse:
        """Delete a movie together with its ratings and reactions."""
        await self.get_movie(movie_id)
        try:
            deleted_ratings = await self.ratings.delete_by_movie(movie_id)
            deleted_reactions = await self.reactions.delete_by_movie(movie_id)
            await self.repo.delete(movie_id)
        except PyMongoError as error:
            logger.error('movie_delete_failed',
                         extra={'movie_id': movie_id, 'err': str(error)})
            raise RuntimeError(f'mongo_movie_delete_error: {error}') from error

        logger.info(
            'movie_deleted',
            extra={
                'movie_id': movie_id,
                'deleted_ratings': deleted_ratings,
                'deleted_reactions': deleted_reactions,
            },
        )
        return MovieDeleteResponse(
            ok=True,
            deleted_ratings=deleted_ratings,
            deleted_reactions=deleted_reactions,
        )
