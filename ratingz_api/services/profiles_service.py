"""Service layer for signed-in user profiles and their activity."""

from __future__ import annotations

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from ratingz_api.models.profiles import (
    MovieRef,
    ProfileRating,
    ProfileReaction,
    ProfileResponse,
    ProfileUpsertRequest,
    UserProfile,
)
from ratingz_api.services.aggregates import (
    THUMBS_DOWN,
    THUMBS_UP,
    average,
    reaction_counts,
)
from .repositories.movies_repo import MoviesRepo
from .repositories.profiles_repo import ProfilesRepo
from .repositories.ratings_repo import RatingsRepo
from .repositories.reactions_repo import ReactionsRepo

logger = logging.getLogger(__name__)


class ProfilesService:
    """Profile upsert plus the user's ratings and reactions summary."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.repo = ProfilesRepo(db)
        self.movies = MoviesRepo(db)
        self.ratings = RatingsRepo(db)
        self.reactions = ReactionsRepo(db)

    async def upsert_profile(
            self,
            user_id: str,
            data: ProfileUpsertRequest) -> UserProfile:
        try:
            doc = await self.repo.upsert(user_id, data.model_dump())
        except PyMongoError as error:
            logger.error('profile_upsert_failed', extra={'err': str(error)})
            raise RuntimeError(f'mongo_profile_upsert_error: {error}') \
                from error
        return UserProfile(**doc)

    async def get_profile(self, user_id: str) -> ProfileResponse:
        try:
            doc = await self.repo.get(user_id)
            if doc is None:
                raise RuntimeError('profile_not_found')

            ratings = await self.ratings.list_by_user(user_id)
            reactions = await self.reactions.list_by_user(user_id)

            movie_ids = list({r['movie_id'] for r in ratings}
                             | {r['movie_id'] for r in reactions})
            movie_docs = await self.movies.get_many(movie_ids)
        except PyMongoError as error:
            logger.error('profile_get_failed', extra={'err': str(error)})
            raise RuntimeError(f'mongo_profile_get_error: {error}') \
                from error

        movies = {m['id']: MovieRef(**m) for m in movie_docs}
        counts = reaction_counts(reactions)

        return ProfileResponse(
            profile=UserProfile(**doc),
            ratings=[
                ProfileRating(**r, movie=movies.get(r['movie_id']))
                for r in ratings
            ],
            reactions=[
                ProfileReaction(**r, movie=movies.get(r['movie_id']))
                for r in reactions
            ],
            total_ratings=len(ratings),
            average_rating=round(
                average(r['overall_rating'] for r in ratings), 2),
            thumbs_up=counts[THUMBS_UP],
            thumbs_down=counts[THUMBS_DOWN],
        )
