"""Service layer for star ratings (one per identity and movie)."""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from ratingz_api.models.identity import Identity
from ratingz_api.models.ratings import (
    CATEGORIES,
    MyRatingResponse,
    RatingCreateRequest,
    RatingItem,
)
from .movies_service import MoviesService
from .repositories.ratings_repo import RatingsRepo

logger = logging.getLogger(__name__)


class RatingsService:
    """Ratings are locked once submitted: no edits, no re-submission."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        """Init with DB adapter."""
        self.repo = RatingsRepo(db)
        self.movies = MoviesService(db)

    # ---------- CREATE ----------

    async def submit_rating(
        self,
        movie_id: str,
        identity: Identity,
        data: RatingCreateRequest,
    ) -> RatingItem:
        """Insert the caller's rating or fail with ``already_rated``."""
        await self.movies.get_movie(movie_id)

        scores = {'overall_rating': data.overall}
        for name in CATEGORIES:
            scores[f'{name}_rating'] = getattr(data, name)

        try:
            doc = await self.repo.insert(
                movie_id=movie_id,
                identity_fields=identity.as_fields(),
                scores=scores,
            )
        except DuplicateKeyError as error:
            # уникальный индекс (identity_key, movie_id): уже оценивал
            logger.info(
                'rating_rejected_duplicate',
                extra={'movie_id': movie_id, 'identity_kind': identity.kind},
            )
            raise RuntimeError('already_rated') from error
        except PyMongoError as error:
            logger.error('rating_insert_failed', extra={'err': str(error)})
            raise RuntimeError(f'mongo_rating_insert_error: {error}') from error

        logger.info(
            'rating_submitted',
            extra={'movie_id': movie_id, 'identity_kind': identity.kind},
        )
        return RatingItem(**doc)

    # ---------- READ ----------

    async def get_my_rating(
        self,
        movie_id: str,
        identity: Identity,
    ) -> MyRatingResponse:
        """Return the caller's rating for a movie (or None)."""
        try:
            doc: Optional[dict] = await self.repo.find_for_identity(
                identity_key=identity.key,
                movie_id=movie_id,
            )
        except PyMongoError as error:
            logger.error('rating_get_failed', extra={'err': str(error)})
            raise RuntimeError(f'mongo_rating_get_error: {error}') from error
        return MyRatingResponse(
            movie_id=movie_id,
            rating=RatingItem(**doc) if doc else None,
        )
