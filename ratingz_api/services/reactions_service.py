"""Service layer for thumbs up/down reactions."""

from __future__ import annotations

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from ratingz_api.models.identity import Identity
from ratingz_api.models.reactions import (
    MyReactionResponse,
    ReactionItem,
    ReactionType,
)
from ratingz_api.services.movies_service import MoviesService
from ratingz_api.services.repositories.reactions_repo import ReactionsRepo

logger = logging.getLogger(__name__)


class ReactionsService:
    """A reaction is recorded once per identity and never changes."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.repo = ReactionsRepo(db)
        self.movies = MoviesService(db)

    async def get_my_reaction(
            self,
            movie_id: str,
            identity: Identity) -> MyReactionResponse:
        try:
            doc = await self.repo.find_for_identity(identity.key, movie_id)
        except PyMongoError as error:
            logger.error('reaction_get_failed', extra={'err': str(error)})
            raise RuntimeError(
                f'mongo_reaction_get_error: {error}') from error
        return MyReactionResponse(
            movie_id=movie_id,
            reaction_type=doc['reaction_type'] if doc else None,
        )

    async def submit_reaction(
            self,
            movie_id: str,
            identity: Identity,
            reaction_type: ReactionType) -> ReactionItem:
        """Record the reaction or fail with ``already_reacted``."""
        await self.movies.get_movie(movie_id)
        try:
            doc = await self.repo.insert(
                movie_id,
                identity.as_fields(),
                reaction_type.value,
            )
        except DuplicateKeyError as error:
            logger.info(
                'reaction_rejected_duplicate',
                extra={'movie_id': movie_id, 'identity_kind': identity.kind},
            )
            raise RuntimeError('already_reacted') from error
        except PyMongoError as error:
            logger.error('reaction_insert_failed', extra={'err': str(error)})
            raise RuntimeError(
                f'mongo_reaction_insert_error: {error}') from error
        return ReactionItem(**doc)
