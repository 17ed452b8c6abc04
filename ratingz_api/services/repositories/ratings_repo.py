"""Mongo repository for ratings collection."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

SCORE_FIELDS = {
    '_id': 0,
    'movie_id': 1,
    'overall_rating': 1,
    'story_rating': 1,
    'screenplay_rating': 1,
    'direction_rating': 1,
    'performance_rating': 1,
    'music_rating': 1,
    'created_at': 1,
}


class RatingsRepo:
    """Insert-once storage and scans for ratings."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.col = db['ratings']

    async def insert(
        self,
        movie_id: str,
        identity_fields: Dict[str, Any],
        scores: Dict[str, Optional[int]],
    ) -> Dict[str, Any]:
        """Insert a rating row.

        Raises DuplicateKeyError when the (identity_key, movie_id) unique
        index already holds a row.
        """
        doc = {
            'movie_id': movie_id,
            **identity_fields,
            **scores,
            'created_at': datetime.now(timezone.utc),
        }
        await self.col.insert_one(doc)
        return {k: doc.get(k) for k in SCORE_FIELDS if k != '_id'}

    async def find_for_identity(
        self,
        identity_key: str,
        movie_id: str,
    ) -> Optional[Dict[str, Any]]:
        return await self.col.find_one(
            {'identity_key': identity_key, 'movie_id': movie_id},
            SCORE_FIELDS,
        )

    async def list_by_movie(self, movie_id: str) -> List[Dict[str, Any]]:
        """All score rows of a movie (full scan, no pagination)."""
        cursor = self.col.find({'movie_id': movie_id}, SCORE_FIELDS)
        return [doc async for doc in cursor]

    async def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        """User ratings, newest first."""
        cursor = (
            self.col.find({'user_id': user_id}, SCORE_FIELDS)
            .sort('created_at', -1)
        )
        return [doc async for doc in cursor]

    async def delete_by_movie(self, movie_id: str) -> int:
        result = await self.col.delete_many({'movie_id': movie_id})
        return result.deleted_count

    async def per_movie_summary(self) -> Dict[str, Dict[str, Any]]:
        """Aggregate count and overall sum per movie."""
        pipeline = [
            {
                '$group': {
                    '_id': '$movie_id',
                    'count': {'$sum': 1},
                    'sum': {'$sum': '$overall_rating'},
                },
            },
        ]
        docs = await self.col.aggregate(pipeline).to_list(length=None)
        return {
            d['_id']: {'count': int(d['count']), 'sum': d['sum'] or 0}
            for d in docs
        }
