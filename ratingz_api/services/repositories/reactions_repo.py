"""Mongo repository for reactions collection."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

REACTION_FIELDS = {
    '_id': 0, 'movie_id': 1, 'reaction_type': 1, 'created_at': 1,
}


class ReactionsRepo:
    """Insert-once storage for thumbs up/down reactions."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self._col = db['reactions']

    async def insert(
        self,
        movie_id: str,
        identity_fields: Dict[str, Any],
        reaction_type: str,
    ) -> Dict[str, Any]:
        """Insert a reaction; DuplicateKeyError if one already exists."""
        doc = {
            'movie_id': movie_id,
            **identity_fields,
            'reaction_type': reaction_type,
            'created_at': datetime.now(timezone.utc),
        }
        await self._col.insert_one(doc)
        return {
            'movie_id': movie_id,
            'reaction_type': reaction_type,
            'created_at': doc['created_at'],
        }

    async def find_for_identity(
        self,
        identity_key: str,
        movie_id: str,
    ) -> Optional[Dict[str, Any]]:
        return await self._col.find_one(
            {'identity_key': identity_key, 'movie_id': movie_id},
            REACTION_FIELDS,
        )

    async def list_by_movie(self, movie_id: str) -> List[Dict[str, Any]]:
        cursor = self._col.find({'movie_id': movie_id}, REACTION_FIELDS)
        return [doc async for doc in cursor]

    async def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        cursor = (
            self._col.find({'user_id': user_id}, REACTION_FIELDS)
            .sort('created_at', -1)
        )
        return [doc async for doc in cursor]

    async def delete_by_movie(self, movie_id: str) -> int:
        result = await self._col.delete_many({'movie_id': movie_id})
        return result.deleted_count

    async def per_movie_counts(self) -> Dict[str, Dict[str, int]]:
        """Count reactions per movie and kind."""
        pipeline = [
            {
                '$group': {
                    '_id': {
                        'movie_id': '$movie_id',
                        'reaction_type': '$reaction_type',
                    },
                    'count': {'$sum': 1},
                },
            },
        ]
        docs = await self._col.aggregate(pipeline).to_list(length=None)
        result: Dict[str, Dict[str, int]] = {}
        for d in docs:
            key = d['_id']
            per_movie = result.setdefault(key['movie_id'], {})
            per_movie[key['reaction_type']] = int(d['count'])
        return result
