"""Mongo repository for the movies catalog."""

from __future__ import annotations

import re
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument


class MoviesRepo:
    """CRUD and search helpers for movies."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.col = db['movies']

    async def insert(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a movie with a fresh id and return it."""
        now = datetime.now(timezone.utc)
        doc = {
            'id': str(uuid.uuid4()),
            **data,
            'created_at': now,
            'updated_at': now,
        }
        await self.col.insert_one(doc)
        doc.pop('_id', None)
        return doc

    async def get(self, movie_id: str) -> Optional[Dict[str, Any]]:
        return await self.col.find_one({'id': movie_id}, {'_id': 0})

    async def get_many(self, movie_ids: List[str]) -> List[Dict[str, Any]]:
        cursor = self.col.find({'id': {'$in': movie_ids}}, {'_id': 0})
        return [doc async for doc in cursor]

    async def update(
        self,
        movie_id: str,
        fields: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Set the given fields; return the updated doc or None."""
        update = {**fields, 'updated_at': datetime.now(timezone.utc)}
        return await self.col.find_one_and_update(
            {'id': movie_id},
            {'$set': update},
            return_document=ReturnDocument.AFTER,
            projection={'_id': 0},
        )

    async def delete(self, movie_id: str) -> bool:
        result = await self.col.delete_one({'id': movie_id})
        return result.deleted_count == 1

    async def list_all(
        self,
        sort_field: str = 'title',
        direction: int = 1,
        query: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """List movies, optionally filtered by a free-text query."""
        cursor = (
            self.col.find(self._search_filter(query), {'_id': 0})
            .sort(sort_field, direction)
        )
        return [doc async for doc in cursor]

    @staticmethod
    def _search_filter(query: Optional[str]) -> Dict[str, Any]:
        """Title / imdb id substring, or year substring for digits."""
        if query is None or not query.strip():
            return {}
        pattern = re.escape(query.strip())
        clauses: List[Dict[str, Any]] = [
            {'title': {'$regex': pattern, '$options': 'i'}},
            {'imdb_id': {'$regex': pattern, '$options': 'i'}},
        ]
        needle = query.strip()
        if needle.isdigit() and len(needle) <= 4:
            # подстрока года: "199" -> 1990..1999
            clauses.append({'year': {'$in': _years_containing(needle)}})
        return {'$or': clauses}


def _years_containing(needle: str) -> List[int]:
    return [y for y in range(1870, 2101) if needle in str(y)]
