"""Index layout of the ratingz collections.

The same table drives the startup hook (Motor) and the operational
``scripts/create_indexes.py`` (plain pymongo).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from pymongo import ASCENDING, DESCENDING

logger = logging.getLogger(__name__)

IndexSpec = Tuple[str, List[Tuple[str, int]], Dict[str, Any]]

INDEXES: List[IndexSpec] = [
    # movies
    ('movies', [('id', ASCENDING)],
     {'unique': True, 'name': 'movies_id'}),
    ('movies', [('title', ASCENDING)], {'name': 'movies_title'}),
    ('movies', [('created_at', DESCENDING)], {'name': 'movies_created_desc'}),

    # ratings: одна оценка на идентичность и фильм
    ('ratings', [('identity_key', ASCENDING), ('movie_id', ASCENDING)],
     {'unique': True, 'name': 'ratings_identity_movie'}),
    ('ratings', [('movie_id', ASCENDING)], {'name': 'ratings_movie_id'}),
    ('ratings', [('user_id', ASCENDING), ('created_at', DESCENDING)],
     {'name': 'ratings_user_created_desc'}),

    # reactions
    ('reactions', [('identity_key', ASCENDING), ('movie_id', ASCENDING)],
     {'unique': True, 'name': 'reactions_identity_movie'}),
    ('reactions', [('movie_id', ASCENDING)], {'name': 'reactions_movie_id'}),
    ('reactions', [('user_id', ASCENDING), ('created_at', DESCENDING)],
     {'name': 'reactions_user_created_desc'}),

    # user_profiles
    ('user_profiles', [('id', ASCENDING)],
     {'unique': True, 'name': 'user_profiles_id'}),

    # admin_sessions: TTL по expires_at
    ('admin_sessions', [('token', ASCENDING)],
     {'unique': True, 'name': 'admin_sessions_token'}),
    ('admin_sessions', [('expires_at', ASCENDING)],
     {'expireAfterSeconds': 0, 'name': 'admin_sessions_ttl'}),
]


async def ensure_indexes(db) -> None:
    """Create every index in INDEXES (idempotent)."""
    for collection, keys, options in INDEXES:
        await db[collection].create_index(keys, **options)
    logger.info('indexes_ensured', extra={'count': len(INDEXES)})
