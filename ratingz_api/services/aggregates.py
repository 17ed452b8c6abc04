"""Per-request aggregates over raw rating/reaction rows.

Nothing here is persisted: every call scans the rows it is given.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from ratingz_api.models.ratings import CATEGORIES

THUMBS_UP = 'thumbs_up'
THUMBS_DOWN = 'thumbs_down'

# (label, min, max): границы включительно, как в админке
RATING_RANGES = (
    ('4.5-5.0', 4.5, 5.0),
    ('4.0-4.4', 4.0, 4.4),
    ('3.5-3.9', 3.5, 3.9),
    ('3.0-3.4', 3.0, 3.4),
    ('0-2.9', 0.0, 2.9),
)


def average(values: Iterable[Optional[float]]) -> float:
    """Mean of the non-null values, 0.0 when there are none."""
    present = [v for v in values if v is not None]
    if not present:
        return 0.0
    return sum(present) / len(present)


def rating_distribution(ratings: Iterable[Mapping[str, Any]]) -> List[int]:
    """Count overall scores per star bucket (index 0 is one star)."""
    buckets = [0, 0, 0, 0, 0]
    for row in ratings:
        value = row.get('overall_rating')
        if value is None:
            continue
        star = math.floor(value)
        if 1 <= star <= 5:
            buckets[star - 1] += 1
    return buckets


def reaction_counts(
        reactions: Iterable[Mapping[str, Any]]) -> Dict[str, int]:
    counts = {THUMBS_UP: 0, THUMBS_DOWN: 0}
    for row in reactions:
        kind = row.get('reaction_type')
        if kind in counts:
            counts[kind] += 1
    return counts


def compute_rating_stats(
        ratings: Sequence[Mapping[str, Any]],
        reactions: Sequence[Mapping[str, Any]] = (),
) -> Dict[str, Any]:
    """Build the full stats dict for one movie from its rows."""
    stats: Dict[str, Any] = {
        'total_ratings': len(ratings),
        'average_overall': average(r.get('overall_rating') for r in ratings),
    }
    categories = []
    for name in CATEGORIES:
        values = [r.get(f'{name}_rating') for r in ratings]
        present = [v for v in values if v is not None]
        avg = average(present)
        stats[f'average_{name}'] = avg
        categories.append({
            'category': name.capitalize(),
            'average': avg,
            'count': len(present),
        })
    stats['categories'] = categories
    stats['distribution'] = rating_distribution(ratings)

    counts = reaction_counts(reactions)
    stats['thumbs_up'] = counts[THUMBS_UP]
    stats['thumbs_down'] = counts[THUMBS_DOWN]
    return stats


def rating_range_of(avg: float) -> Optional[str]:
    for label, low, high in RATING_RANGES:
        if low <= avg <= high:
            return label
    # 4.45 и подобные падают между корзинами, как и в старой админке
    return None


def decade_of(year: int) -> str:
    return f'{(year // 10) * 10}s'
