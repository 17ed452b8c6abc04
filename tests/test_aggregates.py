"""Unit tests for the per-request aggregate helpers."""

from __future__ import annotations

import pytest

from ratingz_api.services.aggregates import (
    average,
    compute_rating_stats,
    decade_of,
    rating_distribution,
    rating_range_of,
)


def _row(overall, **categories):
    row = {'overall_rating': overall}
    row.update({f'{k}_rating': v for k, v in categories.items()})
    return row


def test_average_overall_is_sum_over_count():
    rows = [_row(5), _row(4), _row(1), _row(2)]
    stats = compute_rating_stats(rows)
    assert stats['total_ratings'] == 4
    assert stats['average_overall'] == 12 / 4


def test_average_overall_is_zero_without_rows():
    stats = compute_rating_stats([])
    assert stats['total_ratings'] == 0
    assert stats['average_overall'] == 0.0
    assert stats['distribution'] == [0, 0, 0, 0, 0]
    assert stats['thumbs_up'] == stats['thumbs_down'] == 0


def test_category_average_excludes_null_rows():
    rows = [
        _row(5, story=4, music=None),
        _row(3, story=None, music=2),
        _row(4, story=2),
    ]
    stats = compute_rating_stats(rows)
    assert stats['average_story'] == pytest.approx(3.0)
    assert stats['average_music'] == pytest.approx(2.0)
    # никто не оценил режиссуру
    assert stats['average_direction'] == 0.0

    by_name = {c['category']: c for c in stats['categories']}
    assert by_name['Story']['count'] == 2
    assert by_name['Music']['count'] == 1
    assert by_name['Direction']['count'] == 0


def test_distribution_buckets_by_star():
    rows = [_row(1), _row(5), _row(5), _row(3)]
    assert rating_distribution(rows) == [1, 0, 1, 0, 2]


def test_reactions_are_counted_by_kind():
    reactions = [
        {'reaction_type': 'thumbs_up'},
        {'reaction_type': 'thumbs_up'},
        {'reaction_type': 'thumbs_down'},
        {'reaction_type': 'meh'},
    ]
    stats = compute_rating_stats([], reactions)
    assert stats['thumbs_up'] == 2
    assert stats['thumbs_down'] == 1


def test_average_ignores_none_values():
    assert average([None, 2, None, 4]) == 3.0
    assert average([None, None]) == 0.0


@pytest.mark.parametrize('avg, expected', [
    (5.0, '4.5-5.0'),
    (4.5, '4.5-5.0'),
    (4.2, '4.0-4.4'),
    (3.5, '3.5-3.9'),
    (3.0, '3.0-3.4'),
    (1.0, '0-2.9'),
    (4.45, None),
])
def test_rating_range_of(avg, expected):
    assert rating_range_of(avg) == expected


def test_decade_of():
    assert decade_of(1994) == '1990s'
    assert decade_of(2000) == '2000s'
