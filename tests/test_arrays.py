import random

import pytest

from dsabasics.arrays import (
    find_largest,
    find_second_largest,
    find_second_smallest,
    is_sorted,
    remove_duplicates,
)


def _random_lists():
    rng = random.Random(1234)
    return [[rng.randint(-50, 50) for _ in range(rng.randint(1, 30))] for _ in range(20)]


@pytest.mark.parametrize("values", _random_lists())
def test_find_largest_matches_max(values):
    assert find_largest(values) == max(values)


def test_find_largest_empty_raises():
    with pytest.raises(ValueError):
        find_largest([])


@pytest.mark.parametrize("values", _random_lists())
def test_second_largest_is_next_distinct_value(values):
    distinct = sorted(set(values))
    expected = distinct[-2] if len(distinct) > 1 else None
    assert find_second_largest(values) == expected


@pytest.mark.parametrize("values", _random_lists())
def test_second_smallest_is_next_distinct_value(values):
    distinct = sorted(set(values))
    expected = distinct[1] if len(distinct) > 1 else None
    assert find_second_smallest(values) == expected


def test_second_extremes_of_uniform_list_are_none():
    assert find_second_largest([4, 4, 4]) is None
    assert find_second_smallest([4, 4, 4]) is None


def test_second_extremes_empty_raise():
    with pytest.raises(ValueError):
        find_second_largest([])
    with pytest.raises(ValueError):
        find_second_smallest([])


@pytest.mark.parametrize("values", _random_lists())
def test_sorted_list_is_sorted(values):
    assert is_sorted(sorted(values)) is True


@pytest.mark.parametrize("values", _random_lists())
def test_descending_distinct_list_is_not_sorted(values):
    distinct = sorted(set(values), reverse=True)
    assert is_sorted(distinct) is (len(distinct) < 2)


def test_short_sequences_are_sorted():
    assert is_sorted([]) is True
    assert is_sorted([5]) is True


@pytest.mark.parametrize("values", _random_lists())
def test_remove_duplicates_of_sorted_gives_distinct(values):
    data = sorted(values)
    assert remove_duplicates(data) == sorted(set(values))


@pytest.mark.parametrize("values", _random_lists())
def test_remove_duplicates_is_idempotent(values):
    once = remove_duplicates(sorted(values))
    assert remove_duplicates(once) == once


def test_remove_duplicates_keeps_only_adjacent_runs():
    assert remove_duplicates([1, 1, 2, 1]) == [1, 2, 1]