"""Simple queries and transformations over sequences of numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby, pairwise
from typing import TypeVar

T = TypeVar("T")


def _require_items(values: Sequence[T]) -> None:
    if not values:
        raise ValueError("sequence must not be empty")


def find_largest(values: Sequence[T]) -> T:
    """Return the largest element of a non-empty sequence."""
    _require_items(values)
    largest = values[0]
    for value in values[1:]:
        if value > largest:
            largest = value
    return largest


def find_second_largest(values: Sequence[T]) -> T | None:
    """Return the largest element strictly below the maximum.

    Returns None when every element equals the maximum.
    """
    _require_items(values)
    largest = values[0]
    second: T | None = None
    for value in values[1:]:
        if value > largest:
            second = largest
            largest = value
        if value < largest and (second is None or value > second):
            second = value
    return second


def find_second_smallest(values: Sequence[T]) -> T | None:
    """Return the smallest element strictly above the minimum.

    Returns None when every element equals the minimum.
    """
    _require_items(values)
    smallest = values[0]
    second: T | None = None
    for value in values[1:]:
        if value < smallest:
            second = smallest
            smallest = value
        if value > smallest and (second is None or value < second):
            second = value
    return second


def is_sorted(values: Iterable[T]) -> bool:
    """Tell whether the elements are in non-decreasing order."""
    return all(left <= right for left, right in pairwise(values))


def remove_duplicates(values: Iterable[T]) -> list[T]:
    """Drop runs of equal neighbours, keeping one element of each run.

    On a sorted input this yields the distinct elements in order.
    """
    return [key for key, _ in groupby(values)]