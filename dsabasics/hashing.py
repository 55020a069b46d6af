"""Frequency counting and hash-based lookups."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import TypeVar

K = TypeVar("K", bound=Hashable)


def count_occurrences(values: Iterable[K]) -> Counter[K]:
    """Count how often each value occurs; missing values read as 0."""
    return Counter(values)


def sorted_counts(values: Iterable[K]) -> dict[K, int]:
    """Count occurrences and return them ordered by value."""
    return dict(sorted(Counter(values).items()))


def small_range_counts(values: Iterable[int], size: int = 13) -> list[int]:
    """Count values in a fixed table indexed by value, for values in [0, size)."""
    table = [0] * size
    for value in values:
        if not 0 <= value < size:
            raise ValueError(f"value {value} outside range 0..{size - 1}")
        table[value] += 1
    return table


def character_counts(text: str) -> Counter[str]:
    """Count how often each character occurs in text."""
    return Counter(text)


def frequency_extremes(values: Iterable[K]) -> tuple[K, K]:
    """Return the most and least frequent values.

    Ties go to the value seen first.
    """
    counts = Counter(values)
    if not counts:
        raise ValueError("sequence must not be empty")
    most = max(counts, key=counts.__getitem__)
    least = min(counts, key=counts.__getitem__)
    return most, least


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find two distinct positions whose values add up to target.

    Returns (complement index, index) or None when no pair exists.
    """
    last_index = {value: index for index, value in enumerate(nums)}
    for index, value in enumerate(nums):
        other = last_index.get(target - value)
        if other is not None and other != index:
            return other, index
    return None