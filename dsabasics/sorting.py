"""Classic comparison sorts.

Each sort returns a new sorted list and leaves its input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from typing import TypeVar

T = TypeVar("T")


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by swapping neighbours, stopping early once a pass makes no swap."""
    items = list(values)
    n = len(items)
    for i in range(n):
        swapped = False
        for j in range(n - 1 - i):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by moving the minimum of the unsorted part to its front."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def merge(left: Sequence[T], right: Sequence[T]) -> list[T]:
    """Merge two sorted sequences; on ties the left element comes first."""
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Sort by splitting in halves and merging the sorted halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def partition(values: MutableSequence[T], low: int, high: int) -> int:
    """Partition values[low..high] in place around values[low].

    Afterwards the pivot sits at the returned index, everything before it
    is not greater and everything after it is greater.
    """
    pivot = values[low]
    i, j = low, high
    while i < j:
        while i <= high and values[i] <= pivot:
            i += 1
        while j >= low and values[j] > pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(values: Iterable[T]) -> list[T]:
    """Sort by partitioning around the first element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            index = partition(items, low, high)
            pending.append((low, index - 1))
            pending.append((index + 1, high))
    return items