"""Small recursive routines: counting, palindromes, factorials and more."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def count_up(n: int) -> list[int]:
    """Return the numbers from 1 to n in ascending order; empty for n < 1."""
    return list(range(1, n + 1))


def count_down(n: int) -> list[int]:
    """Return the numbers from n down to 1; empty for n < 1."""
    return list(range(n, 0, -1))


def count_from_zero(limit: int = 3) -> list[int]:
    """Return the numbers from 0 up to and including limit.

    A negative limit yields just the starting 0, since the first value
    is always produced before the limit is checked.
    """
    return list(range(0, max(limit, 0) + 1))


def repeat(text: T, n: int) -> list[T]:
    """Return text repeated n times; empty for n < 1."""
    return [text] * max(n, 0)


def is_palindrome(text: Sequence[object]) -> bool:
    """Tell whether text reads the same forwards and backwards."""

    def check(i: int) -> bool:
        if i >= len(text) // 2:
            return True
        if text[i] != text[len(text) - i - 1]:
            return False
        return check(i + 1)

    return check(0)


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("number must not be negative")


def factorial(n: int) -> int:
    """Return n! for a non-negative n."""
    _require_non_negative(n)
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, counting fibonacci(0) == 0."""
    _require_non_negative(n)
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def reverse(values: Iterable[T]) -> list[T]:
    """Return the elements in reverse order."""
    items = list(values)

    def swap_from(i: int) -> None:
        if i >= len(items) // 2:
            return
        j = len(items) - i - 1
        items[i], items[j] = items[j], items[i]
        swap_from(i + 1)

    swap_from(0)
    return items


def sum_to(n: int) -> int:
    """Return 1 + 2 + ... + n for a non-negative n."""
    _require_non_negative(n)
    return sum(range(1, n + 1))