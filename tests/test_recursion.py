import math

import pytest

from dsabasics.recursion import (
    count_down,
    count_from_zero,
    count_up,
    factorial,
    fibonacci,
    is_palindrome,
    repeat,
    reverse,
    sum_to,
)


@pytest.mark.parametrize("n", [1, 2, 7, 20])
def test_count_up_is_ascending_from_one(n):
    result = count_up(n)
    assert len(result) == n
    assert result[0] == 1
    assert result[-1] == n
    assert result == sorted(result)


@pytest.mark.parametrize("n", [0, -4])
def test_count_up_empty_for_non_positive(n):
    assert count_up(n) == []


@pytest.mark.parametrize("n", [0, 1, 5, 12])
def test_count_down_mirrors_count_up(n):
    assert count_down(n) == count_up(n)[::-1]


def test_count_from_zero_default_stops_at_three():
    assert count_from_zero() == [0, 1, 2, 3]


def test_count_from_zero_custom_limit():
    result = count_from_zero(6)
    assert result[0] == 0
    assert result[-1] == 6
    assert len(result) == 7


def test_count_from_zero_negative_limit_yields_start():
    assert count_from_zero(-2) == [0]


def test_repeat_gives_n_copies():
    result = repeat("hello", 4)
    assert len(result) == 4
    assert set(result) == {"hello"}


def test_repeat_non_positive_is_empty():
    assert repeat("hello", 0) == []
    assert repeat("hello", -3) == []


@pytest.mark.parametrize("text", ["", "a", "madam", "abba", "racecar"])
def test_is_palindrome_true(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["ab", "abc", "abca", "palindrome"])
def test_is_palindrome_false(text):
    assert is_palindrome(text) is False


@pytest.mark.parametrize("n", [0, 1, 5, 10, 30])
def test_factorial_matches_stdlib(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-1)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 25))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_known_value():
    assert fibonacci(10) == 55


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci(-3)


@pytest.mark.parametrize(
    "values", [[], [1], [1, 2], [3, 1, 4, 1, 5], list(range(11))]
)
def test_reverse_matches_slice(values):
    original = list(values)
    assert reverse(values) == original[::-1]
    assert values == original


def test_reverse_twice_is_identity():
    values = [9, 8, 7, 1, 2]
    assert reverse(reverse(values)) == values


@pytest.mark.parametrize("n", [0, 1, 4, 100])
def test_sum_to_closed_form(n):
    assert sum_to(n) == n * (n + 1) // 2


def test_sum_to_negative_raises():
    with pytest.raises(ValueError):
        sum_to(-5)