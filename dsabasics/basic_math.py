"""Elementary number theory on integers."""

from __future__ import annotations


def gcd_brute_force(a: int, b: int) -> int:
    """Return the greatest common divisor by trying candidates downwards."""
    if a < 1 or b < 1:
        raise ValueError("both numbers must be positive")
    for candidate in range(min(a, b), 0, -1):
        if a % candidate == 0 and b % candidate == 0:
            return candidate
    return 1


def gcd_euclid(a: int, b: int) -> int:
    """Return the greatest common divisor using repeated remainders."""
    while a > 0 and b > 0:
        if a > b:
            a %= b
        else:
            b %= a
    return b if a == 0 else a


def _digits(n: int) -> list[int]:
    return [int(ch) for ch in str(n)] if n > 0 else []


def is_armstrong(n: int) -> bool:
    """Tell whether n equals the sum of its digits each raised to the digit count."""
    digits = _digits(n)
    power = len(digits)
    return n == sum(d**power for d in digits)


def reverse_number(n: int) -> int:
    """Return the decimal digits of n in reverse order; 0 for non-positive n."""
    if n <= 0:
        return 0
    return int(str(n)[::-1])


def is_palindrome_number(n: int) -> bool:
    """Tell whether n reads the same reversed."""
    return reverse_number(n) == n


def divisors(n: int) -> list[int]:
    """Return every positive divisor of n in ascending order."""
    small: list[int] = []
    large: list[int] = []
    i = 1
    while i * i <= n:
        if n % i == 0:
            small.append(i)
            if i != n // i:
                large.append(n // i)
        i += 1
    return small + large[::-1]


def is_prime(n: int) -> bool:
    """Tell whether n has exactly two divisors."""
    return len(divisors(n)) == 2


def count_digits(n: int) -> int:
    """Return the number of decimal digits of a positive integer."""
    if n < 1:
        raise ValueError("number must be positive")
    return len(str(n))