"""Text patterns built from stars, numbers and letters.

Every function returns the whole pattern as one string. Each row ends
with a newline, and every cell is followed by a single space.
"""

from __future__ import annotations

from collections.abc import Iterable

_STAR = "* "
_GAP = "  "


def _render(rows: Iterable[str]) -> str:
    return "".join(f"{row}\n" for row in rows)


def _cells(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


def _letters(first: int, last: int) -> str:
    """Letters with code points from first to last inclusive, ascending."""
    return _cells(chr(code) for code in range(first, last + 1))


def _half_diamond_widths(n: int) -> list[int]:
    return [i if i <= n else 2 * n - i for i in range(1, 2 * n)]


def rectangle(rows: int, cols: int) -> str:
    """A solid block of stars, rows high and cols wide."""
    return _render(_STAR * cols for _ in range(rows))


def right_triangle(n: int) -> str:
    """Rows of 1 to n stars."""
    return _render(_STAR * (i + 1) for i in range(n))


def number_triangle(n: int) -> str:
    """Row i counts from 1 to i."""
    return _render(_cells(range(1, i + 1)) for i in range(1, n + 1))


def repeated_number_triangle(n: int) -> str:
    """Row i holds the number i, i times."""
    return _render(_cells([i] * i) for i in range(1, n + 1))


def inverted_triangle(n: int) -> str:
    """Rows of n stars down to 1."""
    return _render(_STAR * i for i in range(n, 0, -1))


def inverted_number_triangle(n: int) -> str:
    """Rows counting from 1 to n, then to n - 1, down to 1."""
    return _render(_cells(range(1, i + 1)) for i in range(n, 0, -1))


def _pyramid_rows(n: int) -> list[str]:
    return [_GAP * (n - i - 1) + _STAR * (2 * i + 1) for i in range(n)]


def _inverted_pyramid_rows(n: int) -> list[str]:
    return [_GAP * i + _STAR * (2 * n - 2 * i - 1) for i in range(n)]


def pyramid(n: int) -> str:
    """A centred pyramid with odd star counts 1, 3, 5, ..."""
    return _render(_pyramid_rows(n))


def inverted_pyramid(n: int) -> str:
    """A centred pyramid standing on its tip."""
    return _render(_inverted_pyramid_rows(n))


def diamond(n: int) -> str:
    """A pyramid followed by its upside-down copy."""
    return _render(_pyramid_rows(n) + _inverted_pyramid_rows(n))


def half_diamond(n: int) -> str:
    """Star counts rising from 1 to n and falling back to 1."""
    return _render(_STAR * width for width in _half_diamond_widths(n))


def binary_triangle(n: int) -> str:
    """Triangle of alternating 1 and 0; even rows start with 1."""
    return _render(
        _cells((1 - i % 2 + j) % 2 for j in range(i + 1)) for i in range(n)
    )


def number_crown(n: int) -> str:
    """Numbers rising from the left and falling on the right, gap between."""
    return _render(
        _cells(range(1, i + 1)) + _GAP * (2 * n - 2 * i) + _cells(range(i, 0, -1))
        for i in range(1, n + 1)
    )


def floyd_triangle(n: int) -> str:
    """Consecutive numbers from 1, one more on each row."""
    rows = []
    start = 1
    for i in range(n):
        rows.append(_cells(range(start, start + i + 1)))
        start += i + 1
    return _render(rows)


def letter_triangle(n: int) -> str:
    """Row i holds the letters from A onwards, i + 1 of them."""
    first = ord("A")
    return _render(_letters(first, first + i) for i in range(n))


def inverted_letter_triangle(n: int) -> str:
    """Letters from A onwards, n of them on the first row, one fewer each row."""
    first = ord("A")
    return _render(_letters(first, first + n - i - 1) for i in range(n))


def repeated_letter_triangle(n: int) -> str:
    """Row i holds the i-th letter, i + 1 times."""
    return _render(_cells([chr(ord("A") + i)] * (i + 1)) for i in range(n))


def letter_pyramid(n: int) -> str:
    """Centred rows rising from A to a peak letter and back to A."""
    first = ord("A")
    rows = []
    for i in range(n):
        up = [chr(first + k) for k in range(i + 1)]
        rows.append(_GAP * (n - i - 1) + _cells(up + up[-2::-1]))
    return _render(rows)


def reverse_letter_triangle(n: int) -> str:
    """Rows ending in E, each starting one letter earlier than the last."""
    last = ord("E")
    if n > last + 1:
        raise ValueError(f"at most {last + 1} rows fit before E")
    return _render(_letters(last - i, last) for i in range(n))


def hollow_diamond(n: int) -> str:
    """Two star blocks around a diamond-shaped gap."""
    top = [
        _STAR * (n - i) + _GAP * (2 * i) + _STAR * (n - i) for i in range(n)
    ]
    bottom = [
        _STAR * (i + 1) + _GAP * (2 * n - 2 * i - 2) + _STAR * (i + 1)
        for i in range(n)
    ]
    return _render(top + bottom)


def butterfly(n: int) -> str:
    """Two half diamonds facing each other, joined in the middle row."""
    rows = []
    spaces = 2 * n - 2
    for i, stars in enumerate(_half_diamond_widths(n), start=1):
        rows.append(_STAR * stars + _GAP * spaces + _STAR * stars)
        spaces += -2 if i < n else 2
    return _render(rows)


def hollow_square(n: int) -> str:
    """The outline of an n by n square."""
    edge = {0, n - 1}
    return _render(
        "".join(_STAR if i in edge or j in edge else _GAP for j in range(n))
        for i in range(n)
    )


def concentric_square(n: int) -> str:
    """Nested square rings of numbers, n on the outside down to 1 in the centre."""
    size = 2 * n - 1
    far = size - 1
    return _render(
        _cells(n - min(i, j, far - i, far - j) for j in range(size))
        for i in range(size)
    )