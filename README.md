# dsabasics

Plain Python implementations of the algorithms most people meet first when
learning data structures and algorithms. The functions take ordinary Python
values and return new values. Nothing is printed. Only
`sorting.partition` changes its argument, because it partitions in place.

The package uses only the standard library and supports Python 3.10 and later.

## Modules

### `dsabasics.arrays`

- `find_largest(values)` returns the largest element. It raises `ValueError`
  if the sequence is empty.
- `find_second_largest(values)` and `find_second_smallest(values)` return the
  nearest distinct value below the maximum, or above the minimum. They return
  `None` when all elements are equal and raise `ValueError` on an empty
  sequence.
- `is_sorted(values)` tells whether the values are in non-decreasing order.
- `remove_duplicates(values)` returns a list in which each run of equal
  neighbours is reduced to one element. For sorted input that list holds the
  distinct values in order.

### `dsabasics.basic_math`

- `gcd_brute_force(a, b)` tries candidates from `min(a, b)` downwards. It
  raises `ValueError` unless both numbers are positive.
- `gcd_euclid(a, b)` finds the greatest common divisor by repeated remainders.
- `is_armstrong(n)`, `is_palindrome_number(n)` and `is_prime(n)` are number
  tests. `is_prime` counts divisors and is true when there are exactly two.
- `count_digits(n)` returns the number of decimal digits of a positive number.
  It raises `ValueError` for `n < 1`.
- `reverse_number(n)` reverses the decimal digits and returns 0 for
  non-positive `n`.
- `divisors(n)` returns every positive divisor of `n` in ascending order.

### `dsabasics.hashing`

- `count_occurrences(values)` and `character_counts(text)` return a
  `collections.Counter`, in which missing keys read as 0.
- `sorted_counts(values)` returns a dict of counts ordered by value.
- `small_range_counts(values, size=13)` fills a fixed-size list indexed by
  value. It raises `ValueError` for values outside `0..size-1`.
- `frequency_extremes(values)` returns `(most_frequent, least_frequent)`.
  When counts tie, the value seen first wins.
- `two_sum(nums, target)` returns a pair of distinct indices whose values add
  up to `target`, or `None` when no pair exists.

### `dsabasics.patterns`

Each function returns the whole pattern as one string. Every row ends with a
newline and every cell is followed by one space. The functions are
`rectangle(rows, cols)`, `right_triangle`, `number_triangle`,
`repeated_number_triangle`, `inverted_triangle`, `inverted_number_triangle`,
`pyramid`, `inverted_pyramid`, `diamond`, `half_diamond`, `binary_triangle`,
`number_crown`, `floyd_triangle`, `letter_triangle`,
`inverted_letter_triangle`, `repeated_letter_triangle`, `letter_pyramid`,
`reverse_letter_triangle`, `hollow_diamond`, `butterfly`, `hollow_square` and
`concentric_square`. Apart from `rectangle`, each takes a single `n`.
`reverse_letter_triangle` builds rows that end in `E`, and it raises
`ValueError` when the rows would run past the first code point.

```python
from dsabasics.patterns import pyramid

print(pyramid(3), end="")
#     *
#   * * *
# * * * * *
```

### `dsabasics.recursion`

- `count_up(n)`, `count_down(n)` and `repeat(text, n)` return lists, and
  return an empty list for `n < 1`.
- `count_from_zero(limit=3)` returns the numbers from 0 through `limit`. A
  negative limit gives `[0]`.
- `is_palindrome(text)` checks any sequence, from its ends inwards.
- `factorial(n)`, `fibonacci(n)` (with `fibonacci(0) == 0`) and `sum_to(n)`
  raise `ValueError` for negative `n`.
- `reverse(values)` returns the elements in reverse order.

### `dsabasics.sorting`

- `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort` and
  `quick_sort` each take any iterable and return a new sorted list. The input
  is not changed.
- `merge(left, right)` merges two sorted sequences. On ties, elements from
  `left` come first.
- `partition(values, low, high)` rearranges `values[low..high]` in place
  around `values[low]` and returns the pivot's final index.

```python
from dsabasics.sorting import merge_sort

merge_sort([5, 2, 9, 1])  # [1, 2, 5, 9]
```

## What it does not do

This is a library only. It has no command-line program. None of its functions
read input or write output; the caller decides how to print the results.

## Tests

The test suite lives in `tests/` and runs under pytest, which the `test`
extra installs.