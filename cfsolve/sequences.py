"""Puzzles over lists of numbers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby, pairwise


def odd_one_out(numbers: Iterable[int]) -> int:
    """Return the 1-based position of the number whose parity differs.

    The last odd position is returned when odd numbers are fewer than even
    ones, otherwise the last even position.
    """
    odd_count = even_count = 0
    odd_pos = even_pos = 0
    for position, value in enumerate(numbers, start=1):
        if value % 2:
            odd_count += 1
            odd_pos = position
        else:
            even_count += 1
            even_pos = position
    return odd_pos if odd_count < even_count else even_pos


def towers(lengths: Iterable[int]) -> tuple[int, int]:
    """Return the height of the tallest tower and the number of towers.

    Bars of equal length stack into one tower. An empty input gives
    ``(-1, 0)``.
    """
    counts = Counter(lengths)
    return max(counts.values(), default=-1), len(counts)


def study_schedule(
    total: int, bounds: Iterable[tuple[int, int]]
) -> list[int] | None:
    """Pick daily hours within each ``(minimum, maximum)`` summing to ``total``.

    Minimums are taken first, then the remainder fills days in order.
    Returns ``None`` when no schedule exists.
    """
    bounds = list(bounds)
    remaining = total
    hours = []
    for low, _ in bounds:
        if low > remaining:
            return None
        remaining -= low
        hours.append(low)
    for day, (low, high) in enumerate(bounds):
        if remaining == 0:
            break
        extra = min(high - low, remaining)
        hours[day] += extra
        remaining -= extra
    if remaining != 0:
        return None
    return hours


def _is_increasing(values: Sequence[int]) -> bool:
    return all(a < b for a, b in pairwise(values))


def find_reversal(permutation: Iterable[int]) -> tuple[int, int]:
    """Find the 1-based segment whose reversal sorts the permutation.

    Returns ``(0, 0)`` when the permutation is already sorted or no single
    reversal sorts it.
    """
    values = list(permutation)
    n = len(values)
    if n == 0 or sorted(values) != list(range(1, n + 1)):
        raise ValueError("expected a permutation of 1..n")
    if _is_increasing(values):
        return 0, 0
    if n == 2:
        return 1, 2

    if values[0] != 1:
        left, right = 0, values.index(1)
    elif values[-1] != n:
        left, right = values.index(n), n - 1
    else:
        left = next(
            (i for i in range(1, n - 1)
             if values[i] > values[i - 1] and values[i] > values[i + 1]),
            0,
        )
        right = next(
            (i for i in range(left + 1, n - 1)
             if values[i] < values[i - 1] and values[i] < values[i + 1]),
            0,
        )

    if right >= left:
        values[left:right + 1] = values[left:right + 1][::-1]
    if _is_increasing(values):
        return left + 1, right + 1
    return 0, 0


def count_magical_subarrays(values: Iterable[int]) -> int:
    """Count the non-empty subarrays whose minimum equals their maximum."""
    total = 0
    for _, run in groupby(values):
        length = sum(1 for _ in run)
        total += length * (length + 1) // 2
    return total


def is_equilibrium(forces: Iterable[tuple[int, int, int]]) -> bool:
    """Tell whether the three-dimensional force vectors sum to zero."""
    sums = [0, 0, 0]
    for x, y, z in forces:
        sums[0] += x
        sums[1] += y
        sums[2] += z
    return sums == [0, 0, 0]