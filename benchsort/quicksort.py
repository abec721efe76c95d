"""Quicksort with median-of-three pivots and an insertion-sort cutoff."""

from collections.abc import MutableSequence
from typing import Any, TypeVar

__all__ = ["INSERTION_THRESHOLD", "insertion_sort", "selection_sort", "sort"]

INSERTION_THRESHOLD = 10

S = TypeVar("S", bound=MutableSequence[Any])


def _insertion_sort_range(values: MutableSequence[Any], lo: int, hi: int) -> None:
    """Sort ``values[lo:hi]`` in place by insertion."""
    for i in range(lo + 1, hi):
        value = values[i]
        j = i
        while j > lo and value < values[j - 1]:
            values[j] = values[j - 1]
            j -= 1
        values[j] = value


def _swap_if_greater(values: MutableSequence[Any], a: int, b: int) -> None:
    if values[a] > values[b]:
        values[a], values[b] = values[b], values[a]


def insertion_sort(values: S) -> S:
    """Sort ``values`` in place by insertion and return it."""
    _insertion_sort_range(values, 0, len(values))
    return values


def selection_sort(values: S) -> S:
    """Sort ``values`` in place by exchange selection and return it."""
    n = len(values)
    for i in range(n - 1):
        for j in range(i + 1, n):
            _swap_if_greater(values, i, j)
    return values


def sort(values: S) -> S:
    """Sort ``values`` in place with an iterative quicksort and return it.

    Subarrays shorter than the insertion threshold are finished by
    insertion sort; the larger side of every partition is deferred on a
    stack while the smaller one is processed first.
    """
    # ``left`` and ``right`` bound the active subarray as values[left-1:right].
    left = 1
    right = len(values)
    pending: list[tuple[int, int]] = []

    while True:
        if right - left < INSERTION_THRESHOLD:
            _insertion_sort_range(values, left - 1, right)
            if not pending:
                break
            left, right = pending.pop()
            continue

        # Median of first, middle and last becomes the pivot at values[left].
        mid = (left + right) // 2 - 1
        values[mid], values[left] = values[left], values[mid]
        _swap_if_greater(values, left - 1, right - 1)
        _swap_if_greater(values, left, right - 1)
        _swap_if_greater(values, left - 1, left)

        i = left + 1
        j = right
        pivot = values[left]

        while True:
            while True:
                current = values[i]
                i += 1
                if not current < pivot:
                    break
            while True:
                current = values[j - 2]
                j -= 1
                if not current > pivot:
                    break
            if j < i:
                break
            values[i - 1], values[j - 1] = values[j - 1], values[i - 1]

        values[left] = values[j - 1]
        values[j - 1] = pivot

        if right - i + 1 >= j - left:
            pending.append((i, right))
            right = j - 1
        else:
            pending.append((left, j - 1))
            left = i

    return values