"""Least-significant-digit radix sort for 32-bit unsigned integers."""

from collections.abc import MutableSequence
from itertools import accumulate
from typing import TypeVar

__all__ = ["LOG_BASE", "BASE", "WORD_BITS", "sort"]

LOG_BASE = 8
BASE = 1 << LOG_BASE
WORD_BITS = 32

S = TypeVar("S", bound=MutableSequence[int])


def sort(values: S) -> S:
    """Sort unsigned 32-bit integers in place, one byte per pass, and return them.

    Raises ValueError if any value lies outside ``0 <= v < 2**32``.
    """
    limit = 1 << WORD_BITS
    for value in values:
        if not 0 <= value < limit:
            raise ValueError(f"value {value} is not an unsigned {WORD_BITS}-bit integer")

    arr = list(values)
    scratch = [0] * len(arr)
    mask = BASE - 1

    for shift in range(0, WORD_BITS, LOG_BASE):
        counts = [0] * BASE
        for value in arr:
            counts[(value >> shift) & mask] += 1
        ends = list(accumulate(counts))
        for value in reversed(arr):
            digit = (value >> shift) & mask
            ends[digit] -= 1
            scratch[ends[digit]] = value
        arr, scratch = scratch, arr

    values[:] = arr
    return values