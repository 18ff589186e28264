"""Maximum contiguous subarray sum by divide and conquer."""

from __future__ import annotations

from itertools import accumulate
from typing import Sequence


def max_crossing_sum(values: Sequence[int], low: int, mid: int, high: int) -> int:
    """Best sum of a run that ends at mid from the left and continues past it."""
    best_left = max(accumulate(reversed(values[low:mid + 1])))
    best_right = max(accumulate(values[mid + 1:high + 1]))
    return best_left + best_right


def _best(values: Sequence[int], low: int, high: int) -> int:
    if low == high:
        return values[low]
    mid = (low + high) // 2
    return max(
        _best(values, low, mid),
        _best(values, mid + 1, high),
        max_crossing_sum(values, low, mid, high),
    )


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of values."""
    if not values:
        raise ValueError("values must not be empty")
    return _best(values, 0, len(values) - 1)