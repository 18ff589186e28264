"""Top-down merge sort."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")


def merge(left: Sequence[T], right: Sequence[T]) -> list[T]:
    """Merge two sorted sequences into one sorted list."""
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[T]) -> list[T]:
    """Return a new sorted list of the values."""
    if len(values) <= 1:
        return list(values)
    mid = (len(values) + 1) // 2
    return merge(merge_sort(values[:mid]), merge_sort(values[mid:]))