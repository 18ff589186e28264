"""Cheapest parenthesisation of a chain of matrix products."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence


def matrix_chain_cost(dimensions: Sequence[int]) -> int:
    """Return the fewest scalar multiplications to multiply the chain.

    Matrix ``i`` has shape ``dimensions[i] x dimensions[i + 1]``.
    """
    dims = tuple(dimensions)
    if len(dims) < 2:
        raise ValueError("at least two dimensions are needed for one matrix")

    @lru_cache(maxsize=None)
    def cost(i: int, j: int) -> int:
        if j == i + 1:
            return 0
        return min(
            cost(i, k) + cost(k, j) + dims[i] * dims[k] * dims[j]
            for k in range(i + 1, j)
        )

    return cost(0, len(dims) - 1)