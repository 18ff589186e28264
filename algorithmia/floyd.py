"""All-pairs shortest paths by the Floyd-Warshall algorithm."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

INF = 999
"""Weight that marks a missing edge."""

VERTEX_COUNT = 4


def _check_square(graph: Sequence[Sequence[int]]) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("graph must be a square matrix")
    return size


def floyd_warshall(graph: Sequence[Sequence[int]], infinity: int = INF) -> list[list[int]]:
    """Return the matrix of shortest distances; unreachable pairs keep ``infinity``."""
    _check_square(graph)
    dist = [list(row) for row in graph]
    for k, via in enumerate(dist):
        for row in dist:
            to_k = row[k]
            if to_k == infinity:
                continue
            for j, from_k in enumerate(via):
                if from_k != infinity and row[j] > to_k + from_k:
                    row[j] = to_k + from_k
    return dist


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a matrix with every value followed by a space, one row per line."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a 4x4 weight matrix from standard input and print shortest distances."""
    parser = argparse.ArgumentParser(
        description=f"Read a {VERTEX_COUNT}x{VERTEX_COUNT} weight matrix "
        f"({INF} for no edge) and print all shortest distances."
    )
    parser.parse_args(argv)
    numbers = [int(token) for token in sys.stdin.read().split()]
    needed = VERTEX_COUNT * VERTEX_COUNT
    if len(numbers) < needed:
        print(f"expected {needed} weights, got {len(numbers)}", file=sys.stderr)
        return 1
    it = iter(numbers[:needed])
    graph = [list(row) for row in zip(*[it] * VERTEX_COUNT)]
    print(format_matrix(floyd_warshall(graph)), end="")
    return 0