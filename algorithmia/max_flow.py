"""Maximum flow by the Ford-Fulkerson method with depth-first path search."""

from __future__ import annotations

import argparse
import sys
from itertools import pairwise
from typing import Sequence

VERTEX_COUNT = 6


def _check(graph: Sequence[Sequence[int]], source: int, sink: int) -> None:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("capacity matrix must be square")
    for name, vertex in (("source", source), ("sink", sink)):
        if not 0 <= vertex < size:
            raise ValueError(f"{name} {vertex} is not a vertex")


def find_augmenting_path(
    residual: Sequence[Sequence[int]], source: int, sink: int
) -> list[int] | None:
    """Return a path from source to sink over positive residual edges, or None."""
    _check(residual, source, sink)
    parent: dict[int, int | None] = {source: None}
    stack = [source]
    while stack:
        u = stack.pop()
        for v, capacity in enumerate(residual[u]):
            if v in parent or capacity <= 0:
                continue
            stack.append(v)
            parent[v] = u
            if v == sink:
                path = [sink]
                while (step := parent[path[-1]]) is not None:
                    path.append(step)
                path.reverse()
                return path
    return None


def ford_fulkerson(graph: Sequence[Sequence[int]], source: int, sink: int) -> int:
    """Return the value of a maximum flow from source to sink."""
    _check(graph, source, sink)
    residual = [list(row) for row in graph]
    flow = 0
    while (path := find_augmenting_path(residual, source, sink)) is not None:
        edges = list(pairwise(path))
        bottleneck = min(residual[u][v] for u, v in edges)
        for u, v in edges:
            residual[u][v] -= bottleneck
            residual[v][u] += bottleneck
        flow += bottleneck
    return flow


def main(argv: Sequence[str] | None = None) -> int:
    """Read a 6x6 capacity matrix from standard input and print the flow from 0 to 5."""
    parser = argparse.ArgumentParser(
        description=f"Read a {VERTEX_COUNT}x{VERTEX_COUNT} capacity matrix and print "
        f"the maximum flow from vertex 0 to vertex {VERTEX_COUNT - 1}."
    )
    parser.parse_args(argv)
    numbers = [int(token) for token in sys.stdin.read().split()]
    needed = VERTEX_COUNT * VERTEX_COUNT
    if len(numbers) < needed:
        print(f"expected {needed} capacities, got {len(numbers)}", file=sys.stderr)
        return 1
    it = iter(numbers[:needed])
    graph = [list(row) for row in zip(*[it] * VERTEX_COUNT)]
    print(f"Maximum Flow {ford_fulkerson(graph, 0, VERTEX_COUNT - 1)}")
    return 0