"""Convex hull of integer points by Graham's scan."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int


class HullError(ValueError):
    """Raised when the points do not span a convex hull."""


def find_lowest(points: Sequence[Point]) -> int:
    """Return the index of the lowest point, the leftmost one on a tie."""
    if not points:
        raise HullError("no points given")
    return min(range(len(points)), key=lambda i: (points[i].y, points[i].x))


def orientation(p1: Point, p2: Point, p3: Point) -> int:
    """Return 1 for a counterclockwise turn, -1 for clockwise, 0 if collinear."""
    val = (p2.x - p1.x) * (p3.y - p1.y) - (p2.y - p1.y) * (p3.x - p1.x)
    if val > 0:
        return 1
    if val < 0:
        return -1
    return 0


def squared_distance(p1: Point, p2: Point) -> int:
    """Return the squared Euclidean distance between two points."""
    return (p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2


def convex_hull(points: Iterable[Point]) -> list[Point]:
    """Return the hull vertices counterclockwise, starting at the lowest point."""
    pts = list(points)
    if len(pts) < 3:
        raise HullError("Convex hull not possible")

    lowest = find_lowest(pts)
    pivot = pts[lowest]
    rest = pts[:lowest] + pts[lowest + 1:]

    def by_angle(a: Point, b: Point) -> int:
        turn = orientation(pivot, a, b)
        if turn == 0:
            da, db = squared_distance(pivot, a), squared_distance(pivot, b)
            return (da > db) - (da < db)
        return -1 if turn == 1 else 1

    rest.sort(key=cmp_to_key(by_angle))

    # Of each run of points on one ray from the pivot keep only the farthest.
    followers = rest[1:] + [None]
    kept = [
        point
        for point, nxt in zip(rest, followers)
        if nxt is None or orientation(pivot, point, nxt) != 0
    ]
    candidates = [pivot, *kept]
    if len(candidates) < 3:
        raise HullError("Convex hull not possible after removing colinear points")

    hull = candidates[:3]
    for point in candidates[3:]:
        while len(hull) >= 2 and orientation(hull[-2], hull[-1], point) <= 0:
            hull.pop()
        hull.append(point)
    return hull


def _read_ints(stream) -> list[int]:
    return [int(token) for token in stream.read().split()]


def main(argv: Sequence[str] | None = None) -> int:
    """Read a point count and points from standard input and print the hull."""
    parser = argparse.ArgumentParser(description="Print the convex hull of points read from standard input.")
    parser.parse_args(argv)

    numbers = iter(_read_ints(sys.stdin))
    print("Enter number of points: ", end="")
    n = next(numbers, 0)
    if n <= 0:
        print("Invalid number of points.")
        return 0
    print(f"Enter {n} points (x y):")
    try:
        points = [Point(next(numbers), next(numbers)) for _ in range(n)]
    except StopIteration:
        print("Not enough coordinates given.", file=sys.stderr)
        return 1
    try:
        hull = convex_hull(points)
    except HullError as exc:
        print(exc)
        return 0
    print("\nConvex Hull:")
    for point in hull:
        print(f"{point.x} {point.y}")
    return 0