"""Pairwise relations between line segments in the plane."""

from __future__ import annotations

import argparse
import string
import sys
from dataclasses import dataclass
from enum import Enum
from itertools import combinations
from typing import Sequence, Tuple

Coord = Tuple[float, float]
Segment = Tuple[Coord, Coord]

SEGMENT_COUNT = 6


class Relation(Enum):
    """How two segments relate to each other."""

    INTERSECTING = "intersecting"
    COLLINEAR = "collinear"
    PARALLEL = "parallel"
    DISJOINT = "disjoint"


@dataclass(frozen=True)
class PairResult:
    """Relation of two segments and, if they cross, the crossing point."""

    relation: Relation
    point: Coord | None = None


def orientation(p: Coord, q: Coord, r: Coord) -> int:
    """Return 0 if collinear, 1 for a clockwise turn, 2 for counterclockwise."""
    val = (q[1] - p[1]) * (r[0] - q[0]) - (q[0] - p[0]) * (r[1] - q[1])
    if val == 0:
        return 0
    return 1 if val > 0 else 2


def on_segment(p: Coord, q: Coord, r: Coord) -> bool:
    """Return whether q lies in the bounding box of segment pr."""
    return (
        min(p[0], r[0]) <= q[0] <= max(p[0], r[0])
        and min(p[1], r[1]) <= q[1] <= max(p[1], r[1])
    )


def intersection(p1: Coord, q1: Coord, p2: Coord, q2: Coord) -> Coord | None:
    """Return the point where segments p1q1 and p2q2 cross, or None."""
    o1 = orientation(p1, q1, p2)
    o2 = orientation(p1, q1, q2)
    o3 = orientation(p2, q2, p1)
    o4 = orientation(p2, q2, q1)
    if o1 == o2 or o3 == o4:
        return None

    a1 = q1[1] - p1[1]
    b1 = p1[0] - q1[0]
    c1 = a1 * p1[0] + b1 * p1[1]
    a2 = q2[1] - p2[1]
    b2 = p2[0] - q2[0]
    c2 = a2 * p2[0] + b2 * p2[1]
    det = a1 * b2 - a2 * b1
    if det == 0:
        return None
    return ((b2 * c1 - b1 * c2) / det, (a1 * c2 - a2 * c1) / det)


def are_parallel(p1: Coord, q1: Coord, p2: Coord, q2: Coord) -> bool:
    """Return whether the two segments have the same direction."""
    return (q1[1] - p1[1]) * (q2[0] - p2[0]) == (q2[1] - p2[1]) * (q1[0] - p1[0])


def are_collinear(p1: Coord, q1: Coord, p2: Coord, q2: Coord) -> bool:
    """Return whether both ends of the second segment lie on the first's line."""
    return orientation(p1, q1, p2) == 0 and orientation(p1, q1, q2) == 0


def classify_pair(p1: Coord, q1: Coord, p2: Coord, q2: Coord) -> PairResult:
    """Classify two segments: crossing first, then collinear, then parallel."""
    point = intersection(p1, q1, p2, q2)
    if point is not None:
        return PairResult(Relation.INTERSECTING, point)
    if are_collinear(p1, q1, p2, q2):
        return PairResult(Relation.COLLINEAR)
    if are_parallel(p1, q1, p2, q2):
        return PairResult(Relation.PARALLEL)
    return PairResult(Relation.DISJOINT)


def _fmt(value: float) -> str:
    return f"{value:g}"


def describe_segments(segments: Sequence[Segment]) -> list[str]:
    """Return one line per pair of segments, naming them by letter pairs."""
    letters = string.ascii_uppercase
    if 2 * len(segments) > len(letters):
        raise ValueError(f"at most {len(letters) // 2} segments can be labelled")
    names = [letters[2 * i: 2 * i + 2] for i in range(len(segments))]
    lines = []
    for (name_a, (p1, q1)), (name_b, (p2, q2)) in combinations(zip(names, segments), 2):
        result = classify_pair(p1, q1, p2, q2)
        head = f"Line {name_a} and {name_b}"
        if result.relation is Relation.INTERSECTING:
            x, y = result.point
            lines.append(f"{head} Intersection at ({_fmt(x)}, {_fmt(y)})")
        elif result.relation is Relation.COLLINEAR:
            lines.append(f"{head} are Collinear")
        elif result.relation is Relation.PARALLEL:
            lines.append(f"{head} are Parallel")
        else:
            lines.append(f"{head} have No Intersection")
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Read six segments from standard input and report every pair."""
    parser = argparse.ArgumentParser(
        description=f"Read {SEGMENT_COUNT} segments (x1 y1 x2 y2 each) and relate every pair."
    )
    parser.parse_args(argv)
    numbers = [float(token) for token in sys.stdin.read().split()]
    needed = 4 * SEGMENT_COUNT
    if len(numbers) < needed:
        print(f"expected {needed} coordinates, got {len(numbers)}", file=sys.stderr)
        return 1
    it = iter(numbers[:needed])
    segments = [((x1, y1), (x2, y2)) for x1, y1, x2, y2 in zip(it, it, it, it)]
    for line in describe_segments(segments):
        print(line)
    return 0