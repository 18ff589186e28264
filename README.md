# algorithmia

A small collection of classic algorithms written in plain Python, with no
dependencies beyond the standard library.

## What is inside

| Module | What it does |
| --- | --- |
| `algorithmia.activity` | Greedy activity selection by earliest finish (`Activity`, `select_activities`, `select_from_times`) |
| `algorithmia.convex_hull` | Graham scan over integer points (`Point`, `convex_hull`, `orientation`, `find_lowest`, `squared_distance`, `HullError`) |
| `algorithmia.segments` | Segment intersection, collinear and parallel tests (`Relation`, `PairResult`, `orientation`, `on_segment`, `intersection`, `are_parallel`, `are_collinear`, `classify_pair`, `describe_segments`) |
| `algorithmia.floyd` | All-pairs shortest paths by Floyd–Warshall (`floyd_warshall`, `format_matrix`) |
| `algorithmia.max_flow` | Maximum flow by Ford–Fulkerson with depth-first path search (`ford_fulkerson`, `find_augmenting_path`) |
| `algorithmia.string_search` | Knuth–Morris–Pratt and Rabin–Karp substring search (`compute_lps`, `kmp_search`, `rabin_karp`) |
| `algorithmia.matrix_chain` | Fewest scalar multiplications for a chain of matrices (`matrix_chain_cost`) |
| `algorithmia.max_subarray` | Divide-and-conquer maximum subarray sum (`max_subarray_sum`, `max_crossing_sum`) |
| `algorithmia.merge_sort` | Top-down merge sort returning a new list (`merge_sort`, `merge`) |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from algorithmia.merge_sort import merge_sort
from algorithmia.max_subarray import max_subarray_sum
from algorithmia.matrix_chain import matrix_chain_cost
from algorithmia.string_search import kmp_search, rabin_karp
from algorithmia.activity import select_from_times
from algorithmia.convex_hull import Point, convex_hull

merge_sort([1, 5, -8, 9, 10, -17, 17, 20])          # [-17, -8, 1, 5, 9, 10, 17, 20]
max_subarray_sum([1, 5, -8, 9, 10, -17, -17, 20])   # 20
matrix_chain_cost([10, 20, 30, 40, 50])              # 38000

kmp_search("BC", "ABCDEFABCGHIABC")                  # [1, 7, 13]
rabin_karp("ABCDEFABCGHIABC", "BC", 101)             # [1, 7, 13]

select_from_times([1, 2, 3, 6, 5, 8], [3, 5, 9, 8, 7, 9])  # [1, 5, 6]

convex_hull([Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4), Point(2, 2)])
# counterclockwise from the lowest, leftmost point
```

Notes on behaviour:

- Activities are numbered from 1 in the order they are given.
- `kmp_search` takes the pattern first; `rabin_karp` takes the text first and
  an optional modulus (101 by default). Both report overlapping matches and
  return an empty list when there is none; an empty pattern raises
  `ValueError`.
- `floyd_warshall` treats the value `infinity` (999 by default) as a missing
  edge, and unreachable pairs keep that value.
- `convex_hull` keeps only the farthest of points that lie on one ray from the
  starting point, and raises `HullError` when fewer than three points, or
  fewer than three directions, remain.
- `segments.orientation` returns 0, 1 or 2 (collinear, clockwise,
  counterclockwise), while `convex_hull.orientation` returns 0, 1 or -1
  (collinear, counterclockwise, clockwise).
- Other input the algorithms cannot handle, such as an empty list for
  `max_subarray_sum` or a non-square matrix, raises `ValueError`.

## Command-line tools

Four commands read whitespace-separated numbers from standard input and print
their results:

- `algorithmia-hull` reads a point count and then that many `x y` pairs, and
  prints the points of the convex hull, one per line.
- `algorithmia-segments` reads six segments as `x1 y1 x2 y2` and reports, for
  every pair (named `AB`, `CD`, … `KL`), where they intersect or whether they
  are collinear, parallel or have no intersection.
- `algorithmia-floyd` reads a 4×4 weight matrix, using 999 for "no edge", and
  prints the shortest distances.
- `algorithmia-maxflow` reads a 6×6 capacity matrix and prints the maximum flow
  from vertex 0 to vertex 5.

For example:

```
echo "4  0 0  4 0  4 4  0 4" | algorithmia-hull
```

## What is not included

The matrix sizes of `algorithmia-floyd` (4×4) and `algorithmia-maxflow`
(6×6) and the segment count of `algorithmia-segments` (six) are fixed; use the
library functions for other sizes. Activity selection, merge sort, maximum
subarray, matrix-chain cost and string search are available only as library
functions, with no command of their own.