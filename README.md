# planegeom

Small, dependency-free algorithms for geometry in the plane. Points are
`(x, y)` pairs of integers, and every routine works on plain tuples and
lists.

## What is included

| Module                  | What it does |
|-------------------------|--------------|
| `planegeom.orientation` | `orientation`, `classify_turn` (returns a `Turn`), `count_turns` along a closed path (returns a `TurnCounts`), `convex_hull` by Graham scan |
| `planegeom.polygon`     | `point_on_segment`, `segments_intersect`, `locate_point` (returns a `Location`), `is_monotone` along the x or y axis |
| `planegeom.segments`    | `FenwickTree` and `count_intersections` of horizontal and vertical segments by sweep line |
| `planegeom.tsp`         | `distance`, `tour_length`, `nearest_neighbour_tour`, `two_opt`, and `solve_tour` for a short closed tour |

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
from planegeom.orientation import orientation, classify_turn, convex_hull
from planegeom.polygon import locate_point, is_monotone

# The sign of the cross product tells which way the path turns.
orientation((0, 0), (1, 0), (1, 1))      # 1, a left turn
classify_turn((0, 0), (1, 0), (1, 1))    # Turn.LEFT

# Graham scan, counter-clockwise from the lowest-leftmost point;
# collinear points met by the scan are dropped.
convex_hull([(0, 0), (2, 0), (1, 1), (2, 2), (0, 2)])
# [(0, 0), (2, 0), (2, 2), (0, 2)]

# Where a point lies with respect to a simple polygon.
square = [(0, 0), (4, 0), (4, 4), (0, 4)]
locate_point(square, (2, 2))             # Location.INSIDE
locate_point(square, (4, 2))             # Location.BOUNDARY

# Monotonicity along x (axis 0) or y (axis 1).
is_monotone(square, 0)                   # True
```

Counting crossings of axis-parallel segments. A segment whose endpoints share
a y coordinate is horizontal; any other is taken as vertical at the x of its
first endpoint:

```python
from planegeom.segments import count_intersections

count_intersections([((0, 1), (4, 1)), ((2, 0), (2, 3))])   # 1
```

A closed tour through a set of points, found by nearest-neighbour starts
improved with 2-opt. The result begins and ends at its lowest-leftmost point:

```python
from planegeom.tsp import solve_tour, tour_length

tour = solve_tour([(0, 0), (3, 0), (3, 4), (0, 4)])
tour_length(tour[:-1])                   # length of the closed tour
```

Empty inputs where an answer is undefined (a hull, a tour, a polygon or a
path with no points) raise `ValueError`.

## What it does not do

The package is a library only: it installs no command and reads no input
files. It has no circumcircle or Delaunay edge tests and no half-plane
intersection routines; geometry here is limited to the modules listed above.