"""Point location in polygons, segment intersection and monotonicity tests."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Sequence

from planegeom.orientation import orientation

Point = tuple[int, int]


class Location(Enum):
    """Where a point lies relative to a polygon."""

    INSIDE = "INSIDE"
    OUTSIDE = "OUTSIDE"
    BOUNDARY = "BOUNDARY"


def point_on_segment(a: Point, b: Point, p: Point) -> bool:
    """True if p lies on the closed segment from a to b."""
    return (
        orientation(a, b, p) == 0
        and min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
        and min(a[1], b[1]) <= p[1] <= max(a[1], b[1])
    )


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """Whether segment p1-p2 meets segment p3-p4, touching cases included."""
    d1 = orientation(p1, p2, p3) > 0
    d2 = orientation(p1, p2, p4) > 0
    d3 = orientation(p3, p4, p1) > 0
    d4 = orientation(p3, p4, p2) > 0
    if d1 != d2 and d3 != d4:
        return True
    return (
        (point_on_segment(p1, p2, p3) and not d1)
        or (point_on_segment(p1, p3, p4) and not d2)
        or (point_on_segment(p3, p4, p1) and not d3)
        or (point_on_segment(p3, p4, p2) and not d4)
    )


def _edges(polygon: Sequence[Point]) -> Iterator[tuple[Point, Point]]:
    return zip(polygon, [*polygon[1:], polygon[0]])


def locate_point(polygon: Sequence[Point], point: Point) -> Location:
    """Locate a point against a simple polygon by ray casting."""
    if not polygon:
        raise ValueError("a polygon needs at least one vertex")
    if any(point_on_segment(a, b, point) for a, b in _edges(polygon)):
        return Location.BOUNDARY

    far = (max(x for x, _ in polygon) + 1, point[1] + 1)
    crossings = sum(segments_intersect(a, b, point, far) for a, b in _edges(polygon))
    return Location.INSIDE if crossings % 2 else Location.OUTSIDE


def _non_decreasing(values: Sequence[int]) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))


def is_monotone(points: Sequence[Point], axis: int) -> bool:
    """Whether a polygon is monotone along axis 0 (x) or 1 (y).

    Both chains from the extreme-minimum vertex towards the extreme-maximum
    vertex must be non-decreasing in the chosen coordinate.
    """
    if axis not in (0, 1):
        raise ValueError("axis must be 0 or 1")
    n = len(points)
    if n == 0:
        return True
    coords = [p[axis] for p in points]
    low = min(range(n), key=coords.__getitem__)
    high = max(range(n), key=lambda i: (coords[i], -i))

    def chain(step: int) -> list[int]:
        values = []
        i = low
        while i != high:
            values.append(coords[i])
            i = (i + step) % n
        return values

    return _non_decreasing(chain(1)) and _non_decreasing(chain(-1))