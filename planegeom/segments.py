"""Counting crossings between horizontal and vertical segments by sweep line."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable

Point = tuple[int, int]
Segment = tuple[Point, Point]

_OPEN, _QUERY, _CLOSE = 0, 1, 2


class FenwickTree:
    """Binary indexed tree over positions 1..size holding integer counts."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._bits = [0] * (size + 1)

    def update(self, index: int, value: int) -> None:
        """Add value at position index."""
        if index < 1:
            raise ValueError("positions start at 1")
        while index < len(self._bits):
            self._bits[index] += value
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Sum of positions 1..index."""
        total = 0
        while index > 0:
            total += self._bits[index]
            index -= index & -index
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Sum of positions left..right, zero for an empty range."""
        if left > right:
            return 0
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


def count_intersections(segments: Iterable[Segment]) -> int:
    """Count crossings between horizontal and vertical segments.

    A segment whose endpoints share a y coordinate is horizontal; any other
    is taken as vertical at the x of its first endpoint. A horizontal segment
    counts against a vertical one when its x range contains the vertical's x
    (ends included) and its y lies strictly between the vertical's ends.
    """
    events: list[tuple[int, int, int, int]] = []
    ys: set[int] = set()
    for (x1, y1), (x2, y2) in segments:
        if y1 == y2:
            lo, hi = sorted((x1, x2))
            events.append((lo, _OPEN, y1, y1))
            events.append((hi, _CLOSE, y1, y1))
            ys.add(y1)
        else:
            lo, hi = sorted((y1, y2))
            events.append((x1, _QUERY, lo, hi))
            ys.update((lo, hi))

    levels = sorted(ys)

    def rank(y: int) -> int:
        return bisect_left(levels, y) + 1

    events.sort(key=lambda event: (event[0], event[1]))
    tree = FenwickTree(len(levels))
    total = 0
    for _, kind, low, high in events:
        if kind == _OPEN:
            tree.update(rank(high), 1)
        elif kind == _CLOSE:
            tree.update(rank(high), -1)
        else:
            total += tree.range_sum(rank(low) + 1, rank(high) - 1)
    return total