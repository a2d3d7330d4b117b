"""Orientation predicates, turn counting and convex hulls of integer points."""

from __future__ import annotations

from enum import Enum
from functools import cmp_to_key
from typing import Iterable, NamedTuple, Sequence

Point = tuple[int, int]


class Turn(Enum):
    """Direction of the turn made at the middle of three points."""

    LEFT = "LEFT"
    RIGHT = "RIGHT"
    TOUCH = "TOUCH"


class TurnCounts(NamedTuple):
    """How many vertices of a closed path turn left, right or go straight."""

    left: int
    right: int
    straight: int


def orientation(p1: Point, p2: Point, p3: Point) -> int:
    """Cross product of (p2 - p1) and (p3 - p2); positive for a left turn."""
    return (p2[0] - p1[0]) * (p3[1] - p2[1]) - (p2[1] - p1[1]) * (p3[0] - p2[0])


def classify_turn(p1: Point, p2: Point, p3: Point) -> Turn:
    """Say whether going p1 -> p2 -> p3 turns left, right or stays on a line."""
    value = orientation(p1, p2, p3)
    if value == 0:
        return Turn.TOUCH
    return Turn.LEFT if value > 0 else Turn.RIGHT


def count_turns(points: Sequence[Point]) -> TurnCounts:
    """Count left, right and straight turns along a closed path.

    Every vertex except the first is examined by the orientation of its
    neighbours relative to it, the path wrapping back to the first point.
    """
    if not points:
        raise ValueError("a path needs at least one point")
    closed = [*points, points[0]]
    left = right = straight = 0
    for before, here, after in zip(closed, closed[1:], closed[2:]):
        value = orientation(before, after, here)
        if value == 0:
            straight += 1
        elif value < 0:
            left += 1
        else:
            right += 1
    return TurnCounts(left, right, straight)


def convex_hull(points: Iterable[Point]) -> list[Point]:
    """Convex hull by Graham scan, counter-clockwise from the lowest-leftmost point.

    Collinear points are dropped where the scan meets them.
    """
    ordered = sorted(tuple(p) for p in points)
    if not ordered:
        raise ValueError("the convex hull of no points is undefined")
    start = ordered[0]

    def by_angle(p1: Point, p2: Point) -> int:
        value = orientation(start, p1, p2)
        if value != 0:
            return -1 if value > 0 else 1
        d1 = (p1[0] - start[0]) ** 2 + (p1[1] - start[1]) ** 2
        d2 = (p2[0] - start[0]) ** 2 + (p2[1] - start[1]) ** 2
        return (d1 > d2) - (d1 < d2)

    rest = sorted(ordered[1:], key=cmp_to_key(by_angle))
    if not rest:
        return [start]

    stack = [start, rest[0]]
    for point in rest[1:]:
        while len(stack) >= 2 and orientation(stack[-2], stack[-1], point) <= 0:
            stack.pop()
        stack.append(point)
    return stack