"""Travelling-salesman tours by nearest neighbour followed by 2-opt."""

from __future__ import annotations

import math
from typing import Sequence

Point = tuple[int, int]

_IMPROVEMENT = 1e-9
_FEW_POINTS = 200
_SEEDS_FOR_MANY = 10


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    dx = p1[0] - p2[0]
    dy = p1[1] - p2[1]
    return math.sqrt(dx * dx + dy * dy)


def tour_length(tour: Sequence[Point]) -> float:
    """Length of a closed tour that returns to its first point."""
    if not tour:
        return 0.0
    return sum(distance(a, b) for a, b in zip(tour, [*tour[1:], tour[0]]))


def two_opt(tour: Sequence[Point]) -> list[Point]:
    """Improve a closed tour by reversing segments until no 2-opt move helps."""
    t = list(tour)
    n = len(t)
    improved = True
    while improved:
        improved = False
        for i in range(n - 1):
            for j in range(i + 2, n):
                if i == 0 and j == n - 1:
                    continue
                following = t[(j + 1) % n]
                before = distance(t[i], t[i + 1]) + distance(t[j], following)
                after = distance(t[i], t[j]) + distance(t[i + 1], following)
                if after + _IMPROVEMENT < before:
                    t[i + 1 : j + 1] = reversed(t[i + 1 : j + 1])
                    improved = True
    return t


def nearest_neighbour_tour(points: Sequence[Point], start: int) -> list[Point]:
    """Greedy tour from points[start], always moving to the closest unvisited point."""
    if not 0 <= start < len(points):
        raise IndexError("start index out of range")
    unused = [i for i in range(len(points)) if i != start]
    tour = [points[start]]
    while unused:
        last = tour[-1]
        nearest = min(unused, key=lambda k: distance(last, points[k]))
        unused.remove(nearest)
        tour.append(points[nearest])
    return tour


def solve_tour(points: Sequence[Point]) -> list[Point]:
    """Best closed tour found, starting and ending at its lowest-leftmost point."""
    n = len(points)
    if n == 0:
        raise ValueError("a tour needs at least one point")
    tries = n if n <= _FEW_POINTS else _SEEDS_FOR_MANY

    best_length = math.inf
    best: list[Point] = []
    for seed in range(tries):
        tour = two_opt(nearest_neighbour_tour(points, seed))
        length = tour_length(tour)
        if length < best_length:
            best_length = length
            best = tour

    first = min(range(n), key=lambda i: best[i])
    rotated = best[first:] + best[:first]
    return [*rotated, rotated[0]]