import random

import pytest

from planegeom.orientation import (
    Turn,
    TurnCounts,
    classify_turn,
    convex_hull,
    count_turns,
    orientation,
)


def _random_points(seed, count, spread=1000):
    rng = random.Random(seed)
    return [(rng.randint(-spread, spread), rng.randint(-spread, spread)) for _ in range(count)]


def test_orientation_sign_for_left_turn():
    assert orientation((0, 0), (1, 0), (1, 1)) > 0


def test_orientation_sign_for_right_turn():
    assert orientation((0, 0), (1, 0), (1, -1)) < 0


def test_orientation_zero_for_collinear():
    assert orientation((0, 0), (2, 2), (5, 5)) == 0


@pytest.mark.parametrize("seed", range(5))
def test_orientation_antisymmetric_and_cyclic(seed):
    a, b, c = _random_points(seed, 3)
    value = orientation(a, b, c)
    assert orientation(a, c, b) == -value
    assert orientation(b, c, a) == value
    assert orientation(c, a, b) == value


def test_classify_turn():
    assert classify_turn((0, 0), (1, 0), (1, 1)) is Turn.LEFT
    assert classify_turn((0, 0), (1, 0), (1, -1)) is Turn.RIGHT
    assert classify_turn((0, 0), (1, 0), (3, 0)) is Turn.TOUCH


def test_turn_values_match_output_words():
    assert classify_turn((0, 0), (1, 0), (1, 1)).value == "LEFT"
    assert classify_turn((0, 0), (1, 0), (1, -1)).value == "RIGHT"
    assert classify_turn((0, 0), (1, 0), (3, 0)).value == "TOUCH"


def test_count_turns_collinear_path():
    points = [(0, 0), (1, 0), (2, 0), (3, 0)]
    counts = count_turns(points)
    assert counts == TurnCounts(left=0, right=0, straight=0 + len(points) - 1)


@pytest.mark.parametrize("seed", range(5))
def test_count_turns_total_and_reversal(seed):
    points = _random_points(seed, 12)
    counts = count_turns(points)
    assert counts.left + counts.right + counts.straight == len(points) - 1

    square = [(0, 0), (1, 0), (1, 1), (0, 1)]
    ccw = count_turns(square)
    cw = count_turns(list(reversed(square)))
    assert ccw.left == cw.right
    assert ccw.right == cw.left


def test_count_turns_empty_raises():
    with pytest.raises(ValueError):
        count_turns([])


def test_convex_hull_worked_example():
    points = [(0, 0), (2, 0), (2, 2), (0, 2), (1, 0), (1, 1)]
    assert convex_hull(points) == [(0, 0), (2, 0), (2, 2), (0, 2)]


def test_convex_hull_single_point():
    assert convex_hull([(3, 4)]) == [(3, 4)]


def test_convex_hull_empty_raises():
    with pytest.raises(ValueError):
        convex_hull([])


@pytest.mark.parametrize("seed", range(6))
def test_convex_hull_contains_all_points(seed):
    points = _random_points(seed, 40)
    hull = convex_hull(points)
    assert hull[0] == min(points)
    assert set(hull) <= set(points)
    for a, b in zip(hull, hull[1:] + hull[:1]):
        for p in points:
            assert orientation(a, b, p) >= 0


@pytest.mark.parametrize("seed", range(3))
def test_convex_hull_ignores_input_order(seed):
    points = _random_points(seed, 30)
    shuffled = points[:]
    random.Random(seed + 100).shuffle(shuffled)
    assert convex_hull(points) == convex_hull(shuffled)