import pytest

from machkit.arc import Turn, implicit_function, next_step, real_end, step_count
from machkit.xy import XY

RADIUS = 10
CENTER = XY(100, 50)
START = XY(110, 50)


def _walk(begin, turn, radius=RADIUS, limit=1000):
    """Points of a full walk from ``begin`` until it comes back to it."""
    points = []
    current = begin
    for _ in range(limit):
        current = next_step(current, radius, 1, 1, 0, turn)
        points.append(current)
        if current == begin:
            return points
    raise AssertionError("walk did not return to its start")


def test_implicit_function_zero_on_circle():
    assert implicit_function(3, 4, 5, 0) == 0


def test_implicit_function_sign_inside_and_outside():
    assert implicit_function(1, 1, 5, 0) < 0
    assert implicit_function(6, 0, 5, 0) > 0


@pytest.mark.parametrize("x,y,r", [(1, 0, 0), (3, 7, 2), (-4, 2, 6)])
def test_implicit_function_unit_scaling(x, y, r):
    scaled = implicit_function(10 * x, 10 * y, 10 * r, 1)
    assert scaled == pytest.approx(10 * implicit_function(x, y, r, 0))


def test_first_step_directions():
    begin = XY(RADIUS, 0)
    cw = next_step(begin, RADIUS, 1, 1, 0, Turn.CLOCKWISE)
    ccw = next_step(begin, RADIUS, 1, 1, 0, Turn.COUNTERCLOCKWISE)
    assert cw.x == RADIUS and cw.y < 0
    assert ccw.x == RADIUS and ccw.y > 0


def test_origin_does_not_move():
    origin = XY(0, 0)
    assert next_step(origin, RADIUS, 1, 1, 0, Turn.CLOCKWISE) == origin
    assert next_step(origin, RADIUS, 1, 1, 0, Turn.COUNTERCLOCKWISE) == origin


@pytest.mark.parametrize("turn", list(Turn))
def test_walk_closes_and_stays_near_circle(turn):
    points = _walk(XY(RADIUS, 0), turn)
    assert points[-1] == XY(RADIUS, 0)
    previous = XY(RADIUS, 0)
    for point in points:
        assert abs(point.x - previous.x) <= 1
        assert abs(point.y - previous.y) <= 1
        assert point != previous
        assert abs(point.x**2 + point.y**2 - RADIUS**2) < 2 * RADIUS
        previous = point
    assert len(set(points)) == len(points)


@pytest.mark.parametrize("turn", list(Turn))
@pytest.mark.parametrize("k", [1, 5, 12])
def test_step_count_matches_walk(turn, k):
    points = _walk(START - CENTER, turn)
    end = points[k - 1] + CENTER
    assert step_count(end, CENTER, START, 1, 1, 0, turn) == k


def test_step_count_same_point_is_zero():
    assert step_count(START, CENTER, START, 1, 1, 0, Turn.CLOCKWISE) == 0


def test_step_count_unreachable_end_is_zero():
    assert step_count(CENTER, CENTER, START, 1, 1, 0, Turn.CLOCKWISE) == 0


@pytest.mark.parametrize("turn", list(Turn))
def test_real_end_of_point_on_path(turn):
    points = _walk(START - CENTER, turn)
    end = points[7] + CENTER
    assert real_end(end, CENTER, START, 1, 1, 0, turn) == end


def test_real_end_outside_returns_start():
    end = CENTER + XY(2 * RADIUS, 0)
    assert real_end(end, CENTER, START, 1, 1, 0, Turn.CLOCKWISE) == START


@pytest.mark.parametrize("turn", list(Turn))
def test_real_end_is_nearest_path_point(turn):
    target = XY(7, 8)
    points = _walk(START - CENTER, turn)
    result = real_end(target + CENTER, CENTER, START, 1, 1, 0, turn) - CENTER
    assert result in points

    def dist(p):
        return (target.x - p.x) ** 2 + (target.y - p.y) ** 2

    assert all(dist(result) <= dist(p) for p in points)


def test_real_end_degenerate_start_at_center():
    assert real_end(START, CENTER, CENTER, 1, 1, 0, Turn.CLOCKWISE) == CENTER


def test_negative_precision_rejected():
    with pytest.raises(ValueError):
        next_step(XY(RADIUS, 0), RADIUS, -1, 1, 0, Turn.CLOCKWISE)
    with pytest.raises(ValueError):
        step_count(START, CENTER, START, 1, -1, 0, Turn.CLOCKWISE)


def test_opposite_turns_walk_the_same_circle_in_reverse():
    clockwise = _walk(START - CENTER, Turn.CLOCKWISE)
    counterclockwise = _walk(START - CENTER, Turn.COUNTERCLOCKWISE)
    assert set(clockwise) == set(counterclockwise)
    assert step_count(
        clockwise[0] + CENTER, CENTER, START, 1, 1, 0, Turn.COUNTERCLOCKWISE
    ) == len(counterclockwise) - 1