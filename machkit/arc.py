"""Step-by-step walking of circular arcs on an integer grid.

Coordinates are fixed-point integers; ``unit`` is the number of decimal
places, so a coordinate of 1234 with unit 2 means 12.34. The walk moves
one grid step at a time along the circle, choosing the octant rule from
the current position and the sign of the implicit circle function.
"""

from __future__ import annotations

import math
from enum import IntEnum

from machkit.xy import XY

__all__ = ["Turn", "implicit_function", "next_step", "step_count", "real_end"]

_NO_DISTANCE = 0x7FFFFFFF


class Turn(IntEnum):
    """Direction in which an arc is walked."""

    CLOCKWISE = 0
    COUNTERCLOCKWISE = 1


def implicit_function(x: float, y: float, radius: float, unit: int) -> float:
    """Return ``y² + x² - r²`` computed in real units, scaled back by the unit.

    Negative inside the circle, zero on it, positive outside.
    """
    scale = 10 ** unit
    rx = x / scale
    ry = y / scale
    rr = radius / scale
    return (ry * ry + rx * rx - rr * rr) * scale


def _check_precisions(precision_x: int, precision_y: int) -> None:
    if precision_x < 0 or precision_y < 0:
        raise ValueError("precisions must be non-negative")


def _radius(offset: XY, unit: int) -> int:
    scale = 10 ** unit
    rx = offset.x / scale
    ry = offset.y / scale
    return int(math.sqrt(rx * rx + ry * ry) * scale)


def next_step(
    point: XY,
    radius: int,
    precision_x: int,
    precision_y: int,
    unit: int,
    turn: Turn,
) -> XY:
    """Return the next grid point on the circle around the origin.

    ``point`` is relative to the circle's centre. A point that matches no
    octant (the origin) is returned unchanged.
    """
    _check_precisions(precision_x, precision_y)
    x, y = point.x, point.y
    half_x = precision_x / 2
    half_y = precision_y / 2

    def f(a: float, b: float) -> float:
        return implicit_function(a, b, radius, unit)

    if turn == Turn.CLOCKWISE:
        if y > 0 and x >= 0 and x < y:
            x += precision_x
            if f(x, y - half_y) >= 0:
                y -= precision_y
        elif y > 0 and x < 0 and abs(x) <= y:
            x += precision_x
            if f(x, y + half_y) <= 0:
                y += precision_y
        elif y < 0 and x <= 0 and abs(x) < abs(y):
            x -= precision_x
            if f(x, y + half_y) >= 0:
                y += precision_y
        elif y < 0 and x > 0 and x <= abs(y):
            x -= precision_x
            if f(x, y - half_y) <= 0:
                y -= precision_y
        elif y > 0 and x > 0 and x >= y:
            y -= precision_y
            if f(x + half_x, y) <= 0:
                x += precision_x
        elif y <= 0 and x > 0 and x > abs(y):
            y -= precision_y
            if f(x - half_x, y) >= 0:
                x -= precision_x
        elif y >= 0 and x < 0 and abs(x) > y:
            y += precision_y
            if f(x + half_x, y) >= 0:
                x += precision_x
        elif y < 0 and x < 0 and abs(x) >= abs(y):
            y += precision_y
            if f(x - half_x, y) <= 0:
                x -= precision_x
    else:
        if y > 0 and x > 0 and x <= y:
            x -= precision_x
            if f(x, y + half_y) <= 0:
                y += precision_y
        elif y > 0 and x <= 0 and abs(x) < y:
            x -= precision_x
            if f(x, y - half_y) >= 0:
                y -= precision_y
        elif y < 0 and x < 0 and abs(x) <= abs(y):
            x += precision_x
            if f(x, y - half_y) <= 0:
                y -= precision_y
        elif y < 0 and x >= 0 and x < abs(y):
            x += precision_x
            if f(x, y + half_y) >= 0:
                y += precision_y
        elif y >= 0 and x > 0 and x > y:
            y += precision_y
            if f(x - half_x, y) >= 0:
                x -= precision_x
        elif y < 0 and x > 0 and x >= abs(y):
            y += precision_y
            if f(x + half_x, y) <= 0:
                x += precision_x
        elif y > 0 and x < 0 and abs(x) >= y:
            y -= precision_y
            if f(x - half_x, y) <= 0:
                x -= precision_x
        elif y <= 0 and x < 0 and abs(x) > abs(y):
            y -= precision_y
            if f(x + half_x, y) >= 0:
                x += precision_x

    return XY(x, y)


def step_count(
    end: XY,
    center: XY,
    start: XY,
    precision_x: int,
    precision_y: int,
    unit: int,
    turn: Turn,
) -> int:
    """Count the grid steps from ``start`` to ``end`` around ``center``.

    Returns 0 when ``end`` equals ``start`` or is never reached before the
    walk comes back to ``start``.
    """
    _check_precisions(precision_x, precision_y)
    begin = start - center
    target = end - center
    radius = _radius(begin, unit)

    current = begin
    steps = 0
    while current != target:
        current = next_step(current, radius, precision_x, precision_y, unit, turn)
        steps += 1
        if current == begin:
            return 0
    return steps


def real_end(
    end: XY,
    center: XY,
    start: XY,
    precision_x: int,
    precision_y: int,
    unit: int,
    turn: Turn,
) -> XY:
    """Return the grid point of the full circle walk that lies nearest ``end``.

    The walk starts after ``start`` and ends back on it; the earliest point
    at the smallest distance wins.
    """
    _check_precisions(precision_x, precision_y)
    scale = 10 ** unit
    begin = start - center
    target = end - center
    radius = _radius(begin, unit)

    best = begin
    best_distance: float = _NO_DISTANCE
    current = begin
    while True:
        current = next_step(current, radius, precision_x, precision_y, unit, turn)
        dx = (target.x - current.x) / scale
        dy = (target.y - current.y) / scale
        distance = dx * dx + dy * dy
        if distance < best_distance:
            best = current
            best_distance = distance
        if current == begin:
            break

    return best + center