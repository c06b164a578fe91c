# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Line and segment intersection utils module

Segment test source from:
- https://www.geeksforgeeks.org/check-if-two-given-line-segments-intersect/
"""

from __future__ import annotations

__all__ = ["line_intersection", "on_segment", "orientation", "segments_intersect"]

from typing import Literal, TypeAlias

from .vector2 import Vector2

_FPoint: TypeAlias = tuple[float, float]


def on_segment(p: _FPoint | Vector2, q: _FPoint | Vector2, r: _FPoint | Vector2) -> bool:
    """
    Given three collinear points p, q, r,
    checks if q lies on segment 'pr'
    """

    return min(p[0], r[0]) <= q[0] <= max(p[0], r[0]) and min(p[1], r[1]) <= q[1] <= max(p[1], r[1])


def orientation(p: _FPoint | Vector2, q: _FPoint | Vector2, r: _FPoint | Vector2) -> Literal[0, 1, 2]:
    """
    Orientation of the ordered triplet (p, q, r), in a y-up frame:
    0 --> collinear
    1 --> clockwise
    2 --> counterclockwise
    """

    val = ((q[1] - p[1]) * (r[0] - q[0])) - ((q[0] - p[0]) * (r[1] - q[1]))

    if val == 0:
        return 0
    if val > 0:
        return 1
    return 2


def segments_intersect(p1: _FPoint | Vector2, q1: _FPoint | Vector2, p2: _FPoint | Vector2, q2: _FPoint | Vector2) -> bool:
    o1 = orientation(p1, q1, p2)
    o2 = orientation(p1, q1, q2)
    o3 = orientation(p2, q2, p1)
    o4 = orientation(p2, q2, q1)

    if o1 != o2 and o3 != o4:
        return True

    # Collinear cases: an end point of one segment lies on the other
    return (
        (o1 == 0 and on_segment(p1, p2, q1))
        or (o2 == 0 and on_segment(p1, q2, q1))
        or (o3 == 0 and on_segment(p2, p1, q2))
        or (o4 == 0 and on_segment(p2, q1, q2))
    )


def line_intersection(
    a1: _FPoint | Vector2,
    b1: _FPoint | Vector2,
    a2: _FPoint | Vector2,
    b2: _FPoint | Vector2,
) -> Vector2 | None:
    """
    Intersection point of the infinite lines (a1, b1) and (a2, b2).

    Returns None if the lines are parallel (or coincident).
    """
    # Each line as A*x + B*y = C
    A1 = b1[1] - a1[1]
    B1 = a1[0] - b1[0]
    C1 = A1 * a1[0] + B1 * a1[1]

    A2 = b2[1] - a2[1]
    B2 = a2[0] - b2[0]
    C2 = A2 * a2[0] + B2 * a2[1]

    delta = A1 * B2 - A2 * B1
    if delta == 0:
        return None

    return Vector2((B2 * C1 - B1 * C2) / delta, (A1 * C2 - A2 * C1) / delta)
