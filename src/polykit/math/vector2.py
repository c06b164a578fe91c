# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Vector2 module

Every helper returns a new vector, arguments are left untouched.
"""

from __future__ import annotations

__all__ = [
    "Vector2",
    "get_angle_cos",
    "get_angle_deg",
    "get_distance",
    "get_normalized",
    "get_perpendicular",
    "get_projection",
    "get_rotated",
    "vector_from_points",
]

from math import acos, degrees
from typing import TypeAlias

from pygame.math import Vector2

from ..exceptions import DegenerateVectorError

_FPoint: TypeAlias = tuple[float, float]


def vector_from_points(origin: _FPoint | Vector2, target: _FPoint | Vector2) -> Vector2:
    return Vector2(target[0] - origin[0], target[1] - origin[1])


def get_normalized(vector: _FPoint | Vector2) -> Vector2:
    vector = Vector2(vector)
    magnitude: float = vector.length()
    if magnitude == 0:
        raise DegenerateVectorError("Cannot normalize a zero-length vector")
    return Vector2(vector.x / magnitude, vector.y / magnitude)


def get_perpendicular(vector: _FPoint | Vector2) -> Vector2:
    return Vector2(-vector[1], vector[0])


def get_rotated(vector: _FPoint | Vector2, angle: float) -> Vector2:
    """
    Rotate 'vector' clockwise by 'angle' degrees (in a y-up frame),
    i.e. (x*cos + y*sin, -x*sin + y*cos).
    """
    return Vector2(vector).rotate(-angle)


def get_projection(vector: _FPoint | Vector2, onto: _FPoint | Vector2) -> Vector2:
    onto = Vector2(onto)
    length_squared: float = onto.length_squared()
    if length_squared == 0:
        raise DegenerateVectorError("Cannot project onto a zero-length vector")
    return onto * (Vector2(vector).dot(onto) / length_squared)


def get_angle_cos(lhs: _FPoint | Vector2, rhs: _FPoint | Vector2) -> float:
    lhs = Vector2(lhs)
    rhs = Vector2(rhs)
    magnitudes: float = lhs.length() * rhs.length()
    if magnitudes == 0:
        raise DegenerateVectorError("Angle with a zero-length vector is undefined")
    return lhs.dot(rhs) / magnitudes


def get_angle_deg(lhs: _FPoint | Vector2, rhs: _FPoint | Vector2) -> float:
    """
    Unsigned angle between the two vectors, in [0, 180].
    """
    cos: float = min(max(get_angle_cos(lhs, rhs), -1.0), 1.0)
    return degrees(acos(cos))


def get_distance(lhs: _FPoint | Vector2, rhs: _FPoint | Vector2, *, naive: bool = False) -> float:
    """
    Euclidean distance between two points.

    With 'naive' set, returns the taxicab distance, which avoids the square root.
    """
    dx: float = lhs[0] - rhs[0]
    dy: float = lhs[1] - rhs[1]
    if naive:
        return abs(dx) + abs(dy)
    return Vector2(dx, dy).length()
