# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Vertices area utils module"""

from __future__ import annotations

__all__ = [
    "compute_rect_from_vertices",
    "compute_size_from_vertices",
    "get_point_on_circle",
    "get_point_toward_target",
    "get_vertices_center",
    "rotate_points",
]

from collections.abc import Sequence
from math import cos, sin

from .vector2 import Vector2, get_normalized, get_rotated

type _FPoint = tuple[float, float]


def get_vertices_center(vertices: Sequence[_FPoint] | Sequence[Vector2]) -> Vector2:
    """
    Arithmetic mean of the vertices.
    """
    if not vertices:
        return Vector2(0, 0)
    total_x: float = 0
    total_y: float = 0
    for point in vertices:
        total_x += point[0]
        total_y += point[1]
    count = len(vertices)
    return Vector2(total_x / count, total_y / count)


def compute_rect_from_vertices(vertices: Sequence[_FPoint] | Sequence[Vector2]) -> tuple[float, float, float, float]:
    """
    Returns the bounding box of the vertices as (left, top, width, height),
    where 'top' is the smallest y coordinate.
    """
    if not vertices:
        return 0, 0, 0, 0

    left = right = vertices[0][0]
    top = bottom = vertices[0][1]

    for point in vertices:
        left = point[0] if point[0] < left else left
        right = point[0] if point[0] > right else right
        top = point[1] if point[1] < top else top
        bottom = point[1] if point[1] > bottom else bottom

    return left, top, right - left, bottom - top


def compute_size_from_vertices(vertices: Sequence[_FPoint] | Sequence[Vector2]) -> tuple[float, float]:
    _, _, w, h = compute_rect_from_vertices(vertices)

    return w, h


def rotate_points(
    points: Sequence[_FPoint] | Sequence[Vector2],
    angle: float,
    pivot: _FPoint | Vector2 | None = None,
) -> tuple[Vector2, ...]:
    """
    Rotate every point clockwise by 'angle' degrees around 'pivot'
    (the vertices center by default).
    """
    if not points:
        return ()
    if pivot is None:
        pivot = get_vertices_center(points)
    else:
        pivot = Vector2(pivot)
    return tuple(pivot + get_rotated(Vector2(point) - pivot, angle) for point in points)


def get_point_on_circle(center: _FPoint | Vector2, radius: float, angle: float) -> Vector2:
    """
    Point of the circle at 'angle' radians, counterclockwise from the x axis.
    """
    return Vector2(center[0] + radius * cos(angle), center[1] + radius * sin(angle))


def get_point_toward_target(center: _FPoint | Vector2, radius: float, target: _FPoint | Vector2) -> Vector2:
    """
    Point of the circle lying on the ray going from 'center' to 'target'.

    Raises DegenerateVectorError if 'target' is the center itself.
    """
    center = Vector2(center)
    return center + get_normalized(Vector2(target) - center) * radius
