# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Separating Axis Theorem collision module"""

from __future__ import annotations

__all__ = ["CollisionResult", "collision"]

import warnings
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from math import inf
from typing import TypeAlias

from ..exceptions import DegenerateVectorError, InvalidPolygonError
from ..system.validation import valid_point
from ..warnings import _PACKAGE_PREFIX, PolykitGeometryWarning
from .interval import interval_distance
from .polygon import Polygon
from .vector2 import Vector2, get_normalized, get_perpendicular

_FPoint: TypeAlias = tuple[float, float]


@dataclass(frozen=True, slots=True)
class CollisionResult:
    intersects: bool = False
    will_intersect: bool = False
    # Translation to apply to the first polygon to push the polygons apart
    minimum_translation_vector: Vector2 = field(default_factory=lambda: Vector2(0, 0))

    # Vector2 is mutable and unhashable
    __hash__ = None  # type: ignore[assignment]


def _separating_axes(polygon: Polygon) -> Iterator[Vector2]:
    found: bool = False
    for edge in polygon.edges():
        if edge.length_squared() == 0:
            continue
        found = True
        yield get_normalized(get_perpendicular(edge))
    if not found:
        raise DegenerateVectorError(f"All the edges of {polygon!r} have a zero length")


def _as_polygon(polygon: Polygon | Sequence[_FPoint] | Sequence[Vector2]) -> Polygon:
    if not isinstance(polygon, Polygon):
        polygon = Polygon(polygon)
    if len(polygon) < 2:
        raise InvalidPolygonError("A polygon needs at least 2 vertices to be tested for collision", len(polygon))
    if len(polygon) < 3:
        warnings.warn(
            f"{polygon!r} is a segment, not a polygon",
            category=PolykitGeometryWarning,
            skip_file_prefixes=(_PACKAGE_PREFIX,),
        )
    return polygon


def collision(
    polygon_a: Polygon | Sequence[_FPoint] | Sequence[Vector2] | None,
    polygon_b: Polygon | Sequence[_FPoint] | Sequence[Vector2] | None,
    velocity: _FPoint | Vector2 | None = None,
) -> CollisionResult:
    """
    Separating Axis Theorem test between two convex polygons.

    Every edge normal of both polygons is a candidate axis. The polygons intersect
    unless their projections are separated on at least one of them.

    If 'velocity' is given, 'polygon_a' is swept along it to compute 'will_intersect';
    otherwise 'will_intersect' is the same as 'intersects'.

    The minimum translation vector is the smallest push (along the candidate axes)
    that moves 'polygon_a' out of 'polygon_b'. It is the zero vector when the polygons
    will not intersect.
    """
    if polygon_a is None or polygon_b is None:
        return CollisionResult()

    polygon_a = _as_polygon(polygon_a)
    polygon_b = _as_polygon(polygon_b)
    if velocity is not None:
        velocity = valid_point(velocity)

    intersects: bool = True
    will_intersect: bool = True
    min_interval_distance: float = inf
    translation_axis = Vector2(0, 0)
    centers_offset: Vector2 = polygon_a.center - polygon_b.center

    for axis in (*_separating_axes(polygon_a), *_separating_axes(polygon_b)):
        interval_a = polygon_a.project(axis)
        interval_b = polygon_b.project(axis)

        if interval_distance(interval_a, interval_b) > 0:
            intersects = False

        if velocity is not None:
            interval_a = interval_a.extended(axis.dot(velocity))
            distance = interval_distance(interval_a, interval_b)
            if distance > 0:
                will_intersect = False
        else:
            distance = interval_distance(interval_a, interval_b)
            will_intersect = intersects

        if not intersects and not will_intersect:
            break

        distance = abs(distance)
        if distance < min_interval_distance:
            min_interval_distance = distance
            translation_axis = axis if centers_offset.dot(axis) >= 0 else -axis

    if not will_intersect:
        return CollisionResult(intersects=intersects, will_intersect=False)

    return CollisionResult(
        intersects=intersects,
        will_intersect=True,
        minimum_translation_vector=translation_axis * min_interval_distance,
    )
