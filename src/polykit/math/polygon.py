# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Polygon module"""

from __future__ import annotations

__all__ = ["Polygon", "contains", "project"]

import warnings
from collections.abc import Iterable, Iterator, Sequence
from math import isclose, tau
from typing import TYPE_CHECKING, Any, Final, TypeAlias, overload

from ..exceptions import InvalidPolygonError
from ..system.validation import valid_float, valid_point, valid_sequence
from ..warnings import _PACKAGE_PREFIX, PolykitGeometryWarning
from .angle import subtended_angle
from .area import compute_rect_from_vertices, get_vertices_center, rotate_points
from .interval import Interval
from .vector2 import Vector2

if TYPE_CHECKING:
    from .collision import CollisionResult

_FPoint: TypeAlias = tuple[float, float]

CONTAINS_EPSILON: Final[float] = 1e-6

_valid_vertices = valid_sequence(validator=valid_point)


class Polygon:
    """
    Immutable ordered sequence of vertices.

    The vertices order defines the edges: edge i goes from vertex i to vertex (i + 1) % n.
    Vectors given to or returned by a Polygon are always copies.
    """

    __slots__ = ("__vertices", "__hash")

    PointList: TypeAlias = Iterable[Vector2] | Iterable[tuple[float, float]]

    def __init__(self, vertices: PointList = ()) -> None:
        self.__vertices: tuple[Vector2, ...] = tuple(_valid_vertices(vertices))
        self.__hash: int | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(f'({v.x}, {v.y})' for v in self.__vertices)}])"

    def __len__(self) -> int:
        return len(self.__vertices)

    def __iter__(self) -> Iterator[Vector2]:
        return (Vector2(v) for v in self.__vertices)

    def __getitem__(self, index: int, /) -> Vector2:
        return Vector2(self.__vertices[index])

    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self.__coordinates() == other.__coordinates()

    def __hash__(self) -> int:
        if (h := self.__hash) is None:
            self.__hash = h = hash(self.__coordinates())
        return h

    def __reduce__(self) -> str | tuple[Any, ...]:
        return type(self), (self.__coordinates(),)

    def __coordinates(self) -> tuple[_FPoint, ...]:
        # Vector2.__eq__ compares with a tolerance
        return tuple((v.x, v.y) for v in self.__vertices)

    @property
    def vertices(self) -> tuple[Vector2, ...]:
        return tuple(Vector2(v) for v in self.__vertices)

    @property
    def center(self) -> Vector2:
        if not self.__vertices:
            raise InvalidPolygonError("An empty polygon has no center", 0)
        return get_vertices_center(self.__vertices)

    def edges(self) -> Iterator[Vector2]:
        vertices = self.__vertices
        count = len(vertices)
        for index, vertex in enumerate(vertices):
            yield vertices[(index + 1) % count] - vertex

    def get_bounding_rect(self) -> tuple[float, float, float, float]:
        return compute_rect_from_vertices(self.__vertices)

    def project(self, axis: _FPoint | Vector2) -> Interval:
        """
        Returns the interval covered by this polygon projected onto 'axis'.

        'axis' is expected to be a unit vector, otherwise the bounds are scaled by its length.
        """
        vertices = self.__vertices
        if not vertices:
            raise InvalidPolygonError("Cannot project an empty polygon", 0)
        axis = valid_point(axis)

        lower = upper = axis.dot(vertices[0])
        for vertex in vertices[1:]:
            d = axis.dot(vertex)
            if d < lower:
                lower = d
            elif d > upper:
                upper = d
        return Interval(lower, upper)

    def contains(self, point: _FPoint | Vector2, *, epsilon: float = CONTAINS_EPSILON) -> bool:
        """
        Winding angle test: the angles subtended by each edge at 'point' sum
        to +/- 2*pi if the point is inside the polygon, and to about 0 outside.
        """
        vertices = self.__vertices
        if len(vertices) < 2:
            raise InvalidPolygonError("A polygon needs at least 2 vertices to contain a point", len(vertices))
        epsilon = valid_float(value=epsilon, min_value=0)
        point = valid_point(point)

        total_angle: float = subtended_angle(vertices[-1], point, vertices[0])
        for index in range(len(vertices) - 1):
            total_angle += subtended_angle(vertices[index], point, vertices[index + 1])

        inside: bool = abs(total_angle) > epsilon
        if inside and not isclose(abs(total_angle), tau, abs_tol=epsilon):
            warnings.warn(
                f"Total winding angle is {total_angle:.6f} rad, the point lies on an edge or the polygon is self-intersecting",
                category=PolykitGeometryWarning,
                skip_file_prefixes=(_PACKAGE_PREFIX,),
            )
        return inside

    def collide(self, other: Polygon | None, velocity: _FPoint | Vector2 | None = None) -> CollisionResult:
        from .collision import collision

        return collision(self, other, velocity)

    @overload
    def translated(self, offset: _FPoint | Vector2, /) -> Polygon: ...

    @overload
    def translated(self, x: float, y: float, /) -> Polygon: ...

    def translated(self, *args: Any) -> Polygon:
        match args:
            case (offset,):
                offset = valid_point(offset)
            case (x, y):
                offset = valid_point((x, y))
            case _:
                raise TypeError(f"translated() takes 1 or 2 positional arguments but {len(args)} were given")
        return Polygon(v + offset for v in self.__vertices)

    def scaled(self, pivot: _FPoint | Vector2, factor: float) -> Polygon:
        pivot = valid_point(pivot)
        factor = valid_float(value=factor)
        return Polygon(pivot + (v - pivot) * factor for v in self.__vertices)

    def reflected(self, *, x: bool = False, y: bool = False) -> Polygon:
        """
        Negates the x coordinates (if 'x' is set) and/or the y coordinates (if 'y' is set).
        """
        sx: float = -1 if x else 1
        sy: float = -1 if y else 1
        return Polygon((v.x * sx, v.y * sy) for v in self.__vertices)

    def rotated(self, angle: float, pivot: _FPoint | Vector2 | None = None) -> Polygon:
        """
        Clockwise rotation by 'angle' degrees around 'pivot' (the polygon center by default).
        """
        return Polygon(rotate_points(self.__vertices, angle, pivot))


def project(polygon: Polygon | Sequence[_FPoint] | Sequence[Vector2], axis: _FPoint | Vector2) -> Interval:
    if not isinstance(polygon, Polygon):
        polygon = Polygon(polygon)
    return polygon.project(axis)


def contains(
    polygon: Polygon | Sequence[_FPoint] | Sequence[Vector2],
    point: _FPoint | Vector2,
    *,
    epsilon: float = CONTAINS_EPSILON,
) -> bool:
    if not isinstance(polygon, Polygon):
        polygon = Polygon(polygon)
    return polygon.contains(point, epsilon=epsilon)
