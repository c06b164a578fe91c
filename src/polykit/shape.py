# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Transformable shape module"""

from __future__ import annotations

__all__ = ["AngledVector", "Shape"]

from collections.abc import Iterable
from typing import Any, ClassVar, TypeAlias

from .math.angle import DEG_CIRCLE, clamp_angle
from .math.matrix import Matrix
from .math.polygon import Polygon
from .math.vector2 import Vector2, get_perpendicular, get_rotated
from .system.validation import valid_float, valid_point

_FPoint: TypeAlias = tuple[float, float]


class Shape:
    """
    Immutable shape: local vertices placed at 'origin' and rotated by 'rotation' degrees.

    The derived state (front/right vectors and transformed vertices) is computed once
    per instance. Use with_rotation() or moved_to() to get an updated shape.
    """

    __slots__ = ("__local", "__origin", "__rotation", "__front_reference", "__front", "__right", "__transformed")

    DEFAULT_FRONT: ClassVar[_FPoint] = (0, -10)

    def __init__(
        self,
        vertices: Matrix | Iterable[_FPoint] | Iterable[Vector2],
        origin: _FPoint | Vector2 = (0, 0),
        rotation: float = 0,
        front: _FPoint | Vector2 = DEFAULT_FRONT,
    ) -> None:
        if not isinstance(vertices, Matrix):
            vertices = Matrix.from_vertices(vertices)
        self.__local: Matrix = vertices
        self.__origin: Vector2 = valid_point(origin)
        self.__front_reference: Vector2 = valid_point(front)
        self.__rotation: float = clamp_angle(valid_float(value=rotation))

        # Vertices and 'front' turn counterclockwise with the rotation angle
        self.__front: Vector2 = get_rotated(self.__front_reference, -self.__rotation)
        self.__right: Vector2 = get_perpendicular(self.__front)
        self.__transformed: Matrix = self.__local.rotated(self.__rotation)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(origin=({self.__origin.x}, {self.__origin.y}), rotation={self.__rotation}, vertices={self.__local.columns})"

    def __reduce__(self) -> str | tuple[Any, ...]:
        return type(self), (self.__local, tuple(self.__origin), self.__rotation, tuple(self.__front_reference))

    @property
    def local_vertices(self) -> Matrix:
        return self.__local

    @property
    def transformed_vertices(self) -> Matrix:
        return self.__transformed

    @property
    def origin(self) -> Vector2:
        return Vector2(self.__origin)

    @property
    def rotation(self) -> float:
        return self.__rotation

    @property
    def front(self) -> Vector2:
        return Vector2(self.__front)

    @property
    def right(self) -> Vector2:
        return Vector2(self.__right)

    def with_rotation(self, angle: float) -> Shape:
        return type(self)(self.__local, self.__origin, angle, front=self.__front_reference)

    def rotated_by(self, delta: float) -> Shape:
        return self.with_rotation(self.__rotation + valid_float(value=delta))

    def moved_to(self, origin: _FPoint | Vector2) -> Shape:
        return type(self)(self.__local, origin, self.__rotation, front=self.__front_reference)

    def get_polygon(self) -> Polygon:
        """
        Returns the transformed vertices in world space.
        """
        origin = self.__origin
        return Polygon(origin + vertex for vertex in self.__transformed.to_vertices())


class AngledVector:
    """
    Vector of fixed length whose direction is given by a rotation angle in degrees,
    limited to [minimum, maximum].
    """

    __slots__ = ("__length", "__rotation", "__minimum", "__maximum", "__vector")

    def __init__(self, length: float = 1, rotation: float = 0, *, minimum: float = 0, maximum: float = DEG_CIRCLE) -> None:
        minimum = valid_float(value=minimum, min_value=0, max_value=DEG_CIRCLE)
        maximum = valid_float(value=maximum, min_value=0, max_value=DEG_CIRCLE)
        if minimum > maximum:
            raise ValueError(f"minimum ({minimum}) > maximum ({maximum})")
        self.__length: float = valid_float(value=length)
        self.__minimum: float = minimum
        self.__maximum: float = maximum
        self.__rotation: float = min(max(clamp_angle(valid_float(value=rotation)), minimum), maximum)
        self.__vector: Vector2 = get_rotated((self.__length, 0), -self.__rotation)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(length={self.__length}, rotation={self.__rotation}, minimum={self.__minimum}, maximum={self.__maximum})"

    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, AngledVector):
            return NotImplemented
        return (self.__length, self.__rotation, self.__minimum, self.__maximum) == (
            other.__length,
            other.__rotation,
            other.__minimum,
            other.__maximum,
        )

    def __hash__(self) -> int:
        return hash((self.__length, self.__rotation, self.__minimum, self.__maximum))

    @property
    def length(self) -> float:
        return self.__length

    @property
    def rotation(self) -> float:
        return self.__rotation

    @property
    def minimum(self) -> float:
        return self.__minimum

    @property
    def maximum(self) -> float:
        return self.__maximum

    @property
    def x(self) -> float:
        return self.__vector.x

    @property
    def y(self) -> float:
        return self.__vector.y

    def with_rotation(self, angle: float) -> AngledVector:
        return type(self)(self.__length, angle, minimum=self.__minimum, maximum=self.__maximum)

    def with_length(self, length: float) -> AngledVector:
        return type(self)(length, self.__rotation, minimum=self.__minimum, maximum=self.__maximum)

    def to_vector(self) -> Vector2:
        return Vector2(self.__vector)
