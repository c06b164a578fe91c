# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Matrix module

Vertex matrices store one point per column: row 0 holds the x coordinates,
row 1 the y coordinates, and an optional row 2 filled with ones (homogeneous coordinates).
"""

from __future__ import annotations

__all__ = ["Matrix"]

from collections.abc import Iterable
from math import cos, sin
from typing import Any, TypeAlias

import numpy as np
import numpy.typing as npt

from ..exceptions import DimensionMismatchError
from ..system.validation import valid_float, valid_integer
from .angle import clamp_angle, to_radians
from .vector2 import Vector2

_FPoint: TypeAlias = tuple[float, float]


class Matrix:
    __slots__ = ("__array",)

    def __init__(self, data: npt.ArrayLike) -> None:
        array = np.array(data, dtype=np.float64)
        if array.ndim != 2:
            raise ValueError(f"A matrix must have 2 dimensions, got {array.ndim}")
        array.flags.writeable = False
        self.__array: npt.NDArray[np.float64] = array

    @classmethod
    def zeros(cls, rows: int, columns: int) -> Matrix:
        rows = valid_integer(value=rows, min_value=0)
        columns = valid_integer(value=columns, min_value=0)
        return cls(np.zeros((rows, columns)))

    @classmethod
    def from_vertices(cls, vertices: Iterable[_FPoint] | Iterable[Vector2], *, homogeneous: bool = True) -> Matrix:
        columns = [(float(p[0]), float(p[1])) for p in vertices]
        array = np.array(columns, dtype=np.float64).reshape(len(columns), 2).T
        if homogeneous:
            array = np.vstack((array, np.ones((1, array.shape[1]))))
        return cls(array)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.__array.tolist()!r})"

    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self.__array, other.__array))

    __hash__ = None  # type: ignore[assignment]

    def __reduce__(self) -> str | tuple[Any, ...]:
        return type(self), (self.__array.tolist(),)

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> npt.NDArray[Any]:
        if dtype is None:
            return self.__array.copy()
        return self.__array.astype(dtype)

    def __getitem__(self, index: tuple[int, int], /) -> float:
        row, column = index
        return float(self.__array[row, column])

    def __matmul__(self, other: Matrix, /) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiplied(other)

    def __add__(self, other: Matrix, /) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.added(other)

    def __sub__(self, other: Matrix, /) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtracted(other)

    @property
    def rows(self) -> int:
        return int(self.__array.shape[0])

    @property
    def columns(self) -> int:
        return int(self.__array.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.columns

    @property
    def array(self) -> npt.NDArray[np.float64]:
        # Read-only view
        return self.__array

    def to_vertices(self) -> tuple[Vector2, ...]:
        self.__check_vertex_matrix()
        return tuple(Vector2(float(x), float(y)) for x, y in zip(self.__array[0], self.__array[1]))

    def multiplied(self, other: Matrix) -> Matrix:
        if self.columns != other.rows:
            raise DimensionMismatchError(
                "The number of columns in the first matrix must be the same as the number of rows in the second matrix",
                self.shape,
                other.shape,
            )
        return Matrix(self.__array @ other.__array)

    def added(self, other: Matrix) -> Matrix:
        self.__check_same_shape(other)
        return Matrix(self.__array + other.__array)

    def subtracted(self, other: Matrix) -> Matrix:
        self.__check_same_shape(other)
        return Matrix(self.__array - other.__array)

    def rotated(self, angle: float) -> Matrix:
        """
        Rotate every column vertex counterclockwise by 'angle' degrees around the origin.

        Rows after the first two are kept as is.
        """
        self.__check_vertex_matrix()
        angle = to_radians(clamp_angle(valid_float(value=angle)))
        c = cos(angle)
        s = sin(angle)
        rotation = np.array(
            [
                [c, -s, 0],
                [s, c, 0],
                [0, 0, 1],
            ]
        )
        homogeneous = np.vstack((self.__array[:2], np.ones((1, self.columns))))
        result = self.__array.copy()
        result[:2] = (rotation @ homogeneous)[:2]
        return Matrix(result)

    def scaled(self, sx: float, sy: float | None = None) -> Matrix:
        self.__check_vertex_matrix()
        sx = valid_float(value=sx)
        sy = sx if sy is None else valid_float(value=sy)
        result = self.__array.copy()
        result[0] *= sx
        result[1] *= sy
        return Matrix(result)

    def reflected(self, *, x: bool = False, y: bool = False) -> Matrix:
        """
        Negates row 0 (if 'x' is set) and/or row 1 (if 'y' is set).
        """
        self.__check_vertex_matrix()
        result = self.__array.copy()
        if x:
            result[0] = -result[0]
        if y:
            result[1] = -result[1]
        return Matrix(result)

    def __check_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise DimensionMismatchError("The given matrix must have the same number of columns and rows", self.shape, other.shape)

    def __check_vertex_matrix(self) -> None:
        if self.rows < 2:
            raise DimensionMismatchError("A vertex matrix needs at least 2 rows", self.shape, (2, self.columns))
