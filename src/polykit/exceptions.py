# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""polykit exceptions module"""

from __future__ import annotations

__all__ = [
    "DegenerateVectorError",
    "DimensionMismatchError",
    "GeometryError",
    "InvalidPolygonError",
]


class GeometryError(Exception):
    pass


class DimensionMismatchError(GeometryError, ValueError):
    def __init__(self, message: str, left: tuple[int, int], right: tuple[int, int]) -> None:
        super().__init__(f"{message} (got {left[0]}x{left[1]} and {right[0]}x{right[1]})")
        self.left: tuple[int, int] = left
        self.right: tuple[int, int] = right


class DegenerateVectorError(GeometryError, ZeroDivisionError):
    pass


class InvalidPolygonError(GeometryError, ValueError):
    def __init__(self, message: str, vertex_count: int) -> None:
        super().__init__(message)
        self.vertex_count: int = vertex_count
