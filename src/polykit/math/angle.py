# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Angle utils module

All public angles are expressed in degrees unless the function name says otherwise.
"""

from __future__ import annotations

__all__ = [
    "DEG_CIRCLE",
    "DEG_TO_RAD",
    "RAD_TO_DEG",
    "angle_atan2",
    "angle_atan2_deg",
    "clamp_angle",
    "subtended_angle",
    "to_degrees",
    "to_radians",
]

from math import atan2, degrees, pi
from typing import Final, TypeAlias

from .vector2 import Vector2

_FPoint: TypeAlias = tuple[float, float]

DEG_TO_RAD: Final[float] = pi / 180
RAD_TO_DEG: Final[float] = 180 / pi
DEG_CIRCLE: Final[float] = 360.0


def to_radians(angle: float) -> float:
    return angle * DEG_TO_RAD


def to_degrees(angle: float) -> float:
    return angle * RAD_TO_DEG


def clamp_angle(angle: float) -> float:
    """
    Wraps 'angle' into [0, 360[.
    """
    angle = angle % DEG_CIRCLE
    # -1e-20 % 360 gives 360.0
    if angle == DEG_CIRCLE:
        return 0.0
    return angle


def angle_atan2(origin: _FPoint | Vector2, target: _FPoint | Vector2) -> float:
    """
    Direction of 'target' seen from 'origin', in radians.
    """
    return atan2(target[1] - origin[1], target[0] - origin[0])


def angle_atan2_deg(origin: _FPoint | Vector2, target: _FPoint | Vector2) -> float:
    return degrees(angle_atan2(origin, target))


def subtended_angle(a: _FPoint | Vector2, b: _FPoint | Vector2, c: _FPoint | Vector2) -> float:
    """
    Signed angle ABC in radians, in ]-pi, pi].

    Positive when C is counterclockwise from A as seen from B (y-up frame).
    """
    bax = a[0] - b[0]
    bay = a[1] - b[1]
    bcx = c[0] - b[0]
    bcy = c[1] - b[1]

    dot_product = bax * bcx + bay * bcy
    cross_product = bax * bcy - bay * bcx

    return atan2(cross_product, dot_product)
