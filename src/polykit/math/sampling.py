# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Random sampling module

There is no module-level generator: callers pass their own random.Random
(seeded for reproducible results).
"""

from __future__ import annotations

__all__ = ["random_float", "random_int", "random_point_in_circle"]

from math import cos, sin, tau
from random import Random

from ..system.validation import valid_float, valid_integer
from .vector2 import Vector2


def random_int(rng: Random, min_value: int, max_value: int) -> int:
    """
    Random integer in [min_value, max_value[.
    """
    min_value = valid_integer(value=min_value)
    max_value = valid_integer(value=max_value)
    if max_value <= min_value:
        raise ValueError(f"Empty range: [{min_value}, {max_value}[")
    return rng.randrange(min_value, max_value)


def random_float(rng: Random, min_value: float, max_value: float) -> float:
    """
    Random float in [min_value, max_value[.
    """
    min_value = valid_float(value=min_value)
    max_value = valid_float(value=max_value)
    if max_value < min_value:
        raise ValueError(f"min_value ({min_value}) > max_value ({max_value})")
    return rng.random() * (max_value - min_value) + min_value


def random_point_in_circle(rng: Random, radius: float, center: tuple[float, float] | Vector2 = (0, 0)) -> Vector2:
    """
    Random point of the disk of the given radius.

    The distance from the center is drawn uniformly, so points are denser near the center.
    """
    radius = valid_float(value=radius, min_value=0)
    angle = random_float(rng, 0, tau)
    distance = random_float(rng, 0, radius)
    return Vector2(center[0] + distance * cos(angle), center[1] + distance * sin(angle))
