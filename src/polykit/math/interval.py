# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Projection interval module"""

from __future__ import annotations

__all__ = ["Interval", "interval_distance"]

from dataclasses import dataclass
from math import copysign


@dataclass(frozen=True, slots=True)
class Interval:
    """
    1D range [min, max] covered by a shape projected onto an axis.
    """

    min: float
    max: float

    def __post_init__(self) -> None:
        if not (self.min <= self.max):
            raise ValueError(f"Invalid interval: min ({self.min}) > max ({self.max})")

    @property
    def length(self) -> float:
        return self.max - self.min

    def extended(self, offset: float) -> Interval:
        """
        Returns the interval swept when moving this one by 'offset' along its axis.
        """
        if offset < 0:
            return Interval(self.min + offset, self.max)
        return Interval(self.min, self.max + offset)

    def distance_to(self, other: Interval) -> float:
        return interval_distance(self, other)


def interval_distance(a: Interval, b: Interval) -> float:
    """
    Signed gap between two intervals lying on the same axis.

    A negative result means the intervals overlap, a positive one that they are separated.
    Zero is the touching case.
    """
    d1: float = b.min - a.max
    d2: float = a.min - b.max
    gap: float = d1 if a.min < b.min else d2
    if gap == 0:
        return 0.0
    return copysign(min(abs(d1), abs(d2)), gap)
