# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""polykit's math module"""

from __future__ import annotations

__all__ = [
    "CollisionResult",
    "DEG_CIRCLE",
    "DEG_TO_RAD",
    "Interval",
    "Matrix",
    "Polygon",
    "RAD_TO_DEG",
    "Vector2",
    "angle_atan2",
    "angle_atan2_deg",
    "clamp_angle",
    "collision",
    "compute_rect_from_vertices",
    "compute_size_from_vertices",
    "contains",
    "get_angle_cos",
    "get_angle_deg",
    "get_distance",
    "get_normalized",
    "get_perpendicular",
    "get_point_on_circle",
    "get_point_toward_target",
    "get_projection",
    "get_rotated",
    "get_vertices_center",
    "interval_distance",
    "line_intersection",
    "on_segment",
    "orientation",
    "project",
    "random_float",
    "random_int",
    "random_point_in_circle",
    "rotate_points",
    "segments_intersect",
    "subtended_angle",
    "to_degrees",
    "to_radians",
    "vector_from_points",
]


############ Package initialization ############
from .angle import *
from .area import *
from .collision import *
from .intersection import *
from .interval import *
from .matrix import *
from .polygon import *
from .sampling import *
from .vector2 import *
