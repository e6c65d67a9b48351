"""Geometry utilities for the wall graph.

This module provides planar distance, angle, winding and intersection
helpers, and the affine transforms used to map world coordinates onto
wall planes.
"""

from .transform import apply_transform, wall_plane_transform
from .utils import angle, angle2pi, closest_point_on_line, distance, is_clockwise, point_distance_from_line

__all__ = [
    "angle",
    "angle2pi",
    "apply_transform",
    "closest_point_on_line",
    "distance",
    "is_clockwise",
    "point_distance_from_line",
    "wall_plane_transform",
]
