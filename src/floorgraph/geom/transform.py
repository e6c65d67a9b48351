"""Affine transforms between world coordinates and wall-local planes.

All matrices are 3 x 3 homogeneous numpy arrays acting on column vectors
``(x, y, 1)``.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from ..core.model import Point


def translation(dx: float, dy: float) -> np.ndarray:
    matrix = np.eye(3)
    matrix[0, 2] = dx
    matrix[1, 2] = dy
    return matrix


def rotation(theta: float) -> np.ndarray:
    """Counter-clockwise rotation by ``theta`` radians about the origin."""
    cs = math.cos(theta)
    sn = math.sin(theta)
    return np.array(
        [
            [cs, -sn, 0.0],
            [sn, cs, 0.0],
            [0.0, 0.0, 1.0],
        ]
    )


def wall_plane_transform(start: Point, end: Point) -> Tuple[np.ndarray, np.ndarray]:
    """Build the world -> wall-plane transform for a wall boundary.

    The transform moves ``start`` to the origin and rotates the direction
    ``start -> end`` onto the positive x axis, so a point's local x is its
    distance along the wall and its local y its signed distance off it.

    Args:
        start: Boundary start point in world coordinates.
        end: Boundary end point in world coordinates.

    Returns:
        Tuple of (transform, inverse transform).
    """
    direction = math.atan2(end.y - start.y, end.x - start.x)
    transform = rotation(-direction) @ translation(-start.x, -start.y)
    return transform, np.linalg.inv(transform)


def apply_transform(matrix: np.ndarray, point: Point) -> Point:
    x, y, _ = matrix @ np.array([point.x, point.y, 1.0])
    return Point(float(x), float(y))
