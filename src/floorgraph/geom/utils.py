"""Planar geometry helpers shared by the wall graph.

Points are plain ``(x, y)`` values; any object exposing ``x`` and ``y``
attributes (corners, ``Point``) is accepted where a polygon is expected.
"""

from __future__ import annotations

import math
from typing import Any, List, Sequence

from ..core.model import Point


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def closest_point_on_line(
    x: float, y: float, x1: float, y1: float, x2: float, y2: float
) -> Point:
    """Project a point onto the segment (x1, y1)-(x2, y2).

    The projection is clamped to the segment, so points beyond either end
    map onto that endpoint. A zero-length segment maps everything onto its
    single point.

    Args:
        x: Point x coordinate.
        y: Point y coordinate.
        x1: Segment start x.
        y1: Segment start y.
        x2: Segment end x.
        y2: Segment end y.

    Returns:
        The closest point of the segment.
    """
    dx = x2 - x1
    dy = y2 - y1
    length_sq = dx * dx + dy * dy

    if length_sq == 0:
        return Point(x1, y1)

    param = ((x - x1) * dx + (y - y1) * dy) / length_sq

    if param < 0:
        return Point(x1, y1)
    if param > 1:
        return Point(x2, y2)
    return Point(x1 + param * dx, y1 + param * dy)


def point_distance_from_line(
    x: float, y: float, x1: float, y1: float, x2: float, y2: float
) -> float:
    """Distance from a point to the segment (x1, y1)-(x2, y2)."""
    closest = closest_point_on_line(x, y, x1, y1, x2, y2)
    return distance(x, y, closest.x, closest.y)


def angle(x1: float, y1: float, x2: float, y2: float) -> float:
    """Angle between 0,0 -> x1,y1 and 0,0 -> x2,y2, in (-pi, pi].

    The sign convention is clockwise-positive: rotating (1, 0) onto (0, -1)
    gives +pi/2.
    """
    dot = x1 * x2 + y1 * y2
    det = x1 * y2 - y1 * x2
    return -math.atan2(det, dot)


def angle2pi(x1: float, y1: float, x2: float, y2: float) -> float:
    """Same as :func:`angle`, shifted into [0, 2*pi)."""
    theta = angle(x1, y1, x2, y2)
    if theta < 0:
        theta += 2 * math.pi
    return theta


def is_clockwise(points: Sequence[Any]) -> bool:
    """Check the winding of a closed polygon.

    Uses the shoelace-style sum of (x2 - x1) * (y2 + y1) over every edge,
    closing the ring from the last point back to the first. A sum of zero
    (degenerate polygon) counts as clockwise.

    Args:
        points: Polygon vertices with ``x`` and ``y`` attributes.

    Returns:
        True if the polygon winds clockwise.
    """
    total = 0.0
    count = len(points)
    for i in range(count):
        c1 = points[i]
        c2 = points[(i + 1) % count]
        total += (c2.x - c1.x) * (c2.y + c1.y)
    return total >= 0


def cycle(items: Sequence[Any], shift: int) -> List[Any]:
    """Rotate a sequence left by ``shift`` positions."""
    items = list(items)
    if not items:
        return items
    shift %= len(items)
    return items[shift:] + items[:shift]
