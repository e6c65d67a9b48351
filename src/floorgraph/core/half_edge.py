"""Half-edges: one directed side of a wall.

Half-edges are created by rooms (and, for walls bounding no room, by the
floorplan's orphan pass). Each one knows its neighbours around the room,
so it can compute the mitered interior and exterior boundary of its wall:
the offset at every joint runs along the angle bisector and is stretched
so that the perpendicular distance to the wall centreline is exactly half
the wall thickness.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, List, Optional

import numpy as np

from ..geom.transform import wall_plane_transform
from ..geom.utils import angle2pi, distance, point_distance_from_line
from .events import EventHook
from .model import Point, WallTexture

if TYPE_CHECKING:
    from .corner import Corner
    from .room import Room
    from .wall import Wall

# Below this |sin(theta / 2)| the bisector is treated as degenerate
MIN_HALF_ANGLE_SINE = 1e-9


class HalfEdge:
    """A directed traversal of one side of a wall.

    Attributes:
        room: The room this edge bounds, or None for an orphan wall.
        wall: The wall this edge belongs to.
        front: True if the edge runs from the wall's start to its end.
        next: Successor edge around the room.
        prev: Predecessor edge around the room.
        offset: Half of the wall thickness.
        height: Wall height.
        plane: 4 x 3 array with the wall face vertices (x, y, z), set by
            :meth:`generate_plane`.
        interior_transform: World -> interior wall plane.
        inv_interior_transform: Interior wall plane -> world.
        exterior_transform: World -> exterior wall plane.
        inv_exterior_transform: Exterior wall plane -> world.
        redraw: Fired when the edge's appearance changes.
    """

    def __init__(self, room: Optional[Room], wall: Wall, front: bool):
        self.room = room
        self.wall = wall
        self.front = bool(front)

        self.next: Optional[HalfEdge] = None
        self.prev: Optional[HalfEdge] = None

        self.offset = wall.thickness / 2.0
        self.height = wall.height

        self.plane: Optional[np.ndarray] = None
        self.interior_transform = np.eye(3)
        self.inv_interior_transform = np.eye(3)
        self.exterior_transform = np.eye(3)
        self.inv_exterior_transform = np.eye(3)

        self.redraw = EventHook()

        if self.front:
            self.wall.front_edge = self
        else:
            self.wall.back_edge = self

    def __repr__(self) -> str:
        side = "front" if self.front else "back"
        return f"HalfEdge({self.wall.id!r}, {side})"

    def get_texture(self) -> WallTexture:
        if self.front:
            return self.wall.front_texture
        return self.wall.back_texture

    def set_texture(self, url: str, stretch: bool, scale: float) -> None:
        texture = WallTexture(url=url, stretch=stretch, scale=scale)
        if self.front:
            self.wall.front_texture = texture
        else:
            self.wall.back_texture = texture
        self.redraw.fire()

    def generate_plane(self) -> None:
        """Build the wall face quad and the wall-plane transforms."""
        start = self.interior_start()
        end = self.interior_end()
        height = self.height

        self.plane = np.array(
            [
                [start.x, start.y, 0.0],
                [end.x, end.y, 0.0],
                [end.x, end.y, height],
                [start.x, start.y, height],
            ]
        )

        self.compute_transforms()

    def compute_transforms(self) -> None:
        """World -> wall-plane transforms for the interior and exterior boundaries."""
        self.interior_transform, self.inv_interior_transform = wall_plane_transform(
            self.interior_start(), self.interior_end()
        )
        self.exterior_transform, self.inv_exterior_transform = wall_plane_transform(
            self.exterior_start(), self.exterior_end()
        )

    def interior_distance(self) -> float:
        start = self.interior_start()
        end = self.interior_end()
        return distance(start.x, start.y, end.x, end.y)

    def distance_to(self, x: float, y: float) -> float:
        """Distance from a point to the interior boundary segment."""
        start = self.interior_start()
        end = self.interior_end()
        return point_distance_from_line(x, y, start.x, start.y, end.x, end.y)

    def interior_end(self) -> Point:
        vec = self.half_angle_vector(self, self.next)
        end = self.get_end()
        return Point(end.x + vec.x, end.y + vec.y)

    def interior_start(self) -> Point:
        vec = self.half_angle_vector(self.prev, self)
        start = self.get_start()
        return Point(start.x + vec.x, start.y + vec.y)

    def interior_center(self) -> Point:
        start = self.interior_start()
        end = self.interior_end()
        return Point((start.x + end.x) / 2.0, (start.y + end.y) / 2.0)

    def exterior_end(self) -> Point:
        vec = self.half_angle_vector(self, self.next)
        end = self.get_end()
        return Point(end.x - vec.x, end.y - vec.y)

    def exterior_start(self) -> Point:
        vec = self.half_angle_vector(self.prev, self)
        start = self.get_start()
        return Point(start.x - vec.x, start.y - vec.y)

    def corners(self) -> List[Point]:
        """Outline of the wall side: interior start/end, exterior end/start."""
        return [
            self.interior_start(),
            self.interior_end(),
            self.exterior_end(),
            self.exterior_start(),
        ]

    def get_start(self) -> Corner:
        return self.wall.start if self.front else self.wall.end

    def get_end(self) -> Corner:
        return self.wall.end if self.front else self.wall.start

    def get_opposite_edge(self) -> Optional[HalfEdge]:
        if self.front:
            return self.wall.back_edge
        return self.wall.front_edge

    def half_angle_vector(self, v1: Optional[HalfEdge], v2: Optional[HalfEdge]) -> Point:
        """Miter offset at the joint where ``v1`` ends and ``v2`` starts.

        A missing neighbour is replaced by a virtual edge continuing the other
        one straight on, which turns the miter into a plain perpendicular
        offset. The result points to the left of the traversal direction and
        has length ``offset / sin(theta / 2)``.

        Args:
            v1: Incoming edge, or None at an open end.
            v2: Outgoing edge, or None at an open end.

        Returns:
            Offset vector to add to the joint corner.
        """
        if v1 is None:
            v2_start = v2.get_start()
            v2_end = v2.get_end()
            v1_start_x = v2_start.x - (v2_end.x - v2_start.x)
            v1_start_y = v2_start.y - (v2_end.y - v2_start.y)
            v1_end_x = v2_start.x
            v1_end_y = v2_start.y
        else:
            v1_start_x = v1.get_start().x
            v1_start_y = v1.get_start().y
            v1_end_x = v1.get_end().x
            v1_end_y = v1.get_end().y

        if v2 is None:
            v1_start = v1.get_start()
            v1_end = v1.get_end()
            v2_start_x = v1_end.x
            v2_start_y = v1_end.y
            v2_end_x = v1_end.x + (v1_end.x - v1_start.x)
            v2_end_y = v1_end.y + (v1_end.y - v1_start.y)
        else:
            v2_start_x = v2.get_start().x
            v2_start_y = v2.get_start().y
            v2_end_x = v2.get_end().x
            v2_end_y = v2.get_end().y

        # angle between the reversed incoming edge and the outgoing edge
        theta = angle2pi(
            v1_start_x - v1_end_x,
            v1_start_y - v1_end_y,
            v2_end_x - v1_end_x,
            v2_end_y - v1_end_y,
        )

        cs = math.cos(theta / 2.0)
        sn = math.sin(theta / 2.0)

        v2_dx = v2_end_x - v2_start_x
        v2_dy = v2_end_y - v2_start_y
        mag = distance(0, 0, v2_dx, v2_dy)
        if mag == 0:
            return Point(0.0, 0.0)

        if abs(sn) < MIN_HALF_ANGLE_SINE:
            # walls folded back onto each other: no finite miter
            return Point(-v2_dy / mag * self.offset, v2_dx / mag * self.offset)

        # rotate v2 by theta / 2
        vx = v2_dx * cs - v2_dy * sn
        vy = v2_dx * sn + v2_dy * cs

        scalar = (self.offset / sn) / distance(0, 0, vx, vy)
        return Point(vx * scalar, vy * scalar)
