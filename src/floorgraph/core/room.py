"""Rooms: bounded faces of the wall graph.

A room is built from a counter-clockwise corner cycle. Construction links a
ring of half-edges over the cycle (a small doubly connected edge list) and
derives the floor polygon from the mitered interior boundary, so the floor
is always inset from the corner polygon by the wall half-thicknesses.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from shapely.geometry import Polygon

from .events import EventHook
from .half_edge import HalfEdge
from .model import DEFAULT_FLOOR_TEXTURE, FloorTexture, Point
from .validators import TopologyError

if TYPE_CHECKING:
    from .corner import Corner
    from .floorplan import Floorplan

LOGGER = logging.getLogger(__name__)


class Room:
    """A room bounded by an ordered cycle of corners.

    Attributes:
        floorplan: The floorplan the room was found in.
        corners: Boundary corners, counter-clockwise.
        interior_corners: Mitered floor outline, one point per half-edge.
        floor_plane: Floor polygon over ``interior_corners``.
        floor_changed: Fired when the floor texture changes.
    """

    def __init__(self, floorplan: Floorplan, corners: List[Corner]):
        self.floorplan = floorplan
        self.corners = list(corners)
        self.interior_corners: List[Point] = []
        self.floor_plane: Optional[Polygon] = None
        self.floor_changed = EventHook()

        self._edge_pointer: Optional[HalfEdge] = None

        self.update_walls()
        self.update_interior_corners()
        self.generate_plane()

    def __repr__(self) -> str:
        return f"Room({self.get_uuid()!r})"

    def get_uuid(self) -> str:
        """Identity of the room: its sorted corner ids, comma-joined."""
        return ",".join(sorted(corner.id for corner in self.corners))

    def get_texture(self) -> FloorTexture:
        texture = self.floorplan.get_floor_texture(self.get_uuid())
        return texture or DEFAULT_FLOOR_TEXTURE

    def set_texture(self, url: str, stretch: bool, scale: float) -> None:
        # floors always stretch; the flag mirrors HalfEdge.set_texture
        self.floorplan.set_floor_texture(self.get_uuid(), url, scale)
        self.floor_changed.fire()

    @property
    def edges(self) -> List[HalfEdge]:
        """Half-edges of the room in ring order."""
        edges = []
        edge = self._edge_pointer
        while edge is not None:
            edges.append(edge)
            edge = edge.next
            if edge is self._edge_pointer:
                break
        return edges

    @property
    def area(self) -> float:
        if self.floor_plane is None:
            return 0.0
        return self.floor_plane.area

    def cycle_index(self, index: int) -> int:
        return index % len(self.corners)

    def generate_plane(self) -> None:
        if len(self.interior_corners) < 3:
            self.floor_plane = None
            return
        self.floor_plane = Polygon([(p.x, p.y) for p in self.interior_corners])

    def update_interior_corners(self) -> None:
        self.interior_corners = []
        for edge in self.edges:
            self.interior_corners.append(edge.interior_start())
            edge.generate_plane()

    def update_walls(self) -> None:
        """Create one half-edge per corner pair and link them into a ring.

        Raises:
            TopologyError: If two consecutive corners share no wall.
        """
        prev_edge: Optional[HalfEdge] = None
        first_edge: Optional[HalfEdge] = None
        count = len(self.corners)

        for i, first_corner in enumerate(self.corners):
            second_corner = self.corners[(i + 1) % count]

            wall_to = first_corner.wall_to(second_corner)
            wall_from = first_corner.wall_from(second_corner)

            if wall_to is not None:
                edge = HalfEdge(self, wall_to, True)
            elif wall_from is not None:
                edge = HalfEdge(self, wall_from, False)
            else:
                LOGGER.error(
                    "Corners %s and %s are not connected by a wall",
                    first_corner.id,
                    second_corner.id,
                )
                raise TopologyError(
                    f"Room corners '{first_corner.id}' and '{second_corner.id}' "
                    "are not connected by a wall"
                )

            if first_edge is None:
                first_edge = edge
            else:
                edge.prev = prev_edge
                prev_edge.next = edge

            prev_edge = edge

        if first_edge is not None and prev_edge is not None and count > 1:
            first_edge.prev = prev_edge
            prev_edge.next = first_edge

        self._edge_pointer = first_edge
