"""Walls: the edges of the wall graph.

A wall joins two distinct corners and carries the physical properties the
renderer needs (thickness, height, a texture per side). Its front and back
half-edges are derived data, filled in by each ``Floorplan.update()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Optional

from ..geom.utils import point_distance_from_line
from .configuration import CONFIG_WALL_HEIGHT, CONFIG_WALL_THICKNESS, Configuration
from .events import EventHook
from .model import DEFAULT_WALL_TEXTURE, WallTexture
from .validators import TopologyError

if TYPE_CHECKING:
    from .corner import Corner
    from .half_edge import HalfEdge

LOGGER = logging.getLogger(__name__)


class Wall:
    """A straight wall between two corners.

    The front half-edge runs from start to end and offsets to its left;
    the back half-edge runs from end to start.

    Attributes:
        id: Identifier derived from the endpoint ids at creation time.
        thickness: Full wall thickness.
        height: Wall height.
        front_texture: Texture of the front face.
        back_texture: Texture of the back face.
        items: Opaque handles of fixtures mounted on the wall.
        on_items: Opaque handles of floor fixtures standing against the wall.
        front_edge: Front half-edge, set while the wall has geometry.
        back_edge: Back half-edge, set while the wall has geometry.
        orphan: True when the wall bounds no room.
    """

    def __init__(self, start: Corner, end: Corner):
        self._start = start
        self._end = end
        self.id = self.get_uuid()

        self.thickness: float = Configuration.get_numeric_value(CONFIG_WALL_THICKNESS)
        self.height: float = Configuration.get_numeric_value(CONFIG_WALL_HEIGHT)
        self.front_texture: WallTexture = DEFAULT_WALL_TEXTURE
        self.back_texture: WallTexture = DEFAULT_WALL_TEXTURE

        self.items: List[Any] = []
        self.on_items: List[Any] = []

        self.front_edge: Optional[HalfEdge] = None
        self.back_edge: Optional[HalfEdge] = None
        self.orphan = False

        self.moved = EventHook()
        self.deleted = EventHook()
        self.action = EventHook()

        self._start.attach_start(self)
        self._end.attach_end(self)

    def __repr__(self) -> str:
        return f"Wall({self.id!r})"

    @property
    def start(self) -> Corner:
        return self._start

    @property
    def end(self) -> Corner:
        return self._end

    def get_uuid(self) -> str:
        return ",".join([self._start.id, self._end.id])

    def reset_front_back(self) -> None:
        self.front_edge = None
        self.back_edge = None
        self.orphan = False

    def half_edge(self, front: bool) -> HalfEdge:
        """Get the front or back half-edge assigned by the last rebuild.

        Raises:
            TopologyError: If that side has no half-edge, which means the
                graph was edited without calling ``update()`` afterwards.
        """
        edge = self.front_edge if front else self.back_edge
        if edge is None:
            side = "front" if front else "back"
            LOGGER.error("Wall %s has no %s half-edge", self.id, side)
            raise TopologyError(f"Wall '{self.id}' has no {side} half-edge assigned")
        return edge

    def snap_to_axis(self, tolerance: float) -> None:
        # start first, then end; the result depends on this order
        self._start.snap_to_axis(tolerance)
        self._end.snap_to_axis(tolerance)

    def fire_action(self, payload: Any) -> None:
        self.action.fire(payload)

    def relative_move(self, dx: float, dy: float) -> None:
        self._start.relative_move(dx, dy)
        self._end.relative_move(dx, dy)

    def fire_moved(self) -> None:
        self.moved.fire()

    def fire_redraw(self) -> None:
        if self.front_edge is not None:
            self.front_edge.redraw.fire()
        if self.back_edge is not None:
            self.back_edge.redraw.fire()

    def remove(self) -> None:
        """Detach from both corners and fire the deleted hook.

        A corner left without walls removes itself as well.
        """
        self._start.detach_wall(self)
        self._end.detach_wall(self)
        self.deleted.fire(self)

    def set_start(self, corner: Corner) -> None:
        self._start.detach_wall(self)
        corner.attach_start(self)
        self._start = corner
        self.fire_moved()

    def set_end(self, corner: Corner) -> None:
        self._end.detach_wall(self)
        corner.attach_end(self)
        self._end = corner
        self.fire_moved()

    def distance_from(self, x: float, y: float) -> float:
        return point_distance_from_line(
            x, y, self._start.x, self._start.y, self._end.x, self._end.y
        )

    def length(self) -> float:
        return self._start.distance_from_corner(self._end)

    def opposite_corner(self, corner: Corner) -> Corner:
        """Return the endpoint that is not ``corner``.

        Raises:
            TopologyError: If ``corner`` is not an endpoint of this wall.
        """
        if self._start is corner:
            return self._end
        if self._end is corner:
            return self._start
        raise TopologyError(f"Wall '{self.id}' does not connect to corner '{corner.id}'")
