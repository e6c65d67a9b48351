"""The floorplan: owner of the wall graph and its derived rooms.

All corners and walls of a plan live here, and every edit goes through the
objects created here. ``update()`` is the single rebuild entry point: it
clears the derived half-edges, finds the rooms, gives walls outside any room
their own half-edges and notifies subscribers. Rooms read between an edit
and the next ``update()`` are stale.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
from shapely.geometry import Polygon

from .configuration import DEFAULT_FLOORPLAN_TOLERANCE
from .corner import Corner
from .events import EventHook
from .half_edge import HalfEdge
from .model import FloorTexture
from .room import Room
from .rooms import find_rooms
from .schema import CornerRecord, FloorplanData, WallRecord, parse_floorplan_data
from .validators import TopologyError
from .wall import Wall

LOGGER = logging.getLogger(__name__)


class Floorplan:
    """A set of walls and corners, and the rooms they enclose.

    Floor textures are kept here rather than on rooms, because rooms are
    rebuilt from scratch on every update. They are keyed by room identity
    (see ``Room.get_uuid``).

    Attributes:
        wall_added: Fired with each created wall.
        corner_added: Fired with each created corner.
        redraw: Fired when collaborators should redraw the plan.
        updated_rooms: Fired at the end of every ``update()``.
        room_loaded: Fired after ``load_floorplan`` finishes.
    """

    def __init__(self) -> None:
        self._walls: List[Wall] = []
        self._corners: List[Corner] = []
        self._rooms: List[Room] = []
        self._floor_textures: Dict[str, FloorTexture] = {}

        self.wall_added = EventHook()
        self.corner_added = EventHook()
        self.redraw = EventHook()
        self.updated_rooms = EventHook()
        self.room_loaded = EventHook()

    @property
    def walls(self) -> List[Wall]:
        return list(self._walls)

    @property
    def corners(self) -> List[Corner]:
        return list(self._corners)

    @property
    def rooms(self) -> List[Room]:
        return list(self._rooms)

    @property
    def floor_textures(self) -> Dict[str, FloorTexture]:
        return dict(self._floor_textures)

    def wall_edges(self) -> List[HalfEdge]:
        """All half-edges, front before back, in wall order."""
        edges = []
        for wall in self._walls:
            if wall.front_edge is not None:
                edges.append(wall.front_edge)
            if wall.back_edge is not None:
                edges.append(wall.back_edge)
        return edges

    def wall_edge_planes(self) -> List[np.ndarray]:
        return [edge.plane for edge in self.wall_edges() if edge.plane is not None]

    def floor_planes(self) -> List[Polygon]:
        return [room.floor_plane for room in self._rooms if room.floor_plane is not None]

    def new_wall(self, start: Corner, end: Corner) -> Wall:
        """Create a wall between two existing corners and rebuild.

        Args:
            start: The start corner.
            end: The end corner.

        Returns:
            The new wall.

        Raises:
            TopologyError: If both ends are the same corner.
        """
        if start is end:
            raise TopologyError(f"Wall cannot start and end at corner '{start.id}'")
        wall = Wall(start, end)
        self._walls.append(wall)
        wall.deleted.add(self._remove_wall)
        self.wall_added.fire(wall)
        self.update()
        return wall

    def new_corner(self, x: float, y: float, id: Optional[str] = None) -> Corner:
        """Create a corner. Creating a corner never merges or rebuilds.

        Args:
            x: The x coordinate.
            y: The y coordinate.
            id: Optional id; generated when omitted.

        Returns:
            The new corner.
        """
        corner = Corner(self, x, y, id)
        self._corners.append(corner)
        corner.deleted.add(self._remove_corner)
        self.corner_added.fire(corner)
        return corner

    def remove_wall(self, wall: Wall) -> None:
        """Delete a wall; corners it leaves without walls go with it."""
        wall.remove()

    def remove_corner(self, corner: Corner, remove_walls: bool = True) -> None:
        """Delete a corner.

        Args:
            corner: The corner to delete.
            remove_walls: Also delete every wall attached to the corner.

        Raises:
            TopologyError: If ``remove_walls`` is False and walls are still
                attached to the corner.
        """
        if remove_walls:
            corner.remove_all()
            return
        if corner.wall_starts or corner.wall_ends:
            raise TopologyError(f"Corner '{corner.id}' still has walls attached")
        corner.remove()

    def overlapped_corner(
        self, x: float, y: float, tolerance: float = DEFAULT_FLOORPLAN_TOLERANCE
    ) -> Optional[Corner]:
        for corner in self._corners:
            if corner.distance_from(x, y) < tolerance:
                return corner
        return None

    def overlapped_wall(
        self, x: float, y: float, tolerance: float = DEFAULT_FLOORPLAN_TOLERANCE
    ) -> Optional[Wall]:
        for wall in self._walls:
            if wall.distance_from(x, y) < tolerance:
                return wall
        return None

    def to_data(self) -> FloorplanData:
        corners = {corner.id: CornerRecord(corner.x, corner.y) for corner in self._corners}
        walls = [
            WallRecord(
                corner1=wall.start.id,
                corner2=wall.end.id,
                front_texture=wall.front_texture,
                back_texture=wall.back_texture,
            )
            for wall in self._walls
        ]
        return FloorplanData(
            corners=corners, walls=walls, floor_textures=dict(self._floor_textures)
        )

    def save_floorplan(self) -> Dict[str, Any]:
        """Serialize corners, walls and floor textures to a plain dictionary."""
        return self.to_data().to_dict()

    def load_floorplan(self, data: Optional[Dict[str, Any]]) -> None:
        """Replace the plan with saved data.

        The current plan is always cleared first. Data without ``corners``
        or ``walls`` leaves the plan empty.

        Args:
            data: Dictionary as produced by :meth:`save_floorplan`.

        Raises:
            ValueError: If the data is present but malformed.
        """
        self.reset()

        plan = parse_floorplan_data(data)
        if plan is None:
            LOGGER.debug("No corners or walls in floorplan data; leaving plan empty")
            return

        corners = {}
        for corner_id, record in plan.corners.items():
            corners[corner_id] = self.new_corner(record.x, record.y, corner_id)

        for record in plan.walls:
            wall = self.new_wall(corners[record.corner1], corners[record.corner2])
            if record.front_texture is not None:
                wall.front_texture = record.front_texture
            if record.back_texture is not None:
                wall.back_texture = record.back_texture

        self._floor_textures = dict(plan.floor_textures)

        self.update()
        self.room_loaded.fire()

    def get_floor_texture(self, uuid: str) -> Optional[FloorTexture]:
        return self._floor_textures.get(uuid)

    def set_floor_texture(self, uuid: str, url: str, scale: float) -> None:
        self._floor_textures[uuid] = FloorTexture(url=url, scale=scale)

    def update(self) -> None:
        """Recompute rooms and half-edges from the current graph.

        Steps: clear every wall's half-edges, find rooms and build them,
        give every wall outside a room its own pair of half-edges, drop floor
        textures of rooms that no longer exist, notify subscribers. Running
        it twice on an unchanged graph gives the same result.
        """
        for wall in self._walls:
            wall.reset_front_back()

        room_corners = self.find_rooms(self._corners)
        self._rooms = [Room(self, corners) for corners in room_corners]
        orphans = self._assign_orphan_edges()

        self._update_floor_textures()
        LOGGER.debug(
            "Rebuilt floorplan: %d corners, %d walls, %d rooms, %d orphan walls",
            len(self._corners),
            len(self._walls),
            len(self._rooms),
            len(orphans),
        )
        self.updated_rooms.fire()

    def find_rooms(self, corners: List[Corner]) -> List[List[Corner]]:
        """Find rooms among ``corners``; see :func:`floorgraph.core.rooms.find_rooms`."""
        return find_rooms(corners)

    def get_center(self) -> Tuple[float, float]:
        return self.get_dimensions(center=True)

    def get_size(self) -> Tuple[float, float]:
        return self.get_dimensions(center=False)

    def get_dimensions(self, center: bool = False) -> Tuple[float, float]:
        """Bounding box centre or size of all corners; (0, 0) for an empty plan."""
        if not self._corners:
            return (0.0, 0.0)

        xs = [corner.x for corner in self._corners]
        ys = [corner.y for corner in self._corners]
        if center:
            return ((min(xs) + max(xs)) * 0.5, (min(ys) + max(ys)) * 0.5)
        return (max(xs) - min(xs), max(ys) - min(ys))

    def reset(self) -> None:
        for corner in list(self._corners):
            corner.remove()
        for wall in list(self._walls):
            wall.remove()
        self._corners = []
        self._walls = []
        self._rooms = []

    def _remove_corner(self, corner: Corner) -> None:
        self._corners = [c for c in self._corners if c is not corner]

    def _remove_wall(self, wall: Wall) -> None:
        self._walls = [w for w in self._walls if w is not wall]
        self.update()

    def _update_floor_textures(self) -> None:
        uuids = set(room.get_uuid() for room in self._rooms)
        for uuid in list(self._floor_textures):
            if uuid not in uuids:
                LOGGER.debug("Dropping floor texture of vanished room %s", uuid)
                del self._floor_textures[uuid]

    def _assign_orphan_edges(self) -> List[Wall]:
        orphans = []
        for wall in self._walls:
            if wall.front_edge is None and wall.back_edge is None:
                wall.orphan = True
                back = HalfEdge(None, wall, False)
                back.generate_plane()
                front = HalfEdge(None, wall, True)
                front.generate_plane()
                orphans.append(wall)
        return orphans
