"""Corners: the nodes of the wall graph.

A corner keeps non-owning back-references to the walls that start and end
at it. Moving a corner is where the graph heals itself: a corner dropped
onto another corner absorbs it, and a corner dropped onto a wall splits
that wall in two.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Dict, List, Optional

from ..geom.utils import closest_point_on_line, distance
from .configuration import CORNER_TOLERANCE
from .events import EventHook

if TYPE_CHECKING:
    from .floorplan import Floorplan
    from .wall import Wall

LOGGER = logging.getLogger(__name__)


def guid() -> str:
    return str(uuid.uuid4())


class Corner:
    """A graph node with a 2D position.

    Attributes:
        floorplan: The floorplan owning this corner.
        x: X coordinate.
        y: Y coordinate.
        id: Stable unique identifier.
        wall_starts: Walls whose start is this corner, in attachment order.
        wall_ends: Walls whose end is this corner, in attachment order.
        moved: Fired with (x, y) after every move.
        deleted: Fired with the corner when it is removed.
        action: Free-form notifications for collaborators.
    """

    def __init__(self, floorplan: Floorplan, x: float, y: float, id: Optional[str] = None):
        self.floorplan = floorplan
        self.x = x
        self.y = y
        self.id = id or guid()

        self.wall_starts: List[Wall] = []
        self.wall_ends: List[Wall] = []

        self.moved = EventHook()
        self.deleted = EventHook()
        self.action = EventHook()

    def __repr__(self) -> str:
        return f"Corner({self.id!r}, x={self.x}, y={self.y})"

    def fire_action(self, payload) -> None:
        self.action.fire(payload)

    def snap_to_axis(self, tolerance: float) -> Dict[str, bool]:
        """Align this corner with its neighbours when nearly axis-aligned.

        For every adjacent corner, an x (or y) difference under ``tolerance``
        is collapsed so the connecting wall becomes vertical (or horizontal).

        Returns:
            Which axes were snapped, as ``{"x": bool, "y": bool}``.
        """
        snapped = {"x": False, "y": False}

        for corner in self.adjacent_corners():
            if abs(corner.x - self.x) < tolerance:
                self.x = corner.x
                snapped["x"] = True
            if abs(corner.y - self.y) < tolerance:
                self.y = corner.y
                snapped["y"] = True

        return snapped

    def relative_move(self, dx: float, dy: float) -> None:
        self.move(self.x + dx, self.y + dy)

    def move(self, new_x: float, new_y: float) -> None:
        """Move the corner, merging it with whatever it lands on.

        After the position is set the corner always tries
        :meth:`merge_with_intersected`, which may absorb another corner or
        split a wall and rebuild the floorplan. Move subscribers and all
        incident walls are notified afterwards.
        """
        self.x = new_x
        self.y = new_y
        self.merge_with_intersected()
        self.moved.fire(self.x, self.y)

        for wall in list(self.wall_starts):
            wall.fire_moved()
        for wall in list(self.wall_ends):
            wall.fire_moved()

    def remove(self) -> None:
        """Fire the deleted hook; the floorplan drops the corner in response."""
        self.deleted.fire(self)

    def remove_all(self) -> None:
        """Remove every incident wall, then this corner."""
        for wall in list(self.wall_starts):
            wall.remove()
        for wall in list(self.wall_ends):
            wall.remove()
        self.remove()

    def adjacent_corners(self) -> List[Corner]:
        """Corners one wall away: ends of outgoing walls, then starts of incoming walls."""
        corners = [wall.end for wall in self.wall_starts]
        corners.extend(wall.start for wall in self.wall_ends)
        return corners

    def distance_from(self, x: float, y: float) -> float:
        return distance(x, y, self.x, self.y)

    def distance_from_wall(self, wall: Wall) -> float:
        return wall.distance_from(self.x, self.y)

    def distance_from_corner(self, corner: Corner) -> float:
        return self.distance_from(corner.x, corner.y)

    def detach_wall(self, wall: Wall) -> None:
        """Forget a wall; a corner left with no walls removes itself."""
        self.wall_starts = [w for w in self.wall_starts if w is not wall]
        self.wall_ends = [w for w in self.wall_ends if w is not wall]
        if not self.wall_starts and not self.wall_ends:
            self.remove()

    def attach_start(self, wall: Wall) -> None:
        self.wall_starts.append(wall)

    def attach_end(self, wall: Wall) -> None:
        self.wall_ends.append(wall)

    def wall_to(self, corner: Corner) -> Optional[Wall]:
        """Wall running from this corner to ``corner``, if any."""
        for wall in self.wall_starts:
            if wall.end is corner:
                return wall
        return None

    def wall_from(self, corner: Corner) -> Optional[Wall]:
        """Wall running from ``corner`` to this corner, if any."""
        for wall in self.wall_ends:
            if wall.start is corner:
                return wall
        return None

    def wall_to_or_from(self, corner: Corner) -> Optional[Wall]:
        return self.wall_to(corner) or self.wall_from(corner)

    def is_wall_connected(self, wall: Wall) -> bool:
        return any(w is wall for w in self.wall_starts) or any(w is wall for w in self.wall_ends)

    def merge_with_intersected(self) -> bool:
        """Merge this corner with a nearby corner or wall.

        Other corners are checked first, in the floorplan's corner order; the
        first one closer than ``CORNER_TOLERANCE`` is absorbed. Failing that,
        the first wall (in wall order) within tolerance that is not already
        attached here is split at the projection of this corner: the original
        wall keeps its identity and now ends here, a new wall covers the
        remainder.

        Returns:
            True if a merge or split happened.
        """
        for corner in self.floorplan.corners:
            if corner is not self and self.distance_from_corner(corner) < CORNER_TOLERANCE:
                self.combine_with_corner(corner)
                return True

        for wall in self.floorplan.walls:
            if self.distance_from_wall(wall) < CORNER_TOLERANCE and not self.is_wall_connected(wall):
                LOGGER.debug("Corner %s splits wall %s", self.id, wall.id)
                intersection = closest_point_on_line(
                    self.x, self.y, wall.start.x, wall.start.y, wall.end.x, wall.end.y
                )
                self.x = intersection.x
                self.y = intersection.y

                remainder = self.floorplan.new_wall(self, wall.end)
                remainder.thickness = wall.thickness
                remainder.height = wall.height
                remainder.front_texture = wall.front_texture
                remainder.back_texture = wall.back_texture

                wall.set_end(self)
                # a wall this corner already had to the far end is now doubled
                self.remove_duplicate_walls()
                self.floorplan.update()
                return True

        return False

    def combine_with_corner(self, corner: Corner) -> None:
        """Absorb ``corner``: take its position and walls, then delete it.

        Walls that become zero-length or parallel duplicates are pruned and
        the floorplan is rebuilt.
        """
        LOGGER.debug("Corner %s absorbs corner %s", self.id, corner.id)
        self.x = corner.x
        self.y = corner.y

        for wall in reversed(list(corner.wall_starts)):
            wall.set_start(self)
        for wall in reversed(list(corner.wall_ends)):
            wall.set_end(self)

        corner.remove_all()
        self.remove_duplicate_walls()
        self.floorplan.update()

    def remove_duplicate_walls(self) -> None:
        """Drop zero-length walls and walls doubling an earlier one.

        Attached walls are scanned in attachment order, starts before ends.
        The first wall reaching a given opposite corner is kept; later walls
        to the same corner, in either direction, are removed.
        """
        seen = set()

        for wall in list(self.wall_starts) + list(self.wall_ends):
            if not self.is_wall_connected(wall):
                continue
            if wall.start is wall.end:
                LOGGER.debug("Removing zero-length wall %s", wall.id)
                wall.remove()
                continue

            opposite = wall.opposite_corner(self)
            if opposite.id in seen:
                LOGGER.debug("Removing duplicate wall %s", wall.id)
                wall.remove()
            else:
                seen.add(opposite.id)
