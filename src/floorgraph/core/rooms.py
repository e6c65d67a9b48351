"""Room detection in the wall graph.

This module enumerates the minimal bounded faces of the planar graph formed
by corners and walls. From every directed wall a depth-first walk follows
the sharpest available turn until it comes back to its first corner; the
resulting cycles are deduplicated up to rotation and only the
counter-clockwise ones (bounded faces) are kept as rooms.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Set, Tuple

from ..geom.utils import angle2pi, cycle, is_clockwise

if TYPE_CHECKING:
    from .corner import Corner

LOGGER = logging.getLogger(__name__)

ROOM_KEY_SEPARATOR = "-"


def calculate_theta(previous_corner: Corner, current_corner: Corner, next_corner: Corner) -> float:
    """Turning angle at ``current_corner`` when arriving from ``previous_corner``.

    Measured from the reversed incoming direction to the outgoing direction
    in [0, 2*pi); smaller values are sharper left turns.
    """
    return angle2pi(
        previous_corner.x - current_corner.x,
        previous_corner.y - current_corner.y,
        next_corner.x - current_corner.x,
        next_corner.y - current_corner.y,
    )


def sort_by_theta(
    previous_corner: Corner, current_corner: Corner, candidates: Iterable[Corner]
) -> List[Corner]:
    """Order candidate next corners for pushing onto the walk stack.

    The largest turning angle comes first, so the sharpest turn ends up on
    top of the stack. Candidates with equal angles keep their order.
    """
    return sorted(
        candidates,
        key=lambda corner: calculate_theta(previous_corner, current_corner, corner),
        reverse=True,
    )


def find_tightest_cycle(first_corner: Corner, second_corner: Corner) -> List[Corner]:
    """Walk from ``first_corner`` through ``second_corner`` back to the start.

    The walk is an explicit-stack depth-first search over
    (corner, path so far) frames. Corners are not revisited, except that the
    first corner may be re-entered from any neighbour other than
    ``second_corner``.

    Args:
        first_corner: Corner the cycle starts and ends at.
        second_corner: Neighbour the walk leaves towards first.

    Returns:
        The cycle's corners starting with ``first_corner``, or an empty list
        if the walk cannot close.
    """
    stack: List[Tuple[Corner, List[Corner]]] = []
    frame: Optional[Tuple[Corner, List[Corner]]] = (second_corner, [first_corner])
    visited: Set[str] = {first_corner.id}

    while frame is not None:
        current_corner, previous_corners = frame
        visited.add(current_corner.id)

        # back at the start?
        if current_corner is first_corner:
            return previous_corners

        candidates = []
        for next_corner in current_corner.adjacent_corners():
            may_close = next_corner is first_corner and current_corner is not second_corner
            if next_corner.id in visited and not may_close:
                continue
            candidates.append(next_corner)

        path = previous_corners + [current_corner]
        if len(candidates) > 1:
            candidates = sort_by_theta(previous_corners[-1], current_corner, candidates)

        for corner in candidates:
            stack.append((corner, path))

        frame = stack.pop() if stack else None

    return []


def room_key(corners: List[Corner]) -> str:
    return ROOM_KEY_SEPARATOR.join(corner.id for corner in corners)


def remove_duplicate_rooms(rooms: List[List[Corner]]) -> List[List[Corner]]:
    """Keep the first occurrence of every cycle, comparing up to rotation.

    Empty cycles are dropped.
    """
    results = []
    lookup: Dict[str, bool] = {}

    for room in rooms:
        if not room:
            continue
        keys = [room_key(cycle(room, shift)) for shift in range(len(room))]
        if any(key in lookup for key in keys):
            continue
        results.append(room)
        lookup[keys[0]] = True

    return results


def find_rooms(corners: Iterable[Corner]) -> List[List[Corner]]:
    """Find the rooms of a planar straight-line graph.

    Rooms are the smallest cycles of the graph, each returned as its corners
    in counter-clockwise order.

    Args:
        corners: All corners of the floorplan.

    Returns:
        List of rooms, each a list of corners.
    """
    loops = []
    for first_corner in corners:
        for second_corner in first_corner.adjacent_corners():
            loops.append(find_tightest_cycle(first_corner, second_corner))

    unique_loops = remove_duplicate_rooms(loops)
    ccw_loops = [loop for loop in unique_loops if not is_clockwise(loop)]

    LOGGER.debug(
        "Face walk: %d loops, %d unique, %d counter-clockwise",
        len(loops),
        len(unique_loops),
        len(ccw_loops),
    )
    return ccw_loops
