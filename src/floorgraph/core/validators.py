"""Post-rebuild validation of the wall graph.

This module provides checks that are run after ``Floorplan.update()`` to
make sure the corner/wall graph and its derived half-edges are consistent.
A failure here means the edit or rebuild pipeline itself is broken, not
that the user drew something unusual.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Set, Tuple

if TYPE_CHECKING:
    from .floorplan import Floorplan

LOGGER = logging.getLogger(__name__)


class TopologyError(Exception):
    """Raised when the wall graph or its derived geometry is inconsistent."""

    pass


def validate_attachments(floorplan: Floorplan) -> None:
    """Check that every wall is attached to both of its endpoint corners.

    Args:
        floorplan: The floorplan to validate.

    Raises:
        TopologyError: If a wall is degenerate or its corners do not list it.
    """
    live_corners = set(id(corner) for corner in floorplan.corners)

    for wall in floorplan.walls:
        if wall.start is wall.end:
            raise TopologyError(f"Wall '{wall.id}' starts and ends at the same corner")
        if id(wall.start) not in live_corners or id(wall.end) not in live_corners:
            raise TopologyError(f"Wall '{wall.id}' references a removed corner")
        if wall not in wall.start.wall_starts:
            raise TopologyError(f"Wall '{wall.id}' missing from its start corner")
        if wall not in wall.end.wall_ends:
            raise TopologyError(f"Wall '{wall.id}' missing from its end corner")


def validate_unique_walls(floorplan: Floorplan) -> None:
    """Check that no two walls join the same pair of corners.

    Raises:
        TopologyError: If a duplicate endpoint pair is found.
    """
    seen: Set[Tuple[int, int]] = set()
    for wall in floorplan.walls:
        key = tuple(sorted((id(wall.start), id(wall.end))))
        if key in seen:
            raise TopologyError(
                f"Duplicate wall between corners '{wall.start.id}' and '{wall.end.id}'"
            )
        seen.add(key)


def validate_edges(floorplan: Floorplan) -> None:
    """Check that the last rebuild gave every wall its half-edges.

    Room walls need at least one half-edge, orphan walls need both.

    Raises:
        TopologyError: If a wall was left without geometry.
    """
    for wall in floorplan.walls:
        if wall.orphan:
            if wall.front_edge is None or wall.back_edge is None:
                raise TopologyError(f"Orphan wall '{wall.id}' is missing a half-edge")
        elif wall.front_edge is None and wall.back_edge is None:
            raise TopologyError(f"Wall '{wall.id}' has no half-edges; rebuild is stale")


def validate_floorplan(floorplan: Floorplan) -> None:
    """Run every graph check, raising on the first violation.

    Raises:
        TopologyError: Describing the first inconsistency found.
    """
    validate_attachments(floorplan)
    validate_unique_walls(floorplan)
    validate_edges(floorplan)


def validate_all(floorplan: Floorplan) -> bool:
    """Boolean form of :func:`validate_floorplan`."""
    try:
        validate_floorplan(floorplan)
    except TopologyError as e:
        LOGGER.error("Floorplan validation failed: %s", e)
        return False
    return True
