"""Topology analysis for floorplans.

This module exposes the wall graph and the room adjacency of a floorplan
as NetworkX graphs, for connectivity queries that do not belong in the
editing engine itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from .floorplan import Floorplan


def build_corner_graph(floorplan: Floorplan) -> nx.Graph:
    """Build the undirected wall graph.

    Nodes are corner ids with ``pos=(x, y)``; edges are walls with
    ``wall_id``, ``length`` and ``orphan`` attributes.

    Args:
        floorplan: Floorplan to convert; should be up to date.

    Returns:
        NetworkX Graph of corners and walls.
    """
    G = nx.Graph()

    for corner in floorplan.corners:
        G.add_node(corner.id, pos=(corner.x, corner.y))

    for wall in floorplan.walls:
        G.add_edge(
            wall.start.id,
            wall.end.id,
            wall_id=wall.id,
            length=wall.length(),
            orphan=wall.orphan,
        )

    return G


def build_room_graph(floorplan: Floorplan) -> nx.Graph:
    """Build a graph of rooms sharing a wall.

    Two rooms are adjacent when one wall's front half-edge bounds the first
    and its back half-edge bounds the second.

    Args:
        floorplan: Floorplan whose last ``update()`` defines the rooms.

    Returns:
        NetworkX Graph keyed by room identity, edges carrying ``wall_id``.
    """
    G = nx.Graph()

    for room in floorplan.rooms:
        G.add_node(room.get_uuid(), area=room.area)

    for wall in floorplan.walls:
        if wall.front_edge is None or wall.back_edge is None:
            continue
        front_room = wall.front_edge.room
        back_room = wall.back_edge.room
        if front_room is None or back_room is None or front_room is back_room:
            continue
        G.add_edge(front_room.get_uuid(), back_room.get_uuid(), wall_id=wall.id)

    return G


def count_components(floorplan: Floorplan) -> int:
    """Number of connected pieces of the wall graph (isolated corners count)."""
    return nx.number_connected_components(build_corner_graph(floorplan))
