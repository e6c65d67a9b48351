"""floorgraph - wall graph, room detection and mitered wall geometry for floor plans."""

__version__ = "0.1.0"
__author__ = "Marco"
__email__ = "marco@example.com"

from .core.corner import Corner
from .core.floorplan import Floorplan
from .core.half_edge import HalfEdge
from .core.model import FloorTexture, Point, WallTexture
from .core.room import Room
from .core.validators import TopologyError
from .core.wall import Wall

__all__ = [
    "Corner",
    "Floorplan",
    "FloorTexture",
    "HalfEdge",
    "Point",
    "Room",
    "TopologyError",
    "Wall",
    "WallTexture",
]
