"""Core value types, settings and notifications for the wall graph.

Graph classes (``Corner``, ``Wall``, ``HalfEdge``, ``Room``, ``Floorplan``)
live in their own modules and are re-exported from the top-level package.
"""

from .configuration import CORNER_TOLERANCE, Configuration
from .events import EventHook
from .model import FloorTexture, Point, WallTexture

__all__ = ["CORNER_TOLERANCE", "Configuration", "EventHook", "FloorTexture", "Point", "WallTexture"]
