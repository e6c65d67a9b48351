"""Core value types for the wall graph.

This module defines the small immutable values shared by corners, walls,
half-edges and rooms: 2D points and the texture references stored per wall
side and per room floor.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Point:
    """Represents a 2D point in space.

    Attributes:
        x: The x-coordinate of the point.
        y: The y-coordinate of the point.
    """

    x: float
    y: float


@dataclass(frozen=True)
class WallTexture:
    """Texture reference for one side of a wall.

    Attributes:
        url: Location of the texture image, resolved by the renderer.
        stretch: Whether the texture is stretched over the whole wall face.
        scale: Tile size used when the texture is not stretched.
    """

    url: str
    stretch: bool = True
    scale: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WallTexture":
        return cls(
            url=str(data["url"]),
            stretch=bool(data.get("stretch", True)),
            scale=float(data.get("scale", 0)),
        )


@dataclass(frozen=True)
class FloorTexture:
    """Texture reference for a room floor.

    Attributes:
        url: Location of the texture image.
        scale: Tile size of the texture.
    """

    url: str
    scale: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FloorTexture":
        return cls(url=str(data["url"]), scale=float(data["scale"]))


DEFAULT_WALL_TEXTURE = WallTexture(url="rooms/textures/wallmap.png", stretch=True, scale=0)
DEFAULT_FLOOR_TEXTURE = FloorTexture(url="rooms/textures/hardwood.png", scale=400)
