"""Persisted floorplan schema.

This module describes the dictionary shape a floorplan is saved to and
loaded from, and validates raw (usually JSON-decoded) data against it.
A payload without ``corners`` or ``walls`` is not an error: it stands for
an empty floorplan and parses to ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .model import FloorTexture, WallTexture

# Key under which floor textures are saved; the plain key is read as a fallback
FLOOR_TEXTURES_KEY = "newFloorTextures"
LEGACY_FLOOR_TEXTURES_KEY = "floorTextures"


@dataclass(frozen=True)
class CornerRecord:
    """A saved corner position."""

    x: float
    y: float


@dataclass(frozen=True)
class WallRecord:
    """A saved wall.

    Attributes:
        corner1: Id of the start corner.
        corner2: Id of the end corner.
        front_texture: Front face texture, if one was saved.
        back_texture: Back face texture, if one was saved.
    """

    corner1: str
    corner2: str
    front_texture: Optional[WallTexture] = None
    back_texture: Optional[WallTexture] = None


@dataclass
class FloorplanData:
    """Complete saved floorplan.

    Attributes:
        corners: Corner id -> position, in creation order.
        walls: Walls in creation order.
        floor_textures: Room identity -> floor texture.
    """

    corners: Dict[str, CornerRecord] = field(default_factory=dict)
    walls: List[WallRecord] = field(default_factory=list)
    floor_textures: Dict[str, FloorTexture] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        walls = []
        for wall in self.walls:
            record: Dict[str, Any] = {"corner1": wall.corner1, "corner2": wall.corner2}
            if wall.front_texture is not None:
                record["frontTexture"] = wall.front_texture.to_dict()
            if wall.back_texture is not None:
                record["backTexture"] = wall.back_texture.to_dict()
            walls.append(record)

        return {
            "corners": {cid: {"x": c.x, "y": c.y} for cid, c in self.corners.items()},
            "walls": walls,
            "wallTextures": [],
            LEGACY_FLOOR_TEXTURES_KEY: {},
            FLOOR_TEXTURES_KEY: {
                uid: texture.to_dict() for uid, texture in self.floor_textures.items()
            },
        }


def _parse_wall_texture(data: Any, wall_index: int, side: str) -> Optional[WallTexture]:
    if not data:
        return None
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {side} for wall #{wall_index}: expected an object")
    try:
        return WallTexture.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid {side} for wall #{wall_index}: {e}") from e


def parse_floorplan_data(data: Optional[Dict[str, Any]]) -> Optional[FloorplanData]:
    """Validate raw floorplan data.

    Args:
        data: Decoded floorplan dictionary.

    Returns:
        The parsed floorplan, or None if ``data`` is None or lacks the
        ``corners`` or ``walls`` key.

    Raises:
        ValueError: If a present record is malformed, e.g. a corner without
            numeric coordinates or a wall naming an unknown corner.
    """
    if data is None or "corners" not in data or "walls" not in data:
        return None

    raw_corners = data["corners"]
    raw_walls = data["walls"]
    if not isinstance(raw_corners, dict):
        raise ValueError("Invalid floorplan: 'corners' must be an object")
    if not isinstance(raw_walls, list):
        raise ValueError("Invalid floorplan: 'walls' must be a list")

    corners = {}
    for corner_id, corner_data in raw_corners.items():
        try:
            corners[str(corner_id)] = CornerRecord(
                x=float(corner_data["x"]), y=float(corner_data["y"])
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid corner data for {corner_id}: {e}") from e

    walls = []
    for i, wall_data in enumerate(raw_walls):
        try:
            corner1 = str(wall_data["corner1"])
            corner2 = str(wall_data["corner2"])
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid wall data for wall #{i}: {e}") from e

        for corner_id in (corner1, corner2):
            if corner_id not in corners:
                raise ValueError(f"Wall #{i} references nonexistent corner '{corner_id}'")
        if corner1 == corner2:
            raise ValueError(f"Wall #{i} starts and ends at corner '{corner1}'")

        walls.append(
            WallRecord(
                corner1=corner1,
                corner2=corner2,
                front_texture=_parse_wall_texture(wall_data.get("frontTexture"), i, "frontTexture"),
                back_texture=_parse_wall_texture(wall_data.get("backTexture"), i, "backTexture"),
            )
        )

    raw_textures = data.get(FLOOR_TEXTURES_KEY)
    if raw_textures is None:
        raw_textures = data.get(LEGACY_FLOOR_TEXTURES_KEY) or {}
    if not isinstance(raw_textures, dict):
        raise ValueError("Invalid floorplan: floor textures must be an object")

    floor_textures = {}
    for room_id, texture_data in raw_textures.items():
        try:
            floor_textures[str(room_id)] = FloorTexture.from_dict(texture_data)
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid floor texture for room {room_id}: {e}") from e

    return FloorplanData(corners=corners, walls=walls, floor_textures=floor_textures)
