"""
Engine defaults and the runtime configuration registry.
"""

from __future__ import annotations

from typing import Any, Dict

# Graph editing
CORNER_TOLERANCE = 20.0  # Corners closer than this merge, corners this close to a wall split it
DEFAULT_FLOORPLAN_TOLERANCE = 10.0  # Hit-test radius for overlapped_corner / overlapped_wall

# Configuration keys
CONFIG_DIM_UNIT = "dimUnit"
CONFIG_WALL_HEIGHT = "wallHeight"
CONFIG_WALL_THICKNESS = "wallThickness"

# Dimension units
DIM_INCH = "inch"
DIM_METER = "m"
DIM_CENTIMETER = "cm"
DIM_MILLIMETER = "mm"

DEFAULTS: Dict[str, Any] = {
    CONFIG_DIM_UNIT: DIM_INCH,
    CONFIG_WALL_HEIGHT: 250,
    CONFIG_WALL_THICKNESS: 10,
}


class Configuration:
    """Process-wide settings, read when walls are created and measures formatted."""

    _data: Dict[str, Any] = dict(DEFAULTS)

    @classmethod
    def set_value(cls, key: str, value: Any) -> None:
        cls._data[key] = value

    @classmethod
    def get_string_value(cls, key: str) -> str:
        return str(cls._get(key))

    @classmethod
    def get_numeric_value(cls, key: str) -> float:
        """Get a numeric setting.

        Raises:
            ValueError: If the key is unknown or its value is not a number.
        """
        value = cls._get(key)
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Configuration value for '{key}' is not numeric: {value!r}") from e

    @classmethod
    def reset(cls) -> None:
        cls._data = dict(DEFAULTS)

    @classmethod
    def _get(cls, key: str) -> Any:
        if key not in cls._data:
            raise ValueError(f"Unknown configuration key: {key}")
        return cls._data[key]
