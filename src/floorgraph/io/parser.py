"""Floorplan JSON files.

This module loads floorplan JSON files into ``Floorplan`` objects and
writes them back, using the dictionary shape of
``Floorplan.save_floorplan``.
"""

import json
import logging
from pathlib import Path

from ..core.floorplan import Floorplan

LOGGER = logging.getLogger(__name__)


def load_floorplan(path: str) -> Floorplan:
    """Load a floorplan from a JSON file.

    Args:
        path: Path to the JSON file containing floorplan data.

    Returns:
        Floorplan with rooms already computed.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the JSON data is invalid or malformed.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    # Some exports wrap the plan together with furniture
    if isinstance(data, dict) and "floorplan" in data and "corners" not in data:
        data = data["floorplan"]

    if not isinstance(data, dict):
        raise ValueError(f"Invalid floorplan file {path}: expected a JSON object")

    floorplan = Floorplan()
    floorplan.load_floorplan(data)
    LOGGER.info(
        "Loaded %s: %d corners, %d walls, %d rooms",
        file_path.name,
        len(floorplan.corners),
        len(floorplan.walls),
        len(floorplan.rooms),
    )
    return floorplan


def save_floorplan(floorplan: Floorplan, output_path: str) -> None:
    """Save a floorplan to a JSON file.

    Args:
        floorplan: The floorplan to save.
        output_path: Path where to save the JSON file.
    """
    # Ensure output directory exists
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(floorplan.save_floorplan(), f, indent=2)
