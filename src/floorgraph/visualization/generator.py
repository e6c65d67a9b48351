"""Image generation for floorplan inspection.

This module renders a floorplan to PNG: room floors as filled polygons
labelled with their area, and every wall side as its mitered outline.
"""

import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from ..core.dimensioning import cm_to_measure  # noqa: E402
from ..core.floorplan import Floorplan  # noqa: E402

LOGGER = logging.getLogger(__name__)

# Drawing parameters
ROOM_COLORS = ["#AEC7E8", "#FFBB78", "#98DF8A", "#FF9896", "#C5B0D5", "#C49C94", "#F7B6D2"]
WALL_COLOR = "#444444"
ORPHAN_WALL_COLOR = "#D62728"
FIGURE_SIZE = (10, 10)
DPI = 140


def generate_floorplan_image(floorplan: Floorplan, output_path: Path) -> bool:
    """Generate a PNG image of a floorplan.

    Args:
        floorplan: An up-to-date floorplan.
        output_path: Path where to save the PNG image.

    Returns:
        True if the image was generated successfully, False otherwise.
    """
    output_path = Path(output_path)
    fig = None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)

        fig, ax = plt.subplots(figsize=FIGURE_SIZE)

        for i, room in enumerate(floorplan.rooms):
            if room.floor_plane is None:
                continue
            xs, ys = room.floor_plane.exterior.xy
            ax.fill(xs, ys, color=ROOM_COLORS[i % len(ROOM_COLORS)], alpha=0.7, linewidth=0)
            center = room.floor_plane.representative_point()
            # areas are cm^2; label in square metres
            ax.text(center.x, center.y, f"{room.area / 10000.0:.2f} m²",
                    ha="center", va="center", fontsize=9, fontweight="bold")

        for edge in floorplan.wall_edges():
            outline = edge.corners()
            xs = [p.x for p in outline] + [outline[0].x]
            ys = [p.y for p in outline] + [outline[0].y]
            color = ORPHAN_WALL_COLOR if edge.wall.orphan else WALL_COLOR
            ax.fill(xs, ys, facecolor=color, alpha=0.5, edgecolor=color, linewidth=0.5)

        for wall in floorplan.walls:
            mid_x = (wall.start.x + wall.end.x) / 2.0
            mid_y = (wall.start.y + wall.end.y) / 2.0
            ax.text(mid_x, mid_y, cm_to_measure(wall.length()), fontsize=6, color="#1F1F1F")

        ax.set_aspect("equal", adjustable="box")
        ax.axis("off")
        fig.tight_layout()
        fig.savefig(output_path, dpi=DPI)
        return True

    except (OSError, ValueError) as e:
        LOGGER.error("Error in image generation: %s", e)
        return False

    finally:
        if fig is not None:
            plt.close(fig)
