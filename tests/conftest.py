import pytest

from floorgraph import Floorplan
from floorgraph.core.configuration import Configuration


@pytest.fixture(autouse=True)
def reset_configuration():
    Configuration.reset()
    yield
    Configuration.reset()


def build_plan(corners, walls):
    """Create a floorplan from ``{id: (x, y)}`` and ``[(start_id, end_id)]``."""
    floorplan = Floorplan()
    created = {}
    for corner_id, (x, y) in corners.items():
        created[corner_id] = floorplan.new_corner(x, y, corner_id)
    for start, end in walls:
        floorplan.new_wall(created[start], created[end])
    return floorplan, created


@pytest.fixture
def square():
    # walls drawn clockwise; the room runs a -> d -> c -> b
    return build_plan(
        {"a": (0, 0), "b": (0, 400), "c": (400, 400), "d": (400, 0)},
        [("a", "b"), ("b", "c"), ("c", "d"), ("d", "a")],
    )
