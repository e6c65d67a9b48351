import pytest
from shapely.geometry import Polygon

from floorgraph.core.model import DEFAULT_FLOOR_TEXTURE, Point
from floorgraph.core.room import Room
from floorgraph.core.validators import TopologyError


def test_square_room_interior_corners(square):
    floorplan, _ = square
    room = floorplan.rooms[0]

    expected = [(5, 5), (395, 5), (395, 395), (5, 395)]
    assert len(room.interior_corners) == 4
    for point, (x, y) in zip(room.interior_corners, expected):
        assert point.x == pytest.approx(x)
        assert point.y == pytest.approx(y)


def test_floor_plane_and_area(square):
    floorplan, _ = square
    room = floorplan.rooms[0]

    assert isinstance(room.floor_plane, Polygon)
    assert room.area == pytest.approx(390 * 390)
    assert floorplan.floor_planes() == [room.floor_plane]


def test_uuid_is_sorted_corner_ids(square):
    floorplan, _ = square

    assert floorplan.rooms[0].get_uuid() == "a,b,c,d"


def test_cycle_index(square):
    floorplan, _ = square
    room = floorplan.rooms[0]

    assert room.cycle_index(4) == 0
    assert room.cycle_index(-1) == 3


def test_texture_defaults_and_updates(square):
    floorplan, _ = square
    room = floorplan.rooms[0]
    changes = []
    room.floor_changed.add(lambda: changes.append(True))

    assert room.get_texture() == DEFAULT_FLOOR_TEXTURE

    room.set_texture("rooms/textures/marble.jpg", True, 300)

    assert changes == [True]
    assert room.get_texture().url == "rooms/textures/marble.jpg"
    assert room.get_texture().scale == 300
    assert floorplan.get_floor_texture("a,b,c,d") is not None


def test_texture_survives_rebuild(square):
    floorplan, _ = square
    floorplan.rooms[0].set_texture("rooms/textures/marble.jpg", True, 300)

    floorplan.update()

    assert floorplan.rooms[0].get_texture().url == "rooms/textures/marble.jpg"


def test_unconnected_corners_raise(square):
    floorplan, c = square

    with pytest.raises(TopologyError):
        Room(floorplan, [c["a"], c["c"], c["b"]])


def test_mitered_floor_is_inset_by_wall_thickness(square):
    floorplan, c = square
    for wall in floorplan.walls:
        wall.thickness = 20
    floorplan.update()

    room = floorplan.rooms[0]
    assert room.interior_corners[0].x == pytest.approx(10)
    assert room.interior_corners[0].y == pytest.approx(10)
    assert room.area == pytest.approx(380 * 380)
    assert Point(c["a"].x, c["a"].y) == Point(0, 0)
