import math

import pytest

from floorgraph.core.half_edge import HalfEdge
from floorgraph.core.validators import TopologyError
from floorgraph.geom.transform import apply_transform
from floorgraph.geom.utils import point_distance_from_line

from conftest import build_plan


def line_distance(point, corner1, corner2):
    """Distance from a point to the infinite line through two corners."""
    dx = corner2.x - corner1.x
    dy = corner2.y - corner1.y
    return abs(dy * (point.x - corner1.x) - dx * (point.y - corner1.y)) / math.hypot(dx, dy)


@pytest.fixture
def triangle():
    return build_plan(
        {"a": (0, 0), "b": (400, 0), "c": (0, 300)},
        [("a", "b"), ("b", "c"), ("c", "a")],
    )


def test_room_edges_are_linked_in_a_ring(triangle):
    floorplan, _ = triangle
    edges = floorplan.rooms[0].edges

    assert len(edges) == 3
    for edge in edges:
        assert edge.next.prev is edge
        assert edge.next.get_start() is edge.get_end()
        assert edge.room is floorplan.rooms[0]


def test_interior_corners_sit_half_a_thickness_from_both_walls(triangle):
    floorplan, _ = triangle

    for edge in floorplan.rooms[0].edges:
        start = edge.interior_start()
        assert line_distance(start, edge.get_start(), edge.get_end()) == pytest.approx(5.0)
        assert line_distance(start, edge.prev.get_start(), edge.prev.get_end()) == pytest.approx(5.0)

        end = edge.exterior_end()
        assert line_distance(end, edge.get_start(), edge.get_end()) == pytest.approx(5.0)


def test_square_room_miter(square):
    floorplan, c = square
    edge = floorplan.rooms[0].edges[0]

    # first edge runs a -> d along the back of wall d -> a
    assert edge.wall is c["d"].wall_to(c["a"])
    assert not edge.front
    assert edge.interior_start().x == pytest.approx(5)
    assert edge.interior_start().y == pytest.approx(5)
    assert edge.interior_end().x == pytest.approx(395)
    assert edge.interior_end().y == pytest.approx(5)
    assert edge.exterior_start().x == pytest.approx(-5)
    assert edge.exterior_start().y == pytest.approx(-5)
    assert edge.interior_distance() == pytest.approx(390)
    assert edge.interior_center().x == pytest.approx(200)
    assert edge.distance_to(200, 50) == pytest.approx(45)


def test_square_walls_have_only_back_edges(square):
    floorplan, c = square
    wall = c["a"].wall_to(c["b"])

    assert wall.half_edge(False).room is floorplan.rooms[0]
    with pytest.raises(TopologyError):
        wall.half_edge(True)
    assert wall.back_edge.get_opposite_edge() is None


def test_orphan_wall_gets_both_edges():
    floorplan, c = build_plan({"a": (0, 0), "b": (100, 0)}, [("a", "b")])
    wall = floorplan.walls[0]

    assert floorplan.rooms == []
    assert wall.orphan
    front = wall.half_edge(True)
    back = wall.half_edge(False)
    assert front.room is None and back.room is None
    assert front.get_opposite_edge() is back

    assert front.interior_start().x == pytest.approx(0)
    assert front.interior_start().y == pytest.approx(5)
    assert front.interior_end().x == pytest.approx(100)
    assert front.interior_end().y == pytest.approx(5)
    assert back.interior_start().x == pytest.approx(100)
    assert back.interior_start().y == pytest.approx(-5)
    assert back.interior_end().x == pytest.approx(0)
    assert back.interior_end().y == pytest.approx(-5)


def test_wall_plane_and_transforms():
    floorplan, _ = build_plan({"a": (0, 0), "b": (100, 0)}, [("a", "b")])
    front = floorplan.walls[0].front_edge

    assert front.plane.shape == (4, 3)
    assert front.plane[2][2] == pytest.approx(250)
    assert front.plane[0][2] == pytest.approx(0)

    start = apply_transform(front.interior_transform, front.interior_start())
    end = apply_transform(front.interior_transform, front.interior_end())
    assert start.x == pytest.approx(0, abs=1e-9)
    assert start.y == pytest.approx(0, abs=1e-9)
    assert end.x == pytest.approx(100)
    assert end.y == pytest.approx(0, abs=1e-9)

    world = apply_transform(front.inv_interior_transform, end)
    assert world.x == pytest.approx(100)
    assert world.y == pytest.approx(5)

    local = apply_transform(front.exterior_transform, front.exterior_end())
    assert local.x == pytest.approx(100)


def test_edge_offset_follows_wall_thickness():
    floorplan, _ = build_plan({"a": (0, 0), "b": (100, 0)}, [("a", "b")])
    floorplan.walls[0].thickness = 30
    floorplan.update()

    front = floorplan.walls[0].front_edge
    assert front.offset == pytest.approx(15)
    assert front.interior_start().y == pytest.approx(15)


def test_folded_back_joint_falls_back_to_perpendicular_offset():
    _, c = build_plan({"a": (0, 0), "b": (100, 0), "c": (50, 0)}, [("a", "b"), ("b", "c")])
    first = c["a"].wall_to(c["b"])
    second = c["b"].wall_to(c["c"])
    edge = HalfEdge(None, first, True)

    vector = edge.half_angle_vector(edge, HalfEdge(None, second, True))

    assert math.isfinite(vector.x) and math.isfinite(vector.y)
    assert math.hypot(vector.x, vector.y) == pytest.approx(5)


def test_set_texture_updates_wall_side_and_fires_redraw(square):
    floorplan, c = square
    wall = c["a"].wall_to(c["b"])
    edge = wall.back_edge
    redraws = []
    edge.redraw.add(lambda: redraws.append(True))

    edge.set_texture("rooms/textures/brick.png", False, 60)

    assert redraws == [True]
    assert wall.back_texture.url == "rooms/textures/brick.png"
    assert wall.back_texture.stretch is False
    assert wall.back_texture.scale == 60
    assert edge.get_texture() is wall.back_texture
    assert wall.front_texture.url == "rooms/textures/wallmap.png"


def test_fire_redraw_reaches_both_edges():
    floorplan, _ = build_plan({"a": (0, 0), "b": (100, 0)}, [("a", "b")])
    wall = floorplan.walls[0]
    calls = []
    wall.front_edge.redraw.add(lambda: calls.append("front"))
    wall.back_edge.redraw.add(lambda: calls.append("back"))

    wall.fire_redraw()

    assert calls == ["front", "back"]


def test_corners_outline_order(square):
    floorplan, _ = square
    edge = floorplan.rooms[0].edges[0]

    outline = edge.corners()

    assert outline == [
        edge.interior_start(),
        edge.interior_end(),
        edge.exterior_end(),
        edge.exterior_start(),
    ]
    # exterior side runs along y = -5
    assert point_distance_from_line(
        0, -5, outline[3].x, outline[3].y, outline[2].x, outline[2].y
    ) == pytest.approx(0, abs=1e-9)
