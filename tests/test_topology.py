from floorgraph.core.topology import build_corner_graph, build_room_graph, count_components

from conftest import build_plan


def two_room_plan():
    return build_plan(
        {
            "a": (0, 0), "f": (200, 0), "d": (400, 0),
            "c": (400, 400), "e": (200, 400), "b": (0, 400),
        },
        [
            ("a", "f"), ("f", "d"), ("d", "c"), ("c", "e"),
            ("e", "b"), ("b", "a"), ("e", "f"),
        ],
    )


def test_corner_graph(square):
    floorplan, _ = square

    graph = build_corner_graph(floorplan)

    assert graph.number_of_nodes() == 4
    assert graph.number_of_edges() == 4
    assert graph.nodes["a"]["pos"] == (0, 0)
    assert graph.edges["a", "b"]["wall_id"] == "a,b"
    assert graph.edges["a", "b"]["length"] == 400
    assert graph.edges["a", "b"]["orphan"] is False


def test_count_components(square):
    floorplan, _ = square
    assert count_components(floorplan) == 1

    e = floorplan.new_corner(1000, 0, "e")
    f = floorplan.new_corner(1000, 300, "f")
    floorplan.new_wall(e, f)
    assert count_components(floorplan) == 2


def test_room_graph_links_rooms_sharing_a_wall():
    floorplan, _ = two_room_plan()

    graph = build_room_graph(floorplan)

    assert graph.number_of_nodes() == 2
    assert graph.number_of_edges() == 1
    (_, _, attributes), = graph.edges(data=True)
    assert attributes["wall_id"] == "e,f"


def test_room_graph_of_single_room(square):
    floorplan, _ = square

    graph = build_room_graph(floorplan)

    assert list(graph.nodes) == ["a,b,c,d"]
    assert graph.number_of_edges() == 0
