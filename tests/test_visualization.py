import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from floorgraph.visualization.generator import generate_floorplan_image

from conftest import build_plan


def test_generate_image(square, tmp_path):
    floorplan, c = square
    tail = floorplan.new_corner(600, 600, "t")
    floorplan.new_wall(c["c"], tail)
    output = tmp_path / "images" / "plan.png"

    assert generate_floorplan_image(floorplan, output)
    assert output.exists()
    assert output.stat().st_size > 0


def test_generate_image_of_empty_plan(tmp_path):
    floorplan, _ = build_plan({}, [])
    output = tmp_path / "empty.png"

    assert generate_floorplan_image(floorplan, output)
    assert output.exists()


def test_figure_is_closed_when_saving_fails(square, tmp_path, monkeypatch):
    floorplan, _ = square

    def fail(*args, **kwargs):
        raise OSError("disk full")

    plt.close("all")
    monkeypatch.setattr(Figure, "savefig", fail)

    assert not generate_floorplan_image(floorplan, tmp_path / "plan.png")
    assert plt.get_fignums() == []
