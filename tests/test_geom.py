import math

import numpy as np
import pytest

from floorgraph.core.configuration import CONFIG_DIM_UNIT, Configuration
from floorgraph.core.dimensioning import cm_to_measure
from floorgraph.core.model import Point
from floorgraph.geom.transform import apply_transform, rotation, translation, wall_plane_transform
from floorgraph.geom.utils import (
    angle,
    angle2pi,
    closest_point_on_line,
    cycle,
    distance,
    is_clockwise,
    point_distance_from_line,
)


def square_points(size):
    return [Point(0, 0), Point(size, 0), Point(size, size), Point(0, size)]


def test_distance():
    assert distance(0, 0, 3, 4) == pytest.approx(5.0)


def test_closest_point_on_line_is_clamped_to_segment():
    assert closest_point_on_line(50, 10, 0, 0, 100, 0) == Point(50, 0)
    assert closest_point_on_line(-20, 10, 0, 0, 100, 0) == Point(0, 0)
    assert closest_point_on_line(150, 10, 0, 0, 100, 0) == Point(100, 0)
    assert closest_point_on_line(5, 5, 1, 1, 1, 1) == Point(1, 1)


def test_point_distance_from_line():
    assert point_distance_from_line(50, 10, 0, 0, 100, 0) == pytest.approx(10.0)
    assert point_distance_from_line(103, 4, 0, 0, 100, 0) == pytest.approx(5.0)


def test_angle_sign_convention():
    assert angle(1, 0, 0, -1) == pytest.approx(math.pi / 2)
    assert angle(1, 0, 0, 1) == pytest.approx(-math.pi / 2)
    assert angle2pi(1, 0, 0, 1) == pytest.approx(3 * math.pi / 2)
    assert angle2pi(1, 0, 1, 0) == pytest.approx(0.0)
    assert angle2pi(-1, 0, 1, 0) == pytest.approx(math.pi)


def test_is_clockwise():
    ccw = square_points(10)
    assert not is_clockwise(ccw)
    assert is_clockwise(list(reversed(ccw)))
    # degenerate polygons count as clockwise
    assert is_clockwise([Point(0, 0), Point(10, 0), Point(20, 0)])


def test_cycle():
    assert cycle([1, 2, 3], 1) == [2, 3, 1]
    assert cycle([1, 2, 3], 4) == [2, 3, 1]
    assert cycle([], 2) == []


def test_translation_and_rotation():
    moved = apply_transform(translation(3, -2), Point(1, 1))
    assert moved.x == pytest.approx(4.0)
    assert moved.y == pytest.approx(-1.0)

    turned = apply_transform(rotation(math.pi / 2), Point(1, 0))
    assert turned.x == pytest.approx(0.0, abs=1e-12)
    assert turned.y == pytest.approx(1.0)


def test_wall_plane_transform_maps_wall_onto_x_axis():
    transform, inverse = wall_plane_transform(Point(0, 0), Point(0, 10))

    local = apply_transform(transform, Point(0, 5))
    assert local.x == pytest.approx(5.0)
    assert local.y == pytest.approx(0.0, abs=1e-12)

    assert np.allclose(transform @ inverse, np.eye(3))
    back = apply_transform(inverse, local)
    assert back.x == pytest.approx(0.0, abs=1e-12)
    assert back.y == pytest.approx(5.0)


def test_cm_to_measure_units():
    assert cm_to_measure(100, "inch") == "3'3\""
    assert cm_to_measure(100, "mm") == "1000 mm"
    assert cm_to_measure(100, "cm") == "100.0 cm"
    assert cm_to_measure(100, "m") == "1.0 m"


def test_cm_to_measure_uses_configured_unit():
    assert cm_to_measure(100) == "3'3\""
    Configuration.set_value(CONFIG_DIM_UNIT, "cm")
    assert cm_to_measure(250) == "250.0 cm"
