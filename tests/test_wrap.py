import math

import pytest

from conjure_visualizer.geometry import (
    Circle,
    Composite,
    Rect,
    RegularPolygon,
    fill_circle,
    fill_rect,
    fill_regular_polygon,
    wrap_circle,
    wrap_rect,
    wrap_regular_polygon,
)


def _shapes():
    return [
        Circle(2.0, (0.5, -0.25)),
        Rect(6.0, 2.0, rotation=0.35),
        Rect(3.0, 5.0, rotation=-1.2, offset=(0.5, 0.5)),
        RegularPolygon(7, 3.0, rotation=0.1),
        Composite([Rect(4.0, 1.0), Circle(1.0, (0.0, 1.5))]),
    ]


def _face_bisectors(sides, rotation):
    segment = 2.0 * math.pi / sides
    return [rotation + segment / 2.0 + idx * segment for idx in range(sides)]


def test_wrap_circle_uses_outer_radius_plus_padding():
    assert wrap_circle(Rect(6.0, 8.0)).radius == pytest.approx(5.0)
    assert wrap_circle(Rect(6.0, 8.0), padding=1.0).radius == pytest.approx(6.0)


def test_wrap_rect_around_circle():
    rect = wrap_rect(Circle(2.0), rotation=0.3, padding=0.5)
    assert rect.width == pytest.approx(5.0)
    assert rect.height == pytest.approx(5.0)
    assert rect.rotation == 0.3


def test_wrap_rect_matches_aligned_rect():
    rect = wrap_rect(Rect(4.0, 2.0, rotation=0.7), rotation=0.7)
    assert rect.width == pytest.approx(4.0)
    assert rect.height == pytest.approx(2.0)


@pytest.mark.parametrize("index", range(5))
@pytest.mark.parametrize("sides", [3, 4, 5, 6, 8])
@pytest.mark.parametrize("rotation", [0.0, 0.4, -math.pi / 2])
def test_wrap_regular_polygon_covers_shape_at_face_bisectors(index, sides, rotation):
    shape = _shapes()[index]
    polygon = wrap_regular_polygon(shape, sides, rotation)
    assert polygon.side_count == sides
    assert polygon.rotation == rotation
    for angle in _face_bisectors(sides, rotation):
        assert polygon.outer_radius_at(angle) >= shape.outer_radius_at(angle) - 1e-9


def test_wrap_regular_polygon_converts_apothem_to_circumradius():
    square = wrap_regular_polygon(Circle(1.0), 4, rotation=math.pi / 4)
    assert square.radius == pytest.approx(math.sqrt(2.0))
    assert square.apothem == pytest.approx(1.0)
    padded = wrap_regular_polygon(Circle(1.0), 4, rotation=math.pi / 4, padding=1.0)
    assert padded.apothem == pytest.approx(2.0)


def test_fill_circle_and_clamp():
    assert fill_circle(Rect(4.0, 2.0)).radius == pytest.approx(1.0)
    assert fill_circle(Circle(1.0, (3.0, 0.0))).radius == 0.0
    assert fill_circle(Circle(2.0), padding=5.0).radius == 0.0


def test_fill_rect_recovers_rect():
    rect = fill_rect(Rect(4.0, 2.0))
    assert rect.width == pytest.approx(4.0)
    assert rect.height == pytest.approx(2.0)


def test_fill_rect_keeps_corners_inside_circle():
    rect = fill_rect(Circle(1.0))
    assert rect.width == pytest.approx(math.sqrt(2.0))
    assert rect.height == pytest.approx(math.sqrt(2.0))
    for vertex in rect.vertices():
        assert math.hypot(*vertex) <= 1.0 + 1e-9


def test_fill_regular_polygon_inside_circle():
    hexagon = fill_regular_polygon(Circle(2.0), 6, rotation=0.2)
    assert hexagon.radius == pytest.approx(2.0)
    assert fill_regular_polygon(Circle(2.0), 6, padding=3.0).radius == 0.0


@pytest.mark.parametrize("index", range(5))
def test_wrap_of_fill_is_no_larger_and_fill_of_wrap_no_smaller(index):
    shape = _shapes()[index]

    inscribed = fill_circle(shape)
    assert inscribed.radius >= 0.0
    assert wrap_circle(inscribed).radius <= shape.outer_radius() + 1e-9

    enclosing = wrap_circle(shape)
    assert fill_circle(enclosing).radius >= max(shape.inner_radius(), 0.0) - 1e-9


def test_wrap_of_fill_for_polygons():
    shape = RegularPolygon(6, 3.0)
    inner_hexagon = fill_regular_polygon(shape, 6)
    assert wrap_regular_polygon(inner_hexagon, 6).radius <= shape.radius + 1e-9
    outer_hexagon = wrap_regular_polygon(shape, 6)
    assert fill_regular_polygon(outer_hexagon, 6).radius >= shape.radius - 1e-9
