import math

import pytest

from conjure_visualizer import boundary, layout, rotate_node, scale_node, translate_node
from conjure_visualizer.demo import hello_world_figure
from conjure_visualizer.figure import Arrangement, Circle, Symbol
from conjure_visualizer.layout import (
    ArrangementNode,
    CircleNode,
    center_on_origin,
    children,
    iter_nodes,
    node_kind,
    place_in_row,
)

ANGLES = [0.0, 0.5, 1.7, math.pi, 4.0, 5.5]


def _profile(node):
    shape = boundary(node)
    return [shape.outer_radius_at(angle) for angle in ANGLES]


def test_demo_tree_contains_every_composite_kind():
    node = layout(hello_world_figure())
    kinds = {node_kind(item) for item in iter_nodes(node)}
    assert {"arrangement", "link", "decorated", "circle", "pentagram", "polygon", "symbol", "phrase"} <= kinds


def test_rotate_node_round_trip():
    node = layout(hello_world_figure())
    before = _profile(node)
    rotate_node(node, 0.9)
    rotate_node(node, -0.9)
    assert _profile(node) == pytest.approx(before, abs=1e-9)


def test_translate_node_moves_every_boundary():
    node = layout(hello_world_figure())
    (x_min, x_max), (y_min, y_max) = boundary(node).outer_coords_range()
    translate_node(node, (10.0, -4.0))
    (nx_min, nx_max), (ny_min, ny_max) = boundary(node).outer_coords_range()
    assert (nx_min, nx_max) == pytest.approx((x_min + 10.0, x_max + 10.0))
    assert (ny_min, ny_max) == pytest.approx((y_min - 4.0, y_max - 4.0))


def test_scale_node_scales_extent_and_stroke():
    node = layout(Circle(content=Symbol("x"), rim=[Symbol("y")]))
    assert isinstance(node, CircleNode)
    radius = boundary(node).outer_radius()
    stroke = node.stroke_width
    anchor = node.anchor.radius
    scale_node(node, 2.0)
    assert boundary(node).outer_radius() == pytest.approx(2.0 * radius)
    assert node.stroke_width == pytest.approx(2.0 * stroke)
    assert node.anchor.radius == pytest.approx(2.0 * anchor)


def test_rotate_node_updates_rim_angles():
    node = layout(Circle(content=Symbol("x"), rim=[Symbol("y"), Symbol("z")]))
    angles = list(node.rim_angles)
    rotate_node(node, 0.25)
    assert node.rim_angles == pytest.approx([angle + 0.25 for angle in angles])


def test_children_and_iter_nodes():
    node = layout(Circle(content=Symbol("x"), rim=[Symbol("y"), Symbol("z")]))
    assert [item.text for item in children(node)] == ["x", "y", "z"]
    assert len(list(iter_nodes(node))) == 4


def test_unknown_node_is_rejected():
    with pytest.raises(TypeError):
        boundary(object())
    with pytest.raises(TypeError):
        translate_node(object(), (1.0, 0.0))


def test_place_in_row_orders_items_left_to_right():
    node = layout(Arrangement([Symbol("a"), Symbol("bb"), Symbol("ccc")]))
    assert isinstance(node, ArrangementNode)
    place_in_row(node, gap=5.0)
    ranges = [boundary(item).outer_coords_range()[0] for item in node.items]
    for (_, prev_max), (next_min, _) in zip(ranges, ranges[1:]):
        assert next_min - prev_max == pytest.approx(5.0)
    (x_min, x_max), (y_min, y_max) = boundary(node).outer_coords_range()
    assert x_min == pytest.approx(-x_max)
    assert y_min == pytest.approx(-y_max)


def test_center_on_origin():
    node = layout(Symbol("abc"))
    translate_node(node, (7.0, 3.0))
    center_on_origin(node)
    (x_min, x_max), (y_min, y_max) = boundary(node).outer_coords_range()
    assert (x_min + x_max) == pytest.approx(0.0, abs=1e-9)
    assert (y_min + y_max) == pytest.approx(0.0, abs=1e-9)
