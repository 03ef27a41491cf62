import json

import pytest

from conjure_visualizer import layout, node_to_dict
from conjure_visualizer.demo import hello_world_figure
from conjure_visualizer.geometry import Circle, Composite, LineSegment, Polygon, Rect, RegularPolygon
from conjure_visualizer.layout import shape_to_dict


def test_layout_tree_is_json_serializable():
    data = node_to_dict(layout(hello_world_figure()))
    text = json.dumps(data)
    assert data["kind"] == "arrangement"
    link = data["items"][0]
    assert link["kind"] == "link"
    assert len(link["segments"]) == 1
    assert set(link["bounds"]) == {"x", "y"}
    assert "Hello World!" in text


def test_circle_node_export_fields():
    data = node_to_dict(layout(hello_world_figure()))
    spell = data["items"][0]["items"][1]
    assert spell["kind"] == "decorated"
    circle = spell["content"]
    assert circle["kind"] == "circle"
    assert circle["double"] is True
    assert circle["pattern"] == "rings"
    assert circle["outer"]["radius"] == pytest.approx(circle["inner"]["radius"] * 1.15)


@pytest.mark.parametrize(
    "shape, kind",
    [
        (Circle(1.0), "circle"),
        (Rect(1.0, 2.0), "rect"),
        (RegularPolygon(3, 1.0), "regular_polygon"),
        (LineSegment((0.0, 0.0), (1.0, 0.0)), "segment"),
        (Polygon([(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]), "polygon"),
        (Composite([Circle(1.0)]), "composite"),
    ],
)
def test_shape_to_dict_kinds(shape, kind):
    assert shape_to_dict(shape)["type"] == kind
