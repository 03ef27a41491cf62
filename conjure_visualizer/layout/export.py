"""Plain-data export of a positioned layout tree for renderers."""

from __future__ import annotations

from typing import Any, Dict, List

from ..geometry import Circle, Composite, LineSegment, Polygon, Rect, RegularPolygon, Shape
from .nodes import (
    ArrangementNode,
    CircleNode,
    DecoratedNode,
    EmphasizedNode,
    LayoutNode,
    LinkNode,
    PentagramNode,
    PhraseNode,
    PolygonNode,
    SymbolNode,
    boundary,
    node_kind,
)


def _point(vec) -> List[float]:
    return [float(vec[0]), float(vec[1])]


def shape_to_dict(shape: Shape) -> Dict[str, Any]:
    if isinstance(shape, Circle):
        return {"type": "circle", "radius": shape.radius, "center": _point(shape.offset)}
    if isinstance(shape, Rect):
        return {
            "type": "rect",
            "width": shape.width,
            "height": shape.height,
            "rotation": shape.rotation,
            "center": _point(shape.offset),
        }
    if isinstance(shape, RegularPolygon):
        return {
            "type": "regular_polygon",
            "sides": shape.side_count,
            "radius": shape.radius,
            "rotation": shape.rotation,
            "center": _point(shape.offset),
            "vertices": [_point(v) for v in shape.vertices()],
        }
    if isinstance(shape, LineSegment):
        return {"type": "segment", "start": _point(shape.start), "end": _point(shape.end)}
    if isinstance(shape, Polygon):
        return {"type": "polygon", "vertices": [_point(v) for v in shape.vertices()]}
    if isinstance(shape, Composite):
        return {"type": "composite", "parts": [shape_to_dict(part) for part in shape.parts]}
    raise TypeError(f"unknown shape {type(shape).__name__}")


def _bounds(node: LayoutNode) -> Dict[str, List[float]]:
    (x_min, x_max), (y_min, y_max) = boundary(node).outer_coords_range()
    return {"x": [x_min, x_max], "y": [y_min, y_max]}


def node_to_dict(node: LayoutNode) -> Dict[str, Any]:
    """JSON-ready description of ``node`` and its subtree."""

    data: Dict[str, Any] = {"kind": node_kind(node), "bounds": _bounds(node)}
    if isinstance(node, (SymbolNode, PhraseNode)):
        data["text"] = node.text
        data["lines"] = [shape_to_dict(line) for line in node.lines]
    elif isinstance(node, PentagramNode):
        data["inner"] = shape_to_dict(node.inner)
        data["outer"] = shape_to_dict(node.outer)
        data["content"] = node_to_dict(node.content)
    elif isinstance(node, CircleNode):
        data.update(
            inner=shape_to_dict(node.inner),
            outer=shape_to_dict(node.outer),
            anchor_radius=node.anchor.radius,
            rim_angles=list(node.rim_angles),
            stroke=node.stroke,
            stroke_width=node.stroke_width,
            pattern=node.pattern,
            double=node.double,
            content=node_to_dict(node.content),
            rim=[node_to_dict(item) for item in node.rim],
        )
    elif isinstance(node, PolygonNode):
        data.update(
            polygon=shape_to_dict(node.polygon),
            stroke=node.stroke,
            stroke_width=node.stroke_width,
            content=node_to_dict(node.content),
        )
    elif isinstance(node, DecoratedNode):
        data.update(
            decoration_kind=node.kind,
            decoration=shape_to_dict(node.decoration),
            content=node_to_dict(node.content),
        )
    elif isinstance(node, EmphasizedNode):
        data.update(
            emphasis=node.kind,
            circle=shape_to_dict(node.circle),
            content=node_to_dict(node.content),
        )
    elif isinstance(node, LinkNode):
        data.update(
            stroke=node.stroke,
            stroke_width=node.stroke_width,
            angles=list(node.angles),
            segments=[shape_to_dict(segment) for segment in node.segments],
            items=[node_to_dict(item) for item in node.items],
        )
    elif isinstance(node, ArrangementNode):
        data["items"] = [node_to_dict(item) for item in node.items]
    else:
        raise TypeError(f"unknown layout node {type(node).__name__}")
    return data


__all__ = ["node_to_dict", "shape_to_dict"]
