"""Positioned layout nodes and the operations that walk them.

Each node owns its boundary shapes and its children.  The affine operations
always move the whole owned subtree, so relative placement decided during
construction is preserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple, Union

from ..geometry import Circle, Composite, LineSegment, Rect, RegularPolygon, Shape, VectorLike
from ..geometry.math_utils import as_vec2, check_scale_factor


@dataclass
class SymbolNode:
    text: str
    lines: List[Rect]


@dataclass
class PhraseNode:
    text: str
    lines: List[Rect]


@dataclass
class PentagramNode:
    content: "LayoutNode"
    inner: RegularPolygon
    outer: RegularPolygon


@dataclass
class CircleNode:
    content: "LayoutNode"
    rim: List["LayoutNode"]
    inner: Circle
    outer: Circle
    anchor: Circle
    rim_angles: List[float] = field(default_factory=list)
    stroke: str = "line"
    pattern: str = "none"
    double: bool = False
    stroke_width: float = 0.0


@dataclass
class PolygonNode:
    content: "LayoutNode"
    polygon: RegularPolygon
    stroke: str = "line"
    stroke_width: float = 0.0


@dataclass
class DecoratedNode:
    kind: str
    content: "LayoutNode"
    decoration: Rect


@dataclass
class EmphasizedNode:
    kind: str
    content: "LayoutNode"
    circle: Circle


@dataclass
class LinkNode:
    items: List["LayoutNode"]
    segments: List[LineSegment]
    angles: List[float] = field(default_factory=list)
    stroke: str = "chain"
    stroke_width: float = 0.0


@dataclass
class ArrangementNode:
    items: List["LayoutNode"]


LayoutNode = Union[
    SymbolNode,
    PhraseNode,
    PentagramNode,
    CircleNode,
    PolygonNode,
    DecoratedNode,
    EmphasizedNode,
    LinkNode,
    ArrangementNode,
]


def _parts(node: LayoutNode) -> Tuple[List[Shape], List[LayoutNode]]:
    """Shapes owned directly by ``node`` and its child nodes."""

    if isinstance(node, (SymbolNode, PhraseNode)):
        return list(node.lines), []
    if isinstance(node, PentagramNode):
        return [node.inner, node.outer], [node.content]
    if isinstance(node, CircleNode):
        return [node.inner, node.outer, node.anchor], [node.content, *node.rim]
    if isinstance(node, PolygonNode):
        return [node.polygon], [node.content]
    if isinstance(node, DecoratedNode):
        return [node.decoration], [node.content]
    if isinstance(node, EmphasizedNode):
        return [node.circle], [node.content]
    if isinstance(node, LinkNode):
        return list(node.segments), list(node.items)
    if isinstance(node, ArrangementNode):
        return [], list(node.items)
    raise TypeError(f"unknown layout node {type(node).__name__}")


def children(node: LayoutNode) -> List[LayoutNode]:
    return _parts(node)[1]


def iter_nodes(node: LayoutNode) -> Iterator[LayoutNode]:
    """Pre-order walk over ``node`` and everything it owns."""

    yield node
    for child in children(node):
        yield from iter_nodes(child)


def node_kind(node: LayoutNode) -> str:
    return type(node).__name__[: -len("Node")].lower()


def boundary(node: LayoutNode) -> Shape:
    """Outer boundary of ``node`` as seen by its parent.

    The returned shape shares the node's own shape objects; copy it before
    mutating.
    """

    if isinstance(node, (SymbolNode, PhraseNode)):
        return Composite(node.lines)
    if isinstance(node, PentagramNode):
        return node.outer
    if isinstance(node, CircleNode):
        return Composite([node.outer, *(boundary(item) for item in node.rim)])
    if isinstance(node, PolygonNode):
        return node.polygon
    if isinstance(node, DecoratedNode):
        return Composite([boundary(node.content), node.decoration])
    if isinstance(node, EmphasizedNode):
        return node.circle
    if isinstance(node, LinkNode):
        return Composite([*(boundary(item) for item in node.items), *node.segments])
    if isinstance(node, ArrangementNode):
        return Composite([boundary(item) for item in node.items])
    raise TypeError(f"unknown layout node {type(node).__name__}")


def translate_node(node: LayoutNode, delta: VectorLike) -> None:
    delta = as_vec2(delta)
    shapes, kids = _parts(node)
    for shape in shapes:
        shape.translate(delta)
    for child in kids:
        translate_node(child, delta)


def rotate_node(node: LayoutNode, angle: float) -> None:
    shapes, kids = _parts(node)
    for shape in shapes:
        shape.rotate(angle)
    for child in kids:
        rotate_node(child, angle)
    if isinstance(node, CircleNode):
        node.rim_angles = [value + angle for value in node.rim_angles]
    elif isinstance(node, LinkNode):
        node.angles = [value + angle for value in node.angles]


def scale_node(node: LayoutNode, factor: float) -> None:
    factor = check_scale_factor(factor)
    shapes, kids = _parts(node)
    for shape in shapes:
        shape.scale(factor)
    for child in kids:
        scale_node(child, factor)
    if isinstance(node, (CircleNode, PolygonNode, LinkNode)):
        node.stroke_width *= factor


__all__ = [
    "ArrangementNode",
    "CircleNode",
    "DecoratedNode",
    "EmphasizedNode",
    "LayoutNode",
    "LinkNode",
    "PentagramNode",
    "PhraseNode",
    "PolygonNode",
    "SymbolNode",
    "boundary",
    "children",
    "iter_nodes",
    "node_kind",
    "rotate_node",
    "scale_node",
    "translate_node",
]
