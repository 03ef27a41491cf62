"""Recursive construction of the positioned layout tree.

Every figure is laid out around its own local origin: children are built
first, then the node sizes its boundary around them and places them.  A parent
only ever moves a finished child through the affine node operations.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .. import figure as fig
from ..geometry import (
    Circle,
    Composite,
    GeometryError,
    LineSegment,
    Rect,
    RegularPolygon,
    unit,
    wrap_circle,
    wrap_regular_polygon,
)
from ..logging_utils import debug_log_call
from .config import LayoutConfig, get_layout_config
from .metrics import MeasureFunc, MonospaceMetrics
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
    rotate_node,
    scale_node,
    translate_node,
)

logger = logging.getLogger(__name__)


class LayoutError(RuntimeError):
    """Raised when a figure cannot be laid out."""

    def __init__(self, figure: object, message: str):
        super().__init__(message)
        self.figure = figure


@dataclass
class _Context:
    config: LayoutConfig
    measure: MeasureFunc


def _text_lines(text: str, font_size: float, ctx: _Context) -> List[Rect]:
    lines = [line.copy() for line in ctx.measure(text, font_size)]
    if not lines:
        raise GeometryError(f"text metrics returned no lines for {text!r}")
    block = Composite(lines)
    (x_min, x_max), (y_min, y_max) = block.outer_coords_range()
    block.translate((-(x_min + x_max) / 2.0, -(y_min + y_max) / 2.0))
    return lines


def _layout_symbol(figure: fig.Symbol, ctx: _Context) -> SymbolNode:
    return SymbolNode(figure.text, _text_lines(figure.text, ctx.config.symbol_size, ctx))


def _layout_phrase(figure: fig.Phrase, ctx: _Context) -> PhraseNode:
    return PhraseNode(figure.text, _text_lines(figure.text, ctx.config.phrase_size, ctx))


def _layout_pentagram(figure: fig.Pentagram, ctx: _Context) -> PentagramNode:
    cfg = ctx.config
    content = _build(figure.content, ctx)
    inner = wrap_regular_polygon(boundary(content), 5, cfg.pentagram_inner_rotation)
    outer = RegularPolygon(5, inner.radius * cfg.pentagram_ratio, cfg.pentagram_outer_rotation)
    scale_node(content, cfg.content_scale)
    return PentagramNode(content=content, inner=inner, outer=outer)


def _place_rim(
    rim: List[LayoutNode], inner: Circle, outer: Circle, anchor: Circle, cfg: LayoutConfig
) -> List[float]:
    mean_radius = (inner.radius + outer.radius) / 2.0
    min_radius = cfg.min_rim_ratio * mean_radius
    max_overlap = cfg.max_overlap_ratio * inner.radius
    step = 2.0 * math.pi / len(rim)

    angles: List[float] = []
    for idx, item in enumerate(rim):
        radius = boundary(item).outer_radius()
        if 0.0 < radius < min_radius:
            logger.debug("rim item %d: scaling %.6g -> %.6g", idx, radius, min_radius)
            scale_node(item, min_radius / radius)

        angle = cfg.rim_base_angle + idx * step
        rotate_node(item, angle - math.pi / 2)
        clearance = boundary(item).outer_radius_at(angle + math.pi)
        distance = anchor.radius + max(0.0, clearance - max_overlap)
        logger.debug(
            "rim item %d: angle=%.6g clearance=%.6g distance=%.6g", idx, angle, clearance, distance
        )
        translate_node(item, unit(angle) * distance)
        angles.append(angle)
    return angles


def _layout_circle(figure: fig.Circle, ctx: _Context) -> CircleNode:
    cfg = ctx.config
    if figure.content is None:
        raise LayoutError(figure, "circle figure requires content")

    content = _build(figure.content, ctx)
    rim = [_build(item, ctx) for item in figure.rim]

    content_radius = boundary(content).outer_radius()
    if rim and content_radius > 0.0:
        largest = max(boundary(item).outer_radius() for item in rim)
        if largest > content_radius / cfg.max_rim_ratio:
            factor = largest * cfg.max_rim_ratio / content_radius
            logger.debug(
                "circle content scaled by %.6g to dominate rim radius %.6g", factor, largest
            )
            scale_node(content, factor)
            content_radius *= factor

    inner = wrap_circle(boundary(content), cfg.circle_padding_ratio * content_radius)
    outer = Circle(inner.radius * cfg.ring_ratio(figure.double))
    anchor = Circle(inner.radius + cfg.ring_anchor_fraction * (outer.radius - inner.radius))

    angles = _place_rim(rim, inner, outer, anchor, cfg) if rim else []

    scale_node(content, cfg.content_scale)
    return CircleNode(
        content=content,
        rim=rim,
        inner=inner,
        outer=outer,
        anchor=anchor,
        rim_angles=angles,
        stroke=figure.stroke,
        pattern=figure.pattern,
        double=figure.double,
        stroke_width=cfg.stroke_ratio(figure.stroke) * outer.radius,
    )


def _layout_polygon(figure: fig.RegularPolygon, ctx: _Context) -> PolygonNode:
    cfg = ctx.config
    if figure.sides < 3:
        raise LayoutError(figure, f"polygon figure needs at least 3 sides, got {figure.sides}")
    content = _build(figure.content, ctx)
    shape = boundary(content)
    polygon = wrap_regular_polygon(
        shape,
        figure.sides,
        cfg.polygon_rotation(figure.sides),
        cfg.polygon_padding_ratio * shape.outer_radius(),
    )
    scale_node(content, cfg.content_scale)
    return PolygonNode(
        content=content,
        polygon=polygon,
        stroke=figure.stroke,
        stroke_width=cfg.stroke_ratio(figure.stroke) * polygon.radius,
    )


def _layout_decorated(figure: fig.Decorated, ctx: _Context) -> DecoratedNode:
    cfg = ctx.config
    if figure.kind not in cfg.decorations:
        raise LayoutError(figure, f"no decoration configured for kind {figure.kind!r}")
    content = _build(figure.content, ctx)
    radius = boundary(content).outer_radius()
    width_ratio, height_ratio, angle = cfg.decoration(figure.kind)
    decoration = Rect(width_ratio * radius, height_ratio * radius, rotation=angle - math.pi / 2)
    decoration.translate(unit(angle) * cfg.decoration_offset_ratio * radius)
    return DecoratedNode(kind=figure.kind, content=content, decoration=decoration)


def _layout_emphasized(figure: fig.Emphasized, ctx: _Context) -> EmphasizedNode:
    ratio = ctx.config.emphasis_ratios.get(figure.kind)
    if ratio is None:
        raise LayoutError(figure, f"no emphasis ratio configured for kind {figure.kind!r}")
    content = _build(figure.content, ctx)
    circle = wrap_circle(boundary(content))
    circle.scale(ratio)
    return EmphasizedNode(kind=figure.kind, content=content, circle=circle)


def _link_ring_radius(radii: List[float], gap: float) -> float:
    """Ring radius at which every pair of neighbouring items is ``gap`` apart."""

    count = len(radii)
    chord = max(radii[idx] + radii[(idx + 1) % count] + gap for idx in range(count))
    return chord / (2.0 * math.sin(math.pi / count))


def _layout_link(figure: fig.Link, ctx: _Context) -> LinkNode:
    cfg = ctx.config
    if not figure.items:
        raise LayoutError(figure, "link figure needs at least one item")
    items = [_build(item, ctx) for item in figure.items]
    radii = [boundary(item).outer_radius() for item in items]
    count = len(items)
    stroke_width = cfg.stroke_ratio(figure.stroke) * max(radii)

    if count == 1:
        return LinkNode(
            items=items,
            segments=[],
            angles=[cfg.link_base_angle],
            stroke=figure.stroke,
            stroke_width=stroke_width,
        )

    step = 2.0 * math.pi / count
    angles = [cfg.link_base_angle + idx * step for idx in range(count)]
    ring = _link_ring_radius(radii, cfg.link_gap_ratio * max(radii))
    positions = [unit(angle) * ring for angle in angles]

    segments: List[LineSegment] = []
    for idx in range(count - 1):
        direction = positions[idx + 1] - positions[idx]
        heading = math.atan2(float(direction[1]), float(direction[0]))
        start = positions[idx] + unit(heading) * boundary(items[idx]).outer_radius_at(heading)
        back = boundary(items[idx + 1]).outer_radius_at(heading + math.pi)
        end = positions[idx + 1] - unit(heading) * back
        segments.append(LineSegment(start, end))

    for item, position in zip(items, positions):
        translate_node(item, position)
    logger.debug("link of %d items on ring radius %.6g", count, ring)
    return LinkNode(
        items=items,
        segments=segments,
        angles=angles,
        stroke=figure.stroke,
        stroke_width=stroke_width,
    )


def _layout_arrangement(figure: fig.Arrangement, ctx: _Context) -> ArrangementNode:
    if not figure.items:
        raise LayoutError(figure, "arrangement figure needs at least one item")
    return ArrangementNode(items=[_build(item, ctx) for item in figure.items])


_BUILDERS: Dict[type, Callable[..., LayoutNode]] = {
    fig.Symbol: _layout_symbol,
    fig.Phrase: _layout_phrase,
    fig.Pentagram: _layout_pentagram,
    fig.Circle: _layout_circle,
    fig.RegularPolygon: _layout_polygon,
    fig.Decorated: _layout_decorated,
    fig.Emphasized: _layout_emphasized,
    fig.Link: _layout_link,
    fig.Arrangement: _layout_arrangement,
}


def _build(figure: fig.Figure, ctx: _Context) -> LayoutNode:
    builder = _BUILDERS.get(type(figure))
    if builder is None:
        raise LayoutError(figure, f"unsupported figure kind {type(figure).__name__}")
    try:
        return builder(figure, ctx)
    except GeometryError as exc:
        raise LayoutError(figure, f"cannot lay out {fig.figure_kind(figure)}: {exc}") from exc


@debug_log_call(logger, log_result=False)
def layout(
    figure: fig.Figure,
    config: Optional[LayoutConfig] = None,
    measure: Optional[MeasureFunc] = None,
) -> LayoutNode:
    """Lay out ``figure`` around the origin and return the positioned node tree."""

    ctx = _Context(config=config or get_layout_config(), measure=measure or MonospaceMetrics())
    logger.info("Laying out figure tree with %d figures", fig.count_figures(figure))
    node = _build(figure, ctx)
    (x_min, x_max), (y_min, y_max) = boundary(node).outer_coords_range()
    logger.info(
        "Layout finished: x=[%.3f, %.3f] y=[%.3f, %.3f]", x_min, x_max, y_min, y_max
    )
    return node


__all__ = ["LayoutError", "layout"]
