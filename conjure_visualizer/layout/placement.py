"""Top-level placement helpers applied after construction."""

from __future__ import annotations

import logging

from .nodes import ArrangementNode, LayoutNode, boundary, translate_node

logger = logging.getLogger(__name__)


def center_on_origin(node: LayoutNode) -> None:
    """Move ``node`` so the center of its bounding box sits on the origin."""

    (x_min, x_max), (y_min, y_max) = boundary(node).outer_coords_range()
    translate_node(node, (-(x_min + x_max) / 2.0, -(y_min + y_max) / 2.0))


def place_in_row(node: ArrangementNode, gap: float = 0.0) -> None:
    """Lay the items of an arrangement left to right, ``gap`` apart, vertically centered."""

    cursor = 0.0
    for item in node.items:
        (x_min, x_max), (y_min, y_max) = boundary(item).outer_coords_range()
        translate_node(item, (cursor - x_min, -(y_min + y_max) / 2.0))
        cursor += (x_max - x_min) + gap
    center_on_origin(node)
    logger.debug("placed %d items in a row of width %.6g", len(node.items), max(cursor - gap, 0.0))


__all__ = ["center_on_origin", "place_in_row"]
