"""Smallest enclosing (``wrap_*``) and largest inscribed (``fill_*``) shapes.

The results are centered on the local origin of the measured shape, which is
the point the layout engine grows boundaries around.
"""

from __future__ import annotations

import math

from .shapes import Circle, Rect, RegularPolygon, Shape
from .types import GeometryError


def _check_sides(sides: int) -> int:
    if int(sides) != sides or sides < 3:
        raise GeometryError(f"a regular polygon needs at least 3 sides, got {sides!r}")
    return int(sides)


def wrap_circle(shape: Shape, padding: float = 0.0) -> Circle:
    return Circle(max(shape.outer_radius() + padding, 0.0))


def wrap_rect(shape: Shape, rotation: float = 0.0, padding: float = 0.0) -> Rect:
    """Smallest rectangle at ``rotation`` that is symmetric about the origin and contains ``shape``."""

    half_width = max(
        abs(shape.outer_radius_at(rotation)),
        abs(shape.outer_radius_at(rotation + math.pi)),
    )
    half_height = max(
        abs(shape.outer_radius_at(rotation + math.pi / 2)),
        abs(shape.outer_radius_at(rotation - math.pi / 2)),
    )
    return Rect(
        max(2.0 * half_width + 2.0 * padding, 0.0),
        max(2.0 * half_height + 2.0 * padding, 0.0),
        rotation,
    )


def wrap_regular_polygon(
    shape: Shape, sides: int, rotation: float = 0.0, padding: float = 0.0
) -> RegularPolygon:
    """Smallest regular ``sides``-gon at ``rotation`` containing ``shape``.

    The support function is sampled at every face bisector; the worst case plus
    ``padding`` is the apothem, converted to the circumradius with ``cos(pi/N)``.
    """

    sides = _check_sides(sides)
    segment_angle = 2.0 * math.pi / sides
    apothem = max(
        shape.outer_radius_at(rotation + segment_angle / 2.0 + idx * segment_angle)
        for idx in range(sides)
    )
    apothem = max(apothem + padding, 0.0)
    return RegularPolygon(sides, apothem / math.cos(segment_angle / 2.0), rotation)


def fill_circle(shape: Shape, padding: float = 0.0) -> Circle:
    return Circle(max(shape.inner_radius() - padding, 0.0))


def fill_rect(shape: Shape, rotation: float = 0.0, padding: float = 0.0) -> Rect:
    """Largest origin-centered rectangle at ``rotation`` inside ``shape``.

    The half extents come from the inner radius along the four cardinal
    directions; both are then shrunk by the same factor until each corner sits
    within the inner boundary along its own direction.
    """

    half_width = max(
        min(shape.inner_radius_at(rotation), shape.inner_radius_at(rotation + math.pi)) - padding,
        0.0,
    )
    half_height = max(
        min(
            shape.inner_radius_at(rotation + math.pi / 2),
            shape.inner_radius_at(rotation - math.pi / 2),
        )
        - padding,
        0.0,
    )
    half_diagonal = math.hypot(half_width, half_height)
    if half_diagonal > 0.0:
        corner_angle = math.atan2(half_height, half_width)
        factor = 1.0
        for corner in (
            rotation + corner_angle,
            rotation + math.pi - corner_angle,
            rotation + math.pi + corner_angle,
            rotation - corner_angle,
        ):
            reach = max(shape.inner_radius_at(corner) - padding, 0.0)
            factor = min(factor, reach / half_diagonal)
        half_width *= factor
        half_height *= factor
    return Rect(2.0 * half_width, 2.0 * half_height, rotation)


def fill_regular_polygon(
    shape: Shape, sides: int, rotation: float = 0.0, padding: float = 0.0
) -> RegularPolygon:
    """Largest regular ``sides``-gon at ``rotation`` whose vertices stay inside ``shape``."""

    sides = _check_sides(sides)
    segment_angle = 2.0 * math.pi / sides
    radius = min(shape.inner_radius_at(rotation + idx * segment_angle) for idx in range(sides))
    return RegularPolygon(sides, max(radius - padding, 0.0), rotation)


__all__ = [
    "fill_circle",
    "fill_rect",
    "fill_regular_polygon",
    "wrap_circle",
    "wrap_rect",
    "wrap_regular_polygon",
]
