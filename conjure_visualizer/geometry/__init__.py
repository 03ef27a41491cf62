"""Geometry kernel: shapes, boundary queries and enclosing/inscribed constructors."""

from .math_utils import as_vec2, rotate_vec, unit
from .shapes import Circle, Composite, LineSegment, Polygon, PolygonShape, Rect, RegularPolygon, Shape
from .types import CoordsRange, GeometryError, Range, Vector, VectorLike
from .wrap import (
    fill_circle,
    fill_rect,
    fill_regular_polygon,
    wrap_circle,
    wrap_rect,
    wrap_regular_polygon,
)

__all__ = [
    "Circle",
    "Composite",
    "CoordsRange",
    "GeometryError",
    "LineSegment",
    "Polygon",
    "PolygonShape",
    "Range",
    "Rect",
    "RegularPolygon",
    "Shape",
    "Vector",
    "VectorLike",
    "as_vec2",
    "fill_circle",
    "fill_rect",
    "fill_regular_polygon",
    "rotate_vec",
    "unit",
    "wrap_circle",
    "wrap_rect",
    "wrap_regular_polygon",
]
