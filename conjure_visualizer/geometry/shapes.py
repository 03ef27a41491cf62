"""Shape value types with outer/inner boundary queries and affine mutation.

All shapes live in a local frame whose origin is the point the layout engine
measures from.  Circle, Rect and RegularPolygon keep their size attributes
separate from an ``offset``: the position of their center in that frame.
Rotation is always about the local origin and always counter-clockwise for
positive angles, for offsets, rotation attributes and raw vertices alike.
"""

from __future__ import annotations

import copy
import math
from typing import Iterable, List, Sequence

import numpy as np

from . import polygon
from .math_utils import as_vec2, as_vertices, check_scale_factor, norm, rotate_points, rotate_vec, unit
from .types import CoordsRange, GeometryError, Vector, VectorLike


def _fmt_vec(vec: Vector) -> str:
    return f"({float(vec[0]):.6g}, {float(vec[1]):.6g})"


class Shape:
    """Capability set shared by every shape kind."""

    def outer_coords_range(self) -> CoordsRange:
        raise NotImplementedError

    def outer_radius(self) -> float:
        raise NotImplementedError

    def outer_radius_at(self, angle: float) -> float:
        raise NotImplementedError

    def inner_radius(self) -> float:
        raise NotImplementedError

    def inner_radius_at(self, angle: float) -> float:
        raise NotImplementedError

    def inner_coords_range(self) -> CoordsRange:
        return (
            (-self.inner_radius_at(math.pi), self.inner_radius_at(0.0)),
            (-self.inner_radius_at(-math.pi / 2), self.inner_radius_at(math.pi / 2)),
        )

    def translate(self, delta: VectorLike) -> None:
        raise NotImplementedError

    def rotate(self, angle: float) -> None:
        raise NotImplementedError

    def scale(self, factor: float) -> None:
        raise NotImplementedError

    def copy(self) -> "Shape":
        return copy.deepcopy(self)


class Circle(Shape):
    def __init__(self, radius: float, offset: VectorLike = (0.0, 0.0)) -> None:
        radius = float(radius)
        if radius < 0.0 or not math.isfinite(radius):
            raise GeometryError(f"circle radius must be finite and non-negative, got {radius!r}")
        self.radius = radius
        self.offset = as_vec2(offset)

    def __repr__(self) -> str:
        return f"Circle(radius={self.radius:.6g}, offset={_fmt_vec(self.offset)})"

    def outer_coords_range(self) -> CoordsRange:
        cx, cy = float(self.offset[0]), float(self.offset[1])
        return (cx - self.radius, cx + self.radius), (cy - self.radius, cy + self.radius)

    def outer_radius(self) -> float:
        return norm(self.offset) + self.radius

    def outer_radius_at(self, angle: float) -> float:
        return float(np.dot(self.offset, unit(angle))) + self.radius

    def inner_radius(self) -> float:
        return self.radius - norm(self.offset)

    def inner_radius_at(self, angle: float) -> float:
        # solve |t * u - offset| = radius for the forward crossing t
        along = float(np.dot(self.offset, unit(angle)))
        disc = along * along - float(np.dot(self.offset, self.offset)) + self.radius * self.radius
        if disc < 0.0:
            raise GeometryError(f"ray at angle {angle:.6g} misses the circle")
        t = along + math.sqrt(disc)
        if t < 0.0:
            raise GeometryError(f"circle lies behind the ray at angle {angle:.6g}")
        return t

    def translate(self, delta: VectorLike) -> None:
        self.offset = self.offset + as_vec2(delta)

    def rotate(self, angle: float) -> None:
        self.offset = rotate_vec(self.offset, angle)

    def scale(self, factor: float) -> None:
        factor = check_scale_factor(factor)
        self.radius *= factor
        self.offset = self.offset * factor


class PolygonShape(Shape):
    """Shape whose boundary is given by :meth:`vertices`.

    The queries are the generic ones of :mod:`.polygon`; subclasses only decide
    how the vertex sequence is produced.
    """

    def vertices(self) -> Vector:
        raise NotImplementedError

    def outer_coords_range(self) -> CoordsRange:
        return polygon.coords_range(self.vertices())

    def outer_radius(self) -> float:
        return polygon.circumradius(self.vertices())

    def outer_radius_at(self, angle: float) -> float:
        return polygon.support(self.vertices(), angle)

    def sides(self) -> Vector:
        return polygon.sides(self.vertices())

    def inner_radius(self) -> float:
        return polygon.inradius(self.sides())

    def inner_radius_at(self, angle: float) -> float:
        return polygon.inner_radius_at(self.sides(), angle)


class Rect(PolygonShape):
    """Rectangle, axis aligned in its own frame and rotated as a whole."""

    def __init__(
        self,
        width: float,
        height: float,
        rotation: float = 0.0,
        offset: VectorLike = (0.0, 0.0),
    ) -> None:
        width = float(width)
        height = float(height)
        if width < 0.0 or height < 0.0:
            raise GeometryError(f"rectangle size must be non-negative, got {width!r}x{height!r}")
        self.width = width
        self.height = height
        self.rotation = float(rotation)
        self.offset = as_vec2(offset)

    def __repr__(self) -> str:
        return (
            f"Rect(width={self.width:.6g}, height={self.height:.6g}, "
            f"rotation={self.rotation:.6g}, offset={_fmt_vec(self.offset)})"
        )

    def vertices(self) -> Vector:
        hw = self.width / 2.0
        hh = self.height / 2.0
        corners = np.array([[-hw, -hh], [hw, -hh], [hw, hh], [-hw, hh]], dtype=float)
        return rotate_points(corners, self.rotation) + self.offset

    def translate(self, delta: VectorLike) -> None:
        self.offset = self.offset + as_vec2(delta)

    def rotate(self, angle: float) -> None:
        self.offset = rotate_vec(self.offset, angle)
        self.rotation += float(angle)

    def scale(self, factor: float) -> None:
        factor = check_scale_factor(factor)
        self.width *= factor
        self.height *= factor
        self.offset = self.offset * factor


class RegularPolygon(PolygonShape):
    """Regular N-gon; ``rotation`` is the angle of the first vertex."""

    def __init__(
        self,
        sides: int,
        radius: float,
        rotation: float = 0.0,
        offset: VectorLike = (0.0, 0.0),
    ) -> None:
        if int(sides) != sides or sides < 3:
            raise GeometryError(f"a regular polygon needs at least 3 sides, got {sides!r}")
        radius = float(radius)
        if radius < 0.0 or not math.isfinite(radius):
            raise GeometryError(f"polygon radius must be finite and non-negative, got {radius!r}")
        self.side_count = int(sides)
        self.radius = radius
        self.rotation = float(rotation)
        self.offset = as_vec2(offset)

    def __repr__(self) -> str:
        return (
            f"RegularPolygon(sides={self.side_count}, radius={self.radius:.6g}, "
            f"rotation={self.rotation:.6g}, offset={_fmt_vec(self.offset)})"
        )

    @property
    def segment_angle(self) -> float:
        return 2.0 * math.pi / self.side_count

    @property
    def apothem(self) -> float:
        """Center-to-face distance."""
        return self.radius * math.cos(math.pi / self.side_count)

    def vertices(self) -> Vector:
        angles = self.rotation + self.segment_angle * np.arange(self.side_count)
        ring = np.column_stack([np.cos(angles), np.sin(angles)]) * self.radius
        return ring + self.offset

    def translate(self, delta: VectorLike) -> None:
        self.offset = self.offset + as_vec2(delta)

    def rotate(self, angle: float) -> None:
        self.offset = rotate_vec(self.offset, angle)
        self.rotation += float(angle)

    def scale(self, factor: float) -> None:
        factor = check_scale_factor(factor)
        self.radius *= factor
        self.offset = self.offset * factor


class Polygon(PolygonShape):
    """Polygon given by an explicit vertex list."""

    def __init__(self, vertices: Iterable[VectorLike]) -> None:
        self._vertices = as_vertices(vertices)

    def __repr__(self) -> str:
        points = ", ".join(_fmt_vec(v) for v in self._vertices)
        return f"Polygon([{points}])"

    @classmethod
    def from_corners(cls, corner_1: VectorLike, corner_2: VectorLike) -> "Polygon":
        """Axis rectangle spanned by two opposite corners; it must contain the origin."""

        c1 = as_vec2(corner_1)
        c2 = as_vec2(corner_2)
        lo = np.minimum(c1, c2)
        hi = np.maximum(c1, c2)
        if not (lo[0] <= 0.0 <= hi[0] and lo[1] <= 0.0 <= hi[1]):
            raise GeometryError(
                f"rectangle defined by {_fmt_vec(c1)} and {_fmt_vec(c2)} doesn't contain the origin"
            )
        return cls([(lo[0], lo[1]), (hi[0], lo[1]), (hi[0], hi[1]), (lo[0], hi[1])])

    def vertices(self) -> Vector:
        return self._vertices.copy()

    def center_of_mass(self) -> Vector:
        return self._vertices.mean(axis=0)

    def translate(self, delta: VectorLike) -> None:
        self._vertices = self._vertices + as_vec2(delta)

    def rotate(self, angle: float) -> None:
        self._vertices = rotate_points(self._vertices, angle)

    def scale(self, factor: float) -> None:
        self._vertices = self._vertices * check_scale_factor(factor)


class LineSegment(Polygon):
    def __init__(self, start: VectorLike, end: VectorLike) -> None:
        super().__init__([start, end])

    def __repr__(self) -> str:
        return f"LineSegment({_fmt_vec(self.start)}, {_fmt_vec(self.end)})"

    @property
    def start(self) -> Vector:
        return self._vertices[0].copy()

    @property
    def end(self) -> Vector:
        return self._vertices[1].copy()

    def length(self) -> float:
        return norm(self._vertices[1] - self._vertices[0])


class Composite(Shape):
    """Union of heterogeneous shapes.

    Outer queries take the union of the parts.  Inner queries answer for the
    first part, the primary boundary the others decorate.
    """

    def __init__(self, parts: Sequence[Shape]) -> None:
        parts = list(parts)
        if not parts:
            raise GeometryError("a composite shape needs at least one part")
        self.parts: List[Shape] = parts

    def __repr__(self) -> str:
        return f"Composite({self.parts!r})"

    @property
    def primary(self) -> Shape:
        return self.parts[0]

    def outer_coords_range(self) -> CoordsRange:
        ranges = [part.outer_coords_range() for part in self.parts]
        return (
            (min(r[0][0] for r in ranges), max(r[0][1] for r in ranges)),
            (min(r[1][0] for r in ranges), max(r[1][1] for r in ranges)),
        )

    def outer_radius(self) -> float:
        return max(part.outer_radius() for part in self.parts)

    def outer_radius_at(self, angle: float) -> float:
        return max(part.outer_radius_at(angle) for part in self.parts)

    def inner_radius(self) -> float:
        return self.primary.inner_radius()

    def inner_radius_at(self, angle: float) -> float:
        return self.primary.inner_radius_at(angle)

    def inner_coords_range(self) -> CoordsRange:
        return self.primary.inner_coords_range()

    def translate(self, delta: VectorLike) -> None:
        for part in self.parts:
            part.translate(delta)

    def rotate(self, angle: float) -> None:
        for part in self.parts:
            part.rotate(angle)

    def scale(self, factor: float) -> None:
        factor = check_scale_factor(factor)
        for part in self.parts:
            part.scale(factor)


__all__ = [
    "Circle",
    "Composite",
    "LineSegment",
    "Polygon",
    "PolygonShape",
    "Rect",
    "RegularPolygon",
    "Shape",
]
