"""Outer and inner boundary queries derived from an ordered vertex sequence.

Every polygon-capable shape only has to produce its vertices (an ``(n, 2)``
array, clockwise or counter-clockwise, implicitly closed).  The functions in this
module turn that sequence into bounding boxes, the support function and the
inscribed queries.  The inscribed queries work on the dual *sides* sequence: one
row per edge holding the perpendicular foot from the local origin onto the line
through that edge.
"""

from __future__ import annotations

import math

import numpy as np

from .math_utils import _DENOM_EPS, line_foot, unit
from .types import CoordsRange, GeometryError, Vector


def _require_vertices(vertices: Vector) -> Vector:
    if len(vertices) == 0:
        raise GeometryError("polygon produced no vertices")
    return vertices


def coords_range(vertices: Vector) -> CoordsRange:
    vertices = _require_vertices(vertices)
    xs = vertices[:, 0]
    ys = vertices[:, 1]
    return (float(xs.min()), float(xs.max())), (float(ys.min()), float(ys.max()))


def circumradius(vertices: Vector) -> float:
    vertices = _require_vertices(vertices)
    return float(np.sqrt((vertices * vertices).sum(axis=1).max()))


def support(vertices: Vector, angle: float) -> float:
    """Largest projection of any vertex onto the direction ``angle``."""

    vertices = _require_vertices(vertices)
    return float((vertices @ unit(angle)).max())


def sides(vertices: Vector) -> Vector:
    vertices = _require_vertices(vertices)
    feet = []
    count = len(vertices)
    for idx in range(count):
        a = vertices[idx]
        b = vertices[(idx + 1) % count]
        if float(np.dot(b - a, b - a)) <= _DENOM_EPS:
            continue
        feet.append(line_foot(a, b))
    if not feet:
        raise GeometryError("polygon has no non-degenerate sides")
    return np.array(feet, dtype=float)


def inradius(side_feet: Vector) -> float:
    return float(np.sqrt((side_feet * side_feet).sum(axis=1).min()))


def inner_radius_at(side_feet: Vector, angle: float) -> float:
    """Distance from the origin to the nearest edge line crossed by the ray at ``angle``.

    Edges whose line the ray never reaches (non-positive denominator) do not
    take part, edge lines through the origin included.  When only such lines
    remain the origin sits on the boundary and the ray leaves at once, giving 0.
    """

    direction = unit(angle)
    best = math.inf
    on_boundary = False
    for foot in side_feet:
        dist_sq = float(np.dot(foot, foot))
        if dist_sq <= _DENOM_EPS:
            on_boundary = True
            continue
        denom = float(np.dot(direction, foot))
        if denom <= _DENOM_EPS:
            continue
        best = min(best, dist_sq / denom)
    if math.isinf(best):
        if on_boundary:
            return 0.0
        raise GeometryError(f"no edge is crossed by the ray at angle {angle:.6g}")
    return best


__all__ = [
    "circumradius",
    "coords_range",
    "inner_radius_at",
    "inradius",
    "sides",
    "support",
]
