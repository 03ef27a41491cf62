"""Small 2-D vector helpers shared by the shape kinds."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from .types import GeometryError, Vector, VectorLike

_DENOM_EPS = 1e-12


def as_vec2(value: VectorLike) -> Vector:
    arr = np.array(value, dtype=float)
    if arr.shape != (2,):
        raise GeometryError(f"expected a 2-D vector, got shape {arr.shape}")
    return arr


def as_vertices(values: Iterable[VectorLike]) -> Vector:
    arr = np.array([as_vec2(value) for value in values], dtype=float)
    if arr.size == 0:
        raise GeometryError("a polygon needs at least one vertex")
    return arr.reshape(-1, 2)


def unit(angle: float) -> Vector:
    """Unit vector pointing at ``angle`` (radians, counter-clockwise from +x)."""

    return np.array([math.cos(angle), math.sin(angle)], dtype=float)


def rotation_matrix(angle: float) -> Vector:
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return np.array([[cos_a, -sin_a], [sin_a, cos_a]], dtype=float)


def rotate_vec(vec: Vector, angle: float) -> Vector:
    return rotation_matrix(angle) @ vec


def rotate_points(points: Vector, angle: float) -> Vector:
    # row vectors, so multiply by the transpose
    return points @ rotation_matrix(angle).T


def norm(vec: Vector) -> float:
    return float(math.hypot(float(vec[0]), float(vec[1])))


def line_foot(a: Vector, b: Vector) -> Vector:
    """Perpendicular foot from the origin onto the infinite line through ``a`` and ``b``."""

    direction = b - a
    denom = float(np.dot(direction, direction))
    if denom <= _DENOM_EPS:
        return a.copy()
    t = -float(np.dot(a, direction)) / denom
    return a + t * direction


def check_scale_factor(factor: float) -> float:
    factor = float(factor)
    if factor < 0.0 or not math.isfinite(factor):
        raise GeometryError(f"scale factor must be a finite non-negative number, got {factor!r}")
    return factor


__all__ = [
    "as_vec2",
    "as_vertices",
    "check_scale_factor",
    "line_foot",
    "norm",
    "rotate_points",
    "rotate_vec",
    "rotation_matrix",
    "unit",
    "_DENOM_EPS",
]
