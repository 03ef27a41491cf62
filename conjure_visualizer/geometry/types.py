from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np

Vector = np.ndarray
VectorLike = Union[Vector, Sequence[float]]
Range = Tuple[float, float]
CoordsRange = Tuple[Range, Range]


class GeometryError(ValueError):
    """Raised when a shape is constructed or queried with malformed geometry."""


__all__ = [
    "Vector",
    "VectorLike",
    "Range",
    "CoordsRange",
    "GeometryError",
]
