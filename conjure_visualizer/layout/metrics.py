"""Text metrics collaborator.

The layout engine only needs ``measure(text, font_size)``: one rectangle per
line, each already carrying its vertical offset.  :class:`MonospaceMetrics`
estimates extents from character counts; a font-backed implementation can be
passed to :func:`~conjure_visualizer.layout.engine.layout` instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

from ..geometry import Rect

MeasureFunc = Callable[[str, float], List[Rect]]


@dataclass
class MonospaceMetrics:
    char_width_ratio: float = 0.6
    line_height_ratio: float = 1.2

    def __call__(self, text: str, font_size: float) -> List[Rect]:
        line_height = font_size * self.line_height_ratio
        rects: List[Rect] = []
        for idx, line in enumerate(text.split("\n")):
            width = len(line) * font_size * self.char_width_ratio
            rects.append(Rect(width, line_height, offset=(0.0, -idx * line_height)))
        return rects


__all__ = ["MeasureFunc", "MonospaceMetrics"]
