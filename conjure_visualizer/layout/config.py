"""Layout configuration: named ratios read for a whole construction pass."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, field
from typing import Dict, Tuple

GOLDEN_RATIO = (1.0 + math.sqrt(5.0)) / 2.0

# outer star points versus the inner pentagon's vertices
PENTAGRAM_RATIO = GOLDEN_RATIO ** 2

PENTAGRAM_OUTER_OFFSET = math.pi / 2


@dataclass(frozen=True)
class DecorationSpec:
    """Decoration rectangle size (relative to the decorated radius) and direction."""

    width_ratio: float
    height_ratio: float
    angle: float


def _default_decorations() -> Dict[str, DecorationSpec]:
    return {
        "tilde": DecorationSpec(width_ratio=0.6, height_ratio=0.15, angle=-math.pi / 2),
        "hat": DecorationSpec(width_ratio=0.5, height_ratio=0.2, angle=math.pi / 2),
        "rays": DecorationSpec(width_ratio=0.8, height_ratio=0.3, angle=math.pi / 2),
    }


def _default_emphasis() -> Dict[str, float]:
    return {"halo": 1.2, "aura": 1.5}


@dataclass
class LayoutConfig:
    """Ratios and sizes steering the layout engine."""

    base_size: float = 16.0
    symbol_font_size: float = 3.0
    phrase_font_size: float = 1.0

    content_scale: float = 0.85
    circle_padding_ratio: float = 0.1
    max_rim_ratio: float = 2.0
    min_rim_ratio: float = 0.3
    double_ring_ratio: float = 1.15
    ring_anchor_fraction: float = 0.5
    max_overlap_ratio: float = 0.1
    rim_base_angle: float = math.pi / 2

    pentagram_ratio: float = PENTAGRAM_RATIO
    pentagram_inner_rotation: float = -math.pi / 2
    polygon_padding_ratio: float = 0.05

    decorations: Dict[str, DecorationSpec] = field(default_factory=_default_decorations)
    decoration_offset_ratio: float = 1.2
    emphasis_ratios: Dict[str, float] = field(default_factory=_default_emphasis)

    link_base_angle: float = math.pi
    link_gap_ratio: float = 0.25

    line_stroke_ratio: float = 0.02
    chain_stroke_ratio: float = 0.04

    @property
    def symbol_size(self) -> float:
        return self.base_size * self.symbol_font_size

    @property
    def phrase_size(self) -> float:
        return self.base_size * self.phrase_font_size

    @property
    def pentagram_outer_rotation(self) -> float:
        return self.pentagram_inner_rotation + PENTAGRAM_OUTER_OFFSET

    def ring_ratio(self, double: bool) -> float:
        return self.double_ring_ratio if double else 1.0

    def stroke_ratio(self, stroke: str) -> float:
        return self.chain_stroke_ratio if stroke == "chain" else self.line_stroke_ratio

    def polygon_rotation(self, sides: int) -> float:
        """Rotation that puts one edge of a ``sides``-gon flat at the bottom."""
        return -math.pi / 2 - math.pi / sides

    def decoration(self, kind: str) -> Tuple[float, float, float]:
        spec = self.decorations[kind]
        return spec.width_ratio, spec.height_ratio, spec.angle


_LAYOUT_CONFIG = LayoutConfig()


def get_layout_config() -> LayoutConfig:
    return copy.deepcopy(_LAYOUT_CONFIG)


def set_layout_config(config: LayoutConfig) -> None:
    global _LAYOUT_CONFIG
    _LAYOUT_CONFIG = copy.deepcopy(config)


__all__ = [
    "DecorationSpec",
    "GOLDEN_RATIO",
    "LayoutConfig",
    "PENTAGRAM_OUTER_OFFSET",
    "PENTAGRAM_RATIO",
    "get_layout_config",
    "set_layout_config",
]
