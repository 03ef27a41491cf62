"""Radial layout engine turning a figure tree into positioned layout nodes."""

from .config import DecorationSpec, LayoutConfig, get_layout_config, set_layout_config
from .engine import LayoutError, layout
from .export import node_to_dict, shape_to_dict
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
    children,
    iter_nodes,
    node_kind,
    rotate_node,
    scale_node,
    translate_node,
)
from .placement import center_on_origin, place_in_row

__all__ = [
    "ArrangementNode",
    "CircleNode",
    "DecoratedNode",
    "DecorationSpec",
    "EmphasizedNode",
    "LayoutConfig",
    "LayoutError",
    "LayoutNode",
    "LinkNode",
    "MeasureFunc",
    "MonospaceMetrics",
    "PentagramNode",
    "PhraseNode",
    "PolygonNode",
    "SymbolNode",
    "boundary",
    "center_on_origin",
    "children",
    "get_layout_config",
    "iter_nodes",
    "layout",
    "node_kind",
    "node_to_dict",
    "place_in_row",
    "rotate_node",
    "scale_node",
    "set_layout_config",
    "shape_to_dict",
    "translate_node",
]
