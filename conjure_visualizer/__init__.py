from .figure import (
    Arrangement,
    Circle,
    Decorated,
    Emphasized,
    Figure,
    FigureFormatError,
    Link,
    Pentagram,
    Phrase,
    RegularPolygon,
    Symbol,
    figure_from_dict,
)
from .geometry import GeometryError
from .layout import (
    LayoutConfig,
    LayoutError,
    LayoutNode,
    MonospaceMetrics,
    boundary,
    get_layout_config,
    iter_nodes,
    layout,
    node_to_dict,
    place_in_row,
    rotate_node,
    scale_node,
    set_layout_config,
    translate_node,
)

__version__ = "0.1.0"

__all__ = [
    'Arrangement',
    'Circle',
    'Decorated',
    'Emphasized',
    'Figure',
    'FigureFormatError',
    'Link',
    'Pentagram',
    'Phrase',
    'RegularPolygon',
    'Symbol',
    'figure_from_dict',
    'GeometryError',
    'LayoutConfig',
    'LayoutError',
    'LayoutNode',
    'MonospaceMetrics',
    'boundary',
    'get_layout_config',
    'iter_nodes',
    'layout',
    'node_to_dict',
    'place_in_row',
    'rotate_node',
    'scale_node',
    'set_layout_config',
    'translate_node',
]
