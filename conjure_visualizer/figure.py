"""Figure tree handed to the layout engine.

The tree is produced by an external translation step from the parsed program.
It can be built directly from these dataclasses or loaded from plain nested
dicts (for example JSON) with :func:`figure_from_dict`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union
from typing import Literal

StrokePattern = Literal["line", "chain"]
CirclePattern = Literal[
    "none",
    "concentric_lines",
    "stroke_triangles",
    "fill_triangles",
    "dots",
    "runes",
    "rings",
]
DecorationKind = Literal["tilde", "hat", "rays"]
EmphasisKind = Literal["halo", "aura"]

STROKE_PATTERNS = ("line", "chain")
CIRCLE_PATTERNS = (
    "none",
    "concentric_lines",
    "stroke_triangles",
    "fill_triangles",
    "dots",
    "runes",
    "rings",
)
DECORATION_KINDS = ("tilde", "hat", "rays")
EMPHASIS_KINDS = ("halo", "aura")


class FigureFormatError(ValueError):
    """Raised when a figure description cannot be turned into a figure tree."""


@dataclass
class Symbol:
    text: str


@dataclass
class Phrase:
    text: str


@dataclass
class Pentagram:
    content: "Figure"


@dataclass
class Circle:
    content: Optional["Figure"]
    rim: List["Figure"] = field(default_factory=list)
    stroke: StrokePattern = "line"
    pattern: CirclePattern = "none"
    double: bool = False


@dataclass
class RegularPolygon:
    sides: int
    content: "Figure"
    stroke: StrokePattern = "line"


@dataclass
class Decorated:
    kind: DecorationKind
    content: "Figure"


@dataclass
class Emphasized:
    kind: EmphasisKind
    content: "Figure"


@dataclass
class Link:
    items: List["Figure"]
    stroke: StrokePattern = "chain"


@dataclass
class Arrangement:
    items: List["Figure"] = field(default_factory=list)


Figure = Union[
    Symbol,
    Phrase,
    Pentagram,
    Circle,
    RegularPolygon,
    Decorated,
    Emphasized,
    Link,
    Arrangement,
]


def _require(data: Mapping[str, Any], key: str, kind: str) -> Any:
    if key not in data:
        raise FigureFormatError(f"{kind} figure requires '{key}'")
    return data[key]


def _choice(value: Any, allowed: tuple, what: str) -> str:
    if value not in allowed:
        raise FigureFormatError(f"unknown {what} {value!r}; expected one of {', '.join(allowed)}")
    return value


def _children(data: Mapping[str, Any], key: str, kind: str) -> List[Figure]:
    values = data.get(key, [])
    if not isinstance(values, list):
        raise FigureFormatError(f"{kind} figure '{key}' must be a list")
    return [figure_from_dict(value) for value in values]


def figure_from_dict(data: Mapping[str, Any]) -> Figure:
    """Build a figure tree from ``{"kind": ..., ...}`` mappings."""

    if not isinstance(data, Mapping):
        raise FigureFormatError(f"figure must be a mapping, got {type(data).__name__}")
    kind = data.get("kind")
    if kind in ("symbol", "phrase"):
        text = _require(data, "text", kind)
        if not isinstance(text, str):
            raise FigureFormatError(f"{kind} text must be a string")
        return Symbol(text) if kind == "symbol" else Phrase(text)
    if kind == "pentagram":
        return Pentagram(figure_from_dict(_require(data, "content", kind)))
    if kind == "circle":
        content = data.get("content")
        double = data.get("double", False)
        if not isinstance(double, bool):
            raise FigureFormatError("circle double flag must be a boolean")
        return Circle(
            content=figure_from_dict(content) if content is not None else None,
            rim=_children(data, "rim", kind),
            stroke=_choice(data.get("stroke", "line"), STROKE_PATTERNS, "stroke pattern"),
            pattern=_choice(data.get("pattern", "none"), CIRCLE_PATTERNS, "circle pattern"),
            double=double,
        )
    if kind == "polygon":
        sides = _require(data, "sides", kind)
        if not isinstance(sides, int) or isinstance(sides, bool):
            raise FigureFormatError("polygon sides must be an integer")
        return RegularPolygon(
            sides=sides,
            content=figure_from_dict(_require(data, "content", kind)),
            stroke=_choice(data.get("stroke", "line"), STROKE_PATTERNS, "stroke pattern"),
        )
    if kind == "decorated":
        return Decorated(
            kind=_choice(_require(data, "decoration", kind), DECORATION_KINDS, "decoration"),
            content=figure_from_dict(_require(data, "content", kind)),
        )
    if kind == "emphasized":
        return Emphasized(
            kind=_choice(_require(data, "emphasis", kind), EMPHASIS_KINDS, "emphasis"),
            content=figure_from_dict(_require(data, "content", kind)),
        )
    if kind == "link":
        return Link(
            items=_children(data, "items", kind),
            stroke=_choice(data.get("stroke", "chain"), STROKE_PATTERNS, "stroke pattern"),
        )
    if kind == "arrangement":
        return Arrangement(items=_children(data, "items", kind))
    raise FigureFormatError(f"unknown figure kind {kind!r}")


def figure_kind(figure: Figure) -> str:
    return type(figure).__name__


def count_figures(figure: Figure) -> int:
    """Number of figures in the tree rooted at ``figure``."""

    children: List[Figure] = []
    if isinstance(figure, (Pentagram, RegularPolygon, Decorated, Emphasized)):
        children = [figure.content]
    elif isinstance(figure, Circle):
        children = ([figure.content] if figure.content is not None else []) + list(figure.rim)
    elif isinstance(figure, (Link, Arrangement)):
        children = list(figure.items)
    return 1 + sum(count_figures(child) for child in children)


__all__ = [
    "Arrangement",
    "Circle",
    "CirclePattern",
    "CIRCLE_PATTERNS",
    "Decorated",
    "DecorationKind",
    "DECORATION_KINDS",
    "Emphasized",
    "EmphasisKind",
    "EMPHASIS_KINDS",
    "Figure",
    "FigureFormatError",
    "Link",
    "Pentagram",
    "Phrase",
    "RegularPolygon",
    "StrokePattern",
    "STROKE_PATTERNS",
    "Symbol",
    "count_figures",
    "figure_from_dict",
    "figure_kind",
]
