import pytest

from conjure_visualizer import FigureFormatError, figure_from_dict
from conjure_visualizer.demo import hello_world_figure
from conjure_visualizer.figure import (
    Arrangement,
    Circle,
    Decorated,
    Emphasized,
    Link,
    Pentagram,
    Phrase,
    RegularPolygon,
    Symbol,
    count_figures,
)


def test_nested_dict_is_loaded():
    data = {
        "kind": "arrangement",
        "items": [
            {
                "kind": "link",
                "items": [
                    {"kind": "decorated", "decoration": "hat", "content": {"kind": "symbol", "text": "*"}},
                    {
                        "kind": "circle",
                        "double": True,
                        "pattern": "rings",
                        "content": {"kind": "pentagram", "content": {"kind": "symbol", "text": "utter"}},
                        "rim": [{"kind": "polygon", "sides": 5, "content": {"kind": "phrase", "text": "hi"}}],
                    },
                ],
            },
            {"kind": "emphasized", "emphasis": "aura", "content": {"kind": "symbol", "text": "x"}},
        ],
    }
    figure = figure_from_dict(data)
    assert figure == Arrangement(
        [
            Link(
                items=[
                    Decorated(kind="hat", content=Symbol("*")),
                    Circle(
                        content=Pentagram(Symbol("utter")),
                        rim=[RegularPolygon(sides=5, content=Phrase("hi"))],
                        pattern="rings",
                        double=True,
                    ),
                ],
                stroke="chain",
            ),
            Emphasized(kind="aura", content=Symbol("x")),
        ]
    )


def test_circle_content_may_be_missing_in_data():
    figure = figure_from_dict({"kind": "circle"})
    assert figure == Circle(content=None)


@pytest.mark.parametrize(
    "data, fragment",
    [
        ({"kind": "star"}, "unknown figure kind"),
        ({"kind": "symbol"}, "requires 'text'"),
        ({"kind": "symbol", "text": 3}, "must be a string"),
        ({"kind": "decorated", "decoration": "crown", "content": {"kind": "symbol", "text": "a"}}, "unknown decoration"),
        ({"kind": "polygon", "sides": "5", "content": {"kind": "symbol", "text": "a"}}, "must be an integer"),
        ({"kind": "circle", "stroke": "dotted"}, "unknown stroke pattern"),
        ({"kind": "circle", "double": "false"}, "must be a boolean"),
        ({"kind": "link", "items": {"kind": "symbol"}}, "must be a list"),
        (["symbol"], "must be a mapping"),
    ],
)
def test_malformed_figures_are_rejected(data, fragment):
    with pytest.raises(FigureFormatError) as excinfo:
        figure_from_dict(data)
    assert fragment in str(excinfo.value)


def test_count_figures():
    assert count_figures(Symbol("a")) == 1
    assert count_figures(hello_world_figure()) == 13
