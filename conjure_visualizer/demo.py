"""Built-in demo: a program binding ``*`` to a spell casting ``utter`` on a phrase."""

import json

from .figure import Arrangement, Circle, Decorated, Link, Pentagram, Phrase, RegularPolygon, Symbol
from .layout import layout, node_to_dict


def hello_world_figure() -> Arrangement:
    manifest = Decorated(
        kind="hat",
        content=Circle(content=Symbol("*")),
    )
    cast = Circle(
        content=Pentagram(Circle(content=Symbol("utter"))),
        rim=[RegularPolygon(sides=5, content=Phrase("Hello World!"))],
        double=True,
    )
    spell = Decorated(
        kind="rays",
        content=Circle(content=cast, pattern="rings", double=True),
    )
    return Arrangement([Link(items=[manifest, spell], stroke="chain")])


def run():
    node = layout(hello_world_figure())
    print(json.dumps(node_to_dict(node), indent=2))


if __name__ == "__main__":
    run()
