"""Example: a spell cast with three rim components, laid out and summarized."""

from conjure_visualizer import Circle, Pentagram, Phrase, RegularPolygon, Symbol, boundary, layout
from conjure_visualizer.layout import CircleNode, LayoutConfig, iter_nodes, node_kind

FIGURE = Circle(
    content=Pentagram(Circle(content=Symbol("utter"))),
    rim=[
        RegularPolygon(sides=5, content=Phrase("Hello World!")),
        Circle(content=Symbol("n")),
        RegularPolygon(sides=3, content=Phrase("twice")),
    ],
    double=True,
)


def main() -> None:
    config = LayoutConfig(max_overlap_ratio=0.05)
    node = layout(FIGURE, config)
    assert isinstance(node, CircleNode)

    print("Circle:")
    print(f"  inner radius: {node.inner.radius:.3f}")
    print(f"  outer radius: {node.outer.radius:.3f}")
    print(f"  anchor radius: {node.anchor.radius:.3f}")
    for idx, (item, angle) in enumerate(zip(node.rim, node.rim_angles)):
        shape = boundary(item)
        (x_min, x_max), (y_min, y_max) = shape.outer_coords_range()
        center = ((x_min + x_max) / 2.0, (y_min + y_max) / 2.0)
        print(f"  rim[{idx}] {node_kind(item)} angle={angle:.3f} center=({center[0]:.2f}, {center[1]:.2f})")

    print("Nodes:")
    for item in iter_nodes(node):
        print(f"  {node_kind(item)}: outer radius {boundary(item).outer_radius():.3f}")


if __name__ == "__main__":
    main()
