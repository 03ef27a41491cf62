import argparse
import json
import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Optional, Sequence

from conjure_visualizer import (
    FigureFormatError,
    GeometryError,
    LayoutError,
    boundary,
    figure_from_dict,
    get_layout_config,
    iter_nodes,
    layout,
    node_to_dict,
    place_in_row,
)
from conjure_visualizer.demo import hello_world_figure
from conjure_visualizer.layout import ArrangementNode, node_kind

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _load_figure(path: Optional[str]):
    if not path:
        logger.info("No figure file given, using the built-in demo")
        return hello_world_figure()
    logger.info("Loading figure tree from %s", path)
    with open(path, encoding="utf-8") as fin:
        data = json.load(fin)
    return figure_from_dict(data)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Lay out conjure figure trees")
    parser.add_argument("path", nargs="?", help="JSON figure tree (default: built-in demo)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--base-size",
        type=float,
        help="Override the base font size of the layout configuration",
    )
    parser.add_argument(
        "--row-gap",
        type=float,
        default=None,
        help="Place top-level arrangement items in a row with this gap",
    )
    parser.add_argument(
        "--output",
        help="Write the positioned layout tree as JSON to the given path",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    config = get_layout_config()
    if args.base_size is not None:
        config.base_size = args.base_size

    try:
        figure = _load_figure(args.path)
    except (
        OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError, FigureFormatError
    ) as exc:
        logger.error("Cannot read figure tree: %s", exc)
        return 2
    try:
        node = layout(figure, config)
    except (LayoutError, GeometryError) as exc:
        logger.error("Layout failed: %s", exc)
        return 1

    if args.row_gap is not None and isinstance(node, ArrangementNode):
        place_in_row(node, args.row_gap)

    counts = Counter(node_kind(item) for item in iter_nodes(node))
    logger.info("Node counts: %s", ", ".join(f"{kind}={count}" for kind, count in sorted(counts.items())))
    (x_min, x_max), (y_min, y_max) = boundary(node).outer_coords_range()
    print(f"extent: {x_max - x_min:.3f} x {y_max - y_min:.3f}")

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(node_to_dict(node), indent=2), encoding="utf-8")
        logger.info("Wrote layout JSON to %s", out_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
