"""
lifegrid — entry point.

Usage:
    python -m lifegrid compose tasks.json                 # day canvas, JSON out
    python -m lifegrid compose tasks.json --preset week
    python -m lifegrid compose - --grid < tasks.json      # read stdin, show grid
    python -m lifegrid presets
"""

import json
import logging
import sys

USAGE = (
    "Usage: python -m lifegrid compose FILE [--preset day|week|month] "
    "[--grid] [--verbose]\n"
    "       python -m lifegrid presets"
)


def _load_document(path: str) -> dict:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def compose(args: list[str]) -> int:
    from lifegrid.pipeline.config import ConfigurationError, canvas_for_preset
    from lifegrid.pipeline.placer import (
        OccupancyGrid, compose_layout, layout_to_dict,
    )
    from lifegrid.pipeline.tasks import parse_tasks_document

    path = None
    preset = "day"
    show_grid = False
    for i, a in enumerate(args):
        if a == "--preset" and i + 1 < len(args):
            preset = args[i + 1]
        elif a == "--grid":
            show_grid = True
        elif a in ("--verbose", "-v"):
            logging.getLogger("lifegrid").setLevel(logging.DEBUG)
        elif path is None and not a.startswith("--") and args[i - 1:i] != ["--preset"]:
            path = a

    if path is None:
        print(USAGE)
        return 1

    try:
        canvas = canvas_for_preset(preset)
        items = parse_tasks_document(_load_document(path))
    except (ConfigurationError, ValueError, TypeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = compose_layout(items, canvas)
    print(json.dumps(layout_to_dict(result), indent=2))

    if show_grid:
        grid = OccupancyGrid(canvas.columns, canvas.rows)
        for p in result.placements:
            grid.mark_rect(p.origin_row - 1, p.origin_col - 1,
                           p.width, p.height, p.category)
        print()
        print(grid.to_text())

    return 0


def presets() -> int:
    from lifegrid.pipeline.config import CANVAS_PRESETS

    for name, canvas in CANVAS_PRESETS.items():
        print(f"{name:<6} {canvas.columns}×{canvas.rows}")
    return 0


def main():
    logging.basicConfig(level=logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    args = sys.argv[1:]
    cmd = args[0] if args else ""

    if cmd == "compose":
        sys.exit(compose(args[1:]))
    elif cmd == "presets":
        sys.exit(presets())
    else:
        if cmd:
            print(f"Unknown command: {cmd}")
        print(USAGE)
        sys.exit(1)


if __name__ == "__main__":
    main()
