from __future__ import annotations

import argparse
import json
import sys

from .grid_io import load_grid
from .preview import preview_grid
from .render_png import fill_to_png
from .setup_logging import setup_logging
from .smart_fill import FillConfig, smart_fill


def _add_common(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")


def _cmd_fill(argv: list[str]) -> int:
    ap = argparse.ArgumentParser(prog="smartfill fill")
    ap.add_argument("grid", type=str, help="Path to a grid .json or .txt")
    ap.add_argument("--x", type=int, required=True)
    ap.add_argument("--y", type=int, required=True)
    ap.add_argument("--fill-color", type=int, default=3)
    ap.add_argument("--max-rounds", type=int, default=None, help="Stop after N absorption rounds")
    ap.add_argument("--flat", action="store_true", help="Emit [x0, y0, x1, y1, ...] instead of the full result")
    ap.add_argument("--out", type=str, default="-", help="Output path or '-' for stdout")
    _add_common(ap)
    ns = ap.parse_args(argv)
    setup_logging(ns.verbose)

    grid = load_grid(ns.grid)
    cfg = FillConfig(fill_color=ns.fill_color, max_rounds=ns.max_rounds)
    res = smart_fill(grid, ns.x, ns.y, cfg)
    payload = res.flat() if ns.flat else res.to_json_dict()

    data = json.dumps(payload) if ns.flat else json.dumps(payload, indent=2, sort_keys=True)
    if ns.out == "-":
        sys.stdout.write(data + "\n")
    else:
        with open(ns.out, "w", encoding="utf-8") as f:
            f.write(data + "\n")
    return 0


def _cmd_preview(argv: list[str]) -> int:
    ap = argparse.ArgumentParser(prog="smartfill preview")
    ap.add_argument("grid", type=str, help="Path to a grid .json or .txt")
    ap.add_argument("--x", type=int, default=None, help="Start x; shows the fill when given with --y")
    ap.add_argument("--y", type=int, default=None)
    ap.add_argument("--fill-color", type=int, default=3)
    _add_common(ap)
    ns = ap.parse_args(argv)
    setup_logging(ns.verbose)
    if (ns.x is None) != (ns.y is None):
        ap.error("--x and --y must be given together")

    grid = load_grid(ns.grid)
    order = None
    if ns.x is not None:
        order = smart_fill(grid, ns.x, ns.y, FillConfig(fill_color=ns.fill_color)).order
    sys.stdout.write(preview_grid(grid, order=order, title=ns.grid))
    return 0


def _cmd_export_png(argv: list[str]) -> int:
    ap = argparse.ArgumentParser(prog="smartfill export-png")
    ap.add_argument("grid", type=str)
    ap.add_argument("--x", type=int, default=None)
    ap.add_argument("--y", type=int, default=None)
    ap.add_argument("--fill-color", type=int, default=3)
    ap.add_argument("--steps", type=int, default=None, help="Only paint the first N claimed cells")
    ap.add_argument("--scale", type=int, default=16)
    ap.add_argument("--no-grid", action="store_true")
    ap.add_argument("--out", type=str, required=True, help="Output .png path")
    _add_common(ap)
    ns = ap.parse_args(argv)
    setup_logging(ns.verbose)
    if (ns.x is None) != (ns.y is None):
        ap.error("--x and --y must be given together")

    grid = load_grid(ns.grid)
    order: list[tuple[int, int]] = []
    if ns.x is not None:
        order = smart_fill(grid, ns.x, ns.y, FillConfig(fill_color=ns.fill_color)).order
    fill_to_png(
        grid,
        order,
        ns.out,
        steps=ns.steps,
        scale=ns.scale,
        draw_grid=not ns.no_grid,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] in ("-h", "--help"):
        print("smartfill commands: fill, preview, export-png")
        print("Example: smartfill fill grid.json --x 0 --y 0 --out order.json")
        print("Example: smartfill fill grid.txt --x 2 --y 1 --flat")
        print("Example: smartfill preview grid.txt --x 2 --y 1")
        print("Example: smartfill export-png grid.json --x 0 --y 0 --steps 10 --out frame_010.png")
        return 0

    cmd = argv[0]
    sub_argv = argv[1:]
    handlers = {
        "fill": _cmd_fill,
        "preview": _cmd_preview,
        "export-png": _cmd_export_png,
    }
    handler = handlers.get(cmd)
    if handler is None:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        return 2
    try:
        return handler(sub_argv)
    except (OSError, ValueError) as e:
        print(f"smartfill {cmd}: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
