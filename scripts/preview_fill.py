#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os
import sys

_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)

from smartfill.grid_io import load_grid  # noqa: E402
from smartfill.preview import preview_grid  # noqa: E402
from smartfill.smart_fill import smart_fill  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("path", help="Path to a grid .json or .txt")
    ap.add_argument("--x", type=int, required=True)
    ap.add_argument("--y", type=int, required=True)
    ns = ap.parse_args(argv)
    grid = load_grid(ns.path)
    res = smart_fill(grid, ns.x, ns.y)
    sys.stdout.write(preview_grid(grid, order=res.order, title=ns.path))
    for i, r in enumerate(res.rounds, start=1):
        sys.stdout.write(f"round {i}: regions={r.discovered} absorbed={r.absorbed} filled={r.filled_size}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
