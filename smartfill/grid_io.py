from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .models import FillGrid


def code_char(c: int) -> str:
    # 0-9 then A-Z
    if 0 <= c <= 9:
        return str(c)
    j = c - 10
    if 0 <= j < 26:
        return chr(ord("A") + j)
    return "?"


def char_code(ch: str) -> int:
    if ch.isdigit():
        return int(ch)
    u = ch.upper()
    if "A" <= u <= "Z":
        return ord(u) - ord("A") + 10
    raise ValueError(f"Invalid cell character: {ch!r} (expected 0-9 or A-Z)")


def grid_from_rows(rows: list[list[int]], *, w: int | None = None, h: int | None = None) -> FillGrid:
    if not isinstance(rows, list) or any(not isinstance(r, list) for r in rows):
        raise ValueError("cells must be a list of rows")
    if not rows:
        raise ValueError("grid must have at least one row")
    rw = len(rows[0])
    if any(len(r) != rw for r in rows):
        raise ValueError("cells must be rectangular")
    if w is not None and w != rw:
        raise ValueError(f"cells width mismatch: expected {w}, got {rw}")
    if h is not None and h != len(rows):
        raise ValueError(f"cells height mismatch: expected {h}, got {len(rows)}")
    flat: list[int] = []
    for row in rows:
        for c in row:
            if not isinstance(c, int) or isinstance(c, bool) or not (0 <= c <= 255):
                raise ValueError(f"Invalid color code: {c!r} (expected int in 0..255)")
            flat.append(c)
    return FillGrid.from_flat(flat, w=rw, h=len(rows))


def grid_to_rows(grid: FillGrid) -> list[list[int]]:
    return [list(grid.cells[y * grid.w : (y + 1) * grid.w]) for y in range(grid.h)]


def grid_from_json_dict(d: dict[str, Any]) -> FillGrid:
    if not isinstance(d, dict) or "cells" not in d:
        raise ValueError("grid JSON must be an object with a 'cells' key")
    return grid_from_rows(d["cells"], w=d.get("w"), h=d.get("h"))


def grid_to_json_dict(grid: FillGrid) -> dict[str, Any]:
    return {"w": grid.w, "h": grid.h, "cells": grid_to_rows(grid)}


def grid_from_text(text: str) -> FillGrid:
    """
    One row per non-blank line, one character per cell (0-9, then A-Z for 10-35).
    Whitespace inside a row is ignored so rows can be written spaced out.
    """
    rows: list[list[int]] = []
    for line in text.splitlines():
        s = "".join(line.split())
        if not s:
            continue
        rows.append([char_code(ch) for ch in s])
    return grid_from_rows(rows)


def load_grid(path: str | Path) -> FillGrid:
    p = Path(path)
    with open(p, "r", encoding="utf-8") as f:
        raw = f.read()
    if p.suffix.lower() == ".json":
        try:
            d = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"{p}: invalid JSON: {e}") from e
        return grid_from_json_dict(d)
    return grid_from_text(raw)
