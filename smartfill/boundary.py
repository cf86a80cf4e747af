from __future__ import annotations

from array import array
from typing import Sequence

from .models import FillGrid
from .smart_fill import smart_fill


def flatten_positions(order: list[tuple[int, int]]) -> array:
    # "I" is a 4-byte unsigned int on every platform we build for.
    out = array("I")
    for x, y in order:
        out.append(x)
        out.append(y)
    return out


def compute_smart_fill(
    grid: Sequence[int] | bytes | bytearray | memoryview,
    width: int,
    height: int,
    start_x: int,
    start_y: int,
) -> array:
    """
    Flat-buffer entry point.

    Takes a row-major buffer of color codes and returns the claimed cells as
    interleaved uint32 pairs [x0, y0, x1, y1, ...] in fill order. An empty
    array means there was nothing to do (start outside the grid, or start cell
    already holds the fill color). A buffer whose length is not width*height
    raises ValueError. The caller's buffer is copied, never written.
    """
    if len(grid) != width * height:
        raise ValueError(f"grid length mismatch: expected {width * height}, got {len(grid)}")
    # Zero-sized grids land here too.
    if not (0 <= start_x < width and 0 <= start_y < height):
        return array("I")
    g = FillGrid.from_flat(grid, w=width, h=height)
    res = smart_fill(g, start_x, start_y)
    return flatten_positions(res.order)
