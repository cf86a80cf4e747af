from __future__ import annotations

from collections import Counter

from .grid_io import code_char
from .models import FillGrid


FILLED_CHAR = "*"


def preview_grid(
    grid: FillGrid,
    *,
    order: list[tuple[int, int]] | None = None,
    title: str | None = None,
) -> str:
    """
    Text rendering of a grid, one character per cell. Cells claimed by `order`
    are drawn as '*'.
    """
    filled = set(order or [])

    lines: list[str] = []
    lines.append(f"{title or 'grid'} ({grid.w}x{grid.h})")
    for y in range(grid.h):
        lines.append(
            "".join(FILLED_CHAR if (x, y) in filled else code_char(grid.at(x, y)) for x in range(grid.w))
        )

    # Legend + counts
    cnt = Counter(grid.cells)
    lines.append("")
    lines.append("colors:")
    for c in sorted(cnt):
        lines.append(f"  {c:>3} {code_char(c)}  count={cnt[c]}")

    if order is not None:
        lines.append("")
        lines.append(f"filled: {len(filled)} of {grid.w * grid.h} cells")
    return "\n".join(lines) + "\n"
