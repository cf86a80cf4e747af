from __future__ import annotations

from collections import deque
from typing import MutableSequence, Sequence


def neighbors_4(x: int, y: int, w: int, h: int) -> list[tuple[int, int]]:
    """
    Orthogonal neighbors clipped to the grid, in a fixed order:
    left, right, up, down. The order feeds straight into the fill order.
    """
    out: list[tuple[int, int]] = []
    if x > 0:
        out.append((x - 1, y))
    if x + 1 < w:
        out.append((x + 1, y))
    if y > 0:
        out.append((x, y - 1))
    if y + 1 < h:
        out.append((x, y + 1))
    return out


def flood_fill_with_positions(
    cells: MutableSequence[int],
    w: int,
    h: int,
    x0: int,
    y0: int,
    *,
    target: int,
    replacement: int,
) -> list[tuple[int, int]]:
    """
    BFS fill that recolors `target` cells to `replacement` in place and
    returns the recolored positions in discovery order.

    A cell can be queued twice; the second dequeue sees `replacement` and is skipped.
    """
    if target == replacement:
        raise ValueError("replacement must differ from target")
    q: deque[tuple[int, int]] = deque([(x0, y0)])
    out: list[tuple[int, int]] = []
    while q:
        x, y = q.popleft()
        i = y * w + x
        if cells[i] != target:
            continue
        cells[i] = replacement
        out.append((x, y))
        for nx, ny in neighbors_4(x, y, w, h):
            if cells[ny * w + nx] == target:
                q.append((nx, ny))
    return out


def flood_fill_peek(
    cells: Sequence[int],
    w: int,
    h: int,
    x0: int,
    y0: int,
    *,
    target: int,
) -> list[tuple[int, int]]:
    """Same traversal as flood_fill_with_positions, read-only."""
    q: deque[tuple[int, int]] = deque([(x0, y0)])
    seen = {(x0, y0)}
    out: list[tuple[int, int]] = []
    while q:
        x, y = q.popleft()
        if cells[y * w + x] != target:
            continue
        out.append((x, y))
        for nx, ny in neighbors_4(x, y, w, h):
            if (nx, ny) not in seen and cells[ny * w + nx] == target:
                seen.add((nx, ny))
                q.append((nx, ny))
    return out
