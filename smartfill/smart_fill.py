from __future__ import annotations

import logging
from dataclasses import dataclass

from .models import FILL_COLOR, FillGrid, Pos, RoundStats, SmartFillResult
from .regions import flood_fill_peek, flood_fill_with_positions, neighbors_4


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FillConfig:
    fill_color: int = FILL_COLOR
    max_rounds: int | None = None  # None: run until a round absorbs nothing

    def __post_init__(self) -> None:
        if not (0 <= self.fill_color <= 255):
            raise ValueError(f"fill_color must be in 0..255, got {self.fill_color}")
        if self.max_rounds is not None and self.max_rounds < 0:
            raise ValueError("max_rounds must be >= 0")


def _neighbor_regions(
    cells: bytearray,
    w: int,
    h: int,
    filled: list[tuple[int, int]],
    fill_color: int,
) -> list[tuple[int, list[tuple[int, int]]]]:
    """
    Every distinct region touching the filled area, in discovery order,
    tagged with its color.
    """
    seen: set[tuple[int, int]] = set()
    out: list[tuple[int, list[tuple[int, int]]]] = []
    for x, y in filled:
        for nx, ny in neighbors_4(x, y, w, h):
            c = cells[ny * w + nx]
            if c == fill_color or (nx, ny) in seen:
                continue
            region = flood_fill_peek(cells, w, h, nx, ny, target=c)
            seen.update(region)
            out.append((c, region))
    return out


def smart_fill(grid: FillGrid, start_x: int, start_y: int, cfg: FillConfig | None = None) -> SmartFillResult:
    """
    Fill the region under (start_x, start_y), then keep swallowing adjacent
    regions that are strictly smaller than everything filled so far.

    Neighbor regions are rediscovered from scratch each round, so a region that
    was too big earlier is reconsidered once the filled area has grown past it.
    `grid` is never modified; the fill runs on a private copy.
    """
    if cfg is None:
        cfg = FillConfig()
    fill = cfg.fill_color
    start = Pos(x=start_x, y=start_y)

    if not grid.in_bounds(start_x, start_y):
        logger.debug("start %s outside %dx%d grid; nothing to fill", (start_x, start_y), grid.w, grid.h)
        return SmartFillResult(start=start, fill_color=fill, initial_size=0, order=[])
    target = grid.at(start_x, start_y)
    if target == fill:
        logger.debug("start %s already holds fill color %d", (start_x, start_y), fill)
        return SmartFillResult(start=start, fill_color=fill, initial_size=0, order=[])

    w, h = grid.w, grid.h
    cells = bytearray(grid.cells)

    order = flood_fill_with_positions(cells, w, h, start_x, start_y, target=target, replacement=fill)
    filled_size = len(order)
    initial_size = filled_size
    logger.debug("initial fill from %s: color %d, %d cells", (start_x, start_y), target, filled_size)

    rounds: list[RoundStats] = []
    converged = True
    while True:
        if cfg.max_rounds is not None and len(rounds) >= cfg.max_rounds:
            converged = False
            logger.debug("stopping after max_rounds=%d", cfg.max_rounds)
            break

        regions = _neighbor_regions(cells, w, h, order, fill)
        absorbed = 0
        absorbed_cells = 0
        for _color, region in regions:
            # Strictly smaller; ties stay put.
            if len(region) >= filled_size:
                continue
            for x, y in region:
                cells[y * w + x] = fill
                order.append((x, y))
            filled_size += len(region)
            absorbed += 1
            absorbed_cells += len(region)

        rounds.append(
            RoundStats(
                discovered=len(regions),
                absorbed=absorbed,
                absorbed_cells=absorbed_cells,
                filled_size=filled_size,
            )
        )
        logger.debug(
            "round %d: %d neighbor regions, absorbed %d (%d cells), filled_size=%d",
            len(rounds),
            len(regions),
            absorbed,
            absorbed_cells,
            filled_size,
        )
        if absorbed == 0:
            break

    if converged:
        logger.debug("fixed point after %d round(s): %d of %d cells filled", len(rounds), filled_size, w * h)

    return SmartFillResult(
        start=start,
        fill_color=fill,
        initial_size=initial_size,
        order=order,
        rounds=rounds,
        converged=converged,
    )


def smart_fill_order(
    grid: FillGrid,
    start_x: int,
    start_y: int,
    cfg: FillConfig | None = None,
) -> list[tuple[int, int]]:
    return smart_fill(grid, start_x, start_y, cfg).order
