from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence


FILL_COLOR = 3  # reserved code: "claimed by this fill"


@dataclass(frozen=True, slots=True)
class Pos:
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class FillGrid:
    w: int
    h: int
    cells: bytes  # flat, row-major (index = y * w + x)

    def __post_init__(self) -> None:
        if self.h <= 0 or self.w <= 0:
            raise ValueError("Grid dimensions must be positive")
        if isinstance(self.cells, (int, str)):
            raise ValueError("cells must be color codes in 0..255")
        try:
            buf = bytes(self.cells)
        except (TypeError, ValueError) as e:
            raise ValueError("cells must be color codes in 0..255") from e
        if len(buf) != self.w * self.h:
            raise ValueError(f"cells length mismatch: expected {self.w * self.h}, got {len(buf)}")
        object.__setattr__(self, "cells", buf)

    @classmethod
    def from_flat(cls, cells: Sequence[int] | bytes | bytearray | memoryview, *, w: int, h: int) -> FillGrid:
        return cls(w=w, h=h, cells=cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.w and 0 <= y < self.h

    def at(self, x: int, y: int) -> int:
        return self.cells[y * self.w + x]


@dataclass(frozen=True, slots=True)
class RoundStats:
    discovered: int  # distinct neighbor regions found this round
    absorbed: int
    absorbed_cells: int
    filled_size: int  # after the round


@dataclass(frozen=True, slots=True)
class SmartFillResult:
    start: Pos
    fill_color: int
    initial_size: int
    order: list[tuple[int, int]]  # claim order
    rounds: list[RoundStats] = field(default_factory=list)
    converged: bool = True

    @property
    def filled_size(self) -> int:
        return len(self.order)

    def flat(self) -> list[int]:
        out: list[int] = []
        for x, y in self.order:
            out.append(x)
            out.append(y)
        return out

    def to_json_dict(self) -> dict[str, Any]:
        return {
            "start": {"x": self.start.x, "y": self.start.y},
            "fill_color": self.fill_color,
            "initial_size": self.initial_size,
            "filled_size": self.filled_size,
            "converged": self.converged,
            "order": [{"x": x, "y": y} for x, y in self.order],
            "rounds": [
                {
                    "discovered": r.discovered,
                    "absorbed": r.absorbed,
                    "absorbed_cells": r.absorbed_cells,
                    "filled_size": r.filled_size,
                }
                for r in self.rounds
            ],
        }
