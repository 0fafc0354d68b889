from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from .vector2 import GridPos, Rgb


@dataclass(frozen=True)
class Block:
    """A locked cell of the stack."""

    color: Rgb


Row = List[Optional[Block]]


@dataclass
class PlacementResult:
    lines_cleared: int
    game_over: bool


class Board:
    """Stack of locked blocks, bottom row first.

    Rows are appended only when a piece locks above the current stack and
    are removed outright when full, so the rows above fall by one index.
    ``height`` is the playable height used for the loss check; ``is_valid``
    itself has no upper bound.
    """

    def __init__(self, columns: int, height: int) -> None:
        self.columns = int(columns)
        self.height = int(height)
        self.rows: List[Row] = []

    def reset(self) -> None:
        self.rows = []

    def is_valid(self, pos: GridPos) -> bool:
        if pos.x < 0 or pos.x >= self.columns:
            return False
        if pos.y < 0:
            return False
        if pos.y < len(self.rows) and self.rows[pos.y][pos.x] is not None:
            return False
        return True

    def can_place(self, cells: Iterable[GridPos]) -> bool:
        return all(self.is_valid(cell) for cell in cells)

    def block_at(self, pos: GridPos) -> Optional[Block]:
        if 0 <= pos.y < len(self.rows) and 0 <= pos.x < self.columns:
            return self.rows[pos.y][pos.x]
        return None

    def place(self, cells: Iterable[GridPos], color: Rgb) -> PlacementResult:
        """Lock ``cells`` into the stack and clear full rows.

        Nothing is written when any cell reaches the playable height; the
        result then reports ``game_over``.
        """
        cells = list(cells)
        top = max(cell.y for cell in cells)
        if top >= self.height:
            return PlacementResult(lines_cleared=0, game_over=True)
        while len(self.rows) <= top:
            self.rows.append([None] * self.columns)
        for cell in cells:
            self.rows[cell.y][cell.x] = Block(color)
        return PlacementResult(lines_cleared=self._clear_full_rows(), game_over=False)

    def _clear_full_rows(self) -> int:
        cleared = 0
        i = 0
        while i < len(self.rows):
            if all(block is not None for block in self.rows[i]):
                del self.rows[i]
                cleared += 1
            else:
                i += 1
        return cleared

    def filled_cells(self):
        """Yield ``(GridPos, Block)`` for every locked block."""
        for y, row in enumerate(self.rows):
            for x, block in enumerate(row):
                if block is not None:
                    yield GridPos(x, y), block

    def to_array(self, height: Optional[int] = None) -> np.ndarray:
        """Occupancy as an ``(height, columns)`` int8 array, row 0 at the bottom."""
        h = self.height if height is None else int(height)
        arr = np.zeros((h, self.columns), dtype=np.int8)
        for pos, _ in self.filled_cells():
            if pos.y < h:
                arr[pos.y, pos.x] = 1
        return arr
