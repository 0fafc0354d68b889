from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional

from .pieces import Piece
from .vector2 import GridPos


COLUMNS = 10
ROWS = 20
# World units per grid cell
BLOCK_SIZE = 5.0


class Key(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    SPACE = 4
    W = 5
    R = 6
    ESCAPE = 7
    NUM1 = 8
    NUM2 = 9


@dataclass
class GameConfig:
    drop_interval_micros: int = 1_000_000
    bag_lookahead: int = 4
    preview_count: int = 3
    random_seed: Optional[int] = None


def spawn_position(columns: int = COLUMNS, rows: int = ROWS) -> GridPos:
    return GridPos(math.ceil(columns / 2) - 2, rows - 1)


@dataclass
class Player:
    """The falling piece and where it sits on the board."""

    piece: Piece
    position: GridPos

    def cells(self) -> List[GridPos]:
        return self.piece.cells(self.position)

    def cells_after(self, delta: GridPos) -> List[GridPos]:
        return self.piece.cells(self.position + delta)
