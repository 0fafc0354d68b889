from __future__ import annotations

import numpy as np
import pytest

from tetris_engine.game.core import GameConfig, Player
from tetris_engine.game.pieces import Piece, PieceKind
from tetris_engine.game.vector2 import GridPos
from tetris_engine.scenes.level import LevelScene


@pytest.fixture
def level() -> LevelScene:
    return LevelScene(GameConfig(), rng=np.random.default_rng(0))


def put_player(level: LevelScene, kind: PieceKind, x: int, y: int, turns: int = 0) -> Player:
    piece = Piece.from_kind(kind)
    for _ in range(turns):
        piece = piece.rotated()
    level.player = Player(piece=piece, position=GridPos(x, y))
    return level.player
