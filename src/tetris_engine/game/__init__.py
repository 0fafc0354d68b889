"""Game module for the Tetris engine.

Exports the rules engine building blocks:
- Vec2, GridPos, Rect, Rgb: coordinate math and colours
- Piece, PieceKind, TEMPLATES: the seven-piece catalog and rotation
- Bag: 7-bag randomizer
- Board, Block: the locked stack, collision test and line clearing
- ScoringRules: score constants and helpers
- GameConfig, Key, Player: tunables, key symbols and the falling piece
"""

from .vector2 import Vec2, GridPos, Rect, Rgb
from .pieces import Piece, PieceKind, PieceTemplate, TEMPLATES
from .bag import Bag
from .grid import Board, Block, PlacementResult
from .rules import ScoringRules
from .core import BLOCK_SIZE, COLUMNS, ROWS, GameConfig, Key, Player, spawn_position

__all__ = [
    "Vec2",
    "GridPos",
    "Rect",
    "Rgb",
    "Piece",
    "PieceKind",
    "PieceTemplate",
    "TEMPLATES",
    "Bag",
    "Board",
    "Block",
    "PlacementResult",
    "ScoringRules",
    "BLOCK_SIZE",
    "COLUMNS",
    "ROWS",
    "GameConfig",
    "Key",
    "Player",
    "spawn_position",
]
