from __future__ import annotations

from typing import Optional

import numpy as np

from tetris_engine.game.bag import Bag
from tetris_engine.game.core import BLOCK_SIZE, COLUMNS, ROWS, GameConfig, Key, Player, spawn_position
from tetris_engine.game.grid import Board
from tetris_engine.game.rules import ScoringRules
from tetris_engine.game.vector2 import GridPos, Rect, Rgb, Vec2, WHITE

from .base import Scene
from .draw import BRICK, Canvas, FilledRect, Text, TexturedRect


DOWN = GridPos(0, -1)
LEFT = GridPos(-1, 0)
RIGHT = GridPos(1, 0)

BACKGROUND = Rgb(64, 64, 64)
PANEL_X = 52.0
FONT_SIZE = 5.0


def grid_region(position: GridPos, size: float = BLOCK_SIZE) -> Rect:
    """World rectangle covered by a grid cell."""
    return Rect(
        center=(position.to_vec2() + Vec2(0.5, 0.5)) * size,
        size=Vec2(size, size),
    )


class LevelScene:
    """Active play: board, falling piece, bag, score and the drop timer."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.random_seed)
        self.columns = COLUMNS
        self.rows = ROWS
        self.board = Board(self.columns, self.rows)
        self.bag = Bag(self.rng, lookahead=self.config.bag_lookahead)
        self.player = self._next_player()
        self.score = 0
        # Microseconds accumulated towards the next gravity step
        self.time = 0
        self.lost = False

    def _next_player(self) -> Player:
        return Player(piece=self.bag.pop(), position=spawn_position(self.columns, self.rows))

    # ---------- Movement ----------
    def translate_player(self, delta: GridPos) -> bool:
        """Move the falling piece by ``delta`` if every cell stays valid."""
        if not self.board.can_place(self.player.cells_after(delta)):
            return False
        self.player.position = self.player.position + delta
        return True

    def rotate_player(self) -> bool:
        rotated = self.player.piece.rotated()
        if not self.board.can_place(rotated.cells(self.player.position)):
            return False
        self.player.piece = rotated
        return True

    def move_to_end(self) -> int:
        """Hard drop: fall until blocked, score the distance, then lock."""
        fallen = 0
        while self.translate_player(DOWN):
            fallen += 1
        self.score += self.rules.score_for_drop(fallen)
        self.lock()
        return fallen

    def rise(self) -> None:
        # free rise, not validated against the board
        self.player.position = self.player.position + GridPos(0, 1)

    # ---------- Stack ----------
    def lock(self) -> int:
        """Merge the falling piece into the board.

        Returns the number of rows cleared. A piece reaching the playable
        height is a loss: the level resets and the next ``update`` goes
        back home.
        """
        result = self.board.place(self.player.cells(), self.player.piece.color)
        if result.game_over:
            self._reset()
            self.lost = True
            return 0
        self.player = self._next_player()
        self.score += self.rules.score_for_lines(result.lines_cleared)
        return result.lines_cleared

    def _reset(self) -> None:
        self.board.reset()
        self.player = self._next_player()
        self.score = 0
        self.time = 0

    def restart(self) -> None:
        self._reset()

    # ---------- Events ----------
    def key_down(self, key: Key) -> Scene:
        if key == Key.UP:
            self.rotate_player()
        elif key == Key.SPACE:
            self.move_to_end()
        elif key == Key.DOWN:
            self.translate_player(DOWN)
        elif key == Key.LEFT:
            self.translate_player(LEFT)
        elif key == Key.RIGHT:
            self.translate_player(RIGHT)
        elif key == Key.W:
            self.rise()
        elif key == Key.R:
            self.restart()
        elif key in (Key.ESCAPE, Key.NUM1):
            return Scene.HOME
        return Scene.LEVEL

    def on_click(self, position: Vec2) -> Scene:
        return Scene.LEVEL

    def update(self, canvas: Canvas, delta_micros: int) -> Scene:
        if delta_micros < 0:
            raise ValueError(f"delta_micros must be non-negative, got {delta_micros}")
        if self.lost:
            self.lost = False
            return Scene.HOME

        self.draw(canvas)

        interval = self.config.drop_interval_micros
        self.time += int(delta_micros)
        # A long stall may owe several steps; take them one cell at a time.
        while self.time >= interval:
            self.time -= interval
            if not self.translate_player(DOWN):
                self.lock()
                if self.lost:
                    break
        return Scene.LEVEL

    def world_region(self) -> Rect:
        return Rect(
            center=Vec2(self.columns, self.rows) * (BLOCK_SIZE / 2),
            size=Vec2(2 * self.columns * BLOCK_SIZE, self.rows * BLOCK_SIZE),
        )

    # ---------- Drawing ----------
    def draw(self, canvas: Canvas) -> None:
        for x in range(self.columns):
            for y in range(self.rows):
                canvas.draw(FilledRect(grid_region(GridPos(x, y)).scaled(0.9), BACKGROUND))

        for pos, block in self.board.filled_cells():
            region = grid_region(pos)
            canvas.draw(FilledRect(region, block.color))
            canvas.draw(TexturedRect(region, BRICK))

        canvas.draw(Text(Vec2(PANEL_X, 100.0), WHITE, FONT_SIZE, f"score: {self.score}"))
        canvas.draw(Text(Vec2(PANEL_X, 80.0), WHITE, FONT_SIZE, "next tetraminos"))
        for i, piece in enumerate(self.bag.peek_next(self.config.preview_count)):
            offset = Vec2(PANEL_X, 50.0 - i * 15.0)
            for cell in piece.cells(GridPos(0, 0)):
                canvas.draw(FilledRect(grid_region(cell).moved(offset), piece.color))

        for cell in self.player.cells():
            canvas.draw(FilledRect(grid_region(cell), self.player.piece.color))
