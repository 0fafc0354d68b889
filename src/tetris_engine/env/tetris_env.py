from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from tetris_engine.game.core import COLUMNS, ROWS, GameConfig, Key
from tetris_engine.game.pieces import PieceKind
from tetris_engine.game.rules import ScoringRules
from tetris_engine.scenes.draw import NullCanvas
from tetris_engine.scenes.level import LevelScene


class Action(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    ROTATE = 3
    SOFT_DROP = 4
    HARD_DROP = 5


ACTION_TO_KEY: Dict[Action, Key] = {
    Action.LEFT: Key.LEFT,
    Action.RIGHT: Key.RIGHT,
    Action.ROTATE: Key.UP,
    Action.SOFT_DROP: Key.DOWN,
    Action.HARD_DROP: Key.SPACE,
}


class TetrisEnv(gym.Env):
    """Level scene exposed as a Gymnasium environment.

    Each step presses one key (or none) and then lets ``frame_micros`` of
    game time pass, so gravity keeps running while the agent thinks.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 10}

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None,
                 render_mode: Optional[str] = None,
                 frame_micros: int = 100_000,
                 max_episode_steps: int = 5_000) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.render_mode = render_mode
        self.frame_micros = int(frame_micros)
        self.max_episode_steps = int(max_episode_steps)
        self.level = LevelScene(self.config, self.rules, np.random.default_rng(self.config.random_seed))
        self._canvas = NullCanvas()
        self._steps = 0

        preview = self.config.preview_count
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0, high=1, shape=(ROWS, COLUMNS), dtype=np.int8),
                "active": spaces.Box(low=0, high=1, shape=(ROWS, COLUMNS), dtype=np.int8),
                "next": spaces.Box(low=0, high=len(PieceKind) - 1, shape=(preview,), dtype=np.int8),
            }
        )
        self.action_space = spaces.Discrete(len(Action))

    def _get_obs(self) -> Dict[str, Any]:
        board = self.level.board.to_array(ROWS)
        active = np.zeros((ROWS, COLUMNS), dtype=np.int8)
        for cell in self.level.player.cells():
            if 0 <= cell.y < ROWS and 0 <= cell.x < COLUMNS:
                active[cell.y, cell.x] = 1
        upcoming = self.level.bag.peek_next(self.config.preview_count)
        nxt = np.zeros((self.config.preview_count,), dtype=np.int8)
        for i, piece in enumerate(upcoming):
            nxt[i] = int(piece.kind)
        return {"board": board, "active": active, "next": nxt}

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.level.score,
            "steps": self._steps,
            "stack_height": len(self.level.board.rows),
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        self.level = LevelScene(self.config, self.rules, self.np_random)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        if not self.action_space.contains(int(action)):
            raise ValueError(f"invalid action {action!r}")
        act = Action(int(action))
        score_before = self.level.score

        key = ACTION_TO_KEY.get(act)
        if key is not None:
            self.level.key_down(key)
        # a hard drop that tops out flags the loss before gravity runs
        if not self.level.lost:
            self.level.update(self._canvas, self.frame_micros)

        terminated = bool(self.level.lost)
        self._steps += 1
        truncated = self._steps >= self.max_episode_steps
        # the loss resets the score; only the progress made this step counts
        reward = 0.0 if terminated else float(self.level.score - score_before)

        info = self._get_info()
        info["action"] = act.name
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        cell = 12
        img = np.full((ROWS * cell, COLUMNS * cell, 3), 30, dtype=np.uint8)
        for pos, block in self.level.board.filled_cells():
            if pos.y < ROWS:
                self._paint(img, pos.x, pos.y, cell, block.color.as_tuple())
        for pos in self.level.player.cells():
            if 0 <= pos.y < ROWS and 0 <= pos.x < COLUMNS:
                self._paint(img, pos.x, pos.y, cell, self.level.player.piece.color.as_tuple())
        return img

    @staticmethod
    def _paint(img: np.ndarray, x: int, y: int, cell: int, color: Tuple[int, int, int]) -> None:
        # image rows grow downwards, board rows grow upwards
        top = (ROWS - 1 - y) * cell
        img[top : top + cell, x * cell : (x + 1) * cell, :] = color

    def close(self) -> None:
        pass
