from __future__ import annotations

from typing import Optional

import numpy as np

from tetris_engine.game.core import GameConfig, Key
from tetris_engine.game.rules import ScoringRules
from tetris_engine.game.vector2 import Rect, Vec2

from .base import Scene, SceneHandler
from .draw import Canvas
from .home import HomeScene
from .level import LevelScene


class SceneManager:
    """Top-level Home/Level state machine.

    Every event goes to the active scene; the scene it returns becomes
    active. Entering the level always builds a fresh one, so leaving and
    coming back restarts the game.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.random_seed)
        self.current = Scene.HOME
        self.home = HomeScene()
        self.level: Optional[LevelScene] = None

    def active(self) -> SceneHandler:
        if self.current is Scene.LEVEL:
            assert self.level is not None
            return self.level
        return self.home

    def switch_to(self, scene: Scene) -> None:
        if scene is self.current:
            return
        if scene is Scene.LEVEL:
            self.level = LevelScene(self.config, self.rules, self.rng)
        self.current = scene

    def key_down(self, key: Key) -> Scene:
        self.switch_to(self.active().key_down(key))
        return self.current

    def on_click(self, position: Vec2) -> Scene:
        self.switch_to(self.active().on_click(position))
        return self.current

    def update(self, canvas: Canvas, delta_micros: int) -> Scene:
        self.switch_to(self.active().update(canvas, delta_micros))
        return self.current

    def world_region(self) -> Rect:
        return self.active().world_region()
