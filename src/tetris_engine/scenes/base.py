from __future__ import annotations

from enum import Enum
from typing import Protocol

from tetris_engine.game.core import Key
from tetris_engine.game.vector2 import Rect, Vec2

from .draw import Canvas


class Scene(Enum):
    HOME = "home"
    LEVEL = "level"


class SceneHandler(Protocol):
    """Event surface shared by every scene.

    Each handler returns the scene that should be active afterwards,
    normally the scene's own tag.
    """

    def key_down(self, key: Key) -> Scene:
        ...

    def on_click(self, position: Vec2) -> Scene:
        ...

    def update(self, canvas: Canvas, delta_micros: int) -> Scene:
        ...

    def world_region(self) -> Rect:
        ...
