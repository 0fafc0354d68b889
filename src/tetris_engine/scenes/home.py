from __future__ import annotations

from tetris_engine.game.core import Key
from tetris_engine.game.vector2 import BLACK, BLUE, Rect, Vec2, WHITE

from .base import Scene
from .draw import BRICK, Canvas, FilledRect, Text, TexturedRect


PLAY_BUTTON = Rect(center=Vec2(30.0, -10.0), size=Vec2(60.0, 20.0))
TITLE = "Tetris"


class HomeScene:
    """Menu with a title and a single play button."""

    def __init__(self) -> None:
        self.button = PLAY_BUTTON
        self.logo = Rect(center=Vec2(0.0, 0.0), size=Vec2(10.0, 10.0))

    def key_down(self, key: Key) -> Scene:
        if key in (Key.NUM2, Key.SPACE):
            return Scene.LEVEL
        return Scene.HOME

    def on_click(self, position: Vec2) -> Scene:
        if self.button.contains(position):
            return Scene.LEVEL
        return Scene.HOME

    def update(self, canvas: Canvas, delta_micros: int) -> Scene:
        if delta_micros < 0:
            raise ValueError(f"delta_micros must be non-negative, got {delta_micros}")
        canvas.draw(TexturedRect(self.logo, BRICK))
        canvas.draw(FilledRect(self.button, WHITE))
        canvas.draw(Text(Vec2(self.button.left() + 5.0, self.button.center.y), BLACK, 8.0, "play"))
        canvas.draw(Text(Vec2(0.0, 0.0), BLUE, 20.0, TITLE))
        return Scene.HOME

    def world_region(self) -> Rect:
        return Rect(center=Vec2(0.0, 0.0), size=Vec2(100.0, 100.0))
