from __future__ import annotations

import numpy as np

from conftest import put_player
from tetris_engine.game.core import Key
from tetris_engine.game.pieces import PieceKind
from tetris_engine.game.vector2 import Vec2
from tetris_engine.scenes.base import Scene
from tetris_engine.scenes.draw import BRICK, RecordingCanvas, TexturedRect
from tetris_engine.scenes.home import PLAY_BUTTON, HomeScene
from tetris_engine.scenes.manager import SceneManager


def test_home_click_inside_button_requests_level():
    home = HomeScene()
    assert home.on_click(PLAY_BUTTON.center) is Scene.LEVEL
    assert home.on_click(Vec2(1.0, -19.0)) is Scene.LEVEL


def test_home_click_outside_button_stays_home():
    home = HomeScene()
    assert home.on_click(Vec2(0.0, 30.0)) is Scene.HOME
    assert home.on_click(Vec2(-5.0, -10.0)) is Scene.HOME


def test_home_keys():
    home = HomeScene()
    assert home.key_down(Key.NUM2) is Scene.LEVEL
    assert home.key_down(Key.SPACE) is Scene.LEVEL
    assert home.key_down(Key.UP) is Scene.HOME


def test_home_draws_title_button_and_logo():
    canvas = RecordingCanvas()
    assert HomeScene().update(canvas, 16_000) is Scene.HOME
    assert "Tetris" in canvas.texts()
    assert [r.texture for r in canvas.of_type(TexturedRect)] == [BRICK]
    assert HomeScene().world_region().size == Vec2(100.0, 100.0)


def _manager() -> SceneManager:
    return SceneManager(rng=np.random.default_rng(0))


def test_manager_starts_home_and_clicks_into_level():
    manager = _manager()
    assert manager.current is Scene.HOME
    assert manager.level is None
    assert manager.on_click(Vec2(0.0, 40.0)) is Scene.HOME
    assert manager.on_click(PLAY_BUTTON.center) is Scene.LEVEL
    assert manager.level is not None
    assert manager.world_region() == manager.level.world_region()
    assert manager.on_click(PLAY_BUTTON.center) is Scene.LEVEL


def test_manager_routes_keys_to_the_active_scene():
    manager = _manager()
    manager.key_down(Key.NUM2)
    level = manager.level
    start = level.player.position
    manager.key_down(Key.DOWN)
    assert level.player.position.y == start.y - 1


def test_reentering_level_builds_a_fresh_one():
    manager = _manager()
    manager.key_down(Key.NUM2)
    first = manager.level
    first.score = 123
    assert manager.key_down(Key.ESCAPE) is Scene.HOME
    assert manager.world_region() == HomeScene().world_region()
    manager.key_down(Key.NUM2)
    assert manager.level is not first
    assert manager.level.score == 0


def test_loss_returns_home_on_next_update():
    manager = _manager()
    manager.key_down(Key.SPACE)
    level = manager.level
    put_player(level, PieceKind.I, 0, 19)
    level.lock()
    assert manager.update(RecordingCanvas(), 0) is Scene.HOME
    assert manager.current is Scene.HOME


def test_update_keeps_level_active_while_playing():
    manager = _manager()
    manager.key_down(Key.NUM2)
    canvas = RecordingCanvas()
    assert manager.update(canvas, 10_000) is Scene.LEVEL
    assert "next tetraminos" in canvas.texts()
