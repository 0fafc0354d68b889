"""Scenes for the Tetris engine.

- Scene: tag of the active scene (home menu or level)
- HomeScene / LevelScene: per-scene state and event handlers
- SceneManager: routes key, click and update events to the active scene
- FilledRect, TexturedRect, Text: draw requests handed to a Canvas
"""

from .base import Scene, SceneHandler
from .draw import (
    BRICK,
    Canvas,
    DrawRequest,
    FilledRect,
    NullCanvas,
    RecordingCanvas,
    Text,
    TextureHandle,
    TexturedRect,
)
from .home import HomeScene, PLAY_BUTTON
from .level import LevelScene, grid_region
from .manager import SceneManager

__all__ = [
    "Scene",
    "SceneHandler",
    "BRICK",
    "Canvas",
    "DrawRequest",
    "FilledRect",
    "NullCanvas",
    "RecordingCanvas",
    "Text",
    "TextureHandle",
    "TexturedRect",
    "HomeScene",
    "PLAY_BUTTON",
    "LevelScene",
    "grid_region",
    "SceneManager",
]
