from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, Union

from tetris_engine.game.vector2 import Rect, Rgb, Vec2


@dataclass(frozen=True)
class TextureHandle:
    """Names a texture owned by the renderer.

    One instance is shared by every request that uses it; the renderer
    decodes it once and caches the result by ``name``.
    """

    name: str


BRICK = TextureHandle("brick")


@dataclass(frozen=True)
class FilledRect:
    region: Rect
    color: Rgb


@dataclass(frozen=True)
class TexturedRect:
    region: Rect
    texture: TextureHandle


@dataclass(frozen=True)
class Text:
    position: Vec2
    color: Rgb
    font_size: float
    text: str


DrawRequest = Union[FilledRect, TexturedRect, Text]


class Canvas(Protocol):
    def draw(self, request: DrawRequest) -> None:
        ...


class RecordingCanvas:
    """Canvas that keeps every request it receives."""

    def __init__(self) -> None:
        self.requests: List[DrawRequest] = []

    def draw(self, request: DrawRequest) -> None:
        self.requests.append(request)

    def of_type(self, kind: type) -> list:
        return [r for r in self.requests if isinstance(r, kind)]

    def texts(self) -> List[str]:
        return [r.text for r in self.requests if isinstance(r, Text)]

    def clear(self) -> None:
        self.requests.clear()


class NullCanvas:
    """Discards requests; used when only the simulation matters."""

    def draw(self, request: DrawRequest) -> None:
        pass
