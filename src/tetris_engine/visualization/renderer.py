from __future__ import annotations

from typing import Dict, Tuple

import pygame

from tetris_engine.game.vector2 import Rect, Vec2
from tetris_engine.scenes.draw import DrawRequest, FilledRect, Text, TextureHandle, TexturedRect


class Camera:
    """Maps a world rectangle (+y up) onto a window (+y down), keeping aspect."""

    def __init__(self, world: Rect, screen_size: Tuple[int, int]) -> None:
        self.world = world
        self.width, self.height = screen_size
        self.scale = min(self.width / world.size.x, self.height / world.size.y)

    def to_screen(self, point: Vec2) -> Tuple[float, float]:
        sx = self.width / 2 + (point.x - self.world.center.x) * self.scale
        sy = self.height / 2 - (point.y - self.world.center.y) * self.scale
        return sx, sy

    def to_world(self, pixel: Tuple[float, float]) -> Vec2:
        x = self.world.center.x + (pixel[0] - self.width / 2) / self.scale
        y = self.world.center.y - (pixel[1] - self.height / 2) / self.scale
        return Vec2(x, y)

    def rect_to_screen(self, region: Rect) -> pygame.Rect:
        left, top = self.to_screen(Vec2(region.left(), region.top()))
        w = region.size.x * self.scale
        h = region.size.y * self.scale
        return pygame.Rect(round(left), round(top), max(1, round(w)), max(1, round(h)))


def _brick_surface(size: int = 32) -> pygame.Surface:
    surf = pygame.Surface((size, size), pygame.SRCALPHA)
    mortar = (0, 0, 0, 90)
    half = size // 2
    pygame.draw.line(surf, mortar, (0, 0), (size, 0), 2)
    pygame.draw.line(surf, mortar, (0, half), (size, half), 2)
    pygame.draw.line(surf, mortar, (half, 0), (half, half), 2)
    pygame.draw.line(surf, mortar, (0, half), (0, size), 2)
    pygame.draw.rect(surf, (255, 255, 255, 40), surf.get_rect(), 1)
    return surf


class PygameCanvas:
    """Canvas drawing scene requests onto a pygame surface."""

    def __init__(self, screen: pygame.Surface, world: Rect) -> None:
        self.screen = screen
        self.camera = Camera(world, screen.get_size())
        self._textures: Dict[str, pygame.Surface] = {}
        self._fonts: Dict[int, pygame.font.Font] = {}

    def set_view(self, world: Rect) -> None:
        self.camera = Camera(world, self.screen.get_size())

    def texture(self, handle: TextureHandle) -> pygame.Surface:
        surf = self._textures.get(handle.name)
        if surf is None:
            surf = _brick_surface()
            self._textures[handle.name] = surf
        return surf

    def font(self, world_size: float) -> pygame.font.Font:
        px = max(8, int(world_size * self.camera.scale))
        font = self._fonts.get(px)
        if font is None:
            font = pygame.font.SysFont(None, px)
            self._fonts[px] = font
        return font

    def draw(self, request: DrawRequest) -> None:
        if isinstance(request, FilledRect):
            pygame.draw.rect(self.screen, request.color.as_tuple(), self.camera.rect_to_screen(request.region))
        elif isinstance(request, TexturedRect):
            rect = self.camera.rect_to_screen(request.region)
            image = pygame.transform.scale(self.texture(request.texture), rect.size)
            self.screen.blit(image, rect.topleft)
        elif isinstance(request, Text):
            img = self.font(request.font_size).render(request.text, True, request.color.as_tuple())
            x, y = self.camera.to_screen(request.position)
            self.screen.blit(img, (round(x), round(y)))
        else:
            raise TypeError(f"unknown draw request {request!r}")
