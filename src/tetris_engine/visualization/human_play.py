from __future__ import annotations

import time
from typing import Dict

import pygame

from tetris_engine.game.core import Key
from tetris_engine.scenes.base import Scene
from tetris_engine.scenes.manager import SceneManager
from .renderer import PygameCanvas


KEY_MAP: Dict[int, Key] = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_w: Key.W,
    pygame.K_r: Key.R,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_1: Key.NUM1,
    pygame.K_2: Key.NUM2,
    pygame.K_KP1: Key.NUM1,
    pygame.K_KP2: Key.NUM2,
}

TARGET_FPS = 120


def run() -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode((800, 800), pygame.RESIZABLE)
        clock = pygame.time.Clock()
        manager = SceneManager()
        canvas = PygameCanvas(screen, manager.world_region())
        last = time.perf_counter_ns()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    key = KEY_MAP.get(event.key)
                    if key is None:
                        continue
                    if key == Key.ESCAPE and manager.current is Scene.HOME:
                        running = False
                    else:
                        manager.key_down(key)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    canvas.set_view(manager.world_region())
                    manager.on_click(canvas.camera.to_world(event.pos))

            now = time.perf_counter_ns()
            delta_micros = (now - last) // 1000
            last = now

            screen.fill((0, 0, 0))
            canvas.set_view(manager.world_region())
            manager.update(canvas, delta_micros)
            if manager.level is not None and manager.current is Scene.LEVEL:
                pygame.display.set_caption(f"Tetris - score {manager.level.score}")
            else:
                pygame.display.set_caption("Tetris")
            pygame.display.flip()
            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
