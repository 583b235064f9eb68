from __future__ import annotations

import logging

import pygame

from .config import Config
from .draw import VectorRenderer
from .scene import VectorScene

__all__ = [
    "VectorDemo",
]


class VectorDemo:
    """Interactive demo. Animates a VectorScene and renders it with pygame."""

    def __init__(self, config: Config):
        self._logger = logging.getLogger("VectorDemo")

        self._logger.debug(f"Config: {config}")

        self.config = config
        self.scene = VectorScene.from_config(config)
        self.renderer = VectorRenderer(config)

        self.clock = None
        self.paused = False

    def start(self):
        """Open the window and block until it is closed."""
        self._logger.info(f"Starting demo. (Speed: {self.config.global_speed}, FPS: {self.config.global_fps})")

        self.clock = pygame.time.Clock()
        self.renderer.init()

        try:
            self.mainloop()
        finally:
            self.renderer.close()

    def mainloop(self):
        running = True

        while running:
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    running = False
                elif e.type == pygame.KEYDOWN:
                    if e.key == pygame.K_ESCAPE:
                        running = False
                    elif e.key == pygame.K_SPACE:
                        self.paused = not self.paused
                        self._logger.debug(f"Paused: {self.paused}")

            if not self.paused:
                for _ in range(self.config.global_speed):
                    self.scene.tick()

            self.renderer.draw(self.scene, self.clock)

            self.clock.tick(self.config.global_fps)

        self._logger.info(f"Demo closed. (Ticks: {self.scene.ticks:_})")
