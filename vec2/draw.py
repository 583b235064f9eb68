from __future__ import annotations

import logging
import math
import typing

import pygame

from .config import Config
from .scene import VectorScene
from .vector import Vector2

__all__ = [
    "VectorRenderer",
]

Color = typing.Union[tuple[int, int, int], list[int]]

AXIS_COLOR = (70, 70, 110)
ARM_COLOR = (250, 250, 250)
FOLLOWER_COLOR = (205, 0, 250)
PROJECTION_COLOR = (0, 200, 120)
TEXT_COLOR = (250, 250, 250)


def fade(color: Color, t: float) -> Color:
    """Blend `color` towards black. t=0 keeps the color, t=1 is black."""
    return [int((1 - t) * c) for c in color]


class VectorRenderer:
    def __init__(self, config: Config):
        self._logger = logging.getLogger(self.__class__.__name__)

        pygame.font.init()
        self.font = pygame.font.SysFont(["Cascadia Code", "Fira Code", "Consolas", "monospace"], 16, bold=True)
        self.background_color = (0, 0, 30)
        self.screen = None

        self.config = config
        # world y points up, screen y points down
        self.axes = Vector2(config.window_scale, -config.window_scale)
        self.center = Vector2(config.window_width / 2, config.window_height / 2)

    def init(self):
        pygame.init()
        self.screen = pygame.display.set_mode(self.config.window_dimensions)
        pygame.display.set_caption("vec2")

        self._logger.debug(f"Opened window {self.config.window_width}x{self.config.window_height}.")

    def to_screen(self, pos: Vector2) -> tuple[int, int]:
        x, y = pos.clone().hadamard(self.axes).add(self.center)
        return round(x), round(y)

    def draw_line(self, color: Color, start: Vector2, end: Vector2, width: int = 1):
        pygame.draw.line(self.screen, color, self.to_screen(start), self.to_screen(end), width)

    def draw_circle(self, color: Color, center: Vector2, radius: int, width: int = 0):
        pygame.draw.circle(self.screen, color, self.to_screen(center), radius, width)

    def draw_arrow(self, color: Color, start: Vector2, end: Vector2, width: int = 2):
        self.draw_line(color, start, end, width)

        back = (start - end).set_mag(12 / self.config.window_scale)
        if not back:
            return

        for side in math.pi / 6, -math.pi / 6:
            self.draw_line(color, end, back.clone().rotate_around(side).add(end), width)

    def draw_text(self, text: str, color: Color, pos: Vector2):
        self.screen.blit(self.font.render(text, True, color), tuple(pos))

    def draw_axes(self):
        reach = max(self.config.window_dimensions) / self.config.window_scale

        for direction in Vector2.RIGHT, Vector2.TOP, Vector2.LEFT, Vector2.DOWN:
            self.draw_line(AXIS_COLOR, Vector2.ORIGIN, direction.clone().scale(reach))

    def draw(self, scene: VectorScene, clock: pygame.time.Clock):
        self.screen.fill(self.background_color)
        self.draw_axes()

        # trail, oldest first and darkest
        n = len(scene.trail)
        for i, pos in enumerate(scene.trail):
            self.draw_circle(fade(FOLLOWER_COLOR, 1 - (i + 1) / n), pos, 2)

        projection = scene.projection().add(scene.pivot)
        self.draw_line(PROJECTION_COLOR, scene.follower, projection)
        self.draw_arrow(PROJECTION_COLOR, scene.pivot, projection)

        self.draw_arrow(ARM_COLOR, scene.pivot, scene.tip)
        self.draw_circle(FOLLOWER_COLOR, scene.follower, 6)

        self.draw_information(scene, clock, Vector2(10, 10))

        pygame.display.flip()

    def draw_information(self, scene: VectorScene, clock: pygame.time.Clock, pos: Vector2):
        readouts = scene.readouts()

        lines = [
            f"fps     {int(clock.get_fps())}",
            f"tick    {scene.ticks}",
            f"r       {readouts.arm_polar.r:.3f}",
            f"theta   {readouts.arm_polar.theta:.3f}",
            f"heading {readouts.heading:.3f}",
            f"lag     {readouts.lag:.3f}",
            f"dot     {readouts.dot:.3f}",
            f"cross   {readouts.cross:.3f}",
            f"L1      {readouts.manhattan:.3f}",
            f"Linf    {readouts.chebyshev:.3f}",
        ]

        dy = Vector2(0, 20)
        for line in lines:
            self.draw_text(line, TEXT_COLOR, pos)
            pos += dy

    @staticmethod
    def close():
        pygame.quit()
