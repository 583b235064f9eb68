from __future__ import annotations

import collections
import dataclasses
import math

from .config import Config
from .vector import Vector2, Polar

__all__ = [
    "VectorScene",
    "Readouts",
]


@dataclasses.dataclass
class Readouts:
    """Quantities shown next to the scene, all measured relative to the pivot."""
    arm_polar: Polar
    heading: float
    lag: float
    dot: float
    cross: float
    manhattan: float
    chebyshev: float


class VectorScene:
    """An arm rotating around a pivot, and a follower chasing the arm's tip."""

    def __init__(self, pivot: Vector2, radius: float, angular_speed: float, lerp_speed: float,
                 trail_length: int):
        self.pivot = pivot
        self.tip = pivot.clone().add(Vector2.RIGHT.clone().scale(radius))
        self.follower = pivot.clone()
        self.trail: collections.deque[Vector2] = collections.deque(maxlen=trail_length)

        self.angular_speed = angular_speed
        self.lerp_speed = lerp_speed

        self.ticks = 0

    @classmethod
    def from_config(cls, config: Config) -> "VectorScene":
        return cls(
            pivot=Vector2(config.scene_pivot_x, config.scene_pivot_y),
            radius=config.scene_radius,
            angular_speed=config.scene_angular_speed,
            lerp_speed=config.scene_lerp_speed,
            trail_length=config.scene_trail_length,
        )

    def tick(self):
        self.tip.rotate_around(self.angular_speed, self.pivot)
        self.follower.lerp(self.tip, self.lerp_speed)
        self.trail.append(self.follower.clone())

        self.ticks += 1

    def arm(self) -> Vector2:
        return self.tip - self.pivot

    def follower_offset(self) -> Vector2:
        return self.follower - self.pivot

    def projection(self) -> Vector2:
        """Return the follower's offset projected onto the arm's direction, relative to the pivot."""
        return self.follower_offset().set_direction(self.arm().normalize())

    def readouts(self) -> Readouts:
        arm = self.arm()
        follower = self.follower_offset()

        return Readouts(
            arm_polar=arm.polar(),
            heading=Vector2.angle2(Vector2.RIGHT, arm),
            lag=Vector2.angle(follower, arm),
            dot=arm.dot(follower),
            cross=arm.cross(follower),
            manhattan=arm.norm(1),
            chebyshev=arm.norm(math.inf),
        )
