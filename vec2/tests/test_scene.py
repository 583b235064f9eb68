import math
import unittest

from vec2 import Vector2, Config
from vec2.scene import VectorScene


def make_config(**overrides) -> Config:
    options = dict(
        global_fps=60,
        global_speed=1,
        window_width=800,
        window_height=600,
        window_scale=100,
        scene_angular_speed=math.pi / 2,
        scene_lerp_speed=0.5,
        scene_radius=2,
        scene_pivot_x=1,
        scene_pivot_y=1,
        scene_trail_length=3,
    )
    options.update(overrides)
    return Config(**options)


class TestVectorScene(unittest.TestCase):
    def test_from_config(self):
        scene = VectorScene.from_config(make_config())

        self.assertEqual(scene.pivot, Vector2(1, 1))
        self.assertEqual(scene.tip, Vector2(3, 1))
        self.assertEqual(scene.follower, Vector2(1, 1))
        self.assertEqual(len(scene.trail), 0)

    def test_tick(self):
        scene = VectorScene.from_config(make_config())
        scene.tick()

        self.assertTrue(scene.tip.is_close(Vector2(1, 3), abs_tol=1e-12))
        self.assertTrue(scene.follower.is_close(Vector2(1, 2), abs_tol=1e-12))
        self.assertEqual(scene.ticks, 1)

    def test_arm_keeps_its_length(self):
        scene = VectorScene.from_config(make_config(scene_angular_speed=0.37))

        for _ in range(1000):
            scene.tick()

        self.assertAlmostEqual(scene.arm().mag(), 2, places=9)

    def test_trail_is_bounded_and_copied(self):
        scene = VectorScene.from_config(make_config())

        for _ in range(5):
            scene.tick()

        self.assertEqual(len(scene.trail), 3)
        self.assertIsNot(scene.trail[-1], scene.follower)
        self.assertEqual(scene.trail[-1], scene.follower)

    def test_projection(self):
        scene = VectorScene.from_config(make_config())
        scene.follower.set(2, 3)

        self.assertEqual(scene.projection(), Vector2(1, 0))

    def test_readouts(self):
        scene = VectorScene.from_config(make_config())
        readouts = scene.readouts()

        self.assertEqual(readouts.arm_polar.r, 2)
        self.assertEqual(readouts.arm_polar.theta, 0)
        self.assertEqual(readouts.heading, 0)
        self.assertTrue(math.isnan(readouts.lag))
        self.assertEqual(readouts.manhattan, 2)
        self.assertEqual(readouts.chebyshev, 2)

    def test_readouts_after_half_turn(self):
        scene = VectorScene.from_config(make_config())
        scene.tick()
        scene.tick()
        readouts = scene.readouts()

        # arm points left, follower trails it on the clockwise side
        self.assertAlmostEqual(readouts.heading, math.pi)
        self.assertGreater(readouts.lag, 0)
        self.assertLess(readouts.cross, 0)


if __name__ == "__main__":
    unittest.main()
