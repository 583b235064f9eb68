import io
import os
import textwrap
import unittest

from vec2 import Config

CONFIG_INI = textwrap.dedent("""\
    [global]
    fps=30
    speed=2

    [window]
    width=640
    height=480
    scale=50

    [scene]
    angular-speed=0.1
    lerp-speed=0.25
    radius=3
    pivot-x=1
    pivot-y=-1
    trail-length=10
""")


class TestConfig(unittest.TestCase):
    def test_from_file(self):
        config = Config.from_file(io.StringIO(CONFIG_INI))

        self.assertEqual(config.global_fps, 30)
        self.assertEqual(config.global_speed, 2)
        self.assertEqual(config.window_dimensions, (640, 480))
        self.assertEqual(config.window_scale, 50.0)
        self.assertEqual(config.scene_angular_speed, 0.1)
        self.assertEqual(config.scene_lerp_speed, 0.25)
        self.assertEqual(config.scene_radius, 3.0)
        self.assertEqual((config.scene_pivot_x, config.scene_pivot_y), (1.0, -1.0))
        self.assertEqual(config.scene_trail_length, 10)

    def test_bundled_config_loads(self):
        """The config.ini shipped at the repository root is complete."""
        path = os.path.join(os.path.dirname(__file__), os.pardir, os.pardir, "config.ini")
        config = Config.from_filepath(path)

        self.assertGreater(config.global_fps, 0)
        self.assertGreater(config.scene_trail_length, 0)

    def test_import_option_converts_type(self):
        config = Config.from_file(io.StringIO(CONFIG_INI))

        config.import_option("scene", "radius", "4.5")
        config.import_option("global", "fps", "120")
        config.import_option("scene", "trail-length", "7.0")

        self.assertEqual(config.scene_radius, 4.5)
        self.assertEqual(config.global_fps, 120)
        self.assertIsInstance(config.global_fps, int)
        self.assertEqual(config.scene_trail_length, 7)

    def test_import_unknown_option(self):
        config = Config.from_file(io.StringIO(CONFIG_INI))

        with self.assertRaises(KeyError):
            config.import_option("scene", "colour", "red")

    def test_value_from_str(self):
        self.assertEqual(Config.value_from_str("2.5", "int"), 2)
        self.assertEqual(Config.value_from_str("2.5", "float"), 2.5)

    def test_import_override(self):
        config = Config.from_file(io.StringIO(CONFIG_INI))

        config.import_override("scene.lerp-speed", "0.75")
        self.assertEqual(config.scene_lerp_speed, 0.75)

    def test_import_override_rejects_bad_options(self):
        config = Config.from_file(io.StringIO(CONFIG_INI))

        for option in "radius", "scene.colour":
            with self.subTest(option=option), self.assertRaises(ValueError):
                config.import_override(option, "3")


if __name__ == "__main__":
    unittest.main()
