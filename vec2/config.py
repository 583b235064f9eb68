from __future__ import annotations

import configparser
import dataclasses
import typing

__all__ = [
    "Config",
]


@dataclasses.dataclass
class Config:
    """Configuration for the vector demo."""
    global_fps: int
    global_speed: int

    window_width: int
    window_height: int
    window_scale: float

    scene_angular_speed: float
    scene_lerp_speed: float
    scene_radius: float
    scene_pivot_x: float
    scene_pivot_y: float
    scene_trail_length: int

    @property
    def window_dimensions(self):
        return self.window_width, self.window_height

    @classmethod
    def from_file(cls, file) -> "Config":
        cp = configparser.ConfigParser()
        cp.read_file(file)

        return cls(
            global_fps=cp.getint("global", "fps"),
            global_speed=cp.getint("global", "speed"),

            window_width=cp.getint("window", "width"),
            window_height=cp.getint("window", "height"),
            window_scale=cp.getfloat("window", "scale"),

            scene_angular_speed=cp.getfloat("scene", "angular-speed"),
            scene_lerp_speed=cp.getfloat("scene", "lerp-speed"),
            scene_radius=cp.getfloat("scene", "radius"),
            scene_pivot_x=cp.getfloat("scene", "pivot-x"),
            scene_pivot_y=cp.getfloat("scene", "pivot-y"),
            scene_trail_length=cp.getint("scene", "trail-length"),
        )

    @classmethod
    def from_filepath(cls, filepath: str) -> "Config":
        with open(filepath) as f:
            return cls.from_file(f)

    @staticmethod
    def value_from_str(value: str, type_: typing.Literal["float", "int"]) -> float | int:
        if type_ == "float":
            return float(value)
        else:
            return int(float(value))

    @staticmethod
    def get_attribute_name(section: str, key: str) -> str:
        return f"{section}_{key.replace('-', '_')}"

    @classmethod
    def get_field_type(cls, field_name: str) -> typing.Literal["float", "int"]:
        field_types = {f.name: f.type for f in dataclasses.fields(cls)}
        return field_types[field_name]

    def import_option(self, section: str, key: str, value: str):
        """Set the option `section.key` from its string form. Raise KeyError for unknown options."""
        field_name = self.get_attribute_name(section, key)
        field_type = self.get_field_type(field_name)

        setattr(self, field_name, self.value_from_str(value, field_type))

    def import_override(self, option: str, value: str):
        """Set an option given in the form `section.key`. Raise ValueError for malformed or unknown options."""
        if "." not in option:
            raise ValueError(f"Invalid config option {option!r}. Use the form section.key, e.g. scene.radius.")

        section, key = option.split(".", maxsplit=1)

        try:
            self.import_option(section, key, value)
        except KeyError as e:
            raise ValueError(f"Invalid config option {e.args[0]!r}.") from e
