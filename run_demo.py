from __future__ import annotations

import argparse
import logging
import sys

from vec2 import Config
from vec2.demo import VectorDemo


def parse_config_overrides(overrides: list[str]) -> dict[str, str]:
    parsed = {}

    for override in overrides:
        if "=" not in override:
            raise ValueError(f"Invalid config override {override!r}. "
                             f"Use the form option=value, e.g. scene.radius=3")

        option, value = override.split("=", maxsplit=1)

        parsed[option.strip()] = value.strip()

    return parsed


def main():
    parser = argparse.ArgumentParser(description="Visualize 2D vector operations.")
    parser.add_argument("--config", "-c", type=str, default="config.ini",
                        help="Path to the config file. (default: config.ini)")
    parser.add_argument("--config-override", "--override", "-o", action="append",
                        help="Override a config option. Use the form option=value, e.g. scene.radius=3.")
    parser.add_argument("--loglevel", "--log", "-l", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])

    args = parser.parse_args()

    config = Config.from_filepath(args.config)
    for option, value in parse_config_overrides(args.config_override or []).items():
        config.import_override(option, value)

    logging.basicConfig(level=args.loglevel, style="{", format=f"[{{name}}] {{levelname}}: {{message}}",
                        stream=sys.stdout)

    VectorDemo(config).start()


if __name__ == "__main__":
    main()
