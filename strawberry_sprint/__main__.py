"""
__main__.py
-----------
Command line entry point.

Usage:
    python -m strawberry_sprint
    python -m strawberry_sprint --config my_scene.yaml --seed 7 --window medium
    python -m strawberry_sprint --log-level VERBOSE --log steering
    python -m strawberry_sprint --dump-config my_scene.yaml
"""

import argparse
import sys

from strawberry_sprint.core.debug.debug_logger import DebugLogger, LoggerConfig
from strawberry_sprint.core.errors import ConfigError
from strawberry_sprint.core.runtime.game_settings import Display
from strawberry_sprint.core.runtime.main_loop import MainLoop
from strawberry_sprint.core.runtime.scene_config import load_scene_config
from strawberry_sprint.core.services.config_manager import save_config


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="strawberry_sprint",
        description="A kitty chases your pointer and eats strawberries."
    )
    parser.add_argument("--config", metavar="PATH",
                        help="Scene config file (.yaml, .json or .py)")
    parser.add_argument("--seed", type=int,
                        help="Seed for berry placement")
    parser.add_argument("--window", choices=sorted(Display.WINDOW_SIZES),
                        default=Display.DEFAULT_WINDOW_SIZE,
                        help="Initial window size")
    parser.add_argument("--log-level", choices=list(DebugLogger.LEVEL_VALUES),
                        help="Console verbosity (VERBOSE shows per-tick traces)")
    parser.add_argument("--log", action="append", metavar="CATEGORY", default=[],
                        choices=sorted(LoggerConfig.CATEGORIES),
                        help="Enable an extra log category (repeatable)")
    parser.add_argument("--dump-config", metavar="PATH",
                        help="Write the effective scene config as YAML and exit")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    LoggerConfig.configure(level=args.log_level, categories=args.log)

    try:
        config = load_scene_config(args.config, strict=args.config is not None)
    except ConfigError as e:
        DebugLogger.fail(str(e), category="system")
        return 2

    if args.dump_config:
        save_config(args.dump_config, config.to_dict())
        return 0

    MainLoop(config, seed=args.seed, window_size=args.window).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
