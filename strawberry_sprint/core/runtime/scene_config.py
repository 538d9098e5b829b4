"""
scene_config.py
---------------
Immutable runtime configuration for one scene instance.

Built from the class constants in game_settings.py and optionally
overridden by a config file (see config/scene.yaml for the layout).
"""

from dataclasses import dataclass

from strawberry_sprint.core.debug.debug_logger import DebugLogger
from strawberry_sprint.core.errors import ConfigError
from strawberry_sprint.core.runtime.game_settings import (
    StageConfig, KittyConfig, BerryConfig, SpawnConfig, Assets,
)
from strawberry_sprint.core.services.config_manager import load_config


# ===========================================================
# Defaults (mirrors config/scene.yaml)
# ===========================================================

DEFAULT_CONFIG = {
    "stage": {
        "width": StageConfig.WIDTH,
        "height": StageConfig.HEIGHT,
        "rest_x": StageConfig.REST_X,
        "rest_y": StageConfig.REST_Y,
    },
    "kitty": {
        "start_x": KittyConfig.START_X,
        "start_y": KittyConfig.START_Y,
        "damping": KittyConfig.DAMPING,
        "pull": KittyConfig.PULL,
        "max_speed": KittyConfig.MAX_SPEED,
        "collision_radius": KittyConfig.COLLISION_RADIUS,
        "margin_x": KittyConfig.MARGIN_X,
        "margin_top": KittyConfig.MARGIN_TOP,
        "margin_bottom": KittyConfig.MARGIN_BOTTOM,
        "bob_period_ms": KittyConfig.BOB_PERIOD_MS,
        "bob_amplitude": KittyConfig.BOB_AMPLITUDE,
    },
    "berry": {
        "radius": BerryConfig.RADIUS,
        "inset_x": BerryConfig.INSET_X,
        "inset_top": BerryConfig.INSET_TOP,
        "inset_bottom": BerryConfig.INSET_BOTTOM,
        "sprite_scale": BerryConfig.SPRITE_SCALE,
        "bob_height": BerryConfig.BOB_HEIGHT,
        "bob_min_ms": BerryConfig.BOB_MIN_MS,
        "bob_jitter_ms": BerryConfig.BOB_JITTER_MS,
        "pop_ms": BerryConfig.POP_MS,
        "pop_scale": BerryConfig.POP_SCALE,
        "pop_opacity": BerryConfig.POP_OPACITY,
    },
    "spawn": {
        "cooldown_ms": SpawnConfig.COOLDOWN_MS,
        "live_cap": SpawnConfig.LIVE_CAP,
        "initial_count": SpawnConfig.INITIAL_COUNT,
        "compact_threshold": SpawnConfig.COMPACT_THRESHOLD,
    },
    "assets": {
        "dir": Assets.DIR,
        "kitty": Assets.KITTY,
        "berry": Assets.BERRY,
        "background": Assets.BACKGROUND,
    },
}


@dataclass(frozen=True)
class SceneConfig:
    """Flattened, validated scene tuning values."""

    # Stage
    width: float = StageConfig.WIDTH
    height: float = StageConfig.HEIGHT
    rest_x: float = StageConfig.REST_X
    rest_y: float = StageConfig.REST_Y

    # Kitty
    kitty_start_x: float = KittyConfig.START_X
    kitty_start_y: float = KittyConfig.START_Y
    damping: float = KittyConfig.DAMPING
    pull: float = KittyConfig.PULL
    max_speed: float = KittyConfig.MAX_SPEED
    kitty_radius: float = KittyConfig.COLLISION_RADIUS
    margin_x: float = KittyConfig.MARGIN_X
    margin_top: float = KittyConfig.MARGIN_TOP
    margin_bottom: float = KittyConfig.MARGIN_BOTTOM
    kitty_bob_period_ms: float = KittyConfig.BOB_PERIOD_MS
    kitty_bob_amplitude: float = KittyConfig.BOB_AMPLITUDE

    # Berry
    berry_radius: float = BerryConfig.RADIUS
    berry_inset_x: float = BerryConfig.INSET_X
    berry_inset_top: float = BerryConfig.INSET_TOP
    berry_inset_bottom: float = BerryConfig.INSET_BOTTOM
    berry_scale: float = BerryConfig.SPRITE_SCALE
    berry_bob_height: float = BerryConfig.BOB_HEIGHT
    berry_bob_min_ms: float = BerryConfig.BOB_MIN_MS
    berry_bob_jitter_ms: float = BerryConfig.BOB_JITTER_MS
    pop_ms: float = BerryConfig.POP_MS
    pop_scale: float = BerryConfig.POP_SCALE
    pop_opacity: float = BerryConfig.POP_OPACITY

    # Spawning
    spawn_cooldown_ms: float = SpawnConfig.COOLDOWN_MS
    live_cap: int = SpawnConfig.LIVE_CAP
    initial_berries: int = SpawnConfig.INITIAL_COUNT
    compact_threshold: int = SpawnConfig.COMPACT_THRESHOLD

    # Assets
    asset_dir: str = Assets.DIR
    kitty_image: str = Assets.KITTY
    berry_image: str = Assets.BERRY
    background_image: str = Assets.BACKGROUND

    def __post_init__(self):
        self.validate()

    # ===========================================================
    # Derived Geometry
    # ===========================================================
    @property
    def rest_point(self) -> tuple:
        """Where the kitty settles when the pointer is away."""
        return self.width * self.rest_x, self.height * self.rest_y

    @property
    def kitty_bounds(self) -> tuple:
        """(min_x, max_x, min_y, max_y) for the kitty's center."""
        return (
            self.margin_x,
            self.width - self.margin_x,
            self.margin_top,
            self.height - self.margin_bottom,
        )

    # ===========================================================
    # Validation
    # ===========================================================
    def validate(self):
        """Raise ConfigError for geometry the scene cannot run with."""
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Stage size must be positive, got {self.width}x{self.height}")

        min_x, max_x, min_y, max_y = self.kitty_bounds
        if min_x > max_x or min_y > max_y:
            raise ConfigError("Kitty margins leave no room on the stage")
        if not (min_x <= self.kitty_start_x <= max_x and min_y <= self.kitty_start_y <= max_y):
            raise ConfigError("Kitty start position lies outside its margins")

        if self.berry_inset_x * 2 > self.width or \
                self.berry_inset_top + self.berry_inset_bottom > self.height:
            raise ConfigError("Berry insets leave no room on the stage")

        for name in ("max_speed", "berry_radius", "kitty_radius", "spawn_cooldown_ms",
                     "pop_ms", "kitty_bob_period_ms", "berry_bob_min_ms"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive")

        if self.live_cap < 0 or self.initial_berries < 0 or self.compact_threshold < 0:
            raise ConfigError("Spawn counts cannot be negative")

    # ===========================================================
    # Construction
    # ===========================================================
    @classmethod
    def from_dict(cls, data: dict) -> "SceneConfig":
        """Build from the sectioned layout used by config files."""
        values = {}
        for name, (section, key) in FIELD_SOURCES.items():
            entries = data.get(section) or {}
            if not isinstance(entries, dict):
                raise ConfigError(f"Config section '{section}' must be a mapping")
            value = entries.get(key)
            if value is not None:
                values[name] = value

        try:
            return cls(**values)
        except TypeError as e:
            raise ConfigError(f"Invalid scene config: {e}") from e

    def to_dict(self) -> dict:
        """Sectioned layout, the inverse of from_dict()."""
        data = {}
        for name, (section, key) in FIELD_SOURCES.items():
            data.setdefault(section, {})[key] = getattr(self, name)
        return data


# field name -> (config file section, key)
FIELD_SOURCES = {
    "width": ("stage", "width"),
    "height": ("stage", "height"),
    "rest_x": ("stage", "rest_x"),
    "rest_y": ("stage", "rest_y"),

    "kitty_start_x": ("kitty", "start_x"),
    "kitty_start_y": ("kitty", "start_y"),
    "damping": ("kitty", "damping"),
    "pull": ("kitty", "pull"),
    "max_speed": ("kitty", "max_speed"),
    "kitty_radius": ("kitty", "collision_radius"),
    "margin_x": ("kitty", "margin_x"),
    "margin_top": ("kitty", "margin_top"),
    "margin_bottom": ("kitty", "margin_bottom"),
    "kitty_bob_period_ms": ("kitty", "bob_period_ms"),
    "kitty_bob_amplitude": ("kitty", "bob_amplitude"),

    "berry_radius": ("berry", "radius"),
    "berry_inset_x": ("berry", "inset_x"),
    "berry_inset_top": ("berry", "inset_top"),
    "berry_inset_bottom": ("berry", "inset_bottom"),
    "berry_scale": ("berry", "sprite_scale"),
    "berry_bob_height": ("berry", "bob_height"),
    "berry_bob_min_ms": ("berry", "bob_min_ms"),
    "berry_bob_jitter_ms": ("berry", "bob_jitter_ms"),
    "pop_ms": ("berry", "pop_ms"),
    "pop_scale": ("berry", "pop_scale"),
    "pop_opacity": ("berry", "pop_opacity"),

    "spawn_cooldown_ms": ("spawn", "cooldown_ms"),
    "live_cap": ("spawn", "live_cap"),
    "initial_berries": ("spawn", "initial_count"),
    "compact_threshold": ("spawn", "compact_threshold"),

    "asset_dir": ("assets", "dir"),
    "kitty_image": ("assets", "kitty"),
    "berry_image": ("assets", "berry"),
    "background_image": ("assets", "background"),
}


def load_scene_config(path=None, strict=False) -> SceneConfig:
    """
    Load a SceneConfig, merging an optional file over the defaults.

    Args:
        path: Config file (.yaml/.json/.py). None uses defaults only.
        strict: Raise ConfigError instead of falling back on a bad file.
    """
    if path is None:
        return SceneConfig.from_dict(DEFAULT_CONFIG)

    data = load_config(path, DEFAULT_CONFIG, strict=strict)
    config = SceneConfig.from_dict(data)
    DebugLogger.system(f"Scene config: {config.width:.0f}x{config.height:.0f} stage", category="loading")
    return config
