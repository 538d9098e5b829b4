"""
game_settings.py
----------------
Centralized constants for the scene and its host window.

These are the defaults; SceneConfig (scene_config.py) is the runtime value
object built from them and optionally overridden from a config file.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Host window configuration."""
    FPS: int = 60
    CAPTION: str = "Strawberry Sprint"

    WINDOW_SIZES = {
        "small": (1000, 562),
        "medium": (1600, 900),
        "large": (1920, 1080),
    }
    DEFAULT_WINDOW_SIZE: str = "small"
    BACKGROUND_COLOR = (255, 240, 245)


# ===========================================================
# Timing
# ===========================================================

class Timing:
    """Frame pacing for the animation loop (milliseconds)."""
    FRAME_MS: float = 1000 / 60
    MAX_FRAME_MS: float = 100.0


# ===========================================================
# Stage Geometry
# ===========================================================

class StageConfig:
    """Logical coordinate space, independent of window pixels."""
    WIDTH: int = 1000
    HEIGHT: int = 562

    # Rest point as a fraction of the stage size
    REST_X: float = 0.5
    REST_Y: float = 0.62


# ===========================================================
# Kitty
# ===========================================================

class KittyConfig:
    """Steering and bounds for the pursuing sprite."""
    START_X: float = 200.0
    START_Y: float = 200.0

    DAMPING: float = 0.82
    PULL: float = 0.02
    MAX_SPEED: float = 14.0
    COLLISION_RADIUS: float = 36.0

    MARGIN_X: float = 80.0
    MARGIN_TOP: float = 90.0
    MARGIN_BOTTOM: float = 120.0

    BOB_PERIOD_MS: float = 120.0
    BOB_AMPLITUDE: float = 2.6
    SPRITE_SIZE: int = 120


# ===========================================================
# Berries
# ===========================================================

class BerryConfig:
    """Berry collision, placement and animation."""
    RADIUS: float = 75.0

    INSET_X: float = 80.0
    INSET_TOP: float = 90.0
    INSET_BOTTOM: float = 80.0

    SPRITE_SIZE: int = 150
    SPRITE_SCALE: float = 0.42

    BOB_HEIGHT: float = 6.0
    BOB_MIN_MS: float = 900.0
    BOB_JITTER_MS: float = 600.0

    POP_MS: float = 220.0
    POP_SCALE: float = 1.6
    POP_OPACITY: float = 0.1


# ===========================================================
# Spawning
# ===========================================================

class SpawnConfig:
    """Automatic spawning and store compaction."""
    COOLDOWN_MS: float = 1200.0
    LIVE_CAP: int = 9
    INITIAL_COUNT: int = 4
    COMPACT_THRESHOLD: int = 40


# ===========================================================
# Assets
# ===========================================================

class Assets:
    """Sprite locations. Missing files fall back to drawn placeholders."""
    DIR: str = "assets"
    KITTY: str = "hello-kitty-run.png"
    BERRY: str = "strawberry.png"
    BACKGROUND: str = "hello-kitty-bg.png"


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    BACKGROUND: int = 0
    ENTITIES: int = 100
    HUD: int = 600
