"""
Core services exports.

Provides the per-scene event system, input handling, the display and
configuration loading.
"""

from strawberry_sprint.core.services.config_manager import load_config
from strawberry_sprint.core.services.event_manager import (
    EventManager,
    BaseEvent,
    BerrySpawnedEvent,
    BerryEatenEvent,
    PauseToggledEvent,
    SceneResetEvent,
)
from strawberry_sprint.core.services.input_manager import InputManager, PointerTracker
from strawberry_sprint.core.services.display_manager import DisplayManager

__all__ = [
    # Config
    'load_config',
    # Events
    'EventManager',
    'BaseEvent',
    'BerrySpawnedEvent',
    'BerryEatenEvent',
    'PauseToggledEvent',
    'SceneResetEvent',
    # Services
    'InputManager',
    'PointerTracker',
    'DisplayManager',
]
