"""
Runtime configuration exports.

Provides scene-wide constants. All exports are lightweight class constants
with no initialization overhead.
"""

from strawberry_sprint.core.runtime.game_settings import (
    Display,
    Timing,
    StageConfig,
    KittyConfig,
    BerryConfig,
    SpawnConfig,
    Assets,
    Layers,
)

__all__ = [
    # Display & Rendering
    'Display',
    'Timing',
    'Layers',
    # Scene Tuning
    'StageConfig',
    'KittyConfig',
    'BerryConfig',
    'SpawnConfig',
    'Assets',
]
