"""
Entity management system exports.

Provides the berry store and the spawner.
"""

from strawberry_sprint.systems.entity_management.entity_store import EntityStore
from strawberry_sprint.systems.entity_management.spawn_manager import SpawnManager

__all__ = [
    'EntityStore',
    'SpawnManager',
]
