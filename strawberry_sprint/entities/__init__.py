"""
strawberry_sprint/entities/__init__.py
--------------------------------------
Entity module exports.

Exports:
    LifecycleState - Berry progression (ALIVE, EATEN, REMOVED)
    Kitty          - The single pointer-chasing entity
    Berry          - Edible entity with a collision radius
"""

from strawberry_sprint.entities.entity_state import LifecycleState
from strawberry_sprint.entities.kitty import Kitty
from strawberry_sprint.entities.berry import Berry

__all__ = [
    'LifecycleState',
    'Kitty',
    'Berry',
]
