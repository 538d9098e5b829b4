"""
scene_state.py
--------------
Mutable state of one scene instance.

Owned by a single StrawberryScene and passed by reference to each system,
so several independent stages can run side by side.
"""

from strawberry_sprint.entities.kitty import Kitty
from strawberry_sprint.systems.entity_management.entity_store import EntityStore


class PointerState:
    """Latest pointer reading in stage coordinates. Written only by PointerTracker."""

    __slots__ = ('x', 'y', 'inside')

    def __init__(self, x: float = 200.0, y: float = 200.0, inside: bool = False):
        self.x = x
        self.y = y
        self.inside = inside

    def __repr__(self):
        return f"PointerState(x={self.x:.1f}, y={self.y:.1f}, inside={self.inside})"


class SceneState:
    """Aggregate of everything a tick reads and writes."""

    def __init__(self, start_point: tuple, pointer: PointerState = None):
        self.paused = False
        self.score = 0
        self.clock_ms = 0.0
        self.last_spawn_ms = 0.0

        self.pointer = pointer or PointerState()
        self.store = EntityStore(Kitty(*start_point))

    @property
    def kitty(self) -> Kitty:
        return self.store.kitty

    @property
    def berries(self) -> list:
        return self.store.berries

    def reset(self, rest_point: tuple):
        """
        Reinitialize entity data. Leaves paused, the clock and the pointer alone.

        Returns:
            list: Berries that were in the store.
        """
        removed = self.store.clear()
        self.store.kitty.reset(*rest_point)
        self.score = 0
        return removed
