"""
berry.py
--------
Collectible sprite eaten by the kitty.

A berry's collision radius is a fixed gameplay number, independent of the
sprite's drawn size.
"""

import itertools

import pygame

from strawberry_sprint.entities.entity_state import LifecycleState


_BERRY_IDS = itertools.count(1)


class Berry:
    """A single berry with a monotonic eaten flag."""

    __slots__ = ('berry_id', 'pos', 'radius', 'node', 'state')

    def __init__(self, x: float, y: float, radius: float, node=None, berry_id: int = None):
        """
        Args:
            x: Center X in stage units.
            y: Center Y in stage units.
            radius: Collision radius.
            node: SceneNode drawn for this berry (owned).
            berry_id: Explicit id; a process-unique id is assigned when omitted.
        """
        self.berry_id = berry_id if berry_id is not None else next(_BERRY_IDS)
        self.pos = pygame.Vector2(x, y)
        self.radius = radius
        self.node = node
        self.state = LifecycleState.ALIVE

    # ===========================================================
    # Lifecycle
    # ===========================================================
    @property
    def eaten(self) -> bool:
        return self.state >= LifecycleState.EATEN

    def mark_eaten(self) -> bool:
        """
        Flip the eaten flag.

        Returns:
            bool: True only on the first call; eaten never reverts.
        """
        if self.eaten:
            return False
        self.state = LifecycleState.EATEN
        return True

    def mark_removed(self):
        """Record that the berry's node has left the stage."""
        self.state = LifecycleState.REMOVED

    def __repr__(self):
        return (f"Berry({self.berry_id}, pos=({self.pos.x:.1f}, {self.pos.y:.1f}), "
                f"r={self.radius:.0f}, {self.state.name})")
