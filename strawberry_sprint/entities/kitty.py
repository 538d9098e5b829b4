"""
kitty.py
--------
The pursuing sprite. Exactly one per stage.

Coordinate System
-----------------
- self.pos is the kitty's physical center in stage units.
- self.vel is stage units per tick.
- The rendered bob offset never touches pos or vel.
"""

import pygame


class Kitty:
    """Position and velocity of the pursuing sprite."""

    __slots__ = ('pos', 'vel', 'node')

    def __init__(self, x: float, y: float, node=None):
        self.pos = pygame.Vector2(x, y)
        self.vel = pygame.Vector2(0, 0)
        self.node = node

    def reset(self, x: float, y: float):
        """Put the kitty at rest at (x, y)."""
        self.pos.update(x, y)
        self.vel.update(0, 0)

    @property
    def speed(self) -> float:
        return self.vel.length()

    def __repr__(self):
        return f"Kitty(pos=({self.pos.x:.1f}, {self.pos.y:.1f}), speed={self.speed:.2f})"
