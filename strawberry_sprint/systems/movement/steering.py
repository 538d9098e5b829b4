"""
steering.py
-----------
Eases the kitty toward a target point once per tick.

Update rule (per tick, not scaled by frame time):
    v' = v * damping + (target - pos) * pull
    |v'| is capped at max_speed, direction preserved
    pos += v', then clamped into the stage margins

The bob offset is render-only and lives in bob_offset().
"""

import math

import pygame

from strawberry_sprint.core.debug.debug_logger import DebugLogger


def clamp(value: float, low: float, high: float) -> float:
    """Keep value within [low, high]."""
    return max(low, min(high, value))


class SteeringController:
    """Critically-damped pursuit of the pointer (or the rest point)."""

    def __init__(self, config):
        self.config = config
        self.rest_point = pygame.Vector2(config.rest_point)
        self.bounds = config.kitty_bounds

    def target_for(self, pointer) -> pygame.Vector2:
        """Pointer position while it is on the stage, else the rest point."""
        if pointer.inside:
            return pygame.Vector2(pointer.x, pointer.y)
        return pygame.Vector2(self.rest_point)

    def update(self, kitty, pointer):
        """Advance the kitty by one tick toward the current target."""
        cfg = self.config
        target = self.target_for(pointer)

        kitty.vel = kitty.vel * cfg.damping + (target - kitty.pos) * cfg.pull

        speed = kitty.vel.length()
        if speed > cfg.max_speed:
            kitty.vel.scale_to_length(cfg.max_speed)

        min_x, max_x, min_y, max_y = self.bounds
        kitty.pos.x = clamp(kitty.pos.x + kitty.vel.x, min_x, max_x)
        kitty.pos.y = clamp(kitty.pos.y + kitty.vel.y, min_y, max_y)

        DebugLogger.trace(f"{kitty!r} -> target ({target.x:.0f}, {target.y:.0f})", category="steering")

    def bob_offset(self, clock_ms: float) -> float:
        """Vertical render offset so the kitty looks alive."""
        return math.sin(clock_ms / self.config.kitty_bob_period_ms) * self.config.kitty_bob_amplitude
