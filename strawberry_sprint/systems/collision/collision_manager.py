"""
collision_manager.py
--------------------
Per-tick proximity test between the kitty and live berries.

Responsibilities
----------------
- Detect kitty <-> berry overlap with a circular test.
- Mark each touched berry eaten exactly once and raise the score.
- Hand eaten berries to the removal routine without waiting on it.

The threshold is berry.radius + kitty radius (75 + 36 by default), a fixed
gameplay number rather than anything derived from sprite bounds.
"""

from strawberry_sprint.core.debug.debug_logger import DebugLogger
from strawberry_sprint.core.services.event_manager import BerryEatenEvent


class CollisionManager:
    """Detects kitty/berry contacts and scores them."""

    def __init__(self, config, state, on_eaten=None, events=None):
        """
        Args:
            config: SceneConfig providing the kitty collision radius.
            state: SceneState holding the kitty, berries and score.
            on_eaten (optional): Removal routine called with each eaten berry.
            events (optional): EventManager notified of each eat.
        """
        self.kitty_radius = config.kitty_radius
        self.state = state
        self.on_eaten = on_eaten
        self.events = events

    def touching(self, kitty, berry) -> bool:
        """Circular overlap test."""
        return kitty.pos.distance_to(berry.pos) < berry.radius + self.kitty_radius

    def update(self) -> list:
        """
        Run one collision pass.

        Returns:
            list: Berries eaten during this pass.
        """
        kitty = self.state.kitty
        eaten = []

        for berry in self.state.berries:
            if berry.eaten:
                continue
            if not self.touching(kitty, berry):
                continue
            if not berry.mark_eaten():
                continue

            self.state.score += 1
            eaten.append(berry)

            DebugLogger.action(
                f"Kitty ate berry {berry.berry_id} (score {self.state.score})",
                category="collision"
            )

            if self.on_eaten:
                self.on_eaten(berry)
            if self.events:
                self.events.dispatch(
                    BerryEatenEvent(berry.berry_id, (berry.pos.x, berry.pos.y), self.state.score)
                )

        return eaten
