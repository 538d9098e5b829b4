"""
entity_store.py
---------------
Owns the kitty and the berry collection.

Responsibilities
----------------
- Register new berries and expose live (non-eaten) views.
- Compact the collection once it grows past a threshold.
- Hand back every berry on reset so their nodes can be detached.
"""

from strawberry_sprint.core.debug.debug_logger import DebugLogger


class EntityStore:
    """Single owner of scene entities."""

    def __init__(self, kitty):
        self.kitty = kitty
        self.berries = []

    # ===========================================================
    # Registration
    # ===========================================================
    def add(self, berry):
        """Register a freshly spawned berry."""
        self.berries.append(berry)
        return berry

    def clear(self) -> list:
        """Remove every berry and return them."""
        removed = self.berries
        self.berries = []
        return removed

    # ===========================================================
    # Queries
    # ===========================================================
    def live_berries(self) -> list:
        """Berries that can still be eaten."""
        return [b for b in self.berries if not b.eaten]

    @property
    def live_count(self) -> int:
        return sum(1 for b in self.berries if not b.eaten)

    def __len__(self):
        return len(self.berries)

    # ===========================================================
    # Cleanup
    # ===========================================================
    def compact(self, threshold: int) -> int:
        """
        Purge eaten berries once the collection exceeds threshold.

        Eaten berries' nodes are already scheduled for detachment by their
        pop animation, so only the store entries are dropped here.

        Returns:
            int: Number of entries removed.
        """
        if len(self.berries) <= threshold:
            return 0

        before = len(self.berries)
        self.berries = [b for b in self.berries if not b.eaten]
        removed = before - len(self.berries)

        if removed:
            DebugLogger.state(
                f"Compacted berry store: {removed} eaten removed, {len(self.berries)} left",
                category="entity_cleanup"
            )
        return removed
