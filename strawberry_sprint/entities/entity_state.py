"""
entity_state.py
---------------
Defines runtime state enumerations for scene entities.
Contains only states that change over time during play.
"""

from enum import IntEnum


class LifecycleState(IntEnum):
    """
    Tracks the life/death progression of a berry.

    Transitions only move forward: ALIVE -> EATEN -> REMOVED.
    """
    ALIVE = 0
    EATEN = 1      # Scored; pop animation may still be playing
    REMOVED = 2    # Node detached, waiting for compaction
