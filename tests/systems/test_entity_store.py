"""
test_entity_store.py
--------------------
Unit tests for EntityStore registration, live views and compaction.
"""

import pytest

from strawberry_sprint.entities.berry import Berry
from strawberry_sprint.entities.entity_state import LifecycleState
from strawberry_sprint.entities.kitty import Kitty
from strawberry_sprint.systems.entity_management.entity_store import EntityStore


@pytest.fixture
def store():
    return EntityStore(Kitty(200, 200))


def fill(store, count, eaten=0):
    berries = [store.add(Berry(100 + i, 100, 75)) for i in range(count)]
    for berry in berries[:eaten]:
        berry.mark_eaten()
    return berries


# ===========================================================
# Berry Lifecycle
# ===========================================================

def test_eaten_flag_is_monotonic():
    berry = Berry(10, 10, 75)

    assert berry.mark_eaten() is True
    assert berry.mark_eaten() is False
    assert berry.eaten

    berry.mark_removed()
    assert berry.eaten
    assert berry.state is LifecycleState.REMOVED


def test_berry_ids_unique():
    assert len({Berry(0, 0, 75).berry_id for _ in range(50)}) == 50


# ===========================================================
# Queries
# ===========================================================

def test_live_views_skip_eaten(store):
    berries = fill(store, 5, eaten=2)

    assert len(store) == 5
    assert store.live_count == 3
    assert store.live_berries() == berries[2:]


def test_clear_returns_everything(store):
    berries = fill(store, 3, eaten=1)

    assert store.clear() == berries
    assert len(store) == 0


# ===========================================================
# Compaction
# ===========================================================

def test_compact_waits_for_threshold(store):
    fill(store, 40, eaten=10)

    assert store.compact(40) == 0
    assert len(store) == 40


def test_compact_drops_only_eaten(store):
    fill(store, 41, eaten=10)

    assert store.compact(40) == 10
    assert len(store) == 31
    assert store.live_count == 31
