"""
test_collision_manager.py
-------------------------
Unit tests for kitty/berry collision scoring.
"""

import pytest
from unittest.mock import MagicMock

from strawberry_sprint.core.runtime.scene_state import SceneState
from strawberry_sprint.core.services.event_manager import BerryEatenEvent
from strawberry_sprint.entities.berry import Berry
from strawberry_sprint.systems.collision.collision_manager import CollisionManager


@pytest.fixture
def state():
    return SceneState((500, 353))


@pytest.fixture
def on_eaten():
    return MagicMock()


@pytest.fixture
def collisions(config, state, on_eaten):
    return CollisionManager(config, state, on_eaten=on_eaten)


@pytest.mark.parametrize("distance, touching", [(0, True), (110.9, True), (111, False), (150, False)])
def test_threshold_is_berry_radius_plus_kitty_radius(collisions, state, distance, touching):
    berry = Berry(500 + distance, 353, 75)
    assert collisions.touching(state.kitty, berry) is touching


def test_each_contact_scores_once(collisions, state, on_eaten):
    near = state.store.add(Berry(500, 353, 75))
    also_near = state.store.add(Berry(520, 353, 75))
    far = state.store.add(Berry(900, 100, 75))

    eaten = collisions.update()

    assert eaten == [near, also_near]
    assert state.score == 2
    assert on_eaten.call_count == 2
    assert not far.eaten

    # Kitty still overlapping: nothing changes
    assert collisions.update() == []
    assert state.score == 2
    assert on_eaten.call_count == 2


def test_eat_dispatches_score_event(config, state):
    events = MagicMock()
    collisions = CollisionManager(config, state, events=events)
    berry = state.store.add(Berry(500, 353, 75))

    collisions.update()

    events.dispatch.assert_called_once_with(BerryEatenEvent(berry.berry_id, (500.0, 353.0), 1))
