"""
test_steering.py
----------------
Unit tests for the SteeringController.

Responsibilities
----------------
- Target selection (pointer vs. rest point).
- Speed cap preserves direction.
- Position clamp to the stage margins.
- Convergence on a fixed pointer.
"""

import math
import random

import pytest

from strawberry_sprint.core.runtime.scene_state import PointerState
from strawberry_sprint.entities.kitty import Kitty
from strawberry_sprint.systems.movement.steering import SteeringController, clamp


@pytest.fixture
def steering(config):
    return SteeringController(config)


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_target_is_rest_point_when_pointer_outside(steering):
    target = steering.target_for(PointerState(10, 10, inside=False))
    assert (target.x, target.y) == pytest.approx((500, 348.44))


def test_kitty_at_rest_stays_at_rest(steering):
    kitty = Kitty(500, 348.44)
    steering.update(kitty, PointerState(inside=False))

    assert (kitty.pos.x, kitty.pos.y) == pytest.approx((500, 348.44))
    assert kitty.speed == pytest.approx(0)


def test_first_tick_follows_update_rule(steering):
    kitty = Kitty(400, 300)
    kitty.vel.update(1, -1)
    steering.update(kitty, PointerState(500, 353, inside=True))

    # v' = v*0.82 + (target - pos)*0.02
    assert (kitty.vel.x, kitty.vel.y) == pytest.approx((0.82 + 2.0, -0.82 + 1.06))
    assert (kitty.pos.x, kitty.pos.y) == pytest.approx((402.82, 300.24))


def test_speed_cap_preserves_direction(steering):
    kitty = Kitty(80, 90)
    steering.update(kitty, PointerState(920, 442, inside=True))

    assert kitty.speed == pytest.approx(14)
    assert math.atan2(kitty.vel.y, kitty.vel.x) == pytest.approx(math.atan2(442 - 90, 920 - 80))


def test_position_stays_within_margins(steering):
    rng = random.Random(3)
    kitty = Kitty(200, 200)
    pointer = PointerState(inside=True)

    for tick in range(2000):
        if tick % 25 == 0:
            pointer.x = rng.uniform(-2000, 3000)
            pointer.y = rng.uniform(-2000, 3000)
        steering.update(kitty, pointer)
        assert 80 <= kitty.pos.x <= 920
        assert 90 <= kitty.pos.y <= 442


def test_converges_on_fixed_pointer(steering):
    kitty = Kitty(200, 200)
    pointer = PointerState(500, 353, inside=True)

    for _ in range(200):
        steering.update(kitty, pointer)

    assert kitty.pos.distance_to((500, 353)) < 1.0
    assert kitty.speed < 0.01


def test_bob_offset(steering):
    assert steering.bob_offset(0) == pytest.approx(0)
    assert steering.bob_offset(120 * math.pi / 2) == pytest.approx(2.6)
