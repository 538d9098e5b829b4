"""
test_animations.py
------------------
Unit tests for tweens and the AnimationManager.

Responsibilities
----------------
- Check bob and pop curves.
- Verify completion hooks run exactly once and never for replaced tweens.
- Ensure a failing tween cannot break the update pass.
"""

import pytest
from unittest.mock import MagicMock, patch

from strawberry_sprint.graphics.animations.animation_manager import AnimationManager
from strawberry_sprint.graphics.animations.tweens import BobTween, PopTween, Tween
from strawberry_sprint.graphics.stage import Stage, StageLayer, NodeKind


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def stage():
    stage = Stage(1000, 562)
    stage.mount_stage()
    return stage


@pytest.fixture
def berry_node(stage):
    node = stage.create_node(NodeKind.IMAGE, x=300, y=200, scale=0.42, sprite="berry")
    return stage.mount(node, StageLayer.ENTITIES)


class ExplodingTween(Tween):
    def update(self, now_ms):
        raise RuntimeError("boom")


# ===========================================================
# BobTween
# ===========================================================

@pytest.mark.parametrize("now, offset", [(0, 0.0), (250, 3.0), (500, 6.0), (750, 3.0), (1000, 0.0)])
def test_bob_offset_is_triangle_wave(stage, berry_node, now, offset):
    bob = BobTween(stage, berry_node, 300, 200, height=6, period_ms=1000)
    bob.begin(0)
    assert bob.offset_at(now) == pytest.approx(offset)


def test_bob_moves_node_up_from_base(stage, berry_node):
    bob = BobTween(stage, berry_node, 300, 200, height=6, period_ms=1000)
    bob.begin(0)

    assert bob.update(500) is False
    assert berry_node.x == 300
    assert berry_node.y == pytest.approx(194)


def test_bob_ends_once_node_detached(stage, berry_node):
    bob = BobTween(stage, berry_node, 300, 200, height=6, period_ms=1000)
    bob.begin(0)
    stage.unmount(berry_node)

    assert bob.update(100) is True


# ===========================================================
# PopTween
# ===========================================================

def test_pop_interpolates_scale_and_opacity(stage, berry_node):
    pop = PopTween(stage, berry_node, duration_ms=220, end_scale=1.6, end_opacity=0.1)
    pop.begin(1000)

    assert pop.update(1110) is False
    assert berry_node.scale == pytest.approx(0.42 + 0.42 * 0.6 * 0.5)
    assert berry_node.opacity == pytest.approx(0.55)

    assert pop.update(1220) is True
    assert berry_node.scale == pytest.approx(0.42 * 1.6)
    assert berry_node.opacity == pytest.approx(0.1)


# ===========================================================
# AnimationManager
# ===========================================================

def test_hook_runs_once_when_finished(stage, berry_node):
    manager = AnimationManager()
    hook = MagicMock()
    manager.play("b1", PopTween(stage, berry_node, 220, 1.6, 0.1, on_complete=hook))

    manager.update(100)
    hook.assert_not_called()

    manager.update(220)
    manager.update(400)
    hook.assert_called_once()
    assert not manager.has("b1")


def test_replaced_tween_hook_never_runs(stage, berry_node):
    manager = AnimationManager()
    first_hook, second_hook = MagicMock(), MagicMock()

    manager.play("b1", PopTween(stage, berry_node, 220, 1.6, 0.1, on_complete=first_hook))
    manager.play("b1", PopTween(stage, berry_node, 220, 1.6, 0.1, on_complete=second_hook))
    manager.update(500)

    first_hook.assert_not_called()
    second_hook.assert_called_once()


def test_tweens_start_at_manager_clock(stage, berry_node):
    manager = AnimationManager()
    manager.update(5000)
    pop = manager.play("b1", PopTween(stage, berry_node, 220, 1.6, 0.1))

    assert pop.start_ms == 5000


def test_cancel_skips_hook(stage, berry_node):
    manager = AnimationManager()
    hook = MagicMock()
    manager.play("b1", PopTween(stage, berry_node, 220, 1.6, 0.1, on_complete=hook))

    assert manager.cancel("b1") is True
    assert manager.cancel("b1") is False
    manager.update(1000)
    hook.assert_not_called()


def test_failing_tween_is_dropped_and_others_continue(stage, berry_node):
    manager = AnimationManager()
    manager.play("bad", ExplodingTween(stage, berry_node))
    bob = manager.play("good", BobTween(stage, berry_node, 300, 200, 6, 1000))

    with patch("strawberry_sprint.graphics.animations.animation_manager.DebugLogger") as mock_logger:
        manager.update(500)

    mock_logger.warn.assert_called_once()
    assert not manager.has("bad")
    assert manager.get("good") is bob
    assert len(manager) == 1
