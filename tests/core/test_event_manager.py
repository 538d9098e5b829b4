"""
test_event_manager.py
---------------------
Unit tests for the per-scene EventManager.
"""

from unittest.mock import MagicMock, patch

from strawberry_sprint.core.services.event_manager import (
    EventManager, BaseEvent, BerryEatenEvent, PauseToggledEvent,
)


def test_dispatch_reaches_matching_subscribers_only():
    events = EventManager()
    on_eaten, on_pause = MagicMock(), MagicMock()
    events.subscribe(BerryEatenEvent, on_eaten)
    events.subscribe(PauseToggledEvent, on_pause)

    event = BerryEatenEvent(1, (10, 10), 1)
    events.dispatch(event)

    on_eaten.assert_called_once_with(event)
    on_pause.assert_not_called()


def test_subscribe_is_deduplicated():
    events = EventManager()
    callback = MagicMock()
    assert events.subscribe(PauseToggledEvent, callback) is True
    assert events.subscribe(PauseToggledEvent, callback) is False

    events.dispatch(PauseToggledEvent(True))

    assert callback.call_count == 1
    assert events.get_subscriber_count(PauseToggledEvent) == 1


def test_failing_callback_does_not_block_others():
    events = EventManager()
    broken = MagicMock(side_effect=RuntimeError("boom"))
    healthy = MagicMock()
    events.subscribe(PauseToggledEvent, broken)
    events.subscribe(PauseToggledEvent, healthy)

    with patch("strawberry_sprint.core.services.event_manager.DebugLogger") as mock_logger:
        delivered = events.dispatch(PauseToggledEvent(False))

    mock_logger.warn.assert_called_once()
    healthy.assert_called_once()
    assert delivered == 1


def test_unsubscribe_and_clear():
    events = EventManager()
    callback = MagicMock()
    events.subscribe(PauseToggledEvent, callback)
    assert events.unsubscribe(PauseToggledEvent, callback) is True
    assert events.unsubscribe(PauseToggledEvent, callback) is False
    events.dispatch(PauseToggledEvent(True))
    callback.assert_not_called()

    events.subscribe(BerryEatenEvent, callback)
    events.clear_all()
    assert events.get_subscriber_count() == 0


def test_managers_are_independent():
    first, second = EventManager(), EventManager()
    callback = MagicMock()
    first.subscribe(PauseToggledEvent, callback)

    second.dispatch(PauseToggledEvent(True))
    callback.assert_not_called()


def test_base_class_subscriber_sees_every_event():
    events = EventManager()
    recorder = MagicMock()
    events.subscribe(BaseEvent, recorder)

    events.dispatch(PauseToggledEvent(True))
    events.dispatch(BerryEatenEvent(3, (1, 2), 4))

    assert [c.args[0] for c in recorder.call_args_list] == [
        PauseToggledEvent(True), BerryEatenEvent(3, (1, 2), 4),
    ]
