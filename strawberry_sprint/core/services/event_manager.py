"""
event_manager.py
----------------
Event-driven system for decoupled scene component communication.
Lets the HUD and the host react to scene changes without direct dependencies.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type
from strawberry_sprint.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class BerrySpawnedEvent(BaseEvent):
    """Dispatched when a berry joins the scene."""
    berry_id: int
    position: tuple
    automatic: bool = False


@dataclass(frozen=True)
class BerryEatenEvent(BaseEvent):
    """Dispatched when the kitty eats a berry."""
    berry_id: int
    position: tuple
    score: int


@dataclass(frozen=True)
class PauseToggledEvent(BaseEvent):
    """Dispatched when the scene is paused or resumed."""
    paused: bool


@dataclass(frozen=True)
class SceneResetEvent(BaseEvent):
    """Dispatched after a full entity reset."""
    paused: bool

# ===========================================================
# Event Manager
# ===========================================================

def _name_of(callback) -> str:
    return getattr(callback, '__qualname__', None) or repr(callback)


class EventManager:
    """
    Pub-sub dispatcher owned by one scene.

    Subscribing to a base class also receives its subclasses, so a
    BaseEvent subscriber sees every scene event.
    """

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> bool:
        """
        Register callback for event_type (and its subclasses).

        Returns:
            bool: False if the callback was already registered.
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback in callbacks:
            return False

        callbacks.append(callback)
        DebugLogger.system(f"{_name_of(callback)} <- {event_type.__name__}", category="event_manager")
        return True

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> bool:
        """Remove callback; returns False if it was not registered."""
        callbacks = self._subscribers.get(event_type, [])
        if callback not in callbacks:
            return False
        callbacks.remove(callback)
        return True

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> int:
        """
        Deliver event to subscribers of its class and of its base classes.

        A failing subscriber is logged and skipped so the tick keeps running.

        Returns:
            int: Number of callbacks that handled the event without error.
        """
        delivered = 0
        for event_type in type(event).__mro__:
            for callback in list(self._subscribers.get(event_type, ())):
                try:
                    callback(event)
                except Exception as e:
                    DebugLogger.warn(
                        f"{_name_of(callback)} failed on {type(event).__name__}: {e}",
                        category="system"
                    )
                    continue
                delivered += 1
        return delivered

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Remove all subscribers. Call on stage teardown."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """Count subscribers registered for exactly event_type, or all of them."""
        if event_type is not None:
            return len(self._subscribers.get(event_type, ()))
        return sum(len(callbacks) for callbacks in self._subscribers.values())
