"""
animation_manager.py
--------------------
Runs detached, time-bounded node animations keyed by owner identity.

Responsibilities
----------------
- Start, replace and cancel animations per key (one active tween per key).
- Advance every active tween from the scene clock.
- Run each finished tween's completion hook exactly once.
- Guarantee fail-safety: animation errors never crash the tick loop.
"""

from strawberry_sprint.core.debug.debug_logger import DebugLogger


class AnimationManager:
    """Scene-wide tween runner."""

    def __init__(self):
        self._tweens = {}
        self.now_ms = 0.0

    # ===========================================================
    # Playback Controls
    # ===========================================================
    def play(self, key, tween):
        """
        Start a tween under key, replacing any tween already running there.
        The replaced tween's completion hook does not run.
        """
        tween.begin(self.now_ms)
        self._tweens[key] = tween
        DebugLogger.trace(f"{type(tween).__name__} started for {key}", category="animation")
        return tween

    def cancel(self, key) -> bool:
        """Drop a tween without running its completion hook."""
        return self._tweens.pop(key, None) is not None

    def has(self, key) -> bool:
        return key in self._tweens

    def get(self, key):
        return self._tweens.get(key)

    def __len__(self):
        return len(self._tweens)

    # ===========================================================
    # Update
    # ===========================================================
    def update(self, now_ms: float):
        """Advance all tweens to now_ms and retire the finished ones."""
        self.now_ms = now_ms

        for key, tween in list(self._tweens.items()):
            try:
                done = tween.update(now_ms)
            except Exception as e:
                DebugLogger.warn(f"Animation {type(tween).__name__} for {key} failed: {e}", category="animation")
                done = True

            if not done:
                continue

            # An earlier hook in this pass may have replaced it
            if self._tweens.get(key) is tween:
                del self._tweens[key]

            try:
                tween.finish()
            except Exception as e:
                DebugLogger.warn(f"Animation hook for {key} failed: {e}", category="animation")
