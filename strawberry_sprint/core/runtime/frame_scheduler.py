"""
frame_scheduler.py
------------------
Drives a StrawberryScene one tick per display frame.

Responsibilities:
- Call scene.advance() once per frame with a clamped frame time
- Stop once the scene's stage is unmounted
- Periodic status trace (clock, live berries, score)
"""

from strawberry_sprint.core.debug.debug_logger import DebugLogger
from strawberry_sprint.core.runtime.game_settings import Timing

STATUS_INTERVAL_S = 5.0


class FrameScheduler:
    """Thin frame driver. Timing comes from the host (pygame clock or tests)."""

    def __init__(self, scene, max_frame_ms: float = Timing.MAX_FRAME_MS):
        self.scene = scene
        self.max_frame_ms = max_frame_ms
        self.running = False
        self.frames = 0

    def start(self):
        self.running = True
        DebugLogger.system("Frame scheduler started", category="system")

    def stop(self):
        if self.running:
            self.running = False
            DebugLogger.system(f"Frame scheduler stopped after {self.frames} frames", category="system")

    def step(self, frame_ms: float = Timing.FRAME_MS) -> bool:
        """
        Advance the scene by one frame.

        Args:
            frame_ms: Wall time since the previous frame.

        Returns:
            bool: False once the scheduler has stopped.
        """
        if not self.running:
            return False

        if not self.scene.mounted:
            self.stop()
            return False

        # Long stalls (window drag, breakpoint) advance at most max_frame_ms
        if frame_ms > self.max_frame_ms:
            DebugLogger.trace(f"Clamped {frame_ms:.1f}ms frame", category="system")
            frame_ms = self.max_frame_ms

        self.scene.advance(frame_ms)
        self.frames += 1

        if DebugLogger.enabled("scene", "VERBOSE"):
            state = self.scene.state
            DebugLogger.throttled(
                f"scheduler-{id(self)}",
                f"t={state.clock_ms:.0f}ms live={state.store.live_count} score={state.score}"
                f"{' (paused)' if state.paused else ''}",
                interval_s=STATUS_INTERVAL_S,
                category="scene"
            )
        return True

    def run_frames(self, count: int, frame_ms: float = Timing.FRAME_MS) -> int:
        """Step up to count frames; returns how many actually ran."""
        if not self.running:
            self.start()

        ran = 0
        for _ in range(count):
            if not self.step(frame_ms):
                break
            ran += 1
        return ran
