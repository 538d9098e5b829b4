"""
tweens.py
---------
Cosmetic node animations.

Responsibilities
----------------
- Modify rendered node appearance only (offset, scale, opacity).
- Never modify entity position, collision radius or scene state.
- Report completion so AnimationManager can run the finish hook once.
"""


class Tween:
    """Base class for a time-driven node animation."""

    def __init__(self, stage, node, on_complete=None):
        self.stage = stage
        self.node = node
        self.on_complete = on_complete
        self.start_ms = None

    def begin(self, now_ms: float):
        self.start_ms = now_ms

    def update(self, now_ms: float) -> bool:
        """Apply the frame for now_ms. Returns True when finished."""
        raise NotImplementedError

    def finish(self):
        """Run the completion hook (if any)."""
        if self.on_complete:
            self.on_complete()


class BobTween(Tween):
    """
    Endless up-and-down bob around a fixed base position.

    Ends by itself once its node leaves the stage.
    """

    def __init__(self, stage, node, base_x: float, base_y: float,
                 height: float, period_ms: float):
        super().__init__(stage, node)
        self.base_x = base_x
        self.base_y = base_y
        self.height = height
        self.period_ms = period_ms

    def offset_at(self, now_ms: float) -> float:
        """Upward offset: 0 -> height -> 0 over one period."""
        phase = ((now_ms - self.start_ms) % self.period_ms) / self.period_ms
        return self.height * (1.0 - abs(2.0 * phase - 1.0))

    def update(self, now_ms: float) -> bool:
        if not self.node.attached:
            return True
        self.stage.set_transform(self.node, self.base_x, self.base_y - self.offset_at(now_ms))
        return False


class PopTween(Tween):
    """Grow and fade a node, then hand off to on_complete (detach)."""

    def __init__(self, stage, node, duration_ms: float, end_scale: float,
                 end_opacity: float, on_complete=None):
        super().__init__(stage, node, on_complete)
        self.duration_ms = duration_ms
        self.base_scale = node.scale
        self.end_scale = node.scale * end_scale
        self.base_opacity = node.opacity
        self.end_opacity = end_opacity

    def progress(self, now_ms: float) -> float:
        return max(0.0, min(1.0, (now_ms - self.start_ms) / self.duration_ms))

    def update(self, now_ms: float) -> bool:
        t = self.progress(now_ms)
        scale = self.base_scale + (self.end_scale - self.base_scale) * t
        self.stage.set_transform(self.node, self.node.x, self.node.y, scale)
        self.stage.set_opacity(self.node, self.base_opacity + (self.end_opacity - self.base_opacity) * t)
        return t >= 1.0
