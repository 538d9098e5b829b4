"""
hud.py
------
Score box and control label drawn on the HUD layer.

The score text follows scene events. The pause label is driven by the host,
which mirrors toggle_pause()'s return value into it.
"""

from strawberry_sprint.core.debug.debug_logger import DebugLogger
from strawberry_sprint.core.services.event_manager import BerryEatenEvent, SceneResetEvent
from strawberry_sprint.graphics.stage import NodeKind, StageLayer


HUD_TITLE = "Strawberry Sprint"
SCORE_FORMAT = "Score: {}"
PAUSE_LABELS = {False: "Pause (P)", True: "Resume (P)"}


class Hud:
    """Builds and updates the HUD nodes."""

    def __init__(self, stage, events=None):
        self.stage = stage
        self.events = events

        self.root = None
        self.score_text = None
        self.pause_text = None

    # ===========================================================
    # Construction
    # ===========================================================
    def build(self):
        """Create the HUD nodes and mount them on the HUD layer."""
        stage = self.stage

        self.root = stage.create_node(NodeKind.GROUP, x=18, y=18)
        self.root.add_child(stage.create_node(
            NodeKind.RECT, width=260, height=76, radius=16,
            fill=(255, 255, 255, 242), stroke=(17, 17, 17, 31)
        ))
        self.root.add_child(stage.create_node(
            NodeKind.TEXT, x=14, y=28, text=HUD_TITLE, size=14, bold=True, fill=(17, 17, 17)
        ))
        self.score_text = self.root.add_child(stage.create_node(
            NodeKind.TEXT, x=14, y=54, text=SCORE_FORMAT.format(0), size=13, fill=(17, 17, 17, 191)
        ))
        stage.mount(self.root, StageLayer.HUD)

        self.pause_text = stage.create_node(
            NodeKind.TEXT, x=stage.width - 18, y=stage.height - 18,
            text=PAUSE_LABELS[False], size=13, anchor="end", fill=(17, 17, 17, 191)
        )
        stage.mount(self.pause_text, StageLayer.HUD)

        if self.events:
            self.events.subscribe(BerryEatenEvent, self._on_berry_eaten)
            self.events.subscribe(SceneResetEvent, self._on_scene_reset)

        DebugLogger.init_sub("HUD mounted")
        return self.root

    # ===========================================================
    # Updates
    # ===========================================================
    def show_score(self, score: int):
        self.stage.set_text(self.score_text, SCORE_FORMAT.format(score))

    def show_paused(self, paused: bool):
        """Label the pause control with the action it will perform next."""
        self.stage.set_text(self.pause_text, PAUSE_LABELS[bool(paused)])

    def _on_berry_eaten(self, event: BerryEatenEvent):
        self.show_score(event.score)

    def _on_scene_reset(self, event: SceneResetEvent):
        self.show_score(0)
        DebugLogger.trace("HUD score cleared", category="ui")
