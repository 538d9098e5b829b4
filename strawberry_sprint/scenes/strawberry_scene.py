"""
strawberry_scene.py
-------------------
The interactive scene: a kitty chases the pointer and eats berries.

Responsibilities
----------------
- Own the Stage, SceneState and every per-scene system.
- Run one logical tick per call to advance().
- Expose the command surface used by the host (spawn, pause, reset, query).

Before mount() every command is a no-op; after unmount() commands (and a
second mount()) raise StageNotMountedError.
"""

import random
from enum import Enum
from functools import partial

from strawberry_sprint.core.debug.debug_logger import DebugLogger
from strawberry_sprint.core.errors import StageNotMountedError
from strawberry_sprint.core.runtime.scene_config import SceneConfig
from strawberry_sprint.core.runtime.scene_state import SceneState
from strawberry_sprint.core.services.event_manager import (
    EventManager, PauseToggledEvent, SceneResetEvent,
)
from strawberry_sprint.core.services.input_manager import PointerTracker
from strawberry_sprint.graphics.animations.animation_manager import AnimationManager
from strawberry_sprint.graphics.animations.tweens import PopTween
from strawberry_sprint.graphics.stage import Stage, NodeKind, StageLayer
from strawberry_sprint.systems.collision.collision_manager import CollisionManager
from strawberry_sprint.systems.entity_management.spawn_manager import SpawnManager
from strawberry_sprint.systems.movement.steering import SteeringController
from strawberry_sprint.ui.hud import Hud


class StageStatus(Enum):
    """Where the scene is in its mount lifecycle."""
    PENDING = "pending"
    MOUNTED = "mounted"
    UNMOUNTED = "unmounted"


class StrawberryScene:
    """
    Controller for one stage.

    Usage:
        scene = StrawberryScene(rng=random.Random(7))
        scene.mount()
        scene.advance(16.7)        # one tick per display frame
        scene.spawn_berry()
        paused = scene.toggle_pause()
    """

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, config: SceneConfig = None, rng=None):
        """
        Args:
            config: Scene tuning. Defaults to SceneConfig().
            rng: Random source with random(); injected for deterministic tests.
        """
        self.config = config or SceneConfig()
        self.rng = rng or random.Random()
        self.status = StageStatus.PENDING

        cfg = self.config
        self.stage = Stage(cfg.width, cfg.height)
        self.events = EventManager()
        self.animations = AnimationManager()
        self.state = SceneState((cfg.kitty_start_x, cfg.kitty_start_y))

        self.pointer = PointerTracker(self.stage, self.state.pointer)
        self.steering = SteeringController(cfg)
        self.spawner = SpawnManager(cfg, self.stage, self.state, self.animations, self.rng, self.events)
        self.collisions = CollisionManager(cfg, self.state, on_eaten=self._pop_berry, events=self.events)
        self.hud = Hud(self.stage, self.events)

        self.background = None

    @property
    def mounted(self) -> bool:
        return self.status is StageStatus.MOUNTED

    # ===========================================================
    # Mounting
    # ===========================================================
    def mount(self):
        """
        Build the node tree, seed the starter berries and open the stage.

        Raises:
            StageNotMountedError: If the scene was already torn down.
        """
        if self.mounted:
            DebugLogger.warn("Scene already mounted", category="scene")
            return
        if self.status is StageStatus.UNMOUNTED:
            raise StageNotMountedError("Scene was unmounted; build a new StrawberryScene instead")

        DebugLogger.section("Mounting Strawberry Scene")
        stage = self.stage
        stage.mount_stage()

        self.background = stage.create_node(
            NodeKind.IMAGE, x=0, y=0, width=stage.width, height=stage.height,
            sprite="background", anchor="topleft"
        )
        stage.mount(self.background, StageLayer.BACKGROUND)

        self.hud.build()

        kitty = self.state.kitty
        kitty.node = stage.create_node(NodeKind.IMAGE, x=kitty.pos.x, y=kitty.pos.y, sprite="kitty")
        stage.mount(kitty.node, StageLayer.ENTITIES)

        self.status = StageStatus.MOUNTED
        self.spawner.seed()

        DebugLogger.init_entry("StrawberryScene")
        DebugLogger.init_sub(f"Seeded {len(self.state.berries)} berries")

    def unmount(self):
        """Tear the stage down. Later commands raise StageNotMountedError."""
        if not self.mounted:
            return
        self.stage.unmount_stage()
        self.events.clear_all()
        self.status = StageStatus.UNMOUNTED
        DebugLogger.system("Scene unmounted", category="scene")

    def _require_stage(self, operation: str) -> bool:
        """
        Gate a command on the mount lifecycle.

        Returns:
            bool: False before the first mount (command is ignored).

        Raises:
            StageNotMountedError: After unmount().
        """
        if self.status is StageStatus.MOUNTED:
            return True
        if self.status is StageStatus.PENDING:
            DebugLogger.trace(f"{operation}() ignored: stage not mounted yet", category="scene")
            return False
        raise StageNotMountedError(f"{operation}() called on an unmounted stage")

    # ===========================================================
    # Command Surface
    # ===========================================================
    def spawn_berry(self):
        """Spawn one berry now, ignoring cooldown and the live cap."""
        if not self._require_stage("spawn_berry"):
            return None
        return self.spawner.spawn()

    def toggle_pause(self) -> bool:
        """Flip the paused flag and return the new value."""
        if not self._require_stage("toggle_pause"):
            return False

        self.state.paused = not self.state.paused
        DebugLogger.state(f"Scene {'paused' if self.state.paused else 'resumed'}", category="scene")
        self.events.dispatch(PauseToggledEvent(self.state.paused))
        return self.state.paused

    def reset_art(self):
        """
        Clear every berry, zero the score, rest the kitty and reseed.
        Leaves the paused flag untouched.
        """
        if not self._require_stage("reset_art"):
            return

        cfg = self.config
        removed = self.state.reset(cfg.rest_point)

        # In-flight pops find their node gone and do nothing
        for berry in removed:
            self.stage.unmount(berry.node)

        self._sync_kitty_node(self.state.clock_ms, bob=False)
        self.spawner.seed()

        DebugLogger.state(f"Scene reset ({len(removed)} berries cleared)", category="scene")
        self.events.dispatch(SceneResetEvent(self.state.paused))

    def is_paused(self) -> bool:
        if not self._require_stage("is_paused"):
            return False
        return self.state.paused

    # ===========================================================
    # Input
    # ===========================================================
    def handle_event(self, event) -> bool:
        """
        Route a pygame pointer event to the tracker.

        Returns:
            bool: True if the event produced a command (a click spawn).
        """
        if not self.mounted:
            return False
        if self.pointer.handle_event(event) == "spawn":
            self.spawn_berry()
            return True
        return False

    # ===========================================================
    # Tick
    # ===========================================================
    def advance(self, dt_ms: float):
        """
        Run one logical tick.

        The clock and cosmetic animations always advance; steering,
        collision, compaction and spawning only run while unpaused.

        Raises:
            StageNotMountedError: If the stage is not mounted.
        """
        if not self.mounted:
            raise StageNotMountedError("advance() called on an unmounted stage")

        state = self.state
        state.clock_ms += dt_ms
        now = state.clock_ms

        self.animations.update(now)

        if state.paused:
            return

        self.steering.update(state.kitty, state.pointer)
        self.collisions.update()
        state.store.compact(self.config.compact_threshold)
        self._sync_kitty_node(now)
        self.spawner.update(now)

    # ===========================================================
    # Internal Helpers
    # ===========================================================
    def _sync_kitty_node(self, now_ms: float, bob: bool = True):
        """Reflect the kitty's physics position (plus cosmetic bob) in its node."""
        kitty = self.state.kitty
        if kitty.node is None:
            return
        offset = self.steering.bob_offset(now_ms) if bob else 0.0
        self.stage.set_transform(kitty.node, kitty.pos.x, kitty.pos.y + offset)

    def _pop_berry(self, berry):
        """Removal routine: play the pop, then detach. Does not block the tick."""
        cfg = self.config
        self.animations.play(
            berry.berry_id,
            PopTween(self.stage, berry.node, cfg.pop_ms, cfg.pop_scale, cfg.pop_opacity,
                     on_complete=partial(self._detach_berry, berry))
        )

    def _detach_berry(self, berry):
        """Detach-if-present; safe after reset or teardown already removed the node."""
        if self.stage.unmount(berry.node):
            berry.mark_removed()
            DebugLogger.trace(f"Berry {berry.berry_id} detached", category="entity_cleanup")
