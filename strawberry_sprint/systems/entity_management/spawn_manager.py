"""
spawn_manager.py
----------------
Creates berries: on demand, on a cooldown timer, and when seeding a scene.

Responsibilities
----------------
- Place berries uniformly at random inside the stage insets.
- Build and mount each berry's node and start its bob animation.
- Register berries with the EntityStore.
- Gate automatic spawns on cooldown and the live-berry cap.
"""

from strawberry_sprint.core.debug.debug_logger import DebugLogger
from strawberry_sprint.core.services.event_manager import BerrySpawnedEvent
from strawberry_sprint.entities.berry import Berry
from strawberry_sprint.graphics.animations.tweens import BobTween
from strawberry_sprint.graphics.stage import NodeKind, StageLayer


class SpawnManager:
    """
    Berry spawner for one scene.

    Explicit spawns are never throttled; only the automatic timer respects
    the live cap.
    """

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, config, stage, state, animations, rng, events=None):
        """
        Args:
            config: SceneConfig with placement and spawn tuning.
            stage: Mounted Stage that receives berry nodes.
            state: SceneState whose store receives berries.
            animations: AnimationManager running bob tweens.
            rng: Random source with a random() -> [0, 1) method.
            events (optional): EventManager notified of each spawn.
        """
        self.config = config
        self.stage = stage
        self.state = state
        self.animations = animations
        self.rng = rng
        self.events = events

        self._spawn_stats = {
            "total_spawned": 0,
            "auto_spawns": 0,
            "capped": 0,
        }

    # ===========================================================
    # Placement
    # ===========================================================
    def random_position(self) -> tuple:
        """Uniform point inside the berry insets."""
        cfg = self.config
        span_x = cfg.width - cfg.berry_inset_x * 2
        span_y = cfg.height - cfg.berry_inset_top - cfg.berry_inset_bottom
        x = cfg.berry_inset_x + self.rng.random() * span_x
        y = cfg.berry_inset_top + self.rng.random() * span_y
        return x, y

    # ===========================================================
    # Spawning
    # ===========================================================
    def spawn(self, x: float = None, y: float = None, automatic: bool = False) -> Berry:
        """
        Create one berry (random position unless x and y are given).

        Raises:
            StageNotMountedError: If the stage has been torn down.
        """
        if x is None or y is None:
            x, y = self.random_position()

        cfg = self.config
        node = self.stage.create_node(NodeKind.IMAGE, x=x, y=y, scale=cfg.berry_scale, sprite="berry")
        self.stage.mount(node, StageLayer.ENTITIES)

        berry = Berry(x, y, cfg.berry_radius, node=node)
        self.state.store.add(berry)

        period = cfg.berry_bob_min_ms + self.rng.random() * cfg.berry_bob_jitter_ms
        self.animations.play(
            berry.berry_id,
            BobTween(self.stage, node, x, y, cfg.berry_bob_height, period)
        )

        self._spawn_stats["total_spawned"] += 1
        if automatic:
            self._spawn_stats["auto_spawns"] += 1

        DebugLogger.system(f"Spawned berry {berry.berry_id} at ({x:.0f}, {y:.0f})", category="entity_spawn")

        if self.events:
            self.events.dispatch(BerrySpawnedEvent(berry.berry_id, (x, y), automatic))
        return berry

    def seed(self, count: int = None) -> list:
        """Spawn the starter berries."""
        count = self.config.initial_berries if count is None else count
        return [self.spawn() for _ in range(count)]

    def update(self, now_ms: float):
        """
        Automatic spawn check, once per unpaused tick.

        The cooldown restarts whenever it elapses, even if the cap blocks
        this spawn.
        """
        if now_ms - self.state.last_spawn_ms <= self.config.spawn_cooldown_ms:
            return None

        self.state.last_spawn_ms = now_ms

        if self.state.store.live_count >= self.config.live_cap:
            self._spawn_stats["capped"] += 1
            DebugLogger.trace("Auto-spawn skipped: live cap reached", category="entity_spawn")
            return None

        return self.spawn(automatic=True)

    # ===========================================================
    # Statistics
    # ===========================================================
    def get_stats(self) -> dict:
        return dict(self._spawn_stats)
