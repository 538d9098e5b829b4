"""Per-tick scene systems: steering, collision, spawning and cleanup."""
