"""
input_manager.py
----------------
Pointer tracking for the stage and keyboard shortcuts for the host.

Provides:
- PointerTracker: raw pointer events -> logical (x, y, inside) reading
- InputManager: key bindings -> command names ("spawn", "toggle_pause", "reset")
"""

import pygame

from strawberry_sprint.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "spawn": [pygame.K_s],
    "toggle_pause": [pygame.K_p],
    "reset": [pygame.K_r],
    "quit": [pygame.K_ESCAPE],
}

LEFT_BUTTON = 1


class PointerTracker:
    """
    Single writer of a PointerState.

    Each reading overwrites the previous one; the tick always sees the latest.
    """

    def __init__(self, stage, pointer):
        """
        Args:
            stage: Stage providing the device -> logical transform.
            pointer: PointerState to write.
        """
        self.stage = stage
        self.pointer = pointer

    # ===========================================================
    # Raw Pointer Events
    # ===========================================================
    def on_enter(self):
        self.pointer.inside = True

    def on_leave(self):
        self.pointer.inside = False

    def on_move(self, device_x: float, device_y: float):
        """Convert a device position and record it."""
        x, y = self.stage.to_logical(device_x, device_y)
        self.pointer.x = x
        self.pointer.y = y
        # Letterbox bars are inside the window but off the stage
        self.pointer.inside = self.stage.contains(x, y)

    # ===========================================================
    # pygame Dispatch
    # ===========================================================
    def handle_event(self, event) -> str | None:
        """
        Feed a pygame event into the tracker.

        Returns:
            "spawn" for a left click on the stage, else None.
        """
        if event.type == pygame.WINDOWENTER:
            self.on_enter()
            # Re-read the position; the pointer may have entered over a letterbox bar
            self.on_move(*pygame.mouse.get_pos())
        elif event.type == pygame.WINDOWLEAVE:
            self.on_leave()
        elif event.type == pygame.MOUSEMOTION:
            self.on_move(*event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
            self.on_move(*event.pos)
            if self.pointer.inside:
                DebugLogger.action("Stage clicked", category="input")
                return "spawn"
        return None


class InputManager:
    """Maps keyboard events to host commands."""

    def __init__(self, key_bindings=None):
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS

        self._key_to_command = {}
        for command, keys in self.key_bindings.items():
            for key in keys:
                if key in self._key_to_command:
                    DebugLogger.warn(
                        f"Key {key} bound to both '{self._key_to_command[key]}' and '{command}'",
                        category="input"
                    )
                self._key_to_command[key] = command

        DebugLogger.init_entry("InputManager")

    def command_for(self, event) -> str | None:
        """Command bound to a KEYDOWN event, if any."""
        if event.type != pygame.KEYDOWN:
            return None
        return self._key_to_command.get(event.key)
