"""
display_manager.py
------------------
Host window for a fixed-size stage.

Responsibilities:
- Open the window (preset size, resizable) and toggle fullscreen
- Letterbox the stage into whatever window size the user picks
- Publish the window -> stage transform so pointer input lands in stage units
- Present the stage surface each frame
"""

import pygame

from strawberry_sprint.core.debug.debug_logger import DebugLogger
from strawberry_sprint.core.runtime.game_settings import Display


def fit_viewport(window_size, stage_size):
    """
    Largest uniform scale that fits the stage in the window, centred.

    Returns:
        tuple: (scale, offset_x, offset_y, (scaled_w, scaled_h))
    """
    window_w, window_h = window_size
    stage_w, stage_h = stage_size

    scale = min(window_w / stage_w, window_h / stage_h)
    scaled = (int(stage_w * scale), int(stage_h * scale))
    return scale, (window_w - scaled[0]) // 2, (window_h - scaled[1]) // 2, scaled


class DisplayManager:
    """
    Owns the pygame window.

    The stage is drawn at its logical size onto stage_surface, then scaled
    into the window with letterbox bars.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, stage, window_size=Display.DEFAULT_WINDOW_SIZE):
        """
        Args:
            stage: Stage whose logical size drives the drawing surface.
            window_size: Window preset name ("small", "medium", "large")
        """
        self.stage = stage
        self.stage_size = (int(stage.width), int(stage.height))
        self.stage_surface = pygame.Surface(self.stage_size)

        self.window_preset = window_size
        self.window = None
        self.is_fullscreen = False

        self.viewport = fit_viewport(self.stage_size, self.stage_size)
        self._open_window()

        DebugLogger.init_entry("DisplayManager")
        DebugLogger.init_sub(f"Stage {self.stage_size[0]}x{self.stage_size[1]} in {self.window.get_size()} window")

    # ===========================================================
    # Window Management
    # ===========================================================

    def toggle_fullscreen(self):
        self._open_window(fullscreen=not self.is_fullscreen)
        DebugLogger.state(f"Fullscreen {'on' if self.is_fullscreen else 'off'}", category="display")

    def handle_resize(self):
        """Refit after the user resized the window."""
        self._refit()

    def _open_window(self, fullscreen: bool = False):
        if fullscreen:
            self.window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            size = Display.WINDOW_SIZES.get(self.window_preset, self.stage_size)
            self.window = pygame.display.set_mode(size, pygame.RESIZABLE)
        self.is_fullscreen = fullscreen
        self._refit()

    def _refit(self):
        self.viewport = fit_viewport(self.window.get_size(), self.stage_size)
        scale, offset_x, offset_y, _ = self.viewport
        self.stage.set_viewport(scale, offset_x, offset_y)

        DebugLogger.trace(f"Viewport scale={scale:.3f} offset=({offset_x},{offset_y})", category="display")

    # ===========================================================
    # Presentation
    # ===========================================================

    def get_game_surface(self) -> pygame.Surface:
        """Surface the renderer draws the stage onto (stage units = pixels)."""
        return self.stage_surface

    def render(self):
        """Scale the stage surface into the window and flip."""
        _, offset_x, offset_y, scaled_size = self.viewport
        self.window.fill((0, 0, 0))
        if scaled_size == self.stage_size:
            self.window.blit(self.stage_surface, (offset_x, offset_y))
        else:
            self.window.blit(pygame.transform.smoothscale(self.stage_surface, scaled_size), (offset_x, offset_y))
        pygame.display.flip()
