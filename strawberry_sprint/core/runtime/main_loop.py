"""
main_loop.py
------------
pygame host for one StrawberryScene.

Responsibilities:
- Initialize pygame, the window and the renderer
- Pump events into the scene (pointer) and the command surface (keys)
- Pace frames with pygame.time.Clock and drive the FrameScheduler
- Mirror the pause state into the HUD label
"""

import random

import pygame

from strawberry_sprint.core.debug.debug_logger import DebugLogger
from strawberry_sprint.core.runtime.frame_scheduler import FrameScheduler
from strawberry_sprint.core.runtime.game_settings import Display
from strawberry_sprint.core.runtime.scene_config import SceneConfig
from strawberry_sprint.core.services.display_manager import DisplayManager
from strawberry_sprint.core.services.input_manager import InputManager
from strawberry_sprint.graphics.draw_manager import DrawManager
from strawberry_sprint.scenes.strawberry_scene import StrawberryScene


class MainLoop:
    """Runs the scene until the window closes or Esc is pressed."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config: SceneConfig = None, seed=None, window_size=Display.DEFAULT_WINDOW_SIZE):
        DebugLogger.section("Starting Strawberry Sprint")

        self.config = config or SceneConfig()
        self.rng = random.Random(seed)

        self._init_pygame()
        self._init_scene(window_size)

    def _init_pygame(self):
        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(Display.CAPTION)

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"pygame {pygame.version.ver}, caption '{Display.CAPTION}'")

    def _init_scene(self, window_size):
        """Create the scene, then the services that need its stage."""
        self.scene = StrawberryScene(self.config, rng=self.rng)

        self.display = DisplayManager(self.scene.stage, window_size)
        self.input_manager = InputManager()
        self.draw_manager = DrawManager()
        self.draw_manager.load_scene_sprites(self.config, (int(self.config.width), int(self.config.height)))

        self.scene.mount()
        self.scheduler = FrameScheduler(self.scene)

        self.clock = pygame.time.Clock()
        self.running = True

        DebugLogger.init_entry("FrameScheduler")
        DebugLogger.init_sub(f"Target {Display.FPS} FPS, frames clamped to {self.scheduler.max_frame_ms:.0f}ms")

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Variable-step loop: one scene tick per rendered frame."""
        DebugLogger.section("Scene Running")
        self.scheduler.start()

        while self.running:
            frame_ms = self.clock.tick(Display.FPS)

            self._handle_events()
            if not self.running:
                break

            if not self.scheduler.step(frame_ms):
                self.running = False
                break

            self._draw()

        self.scene.unmount()
        self.scheduler.stop()
        pygame.quit()
        DebugLogger.system(f"Shut down after {self.scheduler.frames} frames")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        """Route quit, window, key and pointer events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Window closed")
                break

            if event.type == pygame.VIDEORESIZE:
                self.display.handle_resize()
                continue

            if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                self.display.toggle_fullscreen()
                continue

            command = self.input_manager.command_for(event)
            if command:
                self._run_command(command)
                continue

            self.scene.handle_event(event)

    def _run_command(self, command: str):
        """Keyboard shortcuts mirror the page buttons."""
        scene = self.scene

        if command == "quit":
            self.running = False
            DebugLogger.action("Quit key pressed")
        elif command == "spawn":
            scene.spawn_berry()
        elif command == "toggle_pause":
            scene.hud.show_paused(scene.toggle_pause())
        elif command == "reset":
            scene.reset_art()
            scene.hud.show_paused(scene.is_paused())

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        self.draw_manager.render(self.scene.stage, self.display.get_game_surface())
        self.display.render()
