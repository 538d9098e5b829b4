"""
conftest.py
-----------
Shared pytest configuration and fixtures for Strawberry Sprint tests.

Contains:
- Headless SDL setup (dummy video/audio drivers) before pygame is imported
- Scene fixtures (config, deterministic random source, mounted scene)
- Pytest markers
"""

import os
import sys

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
import pygame

# Make the project root importable without an editable install
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from strawberry_sprint.core.debug.debug_logger import LoggerConfig
from strawberry_sprint.core.runtime.scene_config import SceneConfig
from strawberry_sprint.scenes.strawberry_scene import StrawberryScene


# ===========================================================
# Test Utilities
# ===========================================================

class StubRandom:
    """random.Random stand-in that replays a fixed sequence of values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


# u = 0.9 puts every berry at (836, 442.8), far from both the
# kitty's start (200, 200) and the rest point (500, 348.44)
FAR_CORNER = 0.9


def point_at(scene, x, y):
    """Put the pointer on the stage at (x, y) in stage units."""
    scene.pointer.on_enter()
    scene.pointer.on_move(x, y)


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    """Initialize pygame once on the dummy drivers."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep test output clean; individual tests patch DebugLogger to assert on it."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


@pytest.fixture
def config():
    return SceneConfig()


@pytest.fixture
def far_rng():
    return StubRandom([FAR_CORNER])


@pytest.fixture
def scene(config, far_rng):
    """Constructed but not yet mounted."""
    return StrawberryScene(config, rng=far_rng)


@pytest.fixture
def mounted_scene(scene):
    scene.mount()
    yield scene
    if scene.mounted:
        scene.unmount()


# ===========================================================
# Pytest Configuration
# ===========================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "regression: marks tests as regression tests")


def pytest_collection_modifyitems(config, items):
    """Tests are unit tests unless marked integration."""
    for item in items:
        if item.get_closest_marker("integration") is None:
            item.add_marker(pytest.mark.unit)
