"""
errors.py
---------
Exception types raised by the scene.
"""


class StrawberryError(Exception):
    """Base class for all scene errors."""


class StageNotMountedError(StrawberryError):
    """Operation requires a mounted stage."""


class ConfigError(StrawberryError, ValueError):
    """Malformed configuration or stage geometry."""
