"""
Scene module exports.
"""

from strawberry_sprint.scenes.strawberry_scene import StrawberryScene, StageStatus

__all__ = [
    'StrawberryScene',
    'StageStatus',
]
