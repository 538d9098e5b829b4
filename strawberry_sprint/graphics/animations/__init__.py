"""
Animation exports.

Time-bounded tweens over stage nodes and the manager that runs them.
"""

from strawberry_sprint.graphics.animations.tweens import Tween, BobTween, PopTween
from strawberry_sprint.graphics.animations.animation_manager import AnimationManager

__all__ = [
    'Tween',
    'BobTween',
    'PopTween',
    'AnimationManager',
]
