"""
Debug tooling exports.
"""

from strawberry_sprint.core.debug.debug_logger import DebugLogger, LoggerConfig

__all__ = [
    'DebugLogger',
    'LoggerConfig',
]
