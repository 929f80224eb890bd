"""
arenajson configuration and diagnostics utilities.
"""

from .config import (
    DEFAULT_ARENA_CAPACITY,
    ArenaSettings,
    LogLevel,
    LogSettings,
    ParseConfig,
    ParseLimits,
    SizeLimits,
    StructureLimits,
)
from .diagnostics import Diagnostics

__all__ = [
    'DEFAULT_ARENA_CAPACITY', 'ArenaSettings', 'LogLevel', 'LogSettings',
    'ParseConfig', 'ParseLimits', 'SizeLimits', 'StructureLimits',
    'Diagnostics',
]
