"""
arenajson memory primitives: bump arena, growable buffer and views.
"""

from .arena import Arena
from .buffer import GrowableBuffer
from .view import View, copy_to_arena, drain_to_arena, view_of

__all__ = [
    'Arena', 'GrowableBuffer', 'View',
    'copy_to_arena', 'drain_to_arena', 'view_of',
]
