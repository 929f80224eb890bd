"""
arenajson error taxonomy and resource limits.
"""

from .exceptions import (
    ArenaJsonError,
    ArenaOverflowError,
    ErrorCode,
    ErrorReporter,
    NestingDepthError,
    OutOfMemoryError,
    ParseError,
    PrintError,
    SecurityError,
    describe,
)
from .limits import LimitValidator

__all__ = [
    'ArenaJsonError', 'ArenaOverflowError', 'ErrorCode', 'ErrorReporter',
    'NestingDepthError', 'OutOfMemoryError', 'ParseError', 'PrintError',
    'SecurityError', 'describe', 'LimitValidator',
]
