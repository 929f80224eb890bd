"""
arenajson - minimal JSON value model with an arena-backed parser and printer.

Parsed values live in an explicit bump arena that the caller resets between
units of work. Parsing and printing report failures as error codes; ``loads``
and ``dumps`` wrap them for callers who prefer exceptions.

Quick Start:
    import arenajson

    value = arenajson.loads('[1, "a", true, null, {"k": 2}]')
    arenajson.dumps(value)  # '[1,"a",true,null,{"k":2}]'

    # Explicit arena and result codes
    from arenajson import Arena, Parser, Str

    arena = Arena(capacity=64 * 1024)
    cursor = Str.of('{"a": 1, "a": 2}')
    result = Parser(arena).parse_value(cursor)
    if not result.ok:
        print(result.error)
    arena.reset()
"""

from .core.engine import dumps, loads, parse, print_json
from .core.parser import Parser, ParseResult, Status
from .core.printer import Printer, PrintResult
from .core.strings import Str, StringBuilder
from .core.value import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonPair,
    JsonString,
    JsonValue,
    Variant,
    from_python,
    to_python,
)
from .memory import Arena, GrowableBuffer, View, copy_to_arena, drain_to_arena, view_of
from .security.exceptions import (
    ArenaJsonError,
    ArenaOverflowError,
    ErrorCode,
    NestingDepthError,
    OutOfMemoryError,
    ParseError,
    PrintError,
    SecurityError,
)
from .utils.config import LogLevel, LogSettings, ParseConfig, ParseLimits

__version__ = "0.1.0"
__author__ = "arenajson contributors"

__all__ = [
    # Top-level API
    "parse", "loads", "print_json", "dumps",
    # Parser and printer
    "Parser", "ParseResult", "Status", "Printer", "PrintResult",
    # Value model
    "JsonArray", "JsonBool", "JsonNull", "JsonNumber", "JsonObject",
    "JsonPair", "JsonString", "JsonValue", "Variant", "from_python", "to_python",
    # Text and memory
    "Str", "StringBuilder", "Arena", "GrowableBuffer", "View",
    "copy_to_arena", "drain_to_arena", "view_of",
    # Errors
    "ErrorCode", "ArenaJsonError", "ArenaOverflowError", "OutOfMemoryError",
    "SecurityError", "NestingDepthError", "ParseError", "PrintError",
    # Configuration
    "ParseConfig", "ParseLimits", "LogLevel", "LogSettings",
]
