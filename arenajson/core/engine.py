"""
Top-level parsing and printing API for arenajson.

``parse`` and ``print_json`` return result objects carrying error codes.
``loads`` and ``dumps`` are the exception-raising conveniences on top.
"""

from typing import Any, Optional, Union

from ..memory.arena import Arena
from ..security.exceptions import ErrorCode, ErrorReporter, PrintError, describe
from ..utils.config import ParseConfig
from .parser import Parser, ParseResult, Status
from .printer import Printer, PrintResult
from .strings import Str
from .value import JsonValue, from_python

Text = Union[str, bytes, bytearray, Str]


def _as_cursor(text: Text) -> Str:
    if isinstance(text, Str):
        return text
    return Str.of(text)


def parse(
    text: Text,
    arena: Optional[Arena] = None,
    config: Optional[ParseConfig] = None,
) -> ParseResult:
    """
    Parse one JSON value from the start of ``text``.

    When ``text`` is a ``Str`` it is used as the cursor and is left just past
    the parsed value. Anything after the value is not examined.
    """
    return Parser(arena, config).parse_value(_as_cursor(text))


def loads(
    text: Text,
    *,
    arena: Optional[Arena] = None,
    config: Optional[ParseConfig] = None,
) -> JsonValue:
    """
    Parse a complete JSON document.

    Only spaces, tabs and newlines may follow the value. Without an explicit
    ``arena`` the result is backed by a fresh arena private to this call.

    Raises:
        ParseError: carrying the failing ``ErrorCode``, offset and context.
    """
    config = config or ParseConfig()
    parser = Parser(arena, config)
    cursor = _as_cursor(text)
    origin = cursor.start
    result = parser.parse_value(cursor)

    if result.ok and not cursor.trim_left().is_empty():
        result = ParseResult(
            Status.FAILED,
            error=ErrorCode.TRAILING_CHARACTERS,
            offset=cursor.trim_left().start,
        )
        parser.diagnostics.report_code(result.error, result.offset)

    if not result.ok:
        source = bytes(cursor.data[origin:cursor.end])
        offset = max(result.offset - origin, 0)
        reporter = ErrorReporter(source.decode("utf-8", errors="replace"))
        char_offset = len(source[:offset].decode("utf-8", errors="replace"))
        error = reporter.create_parse_error(result.error, char_offset)
        error.offset = offset
        raise error

    assert result.value is not None
    parser.diagnostics.info(
        f"parsed {result.value.variant.value} from "
        f"{cursor.start - origin} bytes"
    )
    return result.value


def print_json(
    value: JsonValue,
    arena: Optional[Arena] = None,
    config: Optional[ParseConfig] = None,
) -> PrintResult:
    """Render ``value`` as compact JSON into the arena."""
    return Printer(arena, config).print_value(value)


def dumps(
    value: Any,
    *,
    arena: Optional[Arena] = None,
    config: Optional[ParseConfig] = None,
) -> str:
    """
    Render a JSON value (or plain Python data) as a compact JSON string.

    Raises:
        PrintError: when the value cannot be rendered.
        TypeError: when plain Python data has no JSON representation.
    """
    result = print_json(from_python(value), arena, config)
    if not result.ok:
        raise PrintError(describe(result.error).capitalize(), code=result.error)
    assert result.text is not None
    return result.text.decode(errors="replace")

