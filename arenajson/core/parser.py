"""
Recursive-descent JSON parser over a ``Str`` cursor.

Every entry point takes a cursor, advances it past what it consumed, and
returns a ``ParseResult``. Variant parsers distinguish two kinds of failure:

* ``NO_MATCH``: the input does not start with this variant at all. Nothing
  was committed, and the value dispatcher moves on to the next alternative.
* ``FAILED``: the variant started (e.g. an opening bracket was consumed) and
  then broke. The error is final and propagates to the caller unchanged.

Allocation failures and limit violations raised by the memory layer and the
``LimitValidator`` are converted to ``FAILED`` results at the public entry
points; nothing escapes as an exception.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

from ..memory.arena import Arena
from ..memory.buffer import GrowableBuffer
from ..memory.view import drain_to_arena
from ..security.exceptions import ArenaJsonError, ErrorCode
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from ..utils.diagnostics import Diagnostics
from .constants import (
    BACKSLASH,
    CLOSE_BRACE,
    CLOSE_BRACKET,
    COLON,
    COMMA,
    FALSE_LITERAL,
    NULL_LITERAL,
    OPEN_BRACE,
    OPEN_BRACKET,
    PAIR_SLOT_SIZE,
    QUOTE,
    TRUE_LITERAL,
    VALUE_SLOT_SIZE,
)
from .number_scanner import scan_number
from .strings import Str, StringBuilder
from .value import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonPair,
    JsonString,
    JsonValue,
)


class Status(Enum):
    """Outcome of one parse attempt."""

    MATCHED = "matched"
    NO_MATCH = "no_match"
    FAILED = "failed"


@dataclass(frozen=True)
class ParseResult:
    """Parsed value, or the error code and byte offset of the failure."""

    status: Status
    value: Optional[JsonValue] = None
    error: ErrorCode = ErrorCode.OK
    offset: int = 0

    @property
    def ok(self) -> bool:
        return self.status is Status.MATCHED

    @classmethod
    def matched(cls, value: JsonValue) -> "ParseResult":
        return cls(Status.MATCHED, value)

    @classmethod
    def no_match(cls, error: ErrorCode, offset: int) -> "ParseResult":
        return cls(Status.NO_MATCH, error=error, offset=offset)

    @classmethod
    def failed(cls, error: ErrorCode, offset: int) -> "ParseResult":
        return cls(Status.FAILED, error=error, offset=offset)

    def committed(self) -> "ParseResult":
        """The same error, but final even if it was only a non-match."""
        if self.status is Status.NO_MATCH:
            return ParseResult.failed(self.error, self.offset)
        return self


Attempt = Callable[[Str], ParseResult]


def skip_whitespace(cursor: Str) -> None:
    """Advance ``cursor`` past leading spaces, tabs and newlines."""
    cursor.start = cursor.trim_left().start


def _is_escaped(data: bytes, index: int, floor: int) -> bool:
    """Whether ``data[index]`` follows an odd run of backslashes."""
    backslashes = 0
    index -= 1
    while index >= floor and data[index] == BACKSLASH:
        backslashes += 1
        index -= 1
    return backslashes % 2 == 1


class Parser:
    """Parses JSON text into arena-backed JSON values."""

    def __init__(
        self,
        arena: Optional[Arena] = None,
        config: Optional[ParseConfig] = None,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self.config = config or ParseConfig()
        self.diagnostics = diagnostics or Diagnostics(self.config.log, name=__name__)
        self.arena = arena if arena is not None else Arena.from_config(
            self.config, self.diagnostics
        )
        self.validator = LimitValidator(self.config.limits)
        self._alternatives: Sequence[Attempt] = (
            self._null,
            self._bool,
            self._number,
            self._string,
            self._array,
            self._object,
        )

    # Public entry points

    def parse_value(self, cursor: Str) -> ParseResult:
        """Parse any JSON value, trying each variant in a fixed order."""
        return self._run(self._value, cursor)

    def parse_null(self, cursor: Str) -> ParseResult:
        return self._run(self._null, cursor)

    def parse_bool(self, cursor: Str) -> ParseResult:
        return self._run(self._bool, cursor)

    def parse_number(self, cursor: Str) -> ParseResult:
        return self._run(self._number, cursor)

    def parse_string(self, cursor: Str) -> ParseResult:
        return self._run(self._string, cursor)

    def parse_array(self, cursor: Str) -> ParseResult:
        return self._run(self._array, cursor)

    def parse_object(self, cursor: Str) -> ParseResult:
        return self._run(self._object, cursor)

    def _run(self, attempt: Attempt, cursor: Str) -> ParseResult:
        start = cursor.start
        self.validator.reset()
        try:
            self.validator.validate_input_size(len(cursor))
            result = attempt(cursor)
        except ArenaJsonError as exc:
            result = ParseResult.failed(exc.code, cursor.start)
        except RecursionError:
            result = ParseResult.failed(ErrorCode.TOO_DEEPLY_NESTED, cursor.start)

        if result.status is Status.NO_MATCH:
            cursor.start = start
        elif result.status is Status.FAILED:
            self.diagnostics.report_code(result.error, result.offset)
        return result

    # Combinator

    def first_match(self, cursor: Str, alternatives: Sequence[Attempt]) -> ParseResult:
        """
        Try ``alternatives`` in order from the same cursor position.

        The cursor is restored before every attempt. The first attempt that
        does not report ``NO_MATCH`` decides the result; if none matches the
        result is ``INVALID_VARIANT``.
        """
        start = cursor.start
        for attempt in alternatives:
            cursor.start = start
            result = attempt(cursor)
            if result.status is not Status.NO_MATCH:
                return result
        cursor.start = start
        return ParseResult.failed(ErrorCode.INVALID_VARIANT, cursor.trim_left().start)

    # Variants

    def _value(self, cursor: Str) -> ParseResult:
        return self.first_match(cursor, self._alternatives)

    def _null(self, cursor: Str) -> ParseResult:
        skip_whitespace(cursor)
        if not cursor.starts_with(NULL_LITERAL):
            return ParseResult.no_match(ErrorCode.EXPECTED_NULL, cursor.start)
        cursor.advance(len(NULL_LITERAL))
        return ParseResult.matched(JsonNull())

    def _bool(self, cursor: Str) -> ParseResult:
        skip_whitespace(cursor)
        if cursor.starts_with(FALSE_LITERAL):
            cursor.advance(len(FALSE_LITERAL))
            return ParseResult.matched(JsonBool(False))
        if cursor.starts_with(TRUE_LITERAL):
            cursor.advance(len(TRUE_LITERAL))
            return ParseResult.matched(JsonBool(True))
        return ParseResult.no_match(ErrorCode.EXPECTED_BOOL, cursor.start)

    def _number(self, cursor: Str) -> ParseResult:
        skip_whitespace(cursor)
        scan = scan_number(
            cursor.data, cursor.start, cursor.end,
            self.validator.limits.max_number_length,
        )
        if scan is None:
            return ParseResult.no_match(ErrorCode.EXPECTED_NUMBER, cursor.start)
        self.validator.validate_number_length(scan.length, cursor.start)
        cursor.advance(scan.length)
        return ParseResult.matched(JsonNumber(scan.value))

    def _string(self, cursor: Str) -> ParseResult:
        skip_whitespace(cursor)
        if cursor.peek() != QUOTE:
            return ParseResult.no_match(ErrorCode.EXPECTED_OPEN_QUOTE, cursor.start)

        opening = cursor.start
        content_start = opening + 1
        closing = cursor.data.find(QUOTE, content_start, cursor.end)
        while closing >= 0 and _is_escaped(cursor.data, closing, content_start):
            closing = cursor.data.find(QUOTE, closing + 1, cursor.end)
        if closing < 0:
            cursor.start = cursor.end
            return ParseResult.failed(ErrorCode.EXPECTED_CLOSE_QUOTE, opening)

        self.validator.validate_string_length(closing - content_start, content_start)
        with StringBuilder(self.arena) as builder:
            builder.push_str(Str(cursor.data, content_start, closing))
            text = builder.build_to_arena()
        cursor.start = closing + 1
        return ParseResult.matched(JsonString(text))

    def _array(self, cursor: Str) -> ParseResult:
        skip_whitespace(cursor)
        if cursor.peek() != OPEN_BRACKET:
            return ParseResult.no_match(ErrorCode.EXPECTED_OPEN_BRACKET, cursor.start)
        cursor.advance()

        self.validator.enter_structure()
        try:
            with GrowableBuffer(VALUE_SLOT_SIZE) as items:
                skip_whitespace(cursor)
                if cursor.peek() == CLOSE_BRACKET:
                    cursor.advance()
                    return ParseResult.matched(JsonArray(drain_to_arena(items, self.arena)))

                while True:
                    skip_whitespace(cursor)
                    if cursor.is_empty():
                        return ParseResult.failed(ErrorCode.EXPECTED_CLOSE_BRACKET, cursor.start)

                    element = self._value(cursor)
                    if not element.ok:
                        return element
                    assert element.value is not None
                    items.push(element.value)
                    self.validator.validate_array_items(len(items))

                    skip_whitespace(cursor)
                    separator = cursor.peek()
                    if separator == COMMA:
                        cursor.advance()
                        continue
                    if separator == CLOSE_BRACKET:
                        cursor.advance()
                        break
                    return ParseResult.failed(ErrorCode.EXPECTED_CLOSE_BRACKET, cursor.start)

                return ParseResult.matched(JsonArray(drain_to_arena(items, self.arena)))
        finally:
            self.validator.exit_structure()

    def _object(self, cursor: Str) -> ParseResult:
        skip_whitespace(cursor)
        if cursor.peek() != OPEN_BRACE:
            return ParseResult.no_match(ErrorCode.EXPECTED_OPEN_BRACE, cursor.start)
        cursor.advance()

        self.validator.enter_structure()
        try:
            with GrowableBuffer(PAIR_SLOT_SIZE) as pairs:
                skip_whitespace(cursor)
                if cursor.peek() == CLOSE_BRACE:
                    cursor.advance()
                    return ParseResult.matched(JsonObject(drain_to_arena(pairs, self.arena)))

                while True:
                    skip_whitespace(cursor)
                    if cursor.is_empty():
                        return ParseResult.failed(ErrorCode.EXPECTED_CLOSE_BRACE, cursor.start)

                    key = self._string(cursor)
                    if not key.ok:
                        return key.committed()
                    assert isinstance(key.value, JsonString)

                    skip_whitespace(cursor)
                    if cursor.peek() != COLON:
                        return ParseResult.failed(ErrorCode.EXPECTED_COLON, cursor.start)
                    cursor.advance()

                    member = self._value(cursor)
                    if not member.ok:
                        return member
                    assert member.value is not None
                    pairs.push(JsonPair(key.value.value, member.value))
                    self.validator.validate_object_keys(len(pairs))

                    skip_whitespace(cursor)
                    separator = cursor.peek()
                    if separator == COMMA:
                        cursor.advance()
                        continue
                    if separator == CLOSE_BRACE:
                        cursor.advance()
                        break
                    return ParseResult.failed(ErrorCode.EXPECTED_CLOSE_BRACE, cursor.start)

                return ParseResult.matched(JsonObject(drain_to_arena(pairs, self.arena)))
        finally:
            self.validator.exit_structure()
