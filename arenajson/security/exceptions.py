"""
Error codes and exception classes for arenajson.

Parsing and printing report failures as explicit ``ErrorCode`` results. The
exception hierarchy below is used by the low-level primitives (arena, buffers,
limits) and by the ``loads``/``dumps`` convenience wrappers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """Result codes shared by the parser, the printer and the allocators."""

    OK = "ok"
    ARENA_OVERFLOW = "arena_overflow"
    OUT_OF_MEMORY = "out_of_memory"

    EXPECTED_OPEN_BRACKET = "expected_open_bracket"
    EXPECTED_CLOSE_BRACKET = "expected_close_bracket"
    EXPECTED_OPEN_BRACE = "expected_open_brace"
    EXPECTED_CLOSE_BRACE = "expected_close_brace"
    EXPECTED_BOOL = "expected_bool"
    EXPECTED_NULL = "expected_null"
    EXPECTED_NUMBER = "expected_number"
    EXPECTED_OPEN_QUOTE = "expected_open_quote"
    EXPECTED_CLOSE_QUOTE = "expected_close_quote"
    EXPECTED_COLON = "expected_colon"
    INVALID_VARIANT = "invalid_variant"

    TOO_DEEPLY_NESTED = "too_deeply_nested"
    LIMIT_EXCEEDED = "limit_exceeded"
    TRAILING_CHARACTERS = "trailing_characters"
    INVALID_NUMBER = "invalid_number"

    @property
    def is_ok(self) -> bool:
        """Whether this code signals success."""
        return self is ErrorCode.OK


_DESCRIPTIONS = {
    ErrorCode.OK: "Ok",
    ErrorCode.ARENA_OVERFLOW: "overflow of temporary arena!",
    ErrorCode.OUT_OF_MEMORY: "out of memory while growing buffer",
    ErrorCode.EXPECTED_OPEN_BRACKET: "expected '['",
    ErrorCode.EXPECTED_CLOSE_BRACKET: "expected ']' to close array",
    ErrorCode.EXPECTED_OPEN_BRACE: "expected '{'",
    ErrorCode.EXPECTED_CLOSE_BRACE: "expected '}' to close object",
    ErrorCode.EXPECTED_BOOL: "expected 'true' or 'false'",
    ErrorCode.EXPECTED_NULL: "expected 'null'",
    ErrorCode.EXPECTED_NUMBER: "expected number",
    ErrorCode.EXPECTED_OPEN_QUOTE: "expected '\"' to open string",
    ErrorCode.EXPECTED_CLOSE_QUOTE: "expected '\"' to close string",
    ErrorCode.EXPECTED_COLON: "expected ':' after object key",
    ErrorCode.INVALID_VARIANT: "input does not start any JSON value",
    ErrorCode.TOO_DEEPLY_NESTED: "structure nested too deeply",
    ErrorCode.LIMIT_EXCEEDED: "configured size limit exceeded",
    ErrorCode.TRAILING_CHARACTERS: "unexpected characters after JSON value",
    ErrorCode.INVALID_NUMBER: "number cannot be represented in JSON",
}


def describe(code: ErrorCode) -> str:
    """Get the human readable description of an error code."""
    return _DESCRIPTIONS[code]


@dataclass
class Position:
    """Position in source text (line and column, both 1-based)."""

    line: int
    column: int


@dataclass
class ErrorContext:
    """Source excerpt around the place an error was detected."""

    text: str
    position: Position
    offset: int
    line_text: str
    column_indicator: str


class ArenaJsonError(Exception):
    """Base exception for all arenajson errors."""

    code = ErrorCode.OK

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
        code: Optional[ErrorCode] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        if code is not None:
            self.code = code
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message."""
        msg = self.message

        if self.position:
            msg += f" at line {self.position.line}, column {self.position.column}"

        if self.context:
            msg += f"\n\nContext:\n{self.context.line_text}\n"
            msg += self.context.column_indicator

        if self.suggestions:
            msg += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                msg += f"\n  - {suggestion}"

        return msg


class ArenaOverflowError(ArenaJsonError):
    """Raised when an allocation does not fit in the remaining arena space."""

    code = ErrorCode.ARENA_OVERFLOW

    def __init__(self, requested: int, remaining: int):
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"{describe(ErrorCode.ARENA_OVERFLOW)} "
            f"Requested {requested} bytes, {remaining} remaining",
            suggestions=[
                "Reset the arena between units of work",
                "Increase the arena capacity",
            ],
        )


class OutOfMemoryError(ArenaJsonError):
    """Raised when a growable buffer cannot obtain a larger backing store."""

    code = ErrorCode.OUT_OF_MEMORY


class SecurityError(ArenaJsonError):
    """Raised when input exceeds a configured resource limit."""

    code = ErrorCode.LIMIT_EXCEEDED


class NestingDepthError(SecurityError):
    """Raised when a structure is nested deeper than allowed."""

    code = ErrorCode.TOO_DEEPLY_NESTED


class ParseError(ArenaJsonError):
    """Raised by ``loads`` when the input is not valid JSON."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
        code: Optional[ErrorCode] = None,
        offset: Optional[int] = None,
    ):
        self.offset = offset
        super().__init__(message, position, context, suggestions, code)


class PrintError(ArenaJsonError):
    """Raised by ``dumps`` when a value cannot be rendered."""


class ErrorSuggestionEngine:
    """Suggestions attached to parse errors."""

    _SUGGESTIONS = {
        ErrorCode.EXPECTED_CLOSE_BRACKET: [
            "Add the missing ']' to close the array",
            "Separate array elements with ','",
        ],
        ErrorCode.EXPECTED_CLOSE_BRACE: [
            "Add the missing '}' to close the object",
            "Separate object members with ','",
        ],
        ErrorCode.EXPECTED_CLOSE_QUOTE: [
            "Close the string with '\"'",
            "Escape quotes inside strings with a backslash",
        ],
        ErrorCode.EXPECTED_OPEN_QUOTE: [
            "Object keys must be double-quoted strings",
            "Remove trailing commas before '}'",
        ],
        ErrorCode.EXPECTED_COLON: [
            "Object keys must be followed by ':'",
        ],
        ErrorCode.INVALID_VARIANT: [
            "Values must be null, true, false, a number, a string, an array or an object",
            "Remove trailing commas before ']'",
        ],
        ErrorCode.TOO_DEEPLY_NESTED: [
            "Flatten the document or raise max_nesting_depth",
        ],
        ErrorCode.TRAILING_CHARACTERS: [
            "Remove text after the JSON value",
        ],
    }

    @classmethod
    def suggest(cls, code: ErrorCode) -> list[str]:
        """Get suggestions for an error code (possibly empty)."""
        return list(cls._SUGGESTIONS.get(code, []))


class ErrorReporter:
    """Builds positioned exceptions from character offsets into the source text."""

    def __init__(self, text: str, max_context: int = 50):
        self.text = text
        self.lines = text.split("\n")
        self.max_context = max_context

    def position_of(self, offset: int) -> Position:
        """Translate a character offset into a line/column position."""
        offset = max(0, min(offset, len(self.text)))
        line = self.text.count("\n", 0, offset) + 1
        line_start = self.text.rfind("\n", 0, offset) + 1
        return Position(line=line, column=offset - line_start + 1)

    def create_context(self, offset: int) -> ErrorContext:
        """Create an excerpt of the line containing ``offset``."""
        position = self.position_of(offset)
        line_text = self.lines[position.line - 1] if self.lines else ""
        column = position.column - 1

        if len(line_text) > self.max_context:
            start = max(0, column - self.max_context // 2)
            line_text = line_text[start:start + self.max_context]
            column -= start

        return ErrorContext(
            text=self.text,
            position=position,
            offset=offset,
            line_text=line_text,
            column_indicator=" " * column + "^",
        )

    def create_parse_error(self, code: ErrorCode, offset: int) -> ParseError:
        """Create a ParseError for ``code`` detected at ``offset``."""
        context = self.create_context(offset)
        return ParseError(
            describe(code).capitalize(),
            position=context.position,
            context=context,
            suggestions=ErrorSuggestionEngine.suggest(code),
            code=code,
            offset=offset,
        )
