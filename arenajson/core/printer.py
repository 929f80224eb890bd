"""
Compact JSON printer.

Values are rendered without any whitespace, members in insertion order.
Strings and object names are written verbatim between quotes: nothing is
escaped, mirroring the parser, which does not unescape.
"""

import math
from dataclasses import dataclass
from typing import Callable, Optional

from ..memory.arena import Arena
from ..security.exceptions import ArenaJsonError, ErrorCode, PrintError
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from ..utils.diagnostics import Diagnostics
from .constants import (
    CLOSE_BRACE,
    CLOSE_BRACKET,
    COMMA,
    FALSE_LITERAL,
    NULL_LITERAL,
    OPEN_BRACE,
    OPEN_BRACKET,
    TRUE_LITERAL,
)
from .strings import Str, StringBuilder
from .value import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    Variant,
)

INTEGER_EPSILON = 0.0001

# Magnitudes from here on print as their shortest exact literal.
EXPONENT_THRESHOLD = 1e15


def format_number(number: float) -> bytes:
    """
    Render a number as an integer literal or a six-decimal fixed literal.

    A number within ``INTEGER_EPSILON`` of its truncation prints as that
    integer. Otherwise the fixed rendering is used, judged by the float it
    parses back to: when that float differs from the number, the rules are
    applied again to it (``1.00010001`` gives ``1.000100``, which reads back as
    ``1.0001`` and so prints as ``1``). Magnitudes of ``EXPONENT_THRESHOLD``
    and above print as the shortest literal that reads back exactly.
    Printing a parsed printout therefore reproduces it byte for byte.
    """
    if not math.isfinite(number):
        raise PrintError(
            f"Cannot render non-finite number {number!r}",
            code=ErrorCode.INVALID_NUMBER,
        )
    if abs(number) >= EXPONENT_THRESHOLD:
        return repr(number).encode("ascii")
    # A fixed literal's float formats back to that literal, so this ends.
    while True:
        truncated = math.trunc(number)
        if abs(number - truncated) < INTEGER_EPSILON:
            return b"%d" % truncated
        fixed = b"%f" % number
        reparsed = float(fixed)
        if reparsed == number:
            return fixed
        number = reparsed


@dataclass(frozen=True)
class PrintResult:
    """Rendered text in the arena, or the error code that stopped printing."""

    text: Optional[Str] = None
    error: ErrorCode = ErrorCode.OK

    @property
    def ok(self) -> bool:
        return self.error is ErrorCode.OK


class Printer:
    """Renders JSON values into compact text."""

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
        self._writers: dict[Variant, Callable[[StringBuilder, JsonValue], None]] = {
            Variant.ARRAY: self._push_array,  # type: ignore[dict-item]
            Variant.OBJECT: self._push_object,  # type: ignore[dict-item]
            Variant.NUMBER: self._push_number,  # type: ignore[dict-item]
            Variant.STRING: self._push_string,  # type: ignore[dict-item]
            Variant.BOOLEAN: self._push_bool,  # type: ignore[dict-item]
            Variant.NULL: self._push_null,  # type: ignore[dict-item]
        }

    def print_value(self, value: JsonValue) -> PrintResult:
        """Render ``value`` into a new arena string."""
        self.validator.reset()
        try:
            with StringBuilder(self.arena) as builder:
                self.push_value(builder, value)
                return PrintResult(builder.build_to_arena())
        except ArenaJsonError as exc:
            self.diagnostics.report_code(exc.code)
            return PrintResult(error=exc.code)
        except RecursionError:
            self.diagnostics.report_code(ErrorCode.TOO_DEEPLY_NESTED)
            return PrintResult(error=ErrorCode.TOO_DEEPLY_NESTED)

    def push_value(self, builder: StringBuilder, value: JsonValue) -> None:
        """
        Append the rendering of ``value`` to ``builder``.

        Raises the memory layer's and the validator's exceptions unchanged;
        ``print_value`` turns them into result codes.
        """
        self._writers[value.variant](builder, value)

    def _push_array(self, builder: StringBuilder, value: JsonArray) -> None:
        self.validator.enter_structure()
        try:
            builder.push(OPEN_BRACKET)
            for index, item in enumerate(value):
                if index:
                    builder.push(COMMA)
                self.push_value(builder, item)
            builder.push(CLOSE_BRACKET)
        finally:
            self.validator.exit_structure()

    def _push_object(self, builder: StringBuilder, value: JsonObject) -> None:
        self.validator.enter_structure()
        try:
            builder.push(OPEN_BRACE)
            for index, pair in enumerate(value):
                if index:
                    builder.push(COMMA)
                builder.push_formatted(b'"%s":', pair.name.to_bytes())
                self.push_value(builder, pair.value)
            builder.push(CLOSE_BRACE)
        finally:
            self.validator.exit_structure()

    def _push_number(self, builder: StringBuilder, value: JsonNumber) -> None:
        builder.push_formatted(b"%s", format_number(value.value))

    def _push_string(self, builder: StringBuilder, value: JsonString) -> None:
        builder.push_formatted(b'"%s"', value.value.to_bytes())

    def _push_bool(self, builder: StringBuilder, value: JsonBool) -> None:
        builder.push_str(TRUE_LITERAL if value.value else FALSE_LITERAL)

    def _push_null(self, builder: StringBuilder, value: JsonNull) -> None:
        builder.push_str(NULL_LITERAL)
