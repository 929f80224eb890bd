"""
Locale-independent decimal floating-point lexical scan.

The scanner recognises the longest prefix that forms a decimal number
(optional sign, digits with an optional fraction or a bare fraction, optional
exponent) and reports how many bytes it used. Zero bytes scanned means the
input does not start with a number.

Only decimal notation is recognised. Hexadecimal floats and the ``inf`` and
``nan`` spellings are not numbers here: the printer never emits them, and
JSON text has no such literals.
"""

from dataclasses import dataclass
from typing import Optional

import regex

NUMBER_PATTERN = regex.compile(
    rb"""
    [+-]?
    (?: [0-9]+ (?: \. [0-9]* )?
      | \. [0-9]+ )
    (?: [eE] [+-]? [0-9]+ )?
    """,
    regex.VERBOSE,
)


@dataclass(frozen=True)
class NumberScan:
    """Result of a successful scan."""

    value: float
    length: int


def scan_number(data: bytes, start: int, end: int, max_length: int) -> Optional[NumberScan]:
    """
    Scan a number at ``data[start:end]``.

    At most ``max_length + 1`` bytes are examined, so an over-long lexeme is
    reported with a length greater than ``max_length`` rather than in full.
    Returns ``None`` when no digits were found.
    """
    window = bytes(data[start:min(end, start + max_length + 1)])
    match = NUMBER_PATTERN.match(window)
    if match is None:
        return None
    lexeme = match.group()
    return NumberScan(value=float(lexeme), length=len(lexeme))
