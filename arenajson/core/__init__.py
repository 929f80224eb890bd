"""
arenajson core: strings, the JSON value model, parser and printer.
"""

from .engine import dumps, loads, parse, print_json
from .parser import Parser, ParseResult, Status
from .printer import Printer, PrintResult, format_number
from .strings import Str, StringBuilder, view_of_str
from .value import (
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

__all__ = [
    'dumps', 'loads', 'parse', 'print_json',
    'Parser', 'ParseResult', 'Status',
    'Printer', 'PrintResult', 'format_number',
    'Str', 'StringBuilder', 'view_of_str',
    'JsonArray', 'JsonBool', 'JsonNull', 'JsonNumber', 'JsonObject',
    'JsonPair', 'JsonString', 'JsonValue', 'Variant',
    'from_python', 'to_python',
]
