"""
Integration tests for parse/print round trips.

Printing a value and parsing the result must give back an equal value, and
printing that again must reproduce the first printout byte for byte.
"""

import pytest

from arenajson import (
    Arena,
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    Parser,
    Printer,
    Str,
)

VALUES = [
    JsonNull(),
    JsonBool(True),
    JsonBool(False),
    JsonNumber(0.0),
    JsonNumber(-17.0),
    JsonNumber(0.25),
    JsonNumber(123456.789),
    JsonNumber(1e300),
    JsonNumber(-2.5e-3),
    JsonString.of(""),
    JsonString.of("plain text"),
    JsonString.of("multi\nline"),
    JsonArray.of([]),
    JsonObject.of([]),
    JsonArray.of([JsonNumber(1.0), JsonString.of("a"), JsonBool(True), JsonNull()]),
    JsonObject.of([("a", JsonNumber(1.0)), ("a", JsonNumber(2.0))]),
    JsonObject.of([
        ("list", JsonArray.of([JsonArray.of([]), JsonObject.of([("x", JsonNull())])])),
        ("deep", JsonObject.of([("deeper", JsonArray.of([JsonNumber(-0.5)]))])),
    ]),
]

DOCUMENTS = [
    '[1, "a", true, null, {"k":2}]',
    '{"a":1,"a":2}',
    ' { "name" : "x" , "tags" : [ "p" , "q" ] } ',
    "[3.14159265, -2.9999999, 1e3, .5]",
    '{"nested": {"empty": [], "obj": {}}}',
]


@pytest.fixture
def arena():
    arena = Arena(capacity=256 * 1024)
    yield arena
    arena.reset()


def print_bytes(value, arena):
    result = Printer(arena).print_value(value)
    assert result.ok, result.error
    return result.text.to_bytes()


def parse_bytes(text, arena):
    cursor = Str.of(text)
    result = Parser(arena).parse_value(cursor)
    assert result.ok, result.error
    assert cursor.trim_left().is_empty()
    return result.value


@pytest.mark.parametrize("value", VALUES)
def test_round_trip(value, arena):
    assert parse_bytes(print_bytes(value, arena), arena) == value


@pytest.mark.parametrize("value", VALUES)
def test_print_is_idempotent(value, arena):
    printed = print_bytes(value, arena)
    assert print_bytes(parse_bytes(printed, arena), arena) == printed


@pytest.mark.parametrize("document", DOCUMENTS)
def test_documents_reprint_stably(document, arena):
    printed = print_bytes(parse_bytes(document, arena), arena)
    assert print_bytes(parse_bytes(printed, arena), arena) == printed


def test_mixed_array_prints_compactly(arena):
    value = parse_bytes('[1, "a", true, null, {"k":2}]', arena)
    assert print_bytes(value, arena) == b'[1,"a",true,null,{"k":2}]'


NEAR_INTEGERS = [1.00010001, 7.00010002, -3.00010004, 2.99990001, 1.000100000001, 41.0001]

LARGE_NUMBERS = [1e15, 123456789012345678.0, 1e300, -1.5e120, 1.7976931348623157e308]


@pytest.mark.parametrize("number", NEAR_INTEGERS)
def test_near_integer_reprint_is_stable(number, arena):
    printed = print_bytes(JsonNumber(number), arena)
    assert print_bytes(parse_bytes(printed, arena), arena) == printed


@pytest.mark.parametrize("number", LARGE_NUMBERS)
def test_large_numbers_round_trip(number, arena):
    printed = print_bytes(JsonNumber(number), arena)
    assert len(printed) < 100
    assert parse_bytes(printed, arena) == JsonNumber(number)
    assert print_bytes(parse_bytes(printed, arena), arena) == printed


def test_rounded_numbers_stay_within_epsilon(arena):
    value = JsonNumber(1.00001)
    reparsed = parse_bytes(print_bytes(value, arena), arena)
    assert abs(reparsed.value - value.value) < 0.0001


def test_arena_reuse_after_reset():
    arena = Arena(capacity=512)
    for _ in range(50):
        value = parse_bytes('{"k": ["some", "strings", "here"]}', arena)
        assert print_bytes(value, arena) == b'{"k":["some","strings","here"]}'
        arena.reset()
    assert arena.used == 0
