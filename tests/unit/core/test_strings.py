"""
Test cases for byte strings and the string builder.
"""

import unittest

from arenajson.core.strings import Str, StringBuilder, view_of_str
from arenajson.memory.arena import Arena
from arenajson.security.exceptions import ArenaOverflowError, OutOfMemoryError


class TestStr(unittest.TestCase):
    """Test the non-owning string range."""

    def test_of_appends_terminator(self):
        """Str.of keeps a terminator just past the end."""
        text = Str.of("abc")
        self.assertEqual(len(text), 3)
        self.assertEqual(text.data[text.end], 0)
        self.assertEqual(view_of_str(text).tobytes(), b"abc\x00")

    def test_bounds_checked(self):
        with self.assertRaises(ValueError):
            Str(b"abc", 2, 1)

    def test_peek_past_end_reads_terminator(self):
        """Peeking past the end yields 0 instead of raising."""
        text = Str(b"ab", 0, 2)
        self.assertEqual(text.peek(), ord("a"))
        self.assertEqual(text.peek(2), 0)

    def test_advance_is_clamped(self):
        text = Str.of("ab")
        text.advance(5)
        self.assertTrue(text.is_empty())
        self.assertEqual(text.start, 2)

    def test_trim_left(self):
        """Leading whitespace is skipped; the end is unchanged."""
        text = Str.of("   x")
        trimmed = text.trim_left()
        self.assertEqual(trimmed.start, 3)
        self.assertEqual(trimmed.end, text.end)
        self.assertEqual(trimmed.to_bytes(), b"x")
        self.assertIs(trimmed.data, text.data)

    def test_trim_left_all_whitespace(self):
        """All-whitespace input trims to an empty string at the end."""
        text = Str.of(" \t\n ")
        trimmed = text.trim_left()
        self.assertTrue(trimmed.is_empty())
        self.assertEqual(trimmed.start, text.end)

    def test_carriage_return_is_not_whitespace(self):
        self.assertEqual(Str.of("\r x").trim_left().to_bytes(), b"\r x")

    def test_starts_and_ends_with(self):
        text = Str.of("hello world")
        self.assertTrue(text.starts_with("hello"))
        self.assertTrue(text.starts_with(b""))
        self.assertFalse(text.starts_with("world"))
        self.assertTrue(text.ends_with(Str.of("world")))
        self.assertFalse(Str.of("lo").ends_with("hello"))

    def test_starts_with_respects_window(self):
        """Bytes outside the window never match."""
        text = Str(b"nullable", 0, 3)
        self.assertFalse(text.starts_with("null"))

    def test_equals_stops_at_terminator(self):
        self.assertTrue(Str.of("abc").equals("abc"))
        self.assertTrue(Str(b"ab\x00cd", 0, 5).equals(b"ab"))
        self.assertFalse(Str.of("abc").equals("abd"))

    def test_content_equality(self):
        self.assertEqual(Str.of("key"), Str(b"a key!", 2, 5))
        self.assertEqual(Str.of("key"), b"key")
        self.assertNotEqual(Str.of("key"), Str.of("keys"))

    def test_decode(self):
        text = Str.of("café")
        self.assertEqual(text.decode(), "café")
        self.assertEqual(str(text), "café")
        self.assertEqual(bytes(text), "café".encode("utf-8"))


class TestCompare(unittest.TestCase):
    """Test three-way comparison with the difference index."""

    def test_equal(self):
        self.assertEqual(Str.of("abc").compare("abc"), 0)
        self.assertEqual(Str.of("").compare(""), 0)

    def test_first_difference(self):
        """The result encodes the index of the first differing byte."""
        self.assertEqual(Str.of("abc").compare("abd"), -1 - 2)
        self.assertEqual(Str.of("abd").compare("abc"), 1 + 2)
        self.assertEqual(Str.of("xbc").compare("abc"), 1)

    def test_prefix(self):
        """A strict prefix differs at the shorter string's length."""
        self.assertEqual(Str.of("ab").compare("abc"), -1 - 2)
        self.assertEqual(Str.of("abc").compare("ab"), 1 + 2)
        self.assertEqual(Str.of("").compare("a"), -1)

    def test_sign_matches_ordering(self):
        for first, second in [("a", "b"), ("ab", "b"), ("abc", "abcd"), ("z", "aaaa")]:
            with self.subTest(first=first, second=second):
                result = Str.of(first).compare(second)
                expected = (first > second) - (first < second)
                self.assertEqual((result > 0) - (result < 0), expected)


class TestStringBuilder(unittest.TestCase):
    """Test the terminated string builder."""

    def setUp(self):
        self.arena = Arena(capacity=1024)

    def test_empty_builder_builds_empty_string(self):
        builder = StringBuilder()
        self.assertEqual(builder.length, 0)
        self.assertEqual(builder.build().to_bytes(), b"")

    def test_push_keeps_terminator_last(self):
        builder = StringBuilder()
        for byte in b"abc":
            builder.push(byte)
        self.assertEqual(builder.length, 3)
        self.assertEqual(builder.count, 4)
        self.assertEqual(builder[builder.count - 1], 0)
        self.assertEqual(builder.build().to_bytes(), b"abc")

    def test_push_str(self):
        builder = StringBuilder()
        builder.push_str("ab")
        builder.push_str(Str.of("cd"))
        builder.push_str(b"")
        self.assertEqual(builder.build().to_bytes(), b"abcd")
        self.assertEqual(builder[builder.count - 1], 0)

    def test_push_formatted(self):
        builder = StringBuilder(self.arena)
        builder.push_str("[")
        builder.push_formatted("%d-%s", 7, "x")
        builder.push_formatted(b'"%s"', b"y")
        self.assertEqual(builder.build().to_bytes(), b'[7-x"y"')

    def test_push_formatted_needs_arena(self):
        with self.assertRaises(ValueError):
            StringBuilder().push_formatted("%d", 1)

    def test_build_to_arena_frees_builder(self):
        builder = StringBuilder(self.arena)
        builder.push_str("hello")
        text = builder.build_to_arena()

        self.assertEqual(text.to_bytes(), b"hello")
        self.assertEqual(text.data[text.end], 0)
        self.assertEqual(self.arena.used, 6)
        self.assertEqual(builder.capacity, 0)

    def test_build_empty_to_arena(self):
        text = StringBuilder(self.arena).build_to_arena()
        self.assertEqual(text.to_bytes(), b"")
        self.assertEqual(self.arena.used, 1)

    def test_build_to_arena_overflow(self):
        builder = StringBuilder(Arena(capacity=4))
        builder.push_str("hello")
        with self.assertRaises(ArenaOverflowError):
            builder.build_to_arena()
        self.assertEqual(builder.capacity, 0)

    def test_failed_push_keeps_content(self):
        """A push that cannot grow leaves the builder terminated and intact."""
        builder = StringBuilder(max_capacity=32)
        builder.push_str("x" * 15)
        builder.push_str("y" * 16)
        self.assertEqual(builder.capacity, 32)

        with self.assertRaises(OutOfMemoryError):
            builder.push(ord("z"))
        self.assertEqual(builder.build().to_bytes(), b"x" * 15 + b"y" * 16)
        self.assertEqual(builder[builder.count - 1], 0)


if __name__ == '__main__':
    unittest.main()
