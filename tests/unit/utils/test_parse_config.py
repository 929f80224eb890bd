"""
Test cases for configuration and limits.

Tests focus on defaults, flat limit arguments and environment overrides.
"""

import logging
import unittest

from arenajson.utils.config import (
    DEFAULT_ARENA_CAPACITY,
    ArenaSettings,
    LogLevel,
    LogSettings,
    ParseConfig,
    ParseLimits,
    SizeLimits,
    StructureLimits,
)


class TestParseConfig(unittest.TestCase):
    """Test ParseConfig defaults and convenience properties."""

    def test_defaults(self):
        config = ParseConfig()
        self.assertEqual(config.arena_capacity, DEFAULT_ARENA_CAPACITY)
        self.assertEqual(DEFAULT_ARENA_CAPACITY, 8 * 1024 * 1024)
        self.assertIs(config.log_level, LogLevel.INFO)
        self.assertEqual(config.max_nesting_depth, 100)
        self.assertIsNone(config.log.logger)
        self.assertTrue(config.log.log_errors)

    def test_log_level_setter_parses_names(self):
        config = ParseConfig()
        config.log_level = "warning"
        self.assertIs(config.log_level, LogLevel.WARNING)
        config.log_level = LogLevel.NONE
        self.assertIs(config.log_level, LogLevel.NONE)

    def test_nested_settings(self):
        config = ParseConfig(
            arena=ArenaSettings(capacity=4096),
            log=LogSettings(level=LogLevel.ERROR),
        )
        self.assertEqual(config.arena_capacity, 4096)
        self.assertIs(config.log_level, LogLevel.ERROR)

    def test_invalid_arena_capacity(self):
        with self.assertRaises(ValueError):
            ArenaSettings(capacity=0)


class TestLogLevel(unittest.TestCase):

    def test_levels_follow_logging(self):
        self.assertEqual(LogLevel.ERROR.value, logging.ERROR)
        self.assertEqual(LogLevel.WARNING.value, logging.WARNING)
        self.assertEqual(LogLevel.INFO.value, logging.INFO)

    def test_parse(self):
        self.assertIs(LogLevel.parse(" Info "), LogLevel.INFO)
        self.assertIs(LogLevel.parse("NONE"), LogLevel.NONE)
        with self.assertRaises(ValueError):
            LogLevel.parse("verbose")


class TestParseLimits(unittest.TestCase):
    """Test flat and grouped limit construction."""

    def test_flat_arguments(self):
        limits = ParseLimits(max_string_length=10, max_nesting_depth=4)
        self.assertEqual(limits.max_string_length, 10)
        self.assertEqual(limits.max_nesting_depth, 4)
        self.assertEqual(limits.max_array_items, 100000)

    def test_grouped_arguments(self):
        limits = ParseLimits(
            size_limits=SizeLimits(max_input_size=64),
            structure_limits=StructureLimits(max_object_keys=2),
        )
        self.assertEqual(limits.max_input_size, 64)
        self.assertEqual(limits.max_object_keys, 2)

    def test_unknown_argument(self):
        with self.assertRaises(TypeError):
            ParseLimits(max_depth=3)

    def test_non_positive_limits(self):
        with self.assertRaises(ValueError):
            ParseLimits(max_nesting_depth=0)
        with self.assertRaises(ValueError):
            ParseLimits(max_input_size=-1)


class TestFromEnv(unittest.TestCase):
    """Test environment overrides."""

    def test_empty_environment_keeps_defaults(self):
        config = ParseConfig.from_env({})
        self.assertEqual(config.arena_capacity, DEFAULT_ARENA_CAPACITY)
        self.assertIs(config.log_level, LogLevel.INFO)

    def test_overrides(self):
        config = ParseConfig.from_env({
            "ARENAJSON_ARENA_CAPACITY": "0x1000",
            "ARENAJSON_LOG_LEVEL": "error",
            "ARENAJSON_MAX_NESTING_DEPTH": "12",
        })
        self.assertEqual(config.arena_capacity, 4096)
        self.assertIs(config.log_level, LogLevel.ERROR)
        self.assertEqual(config.max_nesting_depth, 12)

    def test_invalid_integer(self):
        with self.assertRaises(ValueError) as cm:
            ParseConfig.from_env({"ARENAJSON_ARENA_CAPACITY": "lots"})
        self.assertIn("ARENAJSON_ARENA_CAPACITY", str(cm.exception))


if __name__ == '__main__':
    unittest.main()
