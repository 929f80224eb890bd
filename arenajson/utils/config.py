"""
Configuration and limits for arenajson.

This module defines the arena, logging and resource-limit settings that the
embedding application tunes. None of them change parsing semantics; they only
gate diagnostic output and set allocation and nesting ceilings.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

DEFAULT_ARENA_CAPACITY = 0x8 * 0x400 * 0x400


class LogLevel(Enum):
    """Minimum level a diagnostic must have to reach the logging sink."""

    NONE = 0
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO

    @classmethod
    def parse(cls, value: Union[str, "LogLevel"]) -> "LogLevel":
        """Parse a level name such as ``"warning"`` (case-insensitive)."""
        if isinstance(value, LogLevel):
            return value
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {value!r}") from None


@dataclass
class ArenaSettings:
    """Arena allocation settings."""
    capacity: int = DEFAULT_ARENA_CAPACITY

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError("arena capacity must be positive")


@dataclass
class LogSettings:
    """Diagnostic logging settings."""
    level: LogLevel = LogLevel.INFO
    logger: Optional[logging.Logger] = None
    log_errors: bool = True


@dataclass
class SizeLimits:
    """Input and content size limits."""
    max_input_size: int = 10 * 1024 * 1024
    max_string_length: int = 1024 * 1024
    max_number_length: int = 100


@dataclass
class StructureLimits:
    """JSON structure complexity limits."""
    max_nesting_depth: int = 100
    max_object_keys: int = 10000
    max_array_items: int = 100000


@dataclass
class ParseLimits:
    """Resource limits applied while parsing and printing."""

    size_limits: Optional[SizeLimits] = None
    structure_limits: Optional[StructureLimits] = None

    def __init__(
        self,
        *,
        size_limits: Optional[SizeLimits] = None,
        structure_limits: Optional[StructureLimits] = None,
        **flat_args: Any,
    ):
        unknown = set(flat_args) - _SIZE_FIELDS - _STRUCTURE_FIELDS
        if unknown:
            raise TypeError(f"Unknown limit(s): {', '.join(sorted(unknown))}")

        if size_limits is not None:
            self.size_limits = size_limits
        else:
            self.size_limits = SizeLimits(
                **{k: v for k, v in flat_args.items() if k in _SIZE_FIELDS}
            )

        if structure_limits is not None:
            self.structure_limits = structure_limits
        else:
            self.structure_limits = StructureLimits(
                **{k: v for k, v in flat_args.items() if k in _STRUCTURE_FIELDS}
            )

        if self.size_limits.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.structure_limits.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")

    @property
    def max_input_size(self) -> int:
        """Maximum input size in bytes."""
        assert self.size_limits is not None
        return self.size_limits.max_input_size

    @property
    def max_string_length(self) -> int:
        """Maximum length for individual strings."""
        assert self.size_limits is not None
        return self.size_limits.max_string_length

    @property
    def max_number_length(self) -> int:
        """Maximum length for number lexemes."""
        assert self.size_limits is not None
        return self.size_limits.max_number_length

    @property
    def max_nesting_depth(self) -> int:
        """Maximum nesting depth for JSON structures."""
        assert self.structure_limits is not None
        return self.structure_limits.max_nesting_depth

    @property
    def max_object_keys(self) -> int:
        """Maximum number of members in an object."""
        assert self.structure_limits is not None
        return self.structure_limits.max_object_keys

    @property
    def max_array_items(self) -> int:
        """Maximum number of items in an array."""
        assert self.structure_limits is not None
        return self.structure_limits.max_array_items


_SIZE_FIELDS = {"max_input_size", "max_string_length", "max_number_length"}
_STRUCTURE_FIELDS = {"max_nesting_depth", "max_object_keys", "max_array_items"}


@dataclass
class ParseConfig:
    """Configuration options for arenajson parsing and printing."""

    arena: Optional[ArenaSettings] = None
    limits: Optional[ParseLimits] = None
    log: Optional[LogSettings] = None

    def __post_init__(self) -> None:
        if self.arena is None:
            self.arena = ArenaSettings()
        if self.limits is None:
            self.limits = ParseLimits()
        if self.log is None:
            self.log = LogSettings()

    @property
    def arena_capacity(self) -> int:
        """Capacity in bytes of arenas created for this configuration."""
        assert self.arena is not None
        return self.arena.capacity

    @property
    def log_level(self) -> LogLevel:
        """Minimum level that reaches the logging sink."""
        assert self.log is not None
        return self.log.level

    @log_level.setter
    def log_level(self, value: Union[str, LogLevel]) -> None:
        """Set the minimum diagnostic level."""
        assert self.log is not None
        self.log.level = LogLevel.parse(value)

    @property
    def max_nesting_depth(self) -> int:
        """Maximum nesting depth for JSON structures."""
        assert self.limits is not None
        return self.limits.max_nesting_depth

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "ParseConfig":
        """
        Create a configuration from environment variables.

        Recognised variables are ``ARENAJSON_ARENA_CAPACITY``,
        ``ARENAJSON_LOG_LEVEL`` and ``ARENAJSON_MAX_NESTING_DEPTH``. Unset
        variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        config = cls()

        capacity = env.get("ARENAJSON_ARENA_CAPACITY")
        if capacity:
            config.arena = ArenaSettings(capacity=_parse_int(
                "ARENAJSON_ARENA_CAPACITY", capacity
            ))

        level = env.get("ARENAJSON_LOG_LEVEL")
        if level:
            config.log_level = level

        depth = env.get("ARENAJSON_MAX_NESTING_DEPTH")
        if depth:
            config.limits = ParseLimits(
                max_nesting_depth=_parse_int("ARENAJSON_MAX_NESTING_DEPTH", depth)
            )

        return config


def _parse_int(name: str, raw: str) -> int:
    """Parse an integer setting, accepting ``0x`` prefixes."""
    try:
        return int(raw.strip(), 0)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
