"""
Leveled diagnostics sink.

The core reports allocation overflow and parse errors here. Diagnostics are a
side channel only: nothing in this module affects control flow or results.
"""

import logging
from typing import Optional

from ..security.exceptions import ErrorCode, describe
from .config import LogLevel, LogSettings


class Diagnostics:
    """Forwards diagnostics to a logger, gated by a minimum level."""

    def __init__(
        self,
        settings: Optional[LogSettings] = None,
        name: str = "arenajson",
    ):
        self.settings = settings or LogSettings()
        self.logger = self.settings.logger or logging.getLogger(name)

    def enabled(self, level: LogLevel) -> bool:
        """Whether a record at ``level`` passes the configured threshold."""
        threshold = self.settings.level
        if threshold is LogLevel.NONE or level is LogLevel.NONE:
            return False
        return level.value >= threshold.value

    def log(self, level: LogLevel, message: str) -> None:
        """Emit ``message`` at ``level`` if it passes the threshold."""
        if self.enabled(level):
            self.logger.log(level.value, message)

    def error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)

    def warning(self, message: str) -> None:
        self.log(LogLevel.WARNING, message)

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def report_code(self, code: ErrorCode, offset: Optional[int] = None) -> None:
        """Report a failed parse or print with its error code."""
        if code.is_ok or not self.settings.log_errors:
            return
        where = f" at byte {offset}" if offset is not None else ""
        level = LogLevel.ERROR if code in _ALLOCATION_CODES else LogLevel.WARNING
        self.log(level, f"{describe(code)}{where} ({code.value})")


_ALLOCATION_CODES = {ErrorCode.ARENA_OVERFLOW, ErrorCode.OUT_OF_MEMORY}
