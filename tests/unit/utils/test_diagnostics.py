"""
Test cases for the leveled diagnostics sink.
"""

import logging
import unittest

from arenajson.security.exceptions import ErrorCode
from arenajson.utils.config import LogLevel, LogSettings
from arenajson.utils.diagnostics import Diagnostics


class TestDiagnostics(unittest.TestCase):

    def setUp(self):
        self.logger = logging.getLogger("arenajson.tests.diagnostics")

    def make(self, **settings):
        return Diagnostics(LogSettings(logger=self.logger, **settings))

    def test_default_logger_name(self):
        self.assertEqual(Diagnostics().logger.name, "arenajson")
        self.assertEqual(Diagnostics(name="arenajson.x").logger.name, "arenajson.x")

    def test_threshold(self):
        diagnostics = self.make(level=LogLevel.WARNING)
        self.assertTrue(diagnostics.enabled(LogLevel.ERROR))
        self.assertTrue(diagnostics.enabled(LogLevel.WARNING))
        self.assertFalse(diagnostics.enabled(LogLevel.INFO))

    def test_none_disables_everything(self):
        diagnostics = self.make(level=LogLevel.NONE)
        self.assertFalse(diagnostics.enabled(LogLevel.ERROR))
        with self.assertNoLogs(self.logger, "DEBUG"):
            diagnostics.error("hidden")

    def test_levels_reach_logger(self):
        diagnostics = self.make()
        with self.assertLogs(self.logger, "INFO") as cm:
            diagnostics.error("e")
            diagnostics.warning("w")
            diagnostics.info("i")
        self.assertEqual(
            cm.output,
            [
                "ERROR:arenajson.tests.diagnostics:e",
                "WARNING:arenajson.tests.diagnostics:w",
                "INFO:arenajson.tests.diagnostics:i",
            ],
        )

    def test_report_code(self):
        diagnostics = self.make()
        with self.assertLogs(self.logger, "WARNING") as cm:
            diagnostics.report_code(ErrorCode.EXPECTED_COLON, 12)
            diagnostics.report_code(ErrorCode.ARENA_OVERFLOW)
        self.assertEqual(cm.records[0].levelno, logging.WARNING)
        self.assertIn("expected ':' after object key at byte 12 (expected_colon)", cm.output[0])
        self.assertEqual(cm.records[1].levelno, logging.ERROR)

    def test_report_ok_is_silent(self):
        with self.assertNoLogs(self.logger, "DEBUG"):
            self.make().report_code(ErrorCode.OK)

    def test_log_errors_switch(self):
        diagnostics = self.make(log_errors=False)
        with self.assertNoLogs(self.logger, "DEBUG"):
            diagnostics.report_code(ErrorCode.INVALID_VARIANT)


if __name__ == '__main__':
    unittest.main()
