"""Unit tests for logger implementations.

Tests verify that:
1. LoggerPort protocol is properly implemented
2. ConsoleLogger prints through rich and tracks writer statistics
3. NullLogger provides silent testing capability
4. XmlWriter reports sessions, elements and rejected calls to its logger
"""

from io import StringIO
import unittest

from rich.console import Console

from woxml.application.ports.services import LoggerPort
from woxml.domain.entities.output import OutputMode
from woxml.domain.exceptions import UnbalancedCloseError
from woxml.domain.services.xml_writer import XmlWriter
from woxml.infrastructure.io.sinks import BytesSink
from woxml.infrastructure.logging import (
    ConsoleLogger,
    LogContext,
    LogLevel,
    NullLogger,
)


class TestLoggerPort(unittest.TestCase):
    """Test that logger implementations comply with LoggerPort protocol."""

    def test_console_logger_implements_loggerport(self):
        """ConsoleLogger should implement LoggerPort protocol."""
        logger = ConsoleLogger()
        self.assertIsInstance(logger, LoggerPort)

    def test_null_logger_implements_loggerport(self):
        """NullLogger should implement LoggerPort protocol."""
        logger = NullLogger()
        self.assertIsInstance(logger, LoggerPort)

    def test_loggerport_has_required_methods(self):
        """LoggerPort protocol should define all required methods."""
        required_methods = {
            "info",
            "success",
            "warning",
            "error",
            "debug",
            "log_session_start",
            "log_element",
            "log_rejected",
            "log_session_end",
        }
        protocol_methods = {
            name for name in dir(LoggerPort) if not name.startswith("_")
        }
        self.assertTrue(required_methods.issubset(protocol_methods))


class TestConsoleLogger(unittest.TestCase):
    """Test ConsoleLogger implementation."""

    def setUp(self):
        """Set up test fixtures."""
        self.buffer = StringIO()
        self.console = Console(
            file=self.buffer, force_terminal=True, highlight=False, width=80
        )
        self.logger = ConsoleLogger(console=self.console, verbosity=LogLevel.DEBUG)

    def test_initialization(self):
        """Logger should initialize with proper defaults."""
        logger = ConsoleLogger()
        self.assertEqual(logger.verbosity, 0)
        self.assertIsNone(logger._context)
        self.assertEqual(logger.get_stats()["elements_written"], 0)

    def test_info_logging(self):
        """info() should output message to console."""
        self.logger.info("Test message")
        self.assertIn("Test message", self.buffer.getvalue())

    def test_success_logging(self):
        """success() should output message with success indicator."""
        self.logger.success("Operation complete")
        self.assertIn("Operation complete", self.buffer.getvalue())

    def test_warning_logging(self):
        """warning() should output message and increment warning count."""
        self.logger.warning("Warning message")
        self.assertIn("Warning message", self.buffer.getvalue())
        self.assertEqual(self.logger.get_stats()["warnings"], 1)

    def test_error_logging(self):
        """error() should output message and increment error count."""
        self.logger.error("Error message")
        self.assertIn("Error message", self.buffer.getvalue())
        self.assertEqual(self.logger.get_stats()["errors"], 1)

    def test_debug_logging_with_verbosity(self):
        """debug() should only output when verbosity >= DEBUG."""
        self.logger.debug("Debug message")
        self.assertIn("Debug message", self.buffer.getvalue())

        self.buffer.truncate(0)
        self.buffer.seek(0)
        normal_logger = ConsoleLogger(console=self.console, verbosity=LogLevel.NORMAL)
        normal_logger.debug("Should not appear")
        self.assertEqual(self.buffer.getvalue().strip(), "")

    def test_context_management(self):
        """Logger should manage logging context."""
        self.logger.set_context(document="feed.xml", operation="render")
        self.assertIsNotNone(self.logger._context)
        self.assertEqual(self.logger._context.document, "feed.xml")
        self.assertEqual(self.logger._context.operation, "render")

    def test_document_prefix_in_debug_output(self):
        """The document name prefixes messages at debug verbosity."""
        self.logger.set_context(document="feed.xml")
        self.logger.info("hello")
        self.assertIn("[feed.xml] hello", self.buffer.getvalue())

    def test_session_statistics(self):
        """Session hooks accumulate statistics."""
        self.logger.log_session_start(OutputMode.PRETTY)
        self.logger.log_element("root", 0)
        self.logger.log_element("child", 1)
        self.logger.log_rejected("end_elem", UnbalancedCloseError())
        self.logger.log_session_end(2, 42)

        stats = self.logger.get_stats()
        self.assertEqual(stats["elements_written"], 2)
        self.assertEqual(stats["rejected_calls"], 1)
        self.assertEqual(stats["bytes_written"], 42)
        self.assertIn("Closed writer", self.buffer.getvalue())

    def test_reset_stats(self):
        """reset_stats() zeroes every counter."""
        self.logger.error("boom")
        self.logger.reset_stats()
        self.assertEqual(set(self.logger.get_stats().values()), {0})

    def test_final_stats_only_when_verbose(self):
        """log_final_stats() is silent at normal verbosity."""
        quiet = ConsoleLogger(console=self.console, verbosity=LogLevel.NORMAL)
        quiet.log_final_stats()
        self.assertEqual(self.buffer.getvalue(), "")

        self.logger.log_final_stats()
        self.assertIn("Writer Statistics", self.buffer.getvalue())


class TestLogContext(unittest.TestCase):
    def test_elapsed_ms_non_negative(self):
        """elapsed_ms() measures time since creation."""
        context = LogContext(document="a.xml")
        self.assertGreaterEqual(context.elapsed_ms(), 0.0)


class TestWriterLogging(unittest.TestCase):
    """XmlWriter forwards its session events to the logger."""

    def setUp(self):
        self.buffer = StringIO()
        self.console = Console(file=self.buffer, force_terminal=False, width=120)
        self.logger = ConsoleLogger(console=self.console, verbosity=LogLevel.DEBUG)

    def test_elements_and_bytes_are_counted(self):
        """Every opened element and the final byte count are reported."""
        writer = XmlWriter.compact_mode(BytesSink(), logger=self.logger)
        writer.begin_elem("root")
        writer.elem("a")
        writer.elem_text("b", "x")
        writer.close()

        stats = self.logger.get_stats()
        self.assertEqual(stats["elements_written"], 3)
        self.assertEqual(stats["bytes_written"], len("<root><a/><b>x</b></root>"))
        self.assertIn("Started compact XML writer session", self.buffer.getvalue())

    def test_rejected_calls_are_logged(self):
        """A typed error is logged before it is raised."""
        writer = XmlWriter.pretty_mode(BytesSink(), logger=self.logger)
        with self.assertRaises(UnbalancedCloseError):
            writer.end_elem()

        self.assertEqual(self.logger.get_stats()["rejected_calls"], 1)
        self.assertIn("Rejected end_elem()", self.buffer.getvalue())

    def test_null_logger_is_silent(self):
        """NullLogger accepts every hook without output."""
        writer = XmlWriter.compact_mode(BytesSink(), logger=NullLogger())
        writer.elem("a")
        with self.assertRaises(UnbalancedCloseError):
            writer.end_elem()
        writer.close()

        self.assertEqual(self.buffer.getvalue(), "")
