#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_logging_utils.py
"""Unit tests for configure_logging and the debug timer."""

import io
import logging

import pytest

from hearthmd import render_document
from hearthmd.logging_utils import PACKAGE_LOGGER_NAME, configure_logging, reset_logging
from hearthmd.utils.decorators import debug_timer


@pytest.fixture
def package_logger():
    """Restore the hearthmd logger after a test."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    reset_logging()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_string_level(self, package_logger):
        """Test level names are resolved on the package logger."""
        logger = configure_logging("debug", stream=io.StringIO())

        assert logger is package_logger
        assert logger.level == logging.DEBUG

    def test_int_level(self, package_logger):
        """Test numeric levels are used as-is."""
        assert configure_logging(logging.WARNING, stream=io.StringIO()).level == logging.WARNING

    def test_unknown_level_name(self, package_logger):
        """Test unknown level names fall back to INFO."""
        assert configure_logging("chatty", stream=io.StringIO()).level == logging.INFO

    def test_root_logger_untouched(self, package_logger):
        """Test the root logger keeps its handlers and level."""
        root = logging.getLogger()
        handlers = list(root.handlers)
        level = root.level

        configure_logging("DEBUG", stream=io.StringIO())

        assert root.handlers == handlers
        assert root.level == level

    def test_pipeline_output_reaches_stream(self, package_logger):
        """Test debug records from the render pipeline are written to the stream."""
        buffer = io.StringIO()
        configure_logging("DEBUG", stream=buffer)

        render_document('"hi"')

        output = buffer.getvalue()
        assert "DEBUG: Tagged 1 quote span(s)" in output
        assert "Rendering (html) completed in" in output

    def test_level_filters_output(self, package_logger):
        """Test records below the level are dropped."""
        buffer = io.StringIO()
        configure_logging("INFO", stream=buffer)

        render_document('"hi"')

        assert buffer.getvalue() == ""

    def test_trace_mode_format(self, package_logger):
        """Test trace mode includes logger names."""
        buffer = io.StringIO()
        configure_logging("DEBUG", stream=buffer, trace_mode=True)

        render_document("x")

        assert "[hearthmd.api]" in buffer.getvalue()

    def test_repeat_call_replaces_own_handlers(self, package_logger):
        """Test a second call replaces earlier handlers but keeps foreign ones."""
        foreign = logging.NullHandler()
        package_logger.addHandler(foreign)

        configure_logging("INFO", stream=io.StringIO())
        configure_logging("INFO", stream=io.StringIO())

        assert foreign in package_logger.handlers
        assert len(package_logger.handlers) == 2

    def test_propagation(self, package_logger):
        """Test records stop at the package logger unless asked otherwise."""
        assert configure_logging("INFO", stream=io.StringIO()).propagate is False
        assert configure_logging("INFO", stream=io.StringIO(), propagate=True).propagate is True

    def test_log_file(self, package_logger, tmp_path):
        """Test output is teed to a file."""
        log_file = tmp_path / "hearthmd.log"
        logger = configure_logging("INFO", stream=io.StringIO(), log_file=str(log_file))

        logging.getLogger("hearthmd.test").info("hello file")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_log_file_unwritable(self, package_logger, tmp_path):
        """Test an unwritable log file keeps the stream handler and says why."""
        buffer = io.StringIO()
        logger = configure_logging("INFO", stream=buffer, log_file=str(tmp_path / "missing" / "x.log"))

        assert len(logger.handlers) == 1
        assert "Could not create log file" in buffer.getvalue()


@pytest.mark.unit
class TestResetLogging:
    """Tests for reset_logging."""

    def test_reset(self, package_logger):
        """Test reset removes installed handlers and restores defaults."""
        foreign = logging.NullHandler()
        package_logger.addHandler(foreign)
        configure_logging("DEBUG", stream=io.StringIO())

        reset_logging()

        assert package_logger.handlers == [foreign]
        assert package_logger.level == logging.NOTSET
        assert package_logger.propagate is True


@pytest.mark.unit
class TestDebugTimer:
    """Tests for debug_timer."""

    def test_logs_when_debug_enabled(self, caplog):
        """Test elapsed time is logged at DEBUG."""
        logger = logging.getLogger("hearthmd.test.timer")
        with caplog.at_level(logging.DEBUG, logger="hearthmd.test.timer"):
            with debug_timer(logger, "Parsing (markdown)"):
                pass

        messages = [r.getMessage() for r in caplog.records if r.name == "hearthmd.test.timer"]
        assert len(messages) == 1
        assert messages[0].startswith("Parsing (markdown) completed in ")

    def test_silent_otherwise(self, caplog):
        """Test nothing is logged above DEBUG."""
        logger = logging.getLogger("hearthmd.test.quiet")
        with caplog.at_level(logging.INFO, logger="hearthmd.test.quiet"):
            with debug_timer(logger, "Rendering (html)"):
                pass
        assert not [r for r in caplog.records if r.name == "hearthmd.test.quiet"]
