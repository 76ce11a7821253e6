"""Tests for logging setup."""

import logging

import pytest

from codescope.logging_config import LOGGER_NAME, get_logger, setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    package = logging.getLogger(LOGGER_NAME)
    handlers, level, package_level = root.handlers[:], root.level, package.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    package.setLevel(package_level)


class TestGetLogger:
    """Logger naming."""

    def test_module_names_kept(self):
        """Package module names are used as-is."""
        assert get_logger("codescope.graph.builder").name == "codescope.graph.builder"

    def test_foreign_names_nested(self):
        """Other names are nested under the package logger."""
        assert get_logger("plugin").name == "codescope.plugin"
        assert get_logger("codescopex").name == "codescope.codescopex"

    def test_default(self):
        """No name gives the package logger."""
        assert get_logger().name == LOGGER_NAME


class TestSetupLogging:
    """Levels and handlers."""

    @pytest.mark.parametrize(
        "verbose,quiet,level",
        [
            (False, False, logging.WARNING),
            (True, False, logging.DEBUG),
            (False, True, logging.ERROR),
            (True, True, logging.ERROR),
        ],
    )
    def test_levels(self, verbose, quiet, level):
        """Default WARNING, verbose DEBUG, quiet ERROR even with verbose."""
        assert setup_logging(verbose=verbose, quiet=quiet).level == level

    def test_log_file(self, tmp_path):
        """Records are appended to the log file."""
        log_file = tmp_path / "codescope.log"
        setup_logging(log_file=str(log_file))
        get_logger("codescope.scanning.scanner").warning("Skipping a.js: denied")
        for handler in logging.getLogger().handlers:
            handler.flush()
        text = log_file.read_text()
        assert "codescope.scanning.scanner - WARNING - Skipping a.js: denied" in text
