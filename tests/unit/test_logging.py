"""Tests for logging module."""
import logging

import pytest

from cldpy.core.logging import get_logger, setup_logging, LOGGER_NAMES


class TestGetLogger:
    """Test suite for get_logger function."""

    def test_get_logger_with_name(self):
        """Test getting logger with name."""
        logger = get_logger('cldpy.test_module')

        assert logger.name == 'cldpy.test_module'

    def test_get_logger_returns_logger_instance(self):
        """Test returns logging.Logger instance."""
        assert isinstance(get_logger('cldpy.test'), logging.Logger)

    def test_propagates(self):
        """Test records reach the root logger."""
        assert get_logger('cldpy.test').propagate


class TestSetupLogging:
    """Test suite for setup_logging function."""

    @pytest.fixture(autouse=True)
    def restore_levels(self):
        """Restore logger levels after each test."""
        levels = {name: logging.getLogger(name).level for name in LOGGER_NAMES}
        yield
        for name, level in levels.items():
            logging.getLogger(name).setLevel(level)

    def test_default_level(self):
        setup_logging()

        assert all(logging.getLogger(name).level == logging.INFO for name in LOGGER_NAMES)

    def test_debug_level(self):
        setup_logging(logging.DEBUG)

        assert logging.getLogger('cldpy.upload').level == logging.DEBUG

    def test_records_captured(self, caplog):
        """Test records are visible once configured."""
        setup_logging(logging.DEBUG)

        with caplog.at_level(logging.DEBUG):
            get_logger('cldpy.client').debug("hello")

        assert "hello" in caplog.text
