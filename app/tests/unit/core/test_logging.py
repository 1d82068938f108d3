"""Tests for core.logging module."""

import logging
import sys
from unittest.mock import patch

import pytest

from core import logging as core_logging
from core.logging import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


@pytest.mark.unit
class TestLoggingConfiguration:
    """Tests for logging configuration."""

    def test_is_test_environment_detects_pytest(self):
        """_is_test_environment returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True

    def test_is_test_environment_without_pytest(self):
        """_is_test_environment returns False when pytest is not loaded."""
        with patch.dict(sys.modules):
            del sys.modules["pytest"]
            assert _is_test_environment() is False

    def test_configure_logging_suppresses_in_test_env(self):
        """In test environment, root logger level is set high to suppress output."""
        configure_logging()
        assert logging.getLogger().level > logging.CRITICAL

    @pytest.mark.parametrize("is_production", [True, False])
    def test_configure_logging_outside_tests(self, is_production):
        """configure_logging builds a renderer chain outside tests."""
        try:
            with patch.object(core_logging, "_is_test_environment", return_value=False):
                logger = configure_logging(log_level="DEBUG", is_production=is_production)
            assert hasattr(logger, "bind")
        finally:
            configure_logging()


@pytest.mark.unit
class TestLoggerHelpers:
    """Tests for logger helper functions."""

    def test_get_module_logger(self):
        """get_module_logger returns a logger with the usual methods."""
        logger = get_module_logger()
        for method in ("info", "debug", "warning", "error", "bind"):
            assert hasattr(logger, method)
