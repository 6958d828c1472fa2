"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger function
- Test logging suppression in test environment
"""

import logging

import pytest
import structlog

from infrastructure.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)
from infrastructure.logging.formatters import add_app_info


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        """configure_logging returns a logger with the standard methods."""
        result = configure_logging(settings=mock_settings)

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "debug")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_configure_logging_without_settings(self):
        """Settings default to the application singleton."""
        assert configure_logging() is not None

    def test_configure_logging_accepts_overrides(self, mock_settings):
        """log_level, is_production and extra_processors are accepted."""
        logger = configure_logging(
            settings=mock_settings,
            log_level="DEBUG",
            is_production=True,
            extra_processors=[add_app_info("i18n-extract")],
        )
        assert logger is not None

    def test_configure_logging_idempotent(self, mock_settings):
        """Multiple configure_logging calls are safe."""
        assert configure_logging(settings=mock_settings) is not None
        assert configure_logging(settings=mock_settings) is not None

    def test_configure_logging_suppresses_in_test_env(self, mock_settings):
        """In test environment, root logger level is set high to suppress output."""
        configure_logging(settings=mock_settings)

        assert logging.getLogger().level >= logging.CRITICAL


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_get_module_logger_binds_module_context(self, mock_settings):
        """The calling module's name is bound as component and module_path."""
        configure_logging(settings=mock_settings)

        logger = get_module_logger()
        context = structlog.get_context(logger)

        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]

    def test_logging_methods_dont_raise(self, mock_settings):
        """Logging methods execute without raising exceptions."""
        configure_logging(settings=mock_settings)
        logger = get_module_logger()

        logger.debug("translate_call_validated", key="zomg_key")
        logger.warning("translate_call_invalid", line=3, error="bad")
        try:
            raise ValueError("test error")
        except ValueError:
            logger.exception("config_parse_error")
