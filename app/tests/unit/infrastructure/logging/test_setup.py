"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger function
- Test logging suppression in test environment
"""

import logging

import pytest

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
    _is_test_environment,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    def test_detects_pytest_in_sys_modules(self):
        """pytest is running these tests, so it's in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    def test_configure_logging_returns_bound_logger(self, mock_settings):
        result = configure_logging(settings=mock_settings)

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "warning")

    def test_configure_logging_accepts_overrides(self, mock_settings):
        assert configure_logging(settings=mock_settings, log_level="DEBUG")
        assert configure_logging(settings=mock_settings, is_production=True)

    def test_configure_logging_suppresses_output_in_tests(self, mock_settings):
        configure_logging(settings=mock_settings)

        assert logging.root.level > logging.CRITICAL

    def test_configure_logging_idempotent(self, mock_settings):
        first = configure_logging(settings=mock_settings)
        second = configure_logging(settings=mock_settings)

        assert first is not None
        assert second is not None


@pytest.mark.unit
class TestGetModuleLogger:
    def test_get_module_logger_binds_module_context(self):
        logger = get_module_logger()

        # Logging the event must not raise, whatever the bound context
        logger.info("module_logger_test", key="value")

    def test_get_module_logger_returns_new_bound_logger(self):
        assert get_module_logger() is not None
