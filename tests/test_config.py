"""Tests for settings and logging setup."""

import logging

import pytest

from legal_workbench.core.config import PACKAGE_LOGGER, configure_logging, get_settings


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear cached settings before and after the test."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield logger
    logger.setLevel(level)


class TestSettings:
    def test_defaults(self, fresh_settings):
        settings = get_settings()
        assert settings.default_jurisdiction == "Ontario"
        assert settings.gap_threshold_days == 7
        assert settings.default_retention_days == 60

    def test_environment_prefix(self, fresh_settings):
        fresh_settings.setenv("WORKBENCH_GAP_THRESHOLD_DAYS", "14")
        assert get_settings().gap_threshold_days == 14


class TestConfigureLogging:
    def test_explicit_level(self, fresh_settings, package_logger):
        configure_logging("debug")
        assert package_logger.level == logging.DEBUG

    def test_level_from_settings(self, fresh_settings, package_logger):
        fresh_settings.setenv("WORKBENCH_LOG_LEVEL", "WARNING")
        configure_logging()
        assert package_logger.level == logging.WARNING

    def test_debug_setting_forces_debug(self, fresh_settings, package_logger):
        fresh_settings.setenv("WORKBENCH_LOG_LEVEL", "WARNING")
        fresh_settings.setenv("WORKBENCH_DEBUG", "true")
        configure_logging()
        assert package_logger.level == logging.DEBUG
