"""
Unit tests for RegistryConfig.
"""

import logging

import pytest

from httpstatus import Language, RegistryConfig, UnsupportedLocaleError


class TestRegistryConfig:
    """Tests for RegistryConfig."""

    def test_defaults(self):
        """Test default values."""
        config = RegistryConfig()
        assert config.language == "en"
        assert config.log_level == "WARNING"
        assert config.resolved_language is Language.EN

    def test_from_env(self, monkeypatch):
        """Test reading environment variables."""
        monkeypatch.setenv("HTTPSTATUS_LANGUAGE", "fr")
        monkeypatch.setenv("HTTPSTATUS_LOG_LEVEL", "DEBUG")

        config = RegistryConfig.from_env()

        assert config.resolved_language is Language.FR
        assert config.log_level == "DEBUG"

    def test_from_env_defaults(self, monkeypatch):
        """Test that missing variables fall back to defaults."""
        monkeypatch.delenv("HTTPSTATUS_LANGUAGE", raising=False)
        monkeypatch.delenv("HTTPSTATUS_LOG_LEVEL", raising=False)

        assert RegistryConfig.from_env() == RegistryConfig()

    def test_validate_language(self):
        """Test that unknown languages fail validation."""
        with pytest.raises(UnsupportedLocaleError):
            RegistryConfig(language="xx").validate()

    def test_validate_log_level(self):
        """Test that unknown log levels fail validation."""
        with pytest.raises(ValueError, match="Invalid log_level"):
            RegistryConfig(log_level="LOUD").validate()

    def test_validate_accepts_lowercase_level(self):
        """Test that log levels are case-insensitive."""
        RegistryConfig(log_level="debug").validate()

    def test_setup_logging(self):
        """Test that the package logger gets the configured level."""
        logger = logging.getLogger("httpstatus")
        previous = logger.level
        try:
            RegistryConfig(log_level="DEBUG").setup_logging()
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)
