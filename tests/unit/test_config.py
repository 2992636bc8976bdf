"""Tests for configuration management."""

import logging
import os
from unittest.mock import patch

import pytest

from cursor_pagination.config import Settings, configure_logging, get_settings


class TestSettings:
    """Test Settings class."""
    
    def test_default_values(self):
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        
        assert settings.log_level == "INFO"
        assert settings.log_format == "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        assert settings.cursor_temporal_fields == ["created_at"]
        assert settings.unique_sort_fields is False
    
    def test_environment_override(self):
        """Test that environment variables override defaults."""
        env_vars = {
            "LOG_LEVEL": "debug",
            "CURSOR_TEMPORAL_FIELDS": '["created_at", "updated_at"]',
            "UNIQUE_SORT_FIELDS": "true"
        }
        
        with patch.dict(os.environ, env_vars):
            settings = Settings(_env_file=None)
        
        assert settings.log_level == "DEBUG"
        assert settings.cursor_temporal_fields == ["created_at", "updated_at"]
        assert settings.unique_sort_fields is True
    
    def test_log_level_validation(self):
        """Test log level validation."""
        for level in ["DEBUG", "info", "Warning", "ERROR", "critical"]:
            assert Settings(log_level=level).log_level == level.upper()
        
        with pytest.raises(ValueError, match="Log level must be one of"):
            Settings(log_level="VERBOSE")
    
    def test_get_settings_returns_global_instance(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Test configure_logging."""
    
    def test_applies_level(self):
        root = logging.getLogger()
        original = root.level
        try:
            configure_logging(Settings(log_level="ERROR"))
            assert root.level == logging.ERROR
        finally:
            root.setLevel(original)
