"""Tests for configuration validation"""
import pytest

from nightlog import config
from nightlog.exceptions import ConfigurationError


class TestConfigValidation:
    """Test validate_config() against module settings"""

    def test_defaults_are_valid(self):
        config.validate_config()

    def test_default_entry_times(self):
        assert config.DEFAULT_BEDTIME == "22:30"
        assert config.DEFAULT_SLEEP_TIME == "23:00"
        assert config.DEFAULT_WAKE_TIME == "07:00"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setattr(config, "LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError) as exc_info:
            config.validate_config()

        assert exc_info.value.config_key == "LOG_LEVEL"

    def test_lowercase_log_level_accepted(self, monkeypatch):
        monkeypatch.setattr(config, "LOG_LEVEL", "debug")

        config.validate_config()

    def test_invalid_default_time(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_WAKE_TIME", "7am")

        with pytest.raises(ConfigurationError) as exc_info:
            config.validate_config()

        assert exc_info.value.config_key == "NIGHTLOG_DEFAULT_WAKE_TIME"
        assert isinstance(exc_info.value.cause, ValueError)

    def test_invalid_period(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_PERIOD", "year")

        with pytest.raises(ConfigurationError, match="week"):
            config.validate_config()
