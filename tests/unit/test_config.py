"""Tests for configuration selection."""
from poker_showdown.config import (
    Config, DevelopmentConfig, ProductionConfig, TestingConfig, get_config
)


def test_get_config_by_name():
    """Test looking up configurations by name."""
    assert get_config("development") is DevelopmentConfig
    assert get_config("testing") is TestingConfig
    assert get_config("production") is ProductionConfig
    assert get_config("nonexistent") is Config


def test_get_config_from_environment(monkeypatch):
    """The environment picks the configuration when no name is given."""
    monkeypatch.setenv("POKER_SHOWDOWN_ENV", "testing")
    assert get_config() is TestingConfig
    monkeypatch.delenv("POKER_SHOWDOWN_ENV")
    assert get_config() is Config


def test_testing_config():
    """Testing runs strict and quiet."""
    assert TestingConfig.STRICT_PARSING is True
    assert TestingConfig.LOG_LEVEL == "WARNING"
    assert issubclass(TestingConfig, Config)
