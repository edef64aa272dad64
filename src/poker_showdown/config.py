"""Configuration settings for the showdown runner."""

import os


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


class Config:
    """Base configuration class."""

    # File settings
    POKER_FILE_PATH = os.environ.get("POKER_FILE_PATH", "poker.txt")
    OUTPUT_FILE_PATH = os.environ.get("OUTPUT_FILE_PATH", "csis.txt")

    # Logging settings
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Parsing settings
    STRICT_PARSING = _env_flag("STRICT_PARSING")


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(Config):
    """Testing configuration."""

    LOG_LEVEL = "WARNING"

    # Malformed input should fail tests loudly
    STRICT_PARSING = True


class ProductionConfig(Config):
    """Production configuration."""

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")


# Configuration mapping
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": Config,
}


def get_config(config_name: str | None = None) -> type[Config]:
    """Get configuration class based on environment."""
    if config_name is None:
        config_name = os.environ.get("POKER_SHOWDOWN_ENV", "default")

    return config.get(config_name, config["default"])
