"""Configuration settings for the hand checker front ends."""

import logging
import os
import sys


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key-change-in-production"
    JSON_AS_ASCII = False

    # Checker settings
    DEFAULT_LOCALE = os.environ.get("HAND_CHECKER_LOCALE", "en")
    MAX_PLAYERS = int(os.environ.get("HAND_CHECKER_MAX_PLAYERS", "10"))

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    # Console prompts stay readable unless asked otherwise
    CONSOLE_LOG_LEVEL = os.environ.get("HAND_CHECKER_CONSOLE_LOG_LEVEL", "WARNING")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    DEBUG = True
    DEFAULT_LOCALE = "en"
    MAX_PLAYERS = 4
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    TESTING = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


# Configuration mapping
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(config_name: str | None = None) -> type[Config]:
    """Get configuration class based on environment."""
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "default")

    return config.get(config_name, config["default"])


def setup_logging(level: str = "DEBUG") -> None:
    """Set up logging for a front end."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
