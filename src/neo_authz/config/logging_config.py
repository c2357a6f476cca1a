"""Centralized logging configuration for neo-authz.

The library only ever logs through module loggers; applications call
``setup_logging()`` once at startup if they want this configuration.
"""

import logging
import logging.config
from enum import Enum
from typing import Any, Dict, Optional

from .settings import AuthzSettings, get_settings


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "asyncio",
        "asyncpg",
    ]

    @classmethod
    def build(cls, settings: Optional[AuthzSettings] = None) -> Dict[str, Any]:
        """Build a dictConfig mapping from settings."""
        settings = settings or get_settings()
        log_level = settings.log_level
        format_string = FORMAT_STRINGS[LogFormat(settings.log_format)]

        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": log_level,
                "handlers": ["console"],
            },
            "loggers": {
                "neo_authz": {
                    "level": log_level,
                },
            },
        }

        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }

        return logging_config

    @classmethod
    def configure(cls, settings: Optional[AuthzSettings] = None) -> None:
        """Configure logging based on settings."""
        logging_config = cls.build(settings)
        logging.config.dictConfig(logging_config)

        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={logging_config['root']['level']}")


def setup_logging(settings: Optional[AuthzSettings] = None) -> None:
    """Setup logging configuration from settings.

    This is the main entry point for configuring logging in an application.
    It should be called once at application startup.
    """
    LoggingConfig.configure(settings)
