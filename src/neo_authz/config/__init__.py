"""Configuration for neo-authz: settings, constants and logging."""

from .constants import (
    CacheTTL,
    DatabaseSchemas,
    DefaultRoles,
    ROLE_HIERARCHY_LEVELS,
    UNRANKED_ROLE_LEVEL,
)
from .settings import AuthzSettings, get_settings
from .logging_config import LoggingConfig, LogFormat, setup_logging

__all__ = [
    "CacheTTL",
    "DatabaseSchemas",
    "DefaultRoles",
    "ROLE_HIERARCHY_LEVELS",
    "UNRANKED_ROLE_LEVEL",
    "AuthzSettings",
    "get_settings",
    "LoggingConfig",
    "LogFormat",
    "setup_logging",
]
